"""
Domain models and value objects.

Contains the Matrix value type and its serialized snapshot.
"""

from densematrix.core.domain.matrix import Matrix
from densematrix.core.domain.snapshot import MatrixSnapshot

__all__ = [
    "Matrix",
    "MatrixSnapshot",
]
