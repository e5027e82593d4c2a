"""
Generic result container for all PyEigen computations.

The Result class is the envelope every backend returns. Solvers wrap it
in a domain-specific solution object that adds convenience accessors.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (path, converged, iterations)
    - timing is optional (don't burden unit tests)
    - provenance records library versions for reproducibility
    - Immutable (frozen=True); a decomposition never changes after solve
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

import numpy as np

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata attached to every result."""
    from pyeigen import __version__

    return {
        'pyeigen_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for eigen-decompositions.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (eigenvalues, eigenvectors, status)
        info: Structured metadata (method, path, convergence)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Library versions used to produce the result

    Examples:
        >>> Result(
        ...     params=EigenParams(...),
        ...     info={'method': 'tred2+tql2', 'path': 'symmetric',
        ...           'converged': True, 'iterations': 7},
        ...     timing={'total_seconds': 0.01, 'tql': 0.006},
        ...     backend_name='cpu_eigen'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
