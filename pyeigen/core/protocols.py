"""
Core protocols for PyEigen.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object with the right shape can act as a backend, including
test doubles.
"""

from typing import Protocol, TypeVar, runtime_checkable

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes a validated design and produces a Result envelope
    around a parameter payload. The backend handles all hardware-specific
    computation (CPU/GPU, precision).

    Backends are stateless between calls: working buffers are allocated
    inside solve() and dropped when it returns.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{domain}'
        Examples: 'cpu_eigen', 'gpu_eigen_fp64'
        """
        ...

    def solve(self, design: D, **kwargs) -> 'Result[P]':
        """
        Execute the decomposition.

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            ValidationError: If design is invalid for this backend
        """
        ...
