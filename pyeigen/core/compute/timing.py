"""
Execution timing utilities.

Times the stages of a decomposition (classification, reduction,
iteration, back-substitution). Handles CUDA synchronization so that
GPU timings measure finished kernels rather than launches.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Accumulating stage timer with optional CUDA synchronization.

    Usage:
        timer = Timer()
        timer.start()

        with timer.section('hessenberg'):
            low, high = hessenberg(H, V)

        with timer.section('schur'):
            status, sweeps, norm = schur(H, V, d, e, low, high)

        timer.stop()
        timer.result()
        # {'total_seconds': 0.05, 'hessenberg': 0.01, 'schur': 0.04}
    """

    def __init__(self, sync_cuda: bool = False):
        """
        Args:
            sync_cuda: If True, synchronize CUDA before timing measurements.
        """
        self._sync_cuda = sync_cuda
        self._sections: dict[str, float] = {}
        self._start_time: float | None = None
        self._total: float | None = None

    def _sync(self) -> None:
        if self._sync_cuda:
            import torch
            if torch.cuda.is_available():
                torch.cuda.synchronize()

    def start(self) -> None:
        """Start the overall timer."""
        self._sync()
        self._start_time = time.perf_counter()

    def stop(self) -> None:
        """Stop the overall timer."""
        self._sync()
        if self._start_time is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = time.perf_counter() - self._start_time

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """
        Time a named stage. Repeated sections with the same name accumulate.
        """
        self._sync()
        start = time.perf_counter()
        try:
            yield
        finally:
            self._sync()
            elapsed = time.perf_counter() - start
            self._sections[name] = self._sections.get(name, 0.0) + elapsed

    @property
    def sections(self) -> tuple[str, ...]:
        """Names of the stages timed so far, in first-seen order."""
        return tuple(self._sections)

    def result(self) -> dict[str, float]:
        """
        Get timing results.

        Returns:
            Dictionary with 'total_seconds' and all section timings

        Raises:
            RuntimeError: If called before stop()
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")

        result = {'total_seconds': self._total}
        result.update(self._sections)
        return result


@contextmanager
def timed(sync_cuda: bool = False) -> Iterator[Timer]:
    """
    Context manager for one-off timing.

    Usage:
        with timed() as timer:
            solution = eig(A)
        print(f"Took {timer.result()['total_seconds']:.3f}s")
    """
    timer = Timer(sync_cuda=sync_cuda)
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
