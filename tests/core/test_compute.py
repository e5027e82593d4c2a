"""
Tests for compute utilities: Timer, tolerance tiers, device selection.
"""

import pytest

from pyeigen.core.compute import (
    DeviceInfo,
    Timer,
    timed,
    select_device,
    select_tolerance,
)
from pyeigen.core.compute.tolerances import (
    CPU_FP64,
    CPU_FP64_ILL_CONDITIONED,
    GPU_FP32,
    GPU_FP64,
)


class TestTimer:

    def test_sections_recorded(self):
        timer = Timer()
        timer.start()
        with timer.section('hessenberg'):
            pass
        with timer.section('schur'):
            pass
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'hessenberg', 'schur'}
        assert timer.sections == ('hessenberg', 'schur')
        assert result['total_seconds'] >= 0.0

    def test_repeated_section_accumulates(self):
        timer = Timer()
        timer.start()
        with timer.section('tql'):
            pass
        with timer.section('tql'):
            pass
        timer.stop()
        assert timer.sections == ('tql',)

    def test_result_before_stop_raises(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError):
            timer.result()

    def test_stop_before_start_raises(self):
        with pytest.raises(RuntimeError):
            Timer().stop()

    def test_timed_context(self):
        with timed() as timer:
            pass
        assert 'total_seconds' in timer.result()


class TestSelectTolerance:

    def test_cpu(self):
        assert select_tolerance('cpu_eigen') is CPU_FP64

    def test_cpu_ill_conditioned(self):
        assert select_tolerance('cpu_eigen', is_ill_conditioned=True) is CPU_FP64_ILL_CONDITIONED

    def test_gpu_fp64(self):
        assert select_tolerance('gpu_eigen_fp64') is GPU_FP64

    def test_gpu_fp32(self):
        assert select_tolerance('gpu_eigen_fp32') is GPU_FP32


class TestSelectDevice:

    def test_cpu_preference(self):
        device = select_device('cpu')
        assert device.device_type == 'cpu'
        assert not device.is_gpu
        assert device.supports_fp64
        assert str(device).startswith('CPU')

    def test_auto_returns_device(self):
        assert select_device('auto').device_type in ('cpu', 'cuda', 'mps')

    def test_cuda_supports_fp64(self):
        device = DeviceInfo('cuda', 0, 'Test GPU', 8 * 1024**3)
        assert device.is_gpu
        assert device.supports_fp64

    def test_mps_has_no_fp64(self):
        device = DeviceInfo('mps', 0, 'Apple Silicon GPU (MPS)', None)
        assert device.is_gpu
        assert not device.supports_fp64
