"""Tests for llmcheck.hardware._unified -- the parallel hardware detector."""

from __future__ import annotations

import threading
from unittest.mock import patch

from llmcheck.hardware._base import ProbeAdapter
from llmcheck.hardware._fallback import FallbackProbe
from llmcheck.hardware._types import (
    CpuInfo,
    FrameworkInfo,
    GpuInfo,
    MemoryInfo,
    StorageInfo,
)
from llmcheck.hardware._unified import HardwareDetector, detect_hardware


class _FakeProbe(ProbeAdapter):
    """Concrete ProbeAdapter returning canned facts, optionally failing one family."""

    os_tag = "linux"

    def __init__(self, fail: str = "") -> None:
        super().__init__()
        self.fail = fail
        self.calls: dict[str, int] = {}
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return "fake"

    def _record(self, family: str) -> None:
        with self._lock:
            self.calls[family] = self.calls.get(family, 0) + 1
        if family == self.fail:
            raise RuntimeError(f"{family} probe exploded")

    def probe_cpu(self) -> CpuInfo:
        self._record("cpu")
        return CpuInfo(model="Fake CPU", physical_cores=8, logical_threads=16)

    def probe_memory(self) -> MemoryInfo:
        self._record("memory")
        return MemoryInfo(total_gb=32.0)

    def probe_gpu(self) -> GpuInfo:
        self._record("gpu")
        return GpuInfo(model="Fake GPU", vendor="NVIDIA", vram_gb=12.0, is_dedicated=True)

    def probe_storage(self) -> StorageInfo:
        self._record("storage")
        return StorageInfo(storage_type="NVMe")

    def probe_frameworks(self) -> FrameworkInfo:
        self._record("frameworks")
        return FrameworkInfo(cuda_available=True)


class TestHardwareDetector:
    def test_assembles_snapshot(self) -> None:
        snapshot = HardwareDetector(adapter=_FakeProbe()).detect_all()
        assert snapshot.cpu.model == "Fake CPU"
        assert snapshot.memory.total_gb == 32.0
        assert snapshot.gpu.vram_gb == 12.0
        assert snapshot.storage.storage_type == "NVMe"
        assert snapshot.frameworks.cuda_available is True
        assert snapshot.os_tag == "linux"
        assert snapshot.timestamp > 0

    def test_each_family_probed_once(self) -> None:
        probe = _FakeProbe()
        HardwareDetector(adapter=probe).detect_all()
        assert probe.calls == {"cpu": 1, "memory": 1, "gpu": 1, "storage": 1, "frameworks": 1}

    def test_failed_family_gets_defaults(self) -> None:
        snapshot = HardwareDetector(adapter=_FakeProbe(fail="gpu")).detect_all()
        assert snapshot.gpu == GpuInfo()
        assert snapshot.cpu.model == "Fake CPU"
        assert snapshot.memory.total_gb == 32.0

    def test_every_family_failing_still_returns(self) -> None:
        class _Broken(_FakeProbe):
            def _record(self, family: str) -> None:
                raise OSError("no hardware access")

        snapshot = HardwareDetector(adapter=_Broken()).detect_all()
        assert snapshot.cpu == CpuInfo()
        assert snapshot.storage == StorageInfo()
        assert snapshot.frameworks == FrameworkInfo()

    def test_snapshot_to_dict(self) -> None:
        data = HardwareDetector(adapter=_FakeProbe()).detect_all().to_dict()
        assert data["gpu"]["vendor"] == "NVIDIA"
        assert data["os_tag"] == "linux"


class TestDetectHardware:
    def test_uses_host_adapter(self) -> None:
        with patch(
            "llmcheck.hardware._unified.get_probe_adapter", return_value=FallbackProbe()
        ) as factory:
            snapshot = detect_hardware(timeout=1.0)
        factory.assert_called_once_with(timeout=1.0)
        assert snapshot.gpu == GpuInfo()
        assert snapshot.memory == MemoryInfo()
        assert snapshot.cpu.logical_threads >= 0


# ---------------------------------------------------------------------------
# Concurrency
# ---------------------------------------------------------------------------


class _RendezvousProbe(_FakeProbe):
    """Every family blocks until all five are running at the same time."""

    def __init__(self) -> None:
        super().__init__()
        self.barrier = threading.Barrier(5, timeout=5.0)

    def _record(self, family: str) -> None:
        super()._record(family)
        self.barrier.wait()


class TestConcurrency:
    def test_all_families_run_at_once(self) -> None:
        probe = _RendezvousProbe()
        snapshot = HardwareDetector(adapter=probe).detect_all()
        # a serial pass would break the barrier and fall back to defaults
        assert not probe.barrier.broken
        assert snapshot.cpu.model == "Fake CPU"
        assert snapshot.memory.total_gb == 32.0
        assert snapshot.gpu.vram_gb == 12.0
        assert snapshot.storage.storage_type == "NVMe"
        assert snapshot.frameworks.cuda_available is True
