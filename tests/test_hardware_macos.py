"""Tests for the macOS probe adapter (llmcheck.hardware._macos)."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from llmcheck.hardware._macos import MacOSProbe, _parse_vram

_SYSCTL_APPLE = {
    "machdep.cpu.brand_string": "Apple M2 Pro",
    "hw.physicalcpu": "12",
    "hw.logicalcpu": "12",
    "hw.memsize": str(32 * 1024**3),
}

_SYSCTL_INTEL = {
    "machdep.cpu.brand_string": "Intel(R) Core(TM) i9-9980HK CPU @ 2.40GHz",
    "hw.physicalcpu": "8",
    "hw.logicalcpu": "16",
    "hw.cpufrequency": "2400000000",
    "machdep.cpu.features": "FPU VME SSE SSE2 AVX1.0",
    "machdep.cpu.leaf7_features": "SMEP BMI1 AVX2 BMI2",
    "hw.memsize": str(16 * 1024**3),
}

_DISPLAYS_APPLE = """\
Graphics/Displays:

    Apple M2 Pro:

      Chipset Model: Apple M2 Pro
      Type: GPU
      Bus: Built-In
      Total Number of Cores: 19
"""

_DISPLAYS_INTEL_MAC = """\
Graphics/Displays:

    Intel UHD Graphics 630:

      Chipset Model: Intel UHD Graphics 630
      VRAM (Dynamic, Max): 1536 MB

    AMD Radeon Pro 5500M:

      Chipset Model: AMD Radeon Pro 5500M
      VRAM (Total): 8 GB
"""

_MEMORY_PROFILE = """\
Memory:

      Memory: 32 GB
      Type: LPDDR5
      Manufacturer: Hynix
"""

_DISKUTIL_APPLE = """\
   Device Identifier:         disk3s1s1
   Device / Media Name:       APPLE SSD AP1024Z
   Protocol:                  Apple Fabric
   Solid State:               Yes
"""

_DISKUTIL_SATA = """\
   Device Identifier:         disk0s2
   Device / Media Name:       APPLE HDD ST1000LM024
   Protocol:                  SATA
   Solid State:               No
"""


def _runner(sysctl: dict[str, str], outputs: dict[str, str] | None = None):
    outputs = outputs or {}

    def run(args):
        if args[0] == "sysctl":
            return sysctl.get(args[-1])
        if args[0] == "system_profiler":
            return outputs.get(args[1])
        return outputs.get(args[0])

    return run


@pytest.fixture
def probe() -> MacOSProbe:
    return MacOSProbe()


class TestCpu:
    def test_apple_silicon_uses_psutil_frequency(self, probe: MacOSProbe) -> None:
        with patch.object(probe, "run", side_effect=_runner(_SYSCTL_APPLE)), patch(
            "psutil.cpu_freq", return_value=MagicMock(max=3504.0, current=3504.0)
        ):
            cpu = probe.probe_cpu()
        assert cpu.model == "Apple M2 Pro"
        assert cpu.physical_cores == 12
        assert cpu.base_clock_ghz == 3.5
        assert cpu.has_avx2 is False

    def test_intel_mac_flags(self, probe: MacOSProbe) -> None:
        with patch.object(probe, "run", side_effect=_runner(_SYSCTL_INTEL)):
            cpu = probe.probe_cpu()
        assert cpu.physical_cores == 8
        assert cpu.logical_threads == 16
        assert cpu.base_clock_ghz == 2.4
        assert cpu.has_avx2 is True
        assert cpu.has_avx512 is False


class TestMemory:
    def test_memsize_and_profile(self, probe: MacOSProbe) -> None:
        vm = MagicMock(total=32 * 1024**3, available=20 * 1024**3)
        run = _runner(_SYSCTL_APPLE, {"SPMemoryDataType": _MEMORY_PROFILE})
        with patch.object(probe, "run", side_effect=run), patch(
            "psutil.virtual_memory", return_value=vm
        ):
            memory = probe.probe_memory()
        assert memory.total_gb == 32.0
        assert memory.available_gb == 20.0
        assert memory.memory_type == "LPDDR5"


class TestGpu:
    def test_apple_unified_memory_minus_reserve(self, probe: MacOSProbe) -> None:
        run = _runner(_SYSCTL_APPLE, {"SPDisplaysDataType": _DISPLAYS_APPLE})
        with patch.object(probe, "run", side_effect=run):
            gpu = probe.probe_gpu()
        assert gpu.vendor == "Apple"
        assert gpu.vram_gb == 28.0
        assert gpu.is_dedicated is True
        assert gpu.supports_fp16 and gpu.supports_int8
        assert gpu.architecture == "Apple Silicon"

    def test_discrete_radeon_preferred_over_intel(self, probe: MacOSProbe) -> None:
        run = _runner(_SYSCTL_INTEL, {"SPDisplaysDataType": _DISPLAYS_INTEL_MAC})
        with patch.object(probe, "run", side_effect=run):
            gpus = probe.list_gpus()
            gpu = probe.probe_gpu()
        assert [g.vram_gb for g in gpus] == [1.5, 8.0]
        assert gpu.model == "AMD Radeon Pro 5500M"
        assert gpu.vram_gb == 8.0

    def test_parse_vram(self) -> None:
        assert _parse_vram("8 GB") == 8.0
        assert _parse_vram("1536 MB") == 1.5
        assert _parse_vram("") == 0.0


class TestStorage:
    @pytest.mark.parametrize(
        "diskutil, expected", [(_DISKUTIL_APPLE, "NVMe"), (_DISKUTIL_SATA, "HDD")]
    )
    def test_storage_type(self, probe: MacOSProbe, diskutil: str, expected: str) -> None:
        usage = MagicMock(total=1000 * 1024**3, free=250 * 1024**3)
        with patch.object(probe, "run", side_effect=_runner({}, {"diskutil": diskutil})), patch(
            "psutil.disk_usage", return_value=usage
        ):
            storage = probe.probe_storage()
        assert storage.storage_type == expected
        assert storage.available_gb == 250.0
