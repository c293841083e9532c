"""Tests for AMD GPU helpers (llmcheck.hardware._amd)."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from llmcheck.hardware import _amd
from llmcheck.hardware._amd import amd_architecture, describe_amd_gpu, lookup_pci_device
from llmcheck.hardware._types import GpuInfo


class TestArchitecture:
    @pytest.mark.parametrize(
        "name, arch",
        [
            ("Radeon RX 9070 XT", "RDNA 4"),
            ("Radeon RX 7900 XTX", "RDNA 3"),
            ("Radeon RX 6700 XT", "RDNA 2"),
            ("Radeon RX 5700 XT", "RDNA"),
            ("Instinct MI300X", "CDNA 3"),
            ("Instinct MI250X", "CDNA 2"),
            ("Radeon RX Vega 64", "GCN 5"),
            ("Radeon RX 580", "GCN 4"),
            ("Radeon HD 7970", "GCN"),
        ],
    )
    def test_inferred_from_name(self, name: str, arch: str) -> None:
        assert amd_architecture(name) == arch


class TestPciLookup:
    def test_known_device(self) -> None:
        assert lookup_pci_device("744c") == ("Radeon RX 7900 XTX", 24.0)

    def test_accepts_prefix_and_case(self) -> None:
        assert lookup_pci_device("0x73DF") == ("Radeon RX 6700 XT", 12.0)

    def test_unknown_device(self) -> None:
        assert lookup_pci_device("ffff") is None


class TestSysfsVram:
    def _make_card(self, root, name: str, vendor: str, vram_bytes: int | None) -> None:
        device = root / name / "device"
        device.mkdir(parents=True)
        (device / "vendor").write_text(vendor + "\n")
        if vram_bytes is not None:
            (device / "mem_info_vram_total").write_text(f"{vram_bytes}\n")

    def test_reads_largest_amd_card(self, tmp_path) -> None:
        self._make_card(tmp_path, "card0", "0x8086", None)
        self._make_card(tmp_path, "card1", "0x1002", 16 * 1024**3)
        (tmp_path / "card1-DP-1").mkdir()
        with patch.object(_amd, "_SYSFS_DRM", str(tmp_path)):
            assert _amd.sysfs_vram_gb() == 16.0

    def test_missing_sysfs(self, tmp_path) -> None:
        with patch.object(_amd, "_SYSFS_DRM", str(tmp_path / "nope")):
            assert _amd.sysfs_vram_gb() == 0.0


class TestDescribe:
    def test_fills_architecture_and_precision(self) -> None:
        gpu = GpuInfo(model="Radeon RX 7900 XTX", vendor="AMD", vram_gb=24.0, is_dedicated=True)
        described = describe_amd_gpu(gpu)
        assert described.architecture == "RDNA 3"
        assert described.supports_fp16 and described.supports_int8
        assert described.vram_gb == 24.0
        # Input is left untouched
        assert gpu.architecture == "Unknown"

    def test_vram_from_sysfs_when_unknown(self) -> None:
        gpu = GpuInfo(model="Radeon RX 6800", vendor="AMD", is_dedicated=True)
        with patch.object(_amd, "sysfs_vram_gb", return_value=16.0):
            assert describe_amd_gpu(gpu).vram_gb == 16.0

    def test_gcn4_lacks_fast_precision(self) -> None:
        gpu = GpuInfo(model="Radeon RX 580", vendor="AMD", vram_gb=8.0, is_dedicated=True)
        described = describe_amd_gpu(gpu)
        assert described.supports_fp16 is False
        assert described.supports_int8 is False
