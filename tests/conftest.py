"""Shared snapshot factories for llmcheck tests."""

from __future__ import annotations

import pytest

from llmcheck.hardware import (
    CpuInfo,
    FrameworkInfo,
    GpuInfo,
    HardwareSnapshot,
    MemoryInfo,
    StorageInfo,
)


def make_snapshot(
    cpu: dict | None = None,
    memory: dict | None = None,
    gpu: dict | None = None,
    storage: dict | None = None,
    frameworks: dict | None = None,
    os_tag: str = "linux",
) -> HardwareSnapshot:
    return HardwareSnapshot(
        cpu=CpuInfo(**(cpu or {})),
        memory=MemoryInfo(**(memory or {})),
        gpu=GpuInfo(**(gpu or {})),
        storage=StorageInfo(**(storage or {})),
        frameworks=FrameworkInfo(**(frameworks or {})),
        os_tag=os_tag,
        timestamp=1700000000.0,
    )


def gaming_rig() -> HardwareSnapshot:
    """8c/16t AVX2 desktop, 32 GB DDR5-5600, 12 GB Ampere GPU, NVMe, CUDA 12.1."""
    return make_snapshot(
        cpu=dict(
            model="AMD Ryzen 7 7700X",
            physical_cores=8,
            logical_threads=16,
            base_clock_ghz=3.5,
            architecture="x86_64",
            has_avx2=True,
        ),
        memory=dict(total_gb=32.0, available_gb=24.0, memory_type="DDR5", speed_mhz=5600),
        gpu=dict(
            model="NVIDIA GeForce RTX 3060",
            vendor="NVIDIA",
            vram_gb=12.0,
            is_dedicated=True,
            compute_capability="8.6",
            architecture="Ampere",
            supports_fp16=True,
            supports_int8=True,
        ),
        storage=dict(
            storage_type="NVMe", total_gb=1000.0, available_gb=500.0, read_speed_mbps=3500
        ),
        frameworks=dict(cuda_available=True, cuda_version="12.1"),
    )


def office_laptop() -> HardwareSnapshot:
    """Integrated graphics, 8 GB RAM, spinning disk."""
    return make_snapshot(
        cpu=dict(
            model="Intel Core i5-7200U",
            physical_cores=4,
            logical_threads=4,
            base_clock_ghz=2.5,
            architecture="x86_64",
        ),
        memory=dict(total_gb=8.0, available_gb=3.0),
        gpu=dict(model="Intel HD Graphics 620", vendor="Intel"),
        storage=dict(storage_type="HDD", total_gb=500.0, available_gb=100.0),
    )


@pytest.fixture
def rig() -> HardwareSnapshot:
    return gaming_rig()


@pytest.fixture
def laptop() -> HardwareSnapshot:
    return office_laptop()


@pytest.fixture
def isolated_home(monkeypatch, tmp_path):
    """Point the config dir at a temp directory and clear env overrides."""
    monkeypatch.setenv("LLMCHECK_HOME", str(tmp_path))
    monkeypatch.delenv("LLMCHECK_PROBE_TIMEOUT", raising=False)
    monkeypatch.delenv("LLMCHECK_OFFLINE", raising=False)
    return tmp_path
