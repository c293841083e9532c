"""Shared dataclasses for hardware detection.

Every field carries a zero or ``"Unknown"`` default so a snapshot assembled
from a partially failed detection pass can be consumed without null checks.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class CpuInfo:
    model: str = UNKNOWN
    physical_cores: int = 0
    logical_threads: int = 0
    base_clock_ghz: float = 0.0
    architecture: str = UNKNOWN  # "x86_64", "arm64"
    has_avx2: bool = False
    has_avx512: bool = False


@dataclass(frozen=True)
class MemoryInfo:
    total_gb: float = 0.0
    available_gb: float = 0.0
    memory_type: str = UNKNOWN  # "DDR4", "DDR5", "LPDDR5", ...
    speed_mhz: int = 0


@dataclass(frozen=True)
class GpuInfo:
    model: str = UNKNOWN
    vendor: str = UNKNOWN  # "NVIDIA", "AMD", "Intel", "Apple"
    vram_gb: float = 0.0
    is_dedicated: bool = False
    compute_capability: str = UNKNOWN
    architecture: str = UNKNOWN
    supports_fp16: bool = False
    supports_int8: bool = False


@dataclass(frozen=True)
class StorageInfo:
    storage_type: str = UNKNOWN  # "NVMe", "SSD", "HDD"
    total_gb: float = 0.0
    available_gb: float = 0.0
    read_speed_mbps: int = 0
    write_speed_mbps: int = 0


@dataclass(frozen=True)
class FrameworkInfo:
    cuda_available: bool = False
    cuda_version: str = ""
    rocm_available: bool = False
    rocm_version: str = ""
    metal_available: bool = False
    directml_available: bool = False
    openvino_available: bool = False

    @property
    def detected(self) -> list[str]:
        """Names of the detected frameworks, with versions where known."""
        names: list[str] = []
        if self.cuda_available:
            names.append(f"CUDA {self.cuda_version}".strip())
        if self.rocm_available:
            names.append(f"ROCm {self.rocm_version}".strip())
        if self.metal_available:
            names.append("Metal")
        if self.directml_available:
            names.append("DirectML")
        if self.openvino_available:
            names.append("OpenVINO")
        return names


@dataclass(frozen=True)
class PartialFacts:
    """What a single probe adapter could learn about the host."""

    cpu: CpuInfo = field(default_factory=CpuInfo)
    memory: MemoryInfo = field(default_factory=MemoryInfo)
    gpu: GpuInfo = field(default_factory=GpuInfo)
    storage: StorageInfo = field(default_factory=StorageInfo)
    frameworks: FrameworkInfo = field(default_factory=FrameworkInfo)


@dataclass(frozen=True)
class HardwareSnapshot:
    cpu: CpuInfo = field(default_factory=CpuInfo)
    memory: MemoryInfo = field(default_factory=MemoryInfo)
    gpu: GpuInfo = field(default_factory=GpuInfo)
    storage: StorageInfo = field(default_factory=StorageInfo)
    frameworks: FrameworkInfo = field(default_factory=FrameworkInfo)
    os_tag: str = UNKNOWN  # "windows", "linux", "macos"
    timestamp: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
