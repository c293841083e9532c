"""Hardware detection subsystem for llmcheck.

Probe adapters are selected once per host (Windows, Linux, macOS or a
minimal fallback) and driven in parallel by :class:`HardwareDetector`.
"""

from __future__ import annotations

from ._base import PROBE_TIMEOUT, ProbeAdapter, get_probe_adapter, run_command
from ._types import (
    CpuInfo,
    FrameworkInfo,
    GpuInfo,
    HardwareSnapshot,
    MemoryInfo,
    PartialFacts,
    StorageInfo,
)
from ._unified import HardwareDetector, detect_hardware

__all__ = [
    "PROBE_TIMEOUT",
    "CpuInfo",
    "FrameworkInfo",
    "GpuInfo",
    "HardwareDetector",
    "HardwareSnapshot",
    "MemoryInfo",
    "PartialFacts",
    "ProbeAdapter",
    "StorageInfo",
    "detect_hardware",
    "get_probe_adapter",
    "run_command",
]
