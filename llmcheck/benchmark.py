"""Throughput estimates derived from detected hardware figures.

No synthetic workload is run. Scores are derived from the detected clock
speed, thread count and memory type, then compared against a reference
desktop (Ryzen 7 / DDR5-5600 / 16 threads). Every figure here is an
estimate for orientation only.
"""

from __future__ import annotations

import logging
import re
import time
from dataclasses import asdict, dataclass, field
from typing import Any

from .hardware import CpuInfo, HardwareSnapshot, MemoryInfo

logger = logging.getLogger(__name__)

REFERENCE_CPU_SINGLE = 1800.0
REFERENCE_CPU_MULTI = 14000.0
REFERENCE_MEMORY_BW = 44.8

DEFAULT_DDR5_MTS = 5600
DEFAULT_MTS = 3200

# Substring -> IPC multiplier, first match wins.
_ARCH_MULTIPLIERS: list[tuple[tuple[str, ...], float]] = [
    (("13th gen", "14th gen"), 1.3),
    (("12th gen",), 1.25),
    (("7000", "ryzen 7"), 1.3),
    (("5000", "ryzen 5"), 1.15),
]

# (model size, multiplier, floor tokens/s)
_MODEL_SIZES = [
    ("7B", 1.5, 1.0),
    ("13B", 1.0, 0.5),
    ("34B", 0.5, 0.3),
    ("70B", 0.25, 0.1),
]

_SPEED_IN_TYPE = re.compile(r"(\d{4,5})")


@dataclass(frozen=True)
class BenchmarkResult:
    cpu_single_core_score: float
    cpu_multi_core_score: float
    memory_bandwidth_gbps: float
    tokens_per_second: dict[str, float] = field(default_factory=dict)
    comparison_to_reference: float = 0.0
    duration_seconds: float = 0.0
    timestamp: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def architecture_multiplier(model: str) -> float:
    lower = model.lower()
    for needles, multiplier in _ARCH_MULTIPLIERS:
        if any(n in lower for n in needles):
            return multiplier
    return 1.0


def cpu_single_score(cpu: CpuInfo) -> float:
    return float(round(cpu.base_clock_ghz * 1000 * architecture_multiplier(cpu.model)))


def cpu_multi_score(cpu: CpuInfo) -> float:
    threads = cpu.logical_threads
    scaling = threads if threads <= 16 else 16 + (threads - 16) * 0.85
    return float(round(cpu_single_score(cpu) * scaling / 2))


def memory_speed_mts(memory: MemoryInfo) -> int:
    """Transfer rate from the probe, the type string, or a per-generation default."""
    if memory.speed_mhz > 0:
        return memory.speed_mhz
    mem_type = memory.memory_type.upper()
    if "DDR5" in mem_type or "DDR4" in mem_type:
        match = _SPEED_IN_TYPE.search(mem_type)
        if match:
            return int(match.group(1))
    return DEFAULT_DDR5_MTS if "DDR5" in mem_type else DEFAULT_MTS


def memory_bandwidth_gbps(memory: MemoryInfo) -> float:
    # 64-bit bus, dual channel
    return round(memory_speed_mts(memory) * 8 * 2 / 1000, 1)


def estimate_tokens_per_second(
    single: float, multi: float, bandwidth: float, snapshot: HardwareSnapshot
) -> dict[str, float]:
    cpu_factor = (single + multi) / 2
    gpu_factor = 1.0
    if snapshot.gpu.is_dedicated and snapshot.gpu.vram_gb >= 8:
        gpu_factor = min(2.0 + snapshot.gpu.vram_gb / 8, 10.0)
    base = cpu_factor * 0.3 + bandwidth * 0.3 + gpu_factor * cpu_factor * 0.4
    return {
        size: max(round(base * multiplier, 1), floor)
        for size, multiplier, floor in _MODEL_SIZES
    }


def comparison_score(single: float, multi: float, bandwidth: float) -> float:
    """Weighted percentage of the reference system; multi-core dominates."""
    ratio = (
        single / REFERENCE_CPU_SINGLE * 0.2
        + multi / REFERENCE_CPU_MULTI * 0.5
        + bandwidth / REFERENCE_MEMORY_BW * 0.3
    )
    return round(ratio * 100, 1)


def run_benchmark(snapshot: HardwareSnapshot) -> BenchmarkResult:
    """Estimate performance figures for an already detected system."""
    started = time.monotonic()
    single = cpu_single_score(snapshot.cpu)
    multi = cpu_multi_score(snapshot.cpu)
    bandwidth = memory_bandwidth_gbps(snapshot.memory)
    result = BenchmarkResult(
        cpu_single_core_score=single,
        cpu_multi_core_score=multi,
        memory_bandwidth_gbps=bandwidth,
        tokens_per_second=estimate_tokens_per_second(single, multi, bandwidth, snapshot),
        comparison_to_reference=comparison_score(single, multi, bandwidth),
        duration_seconds=round(time.monotonic() - started, 3),
        timestamp=time.time(),
    )
    logger.info(
        "Benchmark estimate: single=%.0f multi=%.0f bandwidth=%.1fGB/s (%.1f%% of reference)",
        single,
        multi,
        bandwidth,
        result.comparison_to_reference,
    )
    return result
