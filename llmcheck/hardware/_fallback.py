"""Minimal probe for unrecognised platforms: runtime environment facts only."""

from __future__ import annotations

import logging
import os
import platform

from ._base import ProbeAdapter
from ._types import UNKNOWN, CpuInfo, FrameworkInfo, GpuInfo, MemoryInfo, StorageInfo

logger = logging.getLogger(__name__)


class FallbackProbe(ProbeAdapter):
    @property
    def name(self) -> str:
        return "fallback"

    def probe_cpu(self) -> CpuInfo:
        # the runtime only knows logical CPUs; physical cores stay unknown (0)
        threads = os.cpu_count() or 0
        logger.info("Fallback probe: %d logical CPUs, arch %s", threads, platform.machine())
        return CpuInfo(
            model=platform.processor() or UNKNOWN,
            logical_threads=threads,
            architecture=platform.machine() or UNKNOWN,
        )

    def probe_memory(self) -> MemoryInfo:
        return MemoryInfo()

    def probe_gpu(self) -> GpuInfo:
        return GpuInfo()

    def probe_storage(self) -> StorageInfo:
        return StorageInfo()

    def probe_frameworks(self) -> FrameworkInfo:
        return FrameworkInfo()
