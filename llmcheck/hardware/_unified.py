"""Unified hardware detector: runs every probe family in parallel."""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from ._base import PROBE_TIMEOUT, ProbeAdapter, get_probe_adapter
from ._types import (
    CpuInfo,
    FrameworkInfo,
    GpuInfo,
    HardwareSnapshot,
    MemoryInfo,
    StorageInfo,
)

logger = logging.getLogger(__name__)


class HardwareDetector:
    """Assemble a :class:`HardwareSnapshot` from one probe adapter.

    Each probe family is attempted exactly once per :meth:`detect_all`
    call. A family that raises is logged and replaced by its default, so
    the call itself never fails.
    """

    def __init__(
        self,
        adapter: ProbeAdapter | None = None,
        timeout: float = PROBE_TIMEOUT,
    ) -> None:
        self.adapter = adapter or get_probe_adapter(timeout=timeout)

    def detect_all(self) -> HardwareSnapshot:
        started = time.monotonic()
        adapter = self.adapter
        families: dict[str, tuple[Callable[[], Any], Any]] = {
            "cpu": (adapter.probe_cpu, CpuInfo()),
            "memory": (adapter.probe_memory, MemoryInfo()),
            "gpu": (adapter.probe_gpu, GpuInfo()),
            "storage": (adapter.probe_storage, StorageInfo()),
            "frameworks": (adapter.probe_frameworks, FrameworkInfo()),
        }

        results: dict[str, Any] = {}
        with ThreadPoolExecutor(max_workers=len(families)) as executor:
            futures = {
                name: executor.submit(probe) for name, (probe, _) in families.items()
            }
            for name, future in futures.items():
                try:
                    results[name] = future.result()
                except Exception as exc:
                    logger.warning("%s detection failed, using defaults: %s", name, exc)
                    results[name] = families[name][1]

        snapshot = HardwareSnapshot(
            cpu=results["cpu"],
            memory=results["memory"],
            gpu=results["gpu"],
            storage=results["storage"],
            frameworks=results["frameworks"],
            os_tag=adapter.os_tag,
            timestamp=time.time(),
        )
        logger.info(
            "Hardware detection finished in %.2fs using %s probe",
            time.monotonic() - started,
            adapter.name,
        )
        return snapshot


def detect_hardware(timeout: float = PROBE_TIMEOUT) -> HardwareSnapshot:
    """One-liner API: detect all hardware on the running host."""
    return HardwareDetector(timeout=timeout).detect_all()
