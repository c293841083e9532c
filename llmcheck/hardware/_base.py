"""Probe adapter base class, bounded command runner and adapter factory."""

from __future__ import annotations

import abc
import logging
import subprocess
import sys
from typing import Callable, Optional, Sequence, TypeVar

from ._types import (
    UNKNOWN,
    CpuInfo,
    FrameworkInfo,
    GpuInfo,
    MemoryInfo,
    PartialFacts,
    StorageInfo,
)

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 2.0

T = TypeVar("T")

Runner = Callable[[Sequence[str]], Optional[str]]

# Vendors whose name in a device string marks a discrete part.
_DISCRETE_VENDORS = ("NVIDIA", "AMD")

_AMD_INTEGRATED_MARKERS = ("radeon(tm) graphics", "radeon graphics", "vega 8", "vega 11")


def run_command(args: Sequence[str], timeout: float = PROBE_TIMEOUT) -> str | None:
    """Run an external tool and return its stdout, or None on any failure.

    ``subprocess.run`` kills the child when the timeout expires, so a hung
    tool never holds the caller past ``timeout`` seconds.
    """
    try:
        result = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError:
        logger.debug("%s: not found", args[0])
        return None
    except subprocess.TimeoutExpired:
        logger.warning("%s timed out after %.1fs, process killed", args[0], timeout)
        return None
    except OSError as exc:
        logger.warning("%s could not be started: %s", args[0], exc)
        return None

    if result.returncode != 0:
        logger.debug("%s exited with code %d", args[0], result.returncode)
        return None
    return result.stdout


def safe_probe(label: str, probe: Callable[[], T], default: T) -> T:
    """Call ``probe`` and return ``default`` if it raises."""
    try:
        return probe()
    except Exception as exc:
        logger.warning("%s detection failed, using defaults: %s", label, exc)
        return default


def infer_vendor(name: str) -> tuple[str, bool]:
    """Return ``(vendor, is_dedicated)`` inferred from a display adapter name."""
    lower = name.lower()
    if any(k in lower for k in ("nvidia", "geforce", "quadro", "tesla")):
        return "NVIDIA", True
    if "amd" in lower or "radeon" in lower or "ati " in lower:
        integrated = any(m in lower for m in _AMD_INTEGRATED_MARKERS)
        return "AMD", not integrated
    if "intel" in lower:
        return "Intel", " arc" in lower
    if "apple" in lower:
        return "Apple", True
    return UNKNOWN, False


def select_gpu(candidates: Sequence[GpuInfo]) -> GpuInfo:
    """Pick the device inference would run on.

    Dedicated beats integrated, a known discrete vendor beats an unknown
    one, and larger VRAM breaks the remaining ties.  Equal candidates keep
    enumeration order.
    """
    if not candidates:
        return GpuInfo()
    return max(
        candidates,
        key=lambda g: (g.is_dedicated, g.vendor in _DISCRETE_VENDORS, g.vram_gb),
    )


def current_os_tag() -> str:
    if sys.platform == "win32":
        return "windows"
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "macos"
    return UNKNOWN


def bytes_to_gb(value: float) -> float:
    return round(value / (1024**3), 1)


def key_value_lines(text: str, sep: str = ":") -> dict[str, str]:
    """Parse ``key: value`` lines; the first occurrence of a key wins."""
    fields: dict[str, str] = {}
    for line in text.splitlines():
        key, found, value = line.partition(sep)
        key = key.strip()
        if found and key and key not in fields:
            fields[key] = value.strip()
    return fields


def to_int(text: str | None, default: int = 0) -> int:
    try:
        return int(float(str(text).strip()))
    except (TypeError, ValueError):
        return default


def to_float(text: str | None, default: float = 0.0) -> float:
    try:
        return float(str(text).strip())
    except (TypeError, ValueError):
        return default


class ProbeAdapter(abc.ABC):
    """Base class for per-OS hardware probes.

    Subclasses never raise out of their ``probe_*`` methods in practice,
    but :meth:`detect` guards each category anyway and falls back to the
    category default.
    """

    os_tag: str = UNKNOWN

    def __init__(self, timeout: float = PROBE_TIMEOUT) -> None:
        self.timeout = timeout

    @property
    @abc.abstractmethod
    def name(self) -> str: ...

    @abc.abstractmethod
    def probe_cpu(self) -> CpuInfo: ...

    @abc.abstractmethod
    def probe_memory(self) -> MemoryInfo: ...

    @abc.abstractmethod
    def probe_storage(self) -> StorageInfo: ...

    def list_gpus(self) -> list[GpuInfo]:
        """Enumerate display adapters. Platforms without a listing tool return []."""
        return []

    def run(self, args: Sequence[str]) -> str | None:
        return run_command(args, timeout=self.timeout)

    def probe_gpu(self) -> GpuInfo:
        from ._amd import describe_amd_gpu
        from ._nvidia import query_nvidia_smi

        gpu = select_gpu(self.list_gpus())
        if gpu.vendor in ("NVIDIA", UNKNOWN):
            detailed = query_nvidia_smi(self.run)
            if detailed is not None:
                return detailed
        if gpu.vendor == "AMD":
            return describe_amd_gpu(gpu)
        return gpu

    def probe_frameworks(self) -> FrameworkInfo:
        from ._frameworks import FrameworkProbe

        return FrameworkProbe(self.os_tag, runner=self.run).detect()

    def detect(self) -> PartialFacts:
        """Probe every category in turn on the calling thread.

        :class:`~llmcheck.hardware.HardwareDetector` does not go through this
        method: it submits the ``probe_*`` methods to a thread pool so the
        five families run concurrently, with the same per-category defaults.
        Use this when a single-threaded pass is wanted.
        """
        return PartialFacts(
            cpu=safe_probe("cpu", self.probe_cpu, CpuInfo()),
            memory=safe_probe("memory", self.probe_memory, MemoryInfo()),
            gpu=safe_probe("gpu", self.probe_gpu, GpuInfo()),
            storage=safe_probe("storage", self.probe_storage, StorageInfo()),
            frameworks=safe_probe(
                "frameworks", self.probe_frameworks, FrameworkInfo()
            ),
        )


def get_probe_adapter(
    os_tag: str | None = None, timeout: float = PROBE_TIMEOUT
) -> ProbeAdapter:
    """Return the adapter for ``os_tag`` (defaults to the running host)."""
    from ._fallback import FallbackProbe
    from ._linux import LinuxProbe
    from ._macos import MacOSProbe
    from ._windows import WindowsProbe

    tag = os_tag or current_os_tag()
    adapters: dict[str, type[ProbeAdapter]] = {
        "windows": WindowsProbe,
        "linux": LinuxProbe,
        "macos": MacOSProbe,
    }
    adapter_cls = adapters.get(tag, FallbackProbe)
    logger.debug("Using %s probe adapter for os=%s", adapter_cls.__name__, tag)
    return adapter_cls(timeout=timeout)
