"""macOS probe: sysctl, system_profiler and diskutil."""

from __future__ import annotations

import logging
import platform

from ._base import (
    ProbeAdapter,
    bytes_to_gb,
    infer_vendor,
    key_value_lines,
    to_float,
    to_int,
)
from ._storage import resolve_storage_type, type_from_model
from ._types import UNKNOWN, CpuInfo, GpuInfo, MemoryInfo, StorageInfo

logger = logging.getLogger(__name__)

# Unified memory: reserve ~4GB for the OS
APPLE_OS_RESERVE_GB = 4.0


class MacOSProbe(ProbeAdapter):
    os_tag = "macos"

    @property
    def name(self) -> str:
        return "macos"

    def _sysctl(self, key: str) -> str:
        return (self.run(["sysctl", "-n", key]) or "").strip()

    def probe_cpu(self) -> CpuInfo:
        import psutil

        brand = self._sysctl("machdep.cpu.brand_string") or platform.processor()
        cores = to_int(self._sysctl("hw.physicalcpu")) or psutil.cpu_count(logical=False) or 0
        threads = to_int(self._sysctl("hw.logicalcpu")) or psutil.cpu_count(logical=True) or 0

        hz = to_int(self._sysctl("hw.cpufrequency"))
        if hz:
            ghz = hz / 1e9
        else:
            # Apple Silicon does not publish hw.cpufrequency
            freq = psutil.cpu_freq()
            ghz = ((freq.max or freq.current) / 1000) if freq else 0.0

        features = self._sysctl("machdep.cpu.features").upper()
        leaf7 = self._sysctl("machdep.cpu.leaf7_features").upper()

        info = CpuInfo(
            model=brand or UNKNOWN,
            physical_cores=cores,
            logical_threads=threads,
            base_clock_ghz=round(ghz, 2),
            architecture=platform.machine() or UNKNOWN,
            has_avx2="AVX2" in features or "AVX2" in leaf7,
            has_avx512="AVX512F" in leaf7,
        )
        logger.info("CPU detected: %s, %d cores", info.model, info.physical_cores)
        return info

    def _total_memory_bytes(self) -> int:
        return to_int(self._sysctl("hw.memsize"))

    def probe_memory(self) -> MemoryInfo:
        import psutil

        total = self._total_memory_bytes()
        vm = psutil.virtual_memory()
        fields = key_value_lines(self.run(["system_profiler", "SPMemoryDataType"]) or "")
        mem_type = fields.get("Type") or UNKNOWN
        speed = to_int((fields.get("Speed") or "").split(" ")[0])

        info = MemoryInfo(
            total_gb=bytes_to_gb(total or vm.total),
            available_gb=bytes_to_gb(vm.available),
            memory_type=mem_type,
            speed_mhz=speed,
        )
        logger.info("Memory detected: %.1f GB %s", info.total_gb, info.memory_type)
        return info

    def list_gpus(self) -> list[GpuInfo]:
        output = self.run(["system_profiler", "SPDisplaysDataType"])
        if not output:
            return []

        blocks: list[dict[str, str]] = []
        for line in output.splitlines():
            key, _, value = line.strip().partition(":")
            if key == "Chipset Model":
                blocks.append({"model": value.strip()})
            elif blocks and key.startswith(("VRAM", "Total VRAM")):
                blocks[-1].setdefault("vram", value.strip())
        return [self._describe(block) for block in blocks]

    def _describe(self, block: dict[str, str]) -> GpuInfo:
        model = block["model"]
        vendor, dedicated = infer_vendor(model)
        if vendor == "Apple":
            total_gb = bytes_to_gb(self._total_memory_bytes())
            return GpuInfo(
                model=model,
                vendor="Apple",
                vram_gb=max(total_gb - APPLE_OS_RESERVE_GB, 0.0),
                is_dedicated=True,
                architecture="Apple Silicon",
                supports_fp16=True,
                supports_int8=True,
            )
        return GpuInfo(
            model=model,
            vendor=vendor,
            vram_gb=_parse_vram(block.get("vram", "")),
            is_dedicated=dedicated,
        )

    def probe_storage(self) -> StorageInfo:
        import psutil

        usage = psutil.disk_usage("/")
        fields = key_value_lines(self.run(["diskutil", "info", "/"]) or "")
        storage_type = resolve_storage_type(
            [
                lambda: _type_from_protocol(fields.get("Protocol", "")),
                lambda: _type_from_solid_state(fields.get("Solid State", "")),
                lambda: type_from_model(fields.get("Device / Media Name", "")),
            ]
        )
        info = StorageInfo(
            storage_type=storage_type,
            total_gb=bytes_to_gb(usage.total),
            available_gb=bytes_to_gb(usage.free),
        )
        logger.info("Storage detected: %s, %.1f GB free", info.storage_type, info.available_gb)
        return info


def _parse_vram(text: str) -> float:
    """Parse "8 GB" or "1536 MB"."""
    parts = text.split()
    if len(parts) < 2:
        return 0.0
    value = to_float(parts[0])
    if parts[1].upper().startswith("MB"):
        return round(value / 1024, 1)
    return value


def _type_from_protocol(protocol: str) -> str | None:
    upper = protocol.upper()
    if "NVME" in upper or "PCI" in upper or "APPLE FABRIC" in upper:
        return "NVMe"
    return None


def _type_from_solid_state(value: str) -> str | None:
    if value.lower().startswith("yes"):
        return "SSD"
    if value.lower().startswith("no"):
        return "HDD"
    return None
