"""Windows probe: CIM/WMI classes queried through PowerShell as JSON."""

from __future__ import annotations

import json
import logging
import platform
import sys
from typing import Any

from ._base import ProbeAdapter, bytes_to_gb, infer_vendor, to_float, to_int
from ._storage import (
    resolve_storage_type,
    type_from_bus_and_media,
    type_from_description,
    type_from_model,
)
from ._types import UNKNOWN, CpuInfo, GpuInfo, MemoryInfo, StorageInfo

logger = logging.getLogger(__name__)

# Win32_PhysicalMemory.SMBIOSMemoryType
SMBIOS_MEMORY_TYPES: dict[int, str] = {
    20: "DDR",
    21: "DDR2",
    24: "DDR3",
    26: "DDR4",
    34: "DDR5",
    35: "LPDDR5",
}

# IsProcessorFeaturePresent feature ids
_PF_AVX2 = 40
_PF_AVX512F = 41

_STORAGE_NAMESPACE = r"root\Microsoft\Windows\Storage"
_DISPLAY_CLASS_KEY = (
    r"HKLM:\SYSTEM\ControlSet001\Control\Class"
    r"\{4d36e968-e325-11ce-bfc1-08002be10318}\0*"
)


class WindowsProbe(ProbeAdapter):
    os_tag = "windows"

    @property
    def name(self) -> str:
        return "windows"

    def query(
        self,
        cim_class: str,
        properties: list[str],
        namespace: str | None = None,
        where: str | None = None,
    ) -> list[dict[str, Any]]:
        """Run ``Get-CimInstance`` and return its rows as dicts."""
        command = f"Get-CimInstance {cim_class}"
        if namespace:
            command += f" -Namespace {namespace}"
        if where:
            command += f" | Where-Object {where}"
        command += f" | Select-Object {','.join(properties)} | ConvertTo-Json"
        return self._powershell_json(command)

    def _powershell_json(self, command: str) -> list[dict[str, Any]]:
        output = self.run(["powershell", "-NoProfile", "-Command", command])
        if not output or not output.strip():
            return []
        try:
            data = json.loads(output)
        except json.JSONDecodeError as exc:
            logger.warning("Unparseable PowerShell output: %s", exc)
            return []
        # ConvertTo-Json emits a bare object when there is a single row
        if isinstance(data, dict):
            return [data]
        return [row for row in data if isinstance(row, dict)]

    def probe_cpu(self) -> CpuInfo:
        rows = self.query(
            "Win32_Processor",
            ["Name", "NumberOfCores", "NumberOfLogicalProcessors", "MaxClockSpeed"],
        )
        row = rows[0] if rows else {}
        has_avx2, has_avx512 = _vector_extensions()
        info = CpuInfo(
            model=str(row.get("Name") or UNKNOWN).strip(),
            physical_cores=sum(to_int(r.get("NumberOfCores")) for r in rows),
            logical_threads=sum(to_int(r.get("NumberOfLogicalProcessors")) for r in rows),
            base_clock_ghz=round(to_float(row.get("MaxClockSpeed")) / 1000, 2),
            architecture=platform.machine() or UNKNOWN,
            has_avx2=has_avx2,
            has_avx512=has_avx512,
        )
        logger.info("CPU detected: %s, %d cores", info.model, info.physical_cores)
        return info

    def probe_memory(self) -> MemoryInfo:
        system = self.query("Win32_ComputerSystem", ["TotalPhysicalMemory"])
        os_rows = self.query("Win32_OperatingSystem", ["FreePhysicalMemory"])
        modules = self.query("Win32_PhysicalMemory", ["SMBIOSMemoryType", "Speed"])

        total = to_int(system[0].get("TotalPhysicalMemory")) if system else 0
        # FreePhysicalMemory is reported in kB
        free = to_int(os_rows[0].get("FreePhysicalMemory")) * 1024 if os_rows else 0

        mem_type = UNKNOWN
        speed = 0
        if modules:
            mem_type = SMBIOS_MEMORY_TYPES.get(
                to_int(modules[0].get("SMBIOSMemoryType")), UNKNOWN
            )
            speed = to_int(modules[0].get("Speed"))

        info = MemoryInfo(
            total_gb=bytes_to_gb(total),
            available_gb=bytes_to_gb(free),
            memory_type=mem_type,
            speed_mhz=speed,
        )
        logger.info("Memory detected: %.1f GB %s @ %d MHz", info.total_gb, mem_type, speed)
        return info

    def list_gpus(self) -> list[GpuInfo]:
        rows = self.query("Win32_VideoController", ["Name", "AdapterRAM"])
        registry_vram = self._registry_vram_gb()
        gpus = []
        for row in rows:
            name = str(row.get("Name") or "").strip()
            if not name or "remote" in name.lower() or "basic display" in name.lower():
                continue
            vendor, dedicated = infer_vendor(name)
            # AdapterRAM is a uint32 and saturates at 4 GB
            vram = bytes_to_gb(to_int(row.get("AdapterRAM")))
            if dedicated and registry_vram > vram:
                vram = registry_vram
            gpus.append(GpuInfo(model=name, vendor=vendor, vram_gb=vram, is_dedicated=dedicated))
        return gpus

    def _registry_vram_gb(self) -> float:
        rows = self._powershell_json(
            f"Get-ItemProperty '{_DISPLAY_CLASS_KEY}' -Name HardwareInformation.qwMemorySize"
            " -ErrorAction SilentlyContinue"
            " | Select-Object HardwareInformation.qwMemorySize | ConvertTo-Json"
        )
        sizes = [to_int(r.get("HardwareInformation.qwMemorySize")) for r in rows]
        return bytes_to_gb(max(sizes, default=0))

    def probe_storage(self) -> StorageInfo:
        logical = self.query(
            "Win32_LogicalDisk", ["Size", "FreeSpace"], where="DeviceID -eq 'C:'"
        )
        disk = logical[0] if logical else {}

        def _physical_disk() -> str | None:
            rows = self.query(
                "MSFT_PhysicalDisk", ["BusType", "MediaType"], namespace=_STORAGE_NAMESPACE
            )
            if not rows:
                return None
            return type_from_bus_and_media(
                to_int(rows[0].get("BusType")), to_int(rows[0].get("MediaType"))
            )

        drives: list[dict[str, Any]] = []

        def _disk_drive() -> str | None:
            drives.extend(
                self.query("Win32_DiskDrive", ["Model", "InterfaceType", "MediaType"])
            )
            if not drives:
                return None
            return type_from_description(
                str(drives[0].get("MediaType") or ""),
                str(drives[0].get("InterfaceType") or ""),
            )

        storage_type = resolve_storage_type(
            [
                _physical_disk,
                _disk_drive,
                lambda: type_from_model(str(drives[0].get("Model") or "")) if drives else None,
                lambda: _generic_fixed_disk(drives),
            ]
        )
        info = StorageInfo(
            storage_type=storage_type,
            total_gb=bytes_to_gb(to_int(disk.get("Size"))),
            available_gb=bytes_to_gb(to_int(disk.get("FreeSpace"))),
        )
        logger.info("Storage detected: %s, %.1f GB free", info.storage_type, info.available_gb)
        return info


def _vector_extensions() -> tuple[bool, bool]:
    if sys.platform != "win32":
        return False, False
    import ctypes

    try:
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        return (
            bool(kernel32.IsProcessorFeaturePresent(_PF_AVX2)),
            bool(kernel32.IsProcessorFeaturePresent(_PF_AVX512F)),
        )
    except (AttributeError, OSError):
        return False, False


def _generic_fixed_disk(drives: list[dict[str, Any]]) -> str | None:
    # Most Windows drives report only "Fixed hard disk media"; modern ones are SSDs
    if drives and "fixed hard disk" in str(drives[0].get("MediaType") or "").lower():
        return "SSD"
    return None
