"""Linux probe: lscpu, /proc/meminfo, lspci, lsblk and sysfs, with psutil fallbacks."""

from __future__ import annotations

import logging
import os
import platform
import re

from ._amd import lookup_pci_device
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

_GPU_CLASSES = ("VGA compatible controller", "3D controller", "Display controller")
_PCI_ID = re.compile(r"\s*\[([0-9a-f]{4}):([0-9a-f]{4})\].*$", re.IGNORECASE)
_LSBLK_PAIR = re.compile(r'(\w+)="([^"]*)"')


class LinuxProbe(ProbeAdapter):
    os_tag = "linux"

    @property
    def name(self) -> str:
        return "linux"

    # ------------------------------------------------------------------
    # CPU
    # ------------------------------------------------------------------

    def probe_cpu(self) -> CpuInfo:
        import psutil

        fields = key_value_lines(self.run(["lscpu"]) or "")

        model = fields.get("Model name") or platform.processor() or UNKNOWN
        threads = to_int(fields.get("CPU(s)")) or psutil.cpu_count(logical=True) or 0
        per_socket = to_int(fields.get("Core(s) per socket"))
        sockets = to_int(fields.get("Socket(s)"), default=1) or 1
        cores = per_socket * sockets or psutil.cpu_count(logical=False) or threads

        mhz = to_float(fields.get("CPU max MHz"))
        if not mhz:
            freq = psutil.cpu_freq()
            mhz = (freq.max or freq.current) if freq else 0.0

        flags = fields.get("Flags") or _read_cpuinfo_flags()
        flag_set = set(flags.lower().split())

        info = CpuInfo(
            model=model,
            physical_cores=cores,
            logical_threads=threads,
            base_clock_ghz=round(mhz / 1000, 2),
            architecture=fields.get("Architecture") or platform.machine() or UNKNOWN,
            has_avx2="avx2" in flag_set,
            has_avx512="avx512f" in flag_set,
        )
        logger.info(
            "CPU detected: %s, %d cores, %.2f GHz",
            info.model,
            info.physical_cores,
            info.base_clock_ghz,
        )
        return info

    # ------------------------------------------------------------------
    # Memory
    # ------------------------------------------------------------------

    def probe_memory(self) -> MemoryInfo:
        total_kb, available_kb = _read_meminfo()
        if not total_kb:
            import psutil

            mem = psutil.virtual_memory()
            total_kb, available_kb = mem.total // 1024, mem.available // 1024

        mem_type, speed = self._memory_type_and_speed()
        info = MemoryInfo(
            total_gb=bytes_to_gb(total_kb * 1024),
            available_gb=bytes_to_gb(available_kb * 1024),
            memory_type=mem_type,
            speed_mhz=speed,
        )
        logger.info(
            "Memory detected: %.1f GB %s @ %d MHz",
            info.total_gb,
            info.memory_type,
            info.speed_mhz,
        )
        return info

    def _memory_type_and_speed(self) -> tuple[str, int]:
        # dmidecode needs root; without it type and speed stay unknown
        output = self.run(["dmidecode", "-t", "memory"])
        if not output:
            return UNKNOWN, 0
        mem_type = UNKNOWN
        speed = 0
        for line in output.splitlines():
            key, _, value = line.strip().partition(":")
            value = value.strip()
            if key == "Type" and mem_type == UNKNOWN and value.startswith(("DDR", "LPDDR")):
                mem_type = value
            elif key in ("Configured Memory Speed", "Speed") and not speed:
                speed = to_int(value.split()[0] if value else "")
        return mem_type, speed

    # ------------------------------------------------------------------
    # GPU
    # ------------------------------------------------------------------

    def list_gpus(self) -> list[GpuInfo]:
        output = self.run(["lspci", "-nn"])
        if not output:
            return []
        gpus: list[GpuInfo] = []
        for line in output.splitlines():
            if not any(cls in line for cls in _GPU_CLASSES):
                continue
            gpu = _parse_lspci_line(line)
            if gpu is not None:
                gpus.append(gpu)
        logger.debug("lspci reported %d display adapter(s)", len(gpus))
        return gpus

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def probe_storage(self) -> StorageInfo:
        import psutil

        usage = psutil.disk_usage("/")
        disks = self._list_disks()
        disk = disks[0] if disks else {}

        storage_type = resolve_storage_type(
            [
                lambda: _type_from_transport(disk),
                lambda: _type_from_sysfs(disk.get("NAME", "")),
                lambda: type_from_model(disk.get("MODEL", "")),
                lambda: "NVMe" if disk.get("NAME", "").startswith("nvme") else None,
            ]
        )
        info = StorageInfo(
            storage_type=storage_type,
            total_gb=bytes_to_gb(usage.total),
            available_gb=bytes_to_gb(usage.free),
        )
        logger.info(
            "Storage detected: %s, %.1f GB total, %.1f GB free",
            info.storage_type,
            info.total_gb,
            info.available_gb,
        )
        return info

    def _list_disks(self) -> list[dict[str, str]]:
        output = self.run(["lsblk", "-d", "-n", "-P", "-o", "NAME,ROTA,TRAN,TYPE,MODEL"])
        if not output:
            return []
        disks = []
        for line in output.splitlines():
            row = dict(_LSBLK_PAIR.findall(line))
            if row.get("TYPE") == "disk" and not row.get("NAME", "").startswith(
                ("loop", "zram", "ram")
            ):
                disks.append(row)
        return disks


def _read_cpuinfo_flags() -> str:
    try:
        with open("/proc/cpuinfo") as f:
            for line in f:
                if line.startswith("flags"):
                    return line.partition(":")[2]
    except OSError:
        pass
    return ""


def _read_meminfo() -> tuple[int, int]:
    """Return (MemTotal, MemAvailable) in kB from /proc/meminfo."""
    try:
        with open("/proc/meminfo") as f:
            fields = key_value_lines(f.read())
    except OSError:
        return 0, 0

    def _kb(key: str) -> int:
        return to_int((fields.get(key) or "0").split()[0])

    return _kb("MemTotal"), _kb("MemAvailable")


def _parse_lspci_line(line: str) -> GpuInfo | None:
    # 01:00.0 VGA compatible controller [0300]: NVIDIA Corporation AD102 [GeForce RTX 4090] [10de:2684] (rev a1)
    parts = line.split(": ", 1)
    if len(parts) < 2:
        return None
    description = parts[1].strip()
    pci = _PCI_ID.search(description)
    name = _PCI_ID.sub("", description).strip() if pci else description
    vram = 0.0
    if pci and pci.group(1).lower() == "1002":
        known = lookup_pci_device(pci.group(2))
        if known:
            name, vram = known
    vendor, dedicated = infer_vendor(name)
    return GpuInfo(model=name, vendor=vendor, vram_gb=vram, is_dedicated=dedicated)


def _type_from_transport(disk: dict[str, str]) -> str | None:
    if not disk:
        return None
    if disk.get("TRAN") == "nvme":
        return "NVMe"
    rota = disk.get("ROTA")
    if rota == "1":
        return "HDD"
    if rota == "0":
        return "NVMe" if disk.get("NAME", "").startswith("nvme") else "SSD"
    return None


def _type_from_sysfs(device: str) -> str | None:
    if not device:
        return None
    path = os.path.join("/sys/block", device, "queue", "rotational")
    try:
        with open(path) as f:
            return "HDD" if f.read().strip() == "1" else "SSD"
    except OSError:
        return None
