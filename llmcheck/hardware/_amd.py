"""AMD GPU details: PCI id table, architecture inference and sysfs VRAM."""

from __future__ import annotations

import dataclasses
import logging
import os
import re

from ._types import GpuInfo

logger = logging.getLogger(__name__)

# AMD PCI device ID -> (name, estimated_vram_gb)
AMD_PCI_DEVICES: dict[str, tuple[str, float]] = {
    "7551": ("Radeon RX 9070 XT", 16.0),
    "7550": ("Radeon RX 9070", 16.0),
    "744c": ("Radeon RX 7900 XTX", 24.0),
    "7448": ("Radeon RX 7900 XT", 20.0),
    "7480": ("Radeon RX 7800 XT", 16.0),
    "7470": ("Radeon RX 7700 XT", 12.0),
    "7422": ("Radeon RX 7600", 8.0),
    "73bf": ("Radeon RX 6900 XT", 16.0),
    "73df": ("Radeon RX 6700 XT", 12.0),
    "73ff": ("Radeon RX 6600 XT", 8.0),
    "731f": ("Radeon RX 5700 XT", 8.0),
    "740f": ("Instinct MI300X", 192.0),
    "740c": ("Instinct MI250X", 128.0),
    "738c": ("Instinct MI100", 32.0),
}

_INSTINCT_ARCH = {"MI3": "CDNA 3", "MI2": "CDNA 2", "MI1": "CDNA"}
_RDNA_GENERATIONS = {"9": "RDNA 4", "7": "RDNA 3", "6": "RDNA 2", "5": "RDNA"}

_SYSFS_DRM = "/sys/class/drm"


def amd_architecture(name: str) -> str:
    upper = name.upper()
    for prefix, arch in _INSTINCT_ARCH.items():
        if prefix in upper:
            return arch
    match = re.search(r"RX\s*(\d)\d{3}", upper)
    if match and match.group(1) in _RDNA_GENERATIONS:
        return _RDNA_GENERATIONS[match.group(1)]
    if "VEGA" in upper:
        return "GCN 5"
    if re.search(r"RX\s*\d{3}\b", upper):
        return "GCN 4"
    return "GCN"


def lookup_pci_device(device_id: str) -> tuple[str, float] | None:
    return AMD_PCI_DEVICES.get(device_id.lower().replace("0x", ""))


def _list_drm_cards() -> list[str]:
    """List /sys/class/drm/cardN directories (not connector entries)."""
    if not os.path.isdir(_SYSFS_DRM):
        return []
    return sorted(
        os.path.join(_SYSFS_DRM, entry)
        for entry in os.listdir(_SYSFS_DRM)
        if re.fullmatch(r"card\d+", entry)
    )


def sysfs_vram_gb() -> float:
    """Largest ``mem_info_vram_total`` among AMD cards, 0.0 if unreadable."""
    best = 0.0
    for card_dir in _list_drm_cards():
        device_dir = os.path.join(card_dir, "device")
        try:
            with open(os.path.join(device_dir, "vendor")) as f:
                if f.read().strip() != "0x1002":
                    continue
            with open(os.path.join(device_dir, "mem_info_vram_total")) as f:
                best = max(best, int(f.read().strip()) / (1024**3))
        except (OSError, ValueError):
            continue
    return round(best, 1)


def describe_amd_gpu(gpu: GpuInfo) -> GpuInfo:
    """Fill in architecture, precision support and VRAM for an AMD device."""
    arch = amd_architecture(gpu.model)
    vram = gpu.vram_gb or sysfs_vram_gb()
    modern = arch.startswith(("RDNA", "CDNA"))
    logger.info("AMD GPU detected: %s (%s), %.1f GB VRAM", gpu.model, arch, vram)
    return dataclasses.replace(
        gpu,
        vram_gb=vram,
        architecture=arch,
        supports_fp16=modern or arch == "GCN 5",
        supports_int8=modern and arch != "RDNA",
    )
