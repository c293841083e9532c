"""NVIDIA GPU details via nvidia-smi's CSV query mode."""

from __future__ import annotations

import logging

from ._base import Runner, select_gpu
from ._types import UNKNOWN, GpuInfo

logger = logging.getLogger(__name__)

# Known compute capabilities for drivers too old to report ``compute_cap``.
_COMPUTE_CAPABILITIES: dict[str, str] = {
    "RTX 50": "10.0",
    "RTX 40": "8.9",
    "RTX 30": "8.6",
    "RTX 20": "7.5",
    "GTX 16": "7.5",
    "GTX 10": "6.1",
    "GTX 9": "5.2",
    "TITAN RTX": "7.5",
    "TITAN V": "7.0",
    "H200": "9.0",
    "H100": "9.0",
    "A100": "8.0",
    "A6000": "8.6",
    "A5000": "8.6",
    "A4000": "8.6",
    "L40S": "8.9",
    "L40": "8.9",
    "L4": "8.9",
    "T4": "7.5",
    "V100": "7.0",
    "P100": "6.0",
}

# (minimum compute capability, architecture), newest first
_ARCHITECTURES: list[tuple[float, str]] = [
    (10.0, "Blackwell"),
    (9.0, "Hopper"),
    (8.9, "Ada Lovelace"),
    (8.0, "Ampere"),
    (7.5, "Turing"),
    (7.0, "Volta"),
    (6.0, "Pascal"),
    (5.0, "Maxwell"),
    (3.0, "Kepler"),
]


def lookup_compute_capability(gpu_name: str) -> str:
    """Look up compute capability for a GPU name. Tries longest match first."""
    upper = gpu_name.upper()
    for key in sorted(_COMPUTE_CAPABILITIES, key=len, reverse=True):
        if key in upper:
            return _COMPUTE_CAPABILITIES[key]
    return UNKNOWN


def architecture_for(compute_capability: str) -> str:
    try:
        cc = float(compute_capability)
    except ValueError:
        return UNKNOWN
    for minimum, arch in _ARCHITECTURES:
        if cc >= minimum:
            return arch
    return "Legacy"


def _precision_support(compute_capability: str) -> tuple[bool, bool]:
    try:
        cc = float(compute_capability)
    except ValueError:
        return False, False
    return cc >= 5.3, cc >= 6.1


def _parse_row(parts: list[str]) -> GpuInfo | None:
    if len(parts) < 2 or not parts[0]:
        return None
    name = parts[0]
    try:
        vram_gb = round(float(parts[1]) / 1024, 1)
    except ValueError:
        vram_gb = 0.0
    compute_cap = parts[3] if len(parts) >= 4 and parts[3] else ""
    if not compute_cap or compute_cap.startswith("["):
        compute_cap = lookup_compute_capability(name)
    fp16, int8 = _precision_support(compute_cap)
    return GpuInfo(
        model=name,
        vendor="NVIDIA",
        vram_gb=vram_gb,
        is_dedicated=True,
        compute_capability=compute_cap,
        architecture=architecture_for(compute_cap),
        supports_fp16=fp16,
        supports_int8=int8,
    )


def query_nvidia_smi(run: Runner) -> GpuInfo | None:
    """Return the largest NVIDIA GPU reported by nvidia-smi, or None."""
    output = run(
        [
            "nvidia-smi",
            "--query-gpu=name,memory.total,driver_version,compute_cap",
            "--format=csv,noheader,nounits",
        ]
    )
    if not output or not output.strip():
        # Older drivers reject the compute_cap field
        output = run(
            [
                "nvidia-smi",
                "--query-gpu=name,memory.total",
                "--format=csv,noheader,nounits",
            ]
        )
    if not output or not output.strip():
        return None

    gpus: list[GpuInfo] = []
    for line in output.strip().splitlines():
        gpu = _parse_row([p.strip() for p in line.split(",")])
        if gpu is not None:
            gpus.append(gpu)
    if not gpus:
        return None

    best = select_gpu(gpus)
    logger.info(
        "NVIDIA GPU detected: %s, %.1f GB VRAM, compute %s",
        best.model,
        best.vram_gb,
        best.compute_capability,
    )
    return best
