"""Storage type resolution shared by the platform adapters.

Storage type is the one fact every platform reports ambiguously, so each
adapter feeds a list of sources into :func:`resolve_storage_type`, most
specific first.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ._types import UNKNOWN

logger = logging.getLogger(__name__)

StorageSource = Callable[[], Optional[str]]

# Model-string prefixes of drives that only ship as NVMe.
NVME_MODEL_PREFIXES = (
    "NVME",
    "SAMSUNG SSD 9",
    "SAMSUNG MZVL",
    "SAMSUNG MZVK",
    "WDS",
    "WD_BLACK SN",
    "WD BLACK SN",
    "WDC PC SN",
    "KINGSTON SNV",
    "KINGSTON SA2000",
    "KINGSTON SKC3000",
    "CT1000P",
    "CT2000P",
    "CT500P",
    "CRUCIAL P",
    "SK HYNIX PC",
    "SKHYNIX_HFS",
    "INTEL SSDPE",
    "MICRON 2",
    "MICRON 3",
    "APPLE SSD AP",
    "SABRENT",
    "CORSAIR MP",
    "SOLIDIGM",
)

# Windows MSFT_PhysicalDisk enumerations
_BUS_TYPE_NVME = 17
_MEDIA_TYPE_HDD = 3
_MEDIA_TYPE_SSD = 4
_MEDIA_TYPE_SCM = 5


def type_from_bus_and_media(bus_type: int | None, media_type: int | None) -> str | None:
    if bus_type == _BUS_TYPE_NVME:
        return "NVMe"
    if media_type in (_MEDIA_TYPE_SSD, _MEDIA_TYPE_SCM):
        return "SSD"
    if media_type == _MEDIA_TYPE_HDD:
        return "HDD"
    return None


def type_from_description(media_type: str = "", interface: str = "") -> str | None:
    """Classify from free-text media/interface descriptions."""
    media = media_type.upper()
    if "NVME" in interface.upper() or "NVME" in media:
        return "NVMe"
    if "SSD" in media or "SOLID STATE" in media:
        return "SSD"
    if "HDD" in media or "ROTATIONAL" in media:
        return "HDD"
    return None


def type_from_model(model: str) -> str | None:
    """Guess from the drive's model string via known NVMe product prefixes."""
    upper = model.upper().strip()
    if not upper:
        return None
    if "NVME" in upper or any(upper.startswith(p) for p in NVME_MODEL_PREFIXES):
        return "NVMe"
    if "SSD" in upper:
        return "SSD"
    return None


def resolve_storage_type(sources: Sequence[StorageSource]) -> str:
    """Return the first answer from ``sources``, or ``"Unknown"``.

    A source that raises is skipped like one that has no answer.
    """
    for source in sources:
        try:
            found = source()
        except Exception as exc:
            logger.debug("storage type source failed: %s", exc)
            continue
        if found:
            return found
    return UNKNOWN
