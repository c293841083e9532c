"""HuggingFace Hub remote catalog.

Lists popular text-generation models from the public HuggingFace API and
converts them into :class:`ModelDefinition` entries with estimated
requirements. Responses are cached in memory and on disk for 24 hours.
Network or parse failures never propagate; the last cached listing (or an
empty list) is returned instead.
"""

from __future__ import annotations

import json
import logging
import math
import re
import time
from pathlib import Path
from typing import Any, Optional

import httpx

from ..models import ComputeRequirements, ModelDefinition, QuantizationOption

logger = logging.getLogger(__name__)

HF_API_BASE = "https://huggingface.co/api/models"
REQUEST_TIMEOUT = 30.0
CACHE_TTL = 24 * 3600.0
CACHE_FILE = "huggingface_models.json"

# Checked in order; earlier families win for ids like "llama-deepseek-distill".
_FAMILIES = ("llama", "mistral", "phi", "gemma", "qwen", "deepseek", "gpt", "falcon")

_PARAMS_B = re.compile(r"(?<![\d.])(\d+(?:\.\d+)?)\s*b(?![a-z])")
_PARAMS_M = re.compile(r"(?<![\d.])(\d+)\s*m(?![a-z])")

DEFAULT_PARAMS_B = 7.0


def extract_parameter_count(model_id: str, tags: Optional[list[str]] = None) -> float:
    """Billions of parameters from a model id like ``"Meta-Llama-3-8B-Instruct"``."""
    for text in [model_id, *(tags or [])]:
        lower = text.lower().split("/")[-1]
        match = _PARAMS_B.search(lower)
        if match:
            return float(match.group(1))
        match = _PARAMS_M.search(lower)
        if match:
            return round(int(match.group(1)) / 1000, 2)
    return DEFAULT_PARAMS_B


def extract_family(model_id: str) -> str:
    lower = model_id.lower()
    for family in _FAMILIES:
        if family in lower:
            return family
    return "other"


def estimate_vram_gb(params_b: float) -> int:
    """FP16 weights (2 bytes/param) plus 20% for KV cache and activations."""
    return math.ceil(params_b * 2 * 1.2)


def to_model_definition(record: dict[str, Any]) -> ModelDefinition:
    model_id = str(record.get("modelId") or record.get("id") or "")
    if not model_id:
        raise ValueError("record has no model id")
    tags = [str(t) for t in record.get("tags") or []]
    params = extract_parameter_count(model_id, tags)
    vram = estimate_vram_gb(params)
    params_label = f"{params:g}B"
    return ModelDefinition(
        name=model_id.split("/")[-1],
        family=extract_family(model_id),
        parameter_size=params_label,
        parameters_billions=params,
        quantization_options=(
            QuantizationOption("Q4_K_M", 4, vram / 2, vram, "Low", "Fast"),
            QuantizationOption("FP16", 16, vram, vram * 2, "None", "High Quality"),
        ),
        compute=ComputeRequirements(
            min_compute_capability="6.0",
            requires_avx2=True,
            benefits_from_avx512=True,
            min_cores=4,
            supported_backends=("Transformers", "llama.cpp", "vLLM"),
        ),
        description=f"{model_id} from HuggingFace Hub ({params_label} parameters).",
        license="Unknown",
        url=f"https://huggingface.co/{model_id}",
        tags=("general", "chat"),
        min_storage_gb=int(params * 2),
        model_id=model_id.replace("/", "-").lower(),
        source="huggingface",
    )


class HuggingFaceCatalog:
    """Remote catalog backed by ``GET /api/models``."""

    name = "huggingface"

    def __init__(
        self,
        cache_dir: Optional[Path] = None,
        base_url: str = HF_API_BASE,
        timeout: float = REQUEST_TIMEOUT,
        cache_ttl: float = CACHE_TTL,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.cache_ttl = cache_ttl
        self._cache_path = cache_dir / CACHE_FILE if cache_dir else None
        self._client = client
        self._records: Optional[list[dict[str, Any]]] = None
        self._fetched_at = 0.0

    # ------------------------------------------------------------------
    # Cache
    # ------------------------------------------------------------------

    def _fresh(self) -> bool:
        return self._records is not None and time.time() - self._fetched_at < self.cache_ttl

    def _load_disk_cache(self) -> None:
        if self._records is not None or self._cache_path is None:
            return
        if not self._cache_path.exists():
            return
        try:
            payload = json.loads(self._cache_path.read_text())
            self._records = list(payload["models"])
            self._fetched_at = float(payload["fetched_at"])
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.debug("Ignoring unreadable HuggingFace cache: %s", exc)

    def _save_disk_cache(self) -> None:
        if self._cache_path is None:
            return
        try:
            self._cache_path.parent.mkdir(parents=True, exist_ok=True)
            self._cache_path.write_text(
                json.dumps({"fetched_at": self._fetched_at, "models": self._records})
            )
        except OSError as exc:
            logger.debug("Could not write HuggingFace cache: %s", exc)

    # ------------------------------------------------------------------
    # Fetching
    # ------------------------------------------------------------------

    def _get(self, params: dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return self._client.get(self.base_url, params=params)
        with httpx.Client(timeout=self.timeout) as client:
            return client.get(self.base_url, params=params)

    def fetch_records(self, limit: int = 100) -> list[dict[str, Any]]:
        """Raw API records, served from cache when younger than the TTL."""
        self._load_disk_cache()
        if self._fresh():
            logger.info("Returning %d cached HuggingFace models", len(self._records or []))
            return list(self._records or [])

        params = {
            "limit": limit,
            "filter": "text-generation",
            "sort": "downloads",
            "direction": -1,
        }
        try:
            resp = self._get(params)
            if resp.status_code >= 400:
                logger.warning("HuggingFace API returned %d", resp.status_code)
                return list(self._records or [])
            data = resp.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Could not fetch HuggingFace models: %s", exc)
            return list(self._records or [])

        if not isinstance(data, list) or not data:
            logger.warning("No models returned from HuggingFace API")
            return list(self._records or [])

        self._records = [r for r in data if isinstance(r, dict)]
        self._fetched_at = time.time()
        self._save_disk_cache()
        logger.info("Fetched %d models from HuggingFace", len(self._records))
        return list(self._records)

    def fetch_models(self, limit: int = 50) -> list[ModelDefinition]:
        models: list[ModelDefinition] = []
        for record in self.fetch_records(limit=limit):
            try:
                models.append(to_model_definition(record))
            except (ValueError, TypeError) as exc:
                logger.warning("Skipping HuggingFace record %r: %s", record.get("id"), exc)
        return models
