"""Model database: bundled catalog plus optional remote entries."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Protocol

from ..hardware import HardwareSnapshot
from ._types import AnnotatedModel, ModelDefinition
from .catalog import CATALOG
from .matcher import match_models

logger = logging.getLogger(__name__)


class RemoteCatalog(Protocol):
    """Anything that can list extra models, e.g. :class:`HuggingFaceCatalog`."""

    def fetch_models(self, limit: int = 50) -> list[ModelDefinition]: ...


class ModelDatabase:
    """Read-only view over the bundled catalog and a one-time remote merge.

    Remote entries are fetched lazily on first access and deduplicated
    against the bundled catalog by remote id or case-insensitive name. A
    failed fetch leaves the bundled catalog in place and is not retried.
    """

    def __init__(
        self,
        bundled: Iterable[ModelDefinition] = CATALOG,
        remote: Optional[RemoteCatalog] = None,
        remote_limit: int = 50,
    ) -> None:
        self._models: list[ModelDefinition] = list(bundled)
        self._remote = remote
        self._remote_limit = remote_limit
        self._remote_loaded = False

    def _load_remote(self) -> None:
        if self._remote_loaded or self._remote is None:
            return
        self._remote_loaded = True
        try:
            fetched = self._remote.fetch_models(limit=self._remote_limit)
        except Exception as exc:
            logger.warning("Remote catalog unavailable, using bundled models only: %s", exc)
            return
        added = self.merge(fetched)
        logger.info("Added %d remote models. Total: %d", added, len(self._models))

    def merge(self, models: Iterable[ModelDefinition]) -> int:
        """Append models not already present; return how many were added."""
        ids = {m.model_id for m in self._models if m.model_id}
        names = {m.name.lower() for m in self._models}
        added = 0
        for model in models:
            if (model.model_id and model.model_id in ids) or model.name.lower() in names:
                continue
            self._models.append(model)
            names.add(model.name.lower())
            if model.model_id:
                ids.add(model.model_id)
            added += 1
        return added

    def get_all(self) -> list[ModelDefinition]:
        self._load_remote()
        return list(self._models)

    def get_recommended(self, snapshot: HardwareSnapshot) -> list[AnnotatedModel]:
        return match_models(snapshot, self.get_all())

    def get_by_name(self, name: str) -> Optional[ModelDefinition]:
        lowered = name.lower()
        for model in self.get_all():
            if model.name.lower() == lowered:
                return model
        return None

    def get_by_family(self, family: str) -> list[ModelDefinition]:
        lowered = family.lower()
        return [m for m in self.get_all() if m.family.lower() == lowered]
