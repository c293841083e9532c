"""Model catalog and hardware compatibility matching."""

from __future__ import annotations

from ._types import (
    AnnotatedModel,
    ComputeRequirements,
    ModelDefinition,
    QuantizationOption,
    recommendation_bucket,
)
from .catalog import CATALOG
from .database import ModelDatabase, RemoteCatalog
from .matcher import CompatibilityResult, match_models, match_one

__all__ = [
    "CATALOG",
    "AnnotatedModel",
    "CompatibilityResult",
    "ComputeRequirements",
    "ModelDatabase",
    "ModelDefinition",
    "QuantizationOption",
    "RemoteCatalog",
    "match_models",
    "match_one",
    "recommendation_bucket",
]
