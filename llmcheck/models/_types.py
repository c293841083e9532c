"""Data classes for catalog entries and per-hardware match results."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class QuantizationOption:
    """One downloadable precision variant of a model."""

    format: str  # "Q4_K_M", "Q8_0", "FP16"
    bits_per_weight: int
    vram_gb: float
    ram_gb: float
    quality_impact: str = "Medium"
    performance_tier: str = ""


@dataclass(frozen=True)
class ComputeRequirements:
    min_compute_capability: Optional[str] = None
    requires_avx2: bool = False
    benefits_from_avx512: bool = False
    min_cores: int = 0
    supported_backends: tuple[str, ...] = ()


@dataclass(frozen=True)
class ModelDefinition:
    """A catalog entry. Shared and never mutated once loaded."""

    name: str
    family: str
    parameter_size: str  # human-readable, e.g. "7B"
    parameters_billions: float
    quantization_options: tuple[QuantizationOption, ...] = ()
    compute: ComputeRequirements = field(default_factory=ComputeRequirements)
    description: str = ""
    license: str = ""
    url: str = ""
    tags: tuple[str, ...] = ()
    min_storage_gb: int = 0
    model_id: str = ""  # remote catalog id, empty for bundled entries
    source: str = "bundled"

    @property
    def min_vram_gb(self) -> float:
        return min((q.vram_gb for q in self.quantization_options), default=0.0)

    @property
    def min_ram_gb(self) -> float:
        return min((q.ram_gb for q in self.quantization_options), default=0.0)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def recommendation_bucket(score: int) -> str:
    if score >= 90:
        return "Perfect"
    if score >= 70:
        return "Good"
    if score >= 50:
        return "Possible"
    return "Not Recommended"


@dataclass(frozen=True)
class AnnotatedModel:
    """A catalog entry paired with its match result for one snapshot."""

    model: ModelDefinition
    is_recommended: bool
    compatibility_score: int
    expected_performance: str
    best_option: Optional[QuantizationOption] = None
    runs_on: str = ""  # "GPU" or "CPU"

    @property
    def name(self) -> str:
        return self.model.name

    @property
    def bucket(self) -> str:
        return recommendation_bucket(self.compatibility_score)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["bucket"] = self.bucket
        return data
