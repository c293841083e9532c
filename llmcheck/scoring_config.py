"""Band tables and weights used by the capability scorer.

The thresholds are empirical. They live here as data so a user config file
can retune them without touching the scoring code.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any

from .errors import LLMCheckError

COMPONENTS = ("gpu", "memory", "cpu", "storage", "frameworks")


@dataclass(frozen=True)
class Band:
    """Monotonic step function from a raw metric to points.

    ``steps`` are ``(threshold, points)`` pairs, highest threshold first.
    Below the lowest threshold a positive value earns ``value * below_rate``
    points, or the flat ``below_points`` when no rate is set.
    """

    steps: tuple[tuple[float, int], ...]
    below_rate: float = 0.0
    below_points: int = 0

    def apply(self, value: float) -> int:
        for threshold, points in self.steps:
            if value >= threshold:
                return points
        if value <= 0:
            return 0
        if self.below_rate:
            return int(value * self.below_rate)
        return self.below_points


@dataclass(frozen=True)
class TextBand:
    """Threshold table mapping a value to a label, highest threshold first."""

    steps: tuple[tuple[float, str], ...]
    default: str

    def lookup(self, value: float) -> str:
        for threshold, label in self.steps:
            if value >= threshold:
                return label
        return self.default


def _default_weights() -> dict[str, dict[str, float]]:
    return {
        "inference": {
            "gpu": 0.40,
            "memory": 0.30,
            "cpu": 0.15,
            "storage": 0.10,
            "frameworks": 0.05,
        },
        "training": {"gpu": 0.50, "memory": 0.35, "storage": 0.10, "cpu": 0.05},
        "fine_tuning": {"gpu": 0.45, "memory": 0.30, "storage": 0.15, "cpu": 0.10},
    }


@dataclass(frozen=True)
class ScoringConfig:
    # CPU: 40 + 30 + 30
    cpu_cores: Band = Band(
        ((24, 40), (16, 35), (12, 30), (8, 25), (6, 18), (4, 10)), below_rate=2
    )
    cpu_clock: Band = Band(
        ((4.0, 30), (3.5, 25), (3.0, 20), (2.5, 15), (2.0, 10)), below_rate=5
    )
    cpu_avx512_points: int = 30
    cpu_avx2_points: int = 20
    cpu_64bit_points: int = 10

    # Memory: 60 + 20 + 20
    memory_capacity: Band = Band(
        ((64, 60), (48, 55), (32, 50), (24, 42), (16, 35), (12, 27), (8, 20), (4, 10)),
        below_rate=2,
    )
    memory_types: tuple[tuple[str, int], ...] = (("DDR5", 20), ("DDR4", 15), ("DDR3", 8))
    memory_other_type_points: int = 5
    memory_speed: Band = Band(
        ((4800, 20), (4000, 18), (3600, 16), (3200, 15), (2666, 12), (2400, 10), (2133, 7)),
        below_points=5,
    )

    # GPU: 60 + 25 + 15, or a flat low score for integrated / tiny devices
    gpu_min_vram_gb: float = 2.0
    gpu_integrated_points: int = 5
    gpu_small_dedicated_points: int = 10
    gpu_vram: Band = Band(
        ((24, 60), (20, 55), (16, 50), (12, 40), (10, 35), (8, 30), (6, 22), (4, 15)),
        below_rate=3,
    )
    gpu_compute: Band = Band(
        (
            (8.9, 25),
            (8.6, 23),
            (8.0, 22),
            (7.5, 20),
            (7.0, 18),
            (6.0, 15),
            (5.0, 10),
            (0.0, 5),
        )
    )
    gpu_architectures: tuple[tuple[str, int], ...] = (
        ("RDNA4", 25),
        ("RDNA3", 24),
        ("CDNA", 24),
        ("RDNA2", 20),
        ("RDNA", 15),
    )
    gpu_other_architecture_points: int = 10
    gpu_fp16_int8_points: int = 15
    gpu_fp16_points: int = 10
    gpu_int8_points: int = 8

    # Storage: 40 + 30 + 30
    storage_types: tuple[tuple[str, int], ...] = (("NVMe", 40), ("SSD", 30), ("HDD", 10))
    storage_unknown_type_points: int = 15
    storage_read_speed: Band = Band(
        ((5000, 30), (3500, 27), (2000, 25), (1000, 20), (500, 15), (100, 8)),
        below_points=5,
    )
    storage_free_space: Band = Band(
        ((500, 30), (350, 25), (250, 20), (150, 15), (100, 10), (50, 5))
    )

    # Frameworks: CPU inference is always possible
    frameworks_base: int = 40
    cuda_points: int = 35
    cuda_version_bonus: tuple[tuple[str, int], ...] = (("12", 5), ("11", 3))
    rocm_points: int = 25
    rocm_version_bonus: int = 5
    metal_points: int = 20
    directml_points: int = 15
    openvino_points: int = 10

    weights: dict[str, dict[str, float]] = field(default_factory=_default_weights)

    tiers: TextBand = TextBand(
        ((80, "Enthusiast"), (65, "High-End"), (50, "Mid-Range"), (35, "Entry-Level")),
        "Limited",
    )
    inference_capability: TextBand = TextBand(
        (
            (80, "Run 13B-34B models smoothly"),
            (60, "Run 7B-13B models efficiently"),
            (40, "Run 3B-7B models"),
        ),
        "Limited to small models (<3B)",
    )
    # Training and fine-tuning are VRAM-gated, keyed on VRAM GB
    training_capability: TextBand = TextBand(
        (
            (40, "Full fine-tuning of 13B models"),
            (24, "Full fine-tuning of 7B models"),
            (16, "Full fine-tuning of 3B models"),
            (12, "Full fine-tuning of 1B models"),
        ),
        "Training not recommended",
    )
    fine_tuning_capability: TextBand = TextBand(
        (
            (16, "LoRA fine-tune 13B-34B models"),
            (12, "LoRA fine-tune 7B-13B models"),
            (8, "LoRA fine-tune 3B-7B models"),
            (6, "QLoRA fine-tune small models"),
        ),
        "Fine-tuning limited",
    )
    gpu_model_size: TextBand = TextBand(
        (
            (48, "70B+ (or 34B unquantized)"),
            (24, "34B (or 13B unquantized)"),
            (16, "13B (or 7B unquantized)"),
            (10, "13B (quantized)"),
            (6, "7B"),
        ),
        "3B or smaller",
    )
    cpu_model_size: TextBand = TextBand(
        (
            (64, "34B (CPU, quantized)"),
            (32, "13B (CPU, quantized)"),
            (16, "7B (CPU, quantized)"),
            (8, "3B (CPU, quantized)"),
        ),
        "1B or smaller",
    )
    gpu_model_size_min_vram_gb: float = 4.0

    @classmethod
    def from_dict(cls, overrides: dict[str, Any] | None) -> ScoringConfig:
        """Build a config from the ``scoring`` section of the user config.

        Supported keys: ``weights`` (per-workload component weights, merged
        over the defaults) and ``tiers`` (list of ``[threshold, label]``).
        """
        config = cls()
        if not overrides:
            return config
        if not isinstance(overrides, dict):
            raise LLMCheckError("scoring config must be a mapping")

        changes: dict[str, Any] = {}
        if "weights" in overrides:
            weights = _default_weights()
            for workload, values in dict(overrides["weights"]).items():
                if workload not in weights:
                    raise LLMCheckError(f"unknown scoring workload: {workload}")
                for component, weight in dict(values).items():
                    if component not in COMPONENTS:
                        raise LLMCheckError(f"unknown scoring component: {component}")
                    weights[workload][component] = float(weight)
            changes["weights"] = weights
        if "tiers" in overrides:
            try:
                steps = tuple(
                    (float(threshold), str(label))
                    for threshold, label in overrides["tiers"]
                )
            except (TypeError, ValueError) as exc:
                raise LLMCheckError(f"invalid tier table: {exc}") from exc
            changes["tiers"] = TextBand(
                tuple(sorted(steps, reverse=True)), config.tiers.default
            )
        return dataclasses.replace(config, **changes)
