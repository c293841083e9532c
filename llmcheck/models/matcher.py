"""Quantization-aware model compatibility matching.

A model is compatible when at least one quantization option fits in VRAM
(GPU path) or system RAM (CPU path). The score then measures margin:
GPU fits start at 60, CPU-only fits at 40.
"""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Optional

from ..hardware import HardwareSnapshot
from ._types import AnnotatedModel, ModelDefinition, QuantizationOption

logger = logging.getLogger(__name__)

NOT_COMPATIBLE = "Not Compatible"

GPU_BASE_SCORE = 60
GPU_HEADROOM_RATE = 5
GPU_HEADROOM_CAP = 30
CPU_BASE_SCORE = 40
CPU_HEADROOM_RATE = 3
CPU_HEADROOM_CAP = 20
CPU_CORE_BONUS = 10


class CompatibilityResult(NamedTuple):
    is_compatible: bool
    score: int
    performance_tier: str
    option: Optional[QuantizationOption] = None
    runs_on: str = ""


INCOMPATIBLE = CompatibilityResult(False, 0, NOT_COMPATIBLE)


class MalformedModelError(ValueError):
    """Raised for catalog entries that cannot be evaluated."""


def _validate(model: ModelDefinition) -> None:
    if not model.name:
        raise MalformedModelError("model has no name")
    if not model.quantization_options:
        raise MalformedModelError(f"{model.name}: no quantization options")
    for option in model.quantization_options:
        for value in (option.vram_gb, option.ram_gb, option.bits_per_weight):
            if not isinstance(value, (int, float)) or value < 0:
                raise MalformedModelError(
                    f"{model.name}: invalid requirement in {option.format!r}"
                )


def _best(options: Iterable[QuantizationOption]) -> Optional[QuantizationOption]:
    best: Optional[QuantizationOption] = None
    for option in options:
        if best is None or option.bits_per_weight > best.bits_per_weight:
            best = option
    return best


def _evaluate(snapshot: HardwareSnapshot, model: ModelDefinition) -> CompatibilityResult:
    _validate(model)
    vram = snapshot.gpu.vram_gb
    ram = snapshot.memory.total_gb
    cores = snapshot.cpu.physical_cores
    options = model.quantization_options

    best_gpu = _best(q for q in options if vram > 0 and vram >= q.vram_gb)
    best_cpu = _best(q for q in options if ram >= q.ram_gb)

    if best_gpu is not None:
        headroom = vram - best_gpu.vram_gb
        score = GPU_BASE_SCORE + int(min(headroom * GPU_HEADROOM_RATE, GPU_HEADROOM_CAP))
        if best_gpu.bits_per_weight >= 8:
            score += 10
        elif best_gpu.bits_per_weight >= 5:
            score += 5
        if headroom >= 4:
            performance = "Excellent"
        elif headroom >= 2:
            performance = "Good"
        else:
            performance = "Moderate"
        return CompatibilityResult(True, min(score, 100), performance, best_gpu, "GPU")

    if best_cpu is not None:
        headroom = ram - best_cpu.ram_gb
        score = CPU_BASE_SCORE + int(min(headroom * CPU_HEADROOM_RATE, CPU_HEADROOM_CAP))
        if cores >= 8:
            score += CPU_CORE_BONUS
        if cores >= 16 and headroom >= 8:
            performance = "Good"
        elif cores >= 8 and headroom >= 4:
            performance = "Moderate"
        else:
            performance = "Slow"
        return CompatibilityResult(True, min(score, 100), performance, best_cpu, "CPU")

    return INCOMPATIBLE


def match_one(snapshot: HardwareSnapshot, model: ModelDefinition) -> CompatibilityResult:
    """Evaluate one model. Malformed entries are reported as incompatible."""
    try:
        return _evaluate(snapshot, model)
    except Exception as exc:
        logger.warning("Skipping model %r: %s", getattr(model, "name", model), exc)
        return INCOMPATIBLE


def annotate(model: ModelDefinition, result: CompatibilityResult) -> AnnotatedModel:
    return AnnotatedModel(
        model=model,
        is_recommended=result.is_compatible,
        compatibility_score=result.score,
        expected_performance=result.performance_tier,
        best_option=result.option,
        runs_on=result.runs_on,
    )


def match_models(
    snapshot: HardwareSnapshot, models: Iterable[ModelDefinition]
) -> list[AnnotatedModel]:
    """Return compatible models, best score first.

    Entries that cannot be evaluated are logged and skipped; the rest of
    the pass continues.
    """
    matched: list[AnnotatedModel] = []
    for model in models:
        result = match_one(snapshot, model)
        if result.is_compatible:
            matched.append(annotate(model, result))
    matched.sort(key=lambda m: m.compatibility_score, reverse=True)
    logger.info(
        "Found %d compatible models (VRAM %.1f GB, RAM %.1f GB)",
        len(matched),
        snapshot.gpu.vram_gb,
        snapshot.memory.total_gb,
    )
    return matched
