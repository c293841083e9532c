"""Capability scoring: hardware snapshot -> component and workload scores.

All functions here are pure. :meth:`CapabilityScorer.score` never raises;
an unexpected error yields an all-zero :class:`SystemScores`.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any

from .hardware import CpuInfo, FrameworkInfo, GpuInfo, HardwareSnapshot, MemoryInfo, StorageInfo
from .hardware._types import UNKNOWN
from .scoring_config import ScoringConfig

logger = logging.getLogger(__name__)

# Tie-break order for the bottleneck
COMPONENT_LABELS: dict[str, str] = {
    "gpu": "GPU",
    "memory": "Memory",
    "cpu": "CPU",
    "storage": "Storage",
    "frameworks": "Frameworks",
}


def clamp(value: float, low: int = 0, high: int = 100) -> int:
    return int(max(low, min(high, value)))


@dataclass(frozen=True)
class ScoreBreakdown:
    cpu: int = 0
    memory: int = 0
    gpu: int = 0
    storage: int = 0
    frameworks: int = 0

    def ordered(self) -> list[tuple[str, int]]:
        """``(label, score)`` pairs in bottleneck tie-break order."""
        return [(label, getattr(self, key)) for key, label in COMPONENT_LABELS.items()]

    def by_label(self, label: str) -> int:
        return dict(self.ordered()).get(label, 0)


@dataclass(frozen=True)
class SystemScores:
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)
    inference_score: int = 0
    training_score: int = 0
    fine_tuning_score: int = 0
    inference_capability: str = ""
    training_capability: str = ""
    fine_tuning_capability: str = ""
    primary_bottleneck: str = UNKNOWN
    system_tier: str = "Limited"
    recommended_model_size: str = "1B or smaller"

    @property
    def overall_score(self) -> int:
        return self.inference_score

    @property
    def bottleneck_summary(self) -> str:
        """e.g. ``"GPU (5/100)"``."""
        if self.primary_bottleneck == UNKNOWN:
            return UNKNOWN
        score = self.breakdown.by_label(self.primary_bottleneck)
        return f"{self.primary_bottleneck} ({score}/100)"

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["overall_score"] = self.overall_score
        data["bottleneck_summary"] = self.bottleneck_summary
        return data


class CapabilityScorer:
    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    def score(self, snapshot: HardwareSnapshot) -> SystemScores:
        try:
            return self._score(snapshot)
        except Exception:
            logger.exception("Scoring failed, returning zero scores")
            return SystemScores()

    def _score(self, snapshot: HardwareSnapshot) -> SystemScores:
        cfg = self.config
        breakdown = ScoreBreakdown(
            cpu=self.cpu_score(snapshot.cpu),
            memory=self.memory_score(snapshot.memory),
            gpu=self.gpu_score(snapshot.gpu),
            storage=self.storage_score(snapshot.storage),
            frameworks=self.framework_score(snapshot.frameworks),
        )
        inference = self._weighted(breakdown, "inference")
        training = self._weighted(breakdown, "training")
        fine_tuning = self._weighted(breakdown, "fine_tuning")
        vram = snapshot.gpu.vram_gb

        scores = SystemScores(
            breakdown=breakdown,
            inference_score=inference,
            training_score=training,
            fine_tuning_score=fine_tuning,
            inference_capability=cfg.inference_capability.lookup(inference),
            training_capability=cfg.training_capability.lookup(vram),
            fine_tuning_capability=cfg.fine_tuning_capability.lookup(vram),
            primary_bottleneck=self.bottleneck(breakdown),
            system_tier=cfg.tiers.lookup((inference + training + fine_tuning) // 3),
            recommended_model_size=self.recommended_model_size(snapshot),
        )
        logger.debug("Scores: %s", scores)
        return scores

    def _weighted(self, breakdown: ScoreBreakdown, workload: str) -> int:
        weights = self.config.weights[workload]
        total = sum(getattr(breakdown, comp) * w for comp, w in weights.items())
        return clamp(round(total))

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def cpu_score(self, cpu: CpuInfo) -> int:
        cfg = self.config
        points = cfg.cpu_cores.apply(cpu.physical_cores)
        points += cfg.cpu_clock.apply(cpu.base_clock_ghz)
        if cpu.has_avx512:
            points += cfg.cpu_avx512_points
        elif cpu.has_avx2:
            points += cfg.cpu_avx2_points
        elif "64" in cpu.architecture:
            points += cfg.cpu_64bit_points
        return clamp(points)

    def memory_score(self, memory: MemoryInfo) -> int:
        cfg = self.config
        points = cfg.memory_capacity.apply(memory.total_gb)
        mem_type = memory.memory_type.upper()
        for name, type_points in cfg.memory_types:
            if name in mem_type:
                points += type_points
                break
        else:
            if mem_type and mem_type != UNKNOWN.upper():
                points += cfg.memory_other_type_points
        points += cfg.memory_speed.apply(memory.speed_mhz)
        return clamp(points)

    def gpu_score(self, gpu: GpuInfo) -> int:
        cfg = self.config
        if not gpu.is_dedicated or gpu.vram_gb < cfg.gpu_min_vram_gb:
            if gpu.is_dedicated:
                return cfg.gpu_small_dedicated_points
            return cfg.gpu_integrated_points

        points = cfg.gpu_vram.apply(gpu.vram_gb)
        points += self._compute_tier_points(gpu)
        if gpu.supports_fp16 and gpu.supports_int8:
            points += cfg.gpu_fp16_int8_points
        elif gpu.supports_fp16:
            points += cfg.gpu_fp16_points
        elif gpu.supports_int8:
            points += cfg.gpu_int8_points
        # a bigger dedicated card never scores below the small-card floor
        return clamp(max(points, cfg.gpu_small_dedicated_points))

    def _compute_tier_points(self, gpu: GpuInfo) -> int:
        cfg = self.config
        try:
            return cfg.gpu_compute.apply(float(gpu.compute_capability))
        except ValueError:
            pass
        arch = gpu.architecture.upper().replace(" ", "")
        if not arch or arch == UNKNOWN.upper():
            return 0
        for name, points in cfg.gpu_architectures:
            if name in arch:
                return points
        return cfg.gpu_other_architecture_points

    def storage_score(self, storage: StorageInfo) -> int:
        cfg = self.config
        type_points = dict(cfg.storage_types).get(
            storage.storage_type, cfg.storage_unknown_type_points
        )
        points = type_points
        points += cfg.storage_read_speed.apply(storage.read_speed_mbps)
        points += cfg.storage_free_space.apply(storage.available_gb)
        return clamp(points)

    def framework_score(self, frameworks: FrameworkInfo) -> int:
        cfg = self.config
        points = cfg.frameworks_base
        if frameworks.cuda_available:
            points += cfg.cuda_points
            for prefix, bonus in cfg.cuda_version_bonus:
                if frameworks.cuda_version.startswith(prefix):
                    points += bonus
                    break
        if frameworks.rocm_available:
            points += cfg.rocm_points
            if frameworks.rocm_version:
                points += cfg.rocm_version_bonus
        if frameworks.metal_available:
            points += cfg.metal_points
        if frameworks.directml_available:
            points += cfg.directml_points
        if frameworks.openvino_available:
            points += cfg.openvino_points
        return clamp(points)

    # ------------------------------------------------------------------
    # Derived labels
    # ------------------------------------------------------------------

    @staticmethod
    def bottleneck(breakdown: ScoreBreakdown) -> str:
        # min() keeps the first of equal scores, matching the label order
        label, _ = min(breakdown.ordered(), key=lambda item: item[1])
        return label

    def recommended_model_size(self, snapshot: HardwareSnapshot) -> str:
        cfg = self.config
        gpu = snapshot.gpu
        if gpu.is_dedicated and gpu.vram_gb >= cfg.gpu_model_size_min_vram_gb:
            return cfg.gpu_model_size.lookup(gpu.vram_gb)
        return cfg.cpu_model_size.lookup(snapshot.memory.total_gb)


def score_system(
    snapshot: HardwareSnapshot, config: ScoringConfig | None = None
) -> SystemScores:
    """One-liner API: score a snapshot with the default (or given) config."""
    return CapabilityScorer(config).score(snapshot)
