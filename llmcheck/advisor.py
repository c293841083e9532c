"""Upgrade advisor: threshold-triggered, bottleneck-prioritised recommendations.

Whether a component gets recommendations at all depends only on fixed
trigger thresholds. The bottleneck ranking decides priority: the weakest
component's recommendations become "High", the runner-up's are raised to
at least "Medium", everything else keeps its tier default.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Optional

from .hardware import HardwareSnapshot
from .scoring import SystemScores

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 5

PRIORITY_WEIGHTS: dict[str, int] = {"High": 3, "Medium": 2, "Low": 1}


@dataclass(frozen=True)
class UpgradeRecommendation:
    component: str  # "GPU", "RAM", "Storage", "CPU", "Software"
    current_specs: str
    recommended_specs: str
    priority: str  # "High", "Medium", "Low"
    score_improvement: int
    estimated_cost: int  # USD
    reason: str
    specific_product: Optional[str] = None
    impact_description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _rank(tier_default: str, role: Optional[str]) -> str:
    """Resolve priority from the component's bottleneck role."""
    if role == "primary":
        return "High"
    if role == "secondary" and tier_default == "Low":
        return "Medium"
    return tier_default


class UpgradeAdvisor:
    def advise(
        self, snapshot: HardwareSnapshot, scores: SystemScores
    ) -> list[UpgradeRecommendation]:
        try:
            return self._advise(snapshot, scores)
        except Exception:
            logger.exception("Could not generate upgrade recommendations")
            return []

    def _advise(
        self, snapshot: HardwareSnapshot, scores: SystemScores
    ) -> list[UpgradeRecommendation]:
        breakdown = scores.breakdown
        # Stable sort keeps the fixed component order for equal scores
        ranked = [label for label, _ in sorted(breakdown.ordered(), key=lambda x: x[1])]
        roles = {ranked[0]: "primary", ranked[1]: "secondary"}

        recs: list[UpgradeRecommendation] = []
        if snapshot.gpu.vram_gb < 12 or breakdown.gpu < 60:
            recs.extend(self._gpu_upgrades(snapshot, roles.get("GPU")))
        if snapshot.memory.total_gb < 32 or breakdown.memory < 60:
            recs.extend(self._ram_upgrades(snapshot, roles.get("Memory")))
        if "nvme" not in snapshot.storage.storage_type.lower() or breakdown.storage < 60:
            recs.extend(self._storage_upgrades(snapshot, roles.get("Storage")))
        if snapshot.cpu.physical_cores < 8 or breakdown.cpu < 50:
            recs.extend(self._cpu_upgrades(snapshot, roles.get("CPU")))
        recs.extend(self._framework_recommendations(snapshot))

        recs.sort(
            key=lambda r: (PRIORITY_WEIGHTS.get(r.priority, 0), r.score_improvement),
            reverse=True,
        )
        final = recs[:MAX_RECOMMENDATIONS]
        logger.info("Generated %d upgrade recommendations", len(final))
        return final

    # ------------------------------------------------------------------
    # Per-component generators
    # ------------------------------------------------------------------

    def _gpu_upgrades(
        self, snapshot: HardwareSnapshot, role: Optional[str]
    ) -> list[UpgradeRecommendation]:
        gpu = snapshot.gpu
        current = f"{gpu.model} ({gpu.vram_gb:g}GB VRAM)"
        recs = []
        if gpu.vram_gb < 16:
            recs.append(
                UpgradeRecommendation(
                    component="GPU",
                    current_specs=current,
                    recommended_specs="16GB VRAM GPU",
                    specific_product="NVIDIA RTX 4060 Ti 16GB",
                    impact_description="Run 13B models smoothly, enable 7B models unquantized",
                    priority=_rank("Medium", role),
                    estimated_cost=500,
                    score_improvement=25,
                    reason="16GB VRAM is the sweet spot for running most popular models efficiently",
                )
            )
        if gpu.vram_gb < 12:
            recs.append(
                UpgradeRecommendation(
                    component="GPU",
                    current_specs=current,
                    recommended_specs="12GB VRAM GPU (faster)",
                    specific_product="NVIDIA RTX 4070 Ti 12GB",
                    impact_description="High throughput for 7B-13B models",
                    priority=_rank("Medium", role),
                    estimated_cost=800,
                    score_improvement=30,
                    reason="A newer GPU architecture gives faster inference",
                )
            )
        if gpu.vram_gb < 24:
            recs.append(
                UpgradeRecommendation(
                    component="GPU",
                    current_specs=current,
                    recommended_specs="24GB VRAM GPU",
                    specific_product="NVIDIA RTX 4090 24GB",
                    impact_description="Run 34B models, several 7B-13B models at once, or fine-tune",
                    priority=_rank("Low", role),
                    estimated_cost=1600,
                    score_improvement=45,
                    reason="24GB enables large model inference and fine-tuning",
                )
            )
        return recs

    def _ram_upgrades(
        self, snapshot: HardwareSnapshot, role: Optional[str]
    ) -> list[UpgradeRecommendation]:
        memory = snapshot.memory
        current = f"{memory.total_gb:g}GB {memory.memory_type}"
        recs = []
        if memory.total_gb < 32:
            recs.append(
                UpgradeRecommendation(
                    component="RAM",
                    current_specs=current,
                    recommended_specs="32GB RAM",
                    specific_product="32GB DDR4/DDR5 (2x16GB kit)",
                    impact_description="Larger context windows and CPU fallback for 7B-13B models",
                    priority=_rank("Medium", role),
                    estimated_cost=100,
                    score_improvement=20,
                    reason="32GB leaves room for models alongside the operating system",
                )
            )
        if memory.total_gb < 64 and snapshot.gpu.vram_gb >= 12:
            recs.append(
                UpgradeRecommendation(
                    component="RAM",
                    current_specs=current,
                    recommended_specs="64GB RAM",
                    specific_product="64GB DDR4/DDR5 (2x32GB kit)",
                    impact_description="CPU offload for models larger than VRAM",
                    priority=_rank("Low", role),
                    estimated_cost=200,
                    score_improvement=15,
                    reason="64GB allows partial CPU offload of 34B+ models",
                )
            )
        return recs

    def _storage_upgrades(
        self, snapshot: HardwareSnapshot, role: Optional[str]
    ) -> list[UpgradeRecommendation]:
        storage = snapshot.storage
        recs = []
        if "nvme" not in storage.storage_type.lower():
            recs.append(
                UpgradeRecommendation(
                    component="Storage",
                    current_specs=f"{storage.storage_type} ({storage.read_speed_mbps}MB/s)",
                    recommended_specs="NVMe SSD (3500+ MB/s)",
                    specific_product="1TB NVMe Gen4 SSD",
                    impact_description="Faster model loading and shorter startup times",
                    priority=_rank("Low", role),
                    estimated_cost=100,
                    score_improvement=15,
                    reason="NVMe cuts load times for multi-gigabyte model files",
                )
            )
        if storage.available_gb < 200:
            recs.append(
                UpgradeRecommendation(
                    component="Storage",
                    current_specs=f"{storage.available_gb:g}GB available",
                    recommended_specs="Additional 500GB+ storage",
                    specific_product="2TB NVMe SSD",
                    impact_description="Keep several models on disk",
                    priority=_rank("Low", role),
                    estimated_cost=150,
                    score_improvement=5,
                    reason="Quantized models take 4-40GB each",
                )
            )
        return recs

    def _cpu_upgrades(
        self, snapshot: HardwareSnapshot, role: Optional[str]
    ) -> list[UpgradeRecommendation]:
        cpu = snapshot.cpu
        if cpu.physical_cores >= 8 and cpu.base_clock_ghz >= 3.0:
            return []
        return [
            UpgradeRecommendation(
                component="CPU",
                current_specs=(
                    f"{cpu.model} ({cpu.physical_cores} cores, {cpu.base_clock_ghz:.1f}GHz)"
                ),
                recommended_specs="8+ cores, 3.5GHz+, AVX2/AVX-512 support",
                specific_product="AMD Ryzen 7 7700X or Intel i7-13700K",
                impact_description="Faster prompt processing and CPU inference",
                priority=_rank("Low", role),
                estimated_cost=350,
                score_improvement=15,
                reason="A modern CPU speeds up prompt processing and CPU-only inference",
            )
        ]

    def _framework_recommendations(
        self, snapshot: HardwareSnapshot
    ) -> list[UpgradeRecommendation]:
        vendor = snapshot.gpu.vendor.upper()
        fw = snapshot.frameworks
        if vendor == "NVIDIA" and not fw.cuda_available:
            return [
                UpgradeRecommendation(
                    component="Software",
                    current_specs="CUDA not detected",
                    recommended_specs="CUDA Toolkit installed",
                    specific_product="NVIDIA CUDA Toolkit 12.x",
                    impact_description="Enable GPU acceleration",
                    priority="High",
                    estimated_cost=0,
                    score_improvement=40,
                    reason="CUDA is free and gives large speedups on NVIDIA GPUs",
                )
            ]
        if vendor == "AMD" and snapshot.os_tag == "linux" and not fw.rocm_available:
            return [
                UpgradeRecommendation(
                    component="Software",
                    current_specs="ROCm not detected",
                    recommended_specs="ROCm installed",
                    specific_product="AMD ROCm 6.x",
                    impact_description="Enable GPU acceleration on AMD GPUs",
                    priority="High",
                    estimated_cost=0,
                    score_improvement=30,
                    reason="ROCm is free and lets llama.cpp and PyTorch use the GPU",
                )
            ]
        if vendor == "INTEL" and not fw.openvino_available:
            return [
                UpgradeRecommendation(
                    component="Software",
                    current_specs="OpenVINO not detected",
                    recommended_specs="OpenVINO installed",
                    specific_product="Intel OpenVINO toolkit",
                    impact_description="Accelerate inference on Intel CPUs and GPUs",
                    priority="Medium",
                    estimated_cost=0,
                    score_improvement=10,
                    reason="OpenVINO is free and optimised for Intel hardware",
                )
            ]
        return []


def advise(snapshot: HardwareSnapshot, scores: SystemScores) -> list[UpgradeRecommendation]:
    return UpgradeAdvisor().advise(snapshot, scores)
