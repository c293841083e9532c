"""
llmcheck: can this machine run, fine-tune or train large language models?

Detects local hardware, scores it per workload, matches it against a
catalog of quantized models and suggests the upgrades that matter most.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .advisor import UpgradeAdvisor, UpgradeRecommendation, advise
from .benchmark import BenchmarkResult, run_benchmark
from .config import Settings, load_config, save_config
from .errors import LLMCheckError, ReportExportError
from .hardware import HardwareDetector, HardwareSnapshot, detect_hardware
from .models import AnnotatedModel, ModelDatabase, ModelDefinition, match_models
from .report import export_json, export_text, render_report, save_report
from .scoring import CapabilityScorer, SystemScores, score_system
from .scoring_config import ScoringConfig

__all__ = [
    "__version__",
    "AnnotatedModel",
    "BenchmarkResult",
    "CapabilityScorer",
    "HardwareDetector",
    "HardwareSnapshot",
    "LLMCheckError",
    "ModelDatabase",
    "ModelDefinition",
    "ReportExportError",
    "ScoringConfig",
    "Settings",
    "SystemScores",
    "UpgradeAdvisor",
    "UpgradeRecommendation",
    "advise",
    "detect_hardware",
    "export_json",
    "export_text",
    "load_config",
    "match_models",
    "render_report",
    "run_benchmark",
    "save_config",
    "save_report",
    "score_system",
]
