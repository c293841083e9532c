"""Report export: JSON and plain-text renderings of one capability check."""

from __future__ import annotations

import datetime
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from .advisor import UpgradeRecommendation
from .errors import ReportExportError
from .hardware import HardwareSnapshot
from .models import AnnotatedModel
from .scoring import SystemScores

logger = logging.getLogger(__name__)

REPORT_VERSION = "1.0"
APPLICATION_NAME = "LLM Capability Checker"

_RULE = "=" * 80
_SECTION_RULE = "-" * 80
_LABEL_WIDTH = 20


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _row(label: str, value: Any, indent: int = 2) -> str:
    return f"{' ' * indent}{label + ':':<{_LABEL_WIDTH}}{value}"


def export_json(
    snapshot: HardwareSnapshot,
    scores: SystemScores,
    models: Sequence[AnnotatedModel],
    upgrades: Sequence[UpgradeRecommendation] = (),
) -> str:
    """Serialize the full result set as indented JSON."""
    from . import __version__

    report = {
        "metadata": {
            "generated_at": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            "report_version": REPORT_VERSION,
            "application": APPLICATION_NAME,
            "llmcheck_version": __version__,
        },
        "hardware": snapshot.to_dict(),
        "scores": scores.to_dict(),
        "recommended_models": [m.to_dict() for m in models],
        "upgrades": [u.to_dict() for u in upgrades],
    }
    try:
        content = json.dumps(report, indent=2)
    except (TypeError, ValueError) as exc:
        raise ReportExportError(f"could not serialize report: {exc}") from exc
    logger.info("Exported report as JSON")
    return content


def export_text(
    snapshot: HardwareSnapshot,
    scores: SystemScores,
    models: Sequence[AnnotatedModel],
    upgrades: Sequence[UpgradeRecommendation] = (),
) -> str:
    """Render a fixed-width plain-text report."""
    cpu, gpu, mem, disk, fw = (
        snapshot.cpu,
        snapshot.gpu,
        snapshot.memory,
        snapshot.storage,
        snapshot.frameworks,
    )
    b = scores.breakdown
    lines = [
        _RULE,
        f"{'LLM CAPABILITY CHECKER REPORT':^80}".rstrip(),
        _RULE,
        f"Generated: {datetime.datetime.now():%Y-%m-%d %H:%M:%S}",
        "",
        "SYSTEM OVERVIEW",
        _SECTION_RULE,
        _row("Overall Score", f"{scores.overall_score}/100", 0),
        _row("System Tier", scores.system_tier, 0),
        _row("Recommended Size", scores.recommended_model_size, 0),
        _row("Primary Bottleneck", scores.bottleneck_summary, 0),
        _row("Operating System", snapshot.os_tag, 0),
        "",
        "HARDWARE INFORMATION",
        _SECTION_RULE,
        "CPU:",
        _row("Model", cpu.model),
        _row("Cores", cpu.physical_cores),
        _row("Threads", cpu.logical_threads),
        _row("Base Clock", f"{cpu.base_clock_ghz:.2f} GHz"),
        _row("Architecture", cpu.architecture),
        _row("AVX2 Support", _yes_no(cpu.has_avx2)),
        _row("AVX-512 Support", _yes_no(cpu.has_avx512)),
        "",
        "GPU:",
        _row("Model", gpu.model),
        _row("Vendor", gpu.vendor),
        _row("VRAM", f"{gpu.vram_gb:g} GB"),
        _row("Architecture", gpu.architecture),
        _row("Compute Capability", gpu.compute_capability),
        _row("Type", "Dedicated" if gpu.is_dedicated else "Integrated"),
        _row("FP16 Support", _yes_no(gpu.supports_fp16)),
        _row("INT8 Support", _yes_no(gpu.supports_int8)),
        "",
        "Memory:",
        _row("Total RAM", f"{mem.total_gb:g} GB"),
        _row("Available RAM", f"{mem.available_gb:g} GB"),
        _row("Type", mem.memory_type),
        _row("Speed", f"{mem.speed_mhz} MHz"),
        "",
        "Storage:",
        _row("Type", disk.storage_type),
        _row("Total", f"{disk.total_gb:g} GB"),
        _row("Available", f"{disk.available_gb:g} GB"),
        _row("Read Speed", f"{disk.read_speed_mbps} MB/s"),
        _row("Write Speed", f"{disk.write_speed_mbps} MB/s"),
        "",
        "ML Frameworks:",
        _row("CUDA", f"Yes ({fw.cuda_version or 'installed'})" if fw.cuda_available else "No"),
        _row("ROCm", f"Yes ({fw.rocm_version or 'installed'})" if fw.rocm_available else "No"),
        _row("Metal", _yes_no(fw.metal_available)),
        _row("DirectML", _yes_no(fw.directml_available)),
        _row("OpenVINO", _yes_no(fw.openvino_available)),
        "",
        "COMPONENT SCORES",
        _SECTION_RULE,
        _row("CPU Score", f"{b.cpu}/100", 0),
        _row("Memory Score", f"{b.memory}/100", 0),
        _row("GPU Score", f"{b.gpu}/100", 0),
        _row("Storage Score", f"{b.storage}/100", 0),
        _row("Framework Score", f"{b.frameworks}/100", 0),
        "",
        "WORKLOAD SCORES",
        _SECTION_RULE,
        _row("Inference", f"{scores.inference_score}/100  {scores.inference_capability}", 0),
        _row("Training", f"{scores.training_score}/100  {scores.training_capability}", 0),
        _row("Fine-tuning", f"{scores.fine_tuning_score}/100  {scores.fine_tuning_capability}", 0),
        "",
        "RECOMMENDED MODELS",
        _SECTION_RULE,
    ]

    if not models:
        lines.append("No models recommended for this system configuration.")
    for i, annotated in enumerate(models, 1):
        model = annotated.model
        lines.append(f"{i}. {model.name}")
        lines.append(_row("Family", model.family, 3))
        lines.append(_row("Parameter Size", model.parameter_size, 3))
        lines.append(_row("Compatibility", f"{annotated.compatibility_score}% ({annotated.bucket})", 3))
        lines.append(_row("Performance", annotated.expected_performance, 3))
        if annotated.best_option is not None:
            lines.append(
                _row("Best Variant", f"{annotated.best_option.format} on {annotated.runs_on}", 3)
            )
        if model.url:
            lines.append(_row("URL", model.url, 3))
        lines.append(_row("Min VRAM", f"{model.min_vram_gb:g} GB", 3))
        lines.append(_row("Min RAM", f"{model.min_ram_gb:g} GB", 3))
        lines.append(_row("Min Storage", f"{model.min_storage_gb} GB", 3))
        lines.append("")

    if upgrades:
        lines += ["UPGRADE RECOMMENDATIONS", _SECTION_RULE]
        for rec in upgrades:
            lines.append(f"[{rec.priority}] {rec.component}: {rec.recommended_specs}")
            lines.append(_row("Current", rec.current_specs, 3))
            lines.append(_row("Score Impact", f"+{rec.score_improvement}", 3))
            lines.append(_row("Est. Cost", f"${rec.estimated_cost}", 3))
            lines.append("")

    lines += [_RULE, "End of Report", _RULE]
    logger.info("Exported report as text")
    return "\n".join(lines) + "\n"


REPORT_FORMATS = {"json": export_json, "text": export_text}


def render_report(
    fmt: str,
    snapshot: HardwareSnapshot,
    scores: SystemScores,
    models: Sequence[AnnotatedModel],
    upgrades: Sequence[UpgradeRecommendation] = (),
) -> str:
    try:
        exporter = REPORT_FORMATS[fmt.lower()]
    except KeyError:
        raise ReportExportError(
            f"unknown report format {fmt!r}, expected one of {sorted(REPORT_FORMATS)}"
        ) from None
    return exporter(snapshot, scores, models, upgrades)


def save_report(content: str, path: str | Path) -> Path:
    """Write ``content`` to ``path``, creating parent directories."""
    target = Path(path).expanduser()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise ReportExportError(f"could not write report to {target}: {exc}") from exc
    logger.info("Report saved to %s", target)
    return target
