"""Tests for NVIDIA detection (llmcheck.hardware._nvidia)."""

from __future__ import annotations

from llmcheck.hardware._nvidia import (
    architecture_for,
    lookup_compute_capability,
    query_nvidia_smi,
)


class _ScriptedRunner:
    """Return canned output per argv[1] and record every call."""

    def __init__(self, outputs: dict[str, str | None]) -> None:
        self.outputs = outputs
        self.calls: list[list[str]] = []

    def __call__(self, args) -> str | None:
        self.calls.append(list(args))
        return self.outputs.get(args[1])


_FULL_QUERY = "--query-gpu=name,memory.total,driver_version,compute_cap"
_SHORT_QUERY = "--query-gpu=name,memory.total"


class TestLookups:
    def test_longest_prefix_wins(self) -> None:
        assert lookup_compute_capability("NVIDIA L40S") == "8.9"
        assert lookup_compute_capability("NVIDIA GeForce RTX 3080") == "8.6"

    def test_unknown_name(self) -> None:
        assert lookup_compute_capability("Some Future GPU") == "Unknown"

    def test_architecture_for(self) -> None:
        assert architecture_for("8.9") == "Ada Lovelace"
        assert architecture_for("8.6") == "Ampere"
        assert architecture_for("9.0") == "Hopper"
        assert architecture_for("12.0") == "Blackwell"
        assert architecture_for("2.1") == "Legacy"
        assert architecture_for("Unknown") == "Unknown"


class TestQueryNvidiaSmi:
    def test_full_query(self) -> None:
        runner = _ScriptedRunner({_FULL_QUERY: "NVIDIA GeForce RTX 3060, 12288, 535.129.03, 8.6\n"})
        gpu = query_nvidia_smi(runner)
        assert gpu is not None
        assert gpu.model == "NVIDIA GeForce RTX 3060"
        assert gpu.vram_gb == 12.0
        assert gpu.compute_capability == "8.6"
        assert gpu.is_dedicated is True
        assert gpu.supports_fp16 and gpu.supports_int8
        assert len(runner.calls) == 1

    def test_falls_back_to_short_query(self) -> None:
        runner = _ScriptedRunner({_FULL_QUERY: None, _SHORT_QUERY: "NVIDIA GeForce RTX 2080, 8192\n"})
        gpu = query_nvidia_smi(runner)
        assert gpu is not None
        assert gpu.vram_gb == 8.0
        # Capability comes from the name table when the driver cannot report it
        assert gpu.compute_capability == "7.5"
        assert gpu.architecture == "Turing"
        assert len(runner.calls) == 2

    def test_not_supported_field_uses_table(self) -> None:
        runner = _ScriptedRunner({_FULL_QUERY: "Tesla T4, 15360, 470.82.01, [N/A]\n"})
        gpu = query_nvidia_smi(runner)
        assert gpu is not None
        assert gpu.compute_capability == "7.5"

    def test_multi_gpu_picks_largest(self) -> None:
        output = (
            "NVIDIA GeForce RTX 3060, 12288, 550.54.14, 8.6\n"
            "NVIDIA GeForce RTX 4090, 24564, 550.54.14, 8.9\n"
        )
        gpu = query_nvidia_smi(_ScriptedRunner({_FULL_QUERY: output}))
        assert gpu is not None
        assert gpu.model == "NVIDIA GeForce RTX 4090"

    def test_absent_tool(self) -> None:
        assert query_nvidia_smi(_ScriptedRunner({})) is None

    def test_old_card_lacks_int8(self) -> None:
        gpu = query_nvidia_smi(_ScriptedRunner({_FULL_QUERY: "GeForce GTX 970, 4096, 470.0, 5.2\n"}))
        assert gpu is not None
        assert gpu.architecture == "Maxwell"
        assert gpu.supports_fp16 is False
        assert gpu.supports_int8 is False
