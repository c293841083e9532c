"""Tests for llmcheck.benchmark -- throughput estimates from hardware figures."""

from __future__ import annotations

import pytest
from conftest import make_snapshot

from llmcheck.benchmark import (
    architecture_multiplier,
    comparison_score,
    cpu_multi_score,
    cpu_single_score,
    estimate_tokens_per_second,
    memory_bandwidth_gbps,
    memory_speed_mts,
    run_benchmark,
)
from llmcheck.hardware import CpuInfo, MemoryInfo


class TestCpuScores:
    @pytest.mark.parametrize(
        "model, multiplier",
        [
            ("13th Gen Intel(R) Core(TM) i7-13700K", 1.3),
            ("12th Gen Intel(R) Core(TM) i5-12400", 1.25),
            ("AMD Ryzen 7 7700X 8-Core Processor", 1.3),
            ("AMD Ryzen 5 5600X 6-Core Processor", 1.15),
            ("Intel(R) Core(TM) i7-8700K", 1.0),
        ],
    )
    def test_architecture_multiplier(self, model: str, multiplier: float) -> None:
        assert architecture_multiplier(model) == multiplier

    def test_single_core(self) -> None:
        cpu = CpuInfo(model="AMD Ryzen 7 7700X", base_clock_ghz=3.5)
        assert cpu_single_score(cpu) == 4550.0

    def test_multi_core_linear_up_to_sixteen_threads(self) -> None:
        cpu = CpuInfo(model="Generic", base_clock_ghz=2.0, logical_threads=8)
        assert cpu_multi_score(cpu) == 2000 * 8 / 2

    def test_multi_core_diminishing_above_sixteen(self) -> None:
        cpu = CpuInfo(model="Generic", base_clock_ghz=2.0, logical_threads=32)
        assert cpu_multi_score(cpu) == round(2000 * (16 + 16 * 0.85) / 2)


class TestMemoryBandwidth:
    def test_probed_speed_wins(self) -> None:
        assert memory_speed_mts(MemoryInfo(memory_type="DDR5", speed_mhz=6400)) == 6400

    def test_speed_in_type_string(self) -> None:
        assert memory_speed_mts(MemoryInfo(memory_type="DDR4-3600")) == 3600

    @pytest.mark.parametrize(
        "mem_type, speed", [("DDR5", 5600), ("DDR4", 3200), ("Unknown", 3200), ("LPDDR5", 5600)]
    )
    def test_generation_defaults(self, mem_type: str, speed: int) -> None:
        assert memory_speed_mts(MemoryInfo(memory_type=mem_type)) == speed

    def test_dual_channel_bandwidth(self) -> None:
        assert memory_bandwidth_gbps(MemoryInfo(memory_type="DDR5", speed_mhz=5600)) == 89.6
        assert memory_bandwidth_gbps(MemoryInfo()) == 51.2


class TestEstimates:
    def test_gpu_factor_scales_throughput(self) -> None:
        cpu_only = make_snapshot()
        with_gpu = make_snapshot(gpu=dict(vram_gb=16.0, is_dedicated=True))
        slow = estimate_tokens_per_second(3000, 24000, 51.2, cpu_only)
        fast = estimate_tokens_per_second(3000, 24000, 51.2, with_gpu)
        assert fast["7B"] > slow["7B"]

    def test_larger_models_are_slower(self, rig) -> None:
        tps = run_benchmark(rig).tokens_per_second
        assert list(tps) == ["7B", "13B", "34B", "70B"]
        assert tps["7B"] > tps["13B"] > tps["34B"] > tps["70B"]

    def test_floors(self) -> None:
        tps = estimate_tokens_per_second(0, 0, 0, make_snapshot())
        assert tps == {"7B": 1.0, "13B": 0.5, "34B": 0.3, "70B": 0.1}

    def test_reference_system_scores_about_one_hundred(self) -> None:
        assert comparison_score(1800, 14000, 44.8) == 100.0

    def test_run_benchmark(self, rig) -> None:
        result = run_benchmark(rig)
        assert result.cpu_single_core_score == 4550.0
        assert result.cpu_multi_core_score == 36400.0
        assert result.memory_bandwidth_gbps == 89.6
        assert result.comparison_to_reference == 240.6
        data = result.to_dict()
        assert set(data["tokens_per_second"]) == {"7B", "13B", "34B", "70B"}
        assert data["timestamp"] > 0
