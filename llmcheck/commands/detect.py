"""llmcheck detect -- print the detected hardware snapshot."""

from __future__ import annotations

import click

from llmcheck.cli_helpers import _detect, _echo_json, _load_settings
from llmcheck.hardware import HardwareSnapshot


def _yes_no(flag: bool) -> str:
    return click.style("yes", fg="green") if flag else click.style("no", fg="red")


def _print_snapshot(snapshot: HardwareSnapshot) -> None:
    cpu, mem, gpu, disk, fw = (
        snapshot.cpu,
        snapshot.memory,
        snapshot.gpu,
        snapshot.storage,
        snapshot.frameworks,
    )
    click.echo(click.style(f"System ({snapshot.os_tag})", bold=True))
    click.echo(f"  CPU:       {cpu.model}")
    click.echo(
        f"             {cpu.physical_cores} cores / {cpu.logical_threads} threads, "
        f"{cpu.base_clock_ghz:.2f} GHz, {cpu.architecture}"
    )
    click.echo(f"             AVX2 {_yes_no(cpu.has_avx2)}  AVX-512 {_yes_no(cpu.has_avx512)}")
    click.echo(
        f"  Memory:    {mem.total_gb:g} GB {mem.memory_type} "
        f"({mem.available_gb:g} GB available"
        + (f", {mem.speed_mhz} MHz)" if mem.speed_mhz else ")")
    )
    kind = "dedicated" if gpu.is_dedicated else "integrated"
    click.echo(f"  GPU:       {gpu.model} [{gpu.vendor}, {kind}]")
    click.echo(
        f"             {gpu.vram_gb:g} GB VRAM, {gpu.architecture}"
        + (f", compute {gpu.compute_capability}" if gpu.compute_capability else "")
    )
    click.echo(
        f"  Storage:   {disk.storage_type}, {disk.available_gb:g} of {disk.total_gb:g} GB free"
    )
    detected = fw.detected
    click.echo(f"  Frameworks: {', '.join(detected) if detected else 'none detected'}")


def register(cli: click.Group) -> None:
    @cli.command()
    @click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
    def detect(as_json: bool) -> None:
        """Detect CPU, memory, GPU, storage and ML frameworks."""
        settings = _load_settings()
        snapshot = _detect(settings, quiet=as_json)
        if as_json:
            _echo_json(snapshot.to_dict())
            return
        _print_snapshot(snapshot)
