"""Tests for the Windows probe adapter (llmcheck.hardware._windows)."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from llmcheck.hardware._windows import WindowsProbe

_GB = 1024**3


class _FakePowerShell:
    """Answer PowerShell commands by the CIM class (or registry key) they mention."""

    def __init__(self, answers: dict[str, object]) -> None:
        self.answers = answers
        self.commands: list[str] = []

    def __call__(self, args) -> str | None:
        assert args[:3] == ["powershell", "-NoProfile", "-Command"]
        command = args[3]
        self.commands.append(command)
        for key, payload in self.answers.items():
            if key in command:
                return payload if isinstance(payload, str) else json.dumps(payload)
        return None


@pytest.fixture
def probe() -> WindowsProbe:
    return WindowsProbe()


class TestQuery:
    def test_builds_pipeline(self, probe: WindowsProbe) -> None:
        shell = _FakePowerShell({"Win32_LogicalDisk": {"Size": 1}})
        with patch.object(probe, "run", side_effect=shell):
            rows = probe.query("Win32_LogicalDisk", ["Size", "FreeSpace"], where="DeviceID -eq 'C:'")
        assert rows == [{"Size": 1}]
        assert shell.commands[0] == (
            "Get-CimInstance Win32_LogicalDisk | Where-Object DeviceID -eq 'C:'"
            " | Select-Object Size,FreeSpace | ConvertTo-Json"
        )

    def test_unparseable_output(self, probe: WindowsProbe) -> None:
        with patch.object(probe, "run", return_value="not json"):
            assert probe.query("Win32_Processor", ["Name"]) == []


class TestCpu:
    def test_processor_rows(self, probe: WindowsProbe) -> None:
        shell = _FakePowerShell(
            {
                "Win32_Processor": {
                    "Name": "13th Gen Intel(R) Core(TM) i7-13700K ",
                    "NumberOfCores": 16,
                    "NumberOfLogicalProcessors": 24,
                    "MaxClockSpeed": 3400,
                }
            }
        )
        with patch.object(probe, "run", side_effect=shell), patch(
            "llmcheck.hardware._windows._vector_extensions", return_value=(True, False)
        ):
            cpu = probe.probe_cpu()
        assert cpu.model == "13th Gen Intel(R) Core(TM) i7-13700K"
        assert cpu.physical_cores == 16
        assert cpu.logical_threads == 24
        assert cpu.base_clock_ghz == 3.4
        assert cpu.has_avx2 is True


class TestMemory:
    def test_smbios_type_and_speed(self, probe: WindowsProbe) -> None:
        shell = _FakePowerShell(
            {
                "Win32_ComputerSystem": {"TotalPhysicalMemory": 64 * _GB},
                "Win32_OperatingSystem": {"FreePhysicalMemory": 32 * 1024 * 1024},
                "Win32_PhysicalMemory": [
                    {"SMBIOSMemoryType": 34, "Speed": 6000},
                    {"SMBIOSMemoryType": 34, "Speed": 6000},
                ],
            }
        )
        with patch.object(probe, "run", side_effect=shell):
            memory = probe.probe_memory()
        assert memory.total_gb == 64.0
        assert memory.available_gb == 32.0
        assert memory.memory_type == "DDR5"
        assert memory.speed_mhz == 6000


class TestGpu:
    def test_registry_vram_overrides_saturated_adapter_ram(self, probe: WindowsProbe) -> None:
        shell = _FakePowerShell(
            {
                "Win32_VideoController": [
                    {"Name": "Microsoft Remote Display Adapter", "AdapterRAM": 0},
                    {"Name": "Intel(R) UHD Graphics 770", "AdapterRAM": 2 * _GB},
                    {"Name": "NVIDIA GeForce RTX 4080", "AdapterRAM": 4 * _GB},
                ],
                "qwMemorySize": [{"HardwareInformation.qwMemorySize": 16 * _GB}],
            }
        )
        with patch.object(probe, "run", side_effect=shell):
            gpus = probe.list_gpus()
        assert [g.model for g in gpus] == ["Intel(R) UHD Graphics 770", "NVIDIA GeForce RTX 4080"]
        assert gpus[0].vram_gb == 2.0
        assert gpus[1].vram_gb == 16.0


class TestStorage:
    def _logical(self) -> dict:
        return {"Win32_LogicalDisk": {"Size": 1000 * _GB, "FreeSpace": 300 * _GB}}

    def test_physical_disk_bus_type(self, probe: WindowsProbe) -> None:
        shell = _FakePowerShell(
            {**self._logical(), "MSFT_PhysicalDisk": {"BusType": 17, "MediaType": 4}}
        )
        with patch.object(probe, "run", side_effect=shell):
            storage = probe.probe_storage()
        assert storage.storage_type == "NVMe"
        assert storage.total_gb == 1000.0
        assert storage.available_gb == 300.0
        assert not any("Win32_DiskDrive" in c for c in shell.commands)

    def test_model_heuristic_before_generic_fixed_disk(self, probe: WindowsProbe) -> None:
        shell = _FakePowerShell(
            {
                **self._logical(),
                "Win32_DiskDrive": {
                    "Model": "Samsung SSD 990 PRO 2TB",
                    "InterfaceType": "SCSI",
                    "MediaType": "Fixed hard disk media",
                },
            }
        )
        with patch.object(probe, "run", side_effect=shell):
            assert probe.probe_storage().storage_type == "NVMe"

    def test_generic_fixed_disk_defaults_to_ssd(self, probe: WindowsProbe) -> None:
        shell = _FakePowerShell(
            {
                **self._logical(),
                "Win32_DiskDrive": {
                    "Model": "ST2000DM008",
                    "InterfaceType": "IDE",
                    "MediaType": "Fixed hard disk media",
                },
            }
        )
        with patch.object(probe, "run", side_effect=shell):
            assert probe.probe_storage().storage_type == "SSD"

    def test_nothing_available(self, probe: WindowsProbe) -> None:
        with patch.object(probe, "run", return_value=None):
            storage = probe.probe_storage()
        assert storage.storage_type == "Unknown"
        assert storage.total_gb == 0.0
