"""Acceleration framework detection (CUDA, ROCm, Metal, DirectML, OpenVINO).

Each framework is probed in its own worker thread; every check is bounded by
the adapter's command timeout, so the pool joins within one timeout window.
"""

from __future__ import annotations

import logging
import os
import platform
import re
import shutil
from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from ._base import PROBE_TIMEOUT, Runner, run_command
from ._types import FrameworkInfo

logger = logging.getLogger(__name__)

_ROCM_ROOT = "/opt/rocm"
_OPENVINO_DIRS = (
    r"C:\Program Files (x86)\Intel\openvino",
    r"C:\Program Files\Intel\openvino",
    "/opt/intel/openvino",
)
_MIN_METAL_MACOS = (10, 13)
_MIN_DIRECTML_BUILD = 18362  # Windows 10 1903


def _version_tuple(text: str) -> tuple[int, ...]:
    parts = re.findall(r"\d+", text)
    return tuple(int(p) for p in parts)


class FrameworkProbe:
    """Detect which acceleration frameworks the host can use."""

    def __init__(
        self,
        os_tag: str,
        runner: Runner | None = None,
        timeout: float = PROBE_TIMEOUT,
    ) -> None:
        self.os_tag = os_tag
        self._run: Runner = runner or (lambda args: run_command(args, timeout))

    def detect(self) -> FrameworkInfo:
        checks: dict[str, Callable[[], object]] = {
            "cuda": self.detect_cuda,
            "rocm": self.detect_rocm,
            "metal": self.detect_metal,
            "directml": self.detect_directml,
            "openvino": self.detect_openvino,
        }
        results: dict[str, object] = {}
        with ThreadPoolExecutor(max_workers=len(checks)) as executor:
            futures = {name: executor.submit(check) for name, check in checks.items()}
            for name, future in futures.items():
                try:
                    results[name] = future.result()
                except Exception as exc:
                    logger.warning("%s framework check failed: %s", name, exc)
                    results[name] = None

        cuda_version = results["cuda"]
        rocm_version = results["rocm"]
        info = FrameworkInfo(
            cuda_available=cuda_version is not None,
            cuda_version=str(cuda_version or ""),
            rocm_available=rocm_version is not None,
            rocm_version=str(rocm_version or ""),
            metal_available=bool(results["metal"]),
            directml_available=bool(results["directml"]),
            openvino_available=bool(results["openvino"]),
        )
        logger.info("Frameworks detected: %s", ", ".join(info.detected) or "none")
        return info

    def detect_cuda(self) -> str | None:
        """CUDA version from the nvidia-smi banner, ``""`` if present but unversioned."""
        output = self._run(["nvidia-smi"])
        if output is None:
            return None
        match = re.search(r"CUDA Version:\s*(\d+\.\d+)", output)
        return match.group(1) if match else ""

    def detect_rocm(self) -> str | None:
        if self.os_tag != "linux":
            return None
        output = self._run(["rocm-smi", "--version"])
        if output is not None:
            match = re.search(r"(\d+\.\d+\.\d+)", output)
            return match.group(1) if match else ""
        if os.path.isdir(_ROCM_ROOT):
            return ""
        return None

    def detect_metal(self) -> bool:
        if self.os_tag != "macos":
            return False
        output = self._run(["sw_vers", "-productVersion"])
        if not output:
            return False
        return _version_tuple(output.strip())[:2] >= _MIN_METAL_MACOS

    def detect_directml(self) -> bool:
        if self.os_tag != "windows":
            return False
        # platform.version() on Windows looks like "10.0.19045"
        version = _version_tuple(platform.version())
        return len(version) >= 3 and version[0] >= 10 and version[2] >= _MIN_DIRECTML_BUILD

    def detect_openvino(self) -> bool:
        if any(os.path.isdir(path) for path in _OPENVINO_DIRS):
            return True
        return shutil.which("benchmark_app") is not None
