from __future__ import annotations

import os
import platform
import shutil
import subprocess
import sys
from typing import List, Optional

from .errors import InterpreterInvocationError, InvalidInterpreterPath
from .log import get_logger

logger = get_logger(__name__)

GS_PARAMETERS = [
    "-q",
    "-dNOPAUSE",
    "-dBATCH",
    "-dDOINTERPOLATE",
    "-dUseFlateCompression=true",
    "-sDEVICE=pdfwrite",
    "-r1200",
]


def default_candidates() -> List[str]:
    if sys.platform.startswith("win"):
        if platform.machine().endswith("64"):
            return ["gswin64c.exe", "gswin32c.exe"]
        return ["gswin32c.exe"]
    return ["gs"]


def default_ghostscript() -> str:
    """Ghostscript found on PATH, else the platform's bare executable name."""
    candidates = default_candidates()
    for candidate in candidates:
        path = shutil.which(candidate)
        if path:
            return path
    return candidates[0]


def resolve_ghostscript(path: Optional[str] = None) -> str:
    if not path:
        return default_ghostscript()
    if not os.path.exists(path):
        raise InvalidInterpreterPath(path)
    return path


def build_command(ghostscript: str, target: str, source: str) -> List[str]:
    return [ghostscript, *GS_PARAMETERS, f"-sOutputFile={target}", "-f", source]


def run_ghostscript(command: List[str]) -> str:
    """Run Ghostscript and return its combined output text."""
    logger.debug("Running %s", subprocess.list2cmdline(command))
    try:
        result = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        raise InterpreterInvocationError(str(exc)) from exc
    output = (result.stdout + result.stderr).decode("utf-8", errors="ignore")
    if result.returncode != 0:
        raise InterpreterInvocationError(
            output or f"Ghostscript exited with status {result.returncode}",
            result.returncode,
        )
    return output
