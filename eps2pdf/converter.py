from __future__ import annotations

import os
import sys
from typing import Any, Optional, TextIO, Tuple

from .eps import rewrite_header
from .errors import (
    ConversionError,
    FileReadError,
    InterpreterInvocationError,
    InvalidInterpreterPath,
    TempFileWriteError,
)
from .ghostscript import build_command, resolve_ghostscript, run_ghostscript
from .log import get_logger
from .models import ConversionResult, Orientation
from .utils import coerce_orientation

logger = get_logger(__name__)

TEMP_SUFFIX = ".eps2pdf~"
SUCCESS_MESSAGE = "pdf successfully created"


def conversion_paths(eps_file: str) -> Tuple[str, str, str]:
    """Return the absolute source, target PDF and temporary EPS paths."""
    directory, filename = os.path.split(eps_file)
    if not directory:
        directory = os.getcwd()
    name, ext = os.path.splitext(filename)
    source = os.path.join(directory, filename)
    target = os.path.join(directory, f"{name}.pdf")
    temp = os.path.join(directory, f"{name}{ext}{TEMP_SUFFIX}")
    return source, target, temp


def read_eps(path: str) -> bytes:
    try:
        with open(path, "rb") as eps_file:
            return eps_file.read()
    except OSError as exc:
        raise FileReadError(f"File: {path} cannot be accessed or does not exist") from exc


def write_temp(path: str, content: bytes) -> None:
    try:
        with open(path, "wb") as temp_file:
            temp_file.write(content)
    except OSError as exc:
        raise TempFileWriteError(
            "Temporary file cannot be created. Check write permissions."
        ) from exc


def create_temp_eps(source: str, temp: str, orientation: Orientation) -> None:
    content = read_eps(source)
    write_temp(temp, rewrite_header(content, orientation))


def _remove_temp(path: str) -> None:
    if not os.path.exists(path):
        return
    try:
        os.remove(path)
    except OSError as exc:
        logger.warning("Could not remove temporary file %s: %s", path, exc)


def _report(result: ConversionResult, echo: bool, stream: Optional[TextIO]) -> ConversionResult:
    if result.ok:
        logger.info("%s -> %s", SUCCESS_MESSAGE, result.target)
    else:
        logger.error(result.message)
    if echo:
        print(result.message, file=stream or sys.stdout)
    return result


def convert(
    eps_file: str,
    ghostscript_path: Optional[str] = None,
    orientation: Any = 0,
    *,
    echo: bool = False,
    stream: Optional[TextIO] = None,
) -> ConversionResult:
    """Convert ``eps_file`` to a PDF next to it, sized to the EPS bounding box.

    Failures never raise; they come back as a nonzero ``status`` with a message.
    With ``echo`` the message is also printed to ``stream`` (stdout by default).
    """
    mode = Orientation(coerce_orientation(orientation))
    source, target, temp = conversion_paths(eps_file)
    logger.info("Converting %s (orientation: %s)", source, mode.name.lower())

    try:
        ghostscript = resolve_ghostscript(ghostscript_path)
    except InvalidInterpreterPath as exc:
        return _report(ConversionResult(1, str(exc), target), echo, stream)

    try:
        try:
            create_temp_eps(source, temp, mode)
        except ConversionError as exc:
            message = f"Error while creating temporary eps file: {eps_file} - {exc}"
            return _report(ConversionResult(1, message, target), echo, stream)

        try:
            output = run_ghostscript(build_command(ghostscript, target, temp))
        except InterpreterInvocationError as exc:
            message = (
                "pdf file not created - error running Ghostscript - check GS path: "
                f"{exc.output}"
            )
            return _report(ConversionResult(1, message, target, exc.output), echo, stream)
        return _report(ConversionResult(0, SUCCESS_MESSAGE, target, output), echo, stream)
    finally:
        _remove_temp(temp)
