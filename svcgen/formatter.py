# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Normalization of generated files.

Every file has its generation markers stripped. Python sources are then
run through black and compiled; this is the only place where malformed
template output is caught, so it is never skipped.
"""

import logging
from pathlib import PurePosixPath

import black

from .errors import FormatError

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "#-"
SOURCE_EXTENSION = ".py"


def strip_markers(data: bytes, marker: str = DEFAULT_MARKER) -> bytes:
    """Remove lines consisting only of the generation marker.

    Templates use marker lines to keep template logic readable without
    leaving stray blank lines; lines that carry other text are kept.
    """
    encoded = marker.encode('utf-8')
    lines = data.split(b"\n")
    kept = [line for line in lines if line.strip() != encoded]
    return b"\n".join(kept)


class Formatter:
    """Marker stripping plus canonical formatting for Python sources."""

    def __init__(self, line_length: int = 88, marker: str = DEFAULT_MARKER):
        self.marker = marker
        self.mode = black.Mode(line_length=line_length)

    @staticmethod
    def is_source(filename: str) -> bool:
        """True if ``filename`` is a Python source file."""
        return PurePosixPath(filename).suffix == SOURCE_EXTENSION

    def normalize(self, filename: str, data: bytes) -> bytes:
        """Return the final content for ``filename``.

        Raises:
            FormatError: If a Python source is not valid after stripping
        """
        stripped = strip_markers(data, self.marker)
        if not self.is_source(filename):
            return stripped
        return self.format_source(filename, stripped)

    def format_source(self, filename: str, data: bytes) -> bytes:
        try:
            source = data.decode('utf-8')
        except UnicodeDecodeError as e:
            raise FormatError(f"{filename} is not valid utf-8: {e}", filename=filename) from e

        try:
            formatted = black.format_str(source, mode=self.mode)
        except black.InvalidInput as e:
            raise FormatError(f"Invalid Python source in {filename}: {e}", filename=filename) from e

        try:
            compile(formatted, filename, 'exec')
        except SyntaxError as e:
            raise FormatError(
                f"Invalid Python source in {filename} (line {e.lineno}): {e.msg}",
                filename=filename,
            ) from e
        except ValueError as e:
            raise FormatError(f"Invalid Python source in {filename}: {e}", filename=filename) from e

        logger.debug(f"Formatted {filename}")
        return formatted.encode('utf-8')
