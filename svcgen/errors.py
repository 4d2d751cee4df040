# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Error handling for the service generator.

Load-time errors (TemplateError) abort renderer construction. Per-file
errors (GenerationError, FormatError) are recorded in the response and
never stop the remaining files.
"""

from typing import Optional


class SvcgenError(Exception):
    """Base exception for all svcgen errors."""
    pass


class TemplateError(SvcgenError):
    """Error decoding or compiling an embedded template."""

    def __init__(self, message: str, template_name: Optional[str] = None):
        self.template_name = template_name
        super().__init__(message)


class GenerationError(SvcgenError):
    """Error while producing the raw content of one output file."""

    def __init__(self, message: str, filename: Optional[str] = None):
        self.filename = filename
        super().__init__(message)


class UnknownFileError(GenerationError):
    """Requested file has neither a programmatic generator nor a template."""
    pass


class FormatError(SvcgenError):
    """Generated source could not be canonically formatted."""

    def __init__(self, message: str, filename: Optional[str] = None):
        self.filename = filename
        super().__init__(message)


class ModelError(SvcgenError):
    """Service model document could not be loaded."""
    pass


class ConfigurationError(SvcgenError):
    """Error in configuration files or settings."""
    pass
