# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
svcgen: Python source generator for service models.

Given a normalized service model, svcgen renders a client, data types, a
provider interface and a server skeleton, plus templated support files.

Key Components:
- ServiceRenderer: Loads templates once and generates requested files
- Dispatcher: Maps each filename to a programmatic or template strategy
- Formatter: Strips generation markers and formats Python output with black
"""

from .dispatcher import Dispatcher, GenerationStrategy, ProgrammaticStrategy, TemplateStrategy
from .engine import TemplateEngine
from .errors import (
    ConfigurationError,
    FormatError,
    GenerationError,
    ModelError,
    SvcgenError,
    TemplateError,
    UnknownFileError,
)
from .formatter import Formatter, strip_markers
from .model import ServiceField, ServiceMethod, ServiceModel, ServiceType, load_model
from .renderer import ServiceRenderer
from .response import GeneratedFile, Response
from .settings import GeneratorSettings, load_settings

__version__ = "0.1.0"
__all__ = [
    "ServiceRenderer",
    "Dispatcher",
    "GenerationStrategy",
    "ProgrammaticStrategy",
    "TemplateStrategy",
    "TemplateEngine",
    "Formatter",
    "strip_markers",
    "ServiceModel",
    "ServiceType",
    "ServiceMethod",
    "ServiceField",
    "load_model",
    "GeneratedFile",
    "Response",
    "GeneratorSettings",
    "load_settings",
    "SvcgenError",
    "TemplateError",
    "GenerationError",
    "UnknownFileError",
    "FormatError",
    "ModelError",
    "ConfigurationError",
]
