# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Programmatic generators for the four reserved output files.

PROGRAMMATIC_GENERATORS is the static filename -> generator table used by
the dispatcher. Add an entry here to serve a new programmatic output.
"""

from typing import Dict

from .base import CodeWriter, GeneratorBase
from .client_generator import ClientGenerator
from .provider_generator import ProviderGenerator
from .server_generator import ServerGenerator
from .types_generator import TypesGenerator

PROGRAMMATIC_GENERATORS: Dict[str, GeneratorBase] = {
    generator.name: generator
    for generator in (ClientGenerator(), TypesGenerator(), ProviderGenerator(), ServerGenerator())
}

__all__ = [
    "PROGRAMMATIC_GENERATORS",
    "CodeWriter",
    "GeneratorBase",
    "ClientGenerator",
    "TypesGenerator",
    "ProviderGenerator",
    "ServerGenerator",
]
