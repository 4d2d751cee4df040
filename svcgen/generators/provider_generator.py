# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Generator for provider.py: the interface a service implementation fills in."""

from ..model import ServiceModel
from .base import CodeWriter, GeneratorBase, docstring, types_import


class ProviderGenerator(GeneratorBase):
    """Emits an abstract Provider class with one method per operation."""

    name = "provider.py"

    def generate(self, model: ServiceModel) -> str:
        writer = CodeWriter()
        writer.line(docstring(f"Service provider interface for the {model.name} service."))
        writer.line()
        writer.line("from __future__ import annotations")
        writer.line()
        writer.line("from abc import ABC, abstractmethod")
        writer.line("from typing import Any, Dict, List, Optional")
        writer.line()
        referenced = set()
        for method in model.methods:
            referenced.update({method.parameters_type_name, method.result_type_name})
        writer.lines(*types_import(referenced, model))
        writer.line()

        with writer.block("class Provider(ABC):"):
            writer.line(docstring(f"Implement this interface to serve the {model.name} service."))
            for method in model.methods:
                arguments = "self"
                if method.parameters_type_name:
                    arguments += f", parameters: {method.parameters_type_name}"
                returns = f"Optional[{method.result_type_name}]" if method.result_type_name else "None"

                writer.line()
                writer.line("@abstractmethod")
                with writer.block(f"def {method.processor_name}({arguments}) -> {returns}:"):
                    if method.description:
                        writer.line(docstring(method.description))
                    writer.line("raise NotImplementedError")
        return writer.text()
