# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Generator for types.py: one dataclass per service type."""

from ..model import ServiceField, ServiceModel, ServiceType
from .base import CodeWriter, GeneratorBase, docstring, list_item_type, struct_type, write_encode_helper


class TypesGenerator(GeneratorBase):
    """Emits dataclasses with JSON conversion for every model type."""

    name = "types.py"

    def generate(self, model: ServiceModel) -> str:
        writer = CodeWriter()
        writer.line(docstring(f"Data types for the {model.name} service."))
        writer.line()
        writer.line("from __future__ import annotations")
        writer.line()
        writer.line("from dataclasses import dataclass")
        writer.line("from typing import Any, Dict, List, Optional")
        writer.line()
        write_encode_helper(writer)

        for service_type in model.types:
            writer.line()
            if service_type.kind == "map":
                self._write_map(writer, service_type)
            else:
                self._write_struct(writer, model, service_type)
        return writer.text()

    def _write_map(self, writer: CodeWriter, service_type: ServiceType) -> None:
        if service_type.description:
            for line in service_type.description.splitlines():
                writer.line(f"# {line}".rstrip())
        writer.line(f"{service_type.name} = Dict[str, Any]")

    def _write_struct(self, writer: CodeWriter, model: ServiceModel, service_type: ServiceType) -> None:
        writer.line("@dataclass")
        with writer.block(f"class {service_type.name}:"):
            if service_type.description:
                writer.line(docstring(service_type.description))
            for field in service_type.fields:
                writer.line(f"{field.field_name}: Optional[{field.native_type}] = None")

            writer.line()
            with writer.block("def to_dict(self) -> Dict[str, Any]:"):
                writer.line("data: Dict[str, Any] = {}")
                for field in service_type.fields:
                    with writer.block(f"if self.{field.field_name} is not None:"):
                        writer.line(f"data[{field.json_name!r}] = _encode(self.{field.field_name})")
                writer.line("return data")

            writer.line()
            writer.line("@classmethod")
            with writer.block(f'def from_dict(cls, data: Dict[str, Any]) -> "{service_type.name}":'):
                writer.line("return cls(")
                for field in service_type.fields:
                    writer.line(f"    {field.field_name}={self._decode(model, field)},")
                writer.line(")")

    @staticmethod
    def _decode(model: ServiceModel, field: ServiceField) -> str:
        value = f"data.get({field.json_name!r})"
        nested = struct_type(model, field.native_type)
        if nested is not None:
            return f"{nested.name}.from_dict({value}) if {value} is not None else None"
        item = list_item_type(model, field.native_type)
        if item is not None:
            return f"[{item.name}.from_dict(item) for item in {value}] if {value} is not None else None"
        return value
