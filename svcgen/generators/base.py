# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Base class and code-building utilities for programmatic generators.

Programmatic generators serve outputs whose structure needs control flow
(method bodies, request handling). They emit roughly indented Python;
the formatter produces the canonical layout afterwards.
"""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List, Optional, Set

from ..model import ServiceModel, ServiceType

INDENT = "    "


class CodeWriter:
    """Accumulates indented source lines."""

    def __init__(self):
        self._lines: List[str] = []
        self._level = 0

    def line(self, text: str = "") -> None:
        self._lines.append(INDENT * self._level + text if text else "")

    def lines(self, *texts: str) -> None:
        for text in texts:
            self.line(text)

    @contextmanager
    def block(self, header: str) -> Iterator[None]:
        """Write ``header`` and indent everything written inside the block.

        An empty block body gets a ``pass`` so the output stays valid.
        """
        self.line(header)
        self._level += 1
        start = len(self._lines)
        try:
            yield
        finally:
            if len(self._lines) == start:
                self.line("pass")
            self._level -= 1

    def text(self) -> str:
        return "\n".join(self._lines) + "\n"


def docstring(text: str) -> str:
    """Quote ``text`` as a triple-quoted docstring literal."""
    escaped = text.strip().replace("\\", "\\\\").replace('"""', '\\"\\"\\"')
    if escaped.endswith('"'):
        escaped += " "
    return f'"""{escaped}"""'


def struct_type(model: ServiceModel, annotation: Optional[str]) -> Optional[ServiceType]:
    """The struct type named by ``annotation``, if it names one."""
    service_type = model.find_type(annotation)
    if service_type is not None and service_type.kind == "struct":
        return service_type
    return None


def list_item_type(model: ServiceModel, annotation: str) -> Optional[ServiceType]:
    """The struct type of ``List[T]`` annotations, if T is a struct."""
    if annotation.startswith("List[") and annotation.endswith("]"):
        return struct_type(model, annotation[5:-1])
    return None


def types_import(names: Set[str], model: ServiceModel) -> List[str]:
    """Import lines for the generated types module, limited to ``names``."""
    defined = [t.name for t in model.types if t.name in names]
    if not defined:
        return []
    return [f"from .types import {', '.join(defined)}"]


def write_encode_helper(writer: CodeWriter) -> None:
    """Module-level helper turning generated types into JSON data."""
    with writer.block("def _encode(value: Any) -> Any:"):
        with writer.block('if hasattr(value, "to_dict"):'):
            writer.line("return value.to_dict()")
        with writer.block("if isinstance(value, list):"):
            writer.line("return [_encode(item) for item in value]")
        with writer.block("if isinstance(value, dict):"):
            writer.line("return {key: _encode(item) for key, item in value.items()}")
        writer.line("return value")


class GeneratorBase(ABC):
    """
    Minimal base class for programmatic generators.

    Each generator must specify:
    - name: The output filename it produces
    - generate(): Source text for a service model
    """

    name: str = None

    @abstractmethod
    def generate(self, model: ServiceModel) -> str:
        """Produce the raw source text for ``model``."""

    def validate(self) -> bool:
        """True if the generator is properly configured."""
        return bool(self.name)

    def __call__(self, model: ServiceModel) -> bytes:
        return self.generate(model).encode('utf-8')

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
