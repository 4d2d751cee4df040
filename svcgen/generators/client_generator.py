# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Generator for client.py: an HTTP client with one method per operation."""

from typing import Dict, List, Optional

from ..helpers import path_parameters
from ..model import ServiceField, ServiceMethod, ServiceModel
from .base import CodeWriter, GeneratorBase, docstring, struct_type, types_import, write_encode_helper

# Names the generated method body binds itself; parameters are renamed around them.
RESERVED_NAMES = frozenset({
    "self", "requests", "str", "_encode",
    "_path", "_params", "_headers", "_body", "_form", "_response",
})


def argument_names(fields) -> Dict[str, str]:
    """Map each field name to a unique Python argument name.

    Names that clash with the generated method's own bindings, or with an
    earlier argument, get a trailing underscore until they are free.
    """
    names: Dict[str, str] = {}
    taken = set(RESERVED_NAMES)
    for field in fields:
        name = field.parameter_name
        while name in taken:
            name += "_"
        taken.add(name)
        names[field.name] = name
    return names


class ClientGenerator(GeneratorBase):
    """Emits a requests-based client class."""

    name = "client.py"

    def generate(self, model: ServiceModel) -> str:
        writer = CodeWriter()
        writer.line(docstring(f"Client for the {model.name} service."))
        writer.line()
        writer.line("from __future__ import annotations")
        writer.line()
        writer.line("from typing import Any, Dict, List, Optional")
        writer.line()
        writer.line("import requests")
        writer.line()
        results = {m.result_type_name for m in model.methods if struct_type(model, m.result_type_name)}
        writer.lines(*types_import(results, model))
        writer.line()
        write_encode_helper(writer)
        writer.line()

        with writer.block("class Client:"):
            writer.line(docstring(f"Client for the {model.name} service."))
            writer.line()
            with writer.block("def __init__(self, service: str, session: Optional[requests.Session] = None):"):
                writer.line('self.service = service.rstrip("/")')
                writer.line("self.session = session or requests.Session()")
            for method in model.methods:
                writer.line()
                self._write_method(writer, model, method)
        return writer.text()

    def _write_method(self, writer: CodeWriter, model: ServiceModel, method: ServiceMethod) -> None:
        fields = method.parameters
        names = argument_names(fields)
        arguments = ["self"] + self._arguments(fields, names)
        returns = f"Optional[{method.result_type_name}]" if method.result_type_name else "None"

        with writer.block(f"def {method.client_name}({', '.join(arguments)}) -> {returns}:"):
            if method.description:
                writer.line(docstring(method.description))
            writer.line(f"_path = {method.path!r}")
            for placeholder in path_parameters(method.path):
                field = self._path_field(fields, placeholder)
                value = names[field.name] if field is not None else "''"
                token = "{" + placeholder + "}"
                writer.line(f"_path = _path.replace({token!r}, requests.utils.quote(str({value}), safe=''))")

            writer.line("_params: Dict[str, Any] = {}")
            for field in [f for f in fields if f.position == "query"]:
                with writer.block(f"if {names[field.name]} is not None:"):
                    writer.line(f"_params[{field.json_name!r}] = {names[field.name]}")
            writer.line("_headers: Dict[str, str] = {}")
            for field in [f for f in fields if f.position == "header"]:
                with writer.block(f"if {names[field.name]} is not None:"):
                    writer.line(f"_headers[{field.json_name!r}] = str({names[field.name]})")

            body = [f for f in fields if f.position == "body"]
            form = [f for f in fields if f.position == "formdata"]
            if len(body) == 1:
                writer.line(f"_body = _encode({names[body[0].name]})")
            elif body:
                writer.line("_body = {")
                for field in body:
                    writer.line(f"    {field.json_name!r}: _encode({names[field.name]}),")
                writer.line("}")
            else:
                writer.line("_body = None")
            if form:
                writer.line("_form = {")
                for field in form:
                    writer.line(f"    {field.json_name!r}: {names[field.name]},")
                writer.line("}")
            else:
                writer.line("_form = None")

            writer.line("_response = self.session.request(")
            writer.line(f"    {method.method!r},")
            writer.line("    self.service + _path,")
            writer.line("    params=_params or None,")
            writer.line("    headers=_headers or None,")
            writer.line("    json=_body,")
            writer.line("    data=_form,")
            writer.line(")")
            writer.line("_response.raise_for_status()")
            self._write_result(writer, model, method)

    @staticmethod
    def _write_result(writer: CodeWriter, model: ServiceModel, method: ServiceMethod) -> None:
        if not method.result_type_name:
            writer.line("return None")
            return
        with writer.block("if not _response.content:"):
            writer.line("return None")
        result = struct_type(model, method.result_type_name)
        if result is not None:
            writer.line(f"return {result.name}.from_dict(_response.json())")
        else:
            writer.line("return _response.json()")

    @staticmethod
    def _arguments(fields, names: Dict[str, str]) -> List[str]:
        required = [f for f in fields if f.required or f.position == "path"]
        optional = [f for f in fields if f not in required]
        arguments = [f"{names[f.name]}: {f.native_type}" for f in required]
        arguments += [f"{names[f.name]}: Optional[{f.native_type}] = None" for f in optional]
        return arguments

    @staticmethod
    def _path_field(fields, placeholder: str) -> Optional[ServiceField]:
        for field in fields:
            if field.position == "path" and placeholder in (field.json_name, field.name):
                return field
        return None
