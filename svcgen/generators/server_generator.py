# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Generator for server.py: a Flask application dispatching to a Provider."""

from ..helpers import path_pattern, snake_case
from ..model import ServiceField, ServiceMethod, ServiceModel
from .base import CodeWriter, GeneratorBase, docstring, struct_type, types_import, write_encode_helper

_CONVERTED = {"int", "float"}


class ServerGenerator(GeneratorBase):
    """Emits ``create_app(provider)`` registering one route per operation."""

    name = "server.py"

    def generate(self, model: ServiceModel) -> str:
        writer = CodeWriter()
        writer.line(docstring(f"HTTP server for the {model.name} service."))
        writer.line()
        writer.line("from __future__ import annotations")
        writer.line()
        writer.line("from typing import Any, Dict, List, Optional")
        writer.line()
        writer.line("from flask import Flask, jsonify, request")
        writer.line()
        writer.line("from .provider import Provider")
        referenced = set()
        for method in model.methods:
            referenced.add(method.parameters_type_name)
            referenced.update(f.native_type for f in method.parameters if f.position == "body")
        writer.lines(*types_import(referenced, model))
        writer.line()
        write_encode_helper(writer)
        writer.line()

        with writer.block("def create_app(provider: Provider) -> Flask:"):
            writer.line(docstring(f"Create a Flask application serving the {model.name} service."))
            writer.line("app = Flask(__name__)")
            for method in model.methods:
                writer.line()
                self._write_handler(writer, model, method)
            writer.line()
            writer.line("return app")
        return writer.text()

    def _write_handler(self, writer: CodeWriter, model: ServiceModel, method: ServiceMethod) -> None:
        writer.line(f"@app.route({path_pattern(method.path)!r}, methods=[{method.method!r}])")
        with writer.block(f"def {method.handler_name}(**path_values: str) -> Any:"):
            if method.description:
                writer.line(docstring(method.description))
            if method.parameters_type_name:
                body = [f for f in method.parameters if f.position == "body"]
                writer.line(f"parameters = {method.parameters_type_name}(")
                for field in method.parameters:
                    writer.line(f"    {field.field_name}={self._value(model, field, len(body))},")
                writer.line(")")
                writer.line(f"result = provider.{method.processor_name}(parameters)")
            else:
                writer.line(f"result = provider.{method.processor_name}()")
            writer.line("return jsonify(_encode(result))")

    @staticmethod
    def _value(model: ServiceModel, field: ServiceField, body_count: int) -> str:
        if field.position == "path":
            return f"path_values.get({snake_case(field.json_name)!r})"
        if field.position == "query":
            if field.native_type in _CONVERTED:
                return f"request.args.get({field.json_name!r}, type={field.native_type})"
            return f"request.args.get({field.json_name!r})"
        if field.position == "header":
            return f"request.headers.get({field.json_name!r})"
        if field.position == "formdata":
            return f"request.form.get({field.json_name!r})"

        payload = "request.get_json(silent=True)"
        if body_count > 1:
            payload = f"(request.get_json(silent=True) or {{}}).get({field.json_name!r})"
        nested = struct_type(model, field.native_type)
        if nested is not None:
            return f"{nested.name}.from_dict({payload} or {{}})"
        return payload
