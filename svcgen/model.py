# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Service model consumed by every generator.

The model is produced upstream from an API description and handed to the
renderer fully formed. All classes are frozen: generators share a single
instance by reference and can never modify it.

Naming fields (handler_name, field_name, ...) may be omitted in input
documents; they are derived with the same helpers the templates use.
"""

import json
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from .errors import ModelError
from .helpers import python_type, snake_case

Position = Literal["body", "header", "formdata", "query", "path"]


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class ServiceField(_Frozen):
    """A single field of a type, or a single parameter of an operation."""
    name: str
    type: str = "string"
    format: Optional[str] = None
    native_type: str = ""
    field_name: str = ""
    parameter_name: str = ""
    json_name: str = ""
    position: Position = "body"
    required: bool = False

    @model_validator(mode="before")
    @classmethod
    def _derive_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        name = data.get("name")
        type_name = data.get("type", "string")
        if not isinstance(name, str) or not isinstance(type_name, str):
            return data
        if not data.get("native_type"):
            data["native_type"] = python_type(type_name, data.get("format"))
        if not data.get("field_name"):
            data["field_name"] = snake_case(name)
        if not data.get("parameter_name"):
            data["parameter_name"] = snake_case(name)
        if not data.get("json_name"):
            data["json_name"] = name
        return data


class ServiceType(_Frozen):
    """A data structure exchanged by the service."""
    name: str
    kind: Literal["struct", "map"] = "struct"
    description: str = ""
    fields: Tuple[ServiceField, ...] = ()

    def fields_in(self, position: str) -> Tuple[ServiceField, ...]:
        """Fields transported in the given request position."""
        return tuple(f for f in self.fields if f.position == position)


class ServiceMethod(_Frozen):
    """One operation of the service."""
    name: str
    path: str = "/"
    method: str = "GET"
    description: str = ""
    handler_name: str = ""
    processor_name: str = ""
    client_name: str = ""
    parameters_type_name: Optional[str] = None
    responses_type_name: Optional[str] = None
    result_type_name: Optional[str] = None
    parameters_type: Optional[ServiceType] = None
    responses_type: Optional[ServiceType] = None

    @model_validator(mode="before")
    @classmethod
    def _derive_names(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not isinstance(data.get("name"), str):
            return data
        snake = snake_case(data["name"])
        data["method"] = str(data.get("method") or "GET").upper()
        if not data.get("handler_name"):
            data["handler_name"] = f"handle_{snake}"
        if not data.get("processor_name"):
            data["processor_name"] = snake
        if not data.get("client_name"):
            data["client_name"] = snake
        for kind in ("parameters", "responses"):
            bound = data.get(f"{kind}_type")
            if isinstance(bound, ServiceType):
                bound_name = bound.name
            elif isinstance(bound, dict):
                bound_name = bound.get("name")
            else:
                bound_name = None
            if bound_name and not data.get(f"{kind}_type_name"):
                data[f"{kind}_type_name"] = bound_name
        return data

    @property
    def parameters(self) -> Tuple[ServiceField, ...]:
        """Parameter fields of the operation, empty when it takes none."""
        if self.parameters_type is None:
            return ()
        return self.parameters_type.fields


class ServiceModel(_Frozen):
    """Complete description of the service to generate."""
    name: str
    package: str = ""
    description: str = ""
    types: Tuple[ServiceType, ...] = ()
    methods: Tuple[ServiceMethod, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _derive_package(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("package") and isinstance(data.get("name"), str):
            data = dict(data)
            data["package"] = snake_case(data["name"])
        return data

    def find_type(self, name: Optional[str]) -> Optional[ServiceType]:
        """Look up a type by name, returning None when it is not defined."""
        for service_type in self.types:
            if service_type.name == name:
                return service_type
        return None


def model_from_dict(data: Dict[str, Any]) -> ServiceModel:
    """Validate a decoded model document."""
    try:
        return ServiceModel.model_validate(data)
    except ValidationError as e:
        raise ModelError(f"Invalid service model: {e}") from e


def load_model(path: Union[str, Path]) -> ServiceModel:
    """Load a service model from a JSON or YAML file.

    Args:
        path: Model document; ``.yaml``/``.yml`` files are read as YAML,
            everything else as JSON.

    Returns:
        Validated, frozen ServiceModel

    Raises:
        ModelError: If the file is missing, unparsable or invalid
    """
    path = Path(path)
    try:
        text = path.read_text(encoding='utf-8')
    except OSError as e:
        raise ModelError(f"Cannot read service model {path}: {e}") from e

    try:
        if path.suffix.lower() in ('.yaml', '.yml'):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ModelError(f"Cannot parse service model {path}: {e}") from e

    if not isinstance(data, dict):
        raise ModelError(f"Service model {path} must contain a mapping")
    return model_from_dict(data)
