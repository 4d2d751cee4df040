# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Shared fixtures for svcgen tests."""

import base64

import pytest

from svcgen.model import ServiceModel
from svcgen.renderer import ServiceRenderer


def encode_templates(sources):
    """Encode a name -> template text mapping the way templates are embedded."""
    return {
        name: base64.b64encode(text.encode('utf-8')).decode('ascii')
        for name, text in sources.items()
    }


README_TEMPLATE = "# Service\n\nName: {{ model.name }}\n#-\n"


@pytest.fixture
def model_data():
    """Minimal service: one type and one operation."""
    return {
        "name": "Petstore",
        "description": "A tiny pet store.",
        "types": [
            {
                "name": "Pet",
                "description": "A pet in the store.",
                "fields": [
                    {"name": "id", "type": "integer"},
                    {"name": "name", "type": "string"},
                ],
            },
        ],
        "methods": [
            {
                "name": "GetPet",
                "path": "/pets/{petId}",
                "method": "get",
                "description": "Fetch a single pet.",
                "result_type_name": "Pet",
                "parameters_type": {
                    "name": "GetPetParameters",
                    "fields": [
                        {"name": "petId", "type": "integer", "position": "path", "required": True},
                    ],
                },
            },
        ],
    }


@pytest.fixture
def model(model_data):
    return ServiceModel.model_validate(model_data)


@pytest.fixture
def rich_model_data(model_data):
    """Service exercising every parameter position and type kind."""
    model_data["types"].extend([
        {"name": "Labels", "kind": "map", "description": "Free-form labels."},
        {
            "name": "Owner",
            "fields": [
                {"name": "fullName", "type": "string"},
                {"name": "pets", "type": "Pet[]"},
                {"name": "favorite", "type": "Pet"},
            ],
        },
        {
            "name": "CreatePetParameters",
            "fields": [
                {"name": "pet", "type": "Pet", "position": "body", "required": True},
                {"name": "limit", "type": "integer", "position": "query"},
                {"name": "X-Request-Id", "type": "string", "position": "header"},
            ],
        },
    ])
    model_data["methods"].extend([
        {
            "name": "CreatePet",
            "path": "/pets",
            "method": "post",
            "description": 'Create a pet. Quotes """ are escaped.',
            "result_type_name": "Pet",
            "parameters_type": model_data["types"][-1],
        },
        {
            "name": "UploadPhoto",
            "path": "/pets/{petId}/photo",
            "method": "put",
            "parameters_type": {
                "name": "UploadPhotoParameters",
                "fields": [
                    {"name": "petId", "type": "integer", "position": "path", "required": True},
                    {"name": "caption", "type": "string", "position": "formdata"},
                ],
            },
        },
        {"name": "Ping", "path": "/ping"},
    ])
    return model_data


@pytest.fixture
def rich_model(rich_model_data):
    return ServiceModel.model_validate(rich_model_data)


@pytest.fixture
def templates():
    return encode_templates({"README.md": README_TEMPLATE})


@pytest.fixture
def renderer(model, templates):
    return ServiceRenderer(model, templates=templates)
