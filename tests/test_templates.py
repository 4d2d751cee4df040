"""Tests for the embedded template store and the template engine."""

import base64

import pytest

from svcgen.engine import TemplateEngine, execute_template
from svcgen.errors import GenerationError, TemplateError
from svcgen.templates import decode_template, decode_templates, embedded_templates

from .conftest import encode_templates


class TestTemplateStore:
    """Test decoding of embedded templates."""

    def test_embedded_templates_decode(self):
        """Every shipped template decodes to text."""
        decoded = decode_templates(embedded_templates())
        assert set(decoded) == {"README.md", "__init__.py"}
        assert "{{ model.name }}" in decoded["README.md"]

    def test_embedded_templates_returns_copy(self):
        table = embedded_templates()
        table.clear()
        assert embedded_templates()

    def test_decode_single(self):
        encoded = base64.b64encode(b"hello {{ model.name }}").decode('ascii')
        assert decode_template("x.md", encoded) == "hello {{ model.name }}"

    def test_invalid_base64_names_entry(self):
        with pytest.raises(TemplateError) as exc_info:
            decode_template("broken.md", "not base64!!")
        assert exc_info.value.template_name == "broken.md"
        assert "broken.md" in str(exc_info.value)

    def test_invalid_utf8(self):
        encoded = base64.b64encode(b"\xff\xfe\xfd").decode('ascii')
        with pytest.raises(TemplateError):
            decode_template("binary.md", encoded)

    def test_one_bad_entry_aborts_whole_load(self):
        table = encode_templates({"good.md": "fine"})
        table["bad.md"] = "%%%"
        with pytest.raises(TemplateError):
            decode_templates(table)


class TestTemplateEngine:
    """Test template compilation and execution."""

    def test_load_compiles_all_templates(self):
        engine = TemplateEngine()
        compiled = engine.load(encode_templates({"a.md": "A", "b.md": "{{ model }}"}))
        assert set(compiled) == {"a.md", "b.md"}

    def test_unbalanced_delimiter_fails_fast(self):
        engine = TemplateEngine()
        with pytest.raises(TemplateError) as exc_info:
            engine.load(encode_templates({"docs.md": "Service {{ model.name"}))
        assert exc_info.value.template_name == "docs.md"

    def test_unclosed_block_fails_fast(self):
        engine = TemplateEngine()
        with pytest.raises(TemplateError):
            engine.compile("docs.md", "{% for m in model.methods %}{{ m.name }}")

    def test_helpers_available_as_filters_and_globals(self, model):
        engine = TemplateEngine()
        template = engine.compile("x.md", "{{ model.name | snake_case }} {{ camel_case('get_pet') }}")
        assert execute_template("x.md", template, model) == "petstore GetPet"

    def test_model_is_the_only_binding(self, model):
        engine = TemplateEngine()
        template = engine.compile("x.md", "{% for m in model.methods %}{{ m.client_name }}{% endfor %}")
        assert execute_template("x.md", template, model) == "get_pet"

    def test_missing_model_field_is_execution_error(self, model):
        """A missing field compiles fine and fails only when executed."""
        engine = TemplateEngine()
        template = engine.compile("x.md", "{{ model.does_not_exist }}")
        with pytest.raises(GenerationError) as exc_info:
            execute_template("x.md", template, model)
        assert exc_info.value.filename == "x.md"

    def test_custom_helper_set(self, model):
        engine = TemplateEngine(helpers={"shout": lambda s: s.upper()})
        template = engine.compile("x.md", "{{ model.name | shout }}")
        assert execute_template("x.md", template, model) == "PETSTORE"

    def test_embedded_readme_renders(self, model):
        engine = TemplateEngine()
        compiled = engine.load(embedded_templates())
        text = execute_template("README.md", compiled["README.md"], model)
        assert text.startswith("# Petstore\n")
        assert "A tiny pet store." in text
        assert "`GET /pets/{petId}` -> `get_pet()`: Fetch a single pet." in text
        assert "`Pet` (2 fields)" in text
