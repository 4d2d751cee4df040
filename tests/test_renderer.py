"""Tests for the renderer pipeline."""

import pytest

from svcgen.errors import TemplateError
from svcgen.generators import PROGRAMMATIC_GENERATORS
from svcgen.renderer import ServiceRenderer
from svcgen.response import Response
from svcgen.settings import GeneratorSettings

from .conftest import README_TEMPLATE, encode_templates


class TestRendererConstruction:
    """Test template loading at construction time."""

    def test_uses_embedded_templates_by_default(self, model):
        renderer = ServiceRenderer(model)
        assert set(renderer.templates) == {"README.md", "__init__.py"}
        assert "README.md" in renderer.available_files()
        assert "server.py" in renderer.available_files()

    def test_broken_template_prevents_construction(self, model):
        """An unbalanced delimiter fails the whole load; no renderer exists."""
        templates = encode_templates({
            "README.md": README_TEMPLATE,
            "docs.md": "Service {{ model.name",
        })
        with pytest.raises(TemplateError) as exc_info:
            ServiceRenderer(model, templates=templates)
        assert exc_info.value.template_name == "docs.md"

    def test_undecodable_template_prevents_construction(self, model):
        with pytest.raises(TemplateError):
            ServiceRenderer(model, templates={"docs.md": "***"})

    def test_settings_reach_formatter(self, model):
        settings = GeneratorSettings(line_length=60, marker="##")
        renderer = ServiceRenderer(model, templates={}, settings=settings)
        assert renderer.formatter.marker == "##"
        assert renderer.formatter.mode.line_length == 60


class TestGenerate:
    """Test Generate() semantics."""

    def test_end_to_end(self, renderer):
        """types.py and client.py are formatted; README.md is only marker-stripped."""
        response = Response()
        error = renderer.generate(response, ["types.py", "client.py", "README.md"])

        assert error is None
        assert response.errors == []
        assert response.file_names() == ["types.py", "client.py", "README.md"]

        formatter = renderer.formatter
        for name in ("types.py", "client.py"):
            data = response.get_file(name).data
            assert formatter.normalize(name, data) == data
            compile(data, name, "exec")

        readme = response.get_file("README.md").text
        assert readme == "# Service\n\nName: Petstore\n"

    def test_preserves_requested_order(self, renderer):
        order = ["README.md", "server.py", "provider.py", "types.py", "client.py"]
        response = renderer.render(order)
        assert response.file_names() == order

    def test_unknown_file_is_an_error(self, renderer):
        response = Response()
        error = renderer.generate(response, ["missing.txt"])
        assert response.files == []
        assert len(response.errors) == 1
        assert "missing.txt" in response.errors[0]
        assert error is not None

    def test_malformed_server_is_reported_not_emitted(self, model, templates, monkeypatch):
        """A generator producing invalid source yields one error and no file."""
        monkeypatch.setitem(PROGRAMMATIC_GENERATORS, "server.py", lambda m: b"def serve(:\n    pass\n")
        renderer = ServiceRenderer(model, templates=templates)

        response = renderer.render(["types.py", "server.py", "README.md"])

        assert response.file_names() == ["types.py", "README.md"]
        assert len(response.errors) == 1
        assert "server.py" in response.errors[0]

    def test_template_execution_error_does_not_stop_run(self, model):
        templates = encode_templates({
            "README.md": README_TEMPLATE,
            "bad.md": "{{ model.owner.name }}",
        })
        renderer = ServiceRenderer(model, templates=templates)

        response = renderer.render(["bad.md", "types.py", "README.md"])

        assert response.file_names() == ["types.py", "README.md"]
        assert len(response.errors) == 1
        assert response.errors[0].startswith("ERROR bad.md:")

    def test_exactly_one_outcome_per_file(self, renderer):
        requested = ["types.py", "nope.py", "client.py", "README.md", "other.md"]
        response = renderer.render(requested)
        for name in requested:
            produced = response.get_file(name) is not None
            failed = any(error.startswith(f"ERROR {name}:") for error in response.errors)
            assert produced != failed
        assert len(response.files) + len(response.errors) == len(requested)

    def test_returns_last_error(self, renderer):
        response = Response()
        error = renderer.generate(response, ["first.txt", "types.py", "second.txt"])
        assert "second.txt" in str(error)
        assert len(response.errors) == 2

    def test_appends_to_existing_response(self, renderer):
        response = Response(errors=["ERROR earlier"])
        renderer.generate(response, ["types.py"])
        assert response.errors == ["ERROR earlier"]
        assert response.file_names() == ["types.py"]

    def test_idempotent(self, rich_model):
        renderer = ServiceRenderer(rich_model)
        names = ["client.py", "types.py", "provider.py", "server.py", "__init__.py", "README.md"]
        first = renderer.render(names)
        second = renderer.render(names)
        assert first.errors == [] and second.errors == []
        assert [f.data for f in first.files] == [f.data for f in second.files]

    def test_embedded_init_template(self, rich_model):
        renderer = ServiceRenderer(rich_model)
        response = renderer.render(["__init__.py"])
        assert response.errors == []
        text = response.get_file("__init__.py").text
        assert "#-" not in text
        assert "from .client import Client" in text
        assert '"CreatePetParameters",' in text
        compile(text, "__init__.py", "exec")

    def test_model_is_not_mutated(self, model, templates):
        before = model.model_dump()
        ServiceRenderer(model, templates=templates).render(["types.py", "client.py", "server.py"])
        assert model.model_dump() == before
