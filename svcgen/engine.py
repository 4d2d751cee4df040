# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Template engine for the service generator.

Compiles decoded template sources with Jinja2 against the fixed helper
set. Compilation happens once per renderer; execution happens per file.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from jinja2 import Environment, StrictUndefined, Template, TemplateError as JinjaError
from jinja2 import TemplateSyntaxError

from .errors import GenerationError, TemplateError
from .helpers import template_helpers
from .templates import decode_templates

logger = logging.getLogger(__name__)


class TemplateEngine:
    """Jinja2 environment bound to the template helper set."""

    def __init__(self, helpers: Optional[Mapping[str, Callable]] = None):
        """
        Initialize the Jinja2 environment.

        Args:
            helpers: Helper functions exposed to templates as both filters
                and globals. Defaults to :func:`template_helpers`.
        """
        self.helpers = dict(helpers if helpers is not None else template_helpers())
        self.env = Environment(
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            autoescape=False,
        )
        self.env.filters.update(self.helpers)
        self.env.globals.update(self.helpers)

    def compile(self, name: str, source: str) -> Template:
        """Compile a single template source.

        Raises:
            TemplateError: If the source has a syntax error
        """
        try:
            return self.env.from_string(source)
        except TemplateSyntaxError as e:
            raise TemplateError(
                f"Failed to compile template '{name}' (line {e.lineno}): {e.message}",
                template_name=name,
            ) from e

    def load(self, table: Mapping[str, str]) -> Dict[str, Template]:
        """Decode and compile an encoded template table.

        Args:
            table: Mapping of output filename to base64 template text

        Returns:
            Mapping of output filename to compiled template

        Raises:
            TemplateError: If any entry fails to decode or compile
        """
        compiled = {
            name: self.compile(name, source)
            for name, source in decode_templates(table).items()
        }
        logger.info(f"Loaded {len(compiled)} templates")
        return compiled


def execute_template(name: str, template: Template, model: Any) -> str:
    """Execute a compiled template with ``model`` as its only binding.

    Raises:
        GenerationError: If execution fails, e.g. on a missing model field
    """
    try:
        return template.render(model=model)
    except JinjaError as e:
        raise GenerationError(f"Template execution failed: {e}", filename=name) from e
