# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Service renderer: the top-level generation pipeline.

For each requested filename: dispatch to a programmatic generator or a
compiled template, normalize the raw output, and record either a
GeneratedFile or an error in the response. A failing file never stops
the remaining files.
"""

import logging
from typing import Iterable, List, Mapping, Optional

from .dispatcher import Dispatcher
from .engine import TemplateEngine
from .formatter import Formatter
from .model import ServiceModel
from .response import GeneratedFile, Response
from .settings import GeneratorSettings
from .templates import embedded_templates

logger = logging.getLogger(__name__)


class ServiceRenderer:
    """Generates source files for a service model."""

    def __init__(
        self,
        model: ServiceModel,
        templates: Optional[Mapping[str, str]] = None,
        settings: Optional[GeneratorSettings] = None,
    ):
        """
        Create a renderer and compile its templates.

        Args:
            model: Service model shared by every generation call
            templates: Encoded template table (name -> base64 text),
                defaults to the embedded templates
            settings: Formatting settings; only line_length and marker are
                used here

        Raises:
            TemplateError: If any template fails to decode or compile
        """
        self.model = model
        self.settings = settings or GeneratorSettings()
        if templates is None:
            templates = embedded_templates()

        self.templates = TemplateEngine().load(templates)
        self.dispatcher = Dispatcher(self.templates)
        self.formatter = Formatter(
            line_length=self.settings.line_length,
            marker=self.settings.marker,
        )
        logger.info(f"Initialized renderer for service {model.name}")

    def available_files(self) -> List[str]:
        return self.dispatcher.available_files()

    def generate(self, response: Response, filenames: Iterable[str]) -> Optional[Exception]:
        """
        Generate the named files into ``response``.

        Files are appended in the order requested. A failure is recorded as
        an error string and generation moves on to the next file.

        Args:
            response: Response to populate
            filenames: Output filenames to generate

        Returns:
            The last error encountered, or None. ``response.errors`` is the
            authoritative record.
        """
        last_error = None
        for filename in filenames:
            logger.info(f"Generating {filename}")
            try:
                raw = self.dispatcher.render(filename, self.model)
                data = self.formatter.normalize(filename, raw)
            except Exception as e:
                logger.error(f"Failed to generate {filename}: {e}")
                response.add_error(f"ERROR {filename}: {e}")
                last_error = e
                continue
            response.add_file(GeneratedFile(name=filename, data=data))

        logger.info(f"Generated {len(response.files)} files with {len(response.errors)} errors")
        return last_error

    def render(self, filenames: Iterable[str]) -> Response:
        """Generate ``filenames`` into a fresh Response."""
        response = Response()
        self.generate(response, filenames)
        return response
