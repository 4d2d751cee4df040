# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Generation dispatch for the service generator.

Each output filename maps to one GenerationStrategy. Programmatic
generators and compiled templates are the two strategy variants; callers
only ever see ``produce(model) -> bytes``.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Mapping, Optional

from jinja2 import Template

from .engine import execute_template
from .errors import GenerationError, UnknownFileError
from .generators import PROGRAMMATIC_GENERATORS
from .model import ServiceModel

logger = logging.getLogger(__name__)


class GenerationStrategy(ABC):
    """Produces the raw content of one output file."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def produce(self, model: ServiceModel) -> bytes:
        """Return raw (unformatted) bytes for ``model``."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


class ProgrammaticStrategy(GenerationStrategy):
    """Strategy backed by a generator function."""

    def __init__(self, name: str, function: Callable[[ServiceModel], bytes]):
        super().__init__(name)
        self.function = function

    def produce(self, model: ServiceModel) -> bytes:
        return self.function(model)


class TemplateStrategy(GenerationStrategy):
    """Strategy backed by a compiled template."""

    def __init__(self, name: str, template: Template):
        super().__init__(name)
        self.template = template

    def produce(self, model: ServiceModel) -> bytes:
        return execute_template(self.name, self.template, model).encode('utf-8')


class Dispatcher:
    """
    Filename-keyed table of generation strategies.

    Programmatic generators win over a template registered under the same
    filename. The table is built once and never changes afterwards.
    """

    def __init__(
        self,
        templates: Mapping[str, Template],
        generators: Optional[Mapping[str, Callable[[ServiceModel], bytes]]] = None,
    ):
        """
        Build the strategy table.

        Args:
            templates: Compiled templates keyed by output filename
            generators: Programmatic generators keyed by output filename,
                defaults to PROGRAMMATIC_GENERATORS
        """
        if generators is None:
            generators = PROGRAMMATIC_GENERATORS
        self._strategies: Dict[str, GenerationStrategy] = {
            name: TemplateStrategy(name, template) for name, template in templates.items()
        }
        for name, function in generators.items():
            if name in self._strategies:
                logger.debug(f"Programmatic generator overrides template for {name}")
            self._strategies[name] = ProgrammaticStrategy(name, function)

    def __contains__(self, filename: str) -> bool:
        return filename in self._strategies

    def available_files(self) -> List[str]:
        """Every filename this dispatcher can serve, sorted."""
        return sorted(self._strategies)

    def strategy_for(self, filename: str) -> GenerationStrategy:
        """
        Look up the strategy for ``filename``.

        Raises:
            UnknownFileError: If no generator or template serves it
        """
        strategy = self._strategies.get(filename)
        if strategy is None:
            available = ", ".join(self.available_files())
            raise UnknownFileError(
                f"No generator or template for '{filename}'. Available: {available}",
                filename=filename,
            )
        return strategy

    def render(self, filename: str, model: ServiceModel) -> bytes:
        """
        Produce the raw bytes for ``filename``.

        Raises:
            GenerationError: If the file is unknown or its strategy fails
        """
        strategy = self.strategy_for(filename)
        logger.debug(f"Rendering {filename} with {strategy!r}")
        try:
            return strategy.produce(model)
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"Generation failed for {filename}: {e}", filename=filename) from e
