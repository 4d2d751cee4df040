# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Embedded template store.

Templates are embedded at build time as base64 text (see
scripts/embed_templates.py) and decoded once when a renderer is built.
"""

import base64
import binascii
import logging
from typing import Dict, Mapping

from ..errors import TemplateError
from ._embedded import TEMPLATES

logger = logging.getLogger(__name__)


def embedded_templates() -> Dict[str, str]:
    """Return a copy of the embedded name -> base64 template table."""
    return dict(TEMPLATES)


def decode_template(name: str, encoded: str) -> str:
    """Decode a single base64 template entry.

    Raises:
        TemplateError: If the entry is not valid base64 or not utf-8 text
    """
    try:
        return base64.b64decode(encoded, validate=True).decode('utf-8')
    except (binascii.Error, ValueError) as e:
        raise TemplateError(f"Failed to decode template '{name}': {e}", template_name=name) from e


def decode_templates(table: Mapping[str, str]) -> Dict[str, str]:
    """Decode every entry of ``table``.

    A single broken entry aborts the whole load so that a template set is
    never silently missing a file.
    """
    decoded = {name: decode_template(name, encoded) for name, encoded in table.items()}
    logger.debug(f"Decoded {len(decoded)} templates")
    return decoded
