# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Response envelope returned to the host tool.

One Response per generate() call. Files keep the order in which they were
requested; errors are appended and never discarded.
"""

import base64
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class GeneratedFile:
    """One generated output artifact."""
    name: str
    data: bytes

    @property
    def text(self) -> str:
        return self.data.decode('utf-8')

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form; content that is not utf-8 is sent as base64."""
        try:
            return {'name': self.name, 'data': self.text}
        except UnicodeDecodeError:
            return {
                'name': self.name,
                'data': base64.b64encode(self.data).decode('ascii'),
                'encoding': 'base64',
            }


@dataclass
class Response:
    """Accumulator of generated files and human-readable errors."""
    files: List[GeneratedFile] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def add_file(self, generated: GeneratedFile) -> None:
        self.files.append(generated)

    def add_error(self, error: str) -> None:
        self.errors.append(error)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def get_file(self, name: str) -> Optional[GeneratedFile]:
        """Return the generated file called ``name``, if any."""
        for generated in self.files:
            if generated.name == name:
                return generated
        return None

    def file_names(self) -> List[str]:
        return [f.name for f in self.files]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'files': [f.to_dict() for f in self.files],
            'errors': list(self.errors),
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
