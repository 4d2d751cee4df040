#!/usr/bin/env python3
# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Regenerate svcgen/templates/_embedded.py from svcgen/templates/sources.

Each ``<name>.j2`` source becomes an entry ``<name>`` holding the
base64-encoded template text. Run after editing a template source:

    python scripts/embed_templates.py
"""

import base64
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
SOURCES = ROOT / "svcgen" / "templates" / "sources"
TARGET = ROOT / "svcgen" / "templates" / "_embedded.py"

HEADER = '''# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

# Generated by scripts/embed_templates.py from templates/sources; do not edit.

TEMPLATES = {
'''


def main() -> int:
    sources = sorted(SOURCES.glob("*.j2"))
    if not sources:
        print(f"No template sources found in {SOURCES}", file=sys.stderr)
        return 1

    lines = [HEADER]
    for source in sources:
        encoded = base64.b64encode(source.read_bytes()).decode("ascii")
        lines.append(f'    "{source.stem}": "{encoded}",\n')
    lines.append("}\n")

    TARGET.write_text("".join(lines), encoding="utf-8")
    print(f"Embedded {len(sources)} templates into {TARGET}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
