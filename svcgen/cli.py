# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Command-line interface for the service generator."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from pydantic import ValidationError
from rich.console import Console

from .errors import SvcgenError
from .model import load_model, model_from_dict
from .renderer import ServiceRenderer
from .response import Response
from .settings import load_settings

logger = logging.getLogger(__name__)

console = Console(stderr=True)


def setup_logging(level: str) -> None:
    """Configure logging for the CLI."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def write_response(response: Response, output_dir: Path) -> None:
    """Write every generated file under ``output_dir``."""
    output_dir.mkdir(parents=True, exist_ok=True)
    for generated in response.files:
        path = output_dir / generated.name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(generated.data)
        logger.debug(f"Wrote file: {path}")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def main() -> None:
    """Generate a Python client, types, provider and server from a service model."""


@main.command()
@click.argument("model_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-f", "--file", "files", multiple=True, help="File to generate (repeatable).")
@click.option("-o", "--output", type=click.Path(file_okay=False, path_type=Path), help="Output directory.")
@click.option("--config", "config_file", type=click.Path(dir_okay=False, path_type=Path), help="Project YAML file.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def generate(
    model_file: Path,
    files: Tuple[str, ...],
    output: Optional[Path],
    config_file: Optional[Path],
    verbose: bool,
) -> None:
    """Generate files for MODEL_FILE (JSON or YAML)."""
    try:
        settings = load_settings(
            project_file=config_file,
            output_dir=output,
            files=list(files) or None,
            log_level="DEBUG" if verbose else None,
        )
        setup_logging(settings.log_level)
        model = load_model(model_file)
        renderer = ServiceRenderer(model, settings=settings)
    except (SvcgenError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    response = renderer.render(settings.files)
    write_response(response, settings.output_dir)

    for generated in response.files:
        console.print(f"  [green]✓[/green] {settings.output_dir / generated.name}")
    for error in response.errors:
        console.print(f"  [red]✗[/red] {error}")
    if response.has_errors():
        sys.exit(1)


@main.command(name="files")
@click.argument("model_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def list_files(model_file: Path) -> None:
    """List the filenames that can be generated for MODEL_FILE."""
    try:
        renderer = ServiceRenderer(load_model(model_file))
    except SvcgenError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    for filename in renderer.available_files():
        click.echo(filename)


@main.command()
def plugin() -> None:
    """Read a JSON request on stdin and write a JSON response on stdout.

    The request is ``{"model": {...}, "files": [...]}``.
    """
    response = Response()
    try:
        request = json.loads(sys.stdin.read())
        model = model_from_dict(request.get("model") or {})
        files = request.get("files") or []
        if not isinstance(files, list) or not all(isinstance(name, str) for name in files):
            raise ValueError("files must be a list of file names")
        renderer = ServiceRenderer(model)
    except SvcgenError as e:
        response.add_error(f"ERROR {e}")
    except Exception as e:
        logger.error(f"Rejected plugin request: {e}")
        response.add_error(f"ERROR invalid request: {e}")
    else:
        renderer.generate(response, files)
    click.echo(response.to_json())


if __name__ == '__main__':
    main()
