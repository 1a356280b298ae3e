"""CLI – ``csv-export make-export`` scaffolding command.

Generates a new :class:`~csv_export.application.export.BaseExporter`
subclass module::

    $ csv-export make-export UserExporter
    Created exports/user_exporter.py (UserExporter)

    $ csv-export make-export Billing/InvoiceExporter --path app/exports
    Created app/exports/billing/invoice_exporter.py (InvoiceExporter)

Logging is configured from ``ExportSettings`` (``CSV_EXPORT_LOG_LEVEL``) and
can be overridden with ``--log-level``.
"""
from __future__ import annotations

import re
import string
from pathlib import Path

import click

from csv_export.config.settings import ExportSettings
from csv_export.kernel.errors import ConfigurationError
from csv_export.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["cli", "make_export", "render_exporter"]

DEFAULT_DIRECTORY = "exports"

log = get_logger(__name__)

_TEMPLATE = string.Template('''\
"""${class_name} – CSV export source."""
from __future__ import annotations

from typing import Any, Sequence

from csv_export.application.export import BaseExporter


class ${class_name}(BaseExporter):
    chunk_size = 1000
    max_limit = 10_000
    use_max_limit = True
    include_bom = False

    def query(self) -> Any:
        """Return a paginated query or an iterable of rows."""
        return []

    def headings(self) -> Sequence[str]:
        return []

    def map(self, row: Any) -> Sequence[Any]:
        return []
''')


def _snake_case(name: str) -> str:
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    return re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name).lower()


def _split_name(name: str) -> tuple[list[str], str]:
    parts = [p for p in re.split(r"[/\\]", name.strip()) if p]
    if not parts:
        raise click.BadParameter("name must not be empty", param_hint="NAME")
    for part in parts:
        if not part.isidentifier():
            raise click.BadParameter(f"'{part}' is not a valid Python identifier", param_hint="NAME")
    return parts[:-1], parts[-1]


def render_exporter(class_name: str) -> str:
    """Return the module source for a new exporter called *class_name*."""
    return _TEMPLATE.substitute(class_name=class_name)


@click.group()
@click.version_option(package_name="csv-export")
@click.option("--log-level", default=None, help="Logging level (default: CSV_EXPORT_LOG_LEVEL or INFO)")
def cli(log_level: str | None) -> None:
    """CSV export tooling."""
    overrides = {"log_level": log_level} if log_level else {}
    try:
        settings = ExportSettings.from_env(**overrides)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc
    JsonLoggerFactory.configure(settings.level, json=False)


@cli.command("make-export")
@click.argument("name")
@click.option(
    "--path",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DIRECTORY,
    show_default=True,
    help="Directory the exporter package lives in",
)
@click.option("--force", is_flag=True, help="Overwrite an existing module")
def make_export(name: str, directory: Path, force: bool) -> None:
    """Create a new exporter class NAME (use '/' for nested packages)."""
    packages, class_name = _split_name(name)
    target_dir = directory.joinpath(*(_snake_case(p) for p in packages))
    target = target_dir / f"{_snake_case(class_name)}.py"

    if target.exists() and not force:
        raise click.ClickException(f"{target} already exists (use --force to overwrite)")

    target_dir.mkdir(parents=True, exist_ok=True)
    package = directory
    for part in [None, *packages]:
        if part is not None:
            package = package / _snake_case(part)
        init = package / "__init__.py"
        if not init.exists():
            init.touch()

    target.write_text(render_exporter(class_name), encoding="utf-8")
    log.info("cli.exporter_created", path=str(target), class_name=class_name)
    click.echo(f"Created {target} ({class_name})")


if __name__ == "__main__":
    cli()
