"""CLI – ``csv-export`` command group."""
from csv_export.cli.main import cli, make_export, render_exporter

__all__ = ["cli", "make_export", "render_exporter"]
