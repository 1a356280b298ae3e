"""FastAPI adapter – export router."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from csv_export.application.export.config import ExportConfig
from csv_export.kernel.errors import NotFoundError

if TYPE_CHECKING:
    from csv_export.application.export.service import CsvExportService


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'csv-export[fastapi]' to use the FastAPI adapter"
        ) from exc


def request_config(
    batch_size: int | None = None,
    row_cap: int | None = None,
    no_cap: bool = False,
    bom: bool | None = None,
) -> ExportConfig:
    """Build a run-scoped :class:`ExportConfig` from optional query parameters."""
    values: dict[str, Any] = {}
    if batch_size is not None:
        values["batch_size"] = batch_size
    if no_cap:
        values["row_cap"] = None
    elif row_cap is not None:
        values["row_cap"] = row_cap
    if bom is not None:
        values["bom_enabled"] = bom
    return ExportConfig(**values)


def FastAPIExportRouter(
    service: "CsvExportService",
    prefix: str = "/exports",
    tags: list[str] | None = None,
) -> Any:
    """Return a router exposing every registered source at ``{prefix}/{name}``.

    Only names registered on the service are served; anything else, import
    paths included, is a 404. Each request builds its own :class:`ExportConfig`,
    so the shared service's chainable overrides are never touched.
    """
    _require_fastapi()
    from fastapi import APIRouter, Query  # type: ignore[import-untyped]

    router = APIRouter(prefix=prefix, tags=tags or ["exports"])

    @router.get("")
    def list_exports() -> dict[str, list[str]]:
        """Names of the exports this service can produce."""
        return {"exports": service.registry.names()}

    @router.get("/{name}")
    def export_csv(
        name: str,
        batch_size: int | None = Query(default=None, ge=1, description="Rows fetched per batch"),
        row_cap: int | None = Query(default=None, ge=1, description="Maximum rows to export"),
        no_cap: bool = Query(default=False, description="Export every row"),
        bom: bool | None = Query(default=None, description="Prefix a UTF-8 byte-order mark"),
    ) -> Any:
        """Stream the named export as ``<name>.csv``."""
        if name not in service.registry:
            raise NotFoundError("Export source", name)
        config = request_config(batch_size, row_cap, no_cap, bom)
        return service.stream(name, f"{name}.csv", config=config)

    return router


__all__ = ["FastAPIExportRouter", "request_config"]
