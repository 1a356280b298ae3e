"""Unit / integration tests for the FastAPI adapter."""
from __future__ import annotations

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from csv_export.adapters.fastapi import (
    CSV_MEDIA_TYPE,
    FastAPIExceptionMapper,
    FastAPIExportRouter,
    csv_headers,
    request_config,
)
from csv_export.application.export import BOM, CsvExportService, ExportConfig, SourceRegistry
from csv_export.config.settings import ExportSettings
from csv_export.kernel.errors import (
    ConfigurationError,
    DomainError,
    InfrastructureError,
    IOFailure,
    NotFoundError,
)
from csv_export.testing.fakes import ListExporter
from csv_export.testing.fakes import sources as fake_sources


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _users() -> ListExporter:
    rows = [[i, f"user{i}@example.com"] for i in range(1, 8)]
    return ListExporter(rows, headings=["ID", "Email"]).set_max_limit(5)  # type: ignore[return-value]


def _service(tmp_path: Path) -> CsvExportService:
    registry = SourceRegistry()
    registry.register("users", _users)
    settings = ExportSettings(temp_dir=str(tmp_path / "tmp"), storage_root=str(tmp_path / "storage"))
    return CsvExportService(settings, registry=registry)


def _app(service: CsvExportService) -> FastAPI:
    app = FastAPI()
    app.include_router(FastAPIExportRouter(service))
    FastAPIExceptionMapper().register(app)
    return app


# ---------------------------------------------------------------------------
# Response helpers
# ---------------------------------------------------------------------------

class TestCsvHeaders:
    def test_download_headers(self) -> None:
        headers = csv_headers("users.csv")
        assert headers["Content-Disposition"] == 'attachment; filename="users.csv"'
        assert headers["Cache-Control"] == "must-revalidate, post-check=0, pre-check=0"
        assert headers["Expires"] == "0"
        assert headers["Pragma"] == "public"

    def test_filename_sanitised(self) -> None:
        headers = csv_headers('a"b\r\n.csv')
        assert headers["Content-Disposition"] == 'attachment; filename="ab.csv"'


class TestRequestConfig:
    def test_empty(self) -> None:
        assert request_config().is_empty

    def test_values(self) -> None:
        assert request_config(batch_size=10, row_cap=5, bom=True) == ExportConfig(
            batch_size=10, row_cap=5, bom_enabled=True
        )

    def test_no_cap_wins_over_row_cap(self) -> None:
        assert request_config(row_cap=5, no_cap=True) == ExportConfig(row_cap=None)


# ---------------------------------------------------------------------------
# Streaming router
# ---------------------------------------------------------------------------

class TestFastAPIExportRouter:
    def test_lists_exports(self, tmp_path: Path) -> None:
        client = TestClient(_app(_service(tmp_path)))
        resp = client.get("/exports")
        assert resp.status_code == 200
        assert resp.json() == {"exports": ["users"]}

    def test_streams_csv(self, tmp_path: Path) -> None:
        client = TestClient(_app(_service(tmp_path)))
        resp = client.get("/exports/users")
        assert resp.status_code == 200
        assert resp.headers["content-type"] == CSV_MEDIA_TYPE
        assert resp.headers["content-disposition"] == 'attachment; filename="users.csv"'
        assert resp.headers["pragma"] == "public"
        lines = resp.content.decode().splitlines()
        assert lines[0] == "ID,Email"
        assert len(lines) == 6

    def test_row_cap_param(self, tmp_path: Path) -> None:
        client = TestClient(_app(_service(tmp_path)))
        resp = client.get("/exports/users", params={"row_cap": 2, "batch_size": 1})
        assert len(resp.content.decode().splitlines()) == 3

    def test_no_cap_param(self, tmp_path: Path) -> None:
        client = TestClient(_app(_service(tmp_path)))
        resp = client.get("/exports/users", params={"no_cap": "true"})
        assert len(resp.content.decode().splitlines()) == 8

    def test_bom_param(self, tmp_path: Path) -> None:
        client = TestClient(_app(_service(tmp_path)))
        assert client.get("/exports/users", params={"bom": "true"}).content.startswith(BOM)

    def test_invalid_batch_size_rejected(self, tmp_path: Path) -> None:
        client = TestClient(_app(_service(tmp_path)))
        assert client.get("/exports/users", params={"batch_size": 0}).status_code == 422

    def test_unknown_export_is_404(self, tmp_path: Path) -> None:
        client = TestClient(_app(_service(tmp_path)))
        resp = client.get("/exports/orders")
        assert resp.status_code == 404
        assert resp.json()["code"] == "not_found"

    def test_import_paths_are_not_served(self, monkeypatch: pytest.MonkeyPatch) -> None:
        calls: list[str] = []

        def record_call() -> ListExporter:
            calls.append("called")
            return _users()

        monkeypatch.setattr(fake_sources, "record_call", record_call, raising=False)
        registry = SourceRegistry(allow_imports=True)
        registry.register("users", _users)
        client = TestClient(_app(CsvExportService(registry=registry)))

        resp = client.get("/exports/csv_export.testing.fakes.sources:record_call")
        assert resp.status_code == 404
        assert calls == []

    def test_default_service_rejects_import_paths(self) -> None:
        client = TestClient(_app(CsvExportService()))
        resp = client.get("/exports/csv_export.testing.fakes:ListExporter")
        assert resp.status_code == 404

    def test_requests_leave_shared_overrides_alone(self, tmp_path: Path) -> None:
        service = _service(tmp_path)
        service.set_row_cap(1)
        client = TestClient(_app(service))
        client.get("/exports/users", params={"row_cap": 3})
        assert service.pending_config == ExportConfig(row_cap=1)


# ---------------------------------------------------------------------------
# Service delivery through FastAPI responses
# ---------------------------------------------------------------------------

class TestServiceResponses:
    def test_stream_response(self, tmp_path: Path) -> None:
        service = _service(tmp_path)
        app = FastAPI()

        @app.get("/report")
        def report():
            return service.set_row_cap(2).stream(_users(), "report.csv")

        resp = TestClient(app).get("/report")
        assert resp.headers["content-disposition"] == 'attachment; filename="report.csv"'
        assert len(resp.content.decode().splitlines()) == 3

    def test_download_deletes_temp_file(self, tmp_path: Path) -> None:
        service = _service(tmp_path)
        app = FastAPI()

        @app.get("/report")
        def report():
            return service.download(_users(), "report.csv")

        resp = TestClient(app).get("/report")
        assert resp.status_code == 200
        assert resp.headers["content-type"] == CSV_MEDIA_TYPE
        assert resp.headers["content-disposition"] == 'attachment; filename="report.csv"'
        assert len(resp.content.decode().splitlines()) == 6
        assert list((tmp_path / "tmp").glob("*.csv")) == []


# ---------------------------------------------------------------------------
# Exception mapper
# ---------------------------------------------------------------------------

class TestFastAPIExceptionMapper:
    @pytest.mark.parametrize(
        ("exc", "status"),
        [
            (NotFoundError("Export source", "x"), 404),
            (ConfigurationError("bad"), 500),
            (IOFailure("disk"), 503),
            (InfrastructureError("infra"), 503),
            (DomainError("rule"), 422),
            (ValueError("other"), None),
        ],
    )
    def test_status_for(self, exc: Exception, status: int | None) -> None:
        assert FastAPIExceptionMapper().status_for(exc) == status

    def test_registered_handler_body(self) -> None:
        app = FastAPI()
        FastAPIExceptionMapper().register(app)

        @app.get("/fail")
        def fail():
            raise IOFailure("Failed to store CSV", path="r/u.csv")

        resp = TestClient(app).get("/fail")
        assert resp.status_code == 503
        body = resp.json()
        assert body["code"] == "io_failure"
        assert body["detail"] == {"path": "r/u.csv"}
