"""Application export – per-run overrides (ExportConfig) and their resolution."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Final

from csv_export.application.export.source import SourceDefaults, _check_batch_size, _check_row_cap
from csv_export.kernel.errors import ConfigurationError

__all__ = ["UNSET", "ExportConfig", "ResolvedExportConfig"]


class _Unset(Enum):
    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset.UNSET


@dataclasses.dataclass(frozen=True)
class ResolvedExportConfig:
    """The settings one run actually uses."""

    batch_size: int
    row_cap: int | None
    row_cap_enabled: bool
    bom_enabled: bool

    @property
    def effective_row_cap(self) -> int | None:
        """The cap to enforce, or ``None`` when the run is uncapped."""
        if self.row_cap_enabled and self.row_cap:
            return self.row_cap
        return None


@dataclasses.dataclass
class ExportConfig:
    """Overrides for a single export run.

    Every field starts as :data:`UNSET`, meaning "use the source's default".
    ``row_cap=None`` is an explicit "no cap" and disables the cap for the
    run whatever ``row_cap_enabled`` says.
    """

    batch_size: int | _Unset = UNSET
    row_cap: int | None | _Unset = UNSET
    row_cap_enabled: bool | _Unset = UNSET
    bom_enabled: bool | _Unset = UNSET

    def __post_init__(self) -> None:
        if self.batch_size is not UNSET:
            _check_batch_size(self.batch_size)  # type: ignore[arg-type]
        if self.row_cap is not UNSET:
            _check_row_cap(self.row_cap)  # type: ignore[arg-type]
        for name in ("row_cap_enabled", "bom_enabled"):
            value = getattr(self, name)
            if value is not UNSET and not isinstance(value, bool):
                raise ConfigurationError(f"{name} must be a bool, got {value!r}")

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is UNSET for f in dataclasses.fields(self))

    def overrides(self) -> dict[str, Any]:
        """Only the fields that were explicitly set."""
        return {
            f.name: getattr(self, f.name)
            for f in dataclasses.fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def resolve(self, defaults: SourceDefaults) -> ResolvedExportConfig:
        values = {f.name: getattr(defaults, f.name) for f in dataclasses.fields(defaults)}
        values.update(self.overrides())
        if self.row_cap is None:
            values["row_cap_enabled"] = False
        return ResolvedExportConfig(**values)
