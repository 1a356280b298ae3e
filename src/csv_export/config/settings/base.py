"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses are plain dataclasses. ``_prefix`` namespaces the environment
    variables (``<PREFIX>_<FIELD>``) and ``_escaped_fields`` lists string
    fields whose env values may carry backslash escapes such as ``\\t``.
    """

    _prefix: ClassVar[str] = ""
    _escaped_fields: ClassVar[frozenset[str]] = frozenset()

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
