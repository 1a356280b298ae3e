"""Config validation errors."""
from csv_export.config.validation.errors import (
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["InvalidSettingValueError", "MissingRequiredSettingError"]
