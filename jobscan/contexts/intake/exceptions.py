"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class AnalyzerConfigError(ValueError):
    """
    Exception raised when analyzer settings cannot be loaded or are invalid.

    Extraction itself never raises; this only surfaces problems with a
    settings file supplied through JD_ANALYZER_CONFIG or a CLI option.

    Attributes:
        message: Error description
        config_path: Path to the offending settings file, if any
        field_name: Name of the invalid setting, if the error is about one field
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[Path] = None,
        field_name: Optional[str] = None,
    ):
        self.message = message
        self.config_path = config_path
        self.field_name = field_name

        # Build enhanced error message
        parts = [message]

        if field_name:
            parts.append(f"Setting: {field_name}")

        if config_path:
            parts.append(f"Config file: {config_path}")

        super().__init__("\n".join(parts))
