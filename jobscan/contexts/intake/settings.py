"""
Analyzer settings for the intake context.

Positional limits used by the extractors (how many lines to scan for a title,
how long an excerpt may run, etc.) live in an immutable AnalyzerSettings value.
Defaults reproduce the stock heuristics; a YAML file named by the
JD_ANALYZER_CONFIG environment variable (or passed explicitly) can override them.

Example YAML (flat, or nested under an "analyzer" key):

    analyzer:
      title_scan_lines: 5
      section_char_cap: 1000
      max_input_chars: 200000
"""

import os
from dataclasses import dataclass, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from jobscan.contexts.intake.exceptions import AnalyzerConfigError
from jobscan.contexts.intake.jd_patterns import SECTION_CHAR_CAP, UNTITLED_POSITION
from jobscan.contexts.intake.logger import _log_warning

load_dotenv()
CONFIG_ENV_VAR = "JD_ANALYZER_CONFIG"


@dataclass(frozen=True)
class AnalyzerSettings:
    """
    Tunable limits for the heuristic extractors.

    Attributes:
        title_scan_lines: Leading lines inspected by the title keyword scan
        title_max_length: Title candidates must be shorter than this
        fallback_title_max_length: Bare-line fallback titles must be shorter than this
        min_title_length: Title candidates must be longer than this
        section_char_cap: Excerpt length when no closing section header is found
        untitled_position: Title returned when every strategy fails
        max_input_chars: Scan only this many leading characters (0 disables the cap)
    """

    title_scan_lines: int = 5
    title_max_length: int = 100
    fallback_title_max_length: int = 80
    min_title_length: int = 3
    section_char_cap: int = SECTION_CHAR_CAP
    untitled_position: str = UNTITLED_POSITION
    max_input_chars: int = 0


DEFAULT_SETTINGS = AnalyzerSettings()

# Settings that must be strictly positive
_POSITIVE_FIELDS = (
    "title_scan_lines",
    "title_max_length",
    "fallback_title_max_length",
    "section_char_cap",
)


def _read_config(config_path: Path) -> Dict[str, Any]:
    """Load a YAML settings file into a plain dict."""
    if not config_path.exists():
        raise AnalyzerConfigError("Analyzer config file not found", config_path=config_path)

    try:
        values = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)
    except (OmegaConfBaseException, yaml.YAMLError, OSError) as e:
        raise AnalyzerConfigError(f"Could not read analyzer config: {e}", config_path=config_path)

    if values is None:
        return {}
    if not isinstance(values, dict):
        raise AnalyzerConfigError("Analyzer config must be a mapping", config_path=config_path)

    # Allow settings nested under an "analyzer" key
    if isinstance(values.get("analyzer"), dict):
        values = values["analyzer"]

    return values


def _validate(settings: AnalyzerSettings, config_path: Optional[Path]) -> None:
    for name in _POSITIVE_FIELDS:
        if getattr(settings, name) <= 0:
            raise AnalyzerConfigError(
                "Value must be a positive integer", config_path=config_path, field_name=name
            )

    if settings.min_title_length < 0:
        raise AnalyzerConfigError(
            "Value must not be negative", config_path=config_path, field_name="min_title_length"
        )

    if settings.max_input_chars < 0:
        raise AnalyzerConfigError(
            "Value must not be negative (use 0 to disable the cap)",
            config_path=config_path,
            field_name="max_input_chars",
        )

    if not settings.untitled_position.strip():
        raise AnalyzerConfigError(
            "Fallback title must not be empty",
            config_path=config_path,
            field_name="untitled_position",
        )


def resolve_config_path(config_path: Optional[Path] = None) -> Optional[Path]:
    """Return the settings file in effect: the explicit path, then JD_ANALYZER_CONFIG."""
    if config_path is not None:
        return Path(config_path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    return Path(env_path) if env_path else None


def load_settings(config_path: Optional[Path] = None) -> AnalyzerSettings:
    """
    Load analyzer settings, applying overrides from a YAML file if one is given.

    Args:
        config_path: Optional path to a YAML settings file
                     (defaults to the JD_ANALYZER_CONFIG env variable, then built-in defaults)

    Returns:
        Validated AnalyzerSettings

    Raises:
        AnalyzerConfigError: If the file is missing, unreadable, has unknown keys,
                             or holds invalid values
    """
    config_path = resolve_config_path(config_path)
    if config_path is None:
        return DEFAULT_SETTINGS

    values = _read_config(config_path)

    known = {f.name: f.type for f in fields(AnalyzerSettings)}
    unknown = sorted(set(values) - set(known))
    if unknown:
        raise AnalyzerConfigError(
            f"Unknown analyzer settings: {', '.join(unknown)}", config_path=config_path
        )

    for name, value in values.items():
        expected = str if known[name] is str else int
        # bool is an int subclass but never a meaningful limit
        if not isinstance(value, expected) or isinstance(value, bool):
            raise AnalyzerConfigError(
                f"Expected {expected.__name__}, got {type(value).__name__}",
                config_path=config_path,
                field_name=name,
            )

    settings = AnalyzerSettings(**values)
    _validate(settings, config_path)
    return settings


def settings_overrides(settings: AnalyzerSettings) -> Dict[str, Any]:
    """Settings whose values differ from the built-in defaults."""
    return {
        f.name: getattr(settings, f.name)
        for f in fields(AnalyzerSettings)
        if getattr(settings, f.name) != getattr(DEFAULT_SETTINGS, f.name)
    }


@lru_cache(maxsize=1)
def get_settings() -> AnalyzerSettings:
    """
    Process-wide settings, loaded once on first use.

    A missing or invalid JD_ANALYZER_CONFIG file is logged and the built-in
    defaults are used, so library callers of analyze() never see a config
    error. Use load_settings() directly to fail fast (as the CLI does).
    """
    try:
        return load_settings()
    except AnalyzerConfigError as e:
        _log_warning(f"Ignoring analyzer config, using defaults: {e}")
        return DEFAULT_SETTINGS
