"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.

The analyzer only emits messages; sinks are configured by whoever runs it
(setup_intake_logger() in scripts, loguru's default stderr sink otherwise).
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from jobscan.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(
    log_dir: Path,
    config_path: Optional[Path] = None,
    overrides: Optional[dict] = None,
    extra_provenance: Optional[dict] = None,
) -> Path:
    """
    Setup logger for intake context.

    The provenance header records which settings file was in effect and
    which limits it changed, so a log explains the results it sits next to.

    Args:
        log_dir: Directory for this analysis session
        config_path: Settings file in effect (None means built-in defaults)
        overrides: Settings that differ from the defaults (see settings_overrides())
        extra_provenance: Additional key-value pairs for the provenance header

    Returns:
        Path to log file

    Example:
        from jobscan.contexts.intake.logger import setup_intake_logger

        log_file = setup_intake_logger(
            Path("outs/logs/analyze"),
            config_path=Path("configs/analyzer.yaml"),
            overrides={"section_char_cap": 500},
        )
    """
    provenance = {
        "Analyzer config": config_path or "built-in defaults",
        "Setting overrides": overrides or {},
        **(extra_provenance or {}),
    }
    return _setup_logger(context_name="intake", log_dir=log_dir, provenance=provenance)


def setup_console_logger(level: str = "WARNING") -> None:
    """Replace all sinks with a single stderr sink at the given level."""
    logger.remove()
    logger.add(sys.stderr, format="<level>{level: <7}</level> | {message}", level=level)


# Wrapper functions with automatic [intake] prefix


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level intake-specific logging helpers


def log_analysis_start(text_length: int, source: Optional[str] = None) -> None:
    """Log start of a job description analysis."""
    if source:
        _log_info(f"Analyzing {source}")
    _log_debug(f"  Input length: {text_length} chars")


def log_input_truncated(original_length: int, cap: int) -> None:
    _log_warning(f"Input is {original_length} chars; scanning only the first {cap}")


def log_strategy_hit(strategy_name: str, title: str) -> None:
    """Log which title strategy produced the title."""
    _log_debug(f"  Title from {strategy_name}: {title!r}")


def log_analysis_result(job) -> None:
    """
    Log a summary of an analysis result.

    Args:
        job: JobDescription returned by analyze()
    """
    required = job.required_skill_set()
    preferred = job.preferred_skill_set()

    _log_success(f"Title: {job.job_title}")
    _log_debug(f"  Company: {job.company_name or '(none)'}")
    _log_debug(f"  Required skills: {len(required)}")
    _log_debug(f"  Preferred skills: {len(preferred)}")
    _log_debug(f"  Responsibilities excerpt: {len(job.responsibilities)} chars")
