"""
Generic logger setup utilities.

Provides reusable loguru configuration with a provenance header at the top of
every log file. Context-specific wrappers should be defined in
contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional

from loguru import logger

from jobscan import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"

# Console colors; warnings stand out against INFO
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

HEADER_RULE = "=" * 80


def setup_logger(
    context_name: str,
    log_dir: Path,
    provenance: Optional[Mapping[str, Any]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Configure loguru for a context: a DEBUG log file plus a stderr console sink.

    The console goes to stderr so stdout stays clean for reports and JSON.

    Args:
        context_name: Context identifier, also the log file stem (e.g., "intake")
        log_dir: Directory for this logging session (created if missing)
        provenance: Extra header entries; nested mappings are logged indented
        console_level: Minimum level shown on the console

    Returns:
        Path to log file

    Example:
        log_file = setup_logger(
            context_name="intake",
            log_dir=Path("outs/logs/analyze"),
            provenance={"Input files": 3, "Settings": {"section_char_cap": 500}},
        )
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(context_name, provenance)

    return log_file


def _provenance_lines(entries: Mapping[str, Any], indent: str = "") -> Iterator[str]:
    for key, value in entries.items():
        if isinstance(value, Mapping):
            if not value:
                yield f"{indent}{key}: (none)"
                continue
            yield f"{indent}{key}:"
            yield from _provenance_lines(value, indent + "  ")
        else:
            yield f"{indent}{key}: {value}"


def log_provenance(context_name: str, extra: Optional[Mapping[str, Any]] = None) -> None:
    """
    Log the provenance header for a session.

    Records how the run was started (command, working directory, Python and
    jobscan versions) followed by any context-supplied entries.
    """
    standard = {
        "Context": context_name,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "jobscan": __version__,
    }

    logger.info(HEADER_RULE)
    for line in _provenance_lines({**standard, **(extra or {})}):
        logger.info(line)
    logger.info(HEADER_RULE)
