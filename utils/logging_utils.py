"""
Central logging configuration for the Airly client and its CLI.

Usage
-----
In an entrypoint (the CLI, a cron job, a notebook):

    from utils.logging_utils import setup_logging

    def main() -> None:
        setup_logging(level="INFO", job_name="airly_cli")
        ...

In a module:

    from utils.logging_utils import get_tagged_logger

    logger = get_tagged_logger(__name__, tag="airly/client")

    def get_indexes() -> None:
        logger.debug("Fetching index metadata")

Library code only asks for tagged loggers; configuring handlers is left to
whoever runs the process. The API key must never reach a log record in clear
text, so request headers go through `mask_headers()` first.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Mapping, Optional


# ---------------------------------------------------------------------------
# Defaults for full configuration
# ---------------------------------------------------------------------------

DEFAULT_LOG_FORMAT = (
    "%(asctime)s | %(levelname)s | %(job_name)s | %(tag)s | %(name)s | %(message)s"
)
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SENSITIVE_HEADER_TOKENS = ("apikey", "api-key", "authorization", "token")

_CONFIGURED: bool = False


# ---------------------------------------------------------------------------
# Filters to enrich log records
# ---------------------------------------------------------------------------

class MaxLevelFilter(logging.Filter):
    """Pass only records at or below `max_level` (routes DEBUG/INFO to stdout)."""

    def __init__(self, max_level: int) -> None:
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        return record.levelno <= self.max_level


class EnsureTagFilter(logging.Filter):
    """
    Guarantee a `tag` attribute on every record.

    Records from plain loggers (requests, urllib3) have no tag; they get the
    last segment of their logger name, e.g. "urllib3.connectionpool" -> "connectionpool".
    """

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not hasattr(record, "tag"):
            logger_name = getattr(record, "name", "")
            record.tag = logger_name.split(".")[-1] if logger_name else "-"
        return True


class JobNameFilter(logging.Filter):
    """Stamp a per-process `job_name` on every record ("-" when unset)."""

    def __init__(self, job_name: Optional[str] = None) -> None:
        super().__init__()
        self._job_name = job_name or "-"

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        if not hasattr(record, "job_name"):
            record.job_name = self._job_name
        return True


# ---------------------------------------------------------------------------
# Config builder and setup function
# ---------------------------------------------------------------------------


def build_logging_config(
    *,
    level: str | int = "INFO",
    log_format: str = DEFAULT_LOG_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    job_name: Optional[str] = None,
) -> Mapping[str, Any]:
    """
    Build a dictConfig-style logging configuration.

    Parameters
    ----------
    level:
        Root logger level (e.g., "DEBUG", "INFO", logging.INFO).
    log_format:
        Formatter pattern for log messages.
    date_format:
        Formatter pattern for timestamps.
    job_name:
        Optional name for this process (e.g. "airly_cli").

    Returns
    -------
    dict suitable for logging.config.dictConfig().
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "ensure_tag": {"()": EnsureTagFilter},
            "job_name": {"()": JobNameFilter, "job_name": job_name},
            "stdout_max_info": {
                "()": MaxLevelFilter,
                "max_level": logging.INFO,
            },
        },
        "formatters": {
            "standard": {
                "format": log_format,
                "datefmt": date_format,
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "filters": ["ensure_tag", "job_name", "stdout_max_info"],
                "level": "DEBUG",
                "stream": "ext://sys.stdout",
            },
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "filters": ["ensure_tag", "job_name"],
                "level": "WARNING",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": level,
            "handlers": ["stdout", "stderr"],
        },
    }


def setup_logging(
    *,
    level: str | int = "INFO",
    log_format: str = DEFAULT_LOG_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    job_name: Optional[str] = None,
    override_existing: bool = False,
) -> None:
    """
    Configure process-wide logging once.

    Repeated calls are no-ops unless `override_existing` is True.
    """
    global _CONFIGURED

    if _CONFIGURED and not override_existing:
        return

    config_dict = build_logging_config(
        level=level,
        log_format=log_format,
        date_format=date_format,
        job_name=job_name,
    )
    logging.config.dictConfig(config_dict)
    _CONFIGURED = True


# ---------------------------------------------------------------------------
# Logger helper
# ---------------------------------------------------------------------------


def get_tagged_logger(
    name: str,
    *,
    tag: Optional[str] = None,
) -> logging.LoggerAdapter:
    """
    Return a LoggerAdapter that always carries a `tag` field.

    If `tag` is omitted it defaults to the last segment of `name`,
    e.g. "airly.client" -> "client".
    """
    base_logger = logging.getLogger(name)
    if tag is None:
        tag = name.split(".")[-1]
    return logging.LoggerAdapter(base_logger, {"tag": tag})


# ---------------------------------------------------------------------------
# Secret masking
# ---------------------------------------------------------------------------


def mask_secret(value: Optional[str], *, visible: int = 4) -> Optional[str]:
    """Return `value` with all but its last `visible` characters replaced by '*'.

    Examples
    --------
    - "0123456789abcdef" -> "************cdef"
    - "abc" -> "***"
    - None -> None
    """
    if value is None:
        return None
    if len(value) <= visible:
        return "*" * len(value)
    return "*" * (len(value) - visible) + value[-visible:]


def mask_headers(headers: Mapping[str, str]) -> dict:
    """Return a copy of request headers with credential values masked."""
    masked = {}
    for key, value in headers.items():
        if any(token in key.lower() for token in SENSITIVE_HEADER_TOKENS):
            masked[key] = mask_secret(value)
        else:
            masked[key] = value
    return masked
