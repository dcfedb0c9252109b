"""
Logging setup with contextvars-based metadata injection.

- Adds the active loader kind and table source into every log line (via contextvars).
- Supports console-only logging OR console + rotating file logs.
- Tunes noisy third-party library loggers (httpx, httpcore).
"""

import contextvars
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Context variables for dynamic log metadata
cv_loader = contextvars.ContextVar("loader", default="-")
cv_source = contextvars.ContextVar("source", default="-")


class ContextInjectFilter(logging.Filter):
    """Inject context variables into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.loader = cv_loader.get() or "-"
        record.src = cv_source.get() or "-"
        return True


def set_log_context(*, loader: str | None = None, source: str | None = None) -> None:
    """Update logging context (thread-safe via contextvars)."""
    if loader is not None:
        cv_loader.set(str(loader))
    if source is not None:
        cv_source.set(str(source))


def get_log_context() -> dict[str, str]:
    """Return the current context in a convenient dict form."""
    return {
        "loader": str(cv_loader.get() or "-"),
        "source": str(cv_source.get() or "-"),
    }


def clear_log_context() -> None:
    """Reset loader context to defaults."""
    cv_loader.set("-")
    cv_source.set("-")


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure application logging with contextvars support.

    Args:
        log_file: Path to log file
        console_level: Minimum level for console output (default: INFO)
        file_level: Minimum level for file output (default: DEBUG)
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    # Clear existing handlers to avoid duplicate logs if called multiple times
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)  # keep root permissive; handlers enforce levels

    console_fmt = "%(asctime)s [%(levelname)s] loader=%(loader)s | %(message)s"
    file_fmt = "%(asctime)s [%(levelname)s] %(name)s | loader=%(loader)s src=%(src)s | %(message)s"

    ctx_filter = ContextInjectFilter()

    ch = logging.StreamHandler()
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter(console_fmt, datefmt="%H:%M:%S"))
    ch.addFilter(ctx_filter)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(file_fmt, datefmt="%Y-%m-%d %H:%M:%S"))
        fh.addFilter(ctx_filter)
        root.addHandler(fh)

    # Reduce noise from HTTP libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        str(log_file) if log_file is not None else "None",
    )
