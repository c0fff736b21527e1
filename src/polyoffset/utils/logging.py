"""Logging utilities for polyoffset."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from polyoffset.config import LoggingConfig, PolyoffsetSettings
from polyoffset.domain import CornerKind

LOGGER_NAME = "polyoffset"


@dataclass
class OffsetStats:
    """Statistics from one offset call."""

    input_count: int = 0
    output_count: int = 0
    duplicates_removed: int = 0
    convex_count: int = 0
    reflex_count: int = 0
    collinear_count: int = 0
    uturn_count: int = 0
    chamfer_count: int = 0
    skipped_count: int = 0
    deferred_count: int = 0
    start_time: float | None = None
    end_time: float | None = None
    corners: dict[int, CornerKind] = field(default_factory=dict)

    @property
    def duration_seconds(self) -> float:
        """Calculate offset duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    polyoffset is a library and logs nothing visible until an application
    calls this function (or configures stdlib logging itself).

    Args:
        log_file: Path to log file (None = no file output)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(LOGGER_NAME)
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def configure_logging_from_settings(
    settings: PolyoffsetSettings | LoggingConfig,
) -> structlog.stdlib.BoundLogger:
    """Configure logging from library settings.

    Args:
        settings: Full settings or just their logging section

    Returns:
        Configured structlog logger
    """
    config = settings.logging if isinstance(settings, PolyoffsetSettings) else settings
    return configure_logging(
        log_file=config.log_file,
        console_level=config.log_level,
        file_level=config.file_log_level,
        quiet=config.quiet,
    )


def get_logger() -> structlog.stdlib.BoundLogger:
    """Get the library logger.

    Before ``configure_logging`` has run, events are handed to the stdlib
    ``polyoffset`` logger so an unconfigured application stays silent.
    """
    if structlog.is_configured():
        return structlog.get_logger(LOGGER_NAME)
    return structlog.wrap_logger(
        logging.getLogger(LOGGER_NAME),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


class OffsetLogger:
    """Logger for tracking the corners resolved by one offset call."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._stats = OffsetStats()

    def log_start(self, operation: str, input_count: int, closed: bool) -> None:
        """Log start of an offset call."""
        self._stats.input_count = input_count
        self._stats.start_time = time.perf_counter()
        self._logger.debug(
            "Offset started", operation=operation, points=input_count, closed=closed
        )

    def log_duplicates(self, removed: int) -> None:
        """Log consecutive duplicate points dropped before offsetting."""
        if removed:
            self._logger.debug("Duplicate points removed", removed=removed)
        self._stats.duplicates_removed += removed

    def log_corner(self, index: int, kind: CornerKind) -> None:
        """Log a classified corner."""
        self._stats.corners[index] = kind
        if kind is CornerKind.CONVEX:
            self._stats.convex_count += 1
        elif kind is CornerKind.REFLEX:
            self._stats.reflex_count += 1
        elif kind is CornerKind.COLLINEAR:
            self._stats.collinear_count += 1
        else:
            self._stats.uturn_count += 1

    def log_distance_change(self, index: int, d_prev: float, d_next: float, policy: str) -> None:
        """Log a collinear vertex whose two segments have different distances."""
        self._logger.debug(
            "Collinear distance change",
            index=index,
            d_prev=d_prev,
            d_next=d_next,
            policy=policy,
        )

    def log_uturn(self, index: int, degrees: float, policy: str, emitted: int) -> None:
        """Log a resolved U-turn."""
        self._logger.debug(
            "U-turn resolved",
            index=index,
            degrees=round(degrees, 4),
            policy=policy,
            emitted=emitted,
        )
        if emitted == 2:
            self._stats.chamfer_count += 1
        elif emitted == 0:
            self._stats.skipped_count += 1

    def log_skipped(self, index: int, reason: str) -> None:
        """Log a vertex that produced no output point."""
        self._logger.debug("Vertex skipped", index=index, reason=reason)
        self._stats.skipped_count += 1

    def log_deferred(self, count: int, policy: str) -> None:
        """Log points fixed up after the main pass."""
        self._logger.debug("Deferred points resolved", count=count, policy=policy)
        self._stats.deferred_count += count

    def log_complete(self, output_count: int) -> None:
        """Log end of an offset call."""
        self._stats.output_count = output_count
        self._stats.end_time = time.perf_counter()
        self._logger.debug(
            "Offset complete",
            points=self._stats.input_count,
            result=output_count,
            convex=self._stats.convex_count,
            reflex=self._stats.reflex_count,
            uturns=self._stats.uturn_count,
            chamfers=self._stats.chamfer_count,
            duration_ms=round(self._stats.duration_seconds * 1000, 3),
        )

    @property
    def stats(self) -> OffsetStats:
        """Get statistics of the current offset call."""
        return self._stats
