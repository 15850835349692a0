"""Logging utilities for digitopo."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_MARK = "_digitopo_handler"


@dataclass
class ExtractionStats:
    """Statistics from an extraction run."""

    bel_searches: int = 0
    contours_extracted: int = 0
    surfaces_extracted: int = 0
    surfels_tracked: int = 0
    vertices_visited: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate extraction duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def _install(handler: logging.Handler, level: str) -> None:
    handler.setLevel(getattr(logging, level.upper()))
    setattr(handler, _HANDLER_MARK, True)
    logging.getLogger().addHandler(handler)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and optionally a file.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _install(file_handler, file_level)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    _install(console_handler, "ERROR" if quiet else console_level)

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

    logger = structlog.get_logger("digitopo")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ExtractionLogger:
    """Logger for tracking extraction progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ExtractionStats()

    def log_bel_found(self, bel: tuple[int, ...]) -> None:
        """Log a successful bel search."""
        self._logger.debug("Bel found", bel=bel)
        self._stats.bel_searches += 1

    def log_contour(self, index: int, length: int, area: float) -> None:
        """Log one extracted 2D contour."""
        self._logger.info("Contour extracted", index=index, length=length, area=area)
        self._stats.contours_extracted += 1
        self._stats.surfels_tracked += length

    def log_surface(self, index: int, size: int) -> None:
        """Log one extracted surface component."""
        self._logger.info("Surface extracted", index=index, size=size)
        self._stats.surfaces_extracted += 1
        self._stats.surfels_tracked += size

    def log_traversal(self, strategy: str, visited: int, duration_ms: float) -> None:
        """Log a completed surface traversal."""
        self._logger.info(
            "Surface traversed",
            strategy=strategy,
            visited=visited,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.vertices_visited += visited

    def log_error(self, context: str, error: Exception) -> None:
        """Log an extraction error."""
        self._logger.error(
            "Extraction failed",
            context=context,
            error=str(error),
            error_type=type(error).__name__,
            kind=getattr(error, "kind", None),
        )
        self._stats.error_count += 1
        self._stats.errors.append((context, str(error)))

    @property
    def stats(self) -> ExtractionStats:
        """Get current extraction statistics."""
        return self._stats
