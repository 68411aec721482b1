"""Logging utilities for polytree."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class BuildStats:
    """Statistics from one tree construction."""

    contour_count: int = 0
    point_count: int = 0
    leaves: int = 0
    full_nodes: int = 0
    branches: int = 0
    empty_cells: int = 0
    full_cells: int = 0
    clip_calls: int = 0
    max_depth_reached: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate build duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def node_count(self) -> int:
        """Total nodes created (sentinel cells excluded)."""
        return self.leaves + self.full_nodes + self.branches


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"polytree_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
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

    logger = structlog.get_logger("polytree")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class BuildLogger:
    """Records tree construction events and folds them into BuildStats.

    Without an explicit logger, events go to the stdlib ``polytree.build``
    logger through structlog's stdlib wrapper, so nothing is emitted unless
    the application has configured logging.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        if logger is None:
            logger = structlog.wrap_logger(
                logging.getLogger("polytree.build"),
                wrapper_class=structlog.stdlib.BoundLogger,
                processors=[
                    structlog.stdlib.filter_by_level,
                    structlog.stdlib.render_to_log_kwargs,
                ],
            )
        self._logger = logger
        self._stats = BuildStats()

    def log_build_start(self, contour_count: int, point_count: int, start_time: float) -> None:
        """Log start of a tree build."""
        self._stats = BuildStats(
            contour_count=contour_count,
            point_count=point_count,
            start_time=start_time,
        )
        self._logger.debug("Building tree", contours=contour_count, points=point_count)

    def log_build_complete(self, end_time: float) -> None:
        """Log successful end of a tree build."""
        self._stats.end_time = end_time
        self._logger.info(
            "Tree built",
            contours=self._stats.contour_count,
            points=self._stats.point_count,
            nodes=self._stats.node_count,
            leaves=self._stats.leaves,
            depth=self._stats.max_depth_reached,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    def log_leaf(self, depth: int, point_count: int, reason: str) -> None:
        """Log creation of a leaf node."""
        self._track_depth(depth)
        self._stats.leaves += 1
        self._logger.debug("Leaf", depth=depth, points=point_count, reason=reason)

    def log_full(self, depth: int) -> None:
        """Log creation of a full (rectangle) node."""
        self._track_depth(depth)
        self._stats.full_nodes += 1
        self._logger.debug("Full node", depth=depth)

    def log_branch(self, depth: int, x_parts: int, y_parts: int, point_count: int) -> None:
        """Log creation of a branch node."""
        self._track_depth(depth)
        self._stats.branches += 1
        self._logger.debug(
            "Branch",
            depth=depth,
            x_parts=x_parts,
            y_parts=y_parts,
            points=point_count,
        )

    def log_cell(self, depth: int, i: int, j: int, parts: int, state: str) -> None:
        """Log classification of one clipped grid cell."""
        self._stats.clip_calls += 1
        if state == "empty":
            self._stats.empty_cells += 1
        elif state == "full":
            self._stats.full_cells += 1
        self._logger.debug("Cell", depth=depth, i=i, j=j, parts=parts, state=state)

    def _track_depth(self, depth: int) -> None:
        self._stats.max_depth_reached = max(self._stats.max_depth_reached, depth)

    @property
    def stats(self) -> BuildStats:
        """Get statistics of the current build."""
        return self._stats
