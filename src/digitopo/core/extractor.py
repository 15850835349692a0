"""Boundary extraction orchestration.

This module ties the pieces together for callers holding a digital set:
it builds the Khalimsky space around the set's domain, extracts 2D
contours or nD surfaces with the configured surfel adjacency, traverses
surfaces with the configured visitor, and keeps run statistics.

Key components:
- BoundaryExtractor: Main orchestrator class
"""

import time

import structlog

from digitopo.config import DigitopoSettings, TraversalStrategy
from digitopo.core.digital_surface import DigitalSurface, SurfelSetBoundary
from digitopo.core.kspace import KhalimskySpace
from digitopo.core.surfaces import (
    extract_all_boundaries,
    extract_all_point_contours_4c,
    find_a_bel,
)
from digitopo.core.surfel_adjacency import SurfelAdjacency
from digitopo.core.visitors import make_visitor
from digitopo.domain import Contour, DigitalSet, HyperRectDomain, SCell
from digitopo.exceptions import DigitopoError, DimensionMismatchError
from digitopo.utils import ExtractionLogger, ExtractionStats, configure_logging


class BoundaryExtractor:
    """Extracts and walks the boundaries of digital sets.

    Example:
        extractor = BoundaryExtractor(DigitopoSettings())
        contours = extractor.extract_contours(digital_set)
        for surface in extractor.extract_surfaces(volume_set):
            order = extractor.traverse(surface)
    """

    def __init__(
        self,
        config: DigitopoSettings,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            config: Settings for tracking, space, traversal and logging
            logger: Logger to use (configured from ``config.logging`` if None)
        """
        self.config = config
        if logger is None:
            logger = configure_logging(
                log_file=config.logging.log_file,
                console_level=config.logging.log_level,
                file_level=config.logging.file_log_level,
                quiet=False,
            )
        self.logger = logger
        self.extraction_logger = ExtractionLogger(logger)

    @property
    def stats(self) -> ExtractionStats:
        return self.extraction_logger.stats

    def build_space(self, domain: HyperRectDomain) -> KhalimskySpace:
        return KhalimskySpace.from_domain(domain, periodic=self.config.space.periodic)

    def surfel_adjacency(self, dimension: int) -> SurfelAdjacency:
        return SurfelAdjacency(
            dimension, interior_to_exterior=self.config.tracking.interior_to_exterior
        )

    def find_bel(self, digital_set: DigitalSet) -> SCell:
        """Locate one bel of the set within the configured search budget.

        Raises:
            BelNotFoundError: If the set is uniform or the budget runs out
        """
        kspace = self.build_space(digital_set.domain)
        try:
            bel = find_a_bel(
                kspace,
                digital_set.predicate(),
                budget=self.config.tracking.bel_search_budget,
            )
        except DigitopoError as e:
            self.extraction_logger.log_error("find_bel", e)
            raise
        self.extraction_logger.log_bel_found(bel.kcoords)
        return bel

    def extract_contours(self, digital_set: DigitalSet) -> list[Contour]:
        """Extract every closed contour of a 2D set.

        Returns:
            Contours in discovery order: outer borders counter-clockwise,
            hole borders clockwise

        Raises:
            DimensionMismatchError: If the set is not 2D
        """
        if digital_set.domain.dimension != 2:
            raise DimensionMismatchError(2, digital_set.domain.dimension, "extract_contours")
        self._start()
        kspace = self.build_space(digital_set.domain)
        try:
            point_contours = extract_all_point_contours_4c(
                kspace, digital_set.predicate(), self.surfel_adjacency(2)
            )
        except DigitopoError as e:
            self.extraction_logger.log_error("extract_contours", e)
            raise
        contours = [Contour(points) for points in point_contours]
        for index, contour in enumerate(contours):
            self.extraction_logger.log_contour(index, len(contour), contour.signed_area())
        self._finish("Contours extracted", count=len(contours))
        return contours

    def extract_surfaces(self, digital_set: DigitalSet) -> list[DigitalSurface]:
        """Extract every connected boundary component of a set, as graphs."""
        self._start()
        kspace = self.build_space(digital_set.domain)
        adjacency = self.surfel_adjacency(kspace.dimension)
        try:
            components = extract_all_boundaries(
                kspace, adjacency, digital_set.predicate()
            )
        except DigitopoError as e:
            self.extraction_logger.log_error("extract_surfaces", e)
            raise
        surfaces = [
            DigitalSurface(SurfelSetBoundary(kspace, adjacency, component))
            for component in components
        ]
        for index, surface in enumerate(surfaces):
            self.extraction_logger.log_surface(index, surface.size())
        self._finish("Surfaces extracted", count=len(surfaces))
        return surfaces

    def traverse(
        self,
        surface: DigitalSurface,
        seed: SCell | None = None,
        strategy: TraversalStrategy | None = None,
    ) -> list[SCell]:
        """Visit a surface from ``seed`` (its first surfel by default).

        Returns:
            Surfels in visiting order
        """
        if strategy is None:
            strategy = self.config.traversal.strategy
        if seed is None:
            seed = next(iter(surface))
        start = time.time()
        with make_visitor(surface, seed, strategy) as visitor:
            order = list(visitor)
        duration_ms = (time.time() - start) * 1000
        self.extraction_logger.log_traversal(
            TraversalStrategy(strategy).value, len(order), duration_ms
        )
        return order

    def _start(self) -> None:
        if self.stats.start_time is None:
            self.stats.start_time = time.time()

    def _finish(self, event: str, **fields: object) -> None:
        self.stats.end_time = time.time()
        self.logger.info(
            event,
            duration_seconds=round(self.stats.duration_seconds, 4),
            **fields,
        )
