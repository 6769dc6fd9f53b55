"""Generic utilities for taxonomy workflows."""

from .logging import get_logger, setup_logging
from .taxonomy import TaxonRank

__all__ = [
    "TaxonRank",
    "setup_logging",
    "get_logger",
]
