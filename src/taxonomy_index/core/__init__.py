"""Core configuration and error types for taxonomy workflows."""

from .config import BuildOptions, ChildSelection, Config
from .errors import (
    DetachedTaxonError,
    InvalidArgumentError,
    InvalidRootError,
    TaxonomyError,
    UnknownRankError,
)

__all__ = [
    "BuildOptions",
    "ChildSelection",
    "Config",
    "TaxonomyError",
    "UnknownRankError",
    "InvalidRootError",
    "InvalidArgumentError",
    "DetachedTaxonError",
]
