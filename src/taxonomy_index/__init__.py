"""taxonomyIndex.

Builds a strictly ranked taxonomy (Order down to Species) from a generic
element tree, such as a parsed XML document, and answers lookups by clade
name and by rank.
"""

# Key utilities
from .utils.logging import get_logger, setup_logging

# Core data structures
from .core import (
    BuildOptions,
    ChildSelection,
    Config,
    DetachedTaxonError,
    InvalidArgumentError,
    InvalidRootError,
    TaxonomyError,
    UnknownRankError,
)
from .tree import DomElement, Element, EtreeElement, Taxon, TaxonomyTree
from .utils.taxonomy import TaxonRank

__version__ = "0.1.0"

__all__ = [
    "TaxonomyTree",
    "Taxon",
    "TaxonRank",
    "Element",
    "DomElement",
    "EtreeElement",
    "BuildOptions",
    "ChildSelection",
    "Config",
    "TaxonomyError",
    "UnknownRankError",
    "InvalidRootError",
    "InvalidArgumentError",
    "DetachedTaxonError",
    "setup_logging",
    "get_logger",
]

# Configure default logging
setup_logging()
