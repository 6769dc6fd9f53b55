"""Taxonomy construction from element trees and indexed queries."""

from .elements import DomElement, Element, ElementLike, EtreeElement
from .index import TaxonomyTree
from .taxon import Taxon, select_branches

__all__ = [
    "Element",
    "ElementLike",
    "DomElement",
    "EtreeElement",
    "Taxon",
    "TaxonomyTree",
    "select_branches",
]
