"""Name and rank queries over a constructed taxonomy."""

import logging
from typing import Dict, List, Optional, Union

import polars as pl

from taxonomy_index.core.config import BuildOptions, ChildSelection
from taxonomy_index.core.errors import (
    ERR_NAME_UNDEFINED,
    ERR_ROOT_UNDEFINED,
    InvalidArgumentError,
    InvalidRootError,
)
from taxonomy_index.tree.elements import ElementLike
from taxonomy_index.tree.taxon import Taxon
from taxonomy_index.utils.taxonomy import TaxonRank

logger = logging.getLogger(__name__)

FRAME_SCHEMA = {
    "rank": pl.Utf8,
    "depth": pl.Int64,
    "name": pl.Utf8,
    "precursor": pl.Utf8,
    "branches": pl.Int64,
    "classification": pl.Utf8,
}


class TaxonomyTree:
    """Taxonomy with a case-insensitive name index.

    The index maps each upper-cased clade name to its taxon and is built once
    from a single traversal of the tree. The tree is never modified
    afterwards, so a TaxonomyTree can be shared read-only.

    Attributes:
        root: Root taxon (the only taxon without a precursor)
    """

    def __init__(self, root: Optional[Taxon]):
        """Index an existing taxon tree.

        Args:
            root: Root taxon of the tree

        Raises:
            InvalidRootError: If root is None
        """
        self.root = root
        self._classifications = self._index(root)
        logger.info(
            f"Indexed {len(self._classifications)} taxa under {root.rank} {root.name}"
        )

    @classmethod
    def from_element(
        cls,
        element: ElementLike,
        selection: Optional[Union[ChildSelection, str]] = None,
        options: Optional[BuildOptions] = None,
    ) -> "TaxonomyTree":
        """Build and index a taxonomy from a generic element tree.

        Args:
            element: Root element; its tag names the root rank
            selection: Child selection strategy, overrides ``options``
            options: Build options, e.g. from ``BuildOptions.load``

        Returns:
            TaxonomyTree instance
        """
        if element is None:
            raise InvalidRootError(ERR_ROOT_UNDEFINED)
        if options is None:
            return cls(Taxon.from_element(element, selection=selection or ChildSelection.ALL))
        if selection is None:
            selection = options.child_selection

        # the configured level only applies while this taxonomy is built
        package_logger = logging.getLogger(__name__.split(".")[0])
        previous_level = package_logger.level
        package_logger.setLevel(options.log_level)
        try:
            return cls(Taxon.from_element(element, selection=selection))
        finally:
            package_logger.setLevel(previous_level)

    @staticmethod
    def _index(root: Optional[Taxon]) -> Dict[str, Taxon]:
        """Map upper-cased names to taxa with an iterative traversal.

        Visiting order is not strict left-to-right pre-order, so when two
        taxa share a name the one visited last is kept.
        """
        if root is None:
            raise InvalidRootError(ERR_ROOT_UNDEFINED)

        classifications: Dict[str, Taxon] = {}
        stack = [root]
        while stack:
            taxon = stack.pop()
            key = taxon.name.upper()
            if key in classifications:
                logger.warning(
                    f"Duplicate taxon name '{taxon.name}', "
                    f"replacing {classifications[key]!r} with {taxon!r}"
                )
            classifications[key] = taxon
            stack.extend(taxon.branches)
        return classifications

    def __len__(self) -> int:
        return len(self._classifications)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._classifications

    def __repr__(self) -> str:
        return f"TaxonomyTree(root={self.root!r}, taxa={len(self)})"

    def get_taxon(self, name: str) -> Optional[Taxon]:
        """Look up a taxon by clade name, ignoring case.

        Args:
            name: Clade name to look for

        Returns:
            The matching taxon, or None if no taxon has that name

        Raises:
            InvalidArgumentError: If name is None or empty
        """
        if not name:
            raise InvalidArgumentError(ERR_NAME_UNDEFINED)
        return self._classifications.get(name.upper())

    def get_taxa_of_rank(self, rank: Union[TaxonRank, str]) -> List[Taxon]:
        """Return every taxon of the given rank.

        Only the part of the tree above the requested rank is expanded: once a
        taxon one rank above the target is reached its branches are collected
        directly instead of being expanded further. This relies on each branch
        being exactly one rank below its precursor.

        Args:
            rank: TaxonRank or rank name (case-insensitive)

        Returns:
            List of taxa, empty if the tree has none at that rank

        Raises:
            UnknownRankError: If a rank name does not resolve
        """
        target = TaxonRank.from_name(rank)
        if target == self.root.rank:
            return [self.root]
        if target < self.root.rank:
            return []

        taxa: List[Taxon] = []
        stack = [self.root]
        visited = 0
        while stack:
            taxon = stack.pop()
            visited += 1
            if taxon.rank >= target - 1:
                taxa.extend(taxon.branches)
            else:
                stack.extend(reversed(taxon.branches))
        logger.debug(f"Found {len(taxa)} taxa of rank {target} after expanding {visited} taxa")
        return taxa

    def duplicate_names(self) -> List[str]:
        """Names carried by more than one taxon, upper-cased and sorted."""
        seen = set()
        duplicates = set()
        for taxon in self.root.walk():
            key = taxon.name.upper()
            if key in seen:
                duplicates.add(key)
            seen.add(key)
        return sorted(duplicates)

    def to_frame(self) -> pl.DataFrame:
        """One row per taxon in pre-order.

        Columns: rank, depth, name, precursor, branches, classification.
        """
        rows = [
            {
                "rank": taxon.rank.name,
                "depth": taxon.depth,
                "name": taxon.name,
                "precursor": taxon.precursor.name if taxon.precursor is not None else None,
                "branches": len(taxon.branches),
                "classification": taxon.full_classification(),
            }
            for taxon in self.root.walk()
        ]
        return pl.DataFrame(rows, schema=FRAME_SCHEMA)

    def rank_counts(self) -> pl.DataFrame:
        """Number of taxa per rank, ordered from the root rank down."""
        counts = self.to_frame().group_by("rank").agg(pl.len().alias("count"))
        order = pl.DataFrame(
            {
                "rank": [rank.name for rank in TaxonRank],
                "position": [rank.value for rank in TaxonRank],
            }
        )
        return (
            counts.join(order, on="rank", how="left")
            .sort("position")
            .select("rank", "count")
        )
