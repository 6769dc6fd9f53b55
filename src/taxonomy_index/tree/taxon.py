"""Ranked taxonomy nodes built from generic element trees."""

import logging
import weakref
from typing import Iterator, List, Optional, Tuple, Union

from taxonomy_index.core.config import ChildSelection
from taxonomy_index.core.errors import (
    ERR_NAME_UNDEFINED,
    ERR_PRECURSOR_RELEASED,
    ERR_RANK_MISMATCH,
    ERR_RANK_TOO_DEEP,
    ERR_ROOT_UNNAMED,
    ERR_UNKNOWN_RANK,
    DetachedTaxonError,
    InvalidArgumentError,
    InvalidRootError,
    UnknownRankError,
)
from taxonomy_index.tree.elements import ElementLike, first_attribute
from taxonomy_index.utils.taxonomy import TaxonRank

logger = logging.getLogger(__name__)

PRECURSOR_MARK = "{"
ROOT_MARK = "["
BRANCH_MARK = "-"


def select_branches(
    element: ElementLike, selection: ChildSelection = ChildSelection.ALL
) -> List[ElementLike]:
    """Pick the children of an element that describe branch taxa.

    A child qualifies when it is an element carrying at least one attribute.
    With ``ChildSelection.ALL`` every qualifying child is returned; with
    ``ChildSelection.CONTIGUOUS`` the scan stops at the first child that does
    not qualify.
    """
    selected = []
    for child in element.children:
        if first_attribute(child) is not None:
            selected.append(child)
        elif selection is ChildSelection.CONTIGUOUS:
            break
    return selected


class Taxon:
    """A single node of a taxonomy.

    Each taxon owns its branches. The precursor is held through a weak
    reference and is only used for navigation towards the root. A branch kept
    alive on its own after the rest of the tree is released still reports
    ``has_precursor()`` as True, but navigating upwards raises
    DetachedTaxonError.

    Attributes:
        rank: TaxonRank of this taxon
        name: Clade name, verbatim from the source element
        branches: Child taxa in source order
    """

    def __init__(
        self,
        rank: Union[TaxonRank, str],
        name: str,
        precursor: Optional["Taxon"] = None,
    ):
        """Create a taxon without branches.

        Args:
            rank: Rank of the taxon (enum member or name)
            name: Non-empty clade name
            precursor: Enclosing taxon, or None for a root

        Raises:
            InvalidArgumentError: If the name is empty
            UnknownRankError: If the rank is unknown or does not follow the
                precursor's rank
        """
        if not name:
            raise InvalidArgumentError(ERR_NAME_UNDEFINED)
        rank = TaxonRank.from_name(rank)
        if precursor is not None and precursor.rank.child is not rank:
            raise UnknownRankError(
                ERR_RANK_MISMATCH.format(
                    name=name,
                    precursor=precursor.name,
                    tag=rank,
                    expected=precursor.rank.child,
                )
            )

        self._rank = rank
        self._name = name
        self._precursor = weakref.ref(precursor) if precursor is not None else None
        self._branches: Tuple["Taxon", ...] = ()

    @classmethod
    def from_element(
        cls,
        element: ElementLike,
        selection: Union[ChildSelection, str] = ChildSelection.ALL,
    ) -> "Taxon":
        """Build a taxon tree rooted at ``element``.

        The root rank comes from the element's tag; every level below must be
        tagged with the next rank down.

        Args:
            element: Root element of the source tree
            selection: How branch elements are picked out of each element

        Returns:
            Root taxon of the constructed tree

        Raises:
            UnknownRankError: If any tag does not resolve to the expected rank
            InvalidRootError: If the root element carries no attribute
        """
        rank = TaxonRank.lookup(element.tag)
        if rank is None:
            raise UnknownRankError(ERR_UNKNOWN_RANK.format(rank=element.tag))
        if first_attribute(element) is None:
            raise InvalidRootError(ERR_ROOT_UNNAMED.format(tag=element.tag))

        root = cls._build(element, None, rank, ChildSelection.from_value(selection))
        logger.debug(f"Built taxon tree rooted at {root!r}")
        return root

    @classmethod
    def _build(
        cls,
        element: ElementLike,
        precursor: Optional["Taxon"],
        rank: TaxonRank,
        selection: ChildSelection,
    ) -> "Taxon":
        taxon = cls(rank, first_attribute(element), precursor)

        branch_elements = select_branches(element, selection)
        if not branch_elements:
            return taxon

        branch_rank = rank.child
        if branch_rank is None:
            raise UnknownRankError(ERR_RANK_TOO_DEEP.format(name=taxon.name, rank=rank))

        branches = []
        for branch_element in branch_elements:
            if TaxonRank.lookup(branch_element.tag) is not branch_rank:
                raise UnknownRankError(
                    ERR_RANK_MISMATCH.format(
                        name=first_attribute(branch_element),
                        precursor=taxon.name,
                        tag=branch_element.tag,
                        expected=branch_rank,
                    )
                )
            branches.append(cls._build(branch_element, taxon, branch_rank, selection))
        taxon._branches = tuple(branches)
        return taxon

    @property
    def rank(self) -> TaxonRank:
        return self._rank

    @property
    def name(self) -> str:
        return self._name

    @property
    def precursor(self) -> Optional["Taxon"]:
        """Enclosing taxon, or None for a root.

        Raises:
            DetachedTaxonError: If the precursor has already been released
        """
        if self._precursor is None:
            return None
        precursor = self._precursor()
        if precursor is None:
            raise DetachedTaxonError(ERR_PRECURSOR_RELEASED.format(name=self.name))
        return precursor

    @property
    def branches(self) -> Tuple["Taxon", ...]:
        return self._branches

    def has_precursor(self) -> bool:
        return self._precursor is not None

    def has_branches(self) -> bool:
        return len(self._branches) > 0

    @property
    def depth(self) -> int:
        """Number of precursors between this taxon and the root."""
        return sum(1 for _ in self.lineage()) - 1

    def lineage(self) -> Iterator["Taxon"]:
        """Yield this taxon followed by each precursor up to the root.

        Raises:
            DetachedTaxonError: If an ancestor has been released
        """
        taxon: Optional[Taxon] = self
        while taxon is not None:
            yield taxon
            taxon = taxon.precursor

    def walk(self) -> Iterator["Taxon"]:
        """Yield this taxon and all descendants, pre-order, left to right."""
        stack: List[Taxon] = [self]
        while stack:
            taxon = stack.pop()
            yield taxon
            stack.extend(reversed(taxon.branches))

    def full_classification(self) -> str:
        """Rank and name of every taxon from the root down to this one.

        Example: ``"ORDER Primates SUBORDER Haplorrhini"``
        """
        return " ".join(
            f"{taxon.rank} {taxon.name}" for taxon in reversed(list(self.lineage()))
        )

    def outline(self, indent: str = "  ") -> str:
        """Render the subtree as one ``str(taxon)`` line per taxon, indented by depth."""
        base = self.depth
        return "\n".join(
            f"{indent * (taxon.depth - base)}{taxon}" for taxon in self.walk()
        )

    def __str__(self) -> str:
        """Rank, name and a marker such as ``{--``.

        The marker starts with ``{`` when the taxon has a precursor and ``[``
        for a root, followed by one ``-`` per branch.
        """
        mark = PRECURSOR_MARK if self.has_precursor() else ROOT_MARK
        return f"{self.rank} {self.name} {mark}{BRANCH_MARK * len(self.branches)}"

    def __repr__(self) -> str:
        return f"Taxon({self.rank.name}, {self.name!r})"

