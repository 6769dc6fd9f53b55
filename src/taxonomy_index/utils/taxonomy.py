from enum import IntEnum
from typing import Iterator, Optional, Union

from taxonomy_index.core.errors import ERR_UNKNOWN_RANK, UnknownRankError


class TaxonRank(IntEnum):
    """Enumeration of supported Linnean hierarchy levels.

    The value of each member is its depth below ORDER, so a branch always
    sits exactly one value below its precursor.
    """
    ORDER = 0
    SEMIORDER = 1
    SUBORDER = 2
    INFRAORDER = 3
    SUPERFAMILY = 4
    FAMILY = 5
    GENUS = 6
    SPECIES = 7

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        # IntEnum would otherwise format as the bare integer
        return format(self.name, format_spec)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def child(self) -> Optional["TaxonRank"]:
        """Get the child (more specific) rank."""
        try:
            return TaxonRank(self.value + 1)
        except ValueError:
            return None  # Already at lowest rank

    @property
    def parent(self) -> Optional["TaxonRank"]:
        """Get the parent (broader) rank."""
        try:
            return TaxonRank(self.value - 1)
        except ValueError:
            return None  # Already at highest rank

    @classmethod
    def lookup(cls, rank: Optional[str]) -> Optional["TaxonRank"]:
        """Resolve a rank name, returning None when it is not a known rank."""
        if not isinstance(rank, str) or not rank:
            return None
        return cls.__members__.get(rank.strip().upper())

    @classmethod
    def from_name(cls, rank: Union[str, "TaxonRank"]) -> "TaxonRank":
        """Get enum member from rank name.

        Raises:
            UnknownRankError: If the name does not resolve to a rank
        """
        if isinstance(rank, TaxonRank):
            return rank
        resolved = cls.lookup(rank)
        if resolved is None:
            raise UnknownRankError(ERR_UNKNOWN_RANK.format(rank=rank))
        return resolved

    @classmethod
    def iter_from_order(cls) -> Iterator["TaxonRank"]:
        """Yield ranks from ORDER (broadest) to SPECIES (most specific)."""
        return cls.ORDER.iter_down()

    def iter_up(self) -> Iterator["TaxonRank"]:
        """Yield ranks from the current rank up to ORDER (inclusive)."""
        rank: Optional[TaxonRank] = self
        while rank is not None:
            yield rank
            rank = rank.parent

    def iter_down(self) -> Iterator["TaxonRank"]:
        """Yield ranks from the current rank down to SPECIES (inclusive)."""
        rank: Optional[TaxonRank] = self
        while rank is not None:
            yield rank
            rank = rank.child
