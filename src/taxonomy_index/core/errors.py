"""Exceptions raised while building or querying a taxonomy."""

# standardised error messages
ERR_UNKNOWN_RANK = "Unknown taxonomic rank: {rank}"
ERR_RANK_TOO_DEEP = "Taxon '{name}' has branches below the last rank ({rank})"
ERR_RANK_MISMATCH = (
    "Branch '{name}' of '{precursor}' is tagged '{tag}', expected {expected}"
)
ERR_ROOT_UNDEFINED = "The root taxon cannot be None"
ERR_ROOT_UNNAMED = "Root element '{tag}' carries no name attribute"
ERR_NAME_UNDEFINED = "Taxon name must be a non-empty string"
ERR_PRECURSOR_RELEASED = (
    "Precursor of '{name}' was released with the rest of its tree; "
    "keep a reference to the root or the TaxonomyTree"
)


class TaxonomyError(ValueError):
    """Base class for structural taxonomy failures."""


class UnknownRankError(TaxonomyError):
    """A tag or rank name does not resolve to the expected rank."""


class InvalidRootError(TaxonomyError):
    """A taxonomy was requested without a usable root."""


class InvalidArgumentError(TaxonomyError):
    """A lookup or construction received an empty name."""


class DetachedTaxonError(TaxonomyError):
    """A taxon outlived the tree that held its precursor."""
