"""Define the exceptions raised by the bird taxonomy and its persistence layer."""

from __future__ import annotations


class TaxonomyError(Exception):
    """Base class for user-facing errors raised by taxonomy lookups and mutations."""


class NoSuchTaxon(TaxonomyError):
    """Raised when a named taxon does not exist in the tree."""

    def __init__(self, taxon_name: str) -> None:
        super().__init__(f"No taxon named '{taxon_name}' exists.")
        self.taxon_name = taxon_name


class InputOutOfBounds(TaxonomyError):
    """Raised when a user-supplied name is empty or too long."""

    def __init__(self, value: str, limit: int) -> None:
        super().__init__(f"Names must be between 1 and {limit} characters long, got {value!r}.")
        self.value = value
        self.limit = limit


class InvalidRoot(TaxonomyError):
    """Raised when a tree is built on a species root or with a species leaf taxon."""


class NotATaxon(TypeError):
    """Raised when a taxon-only operation is applied to a species.

    This signals a bug in the caller rather than bad user input.
    """


class BirdDataError(Exception):
    """Raised when the persisted bird data cannot be read or written."""


class MalformedBirdData(BirdDataError, ValueError):
    """Raised when a persisted bird record does not have the expected shape."""
