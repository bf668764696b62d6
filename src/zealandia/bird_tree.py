"""Define the bird tree: a taxonomy root plus an index of the taxa that hold species."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from zealandia.errors import InputOutOfBounds, InvalidRoot, NoSuchTaxon
from zealandia.taxonomies import Node, Species, Taxon, add_child, normalize_name

if TYPE_CHECKING:
    from zealandia.json_primitives import BirdRecord

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 50
"""Maximum number of characters allowed in a taxon name, common name or epithet."""


def validate_name(name: str) -> str:
    """Check that a user-supplied name has an acceptable length once trimmed.

    :param name: Name as typed by the user
    :return: The trimmed name
    :raises InputOutOfBounds: If the trimmed name is empty or longer than MAX_NAME_LENGTH
    """
    trimmed = name.strip()
    if not 1 <= len(trimmed) <= MAX_NAME_LENGTH:
        raise InputOutOfBounds(name, MAX_NAME_LENGTH)
    return trimmed


class BirdTree:
    """A taxonomy of birds with a side index of leaf taxa for fast species lookup.

    Leaf taxa are the taxa whose direct children are species. Every species in the
    tree is a child of some taxon in this index, so searches only need to scan it.
    """

    def __init__(self, root: Node, leaf_taxa: Iterable[Node] = ()) -> None:
        """Build a bird tree from its root and the taxa known to hold species.

        :param root: Topmost taxon of the tree
        :param leaf_taxa: Taxa whose direct children are species
        :raises InvalidRoot: If the root or any of the leaf taxa is a species
        """
        if not isinstance(root, Taxon):
            raise InvalidRoot(f"The root of a bird tree must be a taxon, got: {root!r}")

        self._root = root
        self._leaf_taxa: list[Taxon] = []
        for taxon in leaf_taxa:
            if not isinstance(taxon, Taxon):
                raise InvalidRoot(f"Leaf taxa of a bird tree must be taxa, got: {taxon!r}")
            self._index_leaf_taxon(taxon)

    @property
    def root(self) -> Taxon:
        return self._root

    @property
    def leaf_taxa(self) -> tuple[Taxon, ...]:
        """Taxa holding species, in the order they were indexed."""
        return tuple(self._leaf_taxa)

    def _index_leaf_taxon(self, taxon: Taxon) -> None:
        if not any(t is taxon for t in self._leaf_taxa):
            self._leaf_taxa.append(taxon)

    def all_species(self) -> Iterator[Species]:
        """Yield every species reachable through the leaf-taxa index."""
        for taxon in self._leaf_taxa:
            for child in taxon.children:
                if isinstance(child, Species):
                    yield child

    def search_by_common_name(self, name: str) -> Species | None:
        """Find the first species whose common name matches, ignoring case and outer whitespace."""
        wanted = normalize_name(name)
        for species in self.all_species():
            if normalize_name(species.common_name) == wanted:
                return species
        return None

    def search_by_scientific_name(self, name: str) -> Species | None:
        """Find the first species whose epithet matches, ignoring case and outer whitespace."""
        wanted = normalize_name(name)
        for species in self.all_species():
            if normalize_name(species.scientific_epithet) == wanted:
                return species
        return None

    def find_taxon(self, name: str) -> Taxon:
        """Locate the first taxon with the given name in a depth-first, pre-order walk.

        :param name: Taxon name, matched ignoring case and outer whitespace
        :return: The matching taxon
        :raises NoSuchTaxon: If no taxon in the tree has the name
        """
        wanted = normalize_name(name)
        stack: list[Taxon] = [self._root]
        while stack:
            taxon = stack.pop()
            if normalize_name(taxon.name) == wanted:
                return taxon
            child_taxa = [c for c in taxon.children if isinstance(c, Taxon)]
            stack.extend(reversed(child_taxa))  # Visit children left to right

        raise NoSuchTaxon(name)

    def species_in_taxon(self, taxon_name: str) -> list[Species]:
        """List every species beneath the named taxon, in pre-order traversal order.

        :param taxon_name: Name of the taxon whose subtree is enumerated
        :return: Species found in the taxon's subtree
        :raises NoSuchTaxon: If no taxon in the tree has the name
        """
        species: list[Species] = []
        stack: list[Node] = [self.find_taxon(taxon_name)]
        while stack:
            node = stack.pop()
            if isinstance(node, Species):
                species.append(node)
            else:
                stack.extend(reversed(node.children))
        return species

    def add_taxon(self, parent_name: str, new_name: str) -> Taxon:
        """Create a new taxon beneath the named parent taxon.

        :param parent_name: Name of the existing taxon to extend
        :param new_name: Name of the taxon to create
        :return: The newly created taxon
        :raises InputOutOfBounds: If the new name is empty or too long
        :raises NoSuchTaxon: If the parent taxon does not exist
        """
        new_name = validate_name(new_name)
        parent = self.find_taxon(parent_name)

        taxon = Taxon(new_name)
        add_child(parent, taxon)
        logger.debug("Added taxon '%s' beneath '%s'.", new_name, parent.name)
        return taxon

    def add_species(self, parent_name: str, common_name: str, epithet: str) -> Species:
        """Create a new species beneath the named parent taxon.

        The parent joins the leaf-taxa index so the species can be found by name searches.

        :param parent_name: Name of the existing taxon holding the species
        :param common_name: Colloquial name of the species
        :param epithet: Specific epithet of the species
        :return: The newly created species
        :raises InputOutOfBounds: If either name is empty or too long
        :raises NoSuchTaxon: If the parent taxon does not exist
        """
        common_name = validate_name(common_name)
        epithet = validate_name(epithet)
        parent = self.find_taxon(parent_name)

        species = Species(common_name, epithet)
        add_child(parent, species)
        self._index_leaf_taxon(parent)
        logger.debug("Added species '%s' (%s) beneath '%s'.", common_name, epithet, parent.name)
        return species

    def ingest(self, record: BirdRecord) -> None:
        """Insert a persisted bird record, creating any taxa missing along its path.

        The first entry of the record's path names the root and is skipped. Records
        duplicating a species already held by the same taxon are ignored, so loading a
        saved file into the starting tree does not repeat the birds it already holds.
        """
        parent = self._root
        for taxon_name in record.parent_nodes[1:]:
            child = parent.child_taxon(taxon_name)
            if child is None:
                child = Taxon(taxon_name)
                add_child(parent, child)
                logger.debug("Created taxon '%s' beneath '%s'.", taxon_name, parent.name)
            parent = child

        self._index_leaf_taxon(parent)

        for sibling in parent.children:
            if (
                isinstance(sibling, Species)
                and normalize_name(sibling.common_name) == normalize_name(record.common_name)
                and normalize_name(sibling.scientific_epithet) == normalize_name(record.name)
            ):
                logger.debug("Species '%s' is already in the tree.", record.common_name)
                return

        add_child(parent, Species(record.common_name, record.name))
