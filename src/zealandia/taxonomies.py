"""Define data structures to represent a biological taxonomy of birds."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from enum import Enum

from zealandia.errors import NotATaxon


class NodeKind(Enum):
    """Tag distinguishing the two variants of a taxonomy node."""

    TAXON = "taxon"
    SPECIES = "species"


def normalize_name(name: str) -> str:
    """Fold a name for matching: surrounding whitespace and letter case are ignored."""
    return name.strip().lower()


@dataclass(eq=False)
class Taxon:
    """An interior taxonomic group (kingdom, phylum, class, order, family, genus, ...)."""

    name: str
    """Latin name of the taxon."""

    _children: list[Node] = field(default_factory=list, init=False, repr=False)
    _parent: weakref.ref[Taxon] | None = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        return self.name

    @property
    def kind(self) -> NodeKind:
        return NodeKind.TAXON

    @property
    def scientific_name(self) -> str:
        """A taxon's contribution to a scientific path is simply its name."""
        return self.name

    @property
    def parent(self) -> Taxon | None:
        """Retrieve the enclosing taxon, or None for a root or detached taxon."""
        return None if self._parent is None else self._parent()

    @property
    def children(self) -> list[Node]:
        """Child nodes of the taxon, in insertion order."""
        return self._children

    def child_taxon(self, name: str) -> Taxon | None:
        """Find the first direct child taxon whose name matches the given name."""
        wanted = normalize_name(name)
        for child in self._children:
            if isinstance(child, Taxon) and normalize_name(child.name) == wanted:
                return child
        return None


@dataclass(eq=False)
class Species:
    """A bird species, always found at the bottom of the taxonomy."""

    common_name: str
    """Colloquial name used for the species in everyday life."""

    scientific_epithet: str
    """Specific epithet (i.e., species-level part of the scientific name), e.g. 'notabilis'."""

    _parent: weakref.ref[Taxon] | None = field(default=None, init=False, repr=False)

    def __str__(self) -> str:
        """Return the three-line display form of the species."""
        return f"{self.common_name}\n{self.scientific_epithet}\n{full_scientific_name(self)}"

    @property
    def kind(self) -> NodeKind:
        return NodeKind.SPECIES

    @property
    def name(self) -> str:
        return self.common_name

    @property
    def scientific_name(self) -> str:
        return self.scientific_epithet

    @property
    def parent(self) -> Taxon | None:
        """Retrieve the taxon holding the species, or None if it has been detached."""
        return None if self._parent is None else self._parent()

    @property
    def children(self) -> list[Node]:
        raise NotATaxon(f"Species '{self.common_name}' cannot have children.")


Node = Taxon | Species
"""A node of the taxonomy tree: either an interior taxon or a leaf species."""


def add_child(parent: Node, child: Node) -> None:
    """Attach a node to a taxon, pointing the child's parent link back at the taxon.

    :param parent: Taxon receiving the child
    :param child: Taxon or species to attach
    :raises NotATaxon: If the parent is a species
    """
    if not isinstance(parent, Taxon):
        raise NotATaxon(f"Cannot add '{child.name}' beneath species '{parent.name}'.")
    child._parent = weakref.ref(parent)
    parent.children.append(child)


def full_scientific_name(node: Node) -> str:
    """Compute the full scientific path of a node by walking its parent links.

    :param node: Taxon or species whose path is requested
    :return: Names from the root down to the node, separated by single spaces
    """
    names = [node.scientific_name]
    ancestor = node.parent
    while ancestor is not None:
        names.append(ancestor.scientific_name)
        ancestor = ancestor.parent
    return " ".join(name.strip() for name in reversed(names) if name.strip())
