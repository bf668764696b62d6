"""Primitive data structures exportable to and importable from JSON."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from zealandia.errors import MalformedBirdData
from zealandia.taxonomies import Species


@dataclass(frozen=True)
class BirdRecord:
    """A species saved together with the path of taxa leading down to it."""

    parent_nodes: list[str]
    """Names of the taxa from the root down to the species' direct parent, inclusive."""

    name: str
    """Specific epithet of the species."""

    common_name: str
    """Colloquial name used for the species in everyday life."""

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> BirdRecord:
        """Construct a bird record from a dictionary of JSON data.

        :param data: Dictionary with 'parentNodes', 'name' and 'commonName' keys
        :return: Bird record holding the decoded data
        :raises MalformedBirdData: If a key is missing or holds a value of the wrong type
        """
        if not isinstance(data, dict):
            raise MalformedBirdData(f"Expected a JSON object for a bird record, got: {data!r}")

        try:
            parent_nodes = data["parentNodes"]
            name = data["name"]
            common_name = data["commonName"]
        except KeyError as e:
            raise MalformedBirdData(f"Bird record is missing the key {e}: {data}") from e

        if not isinstance(parent_nodes, list) or not all(isinstance(p, str) for p in parent_nodes):
            raise MalformedBirdData(f"'parentNodes' must be a list of strings: {data}")
        if not isinstance(name, str) or not isinstance(common_name, str):
            raise MalformedBirdData(f"'name' and 'commonName' must be strings: {data}")

        return BirdRecord(parent_nodes=list(parent_nodes), name=name, common_name=common_name)

    @classmethod
    def from_species(cls, species: Species) -> BirdRecord:
        """Construct a bird record locating the given species by the names of its ancestors.

        Each taxon contributes one lowercased entry, even when its name contains spaces.
        """
        parent_path: list[str] = []
        ancestor = species.parent
        while ancestor is not None:
            parent_path.append(ancestor.name.strip().lower())
            ancestor = ancestor.parent

        return BirdRecord(
            parent_nodes=parent_path[::-1],
            name=species.scientific_epithet,
            common_name=species.common_name,
        )

    def to_json(self) -> dict[str, Any]:
        """Convert the record into a dictionary of JSON data."""
        return {
            "parentNodes": list(self.parent_nodes),
            "name": self.name,
            "commonName": self.common_name,
        }
