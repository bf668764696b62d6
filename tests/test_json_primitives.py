"""Tests for the JSON form of persisted bird records."""

import pytest

from zealandia.errors import MalformedBirdData
from zealandia.json_primitives import BirdRecord


class TestBirdRecord:
    """Test converting bird records to and from JSON data."""

    def test_from_json(self, kakapo_data):
        """Should read the camelCase keys of a record."""
        record = BirdRecord.from_json(kakapo_data)

        assert record.parent_nodes[-1] == "strigops"
        assert record.name == "habroptilus"
        assert record.common_name == "Kakapo"

    def test_to_json(self):
        """Should write the camelCase keys of a record."""
        record = BirdRecord(parent_nodes=["animalia", "nestor"], name="notabilis", common_name="Kea")

        assert record.to_json() == {
            "parentNodes": ["animalia", "nestor"],
            "name": "notabilis",
            "commonName": "Kea",
        }

    @pytest.mark.parametrize(
        "data",
        [
            {"name": "notabilis", "commonName": "Kea"},
            {"parentNodes": "animalia", "name": "notabilis", "commonName": "Kea"},
            {"parentNodes": ["animalia", 3], "name": "notabilis", "commonName": "Kea"},
            {"parentNodes": ["animalia"], "name": None, "commonName": "Kea"},
            ["animalia", "notabilis", "Kea"],
        ],
    )
    def test_malformed(self, data):
        """Should raise MalformedBirdData for data of the wrong shape."""
        with pytest.raises(MalformedBirdData):
            BirdRecord.from_json(data)

    def test_from_species(self, tree):
        """Should locate a species by the lowercased names of its ancestors."""
        record = BirdRecord.from_species(tree.search_by_common_name("Tui"))

        assert record.parent_nodes == [
            "animalia",
            "chordata",
            "aves",
            "passeriformes",
            "meliphagidae",
            "prosthemadera",
        ]
        assert record.name == "novaeseelandiea"
        assert record.common_name == "Tui"

    def test_from_species_keeps_spaced_taxon_names_whole(self, tree):
        """Should give each ancestor taxon one entry, even when its name contains a space."""
        tree.add_taxon("Nestor", "Nestor Group")
        species = tree.add_species("Nestor Group", "Norfolk Kaka", "productus")

        record = BirdRecord.from_species(species)

        assert len(record.parent_nodes) == 7
        assert record.parent_nodes[-2:] == ["nestor", "nestor group"]
