import json

import pytest

from zealandia.bootstrap import build_tree


@pytest.fixture
def tree():
    """Create the starting bird tree."""
    return build_tree()


@pytest.fixture
def data_file(tmp_path):
    """Create an empty bird data file."""
    path = tmp_path / "birdData.json"
    path.write_text(json.dumps([]))
    return path


@pytest.fixture
def kakapo_data():
    """JSON data for a bird saved beneath the starting tree's Strigopidae family."""
    return {
        "parentNodes": ["animalia", "chordata", "aves", "psittiaciformes", "strigopidae", "strigops"],
        "name": "habroptilus",
        "commonName": "Kakapo",
    }
