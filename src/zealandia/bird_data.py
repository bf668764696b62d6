"""Define functions to load the bird tree from, and save it to, a JSON data file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from zealandia.bird_tree import BirdTree
from zealandia.errors import BirdDataError, MalformedBirdData
from zealandia.json_primitives import BirdRecord

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path("birdData.json")
"""Filepath of the bird data file, relative to the working directory."""


def load_records(path: Path) -> list[BirdRecord]:
    """Read the bird records saved in a JSON data file.

    :param path: Filepath of the JSON data file
    :return: List of bird records, in file order
    :raises BirdDataError: If the file cannot be read or does not hold a list of bird records
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise BirdDataError(f"Could not read bird data from '{path}': {e}") from e

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedBirdData(f"Bird data in '{path}' is not valid JSON: {e}") from e

    if not isinstance(payload, list):
        raise MalformedBirdData(f"Bird data in '{path}' must be a JSON array.")

    return [BirdRecord.from_json(data) for data in payload]


def load_to_tree(tree: BirdTree, path: Path) -> int:
    """Insert every bird record saved in a JSON data file into the tree.

    :param tree: Bird tree receiving the saved species
    :param path: Filepath of the JSON data file
    :return: Number of records read from the file
    :raises BirdDataError: If the file cannot be read or is malformed
    """
    records = load_records(path)
    for record in records:
        tree.ingest(record)

    logger.info("Loaded %d bird records from '%s'.", len(records), path)
    return len(records)


def save_tree(tree: BirdTree, path: Path) -> int:
    """Overwrite a JSON data file with every species in the tree.

    :param tree: Bird tree whose species are saved
    :param path: Filepath of the JSON data file
    :return: Number of records written to the file
    :raises BirdDataError: If the file cannot be written
    """
    payload = [BirdRecord.from_species(s).to_json() for s in tree.all_species()]

    try:
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
    except OSError as e:
        raise BirdDataError(f"Could not write bird data to '{path}': {e}") from e

    logger.info("Saved %d bird records to '%s'.", len(payload), path)
    return len(payload)
