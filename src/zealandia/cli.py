#!/usr/bin/env python3
"""Interactive command-line menu for searching and extending the bird catalog."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from zealandia.bird_data import load_to_tree, save_tree
from zealandia.bird_tree import BirdTree
from zealandia.bootstrap import build_tree
from zealandia.config import LOG_LEVELS, load_settings
from zealandia.errors import BirdDataError, TaxonomyError
from zealandia.logging_config import configure_logging

logger = logging.getLogger(__name__)

MENU = """Welcome to Zealandia Tracker.

Please choose a task:
    1. Search for bird by common name
    2. Search for bird by scientific name
    3. See all birds in a specific group
    4. Add new classification
    5. Add new species
    6. Exit
"""

EXIT_CHOICE = 6


def prompt_text(text: str) -> str:
    """Ask the user for a line of text, accepting an empty answer."""
    return click.prompt(text, default="", show_default=False)


def search_by_common_name(tree: BirdTree) -> None:
    name = prompt_text("Enter the name of the bird")
    species = tree.search_by_common_name(name)
    click.echo(f"\n{species}\n" if species is not None else f"No bird named '{name}' was found.")


def search_by_scientific_name(tree: BirdTree) -> None:
    epithet = prompt_text("Enter the scientific name of the bird")
    species = tree.search_by_scientific_name(epithet)
    if species is None:
        click.echo(f"No bird with the scientific name '{epithet}' was found.")
    else:
        click.echo(f"\n{species}\n")


def list_species_in_taxon(tree: BirdTree) -> None:
    taxon_name = prompt_text("Enter the name of the group")
    species_list = tree.species_in_taxon(taxon_name)
    if not species_list:
        click.echo(f"There are no birds in '{taxon_name}'.")
    for species in species_list:
        click.echo(f"\n{species}")
    click.echo()


def add_taxon(tree: BirdTree) -> None:
    parent_name = prompt_text("Enter the name of the parent group")
    new_name = prompt_text("Enter the name of the new group")
    taxon = tree.add_taxon(parent_name, new_name)
    click.echo(f"Added '{taxon.name}' to '{taxon.parent.name}'.")


def add_species(tree: BirdTree) -> None:
    parent_name = prompt_text("Enter the name of the parent group")
    common_name = prompt_text("Enter the common name of the bird")
    epithet = prompt_text("Enter the scientific name of the bird")
    species = tree.add_species(parent_name, common_name, epithet)
    click.echo(f"Added:\n{species}")


ACTIONS = {
    1: search_by_common_name,
    2: search_by_scientific_name,
    3: list_species_in_taxon,
    4: add_taxon,
    5: add_species,
}
"""Maps each menu choice (other than exiting) to the function performing it."""


def run_menu(tree: BirdTree) -> None:
    """Prompt for menu choices and perform them until the user chooses to exit."""
    while True:
        click.echo(MENU)
        choice = click.prompt(
            f"Enter a choice (1-{EXIT_CHOICE})",
            type=click.IntRange(1, EXIT_CHOICE),
        )
        if choice == EXIT_CHOICE:
            return

        try:
            ACTIONS[choice](tree)
        except TaxonomyError as e:
            logger.debug("Menu choice %d failed: %s", choice, e)
            click.echo(f"Error: {e}")


@click.command()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON file the catalog is loaded from and saved to.",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Minimum level of log messages written to stderr.",
)
def main(data_file: Path | None, log_level: str | None) -> None:
    """Search and extend a catalog of New Zealand birds."""
    try:
        settings = load_settings()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    configure_logging((log_level or settings.log_level).upper())
    data_path = data_file or settings.data_path

    tree = build_tree()
    try:
        load_to_tree(tree, data_path)
    except BirdDataError as e:
        raise click.ClickException(str(e)) from e

    run_menu(tree)

    try:
        count = save_tree(tree, data_path)
    except BirdDataError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Saved {count} birds to '{data_path}'. Goodbye!")


if __name__ == "__main__":
    main()
