"""Build the starting taxonomy of New Zealand birds shipped with the tracker."""

from __future__ import annotations

from zealandia.bird_tree import BirdTree
from zealandia.taxonomies import Species, Taxon, add_child

BOOTSTRAP_TAXONOMY: dict[str, list[str]] = {
    "Animalia": ["Chordata"],
    "Chordata": ["Aves"],
    "Aves": ["Psittiaciformes", "Apterygiformes", "Passeriformes"],
    "Psittiaciformes": ["Strigopidae"],
    "Apterygiformes": ["Apterygidae"],
    "Passeriformes": ["Rhipiduridae", "Meliphagidae"],
    "Strigopidae": ["Nestor"],
    "Apterygidae": ["Apteryx"],
    "Rhipiduridae": ["Rhipidura"],
    "Meliphagidae": ["Prosthemadera"],
}
"""Maps each taxon of the starting tree to its child taxa, in display order."""

BOOTSTRAP_SPECIES: dict[str, list[tuple[str, str]]] = {
    "Nestor": [("Kaka", "meridionalis"), ("Kea", "notabilis")],
    "Apteryx": [("Little Spotted Kiwi", "owenii")],
    "Rhipidura": [("Piwakawaka", "fuliginosa")],
    "Prosthemadera": [("Tui", "novaeseelandiea")],
}
"""Maps each genus of the starting tree to its (common name, epithet) species."""

ROOT_NAME = "Animalia"


def build_tree() -> BirdTree:
    """Construct the bird tree the tracker starts from before any saved data is loaded."""
    taxa: dict[str, Taxon] = {ROOT_NAME: Taxon(ROOT_NAME)}
    for parent_name, child_names in BOOTSTRAP_TAXONOMY.items():
        for child_name in child_names:
            taxa[child_name] = Taxon(child_name)
            add_child(taxa[parent_name], taxa[child_name])

    for genus_name, species_list in BOOTSTRAP_SPECIES.items():
        for common_name, epithet in species_list:
            add_child(taxa[genus_name], Species(common_name, epithet))

    return BirdTree(taxa[ROOT_NAME], [taxa[name] for name in BOOTSTRAP_SPECIES])
