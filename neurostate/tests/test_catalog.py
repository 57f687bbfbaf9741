import logging

import pytest

from neurostate.catalog import (
    DEFAULT_CATALOG,
    NEUROTRANSMITTER_SYSTEMS,
    CatalogError,
    SubstanceCatalog,
    UnknownSubstanceError,
)
from neurostate.models import InteractionType, NeurotransmitterSystem, ReceptorSite


def test_default_catalog_contents() -> None:
    assert set(DEFAULT_CATALOG.ids()) == {
        "caffeine",
        "l-theanine",
        "nicotine",
        "l-tyrosine",
        "flmodafinil",
        "bromantane",
        "shilajit",
    }
    assert len(DEFAULT_CATALOG) == 7
    assert [system.id for system in DEFAULT_CATALOG.systems] == ["adenosine", "dopamine", "serotonin", "gaba"]


def test_every_interaction_targets_a_known_receptor() -> None:
    owners = {site.id: system.id for system in DEFAULT_CATALOG.systems for site in system.receptors}

    for substance in DEFAULT_CATALOG:
        for interaction in substance.receptor_interactions:
            assert owners[interaction.receptor_id] == interaction.neurotransmitter_id


def test_lookup_behaviour() -> None:
    assert "caffeine" in DEFAULT_CATALOG
    assert "unobtainium" not in DEFAULT_CATALOG
    assert DEFAULT_CATALOG.get("unobtainium") is None
    assert DEFAULT_CATALOG.require("caffeine").name == "Caffeine"
    with pytest.raises(UnknownSubstanceError) as excinfo:
        DEFAULT_CATALOG.require("unobtainium")
    assert isinstance(excinfo.value, KeyError)


def test_duplicate_substances_are_rejected(make_substance) -> None:
    sample = make_substance()

    with pytest.raises(CatalogError):
        SubstanceCatalog([sample, sample], NEUROTRANSMITTER_SYSTEMS)


def test_shared_receptor_ids_are_rejected() -> None:
    rogue = NeurotransmitterSystem(
        id="glutamate",
        name="Glutamate",
        abbreviation="GLU",
        description="",
        baseline_level=50.0,
        receptors=(ReceptorSite("d1", "D1", "Duplicate", 0.0),),
        circadian=lambda hour: 50.0,
    )

    with pytest.raises(CatalogError):
        SubstanceCatalog([], NEUROTRANSMITTER_SYSTEMS + (rogue,))


def test_orphan_interactions_are_reported(make_substance, caplog: pytest.LogCaptureFixture) -> None:
    orphan = make_substance("orphan", interactions=[("nmda", "glutamate", InteractionType.ANTAGONIST, 30)])

    with caplog.at_level(logging.WARNING, logger="neurostate.catalog"):
        catalog = SubstanceCatalog([orphan], NEUROTRANSMITTER_SYSTEMS)

    assert catalog.require("orphan") is orphan
    assert any("nmda" in record.getMessage() for record in caplog.records)


def test_systems_may_be_a_generator(make_substance) -> None:
    catalog = SubstanceCatalog([make_substance()], (system for system in NEUROTRANSMITTER_SYSTEMS))

    assert len(catalog.systems) == 4
