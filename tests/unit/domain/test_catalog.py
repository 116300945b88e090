"""
Tests for the KataCatalog domain logic.

These tests demonstrate:
- Testing factory methods (from_dict, default)
- Testing domain validation (module paths, concept keys)
- Testing lookups and lazy module loading
"""

import pytest
from pydantic import ValidationError

from katas.domain.catalog import KataCatalog, KataEntry
from katas.domain.domain_type import KataTopic, KataVariant

EXPECTED_CONCEPTS = {
    KataTopic.CLEAN_CODE: ("naming", "functions", "format"),
    KataTopic.OOP: ("abstraction", "encapsulation", "inheritance", "polymorphism"),
    KataTopic.SOLID: ("srp", "dip", "ocp"),
    KataTopic.PATTERNS: ("factory", "builder", "adapter", "strategy"),
}


def test_default_catalog_lists_every_kata(kata_catalog: KataCatalog):
    """Every concept appears exactly once, grouped under its topic in file order."""
    for topic, concepts in EXPECTED_CONCEPTS.items():
        assert tuple(entry.concept for entry in kata_catalog.by_topic(topic)) == concepts

    assert len(kata_catalog.concepts) == sum(len(c) for c in EXPECTED_CONCEPTS.values())


@pytest.mark.parametrize("variant", list(KataVariant))
def test_every_registered_module_imports(kata_catalog: KataCatalog, variant: KataVariant):
    """
    Demonstrates: Testing the catalog against the real package.

    A typo in kata_metadata.json shows up here rather than at first use.
    """
    for concept in kata_catalog.concepts:
        module = kata_catalog.load(concept, variant)
        assert module.__name__ == kata_catalog.entry(concept).module_path(variant)


def test_entry_lookup_is_case_insensitive(kata_catalog: KataCatalog):
    assert kata_catalog.entry("  Factory ") == kata_catalog.entry("factory")


def test_unknown_concept_raises_key_error(kata_catalog: KataCatalog):
    with pytest.raises(KeyError, match="not registered"):
        kata_catalog.entry("singleton")


def test_by_topic_accepts_raw_string(kata_catalog: KataCatalog):
    assert kata_catalog.by_topic("solid") == kata_catalog.by_topic(KataTopic.SOLID)


def test_from_dict_injects_concept_keys():
    catalog = KataCatalog.from_dict(
        {
            "naming": {
                "topic": "clean_code",
                "summary": "Named constants",
                "bad_module": "katas.clean_code.naming_bad",
                "good_module": "katas.clean_code.naming_good",
            }
        }
    )

    assert catalog.entry("naming").concept == "naming"
    assert catalog.entry("naming").topic is KataTopic.CLEAN_CODE


def test_entry_rejects_module_outside_topic_package():
    """Domain rule: a kata's modules live in its topic's subpackage."""
    with pytest.raises(ValidationError, match="must live under 'katas.oop.'"):
        KataEntry(
            concept="abstraction",
            topic=KataTopic.OOP,
            summary="Hide details",
            bad_module="katas.solid.srp_bad",
            good_module="katas.oop.abstraction_good",
        )


def test_entry_rejects_same_module_for_both_variants():
    with pytest.raises(ValidationError, match="different modules"):
        KataEntry(
            concept="naming",
            topic=KataTopic.CLEAN_CODE,
            summary="Named constants",
            bad_module="katas.clean_code.naming_good",
            good_module="katas.clean_code.naming_good",
        )


def test_catalog_rejects_non_normalized_concept_keys():
    with pytest.raises(ValidationError, match="must be lowercase"):
        KataCatalog.from_dict(
            {
                "Naming": {
                    "topic": "clean_code",
                    "summary": "Named constants",
                    "bad_module": "katas.clean_code.naming_bad",
                    "good_module": "katas.clean_code.naming_good",
                }
            }
        )
