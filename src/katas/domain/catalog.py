"""Kata Catalog - Configuration-Driven Index of Bad/Good Pairs.

Every kata is a pair of modules demonstrating the same concept twice: once as
an anti-pattern and once corrected. The catalog is loaded from
``kata_metadata.json`` and gives O(1) lookups by concept name.

Architecture:
    KataCatalog: Root container keyed by concept ("naming", "factory", ...)
    └─ KataEntry: Topic, summary and the dotted paths of both modules

Key Features:
    - Validation: module paths must live under the entry's topic package
    - Lazy loading: modules are imported only when asked for
    - Type Safety: StrEnums for topic and variant, frozen models
"""

from __future__ import annotations

import importlib
import json
from pathlib import Path
from types import ModuleType
from typing import Any

from pydantic import BaseModel, ConfigDict, RootModel, model_validator

from .domain_type import KataTopic, KataVariant

DEFAULT_METADATA_PATH = Path(__file__).with_name("kata_metadata.json")


class KataEntry(BaseModel):
    """One concept and the two modules that illustrate it.

    Attributes:
        concept: Catalog key (e.g. "encapsulation")
        topic: Subpackage the modules belong to
        summary: One-line statement of what the good variant fixes
        bad_module: Dotted path of the anti-pattern module
        good_module: Dotted path of the corrected module
    """

    concept: str
    topic: KataTopic
    summary: str
    bad_module: str
    good_module: str

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_module_paths(self) -> KataEntry:
        """Both modules must sit directly under ``katas.<topic>``."""
        prefix = f"katas.{self.topic.value}."
        for path in (self.bad_module, self.good_module):
            if not path.startswith(prefix):
                raise ValueError(f"Module '{path}' for kata '{self.concept}' must live under '{prefix}'")
        if self.bad_module == self.good_module:
            raise ValueError(f"Kata '{self.concept}' must use different modules for each variant")
        return self

    def module_path(self, variant: KataVariant) -> str:
        return self.bad_module if variant is KataVariant.BAD else self.good_module


class KataCatalog(RootModel[dict[str, KataEntry]]):
    """Catalog of katas - wraps dict for type safety and validation."""

    root: dict[str, KataEntry]

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_concept_keys(self) -> KataCatalog:
        """Keys are normalized concept names and match their entries."""
        for key, entry in self.root.items():
            if key != key.strip().lower():
                raise ValueError(f"Kata concept '{key}' must be lowercase without surrounding spaces")
            if key != entry.concept:
                raise ValueError(f"Kata key '{key}' does not match entry concept '{entry.concept}'")
        return self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KataCatalog:
        """Load catalog from dict, explicitly injecting concept keys - no mutation."""
        enriched = {concept: {**entry, "concept": concept} for concept, entry in data.items()}
        return cls.model_validate(enriched)

    @classmethod
    def from_json_file(cls, path: Path) -> KataCatalog:
        """Load and validate catalog from JSON."""
        data = json.loads(path.read_text(encoding="utf-8"))
        return cls.from_dict(data)

    @classmethod
    def default(cls) -> KataCatalog:
        """Catalog shipped with the package."""
        return cls.from_json_file(DEFAULT_METADATA_PATH)

    @property
    def concepts(self) -> tuple[str, ...]:
        return tuple(self.root)

    def entry(self, concept: str) -> KataEntry:
        """O(1) dict lookup by concept name."""
        key = concept.strip().lower()
        if key not in self.root:
            raise KeyError(f"Kata '{concept}' not registered")
        return self.root[key]

    def by_topic(self, topic: KataTopic | str) -> tuple[KataEntry, ...]:
        """Entries of one topic, in catalog order."""
        wanted = KataTopic(topic)
        return tuple(entry for entry in self.root.values() if entry.topic is wanted)

    def load(self, concept: str, variant: KataVariant | str) -> ModuleType:
        """Import and return the module for one side of a kata."""
        path = self.entry(concept).module_path(KataVariant(variant))
        return importlib.import_module(path)


__all__ = ["DEFAULT_METADATA_PATH", "KataCatalog", "KataEntry"]
