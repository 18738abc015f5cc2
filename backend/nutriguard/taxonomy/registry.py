"""
KeywordTaxonomy: the four keyword tables bundled as one immutable value.
Defaults come from taxonomy.keywords; an optional JSON file can replace whole sections.
"""
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple
import json
import logging

from .keywords import (
    ALLERGEN_KEYWORDS,
    RESTRICTION_KEYWORDS,
    HEALTH_CONDITION_KEYWORDS,
    HEALTH_GOAL_KEYWORDS,
    GoalKeywords,
    normalize_item,
    normalize_keywords,
)

logger = logging.getLogger(__name__)

_FLAT_SECTIONS = ("allergens", "restrictions", "health_conditions")
_GOAL_SECTION = "health_goals"


class TaxonomyError(ValueError):
    """Taxonomy override file is unreadable or has the wrong shape."""


def _freeze_flat(table: Mapping[str, object]) -> Mapping[str, Tuple[str, ...]]:
    frozen = {}
    for name, keywords in table.items():
        key = normalize_item(name)
        if not key:
            continue
        if isinstance(keywords, str) or not isinstance(keywords, (list, tuple)):
            raise TaxonomyError(f"keywords for {name!r} must be a list of strings")
        frozen[key] = normalize_keywords(keywords)
    return MappingProxyType(frozen)


def _freeze_goals(table: Mapping[str, object]) -> Mapping[str, GoalKeywords]:
    frozen = {}
    for name, entry in table.items():
        key = normalize_item(name)
        if not key:
            continue
        if isinstance(entry, GoalKeywords):
            frozen[key] = GoalKeywords(
                avoid=normalize_keywords(entry.avoid),
                prefer=normalize_keywords(entry.prefer),
            )
        elif isinstance(entry, dict):
            for part in ("avoid", "prefer"):
                if not isinstance(entry.get(part) or [], (list, tuple)):
                    raise TaxonomyError(f"goal {name!r}: {part} must be a list of strings")
            frozen[key] = GoalKeywords.from_dict(entry)
        else:
            raise TaxonomyError(f"goal {name!r} must be an object with avoid/prefer lists")
    return MappingProxyType(frozen)


_BUILTIN_TABLES = {
    "allergens": ALLERGEN_KEYWORDS,
    "restrictions": RESTRICTION_KEYWORDS,
    "health_conditions": HEALTH_CONDITION_KEYWORDS,
    _GOAL_SECTION: HEALTH_GOAL_KEYWORDS,
}
_ALL_SECTIONS = (*_FLAT_SECTIONS, _GOAL_SECTION)
# Sections listed here in an override document replace the built-in table instead of extending it
_REPLACE_KEY = "replace"


def _replaced_sections(d: dict) -> Tuple[str, ...]:
    replace = d.get(_REPLACE_KEY) or []
    if isinstance(replace, str) or not isinstance(replace, (list, tuple)):
        raise TaxonomyError(f"{_REPLACE_KEY!r} must be a list of section names")
    unknown = [name for name in replace if name not in _ALL_SECTIONS]
    if unknown:
        raise TaxonomyError(f"{_REPLACE_KEY!r} names unknown sections: {unknown}")
    return tuple(replace)


@dataclass(frozen=True)
class KeywordTaxonomy:
    allergens: Mapping[str, Tuple[str, ...]]
    restrictions: Mapping[str, Tuple[str, ...]]
    health_conditions: Mapping[str, Tuple[str, ...]]
    health_goals: Mapping[str, GoalKeywords]

    def __hash__(self) -> int:
        return hash(tuple(frozenset(getattr(self, name).items()) for name in _ALL_SECTIONS))

    @classmethod
    def default(cls) -> "KeywordTaxonomy":
        return cls.from_dict({})

    @classmethod
    def from_dict(cls, d: dict) -> "KeywordTaxonomy":
        """
        Build from a JSON-shaped dict. Entries in a section are merged over the built-in
        table (same key wins); sections named in d["replace"] replace it entirely.
        """
        if not isinstance(d, dict):
            raise TaxonomyError("taxonomy document must be a JSON object")
        replaced = _replaced_sections(d)
        tables = {}
        for section in _ALL_SECTIONS:
            table = d.get(section, {})
            if not isinstance(table, dict):
                raise TaxonomyError(f"section {section!r} must be an object")
            freeze = _freeze_goals if section == _GOAL_SECTION else _freeze_flat
            merged = {} if section in replaced else dict(freeze(_BUILTIN_TABLES[section]))
            merged.update(freeze(table))
            tables[section] = MappingProxyType(merged)
        return cls(**tables)

    def to_dict(self) -> dict:
        """Self-contained document: every section replaces the built-in one when loaded back."""
        return {
            _REPLACE_KEY: list(_ALL_SECTIONS),
            "allergens": {k: list(v) for k, v in self.allergens.items()},
            "restrictions": {k: list(v) for k, v in self.restrictions.items()},
            "health_conditions": {k: list(v) for k, v in self.health_conditions.items()},
            _GOAL_SECTION: {k: v.to_dict() for k, v in self.health_goals.items()},
        }


DEFAULT_TAXONOMY = KeywordTaxonomy.default()


def load_taxonomy(path: Optional[Path] = None) -> KeywordTaxonomy:
    """
    Load a taxonomy override from JSON and merge it over the built-in tables. A missing file (or no path) yields the defaults.
    Raises TaxonomyError for unreadable JSON or a malformed document.
    """
    if path is None:
        return DEFAULT_TAXONOMY
    path = Path(path)
    if not path.exists():
        logger.warning("TAXONOMY override not found at %s; using built-in tables.", path)
        return DEFAULT_TAXONOMY
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise TaxonomyError(f"cannot read taxonomy file {path}: {e}") from e
    taxonomy = KeywordTaxonomy.from_dict(data)
    replaced = list(_replaced_sections(data))
    merged = [name for name in _ALL_SECTIONS if name in data and name not in replaced]
    logger.info(
        "TAXONOMY loaded path=%s merged_sections=%s replaced_sections=%s allergens=%d restrictions=%d conditions=%d goals=%d",
        path, merged, replaced,
        len(taxonomy.allergens), len(taxonomy.restrictions),
        len(taxonomy.health_conditions), len(taxonomy.health_goals),
    )
    return taxonomy
