"""
Unit tests: keyword resolution with fallback, goal avoid-lists, taxonomy override loading.
Run from repo root: python -m pytest backend/tests/test_taxonomy.py -v
"""
import json
import pytest


def test_resolve_known_allergen():
    """Known allergen resolves to its curated keyword list."""
    from nutriguard.taxonomy.keywords import resolve_keywords, ALLERGEN_KEYWORDS
    keywords = resolve_keywords("lácteos", ALLERGEN_KEYWORDS)
    assert "leche" in keywords
    assert "lactosa" in keywords


def test_resolve_is_case_and_space_insensitive():
    """Profile items are lowercased and trimmed before lookup."""
    from nutriguard.taxonomy.keywords import resolve_keywords, ALLERGEN_KEYWORDS
    assert resolve_keywords("  LÁCTEOS ", ALLERGEN_KEYWORDS) == tuple(ALLERGEN_KEYWORDS["lácteos"])


def test_resolve_unknown_item_falls_back_to_itself():
    """Items without a taxonomy entry match on their own text."""
    from nutriguard.taxonomy.keywords import resolve_keywords, ALLERGEN_KEYWORDS
    assert resolve_keywords("Durazno", ALLERGEN_KEYWORDS) == ("durazno",)


@pytest.mark.parametrize("item", ["", "   ", None, 42])
def test_resolve_blank_or_non_string_item(item):
    """Blank and non-string items resolve to no keywords (never to a match-everything '')."""
    from nutriguard.taxonomy.keywords import resolve_keywords, ALLERGEN_KEYWORDS
    assert resolve_keywords(item, ALLERGEN_KEYWORDS) == ()


def test_goal_avoid_only():
    """Goal resolution returns only the avoid list."""
    from nutriguard.taxonomy.keywords import resolve_goal_avoid, HEALTH_GOAL_KEYWORDS
    avoid = resolve_goal_avoid("Perder Peso", HEALTH_GOAL_KEYWORDS)
    assert "fritura" in avoid
    assert "ensalada" not in avoid


def test_goal_unknown_has_no_fallback():
    """Unknown goals never fall back to their own text."""
    from nutriguard.taxonomy.keywords import resolve_goal_avoid, HEALTH_GOAL_KEYWORDS
    assert resolve_goal_avoid("correr un maratón", HEALTH_GOAL_KEYWORDS) == ()


def test_default_taxonomy_matches_builtin_tables():
    """Default taxonomy carries every built-in section."""
    from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY
    assert set(DEFAULT_TAXONOMY.allergens) >= {"lácteos", "gluten", "sésamo"}
    assert set(DEFAULT_TAXONOMY.restrictions) >= {"vegetariano", "vegano", "bajo en sodio"}
    assert set(DEFAULT_TAXONOMY.health_conditions) >= {"diabetes", "gota"}
    assert DEFAULT_TAXONOMY.health_goals["mantener peso"].prefer == ("equilibrio", "variedad")


def test_default_taxonomy_is_read_only():
    """Taxonomy tables cannot be mutated in place."""
    from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY
    with pytest.raises(TypeError):
        DEFAULT_TAXONOMY.allergens["nuevo"] = ("x",)


def test_load_taxonomy_without_path_returns_default():
    from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY, load_taxonomy
    assert load_taxonomy(None) is DEFAULT_TAXONOMY


def test_load_taxonomy_missing_file_returns_default(tmp_path):
    """Missing override file logs a warning and keeps the built-in tables."""
    from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY, load_taxonomy
    assert load_taxonomy(tmp_path / "nope.json") is DEFAULT_TAXONOMY


def test_load_taxonomy_merges_over_builtin_tables(tmp_path):
    """Override entries extend the built-in tables; untouched groups keep their keywords."""
    from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY, load_taxonomy
    path = tmp_path / "taxonomy.json"
    path.write_text(json.dumps({
        "allergens": {"  Frutas de Hueso ": ["Durazno", "cereza", "cereza", " "]},
        "health_goals": {"Definir": {"avoid": ["Refresco"], "prefer": ["pollo"]}},
    }), encoding="utf-8")
    taxonomy = load_taxonomy(path)
    assert taxonomy.allergens["frutas de hueso"] == ("durazno", "cereza")
    assert taxonomy.allergens["gluten"] == DEFAULT_TAXONOMY.allergens["gluten"]
    assert taxonomy.health_goals["definir"].avoid == ("refresco",)
    assert "perder peso" in taxonomy.health_goals
    assert taxonomy.restrictions == DEFAULT_TAXONOMY.restrictions


def test_override_key_replaces_single_entry():
    from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY, KeywordTaxonomy
    taxonomy = KeywordTaxonomy.from_dict({"allergens": {"Lácteos": ["leche", "ghee"]}})
    assert taxonomy.allergens["lácteos"] == ("leche", "ghee")
    assert set(taxonomy.allergens) == set(DEFAULT_TAXONOMY.allergens)


def test_replace_opt_in_drops_builtin_section():
    """Sections listed under 'replace' are taken as-is, without the built-in entries."""
    from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY, KeywordTaxonomy
    taxonomy = KeywordTaxonomy.from_dict({
        "replace": ["allergens"],
        "allergens": {"frutas de hueso": ["durazno"]},
    })
    assert dict(taxonomy.allergens) == {"frutas de hueso": ("durazno",)}
    assert taxonomy.health_conditions == DEFAULT_TAXONOMY.health_conditions


def test_goal_null_lists_count_as_empty():
    from nutriguard.taxonomy.registry import KeywordTaxonomy
    taxonomy = KeywordTaxonomy.from_dict({"health_goals": {"definir": {"avoid": None, "prefer": None}}})
    assert taxonomy.health_goals["definir"].avoid == ()
    assert taxonomy.health_goals["definir"].prefer == ()


def test_load_taxonomy_invalid_json_raises(tmp_path):
    from nutriguard.taxonomy.registry import TaxonomyError, load_taxonomy
    path = tmp_path / "taxonomy.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(TaxonomyError):
        load_taxonomy(path)


@pytest.mark.parametrize("document", [
    [],
    {"allergens": ["leche"]},
    {"restrictions": {"vegano": "carne"}},
    {"health_goals": {"perder peso": ["azúcar"]}},
    {"health_goals": {"perder peso": {"avoid": "azúcar"}}},
    {"replace": "allergens"},
    {"replace": ["alergias"]},
])
def test_taxonomy_wrong_shape_raises(document):
    """Malformed documents are rejected instead of silently matching nothing."""
    from nutriguard.taxonomy.registry import KeywordTaxonomy, TaxonomyError
    with pytest.raises(TaxonomyError):
        KeywordTaxonomy.from_dict(document)


def test_taxonomy_to_dict_round_trips():
    from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY, KeywordTaxonomy
    assert KeywordTaxonomy.from_dict(DEFAULT_TAXONOMY.to_dict()) == DEFAULT_TAXONOMY


def test_shipped_example_taxonomy_loads():
    """data/taxonomy.example.json adds the stone-fruit group without dropping built-in allergens."""
    from nutriguard.config import _REPO_ROOT
    from nutriguard.evaluation.analyzer import analyze
    from nutriguard.taxonomy.registry import DEFAULT_TAXONOMY, load_taxonomy
    taxonomy = load_taxonomy(_REPO_ROOT / "data" / "taxonomy.example.json")
    assert "cereza" in taxonomy.allergens["frutas de hueso"]
    assert set(taxonomy.allergens) >= set(DEFAULT_TAXONOMY.allergens)
    assert taxonomy.restrictions == DEFAULT_TAXONOMY.restrictions
    result = analyze(
        {"ingredients": [{"name": "harina de trigo"}]},
        {"healthInfo": {"allergies": ["gluten"]}},
        taxonomy,
    )
    assert result.overall_risk == 100
