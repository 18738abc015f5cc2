"""
Keyword taxonomies: canonical profile item -> substrings that reveal it in an ingredient name.
Keys and keywords are lowercase and trimmed. Matching is plain substring containment.
"""
from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple


@dataclass(frozen=True)
class GoalKeywords:
    """Health goal entry. Only `avoid` produces warnings; `prefer` is carried for display."""
    avoid: Tuple[str, ...] = ()
    prefer: Tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {"avoid": list(self.avoid), "prefer": list(self.prefer)}

    @classmethod
    def from_dict(cls, d: dict) -> "GoalKeywords":
        return cls(
            avoid=normalize_keywords(d.get("avoid") or []),
            prefer=normalize_keywords(d.get("prefer") or []),
        )


# ---------------------------------------------------------------------------
# Built-in tables (single source of truth for the default taxonomy)
# ---------------------------------------------------------------------------

ALLERGEN_KEYWORDS: Dict[str, List[str]] = {
    "lácteos": ["leche", "queso", "yogur", "mantequilla", "crema", "nata", "suero", "lactosa"],
    "huevo": ["huevo", "huevos", "yema", "clara"],
    "gluten": ["trigo", "harina", "pan", "pasta", "cebada", "centeno", "avena"],
    "frutos secos": ["nuez", "almendra", "avellana", "pistacho", "anacardo", "castaña", "maní", "cacahuate"],
    "mariscos": ["camarón", "langosta", "cangrejo", "mejillón", "almeja", "calamar", "pulpo"],
    "pescado": ["pescado", "salmón", "atún", "trucha", "bacalao", "sardina"],
    "soja": ["soja", "soya", "tofu", "tempeh", "miso", "edamame"],
    "mostaza": ["mostaza"],
    "apio": ["apio"],
    "sésamo": ["sésamo", "ajonjolí"],
}

RESTRICTION_KEYWORDS: Dict[str, List[str]] = {
    "vegetariano": ["carne", "pollo", "res", "cerdo", "pescado", "mariscos", "atún"],
    "vegano": ["carne", "pollo", "res", "cerdo", "pescado", "mariscos", "huevo", "leche", "queso", "miel"],
    "sin gluten": ["trigo", "harina", "pan", "pasta", "cebada", "centeno"],
    "kosher": ["cerdo", "mariscos"],
    "halal": ["cerdo", "alcohol"],
    "bajo en sodio": ["sal", "salsa de soja", "caldo"],
}

HEALTH_CONDITION_KEYWORDS: Dict[str, List[str]] = {
    "diabetes": ["azúcar", "miel", "jarabe", "dulce", "refresco", "jugo"],
    "hipertensión": ["sal", "salsa de soja", "embutido", "tocino", "jamón"],
    "colesterol alto": ["mantequilla", "tocino", "yema", "embutido", "fritura"],
    "enfermedad renal": ["sal", "plátano", "tomate", "espinaca", "aguacate"],
    "gota": ["mariscos", "vísceras", "carne roja", "cerveza"],
}

HEALTH_GOAL_KEYWORDS: Dict[str, GoalKeywords] = {
    "perder peso": GoalKeywords(
        avoid=("fritura", "azúcar", "aceite", "mantequilla", "crema"),
        prefer=("ensalada", "verdura", "proteína", "pescado", "pechuga"),
    ),
    "ganar masa muscular": GoalKeywords(
        avoid=("azúcar", "refresco", "alcohol"),
        prefer=("proteína", "carne", "pollo", "pescado", "huevo", "legumbre"),
    ),
    "mantener peso": GoalKeywords(
        avoid=("fritura excesiva", "azúcar refinada"),
        prefer=("equilibrio", "variedad"),
    ),
}


def normalize_item(item: object) -> str:
    """Lowercase/trim a profile item or keyword. Non-strings normalize to ''."""
    if not isinstance(item, str):
        return ""
    return item.lower().strip()


def normalize_keywords(keywords) -> Tuple[str, ...]:
    out = []
    for kw in keywords:
        key = normalize_item(kw)
        if key and key not in out:
            out.append(key)
    return tuple(out)


def resolve_keywords(item: str, table: Mapping[str, Tuple[str, ...]]) -> Tuple[str, ...]:
    """
    Keywords for one profile item. Items without a table entry fall back to
    the item itself as the only keyword, so free-text entries still match.
    Blank items resolve to no keywords.
    """
    key = normalize_item(item)
    if not key:
        return ()
    keywords = table.get(key)
    if keywords is None:
        return (key,)
    return tuple(keywords)


def resolve_goal_avoid(goal: str, table: Mapping[str, GoalKeywords]) -> Tuple[str, ...]:
    """Avoid-list for a health goal. Unknown goals have no fallback and resolve to ()."""
    key = normalize_item(goal)
    if not key:
        return ()
    entry = table.get(key)
    if entry is None:
        return ()
    return entry.avoid
