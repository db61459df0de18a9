"""
Allergen name helpers.

Maps the spellings users type ("Dairy", "nut", "garbanzo") onto the canonical
keys of the keyword registry, and formats registry keys for display.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .registry import KeywordRegistry, default_registry

# Canonical allergen key -> alternate names that should resolve to it.
ALLERGEN_VARIANTS: Dict[str, List[str]] = {
    "milk": ["dairy", "lactose"],
    "eggs": ["egg"],
    "peanuts": ["peanut"],
    "tree nuts": ["nut", "nuts"],
    "gluten": ["gluten-free"],
    "shellfish": ["shellfish"],
    "crustaceans": ["crustacean"],
    "mollusks": ["mollusk", "mollusc"],
    "beans": ["bean"],
    "lentils": ["lentil"],
    "chickpeas": ["chickpea", "garbanzo"],
}


def _normalize(text: Optional[str]) -> str:
    """Lowercase and trim whitespace."""
    return (text or "").lower().strip()


def _build_alias_mapping(variants: Dict[str, List[str]]) -> Dict[str, str]:
    """Flatten canonical -> variants into variant -> canonical."""
    mapping: Dict[str, str] = {}
    for canonical, names in variants.items():
        for name in names:
            mapping[_normalize(name)] = canonical
    return mapping


# Lower-case alternate spelling -> canonical allergen key
ALLERGEN_ALIASES: Dict[str, str] = _build_alias_mapping(ALLERGEN_VARIANTS)


def normalize_allergen_name(allergen: Optional[str]) -> str:
    """
    Resolve a user-facing allergen name to its canonical key.
    Names without an alias come back lowercased and trimmed.
    """
    normalized = _normalize(allergen)
    return ALLERGEN_ALIASES.get(normalized, normalized)


def validate_allergen(
    allergen: Optional[str], registry: Optional[KeywordRegistry] = None
) -> bool:
    """True if the name has its own row in the keyword table."""
    if registry is None:
        registry = default_registry()
    return _normalize(allergen) in registry


def _title(key: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in key.split(" "))


def supported_allergens(registry: Optional[KeywordRegistry] = None) -> List[str]:
    """Registry keys formatted for display ("tree nuts" -> "Tree Nuts")."""
    if registry is None:
        registry = default_registry()
    return [_title(key) for key in registry.allergen_keys()]


def allergen_label(allergen: Optional[str]) -> str:
    """
    Human-friendly label for an allergen name, resolved through the alias
    table first so "dairy" and "Milk" both read as "Milk".
    """
    if not allergen or not allergen.strip():
        return ""
    return _title(normalize_allergen_name(allergen))
