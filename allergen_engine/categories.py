"""
Category metadata for allergens, used to group warnings in the UI.

This is decoration only: the detector never reads it. Lookups are keyed by the
same canonical names as the keyword registry but do not depend on it.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .allergens import normalize_allergen_name
from .models import AllergenDetails
from .registry import KeywordRegistry, default_registry

# Checked in order; an allergen listed under several categories takes the first.
ALLERGEN_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "major": (
        "milk", "eggs", "peanuts", "tree nuts", "fish",
        "shellfish", "wheat", "soy", "sesame",
    ),
    "legumes": ("chickpeas", "lentils", "peas", "beans"),
    "grains": (
        "wheat", "gluten", "oats", "rice", "barley",
        "rye", "quinoa", "buckwheat", "corn",
    ),
    "fruits": ("banana", "avocado", "kiwi", "strawberry"),
    "vegetables": ("tomato", "potato", "garlic", "onion"),
    "seafood": ("fish", "shellfish", "crustaceans", "mollusks"),
    "other": ("gelatin", "cocoa", "red meat", "lupin", "mustard"),
}

DEFAULT_CATEGORY = "other"


def allergen_category(allergen: Optional[str]) -> str:
    key = (allergen or "").lower().strip()
    for category, members in ALLERGEN_CATEGORIES.items():
        if key in members:
            return category
    return DEFAULT_CATEGORY


def is_major_allergen(allergen: Optional[str]) -> bool:
    return (allergen or "").lower().strip() in ALLERGEN_CATEGORIES["major"]


def get_allergen_details(
    allergen: str,
    registry: Optional[KeywordRegistry] = None,
    resolve_aliases: bool = False,
) -> AllergenDetails:
    """
    Describe an allergen name: category, whether it is one of the major
    allergens, and how many keywords the registry holds for it. With
    resolve_aliases, "dairy" is described as "milk".
    """
    if registry is None:
        registry = default_registry()
    if resolve_aliases:
        key = normalize_allergen_name(allergen)
    else:
        key = (allergen or "").lower().strip()
    return AllergenDetails(
        name=allergen,
        normalized_name=key,
        category=allergen_category(key),
        is_major_allergen=is_major_allergen(key),
        keyword_count=len(registry.keywords_for(key)),
    )
