"""
Allergen detection package: matches a food's label and ingredients against a
user's declared allergens using curated keyword tables.

Expose the main classes so consumers can import directly from the package.
"""

from .models import (
    AllergenDetails,
    AllergenMatch,
    DetectionReport,
    MatchMode,
)
from .registry import KeywordRegistry, RegistryError, default_registry
from .detector import AllergenDetector, check_for_allergens, default_detector
from .allergens import (
    allergen_label,
    normalize_allergen_name,
    supported_allergens,
    validate_allergen,
)
from .categories import get_allergen_details

__all__ = [
    "AllergenDetails",
    "AllergenDetector",
    "AllergenMatch",
    "DetectionReport",
    "KeywordRegistry",
    "MatchMode",
    "RegistryError",
    "allergen_label",
    "check_for_allergens",
    "default_detector",
    "default_registry",
    "get_allergen_details",
    "normalize_allergen_name",
    "supported_allergens",
    "validate_allergen",
]
