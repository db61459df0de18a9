"""
Shared domain models used by the detector.

- MatchMode: how a keyword is tested against a search item.
- AllergenMatch: evidence for one detected allergen (which keyword, where).
- DetectionReport: per-call output, the detected names plus their evidence.
- AllergenDetails: display/categorization metadata for an allergen name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class MatchMode(str, Enum):
    WORD = "word"
    WORD_OR_SUBSTRING = "word_or_substring"


@dataclass(frozen=True)
class AllergenMatch:
    """
    Why an allergen was flagged: the caller's allergen string, the registry key
    it resolved to, the keyword that fired and the search item it fired in.
    """

    allergen: str
    allergen_key: str
    keyword: str
    matched_in: str
    fallback: bool = False  # True when the key had no keyword-table row

    def to_dict(self) -> Dict[str, object]:
        return {
            "allergen": self.allergen,
            "allergen_key": self.allergen_key,
            "keyword": self.keyword,
            "matched_in": self.matched_in,
            "fallback": self.fallback,
        }


@dataclass
class DetectionReport:
    label: str
    ingredients: List[str]
    user_allergens: List[str]
    matches: List[AllergenMatch] = field(default_factory=list)

    @property
    def detected_allergens(self) -> List[str]:
        return [match.allergen for match in self.matches]

    @property
    def safe(self) -> bool:
        return not self.matches

    def match_for(self, allergen: str) -> Optional[AllergenMatch]:
        for match in self.matches:
            if match.allergen == allergen:
                return match
        return None


@dataclass(frozen=True)
class AllergenDetails:
    """
    Metadata used for UI grouping. Independent of whether a food matched.
    """

    name: str
    normalized_name: str
    category: str
    is_major_allergen: bool
    keyword_count: int

    def to_dict(self) -> Dict[str, object]:
        return {
            "name": self.name,
            "normalized_name": self.normalized_name,
            "category": self.category,
            "is_major_allergen": self.is_major_allergen,
            "keyword_count": self.keyword_count,
        }
