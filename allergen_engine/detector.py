"""
Allergen detector: scans a food's label and ingredient strings for the
keywords of each allergen a user declared.

Key stages, per user allergen:
- resolve the name to a registry key (optionally through the alias table)
- fall back to the literal name as its only keyword if the registry has no row
- walk the search items (label first, then ingredients) and the keywords in
  declared order, skipping keywords suppressed by a safe compound phrase
- record the caller's spelling on the first hit and move to the next allergen

The detector holds no per-call state, so one instance can serve any number of
threads.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Iterable, List, Optional, Sequence, Tuple

from .allergens import normalize_allergen_name
from .models import AllergenMatch, DetectionReport, MatchMode
from .registry import KeywordRegistry, default_registry

MIN_KEYWORD_LENGTH = 2


def _word_present(text: str, needle: str) -> bool:
    """Check if needle appears as a full word/phrase in text."""
    if not needle:
        return False
    pattern = rf"(?<!\w){re.escape(needle)}(?!\w)"
    return re.search(pattern, text) is not None


def _as_text_list(value: object) -> List[str]:
    """Coerce list-like input to a list of strings; anything else is empty."""
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str)]


class AllergenDetector:
    """
    Matches food text against a keyword registry. Inject a smaller registry to
    test against a handful of keywords, or flip match_mode to also accept
    plain substring hits ("icecream", "soymilk").
    """

    def __init__(
        self,
        registry: Optional[KeywordRegistry] = None,
        match_mode: MatchMode = MatchMode.WORD,
        resolve_aliases: bool = True,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.match_mode = MatchMode(match_mode)
        self.resolve_aliases = resolve_aliases
        self.log = logging.getLogger(self.__class__.__name__)

    def detect(
        self,
        label: Optional[str],
        ingredients: Optional[Sequence[str]],
        user_allergens: Optional[Sequence[str]],
    ) -> List[str]:
        """
        Return the user's allergens found in the food, in the caller's spelling
        and in first-detected order. Empty means nothing matched.
        """
        return self.explain(label, ingredients, user_allergens).detected_allergens

    def explain(
        self,
        label: Optional[str],
        ingredients: Optional[Sequence[str]],
        user_allergens: Optional[Sequence[str]],
    ) -> DetectionReport:
        """
        Same detection as detect(), keeping which keyword matched and where.
        Malformed input (None, non-lists, non-string items) is treated as empty.
        """
        label_text = label if isinstance(label, str) else ""
        ingredient_list = _as_text_list(ingredients)
        allergen_list = _as_text_list(user_allergens)
        search_items = self._search_items(label_text, ingredient_list)

        self.log.debug(
            "Detecting allergens: label=%r ingredients=%r user_allergens=%r",
            label_text,
            ingredient_list,
            allergen_list,
        )

        report = DetectionReport(
            label=label_text,
            ingredients=ingredient_list,
            user_allergens=allergen_list,
        )
        seen = set()
        for allergen in allergen_list:
            if allergen in seen:
                continue
            seen.add(allergen)
            match = self._check_allergen(allergen, search_items)
            if match:
                self.log.debug(
                    "Detected %r via keyword %r in %r",
                    allergen,
                    match.keyword,
                    match.matched_in,
                )
                report.matches.append(match)

        self.log.info(
            "Allergen check for %r: %d of %d flagged %s",
            label_text,
            len(report.matches),
            len(seen),
            report.detected_allergens,
        )
        return report

    def _resolve_key(self, allergen: str) -> str:
        if self.resolve_aliases:
            return normalize_allergen_name(allergen)
        return allergen.lower().strip()

    def _keywords_for(self, key: str) -> Tuple[Tuple[str, ...], bool]:
        """Registry keywords for key, or (key,) when the registry has no row."""
        keywords = self.registry.keywords_for(key)
        if keywords:
            return keywords, False
        self.log.warning(
            "No keywords found for allergen %r; matching the name literally", key
        )
        return (key,), True

    def _check_allergen(
        self, allergen: str, search_items: List[Tuple[str, str]]
    ) -> Optional[AllergenMatch]:
        key = self._resolve_key(allergen)
        if not key:
            return None
        keywords, fallback = self._keywords_for(key)

        for original, search_text in search_items:
            for keyword in keywords:
                keyword = keyword.lower().strip()
                if len(keyword) < MIN_KEYWORD_LENGTH:
                    continue
                if self._is_excluded(search_text, keyword):
                    continue
                if self._matches(search_text, keyword):
                    return AllergenMatch(
                        allergen=allergen,
                        allergen_key=key,
                        keyword=keyword,
                        matched_in=original,
                        fallback=fallback,
                    )
        return None

    def _is_excluded(self, search_text: str, keyword: str) -> bool:
        """True if a safe compound in search_text suppresses this keyword."""
        for compound, excluded in self.registry.safe_compounds.items():
            if compound in search_text and keyword in excluded:
                self.log.debug(
                    "Skipping %r - part of safe compound %r", keyword, compound
                )
                return True
        return False

    def _matches(self, search_text: str, keyword: str) -> bool:
        if _word_present(search_text, keyword):
            return True
        if self.match_mode == MatchMode.WORD_OR_SUBSTRING:
            return keyword in search_text
        return False

    @staticmethod
    def _search_items(label: str, ingredients: Iterable[str]) -> List[Tuple[str, str]]:
        """(original, lowercased) pairs for the label and each non-blank ingredient."""
        items: List[Tuple[str, str]] = []
        for item in [label, *ingredients]:
            if not item or not item.strip():
                continue
            items.append((item, item.lower().strip()))
        return items


@lru_cache(maxsize=1)
def default_detector() -> AllergenDetector:
    """Detector over the bundled registry with default settings."""
    return AllergenDetector()


def check_for_allergens(
    label: Optional[str],
    ingredients: Optional[Sequence[str]],
    user_allergens: Optional[Sequence[str]],
) -> List[str]:
    """Detect with the bundled registry and default settings."""
    return default_detector().detect(label, ingredients, user_allergens)
