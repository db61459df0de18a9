"""
Keyword registry: the immutable lookup tables the detector reads from.

The registry is a value object. Build it once (default_registry() for the
bundled data, from_mappings() for custom or test tables) and hand it to the
detector; nothing mutates it afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

from .keywords import ALLERGEN_KEYWORDS, SAFE_COMPOUNDS


class RegistryError(ValueError):
    """Raised when keyword or compound tables break their invariants."""


def _clean(text: str) -> str:
    return (text or "").strip().lower()


@dataclass(frozen=True, eq=False)
class KeywordRegistry:
    keywords: Mapping[str, Tuple[str, ...]]
    safe_compounds: Mapping[str, FrozenSet[str]]

    @classmethod
    def from_mappings(
        cls,
        keywords: Mapping[str, Iterable[str]],
        safe_compounds: Optional[Mapping[str, Iterable[str]]] = None,
    ) -> "KeywordRegistry":
        """
        Normalize plain dicts into a read-only registry.

        Keys, keywords and compound phrases are trimmed and lowercased. Blank
        keywords are dropped and duplicates collapsed (first occurrence keeps
        its position). Raises RegistryError if an allergen ends up with no
        keywords, two keys collide after normalization, or a compound
        suppresses a keyword it does not contain.
        """
        table: Dict[str, Tuple[str, ...]] = {}
        for raw_key, raw_keywords in keywords.items():
            key = _clean(raw_key)
            if not key:
                raise RegistryError("Allergen keys must not be blank")
            if key in table:
                raise RegistryError(f"Duplicate allergen key after normalization: {key!r}")
            cleaned = []
            for keyword in raw_keywords:
                keyword = _clean(keyword)
                if keyword and keyword not in cleaned:
                    cleaned.append(keyword)
            if not cleaned:
                raise RegistryError(f"Allergen {key!r} has no keywords")
            table[key] = tuple(cleaned)

        compounds: Dict[str, FrozenSet[str]] = {}
        for raw_phrase, raw_excluded in (safe_compounds or {}).items():
            phrase = _clean(raw_phrase)
            if not phrase:
                raise RegistryError("Safe compound phrases must not be blank")
            excluded = frozenset(_clean(kw) for kw in raw_excluded if _clean(kw))
            outside = sorted(kw for kw in excluded if kw not in phrase)
            if outside:
                raise RegistryError(
                    f"Safe compound {phrase!r} suppresses keywords it does not contain: {outside}"
                )
            compounds[phrase] = compounds.get(phrase, frozenset()) | excluded

        return cls(
            keywords=MappingProxyType(table),
            safe_compounds=MappingProxyType(compounds),
        )

    def keywords_for(self, allergen: str) -> Tuple[str, ...]:
        """Keywords for an allergen name (case-insensitive); empty if unknown."""
        if not isinstance(allergen, str):
            return ()
        return self.keywords.get(_clean(allergen), ())

    def allergen_keys(self) -> Tuple[str, ...]:
        return tuple(self.keywords)

    def __contains__(self, allergen: object) -> bool:
        return isinstance(allergen, str) and _clean(allergen) in self.keywords

    def __len__(self) -> int:
        return len(self.keywords)


@lru_cache(maxsize=1)
def default_registry() -> KeywordRegistry:
    """The bundled keyword data, built once per process."""
    return KeywordRegistry.from_mappings(ALLERGEN_KEYWORDS, SAFE_COMPOUNDS)
