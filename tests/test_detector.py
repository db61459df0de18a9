"""Tests for the keyword-based allergen detector."""

import itertools
import logging

import pytest

from allergen_engine import (
    AllergenDetector,
    KeywordRegistry,
    MatchMode,
    check_for_allergens,
)


@pytest.fixture
def detector():
    return AllergenDetector()


def test_peanut_butter_does_not_flag_milk(detector):
    assert detector.detect("Peanut Butter", [], ["milk"]) == []


def test_cheddar_cheese_flags_milk(detector):
    assert detector.detect("Cheddar Cheese", [], ["milk"]) == ["milk"]


def test_pizza_flags_every_declared_allergen(detector):
    detected = detector.detect(
        "Cheese Pizza",
        ["wheat flour", "mozzarella cheese", "tomato sauce"],
        ["milk", "wheat", "tomato"],
    )
    assert detected == ["milk", "wheat", "tomato"]


def test_plain_rice_is_safe(detector):
    assert detector.detect("Plain Rice", ["rice"], ["milk", "gluten", "eggs"]) == []


def test_allergen_with_own_name_as_only_match(detector):
    detected = detector.detect(
        "Strawberry Smoothie", ["strawberry", "banana", "milk"], ["strawberry"]
    )
    assert detected == ["strawberry"]


@pytest.mark.parametrize(
    "label, ingredients, allergens, expected",
    [
        ("Cheddar Cheese", [], ["Milk"], ["Milk"]),
        ("Scrambled Eggs", [], ["Eggs"], ["Eggs"]),
        ("Peanut Butter", [], ["Peanuts"], ["Peanuts"]),
        ("Roasted Almonds", [], ["Tree Nuts"], ["Tree Nuts"]),
        ("Grilled Salmon", [], ["Fish"], ["Fish"]),
        ("Idli", ["Idli"], ["milk", "gluten"], []),
        ("Milk Chocolate", ["Milk Chocolate", "cocoa", "milk", "sugar"], ["milk", "gluten"], ["milk"]),
        ("Peanut Butter", ["peanuts", "salt"], ["peanuts", "milk"], ["peanuts"]),
        ("Whole Wheat Bread", ["wheat flour", "water", "yeast", "salt"], ["gluten", "milk"], ["gluten"]),
    ],
)
def test_basic_detection(detector, label, ingredients, allergens, expected):
    assert detector.detect(label, ingredients, allergens) == expected


@pytest.mark.parametrize(
    "label, allergens",
    [
        ("Almond Butter", ["Milk"]),
        ("Cocoa Butter", ["Milk"]),
        ("Butternut Squash", ["Tree Nuts", "Milk"]),
        ("Water Chestnuts", ["Tree Nuts"]),
        ("Water Chestnut", ["Tree Nuts"]),
        ("Nutmeg", ["Tree Nuts"]),
        ("Butter Beans", ["Milk"]),
        ("Oat Milk", ["Milk"]),
        ("Coconut Milk Curry", ["Milk"]),
    ],
)
def test_safe_compounds_prevent_false_positives(detector, label, allergens):
    assert detector.detect(label, [], allergens) == []


def test_plant_milk_still_flags_its_own_allergen(detector):
    assert detector.detect("Almond Milk", [], ["Milk", "Tree Nuts"]) == ["Tree Nuts"]


@pytest.mark.parametrize(
    "label, ingredients, allergens",
    [
        ("Seafood Paella", ["shrimp", "mussels", "fish", "rice"], ["Fish", "Shellfish"]),
        ("Chocolate Cake", ["flour", "eggs", "milk", "butter"], ["Eggs", "Milk", "Wheat"]),
        ("Paneer Tikka", ["paneer", "spices"], ["Milk"]),
        ("Hummus", ["chickpeas", "tahini"], ["Chickpeas", "Sesame"]),
        ("Spaghetti Carbonara", ["pasta", "eggs", "bacon"], ["Wheat", "Eggs"]),
        ("Grilled Tofu", ["tofu", "soy sauce"], ["Soy"]),
        ("Whey Protein Powder", ["whey protein isolate"], ["Milk"]),
        ("Mayonnaise", ["egg yolk", "oil"], ["Eggs"]),
        ("Chocolate Bar", ["cocoa", "sugar", "soy lecithin"], ["Soy"]),
        ("Almond Milk", ["water", "almonds"], ["Tree Nuts"]),
        ("Smoothie", ["banana", "strawberry", "milk"], ["Milk", "Banana", "Strawberry"]),
    ],
)
def test_every_declared_allergen_is_found(detector, label, ingredients, allergens):
    assert detector.detect(label, ingredients, allergens) == allergens


@pytest.mark.parametrize(
    "label, allergens",
    [
        ("Fresh Apple", ["Milk"]),
        ("White Rice", ["Wheat", "Gluten"]),
        ("Grilled Chicken", ["Shellfish", "Fish"]),
        ("Mystery Food", ["Milk", "Eggs"]),
    ],
)
def test_safe_foods(detector, label, allergens):
    assert detector.detect(label, [], allergens) == []


def test_no_user_allergens(detector):
    assert detector.detect("Peanut Butter", ["peanuts"], []) == []


@pytest.mark.parametrize("spelling", ["milk", "MILK", "MiLk", "  Milk  "])
def test_returns_caller_spelling(detector, spelling):
    assert detector.detect("Cheese Pizza", [], [spelling]) == [spelling]


def test_repeated_calls_are_identical(detector):
    args = ("Cheese Pizza", ["wheat flour", "mozzarella cheese"], ["Milk", "Wheat", "Eggs"])
    assert detector.detect(*args) == detector.detect(*args)


def test_detected_set_ignores_allergen_order(detector):
    ingredients = ["wheat flour", "mozzarella cheese", "tomato sauce"]
    allergens = ["milk", "wheat", "tomato", "eggs"]
    baseline = set(detector.detect("Cheese Pizza", ingredients, allergens))
    for permutation in itertools.permutations(allergens):
        detected = detector.detect("Cheese Pizza", ingredients, list(permutation))
        assert set(detected) == baseline
        assert detected == [name for name in permutation if name in baseline]


def test_duplicate_allergens_reported_once(detector):
    detected = detector.detect(
        "Cheese Pizza", ["mozzarella cheese", "milk"], ["Milk", "Milk", "milk"]
    )
    assert detected == ["Milk", "milk"]


def test_single_character_keywords_never_match():
    registry = KeywordRegistry.from_mappings({"vitamin": ["c", "e"]})
    detector = AllergenDetector(registry=registry)
    assert detector.detect("Vitamin C and E tablets", ["c", "e"], ["vitamin"]) == []
    assert detector.detect("C", [], ["c"]) == []


def test_word_boundaries(detector):
    assert detector.detect("Glazed Donut", [], ["Tree Nuts"]) == []
    assert detector.detect("Peanut Sandwich", [], ["Peas"]) == []
    assert detector.detect("Green peas", [], ["Peas"]) == ["Peas"]


def test_unicode_keywords_match(detector):
    assert detector.detect("Crème brûlée", [], ["milk"]) == ["milk"]


def test_unknown_allergen_matches_literally(detector, caplog):
    with caplog.at_level(logging.WARNING):
        report = detector.explain("Kale Salad", ["kale", "lemon"], ["Kale"])
    assert report.detected_allergens == ["Kale"]
    assert report.matches[0].fallback is True
    assert report.matches[0].keyword == "kale"
    assert "No keywords found" in caplog.text


def test_explain_reports_keyword_and_source(detector):
    report = detector.explain("Cheddar Cheese", ["salt"], ["Milk", "Eggs"])
    assert not report.safe
    match = report.match_for("Milk")
    assert match.allergen_key == "milk"
    assert match.keyword == "cheese"
    assert match.matched_in == "Cheddar Cheese"
    assert match.fallback is False
    assert report.match_for("Eggs") is None


def test_exclusion_is_per_search_item():
    registry = KeywordRegistry.from_mappings(
        {"milk": ["butter"]}, {"peanut butter": ["butter"]}
    )
    detector = AllergenDetector(registry=registry)
    assert detector.detect("Peanut Butter Toast", [], ["milk"]) == []
    report = detector.explain("Peanut Butter Toast", ["butter"], ["milk"])
    assert report.detected_allergens == ["milk"]
    assert report.matches[0].matched_in == "butter"


def test_label_is_searched_before_ingredients(detector):
    report = detector.explain("Cheese Plate", ["milk"], ["Milk"])
    assert report.matches[0].matched_in == "Cheese Plate"


def test_malformed_input_never_raises(detector):
    assert detector.detect(None, None, None) == []
    assert detector.detect("Cheese", "cheese", ["milk"]) == ["milk"]
    assert detector.detect("Cheese", [], "milk") == []
    assert detector.detect(
        "Cheddar", [None, "", "   ", 42], ["milk", None, "  ", 7]
    ) == ["milk"]
    assert detector.detect("", [], ["milk"]) == []


def test_word_mode_ignores_glued_words(detector):
    assert detector.match_mode == MatchMode.WORD
    assert detector.detect("Chocolatemilk", [], ["milk"]) == []


def test_substring_mode_catches_glued_words():
    detector = AllergenDetector(match_mode="word_or_substring")
    assert detector.match_mode == MatchMode.WORD_OR_SUBSTRING
    assert detector.detect("Chocolatemilk", [], ["milk"]) == ["milk"]
    # compound exclusion still applies
    assert detector.detect("Peanut Butter", [], ["milk"]) == []


def test_substring_mode_on_literal_fallback():
    strict = AllergenDetector(resolve_aliases=False)
    loose = AllergenDetector(match_mode=MatchMode.WORD_OR_SUBSTRING, resolve_aliases=False)
    assert strict.detect("Glazed Donut", [], ["nut"]) == []
    assert loose.detect("Glazed Donut", [], ["nut"]) == ["nut"]


def test_aliases_resolve_before_lookup():
    with_aliases = AllergenDetector()
    literal = AllergenDetector(resolve_aliases=False)
    assert with_aliases.detect("Cheddar Cheese", [], ["Dairy"]) == ["Dairy"]
    assert literal.detect("Cheddar Cheese", [], ["Dairy"]) == []
    assert with_aliases.detect("Roasted Almonds", [], ["nuts"]) == ["nuts"]
    assert literal.detect("Roasted Almonds", [], ["nuts"]) == []


def test_check_for_allergens_uses_bundled_tables():
    assert check_for_allergens("Hummus", ["chickpeas", "tahini"], ["Sesame"]) == ["Sesame"]
