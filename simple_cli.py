"""
Interactive helper to run the detector without remembering flags.
Workflow:
- Ask language first so all prompts/output localize correctly.
- Prompt for the food name, its ingredients, and an allergen selection via a
  numbered list of supported allergens.
- Run the detector and print the formatted report.

Usage:
    python simple_cli.py
"""
from typing import Callable, List

from allergen_engine.allergens import supported_allergens
from main import _t, build_detector, configure_logging, render_text_result, split_csv


def prompt_allergens(lang: str = "en", ask: Callable[[str], str] = input) -> List[str]:
    """
    Console-friendly "dropdown": show the supported allergens and let the user
    pick by number. Returns display names (e.g. "Milk", "Tree Nuts").
    """
    options = supported_allergens()
    print("\n" + _t("select_allergens", lang))
    for idx, name in enumerate(options, start=1):
        print(f"  {idx:2d}. {name}")

    while True:
        raw = ask(_t("selection_prompt", lang)).strip()
        if not raw:
            print(_t("select_error_empty", lang))
            continue
        try:
            indices = [
                int(token)
                for token in raw.replace(" ", "").split(",")
                if token.strip()
            ]
        except ValueError:
            print(_t("select_error_numbers", lang))
            continue

        invalid = [i for i in indices if i < 1 or i > len(options)]
        if invalid:
            print(_t("select_error_range", lang).format(invalid=invalid))
            continue

        return [options[i - 1] for i in indices]


def main(ask: Callable[[str], str] = input) -> None:
    configure_logging("WARNING")
    lang = ask(_t("prompt_language", "en")).strip() or "en"
    print(_t("cli_title", lang))
    label = ask(_t("prompt_label", lang)).strip()
    ingredients = split_csv(ask(_t("prompt_ingredients", lang)))
    allergens = prompt_allergens(lang=lang, ask=ask)

    report = build_detector().explain(label, ingredients, allergens)
    print()
    print(render_text_result(report, lang=lang))


if __name__ == "__main__":
    main()
