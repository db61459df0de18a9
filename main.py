"""
CLI entrypoint to check a food against a user's allergen list.

Flow:
- Parse user inputs (food label, ingredients, allergen list, match options,
  output format).
- Build the AllergenDetector from settings, overridden by any CLI flags.
- Run detection and render either a text report or a JSON payload.

Example:
    python main.py --label "Cheese Pizza" \
        --ingredients "wheat flour,mozzarella cheese,tomato sauce" \
        --allergies "Milk,Wheat,Tomato"
"""

import argparse
import json
import logging
from typing import List, Optional, Sequence

from allergen_engine import AllergenDetector, DetectionReport, MatchMode
from allergen_engine.allergens import allergen_label
from allergen_engine.config import get_settings

# Simple i18n table for CLI output (extendable with more locales).
TRANSLATIONS = {
    "en": {
        "cli_title": "=== Allergen Checker ===",
        "prompt_language": "Preferred language (e.g. en, pt) [en]: ",
        "prompt_label": "Food name: ",
        "prompt_ingredients": "Ingredients (comma-separated, optional): ",
        "select_allergens": "Select allergens (comma-separated numbers):",
        "selection_prompt": "Your selection: ",
        "select_error_numbers": "Use numbers from the list (e.g. 1,3,5).",
        "select_error_empty": "Please select at least one allergen.",
        "select_error_range": "Choices out of range: {invalid}. Try again.",
        "section_ingredients": "Ingredients",
        "section_detected": "Detected allergens",
        "verdict_safe": "SAFE: none of your allergens were found",
        "verdict_warning": "WARNING: contains {count} of your allergens",
        "checked": "Checked for",
        "matched": "matched \"{keyword}\" in \"{source}\"",
        "literal_match": "no keyword list, matched by name",
        "no_ingredients": "(none listed)",
    },
    "pt": {
        "cli_title": "=== Verificador de Alérgenos ===",
        "prompt_language": "Idioma preferido (ex.: en, pt) [en]: ",
        "prompt_label": "Nome do alimento: ",
        "prompt_ingredients": "Ingredientes (separados por vírgula, opcional): ",
        "select_allergens": "Selecione os alérgenos (números separados por vírgula):",
        "selection_prompt": "A sua escolha: ",
        "select_error_numbers": "Use os números da lista (ex.: 1,3,5).",
        "select_error_empty": "Escolha pelo menos um alérgeno.",
        "select_error_range": "Opções fora do intervalo: {invalid}. Tente novamente.",
        "section_ingredients": "Ingredientes",
        "section_detected": "Alérgenos detetados",
        "verdict_safe": "SEGURO: nenhum dos seus alérgenos foi encontrado",
        "verdict_warning": "AVISO: contém {count} dos seus alérgenos",
        "checked": "Verificado para",
        "matched": "encontrado \"{keyword}\" em \"{source}\"",
        "literal_match": "sem lista de palavras-chave, encontrado pelo nome",
        "no_ingredients": "(nenhum indicado)",
    },
}


def _t(key: str, lang: str = "en") -> str:
    """Translate a key to the requested language with English fallback."""
    bundle = TRANSLATIONS.get(lang, TRANSLATIONS["en"])
    template = bundle.get(key) or TRANSLATIONS["en"].get(key, key)
    return template


def split_csv(raw: Optional[str]) -> List[str]:
    """Split a comma-separated CLI value, dropping blanks."""
    return [token.strip() for token in (raw or "").split(",") if token.strip()]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Configure and parse CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Check a food label and ingredients against your allergens"
    )
    parser.add_argument("--label", default="", help="Food name, e.g. 'Peanut Butter'")
    parser.add_argument(
        "--ingredients",
        default="",
        help="Comma-separated ingredient list (e.g. 'wheat flour,eggs,milk')",
    )
    parser.add_argument(
        "--allergies",
        required=True,
        help="Comma-separated allergen names (e.g. Milk,Tree Nuts,Gluten)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--match-mode",
        choices=[mode.value for mode in MatchMode],
        default=None,
        help="Keyword matching: whole words only, or whole words plus plain substrings. "
        "Defaults to ALLERGEN_MATCH_MODE or 'word'.",
    )
    parser.add_argument(
        "--no-aliases",
        action="store_true",
        default=False,
        help="Match allergen names as typed instead of resolving aliases (dairy -> milk)",
    )
    parser.add_argument(
        "--lang",
        default="en",
        help="Language for output labels (e.g. en, pt). Defaults to en.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG shows every keyword decision). Defaults to LOG_LEVEL.",
    )
    return parser.parse_args(argv)


def configure_logging(level: Optional[str] = None) -> None:
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_detector(
    match_mode: Optional[str] = None, no_aliases: bool = False
) -> AllergenDetector:
    """Detector from settings, with CLI flags taking precedence."""
    settings = get_settings()
    return AllergenDetector(
        match_mode=MatchMode(match_mode) if match_mode else settings.match_mode,
        resolve_aliases=settings.resolve_aliases and not no_aliases,
    )


def render_text_result(report: DetectionReport, lang: str = "en") -> str:
    """Pretty-print a detection report: verdict first, evidence below."""
    lines = [_t("cli_title", lang)]
    if report.label:
        lines.append(report.label)

    if report.safe:
        lines.append(_t("verdict_safe", lang))
    else:
        lines.append(_t("verdict_warning", lang).format(count=len(report.matches)))

    lines.append(f"\n{_t('section_ingredients', lang)}:")
    if report.ingredients:
        lines.append(f"  {', '.join(report.ingredients)}")
    else:
        lines.append(f"  {_t('no_ingredients', lang)}")

    if report.matches:
        lines.append(f"\n{_t('section_detected', lang)}:")
        for match in report.matches:
            if match.fallback:
                reason = _t("literal_match", lang)
            else:
                reason = _t("matched", lang).format(
                    keyword=match.keyword, source=match.matched_in
                )
            lines.append(f"  - {_display_name(match.allergen)}: {reason}")

    checked = ", ".join(_display_name(name) for name in report.user_allergens)
    lines.append(f"\n{_t('checked', lang)}: {checked}")
    return "\n".join(lines)


def _display_name(allergen: str) -> str:
    label = allergen_label(allergen)
    if label and label.lower() != allergen.strip().lower():
        return f"{allergen} ({label})"
    return allergen


def report_to_dict(report: DetectionReport) -> dict:
    return {
        "label": report.label,
        "ingredients": report.ingredients,
        "user_allergens": report.user_allergens,
        "detected_allergens": report.detected_allergens,
        "matches": [match.to_dict() for match in report.matches],
        "safe": report.safe,
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entrypoint: parse flags, run detection, render output."""
    args = parse_args(argv)
    configure_logging(args.log_level)

    detector = build_detector(args.match_mode, no_aliases=args.no_aliases)
    report = detector.explain(
        args.label, split_csv(args.ingredients), split_csv(args.allergies)
    )

    if args.format == "json":
        print(json.dumps(report_to_dict(report), indent=2, ensure_ascii=False))
    else:
        print(render_text_result(report, lang=args.lang))


if __name__ == "__main__":
    main()
