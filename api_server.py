"""
FastAPI wrapper for the allergen detector.

Endpoints:
- GET /health             : readiness probe
- GET /allergens          : allergens with a curated keyword list
- GET /allergens/{name}   : category and keywords for one allergen
- POST /detect            : check a food label + ingredients against user allergens

Run locally:
    uvicorn api_server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import logging
from typing import Dict, List

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, field_validator

from allergen_engine import AllergenDetector, get_allergen_details
from allergen_engine.allergens import supported_allergens
from allergen_engine.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Allergen Detection API",
    description="Keyword-based allergen detection for food labels and ingredient lists.",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class DetectRequest(BaseModel):
    label: str = Field("", description="Food name, e.g. 'Cheese Pizza'")
    ingredients: List[str] = Field(default_factory=list, description="Ingredient strings")
    user_allergens: List[str] = Field(
        ..., description="Allergen names as the user declared them (e.g. Milk, Tree Nuts)"
    )

    @field_validator("user_allergens")
    @classmethod
    def _drop_blank_allergens(cls, v: List[str]) -> List[str]:
        return [name for name in v if name.strip()]


class MatchPayload(BaseModel):
    allergen: str
    allergen_key: str
    keyword: str
    matched_in: str
    fallback: bool


class DetectResponse(BaseModel):
    detected_allergens: List[str]
    matches: List[MatchPayload]
    safe: bool


# Shared singleton; the registry is read-only so requests can share it.
detector = AllergenDetector(
    match_mode=settings.match_mode,
    resolve_aliases=settings.resolve_aliases,
)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/allergens")
def list_allergens() -> Dict[str, List[str]]:
    return {"allergens": supported_allergens(detector.registry)}


@app.get("/allergens/{name}")
def allergen_details(name: str) -> Dict:
    details = get_allergen_details(
        name, registry=detector.registry, resolve_aliases=detector.resolve_aliases
    )
    payload = details.to_dict()
    payload["keywords"] = list(detector.registry.keywords_for(details.normalized_name))
    return payload


@app.post("/detect", response_model=DetectResponse)
def detect(request: DetectRequest):
    report = detector.explain(request.label, request.ingredients, request.user_allergens)
    if not report.safe:
        logger.info(
            "Flagged %s for %r",
            report.detected_allergens,
            request.label,
        )
    return {
        "detected_allergens": report.detected_allergens,
        "matches": [match.to_dict() for match in report.matches],
        "safe": report.safe,
    }


if __name__ == "__main__":
    uvicorn.run("api_server:app", host="0.0.0.0", port=8000, reload=False)
