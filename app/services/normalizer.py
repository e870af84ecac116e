"""Coerce whatever JSON the model sent back into a complete ResearchResult.

Every field is rebuilt on its own with a fallback, so a partial or oddly typed
reply still renders. Nothing in here raises.
"""

from typing import Any

from app.schemas.research import (
    CONFIDENCE_LEVELS,
    AgeEstimate,
    ConfidenceLevel,
    CurrentReplacement,
    PricingSource,
    ResearchResult,
    ResultConfidence,
)


def _str(value: Any, default: str) -> str:
    return value if isinstance(value, str) and value else default


def _level(value: Any) -> ConfidenceLevel:
    return value if value in CONFIDENCE_LEVELS else "low"


def _obj(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str)]


def _http_url(value: Any) -> str | None:
    if isinstance(value, str) and value.lower().startswith(("http://", "https://")):
        return value
    return None


def _pricing_list(value: Any, exact_match: bool) -> list[PricingSource]:
    if not isinstance(value, list):
        return []
    sources = []
    for entry in value:
        if not isinstance(entry, dict):
            continue
        is_exact = entry.get("isExactMatch")
        sources.append(PricingSource(
            retailer=_str(entry.get("retailer"), "Unknown"),
            price=_str(entry.get("price"), "Unknown"),
            isExactMatch=is_exact if isinstance(is_exact, bool) else exact_match,
            url=_http_url(entry.get("url")),
        ))
    return sources


def normalize_result(raw: Any) -> ResearchResult:
    data = _obj(raw)
    age = _obj(data.get("ageEstimate"))
    replacement = _obj(data.get("currentReplacement"))
    confidence = _obj(data.get("confidence"))

    return ResearchResult(
        itemName=_str(data.get("itemName"), "Unknown Item"),
        description=_str(data.get("description"), "No description available."),
        specifications=_str_list(data.get("specifications")),
        ageEstimate=AgeEstimate(
            estimatedYear=_str(age.get("estimatedYear"), "Unknown"),
            estimatedAge=_str(age.get("estimatedAge"), "Unknown"),
            source=_str(age.get("source"), "Unable to determine"),
            confidence=_level(age.get("confidence")),
        ),
        originalMSRP=_str(data.get("originalMSRP"), "Unknown"),
        currentReplacement=CurrentReplacement(
            sameModel=_pricing_list(replacement.get("sameModel"), exact_match=True),
            comparable=_pricing_list(replacement.get("comparable"), exact_match=False),
        ),
        confidence=ResultConfidence(
            level=_level(confidence.get("level")),
            explanation=_str(confidence.get("explanation"), "Limited information provided."),
            suggestions=_str_list(confidence.get("suggestions")),
        ),
        searchTermUsed=_str(data.get("searchTermUsed"), ""),
    )
