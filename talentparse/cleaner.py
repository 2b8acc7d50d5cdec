"""
Shared clean-ups: JSON sanitization for model output and schema backfill.
"""
from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Tuple

from pydantic import ValidationError

from .schema_resume import (
    PLACEHOLDERS,
    CandidateRecord,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
)
from .taxonomy import DEFAULT_RULES, ExtractionRules, canonical_skill

logger = logging.getLogger(__name__)

_SCALARS = ("name", "email", "phone", "linkedin")
_ENTRY_MODELS = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
    "projects": ProjectEntry,
}


# ───────────────────────────────────────── helpers ──
def slice_json(raw: str) -> str:
    """Cut ``raw`` down to the span between the first '{' and the last '}'.

    Models like to wrap JSON in prose or code fences; anything outside the
    outermost braces is dropped. Text without a brace pair comes back as is.
    """
    start = raw.find("{")
    end = raw.rfind("}")
    if start != -1 and end != -1:
        return raw[start:end + 1]
    return raw


def load_json_object(raw: str | None) -> Dict[str, Any]:
    """Sanitize and decode model output, insisting on a JSON object.

    Raises ValueError (json.JSONDecodeError included) when there is nothing
    usable; callers treat that as a failed upstream response.
    """
    if not raw:
        raise ValueError("empty model response")
    data = json.loads(slice_json(raw))
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def normalise_linkedin(token: str) -> str:
    token = (token or "").strip()
    if not token:
        return ""
    if token.lower().startswith("http"):
        return token
    return f"https://{token}"


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _sequence(value: Any) -> List[Any]:
    # anything that is not a JSON array counts as missing
    return list(value) if isinstance(value, (list, tuple)) else []


def _strings(value: Any) -> List[str]:
    out: List[str] = []
    seen = set()
    for item in _sequence(value):
        text = _text(item)
        if text and text.lower() not in seen:
            seen.add(text.lower())
            out.append(text)
    return out


def _entry(model, item: Any):
    if not isinstance(item, dict):
        return None
    fields = {}
    for key, info in model.model_fields.items():
        if key == "technologies":
            fields[key] = tuple(_strings(item.get(key)))
        elif info.is_required():
            fields[key] = _text(item.get(key))
        else:
            fields[key] = _text(item.get(key)) or None
    try:
        entry = model(**fields)
    except ValidationError as exc:
        logger.debug("Dropping malformed %s entry: %s", model.__name__, exc)
        return None
    # an entry with nothing but blanks carries no signal
    if not any(v for v in entry.model_dump().values()):
        return None
    return entry


def _entries(name: str, value: Any) -> Tuple[Any, ...]:
    model = _ENTRY_MODELS[name]
    return tuple(e for e in (_entry(model, item) for item in _sequence(value)) if e is not None)


# ───────────────────────────────────────── cleaner ──
def clean_resume(data: Dict[str, Any], rules: ExtractionRules = DEFAULT_RULES) -> CandidateRecord:
    """Turn an untrusted decoded payload into a complete CandidateRecord.

    Missing, empty or mistyped scalars fall back to their placeholder. A
    sequence field that is not a list is read as empty; required sequences
    that end up empty get the same placeholder the rule parser would use.
    """
    fields: Dict[str, Any] = {}
    backfilled = []

    for key in _SCALARS:
        value = _text(data.get(key))
        if not value:
            value = PLACEHOLDERS[key]
            if key != "linkedin":
                backfilled.append(key)
        fields[key] = value
    fields["linkedin"] = normalise_linkedin(fields["linkedin"])

    skills = _strings(data.get("skills"))
    skills = list(dict.fromkeys(canonical_skill(s, rules.taxonomy) for s in skills))
    if skills:
        fields["skills"] = tuple(skills)
    else:
        fields["skills"] = tuple(rules.default_skills)
        backfilled.append("skills")

    for key in _ENTRY_MODELS:
        entries = _entries(key, data.get(key))
        if not entries:
            entries = PLACEHOLDERS[key]
            backfilled.append(key)
        fields[key] = entries

    fields["certifications"] = tuple(_strings(data.get("certifications")))

    if backfilled:
        logger.info("Backfilled placeholder values for: %s", ", ".join(backfilled))
    return CandidateRecord(**fields)
