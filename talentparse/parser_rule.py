"""
Rule-based résumé parser.

Used whenever the LLM path is unavailable. Each extractor is a shallow,
line-oriented heuristic that never raises and never leaves a required field
empty; accuracy is the LLM's job, availability is this module's.
"""

from __future__ import annotations
import re
from typing import List, Tuple

from .cleaner import normalise_linkedin
from .schema_resume import (
    EXPERIENCE_DESCRIPTION,
    PLACEHOLDERS,
    PROJECT_DESCRIPTION,
    PROJECT_NAME,
    CandidateRecord,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
)
from .taxonomy import DEFAULT_RULES, ExtractionRules, extract_skills

EMAIL = re.compile(r"[\w.-]+@[\w.-]+\.\w+")
# digits plus phone punctuation on a single line; digit count checked separately
PHONE = re.compile(r"\+?[\d \t()-]{10,}")
LINKEDIN = re.compile(r"linkedin\.com/in/[\w-]+", re.I)
PROJECT_WORD = re.compile(r"project", re.I)

MIN_PHONE_DIGITS = 10
EDUCATION_KEYWORDS = ("bachelor", "master", "university")


def parse_resume_rule(raw: str, rules: ExtractionRules = DEFAULT_RULES) -> CandidateRecord:
    raw = raw or ""
    name, email, phone, linkedin = extract_contact(raw)
    return CandidateRecord(
        name=name,
        email=email,
        phone=phone,
        linkedin=linkedin,
        skills=tuple(extract_skills(raw, rules)),
        experience=extract_experience(raw, rules),
        education=extract_education(raw),
        certifications=extract_certifications(raw, rules),
        projects=extract_projects(raw, rules),
    )


# ───────────────────────────────────────── extractors ──
def extract_contact(text: str) -> Tuple[str, str, str, str]:
    """(name, email, phone, linkedin), each falling back to its placeholder."""
    lines = [ln for ln in _lines(text) if ln]
    name = lines[0] if lines else PLACEHOLDERS["name"]

    m = EMAIL.search(text)
    email = m.group() if m else PLACEHOLDERS["email"]

    phone = _first_phone(text) or PLACEHOLDERS["phone"]

    m = LINKEDIN.search(text)
    linkedin = normalise_linkedin(m.group()) if m else PLACEHOLDERS["linkedin"]
    return name, email, phone, linkedin


def _lines(text: str) -> List[str]:
    # newline-only split: form feeds from PDF converters stay inside a line
    return [ln.strip().strip("\ufeff").strip() for ln in text.split("\n")]


def _first_phone(text: str) -> str:
    for m in PHONE.finditer(text):
        candidate = m.group().strip()
        if sum(ch.isdigit() for ch in candidate) >= MIN_PHONE_DIGITS:
            return candidate
    return ""


def extract_experience(text: str, rules: ExtractionRules = DEFAULT_RULES) -> Tuple[ExperienceEntry, ...]:
    jobs: List[ExperienceEntry] = []
    for ln in _lines(text):
        if "|" not in ln or not _mentions_date(ln, rules):
            continue
        parts = [p.strip() for p in ln.split("|")]
        if len(parts) < 3:
            continue
        jobs.append(
            ExperienceEntry(
                title=parts[0],
                company=parts[1],
                duration=parts[2],
                description=EXPERIENCE_DESCRIPTION,
            )
        )
    return tuple(jobs) or PLACEHOLDERS["experience"]


def _mentions_date(line: str, rules: ExtractionRules) -> bool:
    return rules.present_marker in line or any(y in line for y in rules.experience_years)


def extract_education(text: str) -> Tuple[EducationEntry, ...]:
    """First degree-looking line only; year, cgpa and stream are not parsed."""
    placeholder = PLACEHOLDERS["education"][0]
    lines = _lines(text)
    for i, ln in enumerate(lines):
        if not any(k in ln.lower() for k in EDUCATION_KEYWORDS):
            continue
        nxt = lines[i + 1] if i + 1 < len(lines) else ""
        if "Bachelor" in ln:
            degree = "Bachelor of Science"
        elif "Master" in ln:
            degree = "Master of Science"
        else:
            degree = "Degree"
        school = nxt if "University" in nxt else placeholder.school
        return (placeholder.model_copy(update={"degree": degree, "school": school}),)
    return PLACEHOLDERS["education"]


def extract_certifications(text: str, rules: ExtractionRules = DEFAULT_RULES) -> Tuple[str, ...]:
    # may legitimately be empty
    lowered = text.lower()
    found = [f"{kw} Certification" for kw in rules.certification_keywords if kw.lower() in lowered]
    return tuple(dict.fromkeys(found))


def extract_projects(text: str, rules: ExtractionRules = DEFAULT_RULES) -> Tuple[ProjectEntry, ...]:
    projects: List[ProjectEntry] = []
    lines = _lines(text)
    for i, ln in enumerate(lines):
        low = ln.lower()
        if "project" not in low or "projects:" in low:
            continue
        following = [l for l in lines[i + 1:i + 3] if l]
        projects.append(
            ProjectEntry(
                name=PROJECT_WORD.sub("", ln, count=1).strip() or PROJECT_NAME,
                description=following[0] if following else PROJECT_DESCRIPTION,
                technologies=tuple(extract_skills(" ".join(following), rules)[:3]),
            )
        )
    return tuple(projects) or PLACEHOLDERS["projects"]
