"""
Skill taxonomy and the keyword tables used by the rule-based parser.

Everything here is read-only data. Bump TAXONOMY_VERSION whenever one of the
tables changes so stored records can be traced back to the vocabulary that
produced them.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

TAXONOMY_VERSION = "2023.1"

SKILL_TAXONOMY: Tuple[str, ...] = (
    "JavaScript", "Python", "Java", "C", "C++", "SQL", "R", "MATLAB",
    "React", "Node.js", "Express.js", "MongoDB", "HTML", "CSS", "TypeScript",
    "Redux", "REST API", "GraphQL", "Git", "GitHub", "GitLab", "Docker",
    "Kubernetes", "AWS", "Azure", "Google Cloud", "Firebase", "OpenCV",
    "TensorFlow", "PyTorch", "Machine Learning", "Deep Learning",
    "Natural Language Processing", "Computer Vision", "Data Analysis",
    "Data Visualization", "Pandas", "NumPy", "Scikit-learn", "Tableau",
    "Power BI", "Agile", "Scrum", "Kanban", "CI/CD", "Linux",
    "Shell Scripting", "Cybersecurity", "Networking", "Cloud Computing",
    "System Design", "OOP", "Functional Programming", "Data Structures",
    "Algorithms", "Database Management", "Software Testing", "Unit Testing",
    "Integration Testing", "UI/UX", "Figma", "Wireframing", "API Integration",
    "Microservices", "DevOps",
)

# shown to recruiters instead of an empty skills list
DEFAULT_SKILLS: Tuple[str, ...] = ("JavaScript", "React", "Node.js")

CERTIFICATION_KEYWORDS: Tuple[str, ...] = (
    "AWS", "Google Cloud", "MongoDB", "Scrum", "Certified", "Certificate",
)

# An experience line must mention one of these years or the present marker.
# The window is stale for resumes dated after 2023; see DESIGN.md.
EXPERIENCE_YEARS: Tuple[str, ...] = ("2019", "2020", "2021", "2022", "2023")
PRESENT_MARKER = "Present"


@dataclass(frozen=True)
class ExtractionRules:
    """Versioned vocabulary handed to the extractors."""
    taxonomy: Tuple[str, ...] = SKILL_TAXONOMY
    default_skills: Tuple[str, ...] = DEFAULT_SKILLS
    certification_keywords: Tuple[str, ...] = CERTIFICATION_KEYWORDS
    experience_years: Tuple[str, ...] = EXPERIENCE_YEARS
    present_marker: str = PRESENT_MARKER
    version: str = TAXONOMY_VERSION


DEFAULT_RULES = ExtractionRules()


def match_skills(text: str, taxonomy: Iterable[str] = SKILL_TAXONOMY) -> List[str]:
    """Taxonomy entries found in ``text`` (case-insensitive), in taxonomy order."""
    lowered = (text or "").lower()
    return [skill for skill in taxonomy if skill.lower() in lowered]


def extract_skills(text: str, rules: ExtractionRules = DEFAULT_RULES) -> List[str]:
    """Like match_skills, but never empty: falls back to ``rules.default_skills``."""
    found = match_skills(text, rules.taxonomy)
    return found or list(rules.default_skills)


def canonical_skill(name: str, taxonomy: Iterable[str] = SKILL_TAXONOMY) -> str:
    """Return the taxonomy spelling of ``name`` if it is a known skill."""
    key = name.strip().lower()
    for skill in taxonomy:
        if skill.lower() == key:
            return skill
    return name.strip()
