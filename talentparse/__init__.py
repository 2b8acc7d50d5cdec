"""
Resume information extraction for the recruiting platform.

Turns plain resume text into a CandidateRecord:
1. LLM extraction (OpenAI-compatible endpoint or Ollama)
2. Deterministic rule-based parsing whenever step 1 fails

Usage:
    from talentparse import load_settings, parse_resume_llm

    record = parse_resume_llm(resume_text, load_settings())
    print(record.name, record.skills)
"""

from .config import Settings, load_settings
from .parser_llm import LLMResumeParser, parse_resume_llm
from .parser_rule import parse_resume_rule
from .brief_llm import BriefGenerator
from .brief_rule import render_brief
from .feedback_llm import FALLBACK_FEEDBACK, FeedbackAnalysis, FeedbackAnalyzer
from .schema_resume import CandidateRecord, EducationEntry, ExperienceEntry, ProjectEntry
from .taxonomy import DEFAULT_RULES, SKILL_TAXONOMY, ExtractionRules

__all__ = [
    "Settings",
    "load_settings",
    "LLMResumeParser",
    "parse_resume_llm",
    "parse_resume_rule",
    "BriefGenerator",
    "render_brief",
    "FeedbackAnalyzer",
    "FeedbackAnalysis",
    "FALLBACK_FEEDBACK",
    "CandidateRecord",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "ExtractionRules",
    "DEFAULT_RULES",
    "SKILL_TAXONOMY",
]
__version__ = "1.0.0"
