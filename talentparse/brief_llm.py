"""
LLM-written recruiter brief for an already structured candidate.

Always returns prose: on any upstream failure, or an empty answer, the brief
comes from the deterministic template in brief_rule.
"""

from __future__ import annotations
import logging
import textwrap

from .brief_rule import render_brief
from .config import BRIEF_PARAMS, Settings
from .llm_client import LLMClient
from .schema_resume import CandidateRecord

logger = logging.getLogger(__name__)

_PROMPT = textwrap.dedent(
    """\
    Create a concise 3-4 line professional brief about this candidate for recruiters.

    Candidate Data:
    Name: {name}
    Email: {email}
    Skills: {skills}
    Experience: {experience}
    Education: {education}

    Create a brief that highlights:
    1. Key qualifications and technical expertise
    2. Relevant experience and achievements
    3. Educational background
    4. Why they would be a good fit for technical roles

    Keep it professional and concise (3-4 lines maximum). Focus on their technical strengths and experience."""
)


def build_brief_prompt(record: CandidateRecord) -> str:
    return _PROMPT.format(
        name=record.name,
        email=record.email,
        skills=", ".join(record.skills),
        experience=", ".join(f"{e.title} at {e.company}" for e in record.experience),
        education=", ".join(f"{e.degree} in {e.stream} from {e.school}" for e in record.education),
    )


class BriefGenerator:
    def __init__(self, client: LLMClient, settings: Settings):
        self.client = client
        self.settings = settings

    def generate(self, record: CandidateRecord) -> str:
        messages = [{"role": "user", "content": build_brief_prompt(record)}]
        try:
            rsp = self.client.chat(model=self.settings.model, messages=messages, **BRIEF_PARAMS)
            brief = (rsp.message.content or "").strip()
        except Exception as exc:
            logger.warning("Brief generation failed, using template: %s", exc)
            return render_brief(record)

        if not brief:
            logger.warning("Brief generation returned no content, using template")
            return render_brief(record)
        return brief
