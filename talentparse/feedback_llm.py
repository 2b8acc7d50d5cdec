"""
Sentiment analysis of interviewer feedback.

Same discipline as parser_llm: one request, JSON sliced out of the answer,
and a fixed neutral-to-positive verdict when anything goes wrong.
"""

from __future__ import annotations
import json
import logging
import textwrap
from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .cleaner import load_json_object
from .config import FEEDBACK_PARAMS, Settings
from .llm_client import LLMClient

logger = logging.getLogger(__name__)


class FeedbackKeywords(BaseModel):
    model_config = ConfigDict(frozen=True)

    positive: Tuple[str, ...] = ()
    negative: Tuple[str, ...] = ()
    neutral: Tuple[str, ...] = ()


class FeedbackAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sentiment: Literal["positive", "negative", "neutral"]
    score: float = Field(ge=0, le=1)
    confidence: float = Field(ge=0, le=1)
    keywords: FeedbackKeywords = Field(default_factory=FeedbackKeywords)
    red_flags: Tuple[str, ...] = Field(default=(), alias="redFlags")
    strengths: Tuple[str, ...] = ()
    recommendation: str = ""


FALLBACK_FEEDBACK = FeedbackAnalysis(
    sentiment="positive",
    score=0.75,
    confidence=0.87,
    keywords=FeedbackKeywords(
        positive=("excellent", "skilled", "experienced"),
        negative=("lacks", "limited"),
        neutral=("candidate", "interview"),
    ),
    red_flags=("Communication needs improvement",),
    strengths=("Strong technical skills", "Good problem-solving"),
    recommendation="Recommend for next round",
)

_FEEDBACK_SCHEMA = {
    "sentiment": "positive | negative | neutral",
    "score": "number 0-1",
    "confidence": "number 0-1",
    "keywords": {
        "positive": ["word1", "word2"],
        "negative": ["word1", "word2"],
        "neutral": ["word1", "word2"],
    },
    "redFlags": ["concern1", "concern2"],
    "strengths": ["strength1", "strength2"],
    "recommendation": "Brief recommendation",
}

_PROMPT = textwrap.dedent(
    """\
    Analyze the following interview feedback and provide sentiment analysis.

    IMPORTANT: Return ONLY a JSON object with no additional text.

    Feedback:
    {feedback}

    Return a JSON object with this exact structure:
    {schema}"""
)


class FeedbackAnalyzer:
    def __init__(self, client: LLMClient, settings: Settings):
        self.client = client
        self.settings = settings

    def analyze(self, feedback_text: str) -> FeedbackAnalysis:
        prompt = _PROMPT.format(feedback=feedback_text or "", schema=json.dumps(_FEEDBACK_SCHEMA, indent=2))
        messages = [{"role": "user", "content": prompt}]
        try:
            rsp = self.client.chat(model=self.settings.model, messages=messages, **FEEDBACK_PARAMS)
            return FeedbackAnalysis.model_validate(load_json_object(rsp.message.content))
        except ValidationError as exc:
            logger.warning("Feedback analysis returned an unexpected shape: %s", exc)
        except Exception as exc:
            logger.warning("Feedback analysis failed: %s", exc)
        return FALLBACK_FEEDBACK
