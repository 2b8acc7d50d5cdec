"""
LLM-based résumé parser.

• Asks an OpenAI-compatible (or Ollama) chat model for a JSON candidate record
• Slices the JSON out of whatever prose or code fences the model wraps it in
• Backfills every missing field with the same placeholders as parser_rule
• Falls back to parser_rule wholesale on any transport or decode failure
"""

from __future__ import annotations
import json
import logging
import textwrap

from .cleaner import clean_resume, load_json_object
from .config import EXTRACTION_PARAMS, Settings, load_settings
from .llm_client import LLMClient, get_llm_client
from .parser_rule import parse_resume_rule
from .schema_resume import RESUME_SCHEMA, CandidateRecord
from .taxonomy import DEFAULT_RULES, ExtractionRules

logger = logging.getLogger(__name__)

_PROMPT = textwrap.dedent(
    """\
    Analyze the following resume and extract structured information. Return ONLY a JSON object with no additional text.

    Resume text:
    {resume_text}

    Extract and return a JSON object with this exact structure. Focus on extracting these specific technical skills: {skills}.

    {schema}"""
)


def build_prompt(raw_text: str, rules: ExtractionRules = DEFAULT_RULES) -> str:
    return _PROMPT.format(
        resume_text=raw_text,
        skills=", ".join(rules.taxonomy),
        schema=json.dumps(RESUME_SCHEMA, indent=2),
    )


class LLMResumeParser:
    """Primary extraction path with the rule-based parser as its safety net."""

    def __init__(self, client: LLMClient, settings: Settings, rules: ExtractionRules = DEFAULT_RULES):
        self.client = client
        self.settings = settings
        self.rules = rules

    def parse(self, raw_text: str) -> CandidateRecord:
        raw_text = raw_text or ""
        messages = [{"role": "user", "content": build_prompt(raw_text, self.rules)}]
        try:
            rsp = self.client.chat(model=self.settings.model, messages=messages, **EXTRACTION_PARAMS)
            content = rsp.message.content
            logger.debug("Raw extraction response: %.500s", content)
            data = load_json_object(content)
        except Exception as exc:
            logger.warning("Resume extraction failed, using rule-based parser: %s", exc)
            return parse_resume_rule(raw_text, self.rules)

        record = clean_resume(data, self.rules)
        logger.info("Extracted resume via %s", self.settings.model)
        return record


def parse_resume_llm(
    raw_text: str,
    settings: Settings | None = None,
    client: LLMClient | None = None,
) -> CandidateRecord:
    """Convenience entry point; configuration errors propagate, extraction never fails."""
    settings = settings or load_settings()
    client = client or get_llm_client(settings)
    return LLMResumeParser(client, settings).parse(raw_text)
