"""
Tests for the LLM-backed parser and its fallback behaviour.

The LLM is never called for real: tests inject a MagicMock client, or a real
OpenAIClient whose SDK client is replaced by a mock raising SDK errors.
"""
import json
import logging
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from talentparse.llm_client import OpenAIClient
from talentparse.parser_llm import LLMResumeParser, build_prompt, parse_resume_llm
from talentparse.parser_rule import parse_resume_rule
from talentparse.schema_resume import PLACEHOLDERS

FULL_PAYLOAD = {
    "name": "Jane Doe",
    "email": "jane.doe@example.com",
    "phone": "+1 (555) 111-2222",
    "linkedin": "linkedin.com/in/janedoe",
    "skills": ["Python", "react", "Kubernetes"],
    "experience": [
        {"title": "Senior Engineer", "company": "Acme Corp", "duration": "2022 - Present",
         "description": "Runs the platform team"}
    ],
    "education": [
        {"degree": "BEng", "school": "Stanford University", "year": "2018", "cgpa": "3.9",
         "stream": "Computer Science"}
    ],
    "certifications": ["AWS Solutions Architect"],
    "projects": [
        {"name": "Inventory Tracker", "description": "Stock levels in real time",
         "technologies": ["React", "Docker"]}
    ],
}

_REQUEST = httpx.Request("POST", "https://api.deepseek.com/v1/chat/completions")


class TestPrompt:

    def test_embeds_text_vocabulary_and_shape(self):
        prompt = build_prompt("RESUME BODY {with braces}")

        assert "RESUME BODY {with braces}" in prompt
        assert "Return ONLY a JSON object" in prompt
        assert "Natural Language Processing" in prompt
        assert '"certifications"' in prompt
        assert '"technologies"' in prompt


class TestSuccessfulExtraction:

    def test_full_payload(self, settings, make_client, sample_resume):
        client = make_client(json.dumps(FULL_PAYLOAD))
        record = LLMResumeParser(client, settings).parse(sample_resume)

        assert record.name == "Jane Doe"
        assert record.linkedin == "https://linkedin.com/in/janedoe"
        assert record.skills == ("Python", "React", "Kubernetes")
        assert record.experience[0].description == "Runs the platform team"
        assert record.education[0].degree == "BEng"
        assert record.certifications == ("AWS Solutions Architect",)
        assert record.projects[0].technologies == ("React", "Docker")

    def test_request_parameters(self, settings, make_client, sample_resume):
        client = make_client(json.dumps(FULL_PAYLOAD))
        LLMResumeParser(client, settings).parse(sample_resume)

        client.chat.assert_called_once()
        kwargs = client.chat.call_args.kwargs
        assert kwargs["model"] == "deepseek-chat"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 2000
        assert len(kwargs["messages"]) == 1
        assert kwargs["messages"][0]["role"] == "user"
        assert "Senior Engineer | Acme Corp" in kwargs["messages"][0]["content"]

    def test_wrapped_json_is_sanitized_and_backfilled(self, settings, make_client):
        content = 'Here is the result:\n```json\n{"name":"X"}\n```\nThanks!'
        record = LLMResumeParser(make_client(content), settings).parse("anything")

        assert record.name == "X"
        assert record.email == PLACEHOLDERS["email"]
        assert record.phone == PLACEHOLDERS["phone"]
        assert record.skills == PLACEHOLDERS["skills"]
        assert record.experience == PLACEHOLDERS["experience"]
        assert record.education == PLACEHOLDERS["education"]
        assert record.projects == PLACEHOLDERS["projects"]
        assert record.certifications == ()

    def test_llm_result_is_not_merged_with_rules(self, settings, make_client, sample_resume):
        record = LLMResumeParser(make_client('{"name": "X"}'), settings).parse(sample_resume)

        # the rule parser would have found an email in the sample
        assert record.email == PLACEHOLDERS["email"]

    def test_candidate_name_stays_out_of_info_logs(self, settings, make_client, sample_resume, caplog):
        with caplog.at_level(logging.DEBUG, logger="talentparse"):
            LLMResumeParser(make_client(json.dumps(FULL_PAYLOAD)), settings).parse(sample_resume)

        assert caplog.records
        assert all("Jane Doe" not in r.getMessage() for r in caplog.records if r.levelno >= logging.INFO)


class TestFallback:

    @pytest.mark.parametrize("content", [
        None,
        "",
        "I could not parse this resume, sorry.",
        '{"name": "X", "skills": [}',
        '["not", "an", "object"]',
    ])
    def test_unusable_content(self, settings, make_client, sample_resume, content):
        record = LLMResumeParser(make_client(content), settings).parse(sample_resume)
        assert record == parse_resume_rule(sample_resume)

    def test_client_exception(self, settings, make_client, sample_resume):
        client = make_client(error=RuntimeError("connection reset"))
        record = LLMResumeParser(client, settings).parse(sample_resume)

        assert record == parse_resume_rule(sample_resume)
        client.chat.assert_called_once()

    def test_empty_text_never_fails(self, settings, make_client):
        record = LLMResumeParser(make_client(error=TimeoutError()), settings).parse("")
        assert record == parse_resume_rule("")


class TestTransportFailures:
    """Real OpenAIClient, mocked SDK: status and timeout errors trigger the fallback."""

    @pytest.fixture
    def openai_client(self):
        client = OpenAIClient(api_key="test-key", base_url="https://api.deepseek.com/v1", timeout=5)
        client.client = MagicMock()
        return client

    def test_non_success_status(self, settings, openai_client, sample_resume):
        openai_client.client.chat.completions.create.side_effect = openai.APIStatusError(
            "Service Unavailable",
            response=httpx.Response(503, request=_REQUEST),
            body=None,
        )
        record = LLMResumeParser(openai_client, settings).parse(sample_resume)

        assert record == parse_resume_rule(sample_resume)
        openai_client.client.chat.completions.create.assert_called_once()

    def test_unauthorized(self, settings, openai_client, sample_resume):
        openai_client.client.chat.completions.create.side_effect = openai.AuthenticationError(
            "Invalid API key",
            response=httpx.Response(401, request=_REQUEST),
            body=None,
        )
        assert LLMResumeParser(openai_client, settings).parse(sample_resume) == parse_resume_rule(sample_resume)

    def test_timeout(self, settings, openai_client, sample_resume):
        openai_client.client.chat.completions.create.side_effect = openai.APITimeoutError(request=_REQUEST)
        assert LLMResumeParser(openai_client, settings).parse(sample_resume) == parse_resume_rule(sample_resume)

    def test_empty_choices(self, settings, openai_client, sample_resume):
        openai_client.client.chat.completions.create.return_value = MagicMock(choices=[])
        assert LLMResumeParser(openai_client, settings).parse(sample_resume) == parse_resume_rule(sample_resume)


class TestParseResumeLlm:

    def test_uses_given_client(self, settings, make_client):
        record = parse_resume_llm("text", settings=settings, client=make_client('{"name": "Y"}'))
        assert record.name == "Y"

    def test_builds_client_from_settings(self, settings, make_client):
        with patch("talentparse.parser_llm.get_llm_client", return_value=make_client('{"name": "Z"}')) as factory:
            record = parse_resume_llm("text", settings=settings)

        factory.assert_called_once_with(settings)
        assert record.name == "Z"
