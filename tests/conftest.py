"""
Pytest fixtures shared by the talentparse test modules.
"""
from unittest.mock import MagicMock

import pytest

from talentparse.config import Settings
from talentparse.llm_client import LLMResponse

SAMPLE_RESUME = """
Jane Doe
jane.doe@example.com
+1 (555) 111-2222
linkedin.com/in/janedoe

EXPERIENCE
Senior Engineer | Acme Corp | 2022 - Present
Developer | Beta LLC | 2019 - 2021
Intern | Gamma

EDUCATION
Bachelor of Engineering in Computer Science
Stanford University

PROJECTS:
Inventory Tracker Project
Built with React and Docker
Deployed on AWS

AWS Certified Developer
"""


@pytest.fixture
def settings():
    return Settings(api_key="test-key", model="deepseek-chat")


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def make_client():
    """Build a stub LLMClient whose chat() answers with ``content``."""
    def _make(content=None, error=None):
        client = MagicMock()
        if error is not None:
            client.chat.side_effect = error
        else:
            client.chat.return_value = LLMResponse(content)
        return client
    return _make
