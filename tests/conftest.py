import pytest

from core.interfaces import ModelGateway


class FakeGateway(ModelGateway):
    """Replays scripted replies; exception instances are raised"""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def invoke(self, system_prompt, user_text, response_format=None):
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_text": user_text,
                "response_format": response_format,
            }
        )
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def fake_gateway():
    return FakeGateway


@pytest.fixture
def person_schema_table():
    return [
        ["name", "age"],
        ["Full name of the person", "Age in years"],
        ["string", "number"],
    ]


@pytest.fixture
def isolated_store(tmp_path, monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "PROPERTY_STORE_DIR", str(tmp_path / "store"))
    monkeypatch.setattr(settings, "OPENAI_API_KEY", None)
    return tmp_path / "store" / "properties.json"
