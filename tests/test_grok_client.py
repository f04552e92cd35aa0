import pytest

from src.clients import grok_client
from src.clients.grok_client import GrokClient, RateLimitExceeded


class FakeResponse:
    def __init__(self, content):
        self.content = content
        self.usage = {"total_tokens": 42}


class FakeChat:
    def __init__(self, content):
        self.messages = []
        self.content = content

    def append(self, message):
        self.messages.append(message)

    def sample(self):
        return FakeResponse(self.content)


class FakeSDK:
    """Minimal stand-in for xai_sdk.Client."""
    instances = []

    def __init__(self, api_key):
        self.api_key = api_key
        self.create_kwargs = []
        self.chats = []
        self.content = "Fold more to his 3-bets."
        self.chat = self
        FakeSDK.instances.append(self)

    def create(self, **kwargs):
        self.create_kwargs.append(kwargs)
        chat = FakeChat(self.content)
        self.chats.append(chat)
        return chat


@pytest.fixture(autouse=True)
def fake_sdk(monkeypatch):
    monkeypatch.setattr(grok_client, "Client", FakeSDK)
    monkeypatch.setattr(grok_client, "system", lambda content: ("system", content))
    monkeypatch.setattr(grok_client, "user", lambda content: ("user", content))
    FakeSDK.instances.clear()


@pytest.fixture
def no_env_key(monkeypatch):
    monkeypatch.delenv("GROK_API_KEY", raising=False)
    monkeypatch.delenv("XAI_API_KEY", raising=False)


def test_missing_api_key_raises(no_env_key):
    with pytest.raises(ValueError, match="API key"):
        GrokClient()


def test_api_key_from_argument_or_env(no_env_key, monkeypatch):
    assert GrokClient(api_key="explicit").api_key == "explicit"

    monkeypatch.setenv("GROK_API_KEY", " from-env ")
    assert GrokClient().api_key == "from-env"


def test_chat_completion_sends_messages_and_parameters():
    client = GrokClient(api_key="k", model="grok-test", max_tokens=200, temperature=0.7, top_p=0.9)

    response = client.chat_completion(messages=[
        {"role": "system", "content": "You are a coach."},
        {"role": "user", "content": "Analyze AceMaster99."},
    ])

    sdk = FakeSDK.instances[0]
    assert sdk.create_kwargs == [{"model": "grok-test", "max_tokens": 200, "temperature": 0.7, "top_p": 0.9}]
    assert sdk.chats[0].messages == [("system", "You are a coach."), ("user", "Analyze AceMaster99.")]
    assert response["content"] == "Fold more to his 3-bets."
    assert response["model"] == "grok-test"
    assert response["usage"] == {"total_tokens": 42}


def test_overrides_win_over_defaults():
    client = GrokClient(api_key="k", temperature=0.7, top_p=0.9)

    client.chat_completion(messages=[{"role": "user", "content": "hi"}], temperature=0.0, top_p=0.5)

    kwargs = FakeSDK.instances[0].create_kwargs[0]
    assert kwargs["temperature"] == 0.0
    assert kwargs["top_p"] == 0.5


def test_none_content_becomes_empty_string():
    client = GrokClient(api_key="k")
    FakeSDK.instances[0].content = None

    assert client.chat_completion(messages=[{"role": "user", "content": "hi"}])["content"] == ""


def test_non_text_content_is_malformed():
    client = GrokClient(api_key="k")
    FakeSDK.instances[0].content = {"unexpected": True}

    with pytest.raises(ValueError, match="Malformed"):
        client.chat_completion(messages=[{"role": "user", "content": "hi"}])


def test_rate_limit():
    client = GrokClient(api_key="k", max_requests_per_hour=2)
    messages = [{"role": "user", "content": "hi"}]

    client.chat_completion(messages=messages)
    client.chat_completion(messages=messages)

    with pytest.raises(RateLimitExceeded):
        client.chat_completion(messages=messages)

    status = client.get_rate_limit_status()
    assert status["requests_made"] == 2
    assert status["requests_remaining"] == 0
    assert status["limit"] == 2


def test_from_config():
    from config.dashboard_config import DashboardConfig

    config = DashboardConfig(model="grok-x", temperature=0.3, top_p=0.8, max_tokens=123, max_requests_per_hour=5)
    client = GrokClient.from_config(config, api_key="k")

    assert (client.model, client.temperature, client.top_p, client.max_tokens, client.max_requests_per_hour) == (
        "grok-x", 0.3, 0.8, 123, 5
    )
