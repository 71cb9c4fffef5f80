"""Shared test fixtures and configuration."""

import pytest

from commitgen.config import LLMProvider, ProviderConfig
from commitgen.llm.base import BaseLLMProvider, LLMResult, PromptRequest


class FakeProvider(BaseLLMProvider):
    """Provider that records requests instead of calling an API."""

    name = "Fake"

    def __init__(self, config: ProviderConfig, reply: str = "feat: add greeting helpers"):
        super().__init__(config)
        self.reply = reply
        self.requests: list[PromptRequest] = []

    def generate(self, request: PromptRequest) -> LLMResult:
        self.requests.append(request)
        return LLMResult(text=self.reply, model=self.model, input_tokens=120, output_tokens=12)


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Point ~/.commitgen at a throwaway directory for every test."""
    config_dir = tmp_path / ".commitgen"
    monkeypatch.setattr("commitgen.global_config._CONFIG_DIR", config_dir)
    return config_dir


@pytest.fixture
def provider_config():
    """A valid Gemini configuration with a dummy key."""
    return ProviderConfig(
        provider=LLMProvider.GEMINI,
        api_key="test-key",
        model="gemini-flash-latest",
    )


@pytest.fixture
def fake_provider(provider_config):
    """A provider that records the requests it receives."""
    return FakeProvider(provider_config)


@pytest.fixture
def sample_diff():
    """Sample working tree diff."""
    return """diff --git a/new_file.py b/new_file.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/new_file.py
@@ -0,0 +1,5 @@
+def hello():
+    print("Hello, world!")
+
+def goodbye():
+    print("Goodbye!")
"""


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
