"""Tests for commitgen.cli module."""

from unittest.mock import MagicMock

import pytest
import yaml
from typer.testing import CliRunner

from commitgen import global_config
from commitgen.cli import app
from commitgen.config import LLMProvider
from commitgen.generate import GenerationResult
from commitgen.git import GitError
from commitgen.llm.base import PromptRequest
from commitgen.llm.exceptions import MissingAPIKeyError, ProviderHTTPError
from commitgen.prompts import TemplateNotFoundError


runner = CliRunner()


def _result(text: str = "feat: add greeting helpers", version=None) -> GenerationResult:
    return GenerationResult(
        text=text,
        request=PromptRequest(system_prompt="SYSTEM TEXT", user_content="USER TEXT"),
        model="gemini-flash-latest",
        input_tokens=1200,
        output_tokens=34,
        version=version,
    )


class TestMainApp:
    """Tests for the top-level application."""

    def test_shows_help(self):
        """Test that help lists every command."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("commit", "changelog", "pr", "config"):
            assert command in result.output


class TestCommitCommand:
    """Tests for commitgen commit command."""

    def test_prints_generated_message(self, mocker):
        """Test the happy path."""
        mocker.patch("commitgen.cli.commit.load_provider_or_exit", return_value=MagicMock())
        mock_generate = mocker.patch(
            "commitgen.cli.commit.generate_commit_message", return_value=_result()
        )

        result = runner.invoke(app, ["commit", "--context", "greeting work"])

        assert result.exit_code == 0
        assert "feat: add greeting helpers" in result.output
        assert mock_generate.call_args.kwargs["context"] == "greeting work"

    def test_no_changes(self, mocker):
        """Test the notice when there is nothing to commit."""
        mocker.patch("commitgen.cli.commit.load_provider_or_exit", return_value=MagicMock())
        mocker.patch("commitgen.cli.commit.generate_commit_message", return_value=None)
        mock_commit = mocker.patch("commitgen.cli.commit.commit_all")

        result = runner.invoke(app, ["commit", "--auto-commit"])

        assert result.exit_code == 0
        assert "No changes detected." in result.output
        mock_commit.assert_not_called()

    def test_missing_api_key_exits_before_git(self, mocker):
        """Test that configuration problems stop the command."""
        mocker.patch(
            "commitgen.cli.utils.load_provider_config",
            side_effect=MissingAPIKeyError("GOOGLE_API_KEY is not set"),
        )
        mock_generate = mocker.patch("commitgen.cli.commit.generate_commit_message")

        result = runner.invoke(app, ["commit"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output
        assert "GOOGLE_API_KEY" in result.output
        mock_generate.assert_not_called()

    @pytest.mark.parametrize("settings", [{"max_tokens": "lots"}, {"provider": 3}])
    def test_invalid_config_yaml_exits_cleanly(self, mocker, monkeypatch, isolated_config_dir, settings):
        """Test that bad config.yaml values are reported, not raised."""
        monkeypatch.delenv("COMMITGEN_PROVIDER", raising=False)
        monkeypatch.delenv("COMMITGEN_MODEL", raising=False)
        monkeypatch.setenv("GOOGLE_API_KEY", "g-key")
        isolated_config_dir.mkdir(parents=True)
        (isolated_config_dir / "config.yaml").write_text(yaml.dump(settings))
        mock_generate = mocker.patch("commitgen.cli.commit.generate_commit_message")

        result = runner.invoke(app, ["commit"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Configuration error" in result.output
        mock_generate.assert_not_called()

    def test_provider_error_exits(self, mocker):
        """Test that provider failures are reported."""
        mocker.patch("commitgen.cli.commit.load_provider_or_exit", return_value=MagicMock())
        mocker.patch(
            "commitgen.cli.commit.generate_commit_message",
            side_effect=ProviderHTTPError("Gemini", 503, "overloaded"),
        )

        result = runner.invoke(app, ["commit"])

        assert result.exit_code == 1
        assert "Gemini HTTP 503" in result.output

    def test_git_error_exits(self, mocker):
        """Test that git failures are reported."""
        mocker.patch("commitgen.cli.commit.load_provider_or_exit", return_value=MagicMock())
        mocker.patch(
            "commitgen.cli.commit.generate_commit_message",
            side_effect=GitError("Not in a git repository."),
        )

        result = runner.invoke(app, ["commit"])

        assert result.exit_code == 1
        assert "Git error: Not in a git repository." in result.output

    def test_auto_commit(self, mocker):
        """Test committing with the generated message."""
        mocker.patch("commitgen.cli.commit.load_provider_or_exit", return_value=MagicMock())
        mocker.patch("commitgen.cli.commit.generate_commit_message", return_value=_result())
        mock_commit = mocker.patch("commitgen.cli.commit.commit_all", return_value="[main abc1234] feat")

        result = runner.invoke(app, ["commit", "-a"])

        assert result.exit_code == 0
        mock_commit.assert_called_once_with("feat: add greeting helpers")
        assert "Commit successful!" in result.output

    def test_auto_commit_failure(self, mocker):
        """Test that a failing git commit exits with an error."""
        mocker.patch("commitgen.cli.commit.load_provider_or_exit", return_value=MagicMock())
        mocker.patch("commitgen.cli.commit.generate_commit_message", return_value=_result())
        mocker.patch("commitgen.cli.commit.commit_all", side_effect=GitError("hook rejected"))

        result = runner.invoke(app, ["commit", "--auto-commit"])

        assert result.exit_code == 1
        assert "Commit failed: hook rejected" in result.output

    def test_debug_shows_prompt_and_usage(self, mocker):
        """Test the debug output."""
        mocker.patch("commitgen.cli.commit.load_provider_or_exit", return_value=MagicMock())
        mocker.patch("commitgen.cli.commit.generate_commit_message", return_value=_result())

        result = runner.invoke(app, ["commit", "--debug"])

        assert result.exit_code == 0
        assert "COMMITGEN DEBUG INFO" in result.output
        assert "1,200 input / 34 output" in result.output
        assert "SYSTEM TEXT" in result.output
        assert "USER TEXT" in result.output


class TestChangelogCommand:
    """Tests for commitgen changelog command."""

    def test_passes_options(self, mocker):
        """Test that CLI flags reach the changelog options."""
        mocker.patch("commitgen.cli.changelog.load_provider_or_exit", return_value=MagicMock())
        mock_generate = mocker.patch(
            "commitgen.cli.changelog.generate_changelog",
            return_value=_result("## 1.1.0", version="1.1.0"),
        )

        result = runner.invoke(app, [
            "changelog",
            "--since", "v1.0.0",
            "--version", "1.0.0",
            "--version-bump", "MINOR",
            "--audience", "end-user",
            "--show-contributors",
            "--link-commits",
        ])

        assert result.exit_code == 0
        assert "## 1.1.0" in result.output
        options = mock_generate.call_args.args[1]
        assert options.since == "v1.0.0"
        assert options.version == "1.0.0"
        assert options.version_bump.value == "minor"
        assert options.audience.value == "end-user"
        assert options.show_contributors is True
        assert options.link_commits is True

    def test_bump_without_version_is_usage_error(self, mocker):
        """Test that an explicit bump needs --version."""
        mock_load = mocker.patch("commitgen.cli.changelog.load_provider_or_exit")

        result = runner.invoke(app, ["changelog", "--version-bump", "minor"])

        assert result.exit_code == 2
        assert "--version" in result.output
        mock_load.assert_not_called()

    def test_auto_bump_without_version_is_allowed(self, mocker):
        """Test that auto mode may start from the latest tag."""
        mocker.patch("commitgen.cli.changelog.load_provider_or_exit", return_value=MagicMock())
        mocker.patch("commitgen.cli.changelog.generate_changelog", return_value=_result("## 0.1.0"))

        result = runner.invoke(app, ["changelog", "--version-bump", "auto"])

        assert result.exit_code == 0

    def test_invalid_audience(self):
        """Test that an unknown audience is rejected by the parser."""
        result = runner.invoke(app, ["changelog", "--audience", "managers"])

        assert result.exit_code == 2

    def test_no_commits(self, mocker):
        """Test the notice for an empty range."""
        mocker.patch("commitgen.cli.changelog.load_provider_or_exit", return_value=MagicMock())
        mocker.patch("commitgen.cli.changelog.generate_changelog", return_value=None)

        result = runner.invoke(app, ["changelog", "--since", "v2.0.0"])

        assert result.exit_code == 0
        assert "No changes detected." in result.output

    def test_template_error_exits(self, mocker):
        """Test that template problems are reported."""
        mocker.patch("commitgen.cli.changelog.load_provider_or_exit", return_value=MagicMock())
        mocker.patch(
            "commitgen.cli.changelog.generate_changelog",
            side_effect=TemplateNotFoundError("No prompt template named 'changelog'"),
        )

        result = runner.invoke(app, ["changelog"])

        assert result.exit_code == 1
        assert "Template error" in result.output


class TestPRCommand:
    """Tests for commitgen pr command."""

    def test_defaults(self, mocker):
        """Test default base and head refs."""
        mocker.patch("commitgen.cli.pr.load_provider_or_exit", return_value=MagicMock())
        mock_generate = mocker.patch(
            "commitgen.cli.pr.generate_pr_description", return_value=_result("## Summary")
        )

        result = runner.invoke(app, ["pr"])

        assert result.exit_code == 0
        assert "## Summary" in result.output
        kwargs = mock_generate.call_args.kwargs
        assert kwargs["base"] == "main"
        assert kwargs["head"] == "HEAD"
        assert kwargs["include_commits"] is False

    def test_options(self, mocker):
        """Test that flags are passed through."""
        mocker.patch("commitgen.cli.pr.load_provider_or_exit", return_value=MagicMock())
        mock_generate = mocker.patch(
            "commitgen.cli.pr.generate_pr_description", return_value=_result("## Summary")
        )

        result = runner.invoke(app, [
            "pr", "-b", "develop", "--head", "feature/x", "--include-commits", "-c", "Closes #42",
        ])

        assert result.exit_code == 0
        kwargs = mock_generate.call_args.kwargs
        assert kwargs["base"] == "develop"
        assert kwargs["head"] == "feature/x"
        assert kwargs["include_commits"] is True
        assert kwargs["context"] == "Closes #42"

    def test_unknown_ref(self, mocker):
        """Test that an unknown base ref is reported as a git error."""
        mocker.patch("commitgen.cli.pr.load_provider_or_exit", return_value=MagicMock())
        mocker.patch(
            "commitgen.cli.pr.generate_pr_description",
            side_effect=GitError("Git command failed: git diff nope...HEAD"),
        )

        result = runner.invoke(app, ["pr", "--base", "nope"])

        assert result.exit_code == 1
        assert "Git error" in result.output


class TestConfigCommands:
    """Tests for commitgen config subcommands."""

    def test_show_without_config(self):
        """Test show when nothing is configured."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "No configuration file found" in result.output
        assert "Provider: gemini" in result.output
        assert "not set in credentials file" in result.output

    def test_show_masks_key(self):
        """Test that the stored key is masked."""
        global_config.set_provider_and_model(LLMProvider.OPENAI, "gpt-4o")
        global_config.save_credential("OPENAI_API_KEY", "sk-abcdefghijklmnop1234")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "Provider: openai" in result.output
        assert "Model: gpt-4o" in result.output
        assert "sk-abcde...1234" in result.output
        assert "sk-abcdefghijklmnop1234" not in result.output

    def test_set_key(self):
        """Test storing an API key."""
        result = runner.invoke(app, ["config", "set-key", "anthropic"], input="sk-ant-secret\n")

        assert result.exit_code == 0
        assert "API key saved for anthropic" in result.output
        assert global_config.get_credential("ANTHROPIC_API_KEY") == "sk-ant-secret"

    def test_set_key_invalid_provider(self):
        """Test that unknown providers are rejected."""
        result = runner.invoke(app, ["config", "set-key", "mistral"])

        assert result.exit_code == 1

    def test_set_provider_default_model(self):
        """Test that the provider default model is used."""
        result = runner.invoke(app, ["config", "set-provider", "anthropic"])

        assert result.exit_code == 0
        config = global_config.load_global_config()
        assert config["provider"] == "anthropic"
        assert config["model"] == "claude-sonnet-4-20250514"

    def test_set_provider_with_model(self):
        """Test setting an explicit model."""
        result = runner.invoke(app, ["config", "set-provider", "gemini", "--model", "gemini-2.5-pro"])

        assert result.exit_code == 0
        assert global_config.load_global_config()["model"] == "gemini-2.5-pro"
