"""
Tests for run configuration.
"""

from unittest.mock import patch

import pytest

from github_issue_transfer.config import TransferConfig, validate_repo_path
from github_issue_transfer.exceptions import ConfigurationError
from github_issue_transfer.utils import InvalidPassPathError

ENV = {
    "GITHUB_FROM_REPO_URL": "old-org/project",
    "GITHUB_TO_REPO_URL": "new-org/project",
    "GITHUB_FROM_TOKEN": "from-token",
    "GITHUB_TO_TOKEN": "to-token",
}


@pytest.mark.unit
class TestTransferConfig:
    """Test building the configuration from arguments and environment."""

    def test_from_environment(self) -> None:
        config = TransferConfig.from_sources(environ=ENV)

        assert config.source_repo == "old-org/project"
        assert config.destination_repo == "new-org/project"
        assert config.source_token == "from-token"
        assert config.destination_token == "to-token"
        assert config.api_url == "https://api.github.com"
        assert config.timeout == 15
        assert not config.dry_run

    def test_arguments_override_environment(self) -> None:
        config = TransferConfig.from_sources(
            source_repo="a/b",
            destination_repo=" c/d ",
            api_url="https://ghe.example.com/api/v3",
            timeout=60,
            dry_run=True,
            environ=ENV,
        )

        assert config.source_repo == "a/b"
        assert config.destination_repo == "c/d"
        assert config.api_url == "https://ghe.example.com/api/v3"
        assert config.timeout == 60
        assert config.dry_run

    def test_api_url_from_environment(self) -> None:
        config = TransferConfig.from_sources(environ=ENV | {"GITHUB_API_URL": "https://ghe.example.com/api/v3"})

        assert config.api_url == "https://ghe.example.com/api/v3"

    @pytest.mark.parametrize("missing", ["GITHUB_FROM_REPO_URL", "GITHUB_TO_REPO_URL"])
    def test_missing_repository(self, missing: str) -> None:
        environ = {k: v for k, v in ENV.items() if k != missing}

        with pytest.raises(ConfigurationError, match="not specified"):
            _ = TransferConfig.from_sources(environ=environ)

    def test_same_repository_is_allowed_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        config = TransferConfig.from_sources(source_repo="a/b", destination_repo="a/b", environ=ENV)

        assert config.source_repo == "a/b"
        assert config.destination_repo == "a/b"
        assert "are the same (a/b)" in caplog.text

    def test_missing_token_is_anonymous(self, caplog: pytest.LogCaptureFixture) -> None:
        environ = {k: v for k, v in ENV.items() if k != "GITHUB_TO_TOKEN"}

        config = TransferConfig.from_sources(environ=environ)

        assert config.destination_token is None
        assert "GITHUB_TO_TOKEN" in caplog.text

    @patch("github_issue_transfer.utils.get_pass_value")
    def test_token_from_pass(self, mock_get_pass_value) -> None:
        mock_get_pass_value.return_value = "pass-token"

        config = TransferConfig.from_sources(source_pass_path="github/source", environ=ENV)

        assert config.source_token == "pass-token"
        assert config.destination_token == "to-token"
        mock_get_pass_value.assert_called_once_with("github/source")

    @patch("github_issue_transfer.utils.get_pass_value")
    def test_pass_failure_is_configuration_error(self, mock_get_pass_value) -> None:
        mock_get_pass_value.side_effect = InvalidPassPathError("Pass path 'x/y' not found or invalid.")

        with pytest.raises(ConfigurationError, match="Could not read GitHub token"):
            _ = TransferConfig.from_sources(source_pass_path="x/y", environ=ENV)

    def test_config_is_read_only(self) -> None:
        config = TransferConfig.from_sources(environ=ENV)

        with pytest.raises(AttributeError):
            config.dry_run = True  # type: ignore[misc]


@pytest.mark.unit
class TestValidateRepoPath:
    @pytest.mark.parametrize("path", ["owner/repo", "my-org/my.repo", "  owner/repo_2  "])
    def test_valid(self, path: str) -> None:
        assert validate_repo_path(path, "source") == path.strip()

    @pytest.mark.parametrize(
        "path", ["", "   ", "just-owner", "owner/repo/extra", "/repo", "owner/", "owner//repo", "https://github.com/o/r"]
    )
    def test_invalid(self, path: str) -> None:
        with pytest.raises(ConfigurationError, match="Expected format: 'owner/repository'"):
            _ = validate_repo_path(path, "source")
