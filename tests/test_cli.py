# ABOUTME: Tests for the Typer CLI.
# ABOUTME: Covers payload preview, searches against a mock transport, parameter lookups and lists.

import json
import os
import tempfile
from pathlib import Path
from unittest import mock

import httpx
import pytest
from typer.testing import CliRunner

from linkedin_search.cli import app
from linkedin_search.config import get_settings
from linkedin_search.database import DatabaseService
from linkedin_search.linkedin.client import SearchApiClient


@pytest.fixture
def runner() -> CliRunner:
    """Create a CliRunner instance for testing Typer commands."""
    return CliRunner()


@pytest.fixture
def temp_settings_env():
    """Create a temporary environment with fresh settings and an API key."""
    with tempfile.TemporaryDirectory() as tmpdir:
        env_vars = {
            "LINKEDIN_SEARCH_DB_PATH": str(Path(tmpdir) / "data.db"),
            "LINKEDIN_SEARCH_API_KEY": "test-api-key-123",
            "LINKEDIN_SEARCH_BASE_URL": "https://api.example.test",
        }
        with mock.patch.dict(os.environ, env_vars, clear=False):
            get_settings.cache_clear()
            yield tmpdir
        get_settings.cache_clear()


@pytest.fixture
def mock_api(recording_transport):
    """Route every client the CLI creates through a recording transport."""

    def install(**kwargs):
        transport = recording_transport(**kwargs)

        def factory(settings, api_key=None):
            return SearchApiClient(
                settings, api_key=api_key, transport=httpx.MockTransport(transport)
            )

        patcher = mock.patch("linkedin_search.cli.SearchApiClient", side_effect=factory)
        patcher.start()
        return transport

    yield install
    mock.patch.stopall()


class TestCLIBasics:
    """Tests for basic CLI structure and functionality."""

    def test_app_has_help(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test that the app has help text."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Usage" in result.output

    @pytest.mark.parametrize("command", ["configure", "payload", "search", "parameters", "lists"])
    def test_commands_exist(self, runner: CliRunner, temp_settings_env: str, command: str) -> None:
        """Test that every command has help."""
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0

    def test_no_command_shows_hint(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test that running without a command points at --help."""
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "--help" in result.output


class TestPayloadCommand:
    """Tests for the payload preview command."""

    def test_keywords_and_location(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test that options are turned into a classic people payload."""
        result = runner.invoke(app, ["payload", "-k", "engineer", "-l", "Paris"])

        assert result.exit_code == 0
        assert '"api": "classic"' in result.output
        assert '"keywords": "engineer"' in result.output
        assert '"Paris"' in result.output

    def test_filters_file(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test that a JSON filter file is transformed for the chosen dialect."""
        filters_file = Path(temp_settings_env) / "filters.json"
        filters_file.write_text(json.dumps({"tenure": [{"min": 5, "max": 1}], "bogus": 1}))

        result = runner.invoke(
            app,
            ["payload", "-p", "sales_navigator", "-c", "people", "-f", str(filters_file)],
        )

        assert result.exit_code == 0
        assert '"sales_navigator"' in result.output
        assert '"tenure"' in result.output
        assert '"max"' not in result.output
        assert "bogus" not in result.output

    def test_sales_navigator_company_headcount(
        self, runner: CliRunner, temp_settings_env: str
    ) -> None:
        """Test that the account payload carries the headcount placeholder."""
        result = runner.invoke(app, ["payload", "-p", "sales_navigator", "-c", "companies"])

        assert result.exit_code == 0
        assert '"headcount": []' in result.output

    def test_url_overrides_filters(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test that --url produces a URL payload without filters."""
        result = runner.invoke(
            app, ["payload", "-k", "engineer", "--url", "https://www.linkedin.com/search/x"]
        )

        assert result.exit_code == 0
        assert '"url": "https://www.linkedin.com/search/x"' in result.output
        assert "engineer" not in result.output

    def test_invalid_filters_file(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test that a file that is not a JSON object is rejected."""
        filters_file = Path(temp_settings_env) / "filters.json"
        filters_file.write_text("[1, 2]")

        result = runner.invoke(app, ["payload", "-f", str(filters_file)])

        assert result.exit_code != 0


class TestSearchCommand:
    """Tests for the search command."""

    def test_search_displays_results(
        self, runner: CliRunner, temp_settings_env: str, mock_api, sample_search_response
    ) -> None:
        """Test that results and the next-page cursor are shown."""
        transport = mock_api(body=sample_search_response)

        result = runner.invoke(app, ["search", "-a", "acc-1", "-k", "engineer", "--limit", "5"])

        assert result.exit_code == 0
        assert "Jane Doe" in result.output
        assert "next-cursor-abc" in result.output
        assert transport.last_json["keywords"] == "engineer"
        assert transport.last_request.url.params["limit"] == "5"
        assert transport.last_request.headers["X-API-KEY"] == "test-api-key-123"

    def test_search_passes_cursor(
        self, runner: CliRunner, temp_settings_env: str, mock_api
    ) -> None:
        """Test that --cursor is forwarded and the default limit used."""
        transport = mock_api(body={"items": []})

        result = runner.invoke(app, ["search", "-a", "acc-1", "--cursor", "page-2"])

        assert result.exit_code == 0
        assert "No results found" in result.output
        assert transport.last_request.url.params["cursor"] == "page-2"
        assert transport.last_request.url.params["limit"] == "10"

    def test_search_forbidden(self, runner: CliRunner, temp_settings_env: str, mock_api) -> None:
        """Test that a 403 shows the forbidden panel and exits with 1."""
        mock_api(status_code=403, raw=b"Sales Navigator subscription required")

        result = runner.invoke(app, ["search", "-a", "acc-1", "-p", "sales_navigator"])

        assert result.exit_code == 1
        assert "Forbidden" in result.output
        assert "subscription required" in result.output

    def test_search_malformed_response(
        self, runner: CliRunner, temp_settings_env: str, mock_api
    ) -> None:
        """Test that a response with the wrong shape shows an error panel."""
        mock_api(body={"items": [{"name": "No Id"}]})

        result = runner.invoke(app, ["search", "-a", "acc-1", "-k", "cto"])

        assert result.exit_code == 1
        assert "Unexpected response shape" in result.output

    def test_search_saves_to_list(
        self, runner: CliRunner, temp_settings_env: str, mock_api, sample_search_response
    ) -> None:
        """Test that --save-to-list stores the page in the list."""
        mock_api(body=sample_search_response)
        db_service = DatabaseService(db_path=get_settings().db_path)
        db_service.init_db()
        crm_list = db_service.create_list("Prospects", "acc-1")

        result = runner.invoke(
            app, ["search", "-a", "acc-1", "-k", "cto", "--save-to-list", str(crm_list.id)]
        )

        assert result.exit_code == 0
        assert "Saved 1 new result(s)" in result.output
        saved = db_service.get_profiles_in_list(crm_list.id)
        assert [profile.linkedin_id for profile in saved] == ["ACoAAA123"]

    def test_search_without_api_key(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test that a missing key exits with setup help."""
        with (
            mock.patch.dict(os.environ, {"LINKEDIN_SEARCH_API_KEY": ""}),
            mock.patch("linkedin_search.auth.key_store.keyring") as mock_keyring,
        ):
            mock_keyring.get_password.return_value = None
            get_settings.cache_clear()
            result = runner.invoke(app, ["search", "-a", "acc-1"])

        assert result.exit_code == 1
        assert "No API key configured" in result.output


class TestParametersCommand:
    """Tests for the parameters lookup command."""

    def test_lists_options(self, runner: CliRunner, temp_settings_env: str, mock_api) -> None:
        """Test that option ids and titles are printed."""
        transport = mock_api(body={"items": [{"id": "105015875", "title": "France"}]})

        result = runner.invoke(app, ["parameters", "location", "-a", "acc-1", "-q", "fra"])

        assert result.exit_code == 0
        assert "105015875" in result.output
        assert "France" in result.output
        assert transport.last_request.url.params["type"] == "LOCATION"

    def test_no_options(self, runner: CliRunner, temp_settings_env: str, mock_api) -> None:
        """Test the message for an empty lookup."""
        mock_api(body={"items": []})

        result = runner.invoke(app, ["parameters", "industry", "-a", "acc-1"])

        assert result.exit_code == 0
        assert "No options found" in result.output


class TestListsCommand:
    """Tests for the lists command."""

    def test_empty(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test the hint shown when an account has no lists."""
        result = runner.invoke(app, ["lists", "-a", "acc-1"])

        assert result.exit_code == 0
        assert "No lists yet" in result.output

    def test_create_and_show(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test that --create adds a list and shows it."""
        result = runner.invoke(app, ["lists", "-a", "acc-1", "--create", "Prospects"])

        assert result.exit_code == 0
        assert "Created list 'Prospects'" in result.output
        assert "Prospects" in result.output


class TestConfigureCommand:
    """Tests for the configure command."""

    def test_stores_valid_key(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test that a valid key is stored in the keyring."""
        with (
            mock.patch("linkedin_search.cli.Prompt.ask", return_value="abcdefghij12345"),
            mock.patch("linkedin_search.auth.key_store.keyring") as mock_keyring,
        ):
            result = runner.invoke(app, ["configure"])

        assert result.exit_code == 0
        mock_keyring.set_password.assert_called_once_with(
            "linkedin-search", "api-key", "abcdefghij12345"
        )

    def test_rejects_short_key(self, runner: CliRunner, temp_settings_env: str) -> None:
        """Test that an invalid key is not stored."""
        with (
            mock.patch("linkedin_search.cli.Prompt.ask", return_value="short"),
            mock.patch("linkedin_search.auth.key_store.keyring") as mock_keyring,
        ):
            result = runner.invoke(app, ["configure"])

        assert result.exit_code == 1
        mock_keyring.set_password.assert_not_called()
