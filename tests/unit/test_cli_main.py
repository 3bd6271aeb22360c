"""
Unit tests for CLI main entry point.

Tests CLI infrastructure including the command group, global options and
the request command.
"""

from unittest.mock import patch

import click
import pytest
from click.testing import CliRunner

from headless_admin._version import __version__
from headless_admin.cli.main import cli, endpoint_for, parse_arg
from headless_admin.client import Client
from headless_admin.transport.mock import MockTransport

USERS_URL = "http://api.test/admin/api-admin-user"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def missing_config(temp_dir):
    """Path of a configuration file that does not exist."""
    return str(temp_dir / "missing.yaml")


class TestCLIMain:
    """Test CLI main entry point."""

    def test_cli_help(self, runner):
        """Test CLI help output."""
        result = runner.invoke(cli, ['--help'])

        assert result.exit_code == 0
        assert 'Headless Admin SDK' in result.output
        assert '--config' in result.output
        assert '--log-level' in result.output
        assert '--verbose' in result.output

    def test_cli_version(self, runner):
        """Test CLI version output."""
        result = runner.invoke(cli, ['--version'])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_config(self, runner, make_config_yaml):
        """Test that an invalid configuration aborts."""
        path = make_config_yaml("cache:\n  backend: memcached\n")
        result = runner.invoke(cli, ['--config', str(path), 'request', 'x'])

        assert result.exit_code == 1
        assert 'Invalid configuration' in result.output


class TestHelpers:
    """Test CLI helper functions."""

    def test_parse_arg(self):
        """Test key=value parsing."""
        assert parse_arg("id=5") == ("id", "5")
        assert parse_arg("q=a=b") == ("q", "a=b")

    @pytest.mark.parametrize("value", ["novalue", "=5"])
    def test_parse_arg_invalid(self, value):
        """Test malformed arguments."""
        with pytest.raises(click.BadParameter):
            parse_arg(value)

    def test_endpoint_for(self):
        """Test ad-hoc endpoint definitions."""
        assert endpoint_for("{{%api-page}}").get_endpoint_name() == "{{%api-page}}"


class TestRequestCommand:
    """Test the request command."""

    @pytest.fixture
    def transport(self):
        return MockTransport()

    @pytest.fixture(autouse=True)
    def patched_client(self, transport):
        """Route the command through the mock transport."""
        client = Client("http://api.test", transport=transport)
        # close() would clear the transport's recorded requests
        with patch.object(Client, "from_config", return_value=client), \
                patch.object(Client, "close"):
            yield client

    def test_get_prints_status_and_content(self, runner, missing_config, transport):
        """Test a successful GET request."""
        transport.add_response("GET", USERS_URL, MockTransport.json(
            [{"id": 1}],
            headers={
                "X-Pagination-Total-Count": "1",
                "X-Pagination-Page-Count": "1",
                "X-Pagination-Current-Page": "1",
            },
        ))
        result = runner.invoke(cli, [
            '--config', missing_config, 'request', '{{%api-admin-user}}',
            '--arg', 'is_deleted=0',
            '--sort', 'id,-firstname',
            '--expand', 'source',
            '--filter', '{"lang_id": {"in": [1, 2]}}',
            '--page', '1',
            '--per-page', '10',
        ])

        assert result.exit_code == 0, result.output
        assert 'Status: 200' in result.output
        assert 'Page 1/1 (1 total)' in result.output
        assert '"id": 1' in result.output
        assert transport.sent_requests[0].params == {
            "is_deleted": "0",
            "sort": "id,-firstname",
            "expand": "source",
            "filter": {"lang_id": {"in": [1, 2]}},
            "page": 1,
            "per-page": 10,
        }

    def test_post_with_tokens(self, runner, missing_config, transport):
        """Test a POST request with endpoint tokens."""
        transport.add_response("POST", f"{USERS_URL}/5/login", MockTransport.json({"ok": True}))
        result = runner.invoke(cli, [
            '--config', missing_config, 'request', '{{%api-admin-user}}/{id}/login',
            '--method', 'post',
            '--token', '{id}=5',
            '--arg', 'firstname=Jane',
        ])

        assert result.exit_code == 0, result.output
        assert '"ok": true' in result.output
        assert transport.sent_requests[0].data == {"firstname": "Jane"}

    def test_error_status_exits_nonzero(self, runner, missing_config):
        """Test that an HTTP error exits with status 1."""
        result = runner.invoke(cli, ['--config', missing_config, 'request', '{{%api-admin-user}}'])

        assert result.exit_code == 1
        assert 'Status: 404' in result.output

    def test_invalid_filter_json(self, runner, missing_config):
        """Test that malformed filter JSON is a usage error."""
        result = runner.invoke(cli, [
            '--config', missing_config, 'request', 'x', '--filter', '{broken',
        ])
        assert result.exit_code == 2

    def test_sdk_error_reported(self, runner, missing_config):
        """Test that SDK errors are reported without a traceback."""
        result = runner.invoke(cli, [
            '--config', missing_config, 'request', 'x', '--filter', '[]',
        ])
        assert result.exit_code == 1
        assert 'Error:' in result.output

    def test_client_closed_after_request(self, runner, missing_config, transport):
        """Test that the client is closed once the response is printed."""
        transport.add_response("GET", USERS_URL, MockTransport.json([]))
        result = runner.invoke(cli, ['--config', missing_config, 'request', '{{%api-admin-user}}'])

        assert result.exit_code == 0, result.output
        assert len(transport.sent_requests) == 1
        Client.close.assert_called_once()

    def test_empty_endpoint_reported(self, runner, missing_config, transport):
        """Test that an empty endpoint name is an SDK error, not a crash."""
        result = runner.invoke(cli, ['--config', missing_config, 'request', ''])

        assert result.exit_code == 1
        assert 'Error:' in result.output
        assert 'endpoint_name' in result.output
        assert transport.sent_requests == []
