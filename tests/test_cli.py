import base64
import functools
import json

import httpx
import pytest
from click.testing import CliRunner

from twiclient import TwilioClient
from twiclient.cli import main as cli_main

from conftest import AUTH_ERROR_XML, MESSAGE_XML, MESSAGES_XML, XML_HEADERS

ACCOUNT_XML = b"""<TwilioResponse><Account><Sid>AC123</Sid><FriendlyName>Demo</FriendlyName></Account></TwilioResponse>"""


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """A CliRunner whose clients talk to a swappable MockTransport handler."""
    monkeypatch.setattr(cli_main, "CONFIG_FILE", tmp_path / "config.json")
    for env in cli_main.ENV_KEYS.values():
        monkeypatch.delenv(env, raising=False)

    state = {"handler": None, "requests": []}

    def handler(request):
        state["requests"].append(request)
        return state["handler"](request)

    mock_client = functools.partial(TwilioClient, transport=httpx.MockTransport(handler))
    monkeypatch.setattr(cli_main, "TwilioClient", mock_client)
    runner = CliRunner()
    runner.state = state
    return runner


@pytest.fixture
def logged_in(monkeypatch):
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC123")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "token")


def _reply(status, content):
    return lambda request: httpx.Response(status, content=content, headers=XML_HEADERS)


def test_auth_status_without_credentials(cli):
    result = cli.invoke(cli_main.main, ["auth", "status"])
    assert result.exit_code == 0
    assert "No credentials" in result.output


def test_auth_login_saves_config(cli):
    cli.state["handler"] = _reply(200, ACCOUNT_XML)
    result = cli.invoke(cli_main.main, ["auth", "login"], input="AC123\ntoken\n")
    assert result.exit_code == 0, result.output
    assert "Logged in to Demo" in result.output
    assert json.loads(cli_main.CONFIG_FILE.read_text()) == {"account_sid": "AC123", "auth_token": "token"}
    assert cli.state["requests"][0].url.path == "/2010-04-01/Accounts/AC123"


def test_auth_login_rejected(cli):
    cli.state["handler"] = _reply(401, AUTH_ERROR_XML)
    result = cli.invoke(cli_main.main, ["auth", "login"], input="AC123\nwrong\n")
    assert result.exit_code == 1
    assert "Twilio error 20003" in result.output
    assert not cli_main.CONFIG_FILE.exists()


def test_command_without_credentials_exits(cli):
    result = cli.invoke(cli_main.main, ["queues", "list"])
    assert result.exit_code == 1
    assert cli.state["requests"] == []


def test_messages_send(cli, logged_in):
    cli.state["handler"] = _reply(201, MESSAGE_XML)
    result = cli.invoke(
        cli_main.main,
        ["messages", "send", "--to", "+15551234567", "--from", "+15557654321",
         "--media-url", "http://a/1.png", "--media-url", "http://a/2.png", "Hello"],
    )
    assert result.exit_code == 0, result.output
    assert "Message queued: SM123" in result.output
    request = cli.state["requests"][0]
    assert request.method == "POST"
    assert request.content == (
        b"To=%2B15551234567&From=%2B15557654321&Body=Hello"
        b"&MediaUrl=http%3A%2F%2Fa%2F1.png&MediaUrl=http%3A%2F%2Fa%2F2.png"
    )


def test_messages_send_requires_sender(cli, logged_in):
    result = cli.invoke(cli_main.main, ["messages", "send", "--to", "+1", "hi"])
    assert result.exit_code == 2
    assert cli.state["requests"] == []


def test_messages_list_json(cli, logged_in):
    cli.state["handler"] = _reply(200, MESSAGES_XML)
    result = cli.invoke(cli_main.main, ["messages", "list", "--to", "+15551234567", "--json"])
    assert result.exit_code == 0, result.output
    assert [m["Sid"] for m in json.loads(result.output)] == ["SM1", "SM2"]
    assert cli.state["requests"][0].url.params["To"] == "+15551234567"


def test_provider_error_exits_nonzero(cli, logged_in):
    cli.state["handler"] = _reply(401, AUTH_ERROR_XML)
    result = cli.invoke(cli_main.main, ["calls", "list"])
    assert result.exit_code == 1
    assert "Twilio error 20003" in result.output


def test_queues_front(cli, logged_in):
    body = b"<TwilioResponse><QueueMember><CallSid>CA1</CallSid><Position>1</Position></QueueMember></TwilioResponse>"
    cli.state["handler"] = _reply(200, body)
    result = cli.invoke(cli_main.main, ["queues", "front", "QU1", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {"CallSid": "CA1", "Position": "1"}
    assert cli.state["requests"][0].url.path.endswith("/Queues/QU1/Members/Front")


def test_recording_download(cli, logged_in, tmp_path):
    cli.state["handler"] = lambda request: httpx.Response(200, content=b"RIFFwav", headers={"Content-Type": "audio/x-wav"})
    target = tmp_path / "call.wav"
    result = cli.invoke(cli_main.main, ["recordings", "get", "RE1", "--download", str(target)])
    assert result.exit_code == 0, result.output
    assert target.read_bytes() == b"RIFFwav"
    assert cli.state["requests"][0].url.path.endswith("/Recordings/RE1")


def test_calls_hangup(cli, logged_in):
    cli.state["handler"] = _reply(200, b"<TwilioResponse><Call><Sid>CA1</Sid></Call></TwilioResponse>")
    result = cli.invoke(cli_main.main, ["calls", "hangup", "CA1"])
    assert result.exit_code == 0, result.output
    request = cli.state["requests"][0]
    assert request.method == "POST"
    assert request.content == b"Status=completed"


def _basic(user, password):
    return "Basic " + base64.b64encode(f"{user}:{password}".encode()).decode()


def test_auth_login_with_api_key(cli):
    cli.state["handler"] = _reply(200, ACCOUNT_XML)
    result = cli.invoke(cli_main.main, ["auth", "login", "--api-key", "SK456"], input="AC123\nkey-secret\n")
    assert result.exit_code == 0, result.output
    request = cli.state["requests"][0]
    assert request.headers["authorization"] == _basic("SK456", "key-secret")
    assert request.url.path == "/2010-04-01/Accounts/AC123"
    assert json.loads(cli_main.CONFIG_FILE.read_text()) == {
        "account_sid": "AC123", "api_key": "SK456", "api_secret": "key-secret",
    }


def test_saved_api_key_is_used(cli):
    cli_main._save_config({"account_sid": "AC123", "api_key": "SK456", "api_secret": "key-secret"})
    cli.state["handler"] = _reply(200, b"<TwilioResponse><Queues/></TwilioResponse>")
    result = cli.invoke(cli_main.main, ["queues", "list", "--json"])
    assert result.exit_code == 0, result.output
    assert cli.state["requests"][0].headers["authorization"] == _basic("SK456", "key-secret")


def test_base_url_from_config(cli):
    cli_main._save_config({"account_sid": "AC123", "auth_token": "token", "base_url": "http://localhost:9999"})
    cli.state["handler"] = _reply(200, b"<TwilioResponse><Queues/></TwilioResponse>")
    result = cli.invoke(cli_main.main, ["queues", "list", "--json"])
    assert result.exit_code == 0, result.output
    url = cli.state["requests"][0].url
    assert (url.host, url.port) == ("localhost", 9999)
    assert url.path == "/2010-04-01/Accounts/AC123/Queues"


def test_environment_overrides_config_file(cli, monkeypatch):
    cli_main._save_config({"account_sid": "ACFILE", "auth_token": "file-token"})
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "ACENV")
    cli.state["handler"] = _reply(200, b"<TwilioResponse><Queues/></TwilioResponse>")
    result = cli.invoke(cli_main.main, ["queues", "list", "--json"])
    assert result.exit_code == 0, result.output
    request = cli.state["requests"][0]
    assert request.url.path == "/2010-04-01/Accounts/ACENV/Queues"
    assert request.headers["authorization"] == _basic("ACENV", "file-token")


def test_api_secret_without_key_is_not_credentials(cli, monkeypatch):
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC123")
    monkeypatch.setenv("TWILIO_API_SECRET", "secret")
    result = cli.invoke(cli_main.main, ["queues", "list"])
    assert result.exit_code == 1
    assert not isinstance(result.exception, KeyError)
    assert "No credentials" in result.output
    assert cli.state["requests"] == []


def test_auth_status_reports_auth_token_when_key_has_no_secret(cli):
    cli_main._save_config({"account_sid": "AC123", "auth_token": "token", "api_key": "SK456"})
    result = cli.invoke(cli_main.main, ["auth", "status"])
    assert result.exit_code == 0
    assert "using auth token" in result.output


def test_auth_status_reports_api_key(cli):
    cli_main._save_config({"account_sid": "AC123", "api_key": "SK456", "api_secret": "key-secret"})
    result = cli.invoke(cli_main.main, ["auth", "status"])
    assert "using API key SK456" in result.output
