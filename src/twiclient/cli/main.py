"""
twiclient CLI — `twi` command.

Commands:
  twi auth login|status|logout         Store or clear credentials
  twi messages send|list|get           SMS/MMS
  twi calls make|list|get|hangup       Voice calls
  twi recordings list|get|delete       Call recordings
  twi queues list|create|front|dequeue|delete
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.table import Table
except ImportError:
    raise SystemExit("CLI requires extras: pip install twiclient[cli]")

from twiclient.client import TwilioClient
from twiclient.errors import TwilioError, ProviderError
from twiclient.models.response import Resource

console = Console()
CONFIG_FILE = Path.home() / ".twiclient" / "config.json"

ENV_KEYS = {
    "account_sid": "TWILIO_ACCOUNT_SID",
    "auth_token": "TWILIO_AUTH_TOKEN",
    "api_key": "TWILIO_API_KEY",
    "api_secret": "TWILIO_API_SECRET",
}


def _load_config() -> dict:
    try:
        cfg = json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        cfg = {}
    for key, env in ENV_KEYS.items():
        if os.environ.get(env):
            cfg[key] = os.environ[env]
    return cfg


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))
    CONFIG_FILE.chmod(0o600)


def _uses_api_key(cfg: dict) -> bool:
    return bool(cfg.get("api_key") and cfg.get("api_secret"))


def _has_credentials(cfg: dict) -> bool:
    return bool(cfg.get("account_sid")) and (_uses_api_key(cfg) or bool(cfg.get("auth_token")))


def _client_from_config(cfg: dict) -> TwilioClient:
    kwargs = {"base_url": cfg["base_url"]} if cfg.get("base_url") else {}
    if _uses_api_key(cfg):
        return TwilioClient(cfg["account_sid"], cfg["api_key"], cfg["api_secret"], **kwargs)
    return TwilioClient(cfg["account_sid"], cfg["auth_token"], **kwargs)


def _get_client() -> TwilioClient:
    cfg = _load_config()
    if not _has_credentials(cfg):
        console.print("[red]No credentials. Run `twi auth login` or set TWILIO_ACCOUNT_SID/TWILIO_AUTH_TOKEN.[/red]")
        raise SystemExit(1)
    return _client_from_config(cfg)


def _call(fn: Callable[[], Any]) -> Any:
    """Run a client call, turning library errors into a red message and exit code 1."""
    try:
        return fn()
    except ProviderError as e:
        console.print(f"[red]Twilio error {e.code} (HTTP {e.http_status}): {e}[/red]")
    except TwilioError as e:
        console.print(f"[red]{e.code}: {e}[/red]")
    raise SystemExit(1)


def _print_resource(resource: Resource, json_output: bool = False) -> None:
    if json_output:
        click.echo(json.dumps(resource.to_dict(), indent=2))
        return
    for child in resource.children:
        if not child.children:
            console.print(f"[bold]{child.tag}[/bold]: {child.text}")


def _print_items(resource: Resource, columns: list[str], json_output: bool = False) -> None:
    """Print a list resource as a table of the given child fields."""
    if json_output:
        click.echo(json.dumps([item.to_dict() for item in resource.items], indent=2))
        return
    table = Table(title=f"{resource.tag} ({len(resource.items)})")
    for col in columns:
        table.add_column(col, style="bold" if col == "Sid" else None)
    for item in resource.items:
        table.add_row(*(item.get(col, "") or "" for col in columns))
    console.print(table)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP requests")
def main(verbose: bool):
    """twiclient CLI — Twilio REST API from the terminal."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(console=console, show_path=False)],
        )


# Register subcommands from separate modules
from twiclient.cli.auth import auth
from twiclient.cli.messages import messages
from twiclient.cli.calls import calls
from twiclient.cli.recordings import recordings
from twiclient.cli.queues import queues

main.add_command(auth)
main.add_command(messages)
main.add_command(calls)
main.add_command(recordings)
main.add_command(queues)


if __name__ == "__main__":
    main()
