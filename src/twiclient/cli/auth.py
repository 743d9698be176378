"""CLI: twi auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

from twiclient.descriptors import Account

console = Console()


def _load_config() -> dict:
    from twiclient.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from twiclient.cli.main import _save_config
    _save_config(cfg)


def _call(fn):
    from twiclient.cli.main import _call
    return _call(fn)


def _client_from_config(cfg: dict):
    from twiclient.cli.main import _client_from_config
    return _client_from_config(cfg)


def _uses_api_key(cfg: dict) -> bool:
    from twiclient.cli.main import _uses_api_key
    return _uses_api_key(cfg)


@click.group()
def auth():
    """Credential commands."""


@auth.command("login")
@click.option("--api-key", default=None, help="Authenticate with an API key instead of the auth token")
@click.option("--base-url", default=None, help="API base URL")
def auth_login(api_key: Optional[str], base_url: Optional[str]):
    """Store credentials after checking them against the API."""
    cfg = {"account_sid": click.prompt("Account SID")}
    if api_key:
        cfg["api_key"] = api_key
        cfg["api_secret"] = click.prompt("API key secret", hide_input=True)
    else:
        cfg["auth_token"] = click.prompt("Auth token", hide_input=True)
    if base_url:
        cfg["base_url"] = base_url

    with _client_from_config(cfg) as client:
        with console.status("Verifying credentials..."):
            resp = _call(lambda: client.request(Account(sid=cfg["account_sid"])))
    name = resp.resource.get("FriendlyName", "") if resp.resource else ""
    console.print(f"[green]Logged in to {name or cfg['account_sid']}[/green]")

    _save_config(cfg)
    console.print("[dim]Credentials saved to ~/.twiclient/config.json[/dim]")


@auth.command("status")
def auth_status():
    """Show which account is configured."""
    cfg = _load_config()
    if cfg.get("account_sid"):
        mode = "API key " + cfg["api_key"] if _uses_api_key(cfg) else "auth token"
        console.print(f"[green]Account[/green] {cfg['account_sid']} (using {mode})")
    else:
        console.print("[yellow]No credentials. Run `twi auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear saved credentials."""
    _save_config({})
    console.print("[green]Logged out.[/green]")
