"""CLI: twi calls make|list|get|hangup"""

import click
from rich.console import Console

from twiclient.descriptors import Call, Calls, MakeCall, ModifyCall

console = Console()


def _get_client():
    from twiclient.cli.main import _get_client
    return _get_client()


def _call(fn):
    from twiclient.cli.main import _call
    return _call(fn)


def _print_resource(resource, json_output=False):
    from twiclient.cli.main import _print_resource
    _print_resource(resource, json_output)


def _print_items(resource, columns, json_output=False):
    from twiclient.cli.main import _print_items
    _print_items(resource, columns, json_output)


@click.group()
def calls():
    """Voice calls."""


@calls.command("make")
@click.option("--to", required=True)
@click.option("--from", "from_", required=True)
@click.option("--url", default="", help="TwiML URL for the call")
@click.option("--application", default="", help="Application SID instead of --url")
@click.option("--record", is_flag=True)
def calls_make(to, from_, url, application, record):
    """Place an outbound call."""
    if not url and not application:
        raise click.UsageError("one of --url or --application is required")
    desc = MakeCall(
        to=to, from_=from_, url=url, application_sid=application, record="true" if record else "",
    )
    with _get_client() as client:
        with console.status("Dialling..."):
            resp = _call(lambda: client.request(desc))
    sid = resp.resource.sid if resp.resource else None
    console.print(f"[green]Call queued: {sid}[/green]")


@calls.command("list")
@click.option("--to", default="")
@click.option("--from", "from_", default="")
@click.option("--status", default="")
@click.option("--json-output", "--json", is_flag=True)
def calls_list(to, from_, status, json_output):
    """List calls."""
    with _get_client() as client:
        resp = _call(lambda: client.request(Calls(to=to, from_=from_, status=status)))
    if resp.resource is not None:
        _print_items(resp.resource, ["Sid", "StartTime", "From", "To", "Status", "Duration"], json_output)


@calls.command("get")
@click.argument("sid")
@click.option("--recordings", is_flag=True)
@click.option("--notifications", is_flag=True)
@click.option("--json-output", "--json", is_flag=True)
def calls_get(sid, recordings, notifications, json_output):
    """Show a call, or its recordings/notifications."""
    with _get_client() as client:
        resp = _call(lambda: client.request(Call(sid=sid, recordings=recordings, notifications=notifications)))
    if resp.resource is None:
        return
    if recordings or notifications:
        _print_items(resp.resource, ["Sid", "DateCreated", "Duration" if recordings else "ErrorCode"], json_output)
    else:
        _print_resource(resp.resource, json_output)


@calls.command("hangup")
@click.argument("sid")
def calls_hangup(sid: str):
    """End a call in progress."""
    with _get_client() as client:
        with console.status("Hanging up..."):
            _call(lambda: client.request(ModifyCall(sid=sid, status="completed")))
    console.print(f"[green]Call {sid} completed.[/green]")
