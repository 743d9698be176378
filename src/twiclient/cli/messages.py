"""CLI: twi messages send|list|get"""

import click
from rich.console import Console

from twiclient.descriptors import Message, Messages, SendMessage

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
def messages():
    """SMS/MMS messages."""


@messages.command("send")
@click.option("--to", required=True)
@click.option("--from", "from_", default="", help="Sender number (or use --service)")
@click.option("--service", default="", help="Messaging service SID")
@click.option("--media-url", multiple=True, help="Attach media (repeatable)")
@click.option("--status-callback", default="")
@click.argument("body", required=False, default="")
def messages_send(to, from_, service, media_url, status_callback, body):
    """Send a message."""
    if not from_ and not service:
        raise click.UsageError("one of --from or --service is required")
    desc = SendMessage(
        to=to, from_=from_, messaging_service_sid=service, body=body,
        media_url=media_url, status_callback=status_callback,
    )
    with _get_client() as client:
        with console.status("Sending..."):
            resp = _call(lambda: client.request(desc))
    sid = resp.resource.sid if resp.resource else None
    console.print(f"[green]Message queued: {sid}[/green]")


@messages.command("list")
@click.option("--to", default="")
@click.option("--from", "from_", default="")
@click.option("--date-sent", default="", help="YYYY-MM-DD")
@click.option("--limit", default="", help="Page size")
@click.option("--json-output", "--json", is_flag=True)
def messages_list(to, from_, date_sent, limit, json_output):
    """List messages."""
    with _get_client() as client:
        resp = _call(lambda: client.request(Messages(to=to, from_=from_, date_sent=date_sent, page_size=limit)))
    if resp.resource is not None:
        _print_items(resp.resource, ["Sid", "DateSent", "From", "To", "Status", "Body"], json_output)


@messages.command("get")
@click.argument("sid")
@click.option("--media", is_flag=True, help="List the message's media")
@click.option("--json-output", "--json", is_flag=True)
def messages_get(sid: str, media: bool, json_output: bool):
    """Show one message."""
    with _get_client() as client:
        resp = _call(lambda: client.request(Message(sid=sid, media=media)))
    if resp.resource is None:
        return
    if media:
        _print_items(resp.resource, ["Sid", "ContentType", "Uri"], json_output)
    else:
        _print_resource(resp.resource, json_output)
