"""CLI: twi queues list|create|front|dequeue|delete"""

import click
from rich.console import Console

from twiclient.descriptors import CreateQueue, DeleteQueue, DeQueue, QueueMember, Queues

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
def queues():
    """Call queues."""


@queues.command("list")
@click.option("--json-output", "--json", is_flag=True)
def queues_list(json_output):
    """List queues."""
    with _get_client() as client:
        resp = _call(lambda: client.request(Queues()))
    if resp.resource is not None:
        _print_items(resp.resource, ["Sid", "FriendlyName", "CurrentSize", "MaxSize"], json_output)


@queues.command("create")
@click.argument("name")
@click.option("--max-size", default="")
def queues_create(name, max_size):
    """Create a queue."""
    with _get_client() as client:
        resp = _call(lambda: client.request(CreateQueue(friendly_name=name, max_size=max_size)))
    sid = resp.resource.sid if resp.resource else None
    console.print(f"[green]Queue created: {sid}[/green]")


@queues.command("front")
@click.argument("queue_sid")
@click.option("--json-output", "--json", is_flag=True)
def queues_front(queue_sid, json_output):
    """Show the member at the front of a queue."""
    with _get_client() as client:
        resp = _call(lambda: client.request(QueueMember(sid=queue_sid, front=True)))
    if resp.resource is not None:
        _print_resource(resp.resource, json_output)


@queues.command("dequeue")
@click.argument("queue_sid")
@click.option("--url", required=True, help="TwiML URL the dequeued call is redirected to")
@click.option("--call", "call_sid", default="", help="Member call SID (default: front of queue)")
@click.option("--method", default="")
def queues_dequeue(queue_sid, url, call_sid, method):
    """Redirect a queued call."""
    desc = DeQueue(sid=queue_sid, call_sid=call_sid, front=not call_sid, url=url, method=method)
    with _get_client() as client:
        with console.status("Dequeuing..."):
            _call(lambda: client.request(desc))
    console.print(f"[green]Dequeued {call_sid or 'front of queue'}.[/green]")


@queues.command("delete")
@click.argument("queue_sid")
def queues_delete(queue_sid):
    """Delete a queue."""
    with _get_client() as client:
        with console.status("Deleting..."):
            _call(lambda: client.request(DeleteQueue(sid=queue_sid)))
    console.print(f"[green]Queue {queue_sid} deleted.[/green]")
