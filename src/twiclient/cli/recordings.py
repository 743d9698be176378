"""CLI: twi recordings list|get|delete"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from twiclient.descriptors import DeleteRecording, Recording, Recordings

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
def recordings():
    """Call recordings."""


@recordings.command("list")
@click.option("--call", "call_sid", default="", help="Only recordings of this call")
@click.option("--json-output", "--json", is_flag=True)
def recordings_list(call_sid, json_output):
    """List recordings."""
    with _get_client() as client:
        resp = _call(lambda: client.request(Recordings(call_sid=call_sid)))
    if resp.resource is not None:
        _print_items(resp.resource, ["Sid", "CallSid", "DateCreated", "Duration"], json_output)


@recordings.command("get")
@click.argument("sid")
@click.option("--download", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Save the audio to this file")
@click.option("--mp3", is_flag=True, help="Download MP3 instead of WAV")
@click.option("--json-output", "--json", is_flag=True)
def recordings_get(sid: str, download: Optional[Path], mp3: bool, json_output: bool):
    """Show recording metadata or download the audio."""
    desc = Recording(sid=sid, get_recording=download is not None, get_mp3=mp3)
    with _get_client() as client:
        with console.status("Fetching..."):
            resp = _call(lambda: client.request(desc))
    if download is not None:
        download.write_bytes(resp.content)
        console.print(f"[green]Saved {len(resp.content)} bytes to {download}[/green]")
    elif resp.resource is not None:
        _print_resource(resp.resource, json_output)


@recordings.command("delete")
@click.argument("sid")
def recordings_delete(sid: str):
    """Delete a recording."""
    with _get_client() as client:
        with console.status("Deleting..."):
            _call(lambda: client.request(DeleteRecording(sid=sid)))
    console.print(f"[green]Recording {sid} deleted.[/green]")
