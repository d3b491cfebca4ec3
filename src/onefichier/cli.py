"""Command-line interface for onefichier."""

from __future__ import annotations

import asyncio
import logging
import mimetypes
import sys
from collections.abc import Awaitable, Callable, Mapping
from contextlib import ExitStack
from pathlib import Path
from typing import Any, TypeVar

import click
import httpx

from onefichier.client import FichierClient
from onefichier.config import API_KEY_ENV, client_from_config, get_config
from onefichier.exceptions import FichierError, ensure_ok

T = TypeVar("T")


def _run(ctx: click.Context, action: Callable[[FichierClient], Awaitable[T]]) -> T:
    """Run action against a freshly built client, exiting 1 on failure.

    A mapping result with a non-OK status counts as a failure.
    """
    api_key, base_url = ctx.obj["api_key"], ctx.obj["base_url"]

    async def runner() -> T:
        config = get_config(api_key, base_url)
        async with client_from_config(config) as client:
            result = await action(client)
        if isinstance(result, Mapping):
            ensure_ok(result)
        return result

    try:
        return asyncio.run(runner())
    except FichierError as e:
        click.echo(click.style(f"Request failed: {e}", fg="red"), err=True)
        sys.exit(1)
    except httpx.HTTPError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@click.group()
@click.option("--api-key", envvar=API_KEY_ENV, help="1fichier.com API key")
@click.option("--base-url", default=None, help="API root URL")
@click.option("--verbose", "-v", is_flag=True, help="Log HTTP requests")
@click.version_option(package_name="onefichier")
@click.pass_context
def main(ctx: click.Context, api_key: str | None, base_url: str | None, verbose: bool) -> None:
    """1fichier.com CLI - Manage files in your 1fichier account."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key
    ctx.obj["base_url"] = base_url


@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show account information."""
    account = _run(ctx, lambda client: client.get_user_info())

    click.echo(f"Email:        {account['email']}")
    click.echo(f"Offer:        {account['offer']}")
    click.echo(f"Hot storage:  {_format_size(account['hot_storage'])}")
    click.echo(f"Cold storage: {_format_size(account['cold_storage'])}")


@main.command("ls")
@click.option("--folder-id", "-f", type=int, default=None, help="Folder to list (default: root)")
@click.pass_context
def list_folder(ctx: click.Context, folder_id: int | None) -> None:
    """List sub-folders and files of a folder.

    Examples:

        fichier ls

        fichier ls --folder-id 1234
    """

    async def action(client: FichierClient) -> tuple[Any, Any]:
        folder = ensure_ok(await client.list_folders({"folder_id": folder_id}))  # type: ignore[typeddict-item]
        files = ensure_ok(await client.list_files({"folder_id": folder_id}))  # type: ignore[typeddict-item]
        return folder, files

    folder, files = _run(ctx, action)

    sub_folders = folder.get("sub_folders") or []
    items = files.get("items") or []
    if not sub_folders and not items:
        click.echo(f"(empty folder: {folder.get('name', folder_id or 'root')})")
        return

    for sub in sub_folders:
        click.echo(click.style(f"  {sub['name']}/", fg="blue") + f"  [{sub['folder_id']}]")
    for item in items:
        click.echo(f"  {item['filename']}  ({_format_size(item['size'])})  {item['url']}")


@main.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, path_type=Path))
@click.option("--folder-id", "-f", type=int, default=None, help="Target folder (default: root)")
@click.pass_context
def upload(ctx: click.Context, files: tuple[Path, ...], folder_id: int | None) -> None:
    """Upload files to 1fichier.

    Examples:

        fichier upload report.pdf

        fichier upload *.zip --folder-id 1234
    """

    async def action(client: FichierClient) -> Any:
        server = await client.get_upload_server()
        form: dict[str, Any] = {}
        if folder_id is not None:
            form["did"] = str(folder_id)

        with ExitStack() as stack:
            payload = [
                (
                    "file[]",
                    (
                        path.name,
                        stack.enter_context(path.open("rb")),
                        mimetypes.guess_type(path.name)[0] or "application/octet-stream",
                    ),
                )
                for path in files
            ]
            await client.upload_files(server["id"], payload, form, server=server["url"])

        return await client.get_upload_result(server["id"], json=1, server=server["url"])

    result = _run(ctx, action)

    links = result.get("links") or []
    for link in links:
        click.echo(click.style("✓ ", fg="green") + f"{link['filename']} -> {link['download']}")

    if len(links) == len(files):
        click.echo(click.style(f"\nAll {len(files)} file(s) uploaded successfully!", fg="green"))
    else:
        click.echo(f"\n{len(links)}/{len(files)} file(s) uploaded.", err=True)
        sys.exit(1)


@main.command()
@click.argument("url")
@click.option("--password", "-p", default=None, help="Download password of the file")
@click.option("--single", is_flag=True, help="Token valid for a single download")
@click.pass_context
def token(ctx: click.Context, url: str, password: str | None, single: bool) -> None:
    """Generate a download link for a file URL."""
    data: dict[str, Any] = {"url": url, "pass": password}
    if single:
        data["single"] = 1

    result = _run(ctx, lambda client: client.get_download_token(data))  # type: ignore[arg-type]
    click.echo(result["url"])


@main.command()
@click.argument("name")
@click.option("--folder-id", "-f", type=int, default=None, help="Parent folder (default: root)")
@click.pass_context
def mkdir(ctx: click.Context, name: str, folder_id: int | None) -> None:
    """Create a folder."""
    result = _run(
        ctx, lambda client: client.create_folder({"name": name, "folder_id": folder_id})  # type: ignore[typeddict-item]
    )
    click.echo(click.style(f"Created folder: {result['name']} [{result['folder_id']}]", fg="green"))


@main.command("rm")
@click.argument("urls", nargs=-1, required=True)
@click.pass_context
def remove(ctx: click.Context, urls: tuple[str, ...]) -> None:
    """Remove files by URL."""
    result = _run(ctx, lambda client: client.remove_files([{"url": url} for url in urls]))
    click.echo(click.style(f"Removed {result['removed']} file(s)", fg="green"))


@main.command("remote-upload")
@click.argument("urls", nargs=-1, required=True)
@click.option("--folder-id", "-f", type=int, default=None, help="Target folder (default: root)")
@click.pass_context
def remote_upload(ctx: click.Context, urls: tuple[str, ...], folder_id: int | None) -> None:
    """Ask 1fichier to fetch URLs into the account."""
    result = _run(
        ctx,
        lambda client: client.request_remote_upload(
            {"urls": list(urls), "folder_id": folder_id}  # type: ignore[typeddict-item]
        ),
    )
    click.echo(click.style(f"Remote upload queued: id {result['id']}", fg="green"))


@main.command()
@click.pass_context
def vouchers(ctx: click.Context) -> None:
    """List unused vouchers."""
    result = _run(ctx, lambda client: client.list_vouchers())

    if not result.get("data"):
        click.echo("(no unused vouchers)")
    for voucher in result.get("data") or []:
        click.echo(f"  {voucher['voucher']}  {voucher['service']}")


def _format_size(size_bytes: int) -> str:
    """Format file size in human-readable form."""
    for unit in ["B", "KB", "MB", "GB"]:
        if size_bytes < 1024:
            return f"{size_bytes:.1f} {unit}" if unit != "B" else f"{size_bytes} {unit}"
        size_bytes /= 1024  # type: ignore[assignment]
    return f"{size_bytes:.1f} TB"


if __name__ == "__main__":
    main()
