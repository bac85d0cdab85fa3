"""CLI entry point for ipfs_pinapi."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Awaitable, Callable

import click

from ipfs_pinapi.config import load_config
from ipfs_pinapi.errors import PinAPIError
from ipfs_pinapi.interfaces.pin import PinAPI
from ipfs_pinapi.ipfs.http import KuboHttpApi
from ipfs_pinapi.ipfs.pin import KuboPinAPI
from ipfs_pinapi.models.options import PinType


def _run(ctx: click.Context, action: Callable[[PinAPI], Awaitable[None]]) -> None:
    """Run ``action`` against a pin API built from the loaded config."""
    factory = ctx.obj.get("api_factory")

    async def _main() -> None:
        if factory is not None:
            await action(factory())
            return
        cfg = load_config(ctx.obj["config_path"])
        if not ctx.obj.get("verbose"):
            logging.getLogger().setLevel(cfg.log_level.upper())
        async with KuboHttpApi.from_config(cfg) as http:
            await action(KuboPinAPI(http))

    try:
        asyncio.run(_main())
    except PinAPIError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """ipfs-pinapi - manage pins on an IPFS (Kubo) node."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@cli.command()
@click.argument("path")
@click.option("--direct", is_flag=True, help="Pin only the root node, not its children")
@click.pass_context
def add(ctx: click.Context, path: str, direct: bool) -> None:
    """Pin content at PATH."""

    async def _add(api: PinAPI) -> None:
        await api.add(path, recursive=not direct)
        click.echo(f"pinned {path}")

    _run(ctx, _add)


@cli.command()
@click.option(
    "--type", "pin_type",
    type=click.Choice([t.value for t in PinType]),
    default=PinType.ALL.value,
    show_default=True,
    help="Only list pins of this type",
)
@click.pass_context
def ls(ctx: click.Context, pin_type: str) -> None:
    """List pinned content."""

    async def _ls(api: PinAPI) -> None:
        for pin in sorted(await api.ls(type=pin_type), key=lambda p: str(p.path)):
            click.echo(f"{pin.path.cid} {pin.type}")

    _run(ctx, _ls)


@cli.command()
@click.argument("path")
@click.pass_context
def rm(ctx: click.Context, path: str) -> None:
    """Remove the pin on PATH."""

    async def _rm(api: PinAPI) -> None:
        await api.rm(path)
        click.echo(f"unpinned {path}")

    _run(ctx, _rm)


@cli.command()
@click.argument("from_path")
@click.argument("to_path")
@click.option("--keep-old", is_flag=True, help="Keep the old pin after updating")
@click.pass_context
def update(ctx: click.Context, from_path: str, to_path: str, keep_old: bool) -> None:
    """Move a pin from FROM_PATH to TO_PATH."""

    async def _update(api: PinAPI) -> None:
        await api.update(from_path, to_path, unpin=not keep_old)
        click.echo(f"updated {from_path} -> {to_path}")

    _run(ctx, _update)


@cli.command()
@click.option("--only-bad", is_flag=True, help="Only print pins that failed verification")
@click.pass_context
def verify(ctx: click.Context, only_bad: bool) -> None:
    """Verify that all recursive pins are complete and intact."""

    async def _verify(api: PinAPI) -> None:
        bad = 0
        async with await api.verify() as stream:
            async for status in stream:
                if not status.ok:
                    bad += 1
                elif only_bad:
                    continue
                click.echo(f"{status.cid} {'ok' if status.ok else 'BROKEN'}")
                for node in status.bad_nodes:
                    click.echo(f"  {node.cid}: {node.err or 'bad node'}")
        if stream.error is not None:
            raise stream.error
        if bad:
            click.echo(f"{bad} broken pin(s)", err=True)
            sys.exit(2)

    _run(ctx, _verify)


if __name__ == "__main__":
    cli()
