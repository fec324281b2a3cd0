from __future__ import annotations

import logging
from dataclasses import dataclass

import click
from trogon import tui

from score_codec.commands.compare import compare
from score_codec.commands.decode import decode
from score_codec.commands.encode import encode


@dataclass
class CliContext:
    json_output: bool
    verbose: bool


@tui()
@click.group()
@click.option("--json", "json_output", is_flag=True, help="Output JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, json_output: bool, verbose: bool) -> None:
    """Score codec CLI - encode, decode and compare solver scores."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliContext(json_output=json_output, verbose=verbose)


cli.add_command(encode)
cli.add_command(decode)
cli.add_command(compare)
