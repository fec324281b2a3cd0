from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click
from rich.console import Console

from score_codec.commands.options import descriptor_options, exit_on_codec_error
from score_codec.dispatch import encode_field, score_from_levels
from score_codec.grammar import parse_level_value
from score_codec.models.score_descriptor import ScoreDescriptor

if TYPE_CHECKING:
    from score_codec.cli import CliContext

console = Console()


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("levels", nargs=-1, required=True)
@click.option("--init", "init_score", type=int, default=0, show_default=True, help="Init score.")
@descriptor_options
@click.pass_context
@exit_on_codec_error
def encode(
    ctx: click.Context,
    levels: tuple[str, ...],
    init_score: int,
    descriptor: ScoreDescriptor,
) -> None:
    """Print the canonical string for a score given its levels, hard first.

    Negative levels may be passed directly: score-codec encode -999 -999
    """
    cli_ctx: CliContext = ctx.obj

    values = [parse_level_value(raw, descriptor.numeric, descriptor.scale) for raw in levels]
    score = score_from_levels(values, descriptor, init_score=init_score)
    text = encode_field(score, descriptor)

    if cli_ctx.json_output:
        console.print(json.dumps({"score": text, "descriptor": descriptor.to_dict()}, indent=2))
        return

    console.print(text, markup=False, highlight=False)
