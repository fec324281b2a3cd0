from __future__ import annotations

from typing import TYPE_CHECKING

import click

from score_codec.commands.options import descriptor_options, exit_on_codec_error
from score_codec.dispatch import decode_field
from score_codec.display import display_comparison
from score_codec.models.score_descriptor import ScoreDescriptor

if TYPE_CHECKING:
    from score_codec.cli import CliContext


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("left")
@click.argument("right")
@descriptor_options
@click.pass_context
@exit_on_codec_error
def compare(ctx: click.Context, left: str, right: str, descriptor: ScoreDescriptor) -> None:
    """Rank two scores of the same field against each other."""
    cli_ctx: CliContext = ctx.obj

    left_score = decode_field(left, descriptor)
    right_score = decode_field(right, descriptor)
    outcome = (left_score > right_score) - (left_score < right_score)
    display_comparison(left, right, outcome, json_output=cli_ctx.json_output)
