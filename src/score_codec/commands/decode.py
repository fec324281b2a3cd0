from __future__ import annotations

from typing import TYPE_CHECKING

import click

from score_codec.commands.options import descriptor_options, exit_on_codec_error
from score_codec.dispatch import decode_field
from score_codec.display import display_score
from score_codec.models.score_descriptor import ScoreDescriptor

if TYPE_CHECKING:
    from score_codec.cli import CliContext


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("text")
@descriptor_options
@click.pass_context
@exit_on_codec_error
def decode(ctx: click.Context, text: str, descriptor: ScoreDescriptor) -> None:
    """Parse a canonical score string and show its levels."""
    cli_ctx: CliContext = ctx.obj

    score = decode_field(text, descriptor)
    display_score(score, text, descriptor, json_output=cli_ctx.json_output)
