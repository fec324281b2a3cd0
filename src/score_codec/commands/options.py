from __future__ import annotations

import functools
import sys
from collections.abc import Callable
from typing import Any

import click
from rich.console import Console
from rich.markup import escape

from score_codec.errors import ScoreCodecError
from score_codec.models.numeric_variant import NumericVariant
from score_codec.models.score_descriptor import ScoreDescriptor
from score_codec.models.score_shape import ScoreShape

error_console = Console(stderr=True)

_DESCRIPTOR_OPTIONS = [
    click.option(
        "--shape",
        type=click.Choice([s.value for s in ScoreShape]),
        default=ScoreShape.HARD_SOFT.value,
        show_default=True,
        envvar="SCORE_CODEC_SHAPE",
        help="Score shape of the field.",
    ),
    click.option(
        "--numeric",
        type=click.Choice([n.value for n in NumericVariant]),
        default=NumericVariant.INT.value,
        show_default=True,
        envvar="SCORE_CODEC_NUMERIC",
        help="Numeric type of each level.",
    ),
    click.option(
        "--hard-levels",
        type=int,
        default=None,
        envvar="SCORE_CODEC_HARD_LEVELS",
        help="Number of hard levels (bendable only).",
    ),
    click.option(
        "--soft-levels",
        type=int,
        default=None,
        envvar="SCORE_CODEC_SOFT_LEVELS",
        help="Number of soft levels (bendable only).",
    ),
    click.option(
        "--scale",
        type=int,
        default=None,
        envvar="SCORE_CODEC_SCALE",
        help="Maximum fraction digits (big_decimal only).",
    ),
]


def descriptor_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the score descriptor options and pass a built ``descriptor`` instead."""

    @functools.wraps(func)
    def wrapper(
        *args: Any,
        shape: str,
        numeric: str,
        hard_levels: int | None,
        soft_levels: int | None,
        scale: int | None,
        **kwargs: Any,
    ) -> Any:
        try:
            descriptor = ScoreDescriptor(
                shape,
                numeric,
                hard_levels_size=hard_levels,
                soft_levels_size=soft_levels,
                scale=scale,
            )
        except ValueError as e:
            raise click.UsageError(str(e)) from e
        return func(*args, descriptor=descriptor, **kwargs)

    for option in reversed(_DESCRIPTOR_OPTIONS):
        wrapper = option(wrapper)
    return wrapper


def exit_on_codec_error(func: Callable[..., Any]) -> Callable[..., Any]:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ScoreCodecError as e:
            error_console.print(f"[red]Error:[/red] {escape(str(e))}")
            sys.exit(1)

    return wrapper
