from __future__ import annotations

import json
from typing import Any

import attrs
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from score_codec.models.score import Score
from score_codec.models.score_descriptor import ScoreDescriptor

console = Console()


def score_to_json(score: Score, text: str) -> dict[str, Any]:
    # SimpleScore has a field named "score"; the canonical text wins that key
    return {
        **attrs.asdict(score),
        "score": text,
        "shape": score.shape.value,
        "levels": list(score.to_level_values()),
    }



def get_feasibility_style(score: Score) -> tuple[str, str]:
    if not score.is_solution_initialized:
        return "yellow", "uninitialized"
    if score.is_feasible:
        return "green", "feasible"
    return "red", "infeasible"


def display_score(
    score: Score,
    text: str,
    descriptor: ScoreDescriptor,
    json_output: bool = False,
) -> None:
    if json_output:
        console.print(json.dumps(score_to_json(score, text), indent=2, default=str))
        return

    color, feasibility = get_feasibility_style(score)
    console.print(
        Panel(
            f"[bold]Score:[/bold] {escape(text)}\n"
            f"[bold]Shape:[/bold] {descriptor.shape} ({descriptor.numeric})\n"
            f"[bold]Init score:[/bold] {score.init_score}\n"
            f"[bold]Status:[/bold] [{color}]{feasibility}[/{color}]",
            title="[bold blue]Decoded Score[/bold blue]",
        )
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", style="dim", width=3)
    table.add_column("Level")
    table.add_column("Value", justify="right")

    for i, (name, value) in enumerate(zip(score.level_names(), score.to_level_values())):
        value_color = "red" if value < 0 else "white"
        table.add_row(str(i), name, f"[{value_color}]{value}[/{value_color}]")

    console.print(table)


def display_comparison(left: str, right: str, outcome: int, json_output: bool = False) -> None:
    if json_output:
        console.print(json.dumps({"left": left, "right": right, "comparison": outcome}, indent=2))
        return

    if outcome > 0:
        console.print(f"[green]✓[/green] [bold]{escape(left)}[/bold] ranks higher than {escape(right)}")
    elif outcome < 0:
        console.print(f"[green]✓[/green] [bold]{escape(right)}[/bold] ranks higher than {escape(left)}")
    else:
        console.print(f"[dim]{escape(left)} and {escape(right)} rank equal[/dim]")
