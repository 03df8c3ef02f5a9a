"""Command-line analysis of a single board: pick a move or show per-column scores."""

from __future__ import annotations

import logging
from typing import List

import numpy as np
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from c4minimax.agents import MinimaxAgent
from c4minimax.board import EMPTY, SIDE_O, SIDE_X, as_board
from c4minimax.evaluate import assess

app = typer.Typer(no_args_is_help=True)
console = Console()

SYMBOLS = {"X": SIDE_X, "O": SIDE_O, ".": EMPTY}


def parse_board(text: str) -> np.ndarray:
    """
    Parse rows written top to bottom with ``X``, ``O`` and ``.``.

    Rows are separated by ``/`` or newlines; blank rows and spaces are
    ignored, e.g. ``"......./......./..XX..."``.
    """

    rows: List[List[int]] = []
    for raw in text.replace("/", "\n").splitlines():
        line = raw.replace(" ", "").upper()
        if not line:
            continue
        try:
            rows.append([SYMBOLS[ch] for ch in line])
        except KeyError as err:
            raise ValueError(f"unknown cell symbol {err.args[0]!r} (use X, O or .)") from None
    if not rows:
        raise ValueError("board is empty")
    return as_board(rows)


def render_board(board: np.ndarray) -> str:
    sym = {SIDE_X: "X", SIDE_O: "O", EMPTY: "."}
    lines = [" ".join(sym[int(v)] for v in row) for row in board]
    lines.append("-" * (2 * board.shape[1] - 1))
    lines.append(" ".join(str(c) for c in range(board.shape[1])))
    return "\n".join(lines)


def _parse_side(raw: str) -> int:
    side = SYMBOLS.get(raw.strip().upper())
    if side is None or side == EMPTY:
        raise typer.BadParameter(f"side must be X or O, got {raw!r}")
    return side


def _load(board_text: str) -> np.ndarray:
    try:
        return parse_board(board_text)
    except ValueError as err:
        raise typer.BadParameter(str(err)) from err


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def choose(
    board: str = typer.Argument(..., help="rows top to bottom, '/' separated, using X, O and ."),
    side: str = typer.Option("X", help="side to move for (X or O)"),
    depth: int = typer.Option(4, min=0, help="search depth (plies)"),
    prune: bool = typer.Option(False, help="use alpha-beta cutoffs"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="log search details"),
) -> None:
    """Print the column the engine would play."""
    _setup_logging(verbose)
    b = _load(board)
    agent = MinimaxAgent(depth, _parse_side(side), prune=prune)

    result = agent.search(b)
    if result.column is None:
        console.print("no legal move")
        return
    console.print(str(result.column))


@app.command()
def scores(
    board: str = typer.Argument(..., help="rows top to bottom, '/' separated, using X, O and ."),
    side: str = typer.Option("X", help="side to evaluate for (X or O)"),
    depth: int = typer.Option(4, min=0, help="search depth (plies)"),
    prune: bool = typer.Option(False, help="use alpha-beta cutoffs"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="log search details"),
) -> None:
    """Show the board, its static evaluation and each column's backed-up score."""
    _setup_logging(verbose)
    b = _load(board)
    s = _parse_side(side)
    agent = MinimaxAgent(depth, s, prune=prune)

    console.print(render_board(b))
    ev = assess(b, s)
    console.print(f"static eval: {ev.score}{' (decided)' if ev.terminal else ''}")

    table = Table(title=f"Root scores for {side.upper()} (depth {depth})")
    table.add_column("col", justify="right")
    table.add_column("score", justify="right")
    rows = agent.root_scores(b)
    for col, score in rows:
        table.add_row(str(col), str(score))
    console.print(table)

    if not rows:
        console.print("no legal move")
        return
    result = agent.search(b)
    console.print(f"choice: {result.column} (nodes={result.nodes})")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
