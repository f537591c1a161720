"""Command-line interface for chesscompat."""

import json
from pathlib import Path
from typing import NoReturn

import chess
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from chesscompat import __version__
from chesscompat.core.chess import BoardPosition, RulesetTag, VariantLabel, move_from_chess, move_to_chess
from chesscompat.core.compat import (
    char_pair_kind,
    chessground_dests,
    chessground_move,
    decode_char_pair,
    encode_char_pair,
    lichess_rules,
    lichess_variant,
)
from chesscompat.core.configs import load_compat_config
from chesscompat.core.utils.logging import setup_logging

app = typer.Typer(
    name="chesscompat",
    help="chesscompat: chessground, scalachess and lichess format conversions",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


def _fail(error: Exception) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {escape(str(error))}")
    raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Print version information."""
    console.print(f"[bold blue]chesscompat[/bold blue] v{__version__}")


@app.command()
def dests(
    fen: str = typer.Argument(None, help="Position FEN (defaults to the variant's start position)"),
    variant: str = typer.Option(None, "--variant", "-v", help="lichess variant label"),
    chess960: bool = typer.Option(False, "--chess960", help="Do not add two-square castling destinations"),
    config: Path = typer.Option(None, "--config", "-c", help="Path to a YAML config file"),
    overrides: list[str] = typer.Option(None, "--set", help="Config override, e.g. dests.chess960=true"),
    as_json: bool = typer.Option(False, "--json", help="Print the map as JSON"),
) -> None:
    """Print the chessground destination map of a position."""
    overrides = list(overrides or [])
    if variant is not None:
        overrides.append(f"variant={variant}")
    if chess960:
        overrides.append("dests.chess960=true")

    try:
        cfg = load_compat_config(config, overrides)
        setup_logging(cfg.logging)
        # chess960 and fromPosition collapse into the chess rule set here;
        # the chess960 display flag is carried separately by cfg.chess960.
        pos = BoardPosition.from_fen(fen, lichess_rules(cfg.variant_label))
    except (ValueError, FileNotFoundError) as e:
        _fail(e)

    result = chessground_dests(pos, chess960=cfg.chess960)

    if as_json:
        console.print_json(json.dumps(result))
        return

    table = Table(title=f"{cfg.variant_label} destinations")
    table.add_column("From", style="cyan")
    table.add_column("To")
    for from_name, to_names in result.items():
        table.add_row(from_name, " ".join(to_names))
    console.print(table)


@app.command()
def encode(
    uci: str = typer.Argument(..., help="Move in UCI notation, e.g. e2e4, e7e8q or N@f3"),
) -> None:
    """Encode a move as a scalachess char pair."""
    try:
        move = move_from_chess(chess.Move.from_uci(uci))
    except ValueError as e:
        _fail(e)

    code = encode_char_pair(move)
    points = ", ".join(str(ord(c)) for c in code)
    console.print(f"[bold]{uci}[/bold] -> {escape(repr(code))} ({points}) [dim]{char_pair_kind(code)}[/dim]")
    console.print(f"chessground: {' '.join(chessground_move(move))}")


@app.command()
def decode(
    code: str = typer.Argument(..., help="Two-character code, or code points with --points"),
    points: bool = typer.Option(False, "--points", "-p", help="Read CODE as comma-separated code points"),
) -> None:
    """Decode a scalachess char pair to a UCI move."""
    try:
        if points:
            code = "".join(chr(int(p)) for p in code.split(","))
        move = decode_char_pair(code)
    except (ValueError, OverflowError) as e:
        _fail(e)

    console.print(move_to_chess(move).uci())


@app.command()
def variant(
    name: str = typer.Argument(..., help="lichess variant label or internal rule-set tag"),
) -> None:
    """Show the rule-set tag and canonical variant label for a name."""
    if name in {label.value for label in VariantLabel}:
        rules = lichess_rules(name)
    elif name in {tag.value for tag in RulesetTag}:
        rules = RulesetTag(name)
    else:
        _fail(ValueError(f"Unknown variant or rule set: {name!r}"))

    console.print(f"rules: [bold]{rules}[/bold]")
    console.print(f"variant: [bold]{lichess_variant(rules)}[/bold]")


if __name__ == "__main__":
    app()
