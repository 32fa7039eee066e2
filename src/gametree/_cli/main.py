import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from gametree._config import EvaluationConfig, PlayerKind
from gametree._errors import GameTreeError
from gametree._eval import prepare_game_tree
from gametree._eval_engine import evaluate_tree
from gametree._io import INPUT_FILENAME_PATTERN, load_game_tree

from .config import ConfigError, get_config
from .render import render_game_tree, render_trace

app = typer.Typer(add_completion=False)

logger = logging.getLogger(__name__)
# Console for stderr (info/errors)
err_console = Console(stderr=True)
# Console for stdout (results)
out_console = Console()


def _configure_logging(*, debug: bool) -> None:
    # Configure rich logging handler to output to stderr
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=err_console,
                show_time=False,
                show_path=debug,
                rich_tracebacks=True,
            ),
        ],
    )


def _parse_tokens(tokens: list[str]) -> tuple[PlayerKind | None, Path]:
    """Split positional tokens into the root player and the input file.

    Raises:
        typer.BadParameter: If a token is neither a player nor a valid file name,
            or if there is not exactly one file name.

    """
    player: PlayerKind | None = None
    filenames: list[str] = []
    for token in tokens:
        if token in {p.value for p in PlayerKind}:
            # Last occurrence wins
            player = PlayerKind(token)
        elif INPUT_FILENAME_PATTERN.fullmatch(token):
            filenames.append(token)
        else:
            msg = f"One or more incorrect arguments were passed: {token!r}"
            raise typer.BadParameter(msg, param_hint="TOKENS")

    if not filenames:
        msg = "No input file specified."
        raise typer.BadParameter(msg, param_hint="TOKENS")
    if len(filenames) > 1:
        msg = f"Expected exactly one input file, got {', '.join(filenames)}"
        raise typer.BadParameter(msg, param_hint="TOKENS")
    return player, Path(filenames[0])


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def run(
    tokens: Annotated[
        list[str],
        typer.Argument(help="'max' or 'min' for the root player (default min), and the input file, e.g. tree_1.txt"),
    ],
    *,
    verbose: Annotated[
        bool,
        typer.Option("-v", help="Trace the decision of every inner node, not only the root"),
    ] = False,
    alpha_beta: Annotated[
        bool,
        typer.Option("-ab", help="Enable alpha-beta pruning"),
    ] = False,
    range_: Annotated[
        int | None,
        typer.Option("-range", metavar="N", help="Leaf values must lie in [-N, N]; reaching N stops a scan"),
    ] = None,
    show_tree: Annotated[
        bool,
        typer.Option("--tree", help="Render the game tree to stderr before evaluating"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging"),
    ] = False,
) -> None:
    """Compute the minimax value of a game tree described in a text file."""
    _configure_logging(debug=debug)

    player, input_path = _parse_tokens(tokens)
    if range_ == 0:
        msg = "Range must be a non-zero integer."
        raise typer.BadParameter(msg, param_hint="'-range'")

    try:
        defaults = get_config()
    except ConfigError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1) from e
    logger.debug(f"Config defaults: {defaults}")

    config = EvaluationConfig(
        is_max_player=(player or defaults.player) is PlayerKind.MAX,
        pruning_enabled=alpha_beta or defaults.alpha_beta,
        range=abs(range_) if range_ is not None else defaults.range,
        verbose=verbose or defaults.verbose,
    )

    try:
        game_input = load_game_tree(input_path, bound=config.range)
        tree = prepare_game_tree(game_input)
        if show_tree:
            render_game_tree(tree, config.root_player, err_console)
        result = evaluate_tree(tree, config)
    except GameTreeError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(code=1) from e

    logger.debug(f"Value of {result.root}: {result.value} ({result.nodes_visited} nodes visited)")
    render_trace(result, out_console)


def main() -> None:
    app()
