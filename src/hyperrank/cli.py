from __future__ import annotations

import json
import logging
from typing import Optional

import typer
from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn, TimeRemainingColumn

from hyperrank.core.config import Config
from hyperrank.core.exceptions import HyperrankError
from hyperrank.core.graph import DirectedGraph
from hyperrank.ingest import read_edges
from hyperrank.report import GraphSummary, build_report, ranked_table, render_report
from hyperrank.algorithms.degree import in_degree_centrality, out_degree_centrality


app = typer.Typer(
    help="Degree and closeness centrality for directed hyperlink networks.",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def setup_logging(config: Config, debug: bool = False, verbose: bool = False) -> None:
    """Setup logging configuration with optional debug control"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = getattr(logging, str(config.get('logging.level', 'WARNING')).upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format=config.get('logging.format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
        datefmt='%H:%M:%S'
    )
    logging.getLogger('hyperrank').setLevel(log_level)


def _fail(exc: Exception) -> None:
    err_console.print(f"[red]Error:[/red] {exc}")
    raise typer.Exit(code=1)


def _load_graph(path: str, config: Config) -> DirectedGraph:
    ingest = config.ingest
    edges = read_edges(
        path,
        source_column=ingest.get('source_column', 'SOURCE_SUBREDDIT'),
        target_column=ingest.get('target_column', 'TARGET_SUBREDDIT'),
        delimiter=ingest.get('delimiter', '\t'),
    )
    return DirectedGraph.from_edges(edges)


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to a YAML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress at INFO level"),
    debug: bool = typer.Option(False, "--debug", help="Log at DEBUG level"),
) -> None:
    """Rank the communities of a hyperlink network by centrality."""
    try:
        config = Config(config_path)
    except HyperrankError as exc:
        _fail(exc)
    setup_logging(config, debug=debug, verbose=verbose)
    ctx.obj = config


@app.command()
def summary(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Tab-separated hyperlink file"),
) -> None:
    """Print node and edge counts."""
    try:
        graph = _load_graph(path, ctx.obj)
    except HyperrankError as exc:
        _fail(exc)
    s = GraphSummary.of(graph)
    console.print(f"The network has {s.nodes} nodes and {s.edges} edges")


@app.command()
def degree(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Tab-separated hyperlink file"),
    top_k: Optional[int] = typer.Option(None, "--top-k", min=1, help="Rows per table"),
) -> None:
    """Show the top nodes by out and in degree centrality."""
    config: Config = ctx.obj
    k = top_k if top_k is not None else config.get('report.top_k', 5)
    try:
        graph = _load_graph(path, config)
    except HyperrankError as exc:
        _fail(exc)
    console.print(ranked_table(f"Top {k}: Out degree centrality", out_degree_centrality(graph), k))
    console.print(ranked_table(f"Top {k}: In degree centrality", in_degree_centrality(graph), k))


@app.command()
def analyze(
    ctx: typer.Context,
    path: str = typer.Argument(..., help="Tab-separated hyperlink file"),
    top_k: Optional[int] = typer.Option(None, "--top-k", min=1, help="Rows per table"),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Closeness worker count (default: CPU count)"),
    executor: Optional[str] = typer.Option(None, "--executor", help="process | thread | serial"),
    skip_closeness: bool = typer.Option(False, "--skip-closeness", help="Only compute degree centrality"),
    as_json: bool = typer.Option(False, "--json", help="Print the top-k tables as JSON"),
) -> None:
    """Compute all four centrality tables and show the top entries of each."""
    config: Config = ctx.obj
    try:
        if workers is not None:
            config.set('closeness.workers', workers)
        if executor is not None:
            config.set('closeness.executor', executor)
        graph = _load_graph(path, config)
    except HyperrankError as exc:
        _fail(exc)

    k = top_k if top_k is not None else config.get('report.top_k', 5)
    options = dict(
        closeness=not skip_closeness,
        workers=config.get('closeness.workers'),
        executor=config.get('closeness.executor'),
        chunksize=config.get('closeness.chunksize'),
    )

    try:
        if skip_closeness or as_json:
            report = build_report(graph, **options)
        else:
            progress_columns = (
                SpinnerColumn(),
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TextColumn("{task.completed}/{task.total}"),
                TimeElapsedColumn(),
                TimeRemainingColumn(),
            )
            with Progress(*progress_columns, console=err_console, transient=True) as progress:
                task_id = progress.add_task("Closeness", total=2 * graph.node_count)
                report = build_report(
                    graph,
                    on_result=lambda node, score: progress.advance(task_id, 1),
                    **options,
                )
    except HyperrankError as exc:
        _fail(exc)

    if as_json:
        typer.echo(json.dumps(report.to_dict(top_k=k), indent=2))
    else:
        render_report(console, report, k)


if __name__ == "__main__":
    app()
