from pathlib import Path
from typing import Optional

import typer

from experiments.plots import plot_metric_deviations
from experiments.udhr_sizes import run_udhr_sizes
from src.corpus import CatalogError, MalformedDocumentError
from src.metrics import EmptyCorpusError

app = typer.Typer()

FATAL_ERRORS = (CatalogError, MalformedDocumentError, EmptyCorpusError, OSError)


@app.callback()
def cli() -> None:
    """
    Compare how much space the UDHR translations take under five size measures.
    """


@app.command()
def report(
    corpus_root: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        dir_okay=True,
        help="Directory holding index.xml and the udhr_<code>.xml documents.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        dir_okay=False,
        help="Write the HTML table here instead of stdout.",
    ),
    show_plots: bool = typer.Option(
        False,
        "--show-plots",
        help="Open one deviation chart per metric in the browser (nothing is saved).",
    ),
) -> None:
    """
    Measure every catalogued document and emit the size comparison table.
    """
    try:
        result = run_udhr_sizes(corpus_root)
    except FATAL_ERRORS as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    markup = result.to_html()
    if output:
        try:
            output.write_text(markup, encoding="utf-8")
        except OSError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=1) from exc
        typer.echo(f"[report] Wrote {output}", err=True)
    else:
        typer.echo(markup, nl=False)

    if show_plots:
        typer.echo("[plots] Showing deviation charts", err=True)
        plot_metric_deviations(result.records, result.statistics)


if __name__ == "__main__":
    app()
