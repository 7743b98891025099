from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List

import typer

from .config import ReadabilityConfig, load_config
from .errors import ScoreOutOfRangeError, TextLoadError, UnsupportedFormulaError
from .formulas import ALL_SELECTOR, average_age, evaluate, resolve_selector
from .loader import load_text
from .models import ScoreResult
from .report import (
    PROMPT,
    format_average,
    format_load_failure,
    format_score,
    format_statistics,
    format_unavailable,
    format_unsupported,
)
from .textstats import extract_statistics

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Readability scores for a text file.", no_args_is_help=True)


def _print_default_config(value: bool) -> None:
    if value:
        typer.echo(ReadabilityConfig().to_yaml(), nl=False)
        raise typer.Exit()


@app.command()
def score(
    input_path: Path = typer.Argument(..., help="Text file to analyze."),
    formula: str | None = typer.Option(
        None,
        "--formula",
        "-f",
        help="Score to calculate (ARI, FK, SMOG, CL or all). Prompts when omitted.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug details to stderr."
    ),
    print_config: bool = typer.Option(
        False,
        "--print-config",
        callback=_print_default_config,
        is_eager=True,
        help="Print the default configuration as YAML and exit.",
    ),
) -> None:
    """Print text statistics and the requested readability score(s)."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    cfg = _load_config(config)

    try:
        text = load_text(input_path, encoding=cfg.encoding)
    except TextLoadError as exc:
        typer.echo(format_load_failure(str(exc)))
        return

    stats = extract_statistics(text, sentence_counting=cfg.sentence_counting)
    for line in format_statistics(stats):
        typer.echo(line)

    selector = formula or cfg.default_formula
    if selector is None:
        typer.echo(PROMPT)
        selector = _read_selector()
    LOGGER.debug("Selected formula: %r", selector)

    try:
        formulas = resolve_selector(selector)
    except UnsupportedFormulaError as exc:
        typer.echo(format_unsupported(exc.selector, str(exc)))
        return

    results: List[ScoreResult] = []
    for item in formulas:
        try:
            result = evaluate(item, stats)
        except ScoreOutOfRangeError as exc:
            # Reported in place of the score line; the remaining formulas still run.
            LOGGER.debug("No approximate age for %s", item.value)
            name = exc.name or item.value
            typer.echo(format_unavailable(name, exc.score, exc.detail))
            continue
        results.append(result)
        typer.echo(format_score(result))

    if selector == ALL_SELECTOR and len(results) == len(formulas):
        typer.echo("")
        typer.echo(format_average(average_age(results)))


def main() -> None:
    app()


def _load_config(path: Path | None) -> ReadabilityConfig:
    """Load the YAML config, surfacing problems as CLI usage errors."""
    try:
        return load_config(path)
    except (OSError, ValueError, TypeError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _read_selector() -> str:
    """Read the first whitespace-delimited token from one line of stdin."""
    tokens = sys.stdin.readline().split()
    return tokens[0] if tokens else ""


if __name__ == "__main__":
    main()
