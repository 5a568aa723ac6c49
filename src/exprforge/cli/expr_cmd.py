"""Expression CLI commands: eval, render and validate."""

import json
from pathlib import Path
from typing import Any

import click
import yaml

from exprforge.expression import Expression, render_value
from exprforge.lexer import LexerError
from exprforge.parser import ParseError, parse
from exprforge.registry import FunctionRegistry


def _parse_or_exit(registry: FunctionRegistry, source: str) -> Expression:
    try:
        return parse(source, registry)
    except (LexerError, ParseError) as e:
        click.echo(click.style(f"Invalid expression: {e}", fg="red"), err=True)
        raise SystemExit(1)


def _load_state(path: Path | None) -> Any:
    """Load a YAML or JSON state file; no file means an empty state."""
    if path is None:
        return {}
    with open(path) as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            click.echo(click.style(f"Invalid state file {path}: {e}", fg="red"), err=True)
            raise SystemExit(1)


@click.command("eval")
@click.argument("source")
@click.option(
    "--state",
    "state_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML or JSON file with the state to evaluate against.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the value as JSON.",
)
@click.pass_obj
def eval_cmd(registry: FunctionRegistry, source: str, state_path: Path | None, as_json: bool):
    """Evaluate an expression against a state file."""
    expression = _parse_or_exit(registry, source)
    value, error = expression.try_evaluate(_load_state(state_path))

    if error is not None:
        click.echo(click.style(f"Error: {error}", fg="red"), err=True)
        raise SystemExit(1)

    if as_json:
        click.echo(json.dumps(value, default=str))
    else:
        click.echo(render_value(value))


@click.command()
@click.argument("source")
@click.pass_obj
def render(registry: FunctionRegistry, source: str):
    """Print the canonical form of an expression."""
    click.echo(str(_parse_or_exit(registry, source)))


@click.command()
@click.argument("source")
@click.pass_obj
def validate(registry: FunctionRegistry, source: str):
    """Validate an expression without evaluating it."""
    expression = _parse_or_exit(registry, source)
    click.echo(
        click.style("Valid", fg="green", bold=True)
        + f" ({expression.return_type.value}"
        + ("" if expression.is_pure else ", impure")
        + ")"
    )
