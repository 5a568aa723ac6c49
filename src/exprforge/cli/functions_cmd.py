"""Registry CLI command: list registered expression types."""

import click

from exprforge.registry import FunctionRegistry
from exprforge.types import FunctionCategory


@click.command()
@click.option(
    "--category",
    type=click.Choice([c.value for c in FunctionCategory]),
    default=None,
    help="Only list types in this category.",
)
@click.pass_obj
def functions(registry: FunctionRegistry, category: str | None):
    """List registered expression types."""
    docs = registry.export_documentation()["byCategory"]

    for name in sorted(docs):
        if category is not None and name != category:
            continue
        click.echo(click.style(f"{name}:", bold=True))
        for doc in docs[name]:
            click.echo(f"  {doc['name']} -> {doc['returnType']}  {doc['description']}")
