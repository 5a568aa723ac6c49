"""ExprForge CLI entry point."""

import logging

import click

from exprforge.config import ExprForgeConfig, create_registry


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """ExprForge expression engine CLI."""
    config = ExprForgeConfig.from_env()
    logging.basicConfig(level=config.log_level)
    ctx.obj = create_registry(config)


# Register subcommands
from exprforge.cli.expr_cmd import eval_cmd, render, validate  # noqa: E402
from exprforge.cli.functions_cmd import functions  # noqa: E402

cli.add_command(eval_cmd)
cli.add_command(render)
cli.add_command(validate)
cli.add_command(functions)
