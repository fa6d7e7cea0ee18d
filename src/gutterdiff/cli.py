# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

import importlib.metadata
from pathlib import Path

import typer
from dotenv import load_dotenv
from loguru import logger

from gutterdiff.commands import nav, preview, signs, stage, summary
from gutterdiff.constants import APP_NAME
from gutterdiff.context import GutterConfig, GutterContext
from gutterdiff.core.config.config_loader import ConfigLoader
from gutterdiff.core.exceptions import handle_gutterdiff_exception
from gutterdiff.core.logging.logging import setup_logger

# main cli app
app = typer.Typer(
    help=f"{APP_NAME}: gutter signs, summaries and partial patches from diff hunks",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

app.command(name="summary")(summary.main)
app.command(name="signs")(signs.main)
app.command(name="nav")(nav.main)
app.command(name="preview")(preview.main)
app.command(name="stage")(stage.main)


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        try:
            version = importlib.metadata.version(APP_NAME)
            typer.echo(f"{APP_NAME} version {version}")
        except importlib.metadata.PackageNotFoundError:
            typer.echo(f"{APP_NAME} version: development")
        raise typer.Exit()


def load_config(custom_config_path: str | None, **input_args):
    # input args are the runtime overrides, unset options do not count
    config_args = {key: item for key, item in input_args.items() if item is not None}

    return ConfigLoader.get_full_config(
        GutterConfig,
        config_args,
        custom_config_path=Path(custom_config_path)
        if custom_config_path is not None
        else None,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    custom_config: str | None = typer.Option(
        None, "--custom-config", help="Path to a custom config file"
    ),
    sign_algorithm: str | None = typer.Option(
        None, "--sign-algorithm", help=GutterConfig.descriptions["sign_algorithm"]
    ),
    word_diff: bool | None = typer.Option(
        None, "--word-diff/--no-word-diff", help=GutterConfig.descriptions["word_diff"]
    ),
    file_format: str | None = typer.Option(
        None, "--file-format", help=GutterConfig.descriptions["file_format"]
    ),
    wrap: bool | None = typer.Option(
        None, "--wrap/--no-wrap", help=GutterConfig.descriptions["wrap"]
    ),
    verbose: bool | None = typer.Option(
        None, "--verbose", "-v", help=GutterConfig.descriptions["verbose"]
    ),
    silent: bool | None = typer.Option(
        None, "--silent", help=GutterConfig.descriptions["silent"]
    ),
) -> None:
    """
    Global setup callback. Loads the config and builds the context used by commands.
    """
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    with handle_gutterdiff_exception(exit_on_fail=True):
        loaded = load_config(
            custom_config,
            sign_algorithm=sign_algorithm,
            word_diff=word_diff,
            file_format=file_format,
            wrap=wrap,
            verbose=verbose,
            silent=silent,
        )

        config = loaded.config
        setup_logger(ctx.invoked_subcommand, debug=config.verbose, silent=config.silent)
        logger.debug(f"Used {loaded.sources} to build context.")

        ctx.obj = GutterContext.from_config(config)


def run_app():
    """Run the application."""
    # load any .env files (config values possibly set through env)
    load_dotenv()
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run_app()
