# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 jj-hunk
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
#  * along with this program; if not, see <https://www.gnu.org/licenses/>.
#  */
# -----------------------------------------------------------------------------

import sys
from pathlib import Path

import typer
from colorama import init
from dotenv import load_dotenv
from loguru import logger

from jjhunk.commands import commit, list_hunks, select, split, squash
from jjhunk.constants import APP_NAME
from jjhunk.context import GlobalConfig, GlobalContext
from jjhunk.core.config.config_loader import ConfigLoader
from jjhunk.core.exceptions import handle_jjhunk_exception
from jjhunk.core.logging.logging import setup_logger
from jjhunk.core.validation import validate_jj_repository
from jjhunk.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    setup_signal_handlers,
    version_callback,
)

# Initialize colorama (colored output in terminal)
init(autoreset=True)

# main cli app
app = typer.Typer(
    help=f"{APP_NAME}: Programmatic hunk selection for jj",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

# Main cli commands
app.command(name="list")(list_hunks.main)
app.command(name="select")(select.main)
app.command(name="split")(split.main)
app.command(name="commit")(commit.main)
app.command(name="squash")(squash.main)

# which commands do not require a global context
# select is invoked by jj itself, inside the diff editor directories
no_context_commands = {"select"}


def load_global_config(custom_config_path: str | None, **input_args):
    # input args are the "runtime overrides" for configs
    config_args = {}

    for key, item in input_args.items():
        if item is not None:
            config_args[key] = item

    return ConfigLoader.get_full_config(
        GlobalConfig,
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
    log_path: bool = typer.Option(
        False,
        "--log-dir",
        "-LD",
        callback=get_log_dir_callback,
        is_eager=True,
        help="Show log path (where logs for jj-hunk live) and exit",
    ),
    repo_path: str = typer.Option(
        ".",
        "--repo",
        help="Path to the jj repository to operate on.",
    ),
    custom_config: str | None = typer.Option(
        None,
        "--custom-config",
        help="Path to a custom config file",
    ),
    verbose: bool | None = typer.Option(
        None,
        "--verbose",
        "-v",
        help=GlobalConfig.descriptions["verbose"],
    ),
    silent: bool | None = typer.Option(
        None,
        "--silent",
        "-s",
        help=GlobalConfig.descriptions["silent"],
    ),
) -> None:
    """
    Global setup callback. Initialize global context/config used by commands
    """
    with handle_jjhunk_exception(exit_on_fail=True):
        # conditions to not create global context
        if ctx.invoked_subcommand is None:
            print(ctx.get_help())
            raise typer.Exit()

        # skip --help in subcommands
        if any(arg in ctx.help_option_names for arg in sys.argv):
            return

        # initial setup of logger, will be updated once the config is loaded
        setup_logger(
            ctx.invoked_subcommand, debug=verbose or False, silent=silent or False
        )

        if ctx.invoked_subcommand in no_context_commands:
            return

        config, used_config_sources, used_default = load_global_config(
            custom_config,
            verbose=verbose,
            silent=silent,
        )

        setup_logger(ctx.invoked_subcommand, debug=config.verbose, silent=config.silent)

        logger.debug(f"Used {used_config_sources} to build global context.")
        global_context = GlobalContext.from_global_config(config, Path(repo_path))
        # fail immediately if we arent in a valid jj repo as we expect one
        validate_jj_repository(global_context.jj_interface)

        setup_signal_handlers()

        ctx.obj = global_context


def run_app():
    """Run the application with global exception handling."""
    # force stdout to be utf8
    ensure_utf8_output()
    # load any .env files (config values possibly set through env)
    load_dotenv()
    # launch cli
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run_app()
