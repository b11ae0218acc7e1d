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

"""
Logging configuration for the jj-hunk CLI application.

Console output goes to stderr through rich so stdout stays clean for the
listing output that other tools parse. Every run also writes a DEBUG log
file under the user log directory.
"""

from datetime import datetime
from pathlib import Path

from loguru import logger
from rich.console import Console

from jjhunk.constants import LOG_DIR


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path:
    """
    Set up logging for a command.

    Args:
        command_name: Name of the command being executed
        debug: Enable debug output on the console
        silent: Suppress all console output (the log file is still written)

    Returns:
        Path to the log file
    """
    # Clear existing sinks to avoid duplicates
    logger.remove()

    console = Console(stderr=True)

    def console_sink(message):
        text = message.record["message"].rstrip("\n")
        level = message.record["level"].name
        if level in ("ERROR", "CRITICAL"):
            console.print(text, style="red", markup=False, highlight=False)
        elif level == "WARNING":
            console.print(text, style="yellow", markup=False, highlight=False)
        else:
            console.print(text, markup=False, highlight=False)

    if not silent:
        logger.add(
            console_sink,
            level="DEBUG" if debug else "INFO",
            format="{message}",
            catch=True,
        )

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logfile = LOG_DIR / f"jjhunk_{command_name}_{timestamp}.log"

    logger.add(
        logfile,
        level="DEBUG",
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>",
        rotation="10 MB",
        retention="14 days",
        compression="gz",
        catch=True,
        backtrace=True,
        diagnose=False,
    )

    logger.bind(command=command_name, logfile=str(logfile)).debug("Logger initialized")

    return logfile
