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

"""
Logging setup for the gutterdiff CLI.

Console output goes through rich, and every run also gets a DEBUG level
log file under the platform user log directory.
"""

import contextlib
from datetime import datetime
from pathlib import Path
from time import perf_counter

from loguru import logger
from rich.console import Console

from gutterdiff.constants import LOG_DIR

console = Console(stderr=True)


def setup_logger(command_name: str, debug: bool = False, silent: bool = False) -> Path:
    """
    Set up loguru sinks for a command.

    Args:
        command_name: name of the command being executed
        debug: show DEBUG messages on the console
        silent: do not log to the console at all

    Returns:
        Path to the log file
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    logfile = LOG_DIR / f"{command_name}_{timestamp}.log"

    # Clear existing sinks so we don't double-log across runs
    logger.remove()

    if not silent:
        logger.add(
            lambda msg: console.print(msg.record["message"]),
            level="DEBUG" if debug else "INFO",
            format="{message}",
            catch=True,
        )

    logger.add(
        logfile,
        level="DEBUG",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}",
        rotation="5 MB",
        retention="7 days",
        catch=True,
    )

    logger.debug(f"Initialized logger for {command_name} -> {logfile}")
    return logfile


@contextlib.contextmanager
def time_block(block_name: str):
    """
    A context manager to time the execution of a code block and log the result.
    """

    logger.debug(f"Starting {block_name}")
    start_time = perf_counter()

    try:
        yield
    finally:
        duration_ms = int((perf_counter() - start_time) * 1000)
        logger.debug(f"Finished {block_name}. Timing(ms)={duration_ms}")
