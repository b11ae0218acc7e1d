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
Custom exception hierarchy for the jj-hunk CLI application.

This module defines the exceptions raised by the orchestration layers
(spec parsing, jj invocation, file handling) and the handler the CLI uses
to turn them into a clean error message and exit code. The hunk engine
itself is total over well-formed input and raises none of these.
"""

import contextlib
import sys

import typer
from loguru import logger


class JJHunkError(Exception):
    """
    Base exception for all jj-hunk errors.

    All jj-hunk specific exceptions should inherit from this class
    to enable consistent error handling throughout the application.
    """

    def __init__(self, message: str, details: str | None = None):
        """
        Initialize a JJHunkError.

        Args:
            message: Main error message for the user
            details: Additional technical details for logging
        """
        self.message = message
        self.details = details
        super().__init__(message)


class JJError(JJHunkError):
    """
    Errors related to jj operations.

    Raised when jj commands fail or return output
    that cannot be understood.
    """

    pass


class ValidationError(JJHunkError):
    """
    Input validation errors.

    Raised when user input fails validation checks
    before any hunk processing begins.
    """

    pass


class SelectorError(ValidationError):
    """Raised when a hunk selector is neither an index nor a hunk id."""

    pass


class SpecError(ValidationError):
    """Raised when a selection spec cannot be read or parsed."""

    pass


class ConfigurationError(JJHunkError):
    """
    Configuration-related errors.

    Raised when configuration files are invalid or
    contain incompatible settings.
    """

    pass


class FileSystemError(JJHunkError):
    """
    File system operation errors.

    Raised when file or directory operations fail,
    such as permission issues or missing files.
    """

    pass


# Convenience functions for creating common errors
def jj_not_found(binary: str = "jj") -> JJError:
    """Create a JJError for when jj is not available."""
    return JJError(
        f"jj is not installed or not in PATH ({binary})",
        "Install Jujutsu and ensure it's available in your PATH, or set jj_binary in the config",
    )


def invalid_selector(value: str) -> SelectorError:
    """Create a SelectorError for a malformed hunk selector."""
    return SelectorError(
        f"Invalid hunk selector: {value}",
        "Selectors are hunk indices (e.g. 0) or hunk ids (e.g. hunk-<hex>, sha256:<hex>)",
    )


def invalid_hunk_id(value: str) -> SelectorError:
    """Create a SelectorError for a malformed entry in an ids list."""
    return SelectorError(
        f"Invalid hunk id selector: {value}",
        "Hunk ids are hex digests, optionally prefixed with hunk-, id:, sha: or sha256:",
    )


def spec_file_not_found(path: str) -> SpecError:
    """Create a SpecError for an unreadable spec file."""
    return SpecError(
        f"Failed to read spec file {path}",
        "Please check that the path exists and is readable",
    )


@contextlib.contextmanager
def handle_jjhunk_exception(exit_on_fail: bool = True):
    """
    Reports jj-hunk errors to the user instead of printing a traceback.

    Args:
        exit_on_fail: Exit with code 1 after reporting; otherwise re-raise.
    """
    try:
        yield
    except JJHunkError as e:
        logger.error(f"Error: {e.message}")
        if e.details:
            logger.info(e.details)
        if not exit_on_fail:
            raise
        raise typer.Exit(1)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        raise typer.Exit(130)
