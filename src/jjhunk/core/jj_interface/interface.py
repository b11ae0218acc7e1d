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

from abc import ABC, abstractmethod
from pathlib import Path
from subprocess import CompletedProcess


class JJInterface(ABC):
    """
    Abstract interface for running jj commands.
    This abstracts away the details of how jj commands are executed.
    """

    @abstractmethod
    def run_jj_text_out(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> str | None:
        """Run a jj command with text output. Returns None on error."""

    @abstractmethod
    def run_jj_binary_out(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> bytes | None:
        """Run a jj command with binary output. Returns None on error."""

    @abstractmethod
    def run_jj_text(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> CompletedProcess[str] | None:
        """Run a jj command with text response output. Returns None on error."""

    @abstractmethod
    def run_jj_binary(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> CompletedProcess[bytes] | None:
        """Run a jj command with binary response output. Returns None on error."""

    @abstractmethod
    def run_jj_passthrough(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> int:
        """Run a jj command attached to the terminal. Returns the exit code."""
