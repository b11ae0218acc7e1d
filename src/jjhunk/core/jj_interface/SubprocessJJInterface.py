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

import subprocess
from pathlib import Path

from loguru import logger

from jjhunk.core.exceptions import jj_not_found

from .interface import JJInterface


class SubprocessJJInterface(JJInterface):
    def __init__(self, repo_path: str | Path | None = None, jj_binary: str = "jj") -> None:
        self.repo_path = Path(repo_path) if repo_path is not None else Path(".")
        self.jj_binary = jj_binary

    def run_jj_text_out(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> str | None:
        result = self.run_jj_text(args, env, cwd)
        return result.stdout if result else None

    def run_jj_binary_out(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> bytes | None:
        result = self.run_jj_binary(args, env, cwd)
        return result.stdout if result else None

    def run_jj_text(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> subprocess.CompletedProcess[str] | None:
        effective_cwd = str(cwd) if cwd is not None else str(self.repo_path)
        cmd = [self.jj_binary] + args
        logger.debug(f"Running jj text command: {' '.join(cmd)} cwd={effective_cwd}")
        try:
            result = subprocess.run(
                cmd,
                text=True,
                encoding="utf-8",
                errors="replace",
                capture_output=True,
                check=True,
                env=env,
                cwd=effective_cwd,
            )
        except FileNotFoundError as e:
            raise jj_not_found(self.jj_binary) from e
        except subprocess.CalledProcessError as e:
            logger.warning(
                f"jj text command failed: {' '.join(e.cmd)} code={e.returncode} stderr={e.stderr}"
            )
            return None

        if result.stdout:
            logger.debug(
                f"jj stdout (text): {result.stdout[:2000]}"
                + ("...(truncated)" if len(result.stdout) > 2000 else "")
            )
        if result.stderr:
            logger.debug(
                f"jj stderr (text): {result.stderr[:2000]}"
                + ("...(truncated)" if len(result.stderr) > 2000 else "")
            )
        logger.debug(f"jj returncode: {result.returncode}")
        return result

    def run_jj_binary(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> subprocess.CompletedProcess[bytes] | None:
        effective_cwd = str(cwd) if cwd is not None else str(self.repo_path)
        cmd = [self.jj_binary] + args
        logger.debug(f"Running jj binary command: {' '.join(cmd)} cwd={effective_cwd}")
        try:
            result = subprocess.run(
                cmd,
                text=False,
                capture_output=True,
                check=True,
                env=env,
                cwd=effective_cwd,
            )
        except FileNotFoundError as e:
            raise jj_not_found(self.jj_binary) from e
        except subprocess.CalledProcessError as e:
            logger.warning(
                f"jj binary command failed: {' '.join(e.cmd)} code={e.returncode} stderr={e.stderr.decode('utf-8', errors='ignore')}"
            )
            return None

        if result.stdout:
            logger.debug(f"jj stdout (binary length): {len(result.stdout)} bytes")
        if result.stderr:
            logger.debug(
                f"jj stderr (binary): {result.stderr[:2000]!r}"
                + ("...(truncated)" if len(result.stderr) > 2000 else "")
            )
        logger.debug(f"jj returncode: {result.returncode}")
        return result

    def run_jj_passthrough(
        self,
        args: list[str],
        env: dict | None = None,
        cwd: str | Path | None = None,
    ) -> int:
        effective_cwd = str(cwd) if cwd is not None else str(self.repo_path)
        cmd = [self.jj_binary] + args
        logger.debug(f"Running jj command: {' '.join(cmd)} cwd={effective_cwd}")
        try:
            result = subprocess.run(cmd, env=env, cwd=effective_cwd)
        except FileNotFoundError as e:
            raise jj_not_found(self.jj_binary) from e

        logger.debug(f"jj returncode: {result.returncode}")
        return result.returncode
