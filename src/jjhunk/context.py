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

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from jjhunk.core.jj_commands.jj_commands import JJCommands
from jjhunk.core.jj_interface.interface import JJInterface
from jjhunk.core.jj_interface.SubprocessJJInterface import SubprocessJJInterface


@dataclass
class GlobalConfig:
    jj_binary: str = "jj"
    list_format: Literal["json", "yaml", "text"] = "json"
    binary_mode: Literal["skip", "mark", "include"] = "mark"
    verbose: bool = False
    silent: bool = False

    descriptions = {
        "jj_binary": "Name or path of the jj executable",
        "list_format": "Default output format of the list command",
        "binary_mode": "How the list command treats binary files",
        "verbose": "Enable verbose logging output",
        "silent": "Do not output any log text to the console",
    }


@dataclass(frozen=True)
class GlobalContext:
    repo_path: Path
    jj_interface: JJInterface
    jj_commands: JJCommands
    config: GlobalConfig

    @classmethod
    def from_global_config(cls, config: GlobalConfig, repo_path: Path):
        jj_interface = SubprocessJJInterface(repo_path, config.jj_binary)
        jj_commands = JJCommands(jj_interface)

        return GlobalContext(repo_path, jj_interface, jj_commands, config)
