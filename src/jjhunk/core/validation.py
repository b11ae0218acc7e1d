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

from jjhunk.core.exceptions import JJError
from jjhunk.core.jj_interface.interface import JJInterface


def validate_jj_repository(jj_interface: JJInterface) -> str:
    """Returns the workspace root, or raises when not inside a jj repository."""
    root = jj_interface.run_jj_text_out(["root"])
    if root is None or not root.strip():
        raise JJError(
            "Not inside a jj repository",
            "Run jj-hunk from a jj workspace or pass --repo",
        )
    return root.strip()
