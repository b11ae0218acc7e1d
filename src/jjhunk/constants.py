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

from pathlib import Path

from platformdirs import user_config_dir, user_log_path

APP_NAME = "jj-hunk"
ENV_APP_PREFIX = "JJHUNK_"
LOG_DIR = Path(user_log_path(appname=APP_NAME))

CONFIG_FILENAME = "jjhunkconfig.toml"

GLOBAL_CONFIG_FILE = Path(user_config_dir(APP_NAME)) / CONFIG_FILENAME
LOCAL_CONFIG_FILE = Path(CONFIG_FILENAME)

# set by split/commit/squash; jj hands it down to `select`
SELECTION_ENV_VAR = "JJ_HUNK_SELECTION"
# file jj drops into the right-hand directory of a diff-editor session
JJ_INSTRUCTIONS_FILE = "JJ-INSTRUCTIONS"

HUNK_ID_PREFIX = "hunk-"
HUNK_ID_ALIAS_PREFIXES = ("id:", "sha:", "sha256:")
CONTEXT_LINES = 3
