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

from loguru import logger

from jjhunk.core.logging import logging as jjhunk_logging
from jjhunk.core.logging.utils import log_file_entries, time_block


def test_setup_logger_writes_log_file(tmp_path, monkeypatch):
    monkeypatch.setattr(jjhunk_logging, "LOG_DIR", tmp_path / "logs")

    logfile = jjhunk_logging.setup_logger("list", debug=True, silent=True)
    logger.debug("hello from the test")
    logger.remove()

    assert logfile.parent == tmp_path / "logs"
    assert logfile.name.startswith("jjhunk_list_")
    assert "hello from the test" in logfile.read_text(encoding="utf-8")


def test_time_block_logs_duration():
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        with time_block("unit"):
            pass
        log_file_entries("step", [])
    finally:
        logger.remove(handler_id)

    text = "".join(messages)
    assert "Starting unit" in text
    assert "Finished unit" in text
    assert "step: files=0 hunks=0 binary=0" in text
