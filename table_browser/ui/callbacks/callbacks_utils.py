from __future__ import annotations

import logging
from typing import Optional

from table_browser.core.table_state import TableState

logger = logging.getLogger(__name__)


def try_parse_table_state(data: object) -> Optional[TableState]:
    if not isinstance(data, dict) or not data:
        return None
    try:
        return TableState.from_dict(data)
    except (TypeError, ValueError):
        logger.exception("Invalid table-state: %r", data)
        return None
