"""
Utility functions and helpers
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

logger = logging.getLogger(__name__)

def parse_db_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    """Parse a SQLite CURRENT_TIMESTAMP value ("YYYY-MM-DD HH:MM:SS") as an aware UTC datetime"""
    if value is None or isinstance(value, datetime):
        return value

    try:
        # Handle ISO format with 'Z' (UTC)
        if value.endswith('Z'):
            value = value.replace('Z', '+00:00')

        parsed = datetime.fromisoformat(value)

        # Stored values are UTC without an offset
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        return parsed.astimezone(timezone.utc)

    except ValueError as e:
        logger.warning(f"Failed to parse timestamp '{value}': {e}")
        return None


def clean_filters(**filters: Optional[str]) -> Dict[str, Any]:
    """Keep only non-empty filter values"""
    return {name: value for name, value in filters.items() if value}
