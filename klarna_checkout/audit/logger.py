"""
Append-only audit trail for order placements.

Each step of a placement attempt gets an entry with the placement id, the
action, JSON details and a UTC timestamp. Entries are never updated, which
keeps a reliable record of what was sent to Klarna and what came back.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from klarna_checkout.models.records import AuditLog

logger = logging.getLogger("klarna_checkout.audit")


async def log_event(
    session: AsyncSession,
    action: str,
    placement_id: Optional[str] = None,
    details: Optional[dict[str, Any]] = None,
) -> AuditLog:
    """
    Add an audit log entry to the session (flushed with the caller's transaction).

    Args:
        action: What happened (e.g. "payload_built", "order_placed").
        placement_id: The OrderPlacement this event belongs to.
        details: Arbitrary JSON-serializable context.
    """
    entry = AuditLog(
        placement_id=placement_id,
        action=action,
        details=json.dumps(details, default=str) if details else None,
        timestamp=datetime.now(timezone.utc),
    )
    session.add(entry)
    logger.info(
        "AUDIT | placement=%s action=%s | %s",
        placement_id or "-",
        action,
        json.dumps(details, default=str)[:200] if details else "",
    )
    return entry
