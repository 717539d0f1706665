from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import NotificationType


@dataclass(frozen=True)
class Notification:
    """Domain entity: an alert shown in the notification panel.

    Once `read` is True it stays True.
    """

    id: str
    user_id: str
    title: str
    message: str
    type: NotificationType
    created_at: datetime
    read: bool = False
    related_entity_id: Optional[str] = None
    related_entity_type: Optional[str] = None


@dataclass(frozen=True)
class NotificationPatch:
    # `read` is left out: only mark_read may change it, and never back to False.
    title: Optional[str] = None
    message: Optional[str] = None
    type: Optional[NotificationType] = None
