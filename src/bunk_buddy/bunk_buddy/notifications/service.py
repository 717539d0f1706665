from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import optional_text, require_bool, require_choice, require_non_empty
from ..core.enums import NotificationType
from .model import Notification
from .repository import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, notifications: NotificationRepository):
        self._notifications = notifications

    def list_for_user(self, user_id: str) -> Sequence[Notification]:
        return self._notifications.list_by_user(user_id)

    def unread(self, user_id: str) -> Sequence[Notification]:
        return self._notifications.list_unread(user_id)

    def notify(
        self,
        *,
        user_id: str,
        title: str,
        message: str,
        type: Any,
        read: Optional[bool] = None,
        related_entity_id: Optional[str] = None,
        related_entity_type: Optional[str] = None,
    ) -> Notification:
        return self._notifications.create(
            user_id=user_id,
            title=require_non_empty(title, "Title"),
            message=require_non_empty(message, "Message"),
            type=require_choice(type, NotificationType, "Type"),
            read=require_bool(read, "Read") if read is not None else None,
            related_entity_id=optional_text(related_entity_id, "Related entity id"),
            related_entity_type=optional_text(related_entity_type, "Related entity type"),
        )

    def mark_read(self, notification_id: str) -> bool:
        return self._notifications.mark_read(notification_id)

    def mark_all_read(self, user_id: str) -> int:
        marked = 0
        for n in self._notifications.list_unread(user_id):
            if self._notifications.mark_read(n.id):
                marked += 1
        if marked:
            logger.info("Marked %d notifications read for user %s", marked, user_id)
        return marked
