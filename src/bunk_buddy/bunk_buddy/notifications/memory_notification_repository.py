from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import NotificationType
from ..database.connection import MemoryDatabase
from ..database.memory_base import apply_patch
from .model import Notification, NotificationPatch
from .repository import NotificationRepository


class InMemoryNotificationRepository(NotificationRepository):
    def __init__(self, db: MemoryDatabase):
        self._db = db

    def list_by_user(self, user_id: str) -> Sequence[Notification]:
        items = [n for n in self._db.notifications if n.user_id == user_id]
        items.sort(key=lambda n: n.created_at, reverse=True)
        return items

    def list_unread(self, user_id: str) -> Sequence[Notification]:
        return [n for n in self._db.notifications if n.user_id == user_id and not n.read]

    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        return self._db.notifications.get(notification_id)

    def create(
        self,
        *,
        user_id: str,
        title: str,
        message: str,
        type: NotificationType,
        read: Optional[bool] = None,
        related_entity_id: Optional[str] = None,
        related_entity_type: Optional[str] = None,
    ) -> Notification:
        notification = Notification(
            id=self._db.next_id(),
            user_id=user_id,
            title=title,
            message=message,
            type=type,
            read=bool(read) if read is not None else False,
            related_entity_id=related_entity_id,
            related_entity_type=related_entity_type,
            created_at=self._db.now(),
        )
        return self._db.notifications.insert(notification)

    def update(self, notification_id: str, patch: NotificationPatch) -> Optional[Notification]:
        with self._db.notifications.lock:
            current = self._db.notifications.get(notification_id)
            if not current:
                return None
            return self._db.notifications.replace(apply_patch(current, patch))

    def mark_read(self, notification_id: str) -> bool:
        with self._db.notifications.lock:
            current = self._db.notifications.get(notification_id)
            if not current:
                return False
            if not current.read:
                self._db.notifications.replace(replace(current, read=True))
            return True

    def delete(self, notification_id: str) -> bool:
        return self._db.notifications.remove(notification_id)
