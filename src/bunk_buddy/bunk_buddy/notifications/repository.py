from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import NotificationType
from .model import Notification, NotificationPatch


class NotificationRepository(Protocol):
    def list_by_user(self, user_id: str) -> Sequence[Notification]:
        """Newest first."""

        raise NotImplementedError

    def list_unread(self, user_id: str) -> Sequence[Notification]:
        raise NotImplementedError

    def get_by_id(self, notification_id: str) -> Optional[Notification]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, notification_id: str, patch: NotificationPatch) -> Optional[Notification]:
        raise NotImplementedError

    def mark_read(self, notification_id: str) -> bool:
        raise NotImplementedError

    def delete(self, notification_id: str) -> bool:
        raise NotImplementedError
