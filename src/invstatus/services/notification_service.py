from __future__ import annotations

import logging

from invstatus.domain.activity_logs import categorize_activity_logs
from invstatus.domain.models import Notification, NotificationSection
from invstatus.domain.notifications import categorize_notifications, count_unread

log = logging.getLogger("invstatus.notifications")


class NotificationService:
    def __init__(self, repo):
        self.repo = repo

    def list_notifications(self, include_dismissed: bool = True) -> list[Notification]:
        items = self.repo.list_notifications()
        if include_dismissed:
            return items
        return [n for n in items if n.status != "dismissed"]

    def list_activity_logs(self) -> list[Notification]:
        return [n for n in self.repo.list_notifications() if n.is_activity_log]

    def unread_count(self) -> int:
        return count_unread(self.repo.list_notifications())

    def notification_sections(self, include_dismissed: bool = True) -> list[NotificationSection]:
        sections = categorize_notifications(self.list_notifications(include_dismissed))
        log.info(
            "notification_sections %s",
            " ".join(f"{s.category}={len(s.notifications)}/{s.unread_count}" for s in sections) or "empty",
        )
        return sections

    def activity_sections(self) -> list[NotificationSection]:
        sections = categorize_activity_logs(self.list_activity_logs())
        log.info(
            "activity_sections %s",
            " ".join(f"{s.category}={len(s.notifications)}/{s.unread_count}" for s in sections) or "empty",
        )
        return sections
