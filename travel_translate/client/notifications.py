# File: travel_translate/client/notifications.py

import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notification:
    kind: str  # "success" | "error"
    message: str


class Notifier:
    """Collects toast notifications for the UI layer to render."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def success(self, message: str):
        logger.info("%s", message)
        self.notifications.append(Notification("success", message))

    def error(self, message: str):
        logger.warning("%s", message)
        self.notifications.append(Notification("error", message))

    @property
    def last(self):
        return self.notifications[-1] if self.notifications else None
