import logging

from natron.exceptions import StoreError
from natron.store import UserStore

logger = logging.getLogger(__name__)

RANK_UP = "rank_up"
RANK_CHANGE = "rank_change"
TASK_COMPLETED = "task_completed"
TASK_UNCOMPLETED = "task_uncompleted"
HABIT_COMPLETED = "habit_completed"


class ActivityLog:
    """Activity feed writer. A failed write is logged, never raised."""

    def __init__(self, store: UserStore | None = None):
        self._store = store or UserStore()

    def log(self, user_id: str, type: str, description: str) -> str | None:
        try:
            return self._store.add_activity(user_id, type, description)
        except StoreError as e:
            logger.error("[ActivityLog] failed to log %s for %s: %s", type, user_id, e)
            return None

    def recent(self, user_id: str, limit: int = 20) -> list[dict]:
        return self._store.get_activities(user_id, limit=limit)
