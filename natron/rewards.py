import logging

from natron.activity import HABIT_COMPLETED, TASK_COMPLETED, TASK_UNCOMPLETED
from natron.attributes import FINANCEIRO
from natron.config import settings
from natron.xp import XpLedger, XpResult

logger = logging.getLogger(__name__)

COMPLETED = "completed"
PENDING = "pending"
INCOME = "entrada"

INVESTMENT_CATEGORIES = frozenset({"investimento", "investimentos", "investimientos"})


def is_investment(category: str | None) -> bool:
    return (category or "").lower() in INVESTMENT_CATEGORIES


class RewardPolicy:
    """Decides which habit, task and transaction events move XP.

    Habits tied to FINANCEIRO never award XP; financial XP only comes from
    income recorded under an investment category.
    """

    def __init__(self, ledger: XpLedger | None = None, investment_reward: int | None = None):
        self._ledger = ledger or XpLedger()
        self._activity = self._ledger.activity
        if investment_reward is None:
            investment_reward = settings.investment_xp_reward
        self._investment_reward = investment_reward

    def habit_toggled(
        self, user_id: str, attribute: str, xp_value: float, completed: bool, title: str = ""
    ) -> XpResult | None:
        if completed:
            self._activity.log(user_id, HABIT_COMPLETED, f"Hábito concluído: {title}")
        if attribute == FINANCEIRO:
            return None
        if completed:
            return self._ledger.add_xp(user_id, attribute, xp_value)
        return self._ledger.remove_xp(user_id, attribute, xp_value)

    def task_status_changed(
        self,
        user_id: str,
        attribute: str,
        xp_value: float,
        previous_status: str | None,
        new_status: str,
        title: str = "",
    ) -> XpResult | None:
        if new_status == COMPLETED and previous_status != COMPLETED:
            self._activity.log(user_id, TASK_COMPLETED, f"Tarefa concluída: {title}")
            return self._ledger.add_xp(user_id, attribute, xp_value)
        if new_status == PENDING and previous_status == COMPLETED:
            self._activity.log(user_id, TASK_UNCOMPLETED, f"Tarefa desmarcada: {title}")
            return self._ledger.remove_xp(user_id, attribute, xp_value)
        return None

    def task_deleted(self, user_id: str, attribute: str, xp_value: float, status: str) -> XpResult | None:
        if status != COMPLETED:
            return None
        logger.info("[RewardPolicy] completed task deleted, reverting %s XP for %s", xp_value, user_id)
        return self._ledger.remove_xp(user_id, attribute, xp_value)

    def transaction_created(self, user_id: str, type: str, category: str | None) -> XpResult | None:
        if type != INCOME or not is_investment(category):
            return None
        return self._ledger.add_xp(user_id, FINANCEIRO, self._investment_reward)

    def transaction_deleted(self, user_id: str, category: str | None) -> XpResult | None:
        if not is_investment(category):
            return None
        return self._ledger.remove_xp(user_id, FINANCEIRO, self._investment_reward)
