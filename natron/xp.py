import logging
from dataclasses import dataclass

from natron.activity import RANK_CHANGE, RANK_UP, ActivityLog
from natron.attributes import ATTRIBUTE_FIELDS, DEFAULT_ATTRIBUTE
from natron.config import settings
from natron.locks import user_lock
from natron.ranks import rank_for
from natron.store import UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class XpResult:
    rank: str
    new_total: float
    previous_rank: str

    @property
    def rank_changed(self) -> bool:
        return self.rank != self.previous_rank


def resolve_attribute(category: str) -> str:
    """Unknown categories fall back to PRODUTIVIDADE instead of being rejected."""
    if category in ATTRIBUTE_FIELDS:
        return category
    logger.warning("[XpLedger] unknown category %r, using %s", category, DEFAULT_ATTRIBUTE)
    return DEFAULT_ATTRIBUTE


class XpLedger:
    def __init__(
        self,
        store: UserStore | None = None,
        activity: ActivityLog | None = None,
        conversion_rate: float | None = None,
    ):
        self._store = store or UserStore()
        self._activity = activity or ActivityLog(self._store)
        if conversion_rate is None:
            conversion_rate = settings.xp_conversion_rate
        self._conversion_rate = conversion_rate

    @property
    def conversion_rate(self) -> float:
        return self._conversion_rate

    @property
    def activity(self) -> ActivityLog:
        return self._activity

    def add_xp(self, user_id: str, category: str, amount: float) -> XpResult | None:
        return self._apply(user_id, category, amount, removing=False)

    def remove_xp(self, user_id: str, category: str, amount: float) -> XpResult | None:
        return self._apply(user_id, category, amount, removing=True)

    def _apply(self, user_id: str, category: str, amount: float, removing: bool) -> XpResult | None:
        field = ATTRIBUTE_FIELDS[resolve_attribute(category)]
        xp_delta = amount * self._conversion_rate

        # Shared with every other ledger and with UserStore.reset_all_xp.
        lock = user_lock(user_id)
        with lock:
            user = self._store.get_user(user_id)
            if user is None:
                logger.warning("[XpLedger] user %s not found, skipping", user_id)
                return None

            current_stat = float(user.get(field) or 0)
            current_total = float(user.get("current_xp") or 0)
            previous_rank = user.get("rank") or ""

            if removing:
                # Each value is floored on its own; they may drift apart if
                # more is removed than was ever added.
                new_stat = max(0.0, current_stat - amount)
                new_total = max(0.0, current_total - xp_delta)
            else:
                new_stat = current_stat + amount
                new_total = current_total + xp_delta

            rank = rank_for(new_total).rank
            self._store.update_user_xp(
                user_id, {field: new_stat, "current_xp": new_total, "rank": rank}
            )

        logger.info(
            "[XpLedger] %s %s %s for %s: total %.1f -> %.1f (%s)",
            "removed" if removing else "added",
            amount,
            field,
            user_id,
            current_total,
            new_total,
            rank,
        )

        result = XpResult(rank=rank, new_total=new_total, previous_rank=previous_rank)
        if result.rank_changed:
            if removing:
                self._activity.log(user_id, RANK_CHANGE, f"Seu rank mudou para {rank}")
            else:
                self._activity.log(user_id, RANK_UP, f"Parabéns! Você alcançou o rank {rank}!")
        return result
