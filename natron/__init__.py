from natron.activity import ActivityLog
from natron.amounts import extract_amount
from natron.config import XP_CONVERSION_RATE, NatronSettings, settings
from natron.dates import extract_date
from natron.exceptions import NatronError, StoreError, UserExistsError
from natron.merchants import Classification, classify
from natron.ranks import RANKS, RankProgress, rank_for, rank_index
from natron.receipts import ParsedReceipt, parse_receipt
from natron.rewards import RewardPolicy
from natron.store import UserStore
from natron.xp import XpLedger, XpResult

__all__ = [
    "ActivityLog",
    "extract_amount",
    "extract_date",
    "classify",
    "Classification",
    "parse_receipt",
    "ParsedReceipt",
    "RANKS",
    "RankProgress",
    "rank_for",
    "rank_index",
    "UserStore",
    "XpLedger",
    "XpResult",
    "XP_CONVERSION_RATE",
    "RewardPolicy",
    "NatronSettings",
    "settings",
    "NatronError",
    "StoreError",
    "UserExistsError",
]
