import logging
from dataclasses import asdict, dataclass
from datetime import date

from natron.amounts import extract_amount
from natron.dates import extract_date
from natron.merchants import classify

logger = logging.getLogger(__name__)


@dataclass
class ParsedReceipt:
    amount: float | None
    date: date | None
    establishment: str | None
    category: str
    subcategory: str
    category_type: str
    description: str | None = None

    @property
    def missing_fields(self) -> list[str]:
        """Fields the user has to fill in before the transaction can be saved."""
        return [name for name in ("amount", "date") if getattr(self, name) is None]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["date"] = self.date.isoformat() if self.date else None
        return data


def parse_receipt(text: str) -> ParsedReceipt:
    amount = extract_amount(text)
    receipt_date = extract_date(text)
    merchant = classify(text)

    receipt = ParsedReceipt(
        amount=amount,
        date=receipt_date,
        establishment=merchant.establishment,
        category=merchant.category,
        subcategory=merchant.subcategory,
        category_type=merchant.category_type,
        description=merchant.establishment,
    )
    logger.debug(
        "[parse_receipt] amount=%s date=%s category=%s/%s (%s)",
        amount,
        receipt_date,
        receipt.category,
        receipt.subcategory,
        receipt.establishment or "no establishment",
    )
    return receipt
