import re
from datetime import date

MONTHS = {
    "janeiro": 1, "jan": 1,
    "fevereiro": 2, "fev": 2,
    "março": 3, "mar": 3,
    "abril": 4, "abr": 4,
    "maio": 5, "mai": 5,
    "junho": 6, "jun": 6,
    "julho": 7, "jul": 7,
    "agosto": 8, "ago": 8,
    "setembro": 9, "set": 9,
    "outubro": 10, "out": 10,
    "novembro": 11, "nov": 11,
    "dezembro": 12, "dez": 12,
}

# Mercado Pago: "Segunda-feira, 29 de dezembro de 2025, às 10:44:50"
# Nubank: "15 de janeiro de 2025"
_LONG_FORM_RE = re.compile(r'(\d{1,2})\s+de\s+(\w+)\s+de\s+(\d{4})')
_ISO_RE = re.compile(r'(\d{4})[-/](\d{2})[-/](\d{2})')
_DMY_RE = re.compile(r'(\d{2})/(\d{2})/(\d{4})')
_DMY_SHORT_RE = re.compile(r'(\d{2})/(\d{2})/(\d{2})')
_LABELLED_RE = re.compile(r'data[:\s]+(\d{2})/(\d{2})/(\d{4})')


def _build(year: int, month: int | None, day: int) -> date | None:
    if month is None:
        return None
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _long_form(m: re.Match) -> date | None:
    return _build(int(m.group(3)), MONTHS.get(m.group(2)), int(m.group(1)))


def _iso(m: re.Match) -> date | None:
    return _build(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def _day_month_year(m: re.Match) -> date | None:
    return _build(int(m.group(3)), int(m.group(2)), int(m.group(1)))


def _day_month_short_year(m: re.Match) -> date | None:
    return _build(2000 + int(m.group(3)), int(m.group(2)), int(m.group(1)))


# Ordered by specificity: first pattern that yields a real calendar date wins.
_DATE_PATTERNS = [
    (_LONG_FORM_RE, _long_form),
    (_ISO_RE, _iso),
    (_DMY_RE, _day_month_year),
    (_DMY_SHORT_RE, _day_month_short_year),
    (_LABELLED_RE, _day_month_year),
]


def extract_date(text: str) -> date | None:
    if not text:
        return None

    text_lower = text.lower()
    for pattern, build in _DATE_PATTERNS:
        m = pattern.search(text_lower)
        if not m:
            continue
        parsed = build(m)
        if parsed is not None:
            return parsed

    return None
