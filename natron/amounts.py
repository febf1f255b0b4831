import re

MAX_AMOUNT = 100_000

_NUMBER = r'(\d+[.,]\d{2})'

# Ordered by specificity: the first pattern whose first match is in range wins.
_AMOUNT_PATTERNS = [
    # Priority 1: explicit R$ prefix ("R$ 19,13", "R$19.13")
    re.compile(r'R\$\s*' + _NUMBER, re.IGNORECASE),
    # Priority 2: labelled values ("Valor: 19,13", "Total: R$ 19,13", "Pagamento 19.13")
    re.compile(r'valor[:\s]+R?\$?\s*' + _NUMBER, re.IGNORECASE),
    re.compile(r'total[:\s]+R?\$?\s*' + _NUMBER, re.IGNORECASE),
    re.compile(r'pagamento[:\s]+R?\$?\s*' + _NUMBER, re.IGNORECASE),
    # Priority 3: suffixed ("19,13 reais")
    re.compile(_NUMBER + r'\s*reais?', re.IGNORECASE),
    # Priority 4: a two-decimal number alone on its own line
    re.compile(r'^' + _NUMBER + r'$', re.MULTILINE),
    # Priority 5: any two-decimal number (last resort)
    re.compile(r'\b(\d{1,4}[.,]\d{2})\b'),
]


def _to_float(raw: str) -> float:
    # Only the decimal comma is normalised; thousands separators are not interpreted.
    return float(raw.replace(',', '.', 1))


def extract_amount(text: str) -> float | None:
    if not text:
        return None

    for pattern in _AMOUNT_PATTERNS:
        m = pattern.search(text)
        if not m:
            continue
        amount = _to_float(m.group(1))
        if 0 < amount < MAX_AMOUNT:
            return amount

    return None
