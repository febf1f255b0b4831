from datetime import date

from natron.merchants import ALL_CATEGORIES
from natron.receipts import parse_receipt


def test_parse_full_receipt(mercado_pago_receipt):
    receipt = parse_receipt(mercado_pago_receipt)

    assert receipt.amount == 98.67
    assert receipt.date == date(2025, 12, 29)
    assert receipt.establishment == "Mercado Pago"
    assert receipt.category == "outros"
    assert receipt.subcategory == "pagamento"
    assert receipt.category_type == "variavel"
    assert receipt.description == "Mercado Pago"
    assert receipt.missing_fields == []


def test_unknown_fields_stay_absent():
    receipt = parse_receipt("Comprovante sem dados")

    assert receipt.amount is None
    assert receipt.date is None
    assert receipt.establishment is None
    assert receipt.description is None
    assert receipt.category == "outros"
    assert receipt.subcategory == "outros"
    assert receipt.category_type == "variavel"
    assert receipt.missing_fields == ["amount", "date"]


def test_partial_receipt():
    receipt = parse_receipt("iFood\nTotal: R$ 42,50")

    assert receipt.amount == 42.5
    assert receipt.date is None
    assert receipt.subcategory == "delivery_ifood"
    assert receipt.missing_fields == ["date"]


def test_to_dict_serialises_date():
    data = parse_receipt("Farmacia 10/01/2025 R$ 12,00").to_dict()

    assert data["date"] == "2025-01-10"
    assert data["amount"] == 12.0
    assert data["category"] == "saude"
    assert data["category_type"] == "essencial"


def test_category_is_always_known():
    for text in ("Uber 10/01/2025 R$ 23,90", "Veterinario R$ 150,00", "qualquer coisa", ""):
        assert parse_receipt(text).category in ALL_CATEGORIES
