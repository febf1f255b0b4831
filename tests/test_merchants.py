from natron.merchants import (
    ALL_CATEGORIES,
    ESTABLISHMENTS,
    FALLBACK,
    Classification,
    _SORTED_KEYWORDS,
    classify,
)


def test_longest_keyword_wins():
    result = classify("Pagamento via Mercado Pago")
    assert result.category == "outros"
    assert result.subcategory == "pagamento"
    assert result.establishment == "Mercado Pago"
    assert result.category_type == "variavel"


def test_plain_mercado_is_grocery():
    result = classify("MERCADO SAO JOSE LTDA")
    assert result.category == "alimentacao"
    assert result.subcategory == "mercado"
    assert result.category_type == "essencial"


def test_supermercado_preferred_over_mercado():
    assert classify("Supermercado Dia").establishment == "Supermercado"


def test_uber_eats_is_delivery_not_ride():
    result = classify("Pedido Uber Eats #123")
    assert result.category == "alimentacao"
    assert result.subcategory == "delivery_uber"

    ride = classify("Viagem Uber")
    assert ride.category == "transporte"
    assert ride.category_type == "variavel"


def test_fuel_is_essential():
    result = classify("Posto Ipiranga - Gasolina comum")
    assert result.category == "transporte"
    assert result.subcategory == "combustivel"
    assert result.category_type == "essencial"


def test_amazon_is_ecommerce():
    result = classify("AMAZON SERVICOS DE VAREJO")
    assert result.category == "outros"
    assert result.subcategory == "compras_online"


def test_health_and_bills_are_essential():
    assert classify("Drogaria Sao Paulo").category_type == "essencial"
    assert classify("Boleto condominio outubro").subcategory == "condominio"
    assert classify("Mensalidade Faculdade").category_type == "essencial"


def test_courses_are_discretionary():
    result = classify("Curso online de Python")
    assert result.category == "educacao"
    assert result.category_type == "variavel"


def test_case_insensitive():
    assert classify("NETFLIX.COM").establishment == "Netflix"


def test_substring_match_without_word_boundaries():
    # "bar" inside "barulho" still matches
    result = classify("barulho")
    assert result.subcategory == "bar"


def test_fallback_when_nothing_matches():
    result = classify("Comprovante 12345")
    assert result == Classification(
        establishment=None, category="outros", subcategory="outros", category_type="variavel"
    )
    assert result == FALLBACK


def test_empty_text_falls_back():
    assert classify("") == FALLBACK


def test_keywords_sorted_longest_first():
    lengths = [len(k) for k, _ in _SORTED_KEYWORDS]
    assert lengths == sorted(lengths, reverse=True)
    assert len(_SORTED_KEYWORDS) == len(ESTABLISHMENTS)


def test_every_entry_uses_known_vocabulary():
    for keyword, info in ESTABLISHMENTS.items():
        assert keyword == keyword.lower()
        assert info.type in ("essencial", "variavel")
        assert info.category in ALL_CATEGORIES


def test_lodging_is_leisure():
    result = classify("Reserva Airbnb Florianopolis")
    assert result.category == "lazer"
    assert result.subcategory == "hospedagem"


def test_vet_is_essential_petshop_is_not():
    vet = classify("Clinica do Veterinario Dr. Ana")
    assert vet.category == "pets"
    assert vet.category_type == "essencial"

    shop = classify("Petshop Amigo Fiel")
    assert shop.category == "pets"
    assert shop.category_type == "variavel"


def test_bank_names():
    result = classify("Transferencia Nubank")
    assert result.category == "outros"
    assert result.subcategory == "banco"


def test_payment_intermediaries():
    assert classify("Pagamento PicPay").subcategory == "pagamento"
    assert classify("PAYPAL *STEAM").subcategory == "pagamento"
