from dataclasses import dataclass

ESSENCIAL = "essencial"
VARIAVEL = "variavel"

ALIMENTACAO = "alimentacao"
TRANSPORTE = "transporte"
LAZER = "lazer"
ASSINATURAS = "assinaturas"
SAUDE = "saude"
CONTAS = "contas"
EDUCACAO = "educacao"
SERVICOS = "servicos"
PETS = "pets"
OUTROS = "outros"

ALL_CATEGORIES = [
    ALIMENTACAO, TRANSPORTE, LAZER, ASSINATURAS, SAUDE,
    CONTAS, EDUCACAO, SERVICOS, PETS, OUTROS,
]


@dataclass(frozen=True)
class Establishment:
    type: str
    category: str
    subcategory: str
    name: str


@dataclass(frozen=True)
class Classification:
    establishment: str | None
    category: str
    subcategory: str
    category_type: str


FALLBACK = Classification(
    establishment=None, category=OUTROS, subcategory=OUTROS, category_type=VARIAVEL
)

# keyword (lowercase) -> establishment
ESTABLISHMENTS: dict[str, Establishment] = {
    # Alimentação: delivery and eating out
    "ifood": Establishment(VARIAVEL, ALIMENTACAO, "delivery_ifood", "iFood"),
    "next": Establishment(VARIAVEL, ALIMENTACAO, "delivery_ifood", "Next (iFood)"),
    "uber eats": Establishment(VARIAVEL, ALIMENTACAO, "delivery_uber", "Uber Eats"),
    "rappi": Establishment(VARIAVEL, ALIMENTACAO, "delivery_rappi", "Rappi"),
    "restaurante": Establishment(VARIAVEL, ALIMENTACAO, "restaurante", "Restaurante"),
    "lanchonete": Establishment(VARIAVEL, ALIMENTACAO, "lanchonete", "Lanchonete"),
    "bar": Establishment(VARIAVEL, ALIMENTACAO, "bar", "Bar"),
    # Alimentação: groceries
    "mercado": Establishment(ESSENCIAL, ALIMENTACAO, "mercado", "Mercado"),
    "supermercado": Establishment(ESSENCIAL, ALIMENTACAO, "mercado", "Supermercado"),
    "feira": Establishment(ESSENCIAL, ALIMENTACAO, "feira", "Feira"),
    "padaria": Establishment(ESSENCIAL, ALIMENTACAO, "padaria", "Padaria"),
    # Transporte
    "uber": Establishment(VARIAVEL, TRANSPORTE, "uber", "Uber"),
    "99": Establishment(VARIAVEL, TRANSPORTE, "99", "99"),
    "taxi": Establishment(VARIAVEL, TRANSPORTE, "taxi", "Taxi"),
    "posto": Establishment(ESSENCIAL, TRANSPORTE, "combustivel", "Posto de Combustível"),
    "combustivel": Establishment(ESSENCIAL, TRANSPORTE, "combustivel", "Combustível"),
    "gasolina": Establishment(ESSENCIAL, TRANSPORTE, "combustivel", "Gasolina"),
    # Assinaturas
    "netflix": Establishment(VARIAVEL, ASSINATURAS, "streaming", "Netflix"),
    "spotify": Establishment(VARIAVEL, ASSINATURAS, "streaming", "Spotify"),
    # Amazon sits with the streaming brands but classifies as e-commerce
    "amazon": Establishment(VARIAVEL, OUTROS, "compras_online", "Amazon"),
    "disney": Establishment(VARIAVEL, ASSINATURAS, "streaming", "Disney+"),
    "hbo": Establishment(VARIAVEL, ASSINATURAS, "streaming", "HBO Max"),
    "youtube": Establishment(VARIAVEL, ASSINATURAS, "streaming", "YouTube Premium"),
    "academia": Establishment(VARIAVEL, ASSINATURAS, "academia", "Academia"),
    # Lazer
    "cinema": Establishment(VARIAVEL, LAZER, "cinema", "Cinema"),
    "teatro": Establishment(VARIAVEL, LAZER, "teatro", "Teatro"),
    "show": Establishment(VARIAVEL, LAZER, "show", "Show"),
    "airbnb": Establishment(VARIAVEL, LAZER, "hospedagem", "Airbnb"),
    "booking": Establishment(VARIAVEL, LAZER, "hospedagem", "Booking.com"),
    "hotel": Establishment(VARIAVEL, LAZER, "hospedagem", "Hotel"),
    "pousada": Establishment(VARIAVEL, LAZER, "hospedagem", "Pousada"),
    # Saúde
    "farmacia": Establishment(ESSENCIAL, SAUDE, "farmacia", "Farmácia"),
    "drogaria": Establishment(ESSENCIAL, SAUDE, "farmacia", "Drogaria"),
    "hospital": Establishment(ESSENCIAL, SAUDE, "hospital", "Hospital"),
    "clinica": Establishment(ESSENCIAL, SAUDE, "clinica", "Clínica"),
    # Pagamentos / intermediários
    "mercado pago": Establishment(VARIAVEL, OUTROS, "pagamento", "Mercado Pago"),
    "picpay": Establishment(VARIAVEL, OUTROS, "pagamento", "PicPay"),
    "paypal": Establishment(VARIAVEL, OUTROS, "pagamento", "PayPal"),
    # E-commerce
    "mercado livre": Establishment(VARIAVEL, OUTROS, "compras_online", "Mercado Livre"),
    "shopee": Establishment(VARIAVEL, OUTROS, "compras_online", "Shopee"),
    "aliexpress": Establishment(VARIAVEL, OUTROS, "compras_online", "AliExpress"),
    "shein": Establishment(VARIAVEL, OUTROS, "compras_online", "Shein"),
    "magazine luiza": Establishment(VARIAVEL, OUTROS, "compras_online", "Magazine Luiza"),
    "americanas": Establishment(VARIAVEL, OUTROS, "compras_online", "Americanas"),
    # Contas
    "energia": Establishment(ESSENCIAL, CONTAS, "energia", "Conta de Energia"),
    "luz": Establishment(ESSENCIAL, CONTAS, "energia", "Conta de Luz"),
    "agua": Establishment(ESSENCIAL, CONTAS, "agua", "Conta de Água"),
    "internet": Establishment(ESSENCIAL, CONTAS, "internet", "Internet"),
    "telefone": Establishment(ESSENCIAL, CONTAS, "telefone", "Telefone"),
    "celular": Establishment(ESSENCIAL, CONTAS, "telefone", "Celular"),
    "aluguel": Establishment(ESSENCIAL, CONTAS, "aluguel", "Aluguel"),
    "condominio": Establishment(ESSENCIAL, CONTAS, "condominio", "Condomínio"),
    # Educação
    "curso": Establishment(VARIAVEL, EDUCACAO, "curso", "Curso"),
    "faculdade": Establishment(ESSENCIAL, EDUCACAO, "faculdade", "Faculdade"),
    "universidade": Establishment(ESSENCIAL, EDUCACAO, "faculdade", "Universidade"),
    "escola": Establishment(ESSENCIAL, EDUCACAO, "escola", "Escola"),
    "livro": Establishment(VARIAVEL, EDUCACAO, "livros", "Livro"),
    "livraria": Establishment(VARIAVEL, EDUCACAO, "livros", "Livraria"),
    # Serviços pessoais
    "barbeiro": Establishment(VARIAVEL, SERVICOS, "beleza", "Barbeiro"),
    "barbearia": Establishment(VARIAVEL, SERVICOS, "beleza", "Barbearia"),
    "salao": Establishment(VARIAVEL, SERVICOS, "beleza", "Salão de Beleza"),
    "manicure": Establishment(VARIAVEL, SERVICOS, "beleza", "Manicure"),
    "estetica": Establishment(VARIAVEL, SERVICOS, "beleza", "Estética"),
    "lavanderia": Establishment(VARIAVEL, SERVICOS, "limpeza", "Lavanderia"),
    # Pets
    "petshop": Establishment(VARIAVEL, PETS, "petshop", "Pet Shop"),
    "veterinario": Establishment(ESSENCIAL, PETS, "veterinario", "Veterinário"),
    # Bancos
    "nubank": Establishment(VARIAVEL, OUTROS, "banco", "Nubank"),
    "inter": Establishment(VARIAVEL, OUTROS, "banco", "Banco Inter"),
    "itau": Establishment(VARIAVEL, OUTROS, "banco", "Itaú"),
    "bradesco": Establishment(VARIAVEL, OUTROS, "banco", "Bradesco"),
    "santander": Establishment(VARIAVEL, OUTROS, "banco", "Santander"),
    "caixa": Establishment(VARIAVEL, OUTROS, "banco", "Caixa Econômica"),
}

# Longest keyword first so "mercado pago" is tried before "mercado".
# sorted() is stable, so equal-length keywords keep table order.
_SORTED_KEYWORDS: list[tuple[str, Establishment]] = sorted(
    ESTABLISHMENTS.items(), key=lambda item: len(item[0]), reverse=True
)


def classify(text: str) -> Classification:
    # Plain substring match, no word boundaries: short keywords like "bar" can
    # fire inside longer words.
    text_lower = (text or "").lower()

    for keyword, info in _SORTED_KEYWORDS:
        if keyword in text_lower:
            return Classification(
                establishment=info.name,
                category=info.category,
                subcategory=info.subcategory,
                category_type=info.type,
            )

    return FALLBACK
