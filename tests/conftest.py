import pytest

from natron.store import UserStore
from natron.xp import XpLedger


@pytest.fixture
def mercado_pago_receipt():
    return """
Comprovante de Pagamento
Segunda-feira, 29 de dezembro de 2025, às 10:44:50.

Sua compra
Total: R$ 98,67

De
Bruno Jose Lopes da Silva Oliveira
CPF: ***.391.484-**
PSP: 323 - Mercado Pago

Para
AIRBNB PLATAFORMA DIGITAL LTDA
CNPJ: 36.297.602/0001-08

Identificador da transação
00000AFT3EZG39CWQ6L2GBDSQ9
"""


@pytest.fixture
def store(tmp_path):
    return UserStore(persist_dir=str(tmp_path / "test_data"))


@pytest.fixture
def ledger(store):
    return XpLedger(store=store)


@pytest.fixture
def user_id(store):
    store.create_user("user_1", "Naruto")
    return "user_1"
