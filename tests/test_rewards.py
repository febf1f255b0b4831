import pytest

from natron.rewards import RewardPolicy, is_investment


@pytest.fixture
def policy(ledger):
    return RewardPolicy(ledger, investment_reward=10)


def test_habit_mark_and_unmark(policy, store, user_id):
    policy.habit_toggled(user_id, "FISICO", 15, completed=True, title="Correr")
    assert store.get_user(user_id)["xp_physical"] == 15

    policy.habit_toggled(user_id, "FISICO", 15, completed=False, title="Correr")
    user = store.get_user(user_id)
    assert user["xp_physical"] == 0
    assert user["current_xp"] == 0


def test_financial_habits_award_nothing(policy, store, user_id):
    assert policy.habit_toggled(user_id, "FINANCEIRO", 20, completed=True, title="Poupar") is None
    assert store.get_user(user_id)["xp_financial"] == 0
    assert [a["type"] for a in store.get_activities(user_id)] == ["habit_completed"]


def test_task_completion_cycle(policy, store, user_id):
    result = policy.task_status_changed(user_id, "PRODUTIVIDADE", 5, "pending", "completed", title="Relatório")
    assert result.new_total == 5

    assert policy.task_status_changed(user_id, "PRODUTIVIDADE", 5, "completed", "completed") is None

    result = policy.task_status_changed(user_id, "PRODUTIVIDADE", 5, "completed", "pending")
    assert result.new_total == 0

    types = sorted(a["type"] for a in store.get_activities(user_id))
    assert types == ["task_completed", "task_uncompleted"]


def test_deleting_completed_task_reverts_xp(policy, store, user_id):
    policy.task_status_changed(user_id, "PRODUTIVIDADE", 5, "pending", "completed")

    policy.task_deleted(user_id, "PRODUTIVIDADE", 5, "completed")

    assert store.get_user(user_id)["current_xp"] == 0


def test_deleting_pending_task_is_ignored(policy, user_id):
    assert policy.task_deleted(user_id, "PRODUTIVIDADE", 5, "pending") is None


def test_investment_income_awards_financial_xp(policy, store, user_id):
    result = policy.transaction_created(user_id, "entrada", "Investimentos")
    assert result.new_total == 10
    assert store.get_user(user_id)["xp_financial"] == 10

    policy.transaction_deleted(user_id, "investimentos")
    assert store.get_user(user_id)["xp_financial"] == 0


def test_other_transactions_award_nothing(policy, store, user_id):
    assert policy.transaction_created(user_id, "saida", "investimento") is None
    assert policy.transaction_created(user_id, "entrada", "salario") is None
    assert policy.transaction_deleted(user_id, "alimentacao") is None
    assert store.get_user(user_id)["current_xp"] == 0


def test_is_investment():
    assert is_investment("INVESTIMIENTOS")
    assert not is_investment(None)
    assert not is_investment("")
