"""
Walk a user through completing and deleting a task and watch XP move.

Usage:
    python examples/02_xp_ledger.py                      # task worth 5 XP
    python examples/02_xp_ledger.py --xp 120             # enough to rank up
    python examples/02_xp_ledger.py --attribute FISICO --xp 30
    python examples/02_xp_ledger.py --data-dir ./demo_data
"""
import argparse
import logging
from uuid import uuid4

from natron import RewardPolicy, UserStore, XpLedger, rank_for

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")


def show(store: UserStore, user_id: str):
    user = store.get_user(user_id)
    progress = rank_for(user["current_xp"])
    print(
        f"  XP={user['current_xp']:.0f} rank={user['rank']} "
        f"(next: {progress.next_rank_name} at {progress.next_rank_min_xp:.0f})"
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="XP ledger demo")
    parser.add_argument("--attribute", default="PRODUTIVIDADE", help="Attribute the task trains")
    parser.add_argument("--xp", type=float, default=5, help="XP value of the task (default: 5)")
    parser.add_argument("--data-dir", default=None, help="Store directory (default: NATRON_DATA_DIR)")
    args = parser.parse_args()

    store = UserStore(persist_dir=args.data_dir)
    policy = RewardPolicy(XpLedger(store=store))

    user_id = f"demo_{uuid4().hex[:8]}"
    store.create_user(user_id, "Demo")
    print(f"Created {user_id}")
    show(store, user_id)

    print("Completing task...")
    policy.task_status_changed(user_id, args.attribute, args.xp, "pending", "completed", title="Demo task")
    show(store, user_id)

    print("Deleting completed task...")
    policy.task_deleted(user_id, args.attribute, args.xp, "completed")
    show(store, user_id)

    for activity in reversed(store.get_activities(user_id)):
        print(f"  [{activity['type']}] {activity['description']}")

    store.delete_user(user_id)
