import threading
import weakref

# One lock per user id, shared by every ledger and store in the process.
# Entries disappear once no caller holds the lock.
_user_locks: "weakref.WeakValueDictionary[str, threading.Lock]" = weakref.WeakValueDictionary()
_registry_lock = threading.Lock()


def user_lock(user_id: str) -> threading.Lock:
    with _registry_lock:
        lock = _user_locks.get(user_id)
        if lock is None:
            lock = threading.Lock()
            _user_locks[user_id] = lock
        return lock


def tracked_users() -> int:
    with _registry_lock:
        return len(_user_locks)
