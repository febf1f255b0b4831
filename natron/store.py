import logging
from datetime import UTC, datetime
from uuid import uuid4

import chromadb
from chromadb.config import Settings as ChromaSettings

from natron.attributes import XP_FIELDS
from natron.config import settings
from natron.exceptions import StoreError, UserExistsError
from natron.locks import user_lock
from natron.ranks import INITIAL_RANK

logger = logging.getLogger(__name__)

# Records are looked up by id or metadata only; a constant vector keeps
# Chroma from running an embedding model on write.
_PLACEHOLDER_EMBEDDING = [1.0]


def _zeroed_xp() -> dict:
    state = {field: 0.0 for field in XP_FIELDS}
    state["current_xp"] = 0.0
    state["rank"] = INITIAL_RANK
    return state


class UserStore:
    def __init__(self, persist_dir: str | None = None):
        path = persist_dir or settings.data_dir
        try:
            self._client = chromadb.PersistentClient(
                path=path,
                settings=ChromaSettings(anonymized_telemetry=False),
            )
            self._users = self._client.get_or_create_collection("users")
            self._activity = self._client.get_or_create_collection("activity")
        except Exception as e:
            raise StoreError(f"Failed to open store at {path}: {e}") from e
        logger.info("[UserStore] initialized at %s", path)

    # --- Users ---

    def create_user(self, user_id: str, name: str = "") -> dict:
        if self.get_user(user_id) is not None:
            raise UserExistsError(f"User {user_id} already exists")
        metadata = {
            "name": name,
            "created_at": datetime.now(UTC).isoformat(),
            **_zeroed_xp(),
        }
        self._upsert_user(user_id, metadata)
        logger.info("[UserStore] created user %s", user_id)
        return {"id": user_id, **metadata}

    def get_user(self, user_id: str) -> dict | None:
        try:
            result = self._users.get(ids=[user_id], include=["metadatas"])
        except Exception as e:
            raise StoreError(f"Failed to load user {user_id}: {e}") from e
        if not result["ids"]:
            return None
        return {"id": result["ids"][0], **result["metadatas"][0]}

    def update_user_xp(self, user_id: str, changes: dict):
        """Write XP fields, total and rank in a single upsert."""
        user = self.get_user(user_id)
        if user is None:
            raise StoreError(f"User {user_id} not found")
        user.pop("id")
        user.update(changes)
        self._upsert_user(user_id, user)

    def list_user_ids(self) -> list[str]:
        try:
            total = self._users.count()
            if not total:
                return []
            return self._users.get(include=[], limit=total)["ids"]
        except Exception as e:
            raise StoreError(f"Failed to list users: {e}") from e

    def reset_all_xp(self) -> int:
        user_ids = self.list_user_ids()
        for user_id in user_ids:
            lock = user_lock(user_id)
            with lock:
                self.update_user_xp(user_id, _zeroed_xp())
        logger.info("[UserStore] reset XP for %d users", len(user_ids))
        return len(user_ids)

    def delete_user(self, user_id: str):
        try:
            self._users.delete(ids=[user_id])
            self._activity.delete(where={"user_id": user_id})
        except Exception as e:
            raise StoreError(f"Failed to delete user {user_id}: {e}") from e

    def count(self) -> int:
        return self._users.count()

    def _upsert_user(self, user_id: str, metadata: dict):
        try:
            self._users.upsert(
                ids=[user_id],
                documents=[metadata.get("name") or user_id],
                embeddings=[_PLACEHOLDER_EMBEDDING],
                metadatas=[metadata],
            )
        except Exception as e:
            raise StoreError(f"Failed to write user {user_id}: {e}") from e

    # --- Activity ---

    def add_activity(self, user_id: str, type: str, description: str) -> str:
        activity_id = uuid4().hex
        metadata = {
            "user_id": user_id,
            "type": type,
            "description": description,
            "created_at": datetime.now(UTC).isoformat(),
        }
        try:
            self._activity.upsert(
                ids=[activity_id],
                documents=[description],
                embeddings=[_PLACEHOLDER_EMBEDDING],
                metadatas=[metadata],
            )
        except Exception as e:
            raise StoreError(f"Failed to write activity for {user_id}: {e}") from e
        return activity_id

    def get_activities(self, user_id: str, limit: int | None = None) -> list[dict]:
        try:
            result = self._activity.get(where={"user_id": user_id}, include=["metadatas"])
        except Exception as e:
            raise StoreError(f"Failed to load activity for {user_id}: {e}") from e
        items = [{"id": id_, **meta} for id_, meta in zip(result["ids"], result["metadatas"])]
        items.sort(key=lambda a: a["created_at"], reverse=True)
        return items[:limit] if limit else items
