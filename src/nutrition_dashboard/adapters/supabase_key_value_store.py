"""Supabase-backed key-value store."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from nutrition_dashboard.services.storage import KeyValueStore


@dataclass
class SupabaseKeyValueStore(KeyValueStore):
    """Supabase implementation storing JSON blobs in a key/value table."""

    client: Client
    table: str = "kv_store"

    def read(self, key: str) -> str | None:
        """Return the stored blob for a key."""
        response = (
            self.client.table(self.table)
            .select("value")
            .eq("key", key)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        value = response.data[0].get("value")
        return value if isinstance(value, str) else None

    def write(self, key: str, value: str) -> None:
        """Insert or replace the blob for a key."""
        response = (
            self.client.table(self.table)
            .upsert(
                {
                    "key": key,
                    "value": value,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError(f"Failed to store value for key {key}")
