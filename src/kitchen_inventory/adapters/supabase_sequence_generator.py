"""Supabase-backed identifier sequences."""

from dataclasses import dataclass

from supabase import Client

from kitchen_inventory.services.sequences import SequenceGenerator


@dataclass
class SupabaseSequenceGenerator(SequenceGenerator):
    """Draws values from the ``next_sequence_value`` Postgres function.

    The function increments a per-name counter row atomically, so concurrent
    inserts never receive the same value.
    """

    client: Client

    def next_value(self, sequence_name: str) -> int:
        """Return the next value of the named sequence."""
        response = self.client.rpc(
            "next_sequence_value", {"sequence_name": sequence_name}
        ).execute()
        value = response.data
        if isinstance(value, list):
            value = value[0] if value else None
        if value is None:
            raise RuntimeError(f"Failed to advance sequence {sequence_name}")
        return int(value)
