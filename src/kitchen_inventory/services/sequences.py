"""Sequential identifier generation."""

from typing import Protocol

from kitchen_inventory.domain.recipes import format_sequence_id


class SequenceGenerator(Protocol):
    """Atomic per-entity counter owned by the store."""

    def next_value(self, sequence_name: str) -> int:
        """Return the next value of the named sequence."""


def next_identifier(generator: SequenceGenerator, sequence_name: str, prefix: str) -> str:
    """Draw the next value and format it as a prefixed id."""
    return format_sequence_id(prefix, generator.next_value(sequence_name))
