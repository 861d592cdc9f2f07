"""Serializable property interface."""

from typing import Protocol


class SerializableProperty(Protocol):
    """Anything that renders itself as one folded iCalendar content line."""

    @property
    def name(self) -> str:
        """Uppercase property name."""
        ...

    def to_text(self) -> str:
        """Export to a folded iCalendar content line."""
        ...
