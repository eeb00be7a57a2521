"""Local key/value store protocol."""

from typing import Protocol, Optional


class LocalStore(Protocol):
    """Interface for small string values persisted on this machine."""

    def get_item(self, key: str) -> Optional[str]:
        """Get the value stored under key, or None."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Insert or replace the value stored under key."""
        ...

    def remove_item(self, key: str) -> None:
        """Delete key if present."""
        ...
