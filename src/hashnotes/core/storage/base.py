"""
Base interface for key-value persistence.

The note store only needs to read and write whole JSON documents under a
handful of keys, so backends expose a minimal string key-value contract.
"""

from abc import ABC, abstractmethod


class KeyValueBackend(ABC):
    """Abstract base class for key-value persistence backends."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Read the value stored under a key.

        Args:
            key: Storage key

        Returns:
            Stored string, or None if the key is absent

        Raises:
            StorageError: If the read fails
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Store a value, replacing any previous one.

        Args:
            key: Storage key
            value: Serialized document

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Remove a key. Removing an absent key is not an error.

        Args:
            key: Storage key

        Raises:
            StorageError: If the delete fails
        """
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        """
        List stored keys.

        Returns:
            Sorted list of keys
        """
        pass

    def exists(self, key: str) -> bool:
        """Check whether a key holds a value."""
        return self.get(key) is not None
