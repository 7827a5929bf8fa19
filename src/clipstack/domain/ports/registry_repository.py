"""Port: Registry repository — save/load the ordered history contents."""

from abc import ABC, abstractmethod


class RegistryRepositoryPort(ABC):
    """Contract for persisting and retrieving the history registry."""

    @abstractmethod
    def save(self, contents: list[str]) -> None:
        """Overwrite storage with *contents*, oldest first.

        Raises:
            RegistryWriteError: Storage is unavailable.
        """
        ...

    @abstractmethod
    def load(self) -> list[str]:
        """Return the stored contents, oldest first.

        Raises:
            RegistryLoadError: The registry is missing or malformed.
        """
        ...
