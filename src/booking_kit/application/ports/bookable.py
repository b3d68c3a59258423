"""Port interface for bookable items (Dependency Inversion Principle)."""

from abc import ABC, abstractmethod


class Bookable(ABC):
    """Port interface for anything that can be reserved (room, seat, ticket)."""

    @abstractmethod
    def id(self) -> str:
        """Return the stable identifier of the item."""
        raise NotImplementedError

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the item can currently be booked."""
        raise NotImplementedError
