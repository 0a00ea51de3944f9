"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.profile_repository import IProfileRepository


class IUnitOfWork(Protocol):
    """Transaction boundary around the profile repository.

    Reads inside the block see the block's own staged writes. Other units see
    them only after ``commit()``; leaving the block without committing
    discards them.
    """

    profiles: IProfileRepository

    async def commit(self) -> None:
        """Make staged writes visible to every later unit."""
        ...

    async def rollback(self) -> None:
        """Discard staged writes."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        ...
