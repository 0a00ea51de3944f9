"""Profile store handle protocol."""

from typing import Protocol

from domain.repositories.unit_of_work import IUnitOfWork


class IProfileStore(Protocol):
    """Owned handle on a storage backend, created once at startup."""

    name: str

    def unit_of_work(self) -> IUnitOfWork:
        """Open a new unit of work against this store."""
        ...

    async def ping(self) -> None:
        """Raise if the backend is unreachable."""
        ...

    async def close(self) -> None:
        """Release connections and other backend resources."""
        ...
