"""Abstract repository for Sale aggregate.

Writes are plain upserts; concurrent writers to the same sale get
last-writer-wins unless an implementation adds its own versioning.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from sales.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique sale ID."""

    @abstractmethod
    def get_by_id(self, sale_id: int) -> Sale | None:
        """Return a sale by its ID, or None if not found."""

    @abstractmethod
    def save(self, sale: Sale) -> None:
        """Persist a new or updated sale.

        A sale whose ``id`` is None is assigned one before it is stored.
        """
