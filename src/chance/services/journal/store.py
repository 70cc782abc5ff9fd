"""In-memory trade store.

Ordered collection of trades keyed by id, newest first. Trades are never
edited in place: they are added, listed and removed.
"""

from typing import Iterable, Iterator

from chance.libraries.performance.models import Trade


class DuplicateTradeError(ValueError):
    """Raised when adding a trade whose id is already stored."""


class TradeStore:
    """
    Memory-resident trade collection.

    New trades go to the front. A batch added with add_many() keeps its own
    order and is placed ahead of everything already stored.

    Example:
        >>> store = TradeStore()
        >>> store.add(trade)
        >>> [t.id for t in store.list()]
        ['lq3x9k-1a2b3c4d']
    """

    def __init__(self, trades: Iterable[Trade] | None = None) -> None:
        self._trades: list[Trade] = []
        self._ids: set[str] = set()
        if trades is not None:
            self.add_many(list(trades))

    def add(self, trade: Trade) -> None:
        """
        Prepend a trade.

        Raises:
            DuplicateTradeError: If the id is already stored
        """
        self.add_many([trade])

    def add_many(self, trades: list[Trade]) -> None:
        """
        Prepend a batch of trades, keeping batch order.

        All ids are checked before anything is stored, so a rejected batch
        leaves the store unchanged.

        Raises:
            DuplicateTradeError: If any id is already stored or repeated within the batch
        """
        batch_ids: set[str] = set()
        for trade in trades:
            if trade.id in self._ids or trade.id in batch_ids:
                raise DuplicateTradeError(f"Duplicate trade id: {trade.id}")
            batch_ids.add(trade.id)

        self._trades = list(trades) + self._trades
        self._ids |= batch_ids

    def remove(self, trade_id: str) -> bool:
        """Remove a trade by id. Returns False if no such trade exists."""
        if trade_id not in self._ids:
            return False
        self._trades = [t for t in self._trades if t.id != trade_id]
        self._ids.discard(trade_id)
        return True

    def get(self, trade_id: str) -> Trade | None:
        return next((t for t in self._trades if t.id == trade_id), None)

    def list(self) -> list[Trade]:
        """All trades, newest first (a copy)."""
        return list(self._trades)

    def clear(self) -> None:
        self._trades = []
        self._ids = set()

    def __len__(self) -> int:
        return len(self._trades)

    def __iter__(self) -> Iterator[Trade]:
        return iter(list(self._trades))

    def __contains__(self, trade_id: object) -> bool:
        return trade_id in self._ids
