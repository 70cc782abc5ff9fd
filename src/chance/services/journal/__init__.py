"""Trade journal: in-memory store and the service that owns it."""

from chance.services.journal.service import JournalService
from chance.services.journal.store import DuplicateTradeError, TradeStore

__all__ = ["JournalService", "TradeStore", "DuplicateTradeError"]
