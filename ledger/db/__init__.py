from ledger.db.store import LedgerStore

__all__ = ["LedgerStore"]
