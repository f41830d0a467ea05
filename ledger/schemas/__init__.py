from ledger.schemas.report import EventFillRate, LedgerReport

__all__ = ["EventFillRate", "LedgerReport"]
