"""Ledger layer.

This package is the single place where scraped observations are merged
into the persisted per-entity series, ordered, and written back.
"""

from rankledger.ledger.merge import merge
from rankledger.ledger.sort import sort_by_recency
from rankledger.ledger.store import load_ledger, save_ledger

__all__ = ["load_ledger", "merge", "save_ledger", "sort_by_recency"]
