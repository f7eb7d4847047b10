"""Ingestion layer.

Turns a fetched ranking page into normalized :class:`Observation` objects.
Only the ledger layer is allowed to merge them.
"""

from rankledger.ingestion.extract import extract_all, extract_name, extract_score, list_entries

__all__ = ["extract_all", "extract_name", "extract_score", "list_entries"]
