"""Append-only text storage for NeuroScan results and reminders.

The text files are the sole durable store. There is no indexing and no
locking; read-back is a full linear scan in append order.
"""

from .log_store import (
    AppendOnlyLog,
    PersistenceError,
)

__all__ = [
    "AppendOnlyLog",
    "PersistenceError",
]
