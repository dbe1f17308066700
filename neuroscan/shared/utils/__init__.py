"""Shared utilities for NeuroScan."""
from .pii import SubjectHasher

__all__ = ["SubjectHasher"]
