"""NeuroScan services.

- assessment_engine: Question set, scoring and classification (no I/O)
- session_service: Timestamping, formatting and append-only persistence
- results_service: Verbatim read-back of the results log
"""
