"""Shared models, utilities and storage for NeuroScan services."""
