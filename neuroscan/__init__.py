"""NeuroScan: symptom-screening questionnaire for early neurodegenerative signs.

For education and awareness only; not a diagnostic tool.
"""

__version__ = "1.0.0"
