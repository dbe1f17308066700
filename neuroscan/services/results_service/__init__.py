"""Results Service: read-back of the assessment log.

Entries are shown verbatim in file order (oldest first). No parsing.
"""

from .viewer import ResultsViewer

__all__ = ["ResultsViewer"]
