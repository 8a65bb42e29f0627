# Rev 0.1.0
"""releaseZ – phase editing rules for release plans."""

__version__ = "0.1.0"
