"""Per-station min/mean/max summaries of temperature measurement files, and a generator of sample data."""

__version__ = "0.1.0"
__all__ = ["aggregate", "generate", "records"]