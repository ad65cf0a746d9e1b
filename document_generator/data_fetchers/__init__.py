"""
Data fetchers for the document generator.

Fetchers turn data keys into placeholder substitutions.
"""

from document_generator.data_fetchers.static_fetcher import StaticDataFetcher, to_placeholder_map

__all__ = [
    "StaticDataFetcher",
    "to_placeholder_map",
]
