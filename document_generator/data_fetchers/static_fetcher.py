"""
Static data fetcher implementation.

Returns predefined data sets. Useful for:
- Testing
- Template previews
- Documents whose data lives in configuration
"""

from typing import Any, Dict, Mapping, Optional

from document_generator.core.exceptions import DataNotFoundException
from document_generator.core.interfaces import IDataFetcher, PlaceholderMap
from document_generator.utils.logger import setup_logger

logger = setup_logger(__name__)


def to_placeholder_map(data: Mapping[str, Any]) -> PlaceholderMap:
    """Coerce substitution values to strings (None becomes empty string)."""
    return {
        str(name): "" if value is None else str(value)
        for name, value in data.items()
    }


class StaticDataFetcher(IDataFetcher):
    """
    Fetcher over in-memory data sets.

    Args:
        data_sets: {data key: {placeholder: value}}
        sample_data: Placeholder values for sample documents
        placeholders: {placeholder: description} for template designers
    """

    def __init__(
        self,
        data_sets: Optional[Mapping[Any, Mapping[str, Any]]] = None,
        sample_data: Optional[Mapping[str, Any]] = None,
        placeholders: Optional[Mapping[str, str]] = None
    ):
        self.data_sets: Dict[Any, Mapping[str, Any]] = dict(data_sets or {})
        self.sample_data: Dict[str, Any] = dict(sample_data or {})
        self.placeholders: Dict[str, str] = dict(placeholders or {})

        logger.debug(f"Initialized StaticDataFetcher with {len(self.data_sets)} data sets")

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "StaticDataFetcher":
        """
        Build fetcher from a configuration mapping.

        Recognized keys: data_sets, sample_data, placeholders.
        """
        return cls(
            data_sets=config.get("data_sets"),
            sample_data=config.get("sample_data"),
            placeholders=config.get("placeholders"),
        )

    def get_placeholders_info(self) -> Dict[str, str]:
        """Placeholder descriptions; falls back to sample data keys."""
        if self.placeholders:
            return dict(self.placeholders)
        return {name: "" for name in self.sample_data}

    def get_data(self, key: Any) -> PlaceholderMap:
        """
        Get substitutions of a predefined data set.

        Raises:
            DataNotFoundException: If no data set is stored under key
        """
        if key not in self.data_sets:
            raise DataNotFoundException(key)
        return to_placeholder_map(self.data_sets[key])

    def get_sample_data(self) -> PlaceholderMap:
        """Get sample substitutions."""
        return to_placeholder_map(self.sample_data)
