"""
Core interfaces for the document generator.

Renderers and data fetchers are external collaborators; the generator
only depends on the contracts below.
"""

import threading
from abc import ABC, abstractmethod
from typing import Any, Dict


# Placeholder name -> substitution string
PlaceholderMap = Dict[str, str]

DEFAULT_FETCHER_NAME = "default"


# ==============================================================================
# RENDERER INTERFACE
# ==============================================================================

class IRenderer(ABC):
    """
    Abstract interface for template renderers.

    Each renderer handles a specific document format (DOCX, PDF, etc.).
    Renderers must be constructible without arguments to be usable from
    the service configuration.

    Example:
        @register_renderer("docx")
        class DocxRenderer(IRenderer):
            def render(self, template_path, data):
                # Implementation
    """

    @abstractmethod
    def render(self, template_path: str, data: PlaceholderMap) -> bytes:
        """
        Render template with data.

        Args:
            template_path: Path to template file
            data: Placeholder to substitution map

        Returns:
            Rendered document as bytes
        """
        pass


# ==============================================================================
# DATA FETCHER INTERFACE
# ==============================================================================

class IDataFetcher(ABC):
    """
    Abstract interface for data fetchers.

    A fetcher turns a data key into placeholder substitutions for one
    document type.
    """

    @abstractmethod
    def get_placeholders_info(self) -> Dict[str, str]:
        """
        Get placeholders descriptions for template designers.

        Returns:
            Placeholder to description map
        """
        pass

    @abstractmethod
    def get_data(self, key: Any) -> PlaceholderMap:
        """
        Get placeholder substitutions by key.

        Args:
            key: Data identifier

        Returns:
            Placeholder to substitution map

        Raises:
            DataNotFoundException: If no data is associated with the key
        """
        pass

    @abstractmethod
    def get_sample_data(self) -> PlaceholderMap:
        """
        Get sample substitutions for template previews.

        Returns:
            Placeholder to substitution map
        """
        pass


# ==============================================================================
# DOCUMENT TYPE
# ==============================================================================

class AbstractDocumentType(ABC):
    """
    Abstract type of the generated document.

    Subclasses supply create_data_fetcher(); fetchers are created lazily
    and cached per fetcher name for the lifetime of the instance.
    create_data_fetcher() may return another name's fetcher through
    get_data_fetcher().
    """

    DEFAULT_FETCHER_NAME = DEFAULT_FETCHER_NAME

    def __new__(cls, *args, **kwargs):
        # Set up here so subclass __init__ doesn't have to call super()
        instance = super().__new__(cls)
        instance._data_fetchers = {}
        instance._fetchers_lock = threading.RLock()
        return instance

    @abstractmethod
    def create_data_fetcher(self, name: str) -> IDataFetcher:
        """
        Create the data fetcher registered under a name.

        Called at most once per fetcher name and instance.

        Args:
            name: Fetcher name

        Returns:
            IDataFetcher instance
        """
        pass

    def get_data_fetcher(self, name: str = DEFAULT_FETCHER_NAME) -> IDataFetcher:
        """Get cached data fetcher, creating it on first request."""
        if name in self._data_fetchers:
            return self._data_fetchers[name]

        with self._fetchers_lock:
            if name not in self._data_fetchers:
                # Reentrant: the factory may request another name
                fetcher = self.create_data_fetcher(name)
                self._data_fetchers.setdefault(name, fetcher)
            return self._data_fetchers[name]

    def get_placeholders_info(self) -> Dict[str, str]:
        """Get placeholders descriptions of the default fetcher."""
        return self.get_data_fetcher(DEFAULT_FETCHER_NAME).get_placeholders_info()

    def get_data(self, key: Any, fetcher_name: str = DEFAULT_FETCHER_NAME) -> PlaceholderMap:
        """
        Get real substitution data.

        Args:
            key: Data identifier
            fetcher_name: Name of the fetcher to use

        Returns:
            Placeholder to substitution map
        """
        return self.get_data_fetcher(fetcher_name).get_data(key)

    def get_sample_data(self, fetcher_name: str = DEFAULT_FETCHER_NAME) -> PlaceholderMap:
        """Get sample substitutions data."""
        return self.get_data_fetcher(fetcher_name).get_sample_data()
