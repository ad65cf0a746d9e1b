"""
Static document type implementation.

Document type whose fetchers serve data sets declared in configuration.
Self-registers with DocumentTypeClassRegistry.
"""

from typing import Any, Dict, Mapping, Optional

from document_generator.core.exceptions import DataFetcherException
from document_generator.core.interfaces import AbstractDocumentType, IDataFetcher
from document_generator.core.registry import register_document_type
from document_generator.data_fetchers.static_fetcher import StaticDataFetcher
from document_generator.utils.logger import setup_logger

logger = setup_logger(__name__)


@register_document_type("static")
class StaticDocumentType(AbstractDocumentType):
    """
    Document type backed by StaticDataFetcher instances.

    Subclasses may declare their fetchers at class level:

        class PriceListDocumentType(StaticDocumentType):
            FETCHERS = {
                "default": {
                    "data_sets": {"2024": {"TITLE": "Price list 2024"}},
                    "sample_data": {"TITLE": "Sample price list"},
                    "placeholders": {"TITLE": "Document title"},
                },
            }
    """

    FETCHERS: Dict[str, Mapping[str, Any]] = {}

    def __init__(self, fetchers: Optional[Mapping[str, Mapping[str, Any]]] = None):
        super().__init__()
        self.fetchers_config: Dict[str, Mapping[str, Any]] = dict(self.FETCHERS)
        if fetchers:
            self.fetchers_config.update(fetchers)

    def create_data_fetcher(self, name: str) -> IDataFetcher:
        """
        Raises:
            DataFetcherException: If no fetcher is declared under name
        """
        if name not in self.fetchers_config:
            raise DataFetcherException(
                f"Fetcher '{name}' is not defined for {type(self).__name__}. "
                f"Available: {list(self.fetchers_config.keys())}"
            )

        logger.debug(f"Creating static fetcher '{name}' for {type(self).__name__}")
        return StaticDataFetcher.from_config(self.fetchers_config[name])
