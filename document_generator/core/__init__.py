"""
Core components for the document generator.
"""

from document_generator.core.interfaces import (
    DEFAULT_FETCHER_NAME,
    AbstractDocumentType,
    IDataFetcher,
    IRenderer,
    PlaceholderMap,
)

from document_generator.core.registry import (
    ClassRegistry,
    DocumentTypeClassRegistry,
    RendererClassRegistry,
    register_document_type,
    register_renderer,
    resolve_identifier,
)

from document_generator.core.exceptions import (
    ClassResolutionError,
    ConfigurationException,
    DataFetcherException,
    DataNotFoundException,
    DocumentGeneratorException,
    DuplicateNameError,
    GeneratorServiceException,
    InvalidDocumentTypeClassError,
    InvalidRendererClassError,
    RendererException,
    UnregisteredNameError,
)

__all__ = [
    # Interfaces
    "DEFAULT_FETCHER_NAME",
    "AbstractDocumentType",
    "IDataFetcher",
    "IRenderer",
    "PlaceholderMap",
    # Registries
    "ClassRegistry",
    "DocumentTypeClassRegistry",
    "RendererClassRegistry",
    "resolve_identifier",
    # Decorators
    "register_document_type",
    "register_renderer",
    # Exceptions
    "ClassResolutionError",
    "ConfigurationException",
    "DataFetcherException",
    "DataNotFoundException",
    "DocumentGeneratorException",
    "DuplicateNameError",
    "GeneratorServiceException",
    "InvalidDocumentTypeClassError",
    "InvalidRendererClassError",
    "RendererException",
    "UnregisteredNameError",
]
