"""
Document Generator

Composes documents from pluggable document types (what data goes in)
and renderers (what format comes out).
"""

__version__ = "1.0.0"

from document_generator.core.interfaces import (
    DEFAULT_FETCHER_NAME,
    AbstractDocumentType,
    IDataFetcher,
    IRenderer,
    PlaceholderMap,
)

from document_generator.core.registry import (
    DocumentTypeClassRegistry,
    RendererClassRegistry,
    register_document_type,
    register_renderer,
)

from document_generator.core.exceptions import (
    DataNotFoundException,
    DocumentGeneratorException,
    DuplicateNameError,
    GeneratorServiceException,
    InvalidDocumentTypeClassError,
    InvalidRendererClassError,
    RendererException,
    UnregisteredNameError,
)

# Import implementations to trigger registration
import document_generator.data_fetchers
import document_generator.document_types
import document_generator.renderers

# Export configuration
from document_generator.config import (
    GeneratorConfig,
    GeneratorServiceConfig,
    get_generator_config,
    load_service_config,
    set_generator_config,
)

from document_generator.service import GeneratorService

__all__ = [
    # Service
    "GeneratorService",
    # Interfaces
    "DEFAULT_FETCHER_NAME",
    "AbstractDocumentType",
    "IDataFetcher",
    "IRenderer",
    "PlaceholderMap",
    # Registries
    "DocumentTypeClassRegistry",
    "RendererClassRegistry",
    # Decorators
    "register_document_type",
    "register_renderer",
    # Exceptions
    "DataNotFoundException",
    "DocumentGeneratorException",
    "DuplicateNameError",
    "GeneratorServiceException",
    "InvalidDocumentTypeClassError",
    "InvalidRendererClassError",
    "RendererException",
    "UnregisteredNameError",
    # Configuration
    "GeneratorConfig",
    "GeneratorServiceConfig",
    "get_generator_config",
    "load_service_config",
    "set_generator_config",
]
