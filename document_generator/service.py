"""
Generator Service - main orchestrator.

Holds the renderer and document type registries and pipes document type
data into renderers.
"""

import inspect
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Type, Union

from document_generator.config import (
    GeneratorServiceConfig,
    load_service_config,
    parse_service_config,
)
from document_generator.core.exceptions import (
    ClassResolutionError,
    DuplicateNameError,
    InvalidDocumentTypeClassError,
    InvalidRendererClassError,
    UnregisteredNameError,
)
from document_generator.core.interfaces import (
    DEFAULT_FETCHER_NAME,
    AbstractDocumentType,
    IRenderer,
)
from document_generator.core.registry import (
    ClassRegistry,
    DocumentTypeClassRegistry,
    RendererClassRegistry,
)
from document_generator.utils.logger import setup_logger

logger = setup_logger(__name__)

RENDERER = "renderer"
DOCUMENT_TYPE = "document type"


class GeneratorService:
    """
    Document generator service.

    Configuration example (YAML, see GeneratorService.from_yaml):

        renderers:
          pdf: html_pdf               # registered alias
          word: "myapp.renderers:WordRenderer"
        document_types:
          someDocument: "myapp.documents:SomeDocumentType"

    Registration is expected to happen once at startup; generate() and
    generate_sample() only read the registries.
    """

    def __init__(self):
        self._document_types: Dict[str, AbstractDocumentType] = {}
        self._renderers: Dict[str, IRenderer] = {}

    # ==========================================================================
    # CONSTRUCTION FROM CONFIGURATION
    # ==========================================================================

    @classmethod
    def from_config(
        cls,
        config: Union[GeneratorServiceConfig, Mapping[str, Any]]
    ) -> "GeneratorService":
        """
        Build a service and bulk-register renderers, then document types.

        Args:
            config: GeneratorServiceConfig or a raw mapping with
                "renderers" / "document_types" sections
        """
        if not isinstance(config, GeneratorServiceConfig):
            config = parse_service_config(dict(config))

        service = cls()
        service.set_renderers_config(config.renderers)
        service.set_document_types_config(config.document_types)
        return service

    @classmethod
    def from_yaml(cls, config_path: Optional[Union[str, Path]] = None) -> "GeneratorService":
        """Build a service from a YAML configuration file."""
        return cls.from_config(load_service_config(config_path))

    # ==========================================================================
    # BULK REGISTRATION
    # ==========================================================================

    def set_renderers_config(self, renderers: Mapping[str, Any]) -> None:
        """
        Instantiate and register document renderers.

        Entries are processed in order; the first failing entry stops
        processing and already registered entries are kept.

        Args:
            renderers: Renderers configuration map {name: class identifier}

        Raises:
            InvalidRendererClassError: If an entry doesn't produce an IRenderer
            DuplicateNameError: If a renderer name has already been registered
        """
        for name, identifier in renderers.items():
            renderer = self._instantiate(
                RendererClassRegistry, name, identifier, InvalidRendererClassError
            )
            if not isinstance(renderer, IRenderer):
                raise InvalidRendererClassError(
                    name, identifier, f"got {type(renderer).__name__}"
                )
            self.register_renderer(name, renderer)

    def set_document_types_config(self, document_types: Mapping[str, Any]) -> None:
        """
        Instantiate and register document types.

        Args:
            document_types: Document types configuration map {name: class identifier}

        Raises:
            InvalidDocumentTypeClassError: If an entry doesn't produce an AbstractDocumentType
            DuplicateNameError: If a type name has already been registered
        """
        for name, identifier in document_types.items():
            document_type = self._instantiate(
                DocumentTypeClassRegistry, name, identifier, InvalidDocumentTypeClassError
            )
            if not isinstance(document_type, AbstractDocumentType):
                raise InvalidDocumentTypeClassError(
                    name, identifier, f"got {type(document_type).__name__}"
                )
            self.register_document_type(name, document_type)

    @staticmethod
    def _instantiate(
        registry: Type[ClassRegistry],
        name: str,
        identifier: Any,
        error_class: Type[Exception]
    ) -> Any:
        """Resolve identifier and call its provider with no arguments."""
        try:
            provider = registry.resolve(identifier)
        except ClassResolutionError as e:
            raise error_class(name, identifier, str(e)) from e

        reason = _zero_argument_problem(provider)
        if reason:
            raise error_class(name, identifier, reason)

        return provider()

    # ==========================================================================
    # DIRECT REGISTRATION
    # ==========================================================================

    def register_document_type(self, name: str, document_type: AbstractDocumentType) -> None:
        """
        Args:
            name: Document type name
            document_type: Document type instance

        Raises:
            DuplicateNameError: While registering document type with same name twice
        """
        if name in self._document_types:
            raise DuplicateNameError(name, DOCUMENT_TYPE)
        self._document_types[name] = document_type
        logger.info(f"Registered document type: {name} ({type(document_type).__name__})")

    def register_renderer(self, name: str, renderer: IRenderer) -> None:
        """
        Args:
            name: Renderer name
            renderer: Renderer instance

        Raises:
            DuplicateNameError: While registering renderer with same name twice
        """
        if name in self._renderers:
            raise DuplicateNameError(name, RENDERER)
        self._renderers[name] = renderer
        logger.info(f"Registered renderer: {name} ({type(renderer).__name__})")

    # ==========================================================================
    # LOOKUP
    # ==========================================================================

    def get_document_types(self) -> Mapping[str, AbstractDocumentType]:
        """Read-only snapshot of registered document types."""
        return MappingProxyType(dict(self._document_types))

    def get_renderers(self) -> Mapping[str, IRenderer]:
        """Read-only snapshot of registered renderers."""
        return MappingProxyType(dict(self._renderers))

    def get_document_type(self, name: str) -> AbstractDocumentType:
        """
        Raises:
            UnregisteredNameError: While requesting unregistered document type
        """
        try:
            return self._document_types[name]
        except KeyError:
            raise UnregisteredNameError(name, DOCUMENT_TYPE) from None

    def get_renderer(self, name: str) -> IRenderer:
        """
        Raises:
            UnregisteredNameError: While requesting unregistered renderer
        """
        try:
            return self._renderers[name]
        except KeyError:
            raise UnregisteredNameError(name, RENDERER) from None

    def get_placeholders_info(self, document_type_name: str) -> Dict[str, str]:
        """Placeholder descriptions of a document type, for template authors."""
        return self.get_document_type(document_type_name).get_placeholders_info()

    # ==========================================================================
    # GENERATION
    # ==========================================================================

    def generate(
        self,
        template_path: str,
        renderer_name: str,
        document_type_name: str,
        data_key: Any,
        fetcher_name: str = DEFAULT_FETCHER_NAME
    ) -> bytes:
        """
        Generate a document.

        Args:
            template_path: Path to template file
            renderer_name: Name of registered renderer
            document_type_name: Name of registered document type
            data_key: Data identifier for template substitutions
            fetcher_name: Data fetcher name (defined by document type)

        Returns:
            Rendered document as bytes
        """
        renderer = self.get_renderer(renderer_name)
        document_type = self.get_document_type(document_type_name)

        logger.debug(
            f"Generating '{document_type_name}' with renderer '{renderer_name}' "
            f"(key={data_key!r}, fetcher={fetcher_name}, template={template_path})"
        )
        data = document_type.get_data(data_key, fetcher_name)
        return renderer.render(template_path, data)

    def generate_sample(
        self,
        template_path: str,
        renderer_name: str,
        document_type_name: str,
        fetcher_name: str = DEFAULT_FETCHER_NAME
    ) -> bytes:
        """
        Generate a document filled with sample data.

        Args:
            template_path: Path to template file
            renderer_name: Name of registered renderer
            document_type_name: Name of registered document type
            fetcher_name: Data fetcher name (defined by document type)

        Returns:
            Rendered document as bytes
        """
        renderer = self.get_renderer(renderer_name)
        document_type = self.get_document_type(document_type_name)

        logger.debug(
            f"Generating sample '{document_type_name}' with renderer '{renderer_name}' "
            f"(fetcher={fetcher_name}, template={template_path})"
        )
        data = document_type.get_sample_data(fetcher_name)
        return renderer.render(template_path, data)


def _zero_argument_problem(provider: Any) -> Optional[str]:
    """Why provider can't be called without arguments, or None."""
    if inspect.isclass(provider):
        if inspect.isabstract(provider):
            return f"{provider.__name__} is abstract"
        target, bound = provider.__init__, (None,)
    else:
        target, bound = provider, ()

    try:
        signature = inspect.signature(target)
    except (TypeError, ValueError):
        # No introspectable signature (builtins); leave it to the call
        return None

    try:
        signature.bind(*bound)
    except TypeError as e:
        return f"can't instantiate without arguments ({e})"
    return None
