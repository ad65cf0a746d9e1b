"""
Registry pattern implementation for configurable generator components.

Renderer and document type classes register under short aliases so the
service configuration can refer to them by name. Identifiers that are not
registered aliases are imported from a dotted path.
"""

import importlib
from typing import Any, Callable, Dict, List

from document_generator.core.exceptions import ClassResolutionError
from document_generator.utils.logger import setup_logger

logger = setup_logger(__name__)

# Zero-argument constructor function or class
Provider = Callable[[], Any]


def resolve_identifier(identifier: str) -> Provider:
    """
    Import a provider from a dotted path.

    Accepts both "package.module:ClassName" and "package.module.ClassName".

    Raises:
        ClassResolutionError: If the module or attribute can't be loaded
    """
    if ":" in identifier:
        module_path, _, attr_path = identifier.partition(":")
    else:
        module_path, _, attr_path = identifier.rpartition(".")

    if not module_path or not attr_path:
        raise ClassResolutionError(identifier, "expected 'package.module:ClassName'")

    try:
        target = importlib.import_module(module_path)
    except ImportError as e:
        raise ClassResolutionError(identifier, f"module '{module_path}' can't be imported ({e})") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise ClassResolutionError(identifier, f"'{attr}' not found in '{module_path}'") from e

    if not callable(target):
        raise ClassResolutionError(identifier, "resolved value is not callable")

    return target


# ==============================================================================
# CLASS REGISTRIES
# ==============================================================================

class ClassRegistry:
    """
    Alias to provider registry.

    Subclasses own their registry table. Components self-register using
    the matching decorator.
    """

    KIND = "component"
    _REGISTRY: Dict[str, Provider] = {}

    @classmethod
    def register(cls, alias: str, provider: Provider) -> None:
        """
        Register a zero-argument provider under an alias.

        Args:
            alias: Short name used in configuration (docx, html_pdf, etc.)
            provider: Class or function returning a new instance
        """
        if alias in cls._REGISTRY:
            logger.warning(f"{cls.KIND.capitalize()} class '{alias}' already registered, overwriting")

        cls._REGISTRY[alias] = provider
        logger.debug(f"Registered {cls.KIND} class: {alias}")

    @classmethod
    def resolve(cls, identifier: Any) -> Provider:
        """
        Resolve a class identifier to a provider.

        Args:
            identifier: Registered alias, dotted import path, or a class/callable

        Returns:
            Zero-argument provider

        Raises:
            ClassResolutionError: If identifier can't be resolved
        """
        if isinstance(identifier, str):
            provider = cls._REGISTRY.get(identifier)
            if provider is not None:
                return provider
            if "." in identifier or ":" in identifier:
                return resolve_identifier(identifier)
            raise ClassResolutionError(
                identifier,
                f"not a registered {cls.KIND} alias. Available: {cls.list_aliases()}"
            )

        if callable(identifier):
            return identifier

        raise ClassResolutionError(identifier, "expected an alias, an import path or a class")

    @classmethod
    def list_aliases(cls) -> List[str]:
        """Get list of registered aliases"""
        return list(cls._REGISTRY.keys())

    @classmethod
    def is_registered(cls, alias: str) -> bool:
        """Check if alias is registered"""
        return alias in cls._REGISTRY


class RendererClassRegistry(ClassRegistry):
    """Registry of renderer classes available to configuration."""

    KIND = "renderer"
    _REGISTRY: Dict[str, Provider] = {}


class DocumentTypeClassRegistry(ClassRegistry):
    """Registry of document type classes available to configuration."""

    KIND = "document type"
    _REGISTRY: Dict[str, Provider] = {}


def register_renderer(alias: str):
    """
    Decorator to register a renderer class.

    Usage:
        @register_renderer("docx")
        class DocxRenderer(IRenderer):
            def render(self, template_path, data):
                # Implementation
    """
    def decorator(cls):
        RendererClassRegistry.register(alias, cls)
        return cls
    return decorator


def register_document_type(alias: str):
    """
    Decorator to register a document type class.

    Usage:
        @register_document_type("invoice")
        class InvoiceDocumentType(AbstractDocumentType):
            def create_data_fetcher(self, name):
                # Implementation
    """
    def decorator(cls):
        DocumentTypeClassRegistry.register(alias, cls)
        return cls
    return decorator
