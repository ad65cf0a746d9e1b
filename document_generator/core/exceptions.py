"""
Custom exceptions for the document generator.
"""

from typing import Any


class DocumentGeneratorException(Exception):
    """Base exception for the document generator."""
    pass


# ==============================================================================
# SERVICE ERRORS
# ==============================================================================

class GeneratorServiceException(DocumentGeneratorException):
    """Base exception for registration and resolution errors of the service."""
    pass


class DuplicateNameError(GeneratorServiceException):
    """Raised when a renderer or document type name is registered twice."""

    def __init__(self, name: str, kind: str):
        self.name = name
        self.kind = kind
        super().__init__(f"Can't register {kind} with same name twice: '{name}'")


class InvalidRendererClassError(GeneratorServiceException):
    """Raised when a configured renderer class does not implement IRenderer."""

    def __init__(self, name: str, identifier: Any, reason: str = ""):
        self.name = name
        self.identifier = identifier
        message = (
            f"Configured class of renderer '{name}' ({identifier!r}) must implement "
            f"document_generator.core.interfaces.IRenderer"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidDocumentTypeClassError(GeneratorServiceException):
    """Raised when a configured document type class is not an AbstractDocumentType."""

    def __init__(self, name: str, identifier: Any, reason: str = ""):
        self.name = name
        self.identifier = identifier
        message = (
            f"Configured class of document type '{name}' ({identifier!r}) must be descendant of "
            f"document_generator.core.interfaces.AbstractDocumentType"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnregisteredNameError(GeneratorServiceException):
    """Raised when a renderer or document type is requested by an unknown name."""

    def __init__(self, name: str, kind: str):
        self.name = name
        self.kind = kind
        super().__init__(f"{kind.capitalize()} \"{name}\" is not registered.")


# ==============================================================================
# CONFIGURATION ERRORS
# ==============================================================================

class ConfigurationException(DocumentGeneratorException):
    """Exception raised for configuration errors."""
    pass


class ClassResolutionError(ConfigurationException):
    """Raised when a class identifier can't be resolved to a constructible value."""

    def __init__(self, identifier: Any, reason: str):
        self.identifier = identifier
        super().__init__(f"Can't resolve class identifier {identifier!r}: {reason}")


# ==============================================================================
# COLLABORATOR ERRORS
# ==============================================================================

class DataFetcherException(DocumentGeneratorException):
    """Exception raised by data fetchers."""
    pass


class DataNotFoundException(DataFetcherException):
    """Raised when a fetcher can't find data associated with a key."""

    def __init__(self, key: Any, message: str = ""):
        self.key = key
        super().__init__(message or f"Data not found for key: {key!r}")


class RendererException(DocumentGeneratorException):
    """Exception raised by renderers."""
    pass
