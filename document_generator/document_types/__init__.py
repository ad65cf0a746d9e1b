"""
Bundled document types.
"""

# Import all document types to trigger self-registration
from document_generator.document_types.static_document_type import StaticDocumentType
from document_generator.document_types.sample_letter import SampleLetterDocumentType

__all__ = [
    "StaticDocumentType",
    "SampleLetterDocumentType",
]
