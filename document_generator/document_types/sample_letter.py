"""
Sample letter document type.

Ready-made static document type used by the bundled example configuration
and for previewing templates.
"""

from document_generator.core.registry import register_document_type
from document_generator.document_types.static_document_type import StaticDocumentType


@register_document_type("sample_letter")
class SampleLetterDocumentType(StaticDocumentType):
    """Letter with recipient, subject and date placeholders."""

    FETCHERS = {
        "default": {
            "data_sets": {
                "welcome": {
                    "RECIPIENT_NAME": "Jane Doe",
                    "SUBJECT": "Welcome aboard",
                    "DATE": "2024-01-15",
                },
            },
            "sample_data": {
                "RECIPIENT_NAME": "Recipient name",
                "SUBJECT": "Letter subject",
                "DATE": "YYYY-MM-DD",
            },
            "placeholders": {
                "RECIPIENT_NAME": "Full name of the letter recipient",
                "SUBJECT": "Subject line",
                "DATE": "Letter date",
            },
        },
    }
