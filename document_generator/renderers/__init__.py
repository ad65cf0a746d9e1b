"""
Template renderers for the document generator.

Renderers generate documents from templates.
"""

# Import all renderers to trigger self-registration
from document_generator.renderers.docx_renderer import DocxRenderer
from document_generator.renderers.html_pdf_renderer import HtmlPdfRenderer

__all__ = [
    "DocxRenderer",
    "HtmlPdfRenderer",
]
