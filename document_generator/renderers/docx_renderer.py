"""
DOCX renderer implementation.

This renderer handles Microsoft Word document generation.
It self-registers with the RendererClassRegistry under "docx".
"""

import io
import re
import zipfile
from typing import Iterator, List, Optional

from docx import Document
from docx.opc.exceptions import PackageNotFoundError

from document_generator.config import GeneratorConfig, get_generator_config
from document_generator.core.exceptions import RendererException
from document_generator.core.interfaces import IRenderer, PlaceholderMap
from document_generator.core.registry import register_renderer
from document_generator.utils.logger import setup_logger

logger = setup_logger(__name__)

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([^{}]+?)\s*\}\}")


@register_renderer("docx")
class DocxRenderer(IRenderer):
    """
    Microsoft Word (DOCX) renderer.

    Replaces {{PLACEHOLDER}} markers in paragraphs, tables, headers and
    footers using python-docx.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """
        Args:
            config: Path configuration (defaults to global generator config)
        """
        self.config = config or get_generator_config()

    def render(self, template_path: str, data: PlaceholderMap) -> bytes:
        """
        Render DOCX template with data.

        Args:
            template_path: Path to .docx template file
            data: Placeholder to substitution map

        Returns:
            Generated .docx document as bytes

        Raises:
            RendererException: If the template is missing or not a DOCX file
        """
        doc = self._load(template_path)

        replaced = 0
        for paragraph in self._iter_paragraphs(doc):
            if self._replace_in_paragraph(paragraph, data):
                replaced += 1
        logger.info(f"Rendered DOCX template {template_path}: replaced in {replaced} paragraphs")

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    def get_template_fields(self, template_path: str) -> List[str]:
        """Extract placeholder names from template."""
        doc = self._load(template_path)
        fields = set()
        for paragraph in self._iter_paragraphs(doc):
            fields.update(PLACEHOLDER_PATTERN.findall(paragraph.text))
        return sorted(fields)

    def _load(self, template_path: str):
        path = self.config.resolve_template_path(template_path)
        if not path.exists():
            raise RendererException(f"Template not found: {path}")

        try:
            return Document(str(path))
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError) as e:
            raise RendererException(f"Invalid DOCX template {path}: {e}") from e

    def _iter_paragraphs(self, doc) -> Iterator:
        """Paragraphs of body, table cells, headers and footers."""
        yield from doc.paragraphs
        for table in doc.tables:
            yield from self._iter_table_paragraphs(table)

        for section in doc.sections:
            for part in (section.header, section.footer):
                # Accessing a linked part would add an empty definition
                if part.is_linked_to_previous:
                    continue
                yield from part.paragraphs
                for table in part.tables:
                    yield from self._iter_table_paragraphs(table)

    def _iter_table_paragraphs(self, table) -> Iterator:
        for row in table.rows:
            for cell in row.cells:
                yield from cell.paragraphs
                for nested in cell.tables:
                    yield from self._iter_table_paragraphs(nested)

    def _replace_in_paragraph(self, paragraph, data: PlaceholderMap) -> bool:
        """Replace placeholders in a single paragraph preserving first run formatting."""
        full_text = paragraph.text
        if "{{" not in full_text:
            return False

        def substitute(match):
            name = match.group(1)
            if name not in data:
                return match.group(0)
            value = data[name]
            return "" if value is None else str(value)

        new_text = PLACEHOLDER_PATTERN.sub(substitute, full_text)
        if new_text == full_text:
            return False

        # Clear existing runs, keep formatting of the first one
        runs = paragraph.runs
        for run in runs:
            run.text = ""
        if runs:
            runs[0].text = new_text
        else:
            paragraph.add_run(new_text)
        return True
