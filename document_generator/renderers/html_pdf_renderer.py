"""
HTML to PDF Renderer.

Renders documents from Jinja2 HTML templates with CSS styling and
converts them to PDF with WeasyPrint.
Self-registers with RendererClassRegistry under "html_pdf".
"""

import re
from pathlib import Path
from typing import List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, meta

from document_generator.config import GeneratorConfig, get_generator_config
from document_generator.core.exceptions import RendererException
from document_generator.core.interfaces import IRenderer, PlaceholderMap
from document_generator.core.registry import register_renderer
from document_generator.utils.logger import setup_logger

logger = setup_logger(__name__)


@register_renderer("html_pdf")
class HtmlPdfRenderer(IRenderer):
    """
    HTML to PDF renderer using WeasyPrint.

    Placeholders are available in templates both as top-level variables
    ({{ CUSTOMER_NAME }}) and through the `placeholders` mapping for names
    that are not valid identifiers ({{ placeholders["order-no"] }}). A
    placeholder named `placeholders` takes precedence over the mapping.
    """

    def __init__(self, config: Optional[GeneratorConfig] = None, strict: bool = False):
        """
        Args:
            config: Path configuration (defaults to global generator config)
            strict: Fail on placeholders missing from data instead of rendering them empty
        """
        self.config = config or get_generator_config()
        self.strict = strict

    def _environment(self, template_dir: Path) -> Environment:
        options = {
            "loader": FileSystemLoader(str(template_dir)),
            "autoescape": True,
            "trim_blocks": True,
            "lstrip_blocks": True,
        }
        if self.strict:
            options["undefined"] = StrictUndefined
        return Environment(**options)

    def _resolve(self, template_path: str) -> Path:
        path = self.config.resolve_template_path(template_path)
        if not path.exists():
            raise RendererException(f"Template not found: {path}")
        return path

    def render_html(self, template_path: str, data: PlaceholderMap) -> str:
        """
        Render HTML template with data.

        Raises:
            RendererException: If template is missing or fails to render
        """
        path = self._resolve(template_path)
        try:
            template = self._environment(path.parent).get_template(path.name)
            return template.render({"placeholders": data, **data})
        except TemplateError as e:
            raise RendererException(f"HTML template rendering failed for {path}: {e}") from e

    def render(self, template_path: str, data: PlaceholderMap) -> bytes:
        """
        Render HTML template to PDF.

        Args:
            template_path: Path to HTML template file
            data: Placeholder to substitution map

        Returns:
            PDF document as bytes
        """
        html_content = self.render_html(template_path, data)
        base_url = str(self._resolve(template_path).parent)

        pdf_bytes = self._write_pdf(html_content, base_url)
        logger.info(f"Rendered PDF from {template_path} ({len(pdf_bytes)} bytes)")
        return pdf_bytes

    def _write_pdf(self, html_content: str, base_url: str) -> bytes:
        """Convert HTML to PDF using WeasyPrint."""
        # WeasyPrint needs system libraries; load it only when converting
        from weasyprint import HTML
        from weasyprint.text.fonts import FontConfiguration

        try:
            font_config = FontConfiguration()
            return HTML(string=html_content, base_url=base_url).write_pdf(font_config=font_config)
        except Exception as e:
            raise RendererException(f"PDF conversion failed: {e}") from e

    def get_template_fields(self, template_path: str) -> List[str]:
        """Extract variable names referenced by template."""
        path = self._resolve(template_path)
        env = self._environment(path.parent)
        source = path.read_text(encoding="utf-8")
        try:
            ast = env.parse(source)
        except TemplateError as e:
            raise RendererException(f"Invalid HTML template {path}: {e}") from e

        fields = set(meta.find_undeclared_variables(ast))
        fields.discard("placeholders")
        # Names only reachable through the placeholders mapping
        fields.update(re.findall(r"placeholders\[\s*['\"]([^'\"]+)['\"]\s*\]", source))
        return sorted(fields)
