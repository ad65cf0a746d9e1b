"""
Document generator configuration.

Path configuration for bundled collaborators and the YAML service
configuration consumed by GeneratorService.from_yaml().
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from document_generator.core.exceptions import ConfigurationException
from document_generator.utils.logger import setup_logger
from document_generator.utils.settings import get_settings

logger = setup_logger(__name__)


@dataclass
class GeneratorConfig:
    """
    Path configuration for the document generator.

    Relative template paths handed to the bundled renderers are resolved
    against templates_dir.
    """

    project_root: Path = field(default_factory=Path.cwd)
    templates_dir: Optional[Path] = None
    config_path: Optional[Path] = None

    def __post_init__(self):
        """Initialize default paths if not provided."""
        settings = get_settings()

        self.project_root = Path(self.project_root)

        if self.templates_dir is None:
            if settings.TEMPLATES_DIR:
                self.templates_dir = Path(settings.TEMPLATES_DIR)
            else:
                self.templates_dir = self.project_root / "templates"

        if self.config_path is None:
            self.config_path = Path(settings.CONFIG_PATH)

        self.templates_dir = Path(self.templates_dir)
        self.config_path = Path(self.config_path)

        if not self.templates_dir.is_absolute():
            self.templates_dir = self.project_root / self.templates_dir
        if not self.config_path.is_absolute():
            self.config_path = self.project_root / self.config_path

    def resolve_template_path(self, template_path: Union[str, Path]) -> Path:
        """Resolve a template path relative to templates_dir."""
        path = Path(template_path)
        if not path.is_absolute():
            path = self.templates_dir / path
        return path


# Global configuration instance
_config_instance: Optional[GeneratorConfig] = None


def get_generator_config() -> GeneratorConfig:
    """
    Get global generator config instance.

    Returns:
        GeneratorConfig instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = GeneratorConfig()
    return _config_instance


def set_generator_config(config: Optional[GeneratorConfig]) -> None:
    """
    Set global generator config instance.

    Args:
        config: GeneratorConfig instance, or None to reset to defaults
    """
    global _config_instance
    _config_instance = config


# ==============================================================================
# SERVICE CONFIGURATION
# ==============================================================================

class GeneratorServiceConfig(BaseModel):
    """
    Bulk registration configuration of a GeneratorService.

    Example (YAML):
        renderers:
          docx: docx
          pdf: "document_generator.renderers.html_pdf_renderer:HtmlPdfRenderer"
        document_types:
          invoice: "myapp.documents:InvoiceDocumentType"
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    renderers: Dict[str, Any] = Field(default_factory=dict, alias="renderers_config")
    document_types: Dict[str, Any] = Field(default_factory=dict, alias="document_types_config")


def parse_service_config(raw: Optional[Dict[str, Any]]) -> GeneratorServiceConfig:
    """
    Validate a raw configuration mapping.

    Raises:
        ConfigurationException: If the mapping has the wrong shape
    """
    try:
        return GeneratorServiceConfig.model_validate(raw or {})
    except ValidationError as e:
        raise ConfigurationException(f"Invalid document generator configuration: {e}") from e


def load_service_config(config_path: Optional[Union[str, Path]] = None) -> GeneratorServiceConfig:
    """
    Load service configuration from a YAML file.

    Args:
        config_path: Path to YAML file (defaults to GeneratorConfig.config_path)

    Returns:
        GeneratorServiceConfig

    Raises:
        ConfigurationException: If file is missing, unreadable or invalid
    """
    path = Path(config_path) if config_path else get_generator_config().config_path

    if not path.exists():
        raise ConfigurationException(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationException(f"Failed to parse config file {path}: {e}") from e

    if raw is not None and not isinstance(raw, dict):
        raise ConfigurationException(f"Config file {path} must contain a mapping")

    config = parse_service_config(raw)
    logger.info(
        f"Loaded document generator config from {path} "
        f"({len(config.renderers)} renderers, {len(config.document_types)} document types)"
    )
    return config
