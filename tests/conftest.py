# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds project root and tests directory to sys.path so imports work correctly.
"""

import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
tests_root = Path(__file__).parent

for path in (project_root, tests_root):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

import pytest

from document_generator import GeneratorConfig, GeneratorService, set_generator_config
from stubs import DocumentTypeStub, RendererStub


@pytest.fixture
def service() -> GeneratorService:
    return GeneratorService()


@pytest.fixture
def renderer() -> RendererStub:
    return RendererStub()


@pytest.fixture
def document_type() -> DocumentTypeStub:
    return DocumentTypeStub()


@pytest.fixture
def templates_dir(tmp_path) -> Path:
    """Global generator config pointing at a temporary templates directory."""
    directory = tmp_path / "templates"
    directory.mkdir()
    set_generator_config(GeneratorConfig(project_root=tmp_path, templates_dir=directory))
    yield directory
    set_generator_config(None)
