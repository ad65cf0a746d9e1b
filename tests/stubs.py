"""
Collaborator stubs shared by the test suite.

Kept in an importable module so configuration tests can refer to them
by import path ("stubs:RendererStub").
"""

from collections import Counter
from typing import Any, Dict, List, Tuple

from document_generator.core.exceptions import DataNotFoundException
from document_generator.core.interfaces import AbstractDocumentType, IDataFetcher, IRenderer


class RendererStub(IRenderer):
    """Renderer returning a fixed document and recording its calls."""

    OUTPUT = b"rendered document"

    def __init__(self):
        self.calls: List[Tuple[str, Dict[str, str]]] = []

    def render(self, template_path, data):
        self.calls.append((template_path, dict(data)))
        return self.OUTPUT


class FetcherStub(IDataFetcher):
    """Fetcher serving one data key."""

    def __init__(self, name: str = "default"):
        self.name = name

    def get_placeholders_info(self):
        return {"PLACEHOLDER": "some placeholder"}

    def get_data(self, key):
        if key != "data-key":
            raise DataNotFoundException(key)
        return {"PLACEHOLDER": "substitution", "FETCHER": self.name}

    def get_sample_data(self):
        return {"PLACEHOLDER": "sample", "FETCHER": self.name}


class DocumentTypeStub(AbstractDocumentType):
    """Document type counting fetcher creations per name."""

    def __init__(self):
        super().__init__()
        self.created: Counter = Counter()

    def create_data_fetcher(self, name):
        self.created[name] += 1
        return FetcherStub(name)


class NotARenderer:
    """Zero-argument constructible class implementing nothing."""

    def render(self, template_path: str, data: Any) -> bytes:
        return b""


class RendererRequiringArguments(IRenderer):
    def __init__(self, output: bytes):
        self.output = output

    def render(self, template_path, data):
        return self.output


class BrokenConstructorRenderer(IRenderer):
    """Zero-argument constructible renderer whose constructor fails."""

    def __init__(self):
        raise TypeError("broken constructor")

    def render(self, template_path, data):
        return b""
