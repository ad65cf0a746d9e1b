"""
Tests for GeneratorService registries and generation pipelines.
"""

from unittest.mock import MagicMock

import pytest

from document_generator import (
    DEFAULT_FETCHER_NAME,
    AbstractDocumentType,
    DataNotFoundException,
    DuplicateNameError,
    GeneratorService,
    GeneratorServiceException,
    InvalidDocumentTypeClassError,
    InvalidRendererClassError,
    IRenderer,
    RendererException,
    UnregisteredNameError,
)
from stubs import BrokenConstructorRenderer, DocumentTypeStub, NotARenderer, RendererStub

TEMPLATE = "some/template/file.format"


def test_has_no_document_types_initially(service):
    assert dict(service.get_document_types()) == {}


def test_has_no_renderers_initially(service):
    assert dict(service.get_renderers()) == {}


def test_can_register_new_document_type(service, document_type):
    service.register_document_type("someDoc", document_type)
    assert dict(service.get_document_types()) == {"someDoc": document_type}


def test_can_register_new_renderer(service, renderer):
    service.register_renderer("format", renderer)
    assert dict(service.get_renderers()) == {"format": renderer}


def test_can_register_renderers_under_distinct_names(service):
    first, second = RendererStub(), RendererStub()
    service.register_renderer("a", first)
    service.register_renderer("b", second)
    assert dict(service.get_renderers()) == {"a": first, "b": second}


def test_can_not_register_renderer_with_same_name_twice(service, renderer):
    service.register_renderer("format", renderer)

    with pytest.raises(DuplicateNameError) as exc_info:
        service.register_renderer("format", RendererStub())

    assert exc_info.value.name == "format"
    assert dict(service.get_renderers()) == {"format": renderer}


def test_can_not_register_document_type_with_same_name_twice(service, document_type):
    service.register_document_type("someDoc", document_type)

    with pytest.raises(DuplicateNameError):
        service.register_document_type("someDoc", DocumentTypeStub())

    assert service.get_document_type("someDoc") is document_type


def test_service_errors_share_base_class(service, renderer):
    service.register_renderer("format", renderer)
    with pytest.raises(GeneratorServiceException):
        service.register_renderer("format", renderer)


def test_registries_are_read_only_snapshots(service, renderer):
    snapshot = service.get_renderers()
    service.register_renderer("format", renderer)

    assert "format" not in snapshot
    with pytest.raises(TypeError):
        service.get_renderers()["other"] = renderer


def test_can_configure_renderers_from_configuration_mapping(service):
    service.set_renderers_config({
        "fmt-1": RendererStub,
        "fmt-2": "stubs:RendererStub",
    })

    renderers = service.get_renderers()
    assert set(renderers) == {"fmt-1", "fmt-2"}
    assert all(isinstance(r, RendererStub) for r in renderers.values())
    assert renderers["fmt-1"] is not renderers["fmt-2"]


def test_can_configure_document_types_from_configuration_mapping(service):
    service.set_document_types_config({
        "doctype-1": "stubs.DocumentTypeStub",
        "doctype-2": "stubs.DocumentTypeStub",
    })

    document_types = service.get_document_types()
    assert set(document_types) == {"doctype-1", "doctype-2"}
    assert document_types["doctype-1"] is not document_types["doctype-2"]


def test_can_configure_components_from_zero_argument_factories(service):
    service.set_renderers_config({"format": lambda: RendererStub()})
    assert isinstance(service.get_renderer("format"), RendererStub)


def test_can_not_configure_renderers_with_invalid_class(service):
    with pytest.raises(InvalidRendererClassError):
        service.set_renderers_config({"x": NotARenderer})

    assert "x" not in service.get_renderers()


def test_can_not_configure_document_types_with_invalid_class(service):
    with pytest.raises(InvalidDocumentTypeClassError):
        service.set_document_types_config({"doctype": dict})

    assert dict(service.get_document_types()) == {}


def test_abstract_class_is_invalid_renderer_class(service):
    with pytest.raises(InvalidRendererClassError):
        service.set_renderers_config({"x": IRenderer})


def test_class_requiring_arguments_is_invalid(service):
    with pytest.raises(InvalidRendererClassError) as exc_info:
        service.set_renderers_config({"x": "stubs:RendererRequiringArguments"})

    assert "without arguments" in str(exc_info.value)
    assert "x" not in service.get_renderers()


def test_factory_requiring_arguments_is_invalid(service):
    with pytest.raises(InvalidRendererClassError):
        service.set_renderers_config({"x": lambda output: RendererStub()})


def test_constructor_errors_propagate_unchanged(service):
    with pytest.raises(TypeError, match="broken constructor"):
        service.set_renderers_config({"x": BrokenConstructorRenderer})

    assert "x" not in service.get_renderers()


def test_unresolvable_identifier_is_invalid_class(service):
    with pytest.raises(InvalidRendererClassError):
        service.set_renderers_config({"x": "no_such_module:Renderer"})

    with pytest.raises(InvalidDocumentTypeClassError):
        service.set_document_types_config({"x": "not-an-alias"})


def test_bulk_configuration_stops_at_first_invalid_entry_without_rollback(service):
    with pytest.raises(InvalidRendererClassError):
        service.set_renderers_config({
            "first": RendererStub,
            "broken": NotARenderer,
            "after": RendererStub,
        })

    assert set(service.get_renderers()) == {"first"}


def test_bulk_configuration_rejects_registered_name(service, renderer):
    service.register_renderer("format", renderer)

    with pytest.raises(DuplicateNameError):
        service.set_renderers_config({"format": RendererStub})

    assert service.get_renderer("format") is renderer


def test_get_unregistered_names(service):
    with pytest.raises(UnregisteredNameError) as exc_info:
        service.get_document_type("missing")
    assert exc_info.value.name == "missing"
    assert exc_info.value.kind == "document type"

    with pytest.raises(UnregisteredNameError) as exc_info:
        service.get_renderer("missing")
    assert exc_info.value.kind == "renderer"


def test_can_generate_document_with_proper_renderer_and_type():
    service = GeneratorService()
    data = {"PLACEHOLDER": "substitution"}

    renderer = MagicMock(spec=IRenderer)
    renderer.render.return_value = b"rendered document"
    doc_type = MagicMock(spec=AbstractDocumentType)
    doc_type.get_data.return_value = data

    service.register_renderer("format", renderer)
    service.register_document_type("doc-type", doc_type)

    result = service.generate(TEMPLATE, "format", "doc-type", "data-key")

    assert result == b"rendered document"
    doc_type.get_data.assert_called_once_with("data-key", DEFAULT_FETCHER_NAME)
    renderer.render.assert_called_once_with(TEMPLATE, data)


def test_can_generate_document_with_proper_renderer_and_type_and_fetcher():
    service = GeneratorService()
    data = {"PLACEHOLDER": "substitution"}

    renderer = MagicMock(spec=IRenderer)
    renderer.render.return_value = b"rendered document"
    doc_type = MagicMock(spec=AbstractDocumentType)
    doc_type.get_data.return_value = data

    service.register_renderer("format", renderer)
    service.register_document_type("doc-type", doc_type)

    result = service.generate(TEMPLATE, "format", "doc-type", "data-key", "fetcher")

    assert result == b"rendered document"
    doc_type.get_data.assert_called_once_with("data-key", "fetcher")
    renderer.render.assert_called_once_with(TEMPLATE, data)


def test_generate_uses_default_fetcher(service, renderer, document_type):
    service.register_renderer("format", renderer)
    service.register_document_type("doc-type", document_type)

    result = service.generate(TEMPLATE, "format", "doc-type", "data-key")

    assert result == RendererStub.OUTPUT
    assert renderer.calls == [
        (TEMPLATE, {"PLACEHOLDER": "substitution", "FETCHER": "default"})
    ]
    assert dict(document_type.created) == {"default": 1}


def test_generate_uses_named_fetcher(service, renderer, document_type):
    service.register_renderer("format", renderer)
    service.register_document_type("doc-type", document_type)

    service.generate(TEMPLATE, "format", "doc-type", "data-key", "alt")

    assert renderer.calls[0][1]["FETCHER"] == "alt"
    assert dict(document_type.created) == {"alt": 1}


def test_generate_sample(service, renderer, document_type):
    service.register_renderer("format", renderer)
    service.register_document_type("doc-type", document_type)

    assert service.generate_sample(TEMPLATE, "format", "doc-type") == RendererStub.OUTPUT
    service.generate_sample(TEMPLATE, "format", "doc-type", "alt")

    assert renderer.calls == [
        (TEMPLATE, {"PLACEHOLDER": "sample", "FETCHER": "default"}),
        (TEMPLATE, {"PLACEHOLDER": "sample", "FETCHER": "alt"}),
    ]


def test_generate_with_unregistered_renderer_invokes_no_collaborator():
    service = GeneratorService()
    doc_type = MagicMock(spec=AbstractDocumentType)
    service.register_document_type("doc-type", doc_type)

    with pytest.raises(UnregisteredNameError):
        service.generate(TEMPLATE, "missing", "doc-type", "data-key")
    with pytest.raises(UnregisteredNameError):
        service.generate_sample(TEMPLATE, "missing", "doc-type")

    doc_type.get_data.assert_not_called()
    doc_type.get_sample_data.assert_not_called()


def test_generate_with_unregistered_document_type_invokes_no_collaborator():
    service = GeneratorService()
    renderer = MagicMock(spec=IRenderer)
    service.register_renderer("format", renderer)

    with pytest.raises(UnregisteredNameError):
        service.generate(TEMPLATE, "format", "missing", "data-key")

    renderer.render.assert_not_called()


def test_fetcher_errors_propagate_untranslated(service, renderer, document_type):
    service.register_renderer("format", renderer)
    service.register_document_type("doc-type", document_type)

    with pytest.raises(DataNotFoundException) as exc_info:
        service.generate(TEMPLATE, "format", "doc-type", "unknown-key")

    assert exc_info.value.key == "unknown-key"
    assert renderer.calls == []


def test_renderer_errors_propagate_untranslated(service, document_type):
    error = RendererException("engine failure")
    renderer = MagicMock(spec=IRenderer)
    renderer.render.side_effect = error
    service.register_renderer("format", renderer)
    service.register_document_type("doc-type", document_type)

    with pytest.raises(RendererException) as exc_info:
        service.generate(TEMPLATE, "format", "doc-type", "data-key")

    assert exc_info.value is error


def test_get_placeholders_info(service, document_type):
    service.register_document_type("doc-type", document_type)
    assert service.get_placeholders_info("doc-type") == {"PLACEHOLDER": "some placeholder"}
