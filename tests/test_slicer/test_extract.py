"""Tests for specslice.slicer.extract."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from specslice.exceptions import InvalidSelectionError
from specslice.models import OperationSelection, TagSelection
from specslice.slicer.document import SourceDocument
from specslice.slicer.extract import extract
from specslice.slicer.refs import collect_refs


def _pool(doc: dict[str, Any]) -> dict[str, Any]:
    if "definitions" in doc:
        return doc["definitions"]
    return doc.get("components", {}).get("schemas", {})


# ---------------------------------------------------------------------------
# Minimal scenario
# ---------------------------------------------------------------------------


@pytest.fixture
def pets_doc() -> dict[str, Any]:
    return {
        "swagger": "2.0",
        "info": {"title": "Pets", "version": "1.0"},
        "tags": [{"name": "pets", "description": "Pet things"}, {"name": "other"}],
        "paths": {
            "/pets": {
                "get": {
                    "tags": ["pets"],
                    "responses": {"200": {"schema": {"$ref": "#/definitions/Pet"}}},
                }
            }
        },
        "definitions": {
            "Pet": {"properties": {"owner": {"$ref": "#/definitions/Owner"}}},
            "Owner": {"properties": {"name": {"type": "string"}}},
        },
    }


class TestConcreteScenario:
    def test_extract_by_tag(self, pets_doc: dict[str, Any]) -> None:
        result = extract(pets_doc, TagSelection(tag="pets"))

        assert result["paths"] == {"/pets": {"get": pets_doc["paths"]["/pets"]["get"]}}
        assert result["definitions"] == pets_doc["definitions"]
        assert result["tags"] == [{"name": "pets", "description": "Pet things"}]
        assert result["swagger"] == "2.0"
        assert result["info"] == {"title": "Pets", "version": "1.0"}

    def test_no_match(self, pets_doc: dict[str, Any]) -> None:
        result = extract(pets_doc, TagSelection(tag="nonexistent"))

        assert result["paths"] == {}
        assert result["definitions"] == {}
        assert result["tags"] == []
        assert result["info"] == pets_doc["info"]

    def test_accepts_source_document(self, pets_doc: dict[str, Any]) -> None:
        source = SourceDocument.from_raw(pets_doc)
        assert extract(source, TagSelection(tag="pets")) == extract(pets_doc, TagSelection(tag="pets"))


# ---------------------------------------------------------------------------
# Swagger 2.0 fixture
# ---------------------------------------------------------------------------


class TestSwaggerByTag:
    @pytest.fixture()
    def result(self, swagger_raw: dict[str, Any]) -> dict[str, Any]:
        return extract(swagger_raw, TagSelection(tag="pets"))

    def test_transport_metadata_copied(self, result: dict[str, Any]) -> None:
        assert result["host"] == "petstore.example.com"
        assert result["basePath"] == "/v2"
        assert result["schemes"] == ["https"]
        assert result["consumes"] == ["application/json"]
        assert result["produces"] == ["application/json"]
        assert "servers" not in result

    def test_only_matching_methods_retained(self, result: dict[str, Any]) -> None:
        assert set(result["paths"]) == {"/pets", "/pets/{petId}"}
        assert set(result["paths"]["/pets"]) == {"get", "post"}
        # delete is tagged "admin" and must not leak in.
        assert "delete" not in result["paths"]["/pets/{petId}"]
        assert "get" in result["paths"]["/pets/{petId}"]

    def test_path_level_keys_preserved(self, result: dict[str, Any], swagger_raw: dict[str, Any]) -> None:
        path_item = result["paths"]["/pets/{petId}"]
        assert path_item["parameters"] == swagger_raw["paths"]["/pets/{petId}"]["parameters"]
        assert path_item["x-owner"] == "pets-team"

    def test_closure(self, result: dict[str, Any]) -> None:
        assert set(result["definitions"]) == {
            "Pet", "Owner", "Address", "Tag", "Error", "NewPet", "PetBase",
        }
        assert "components" not in result

    def test_tags_filtered(self, result: dict[str, Any]) -> None:
        assert result["tags"] == [{"name": "pets", "description": "Everything about your pets"}]

    def test_additional_properties_followed(self, swagger_raw: dict[str, Any]) -> None:
        result = extract(swagger_raw, TagSelection(tag="store"))
        assert set(result["definitions"]) == {"Order", "OrderNote"}

    def test_untagged_operations_are_default(self, swagger_raw: dict[str, Any]) -> None:
        result = extract(swagger_raw, TagSelection(tag="default"))
        assert list(result["paths"]) == ["/health"]
        assert set(result["definitions"]) == {"Health"}

    def test_null_tags_are_default(self, swagger_raw: dict[str, Any]) -> None:
        swagger_raw["paths"]["/health"]["get"]["tags"] = None
        result = extract(swagger_raw, TagSelection(tag="default"))
        assert list(result["paths"]) == ["/health"]

    def test_input_not_mutated(self, swagger_raw: dict[str, Any]) -> None:
        before = copy.deepcopy(swagger_raw)
        result = extract(swagger_raw, TagSelection(tag="pets"))
        result["paths"]["/pets"]["get"]["summary"] = "changed"
        result["definitions"]["Pet"]["type"] = "changed"
        result["info"]["title"] = "changed"
        assert swagger_raw == before


# ---------------------------------------------------------------------------
# OpenAPI 3.0 fixture
# ---------------------------------------------------------------------------


class TestOpenApiByTag:
    @pytest.fixture()
    def result(self, openapi_raw: dict[str, Any]) -> dict[str, Any]:
        return extract(openapi_raw, TagSelection(tag="pets"))

    def test_dialect_isolation(self, result: dict[str, Any]) -> None:
        assert "definitions" not in result
        assert "host" not in result
        assert "swagger" not in result
        assert result["openapi"] == "3.0.3"

    def test_components_only_schemas(self, result: dict[str, Any]) -> None:
        assert list(result["components"]) == ["schemas"]

    def test_closure_includes_request_body_and_parameters(self, result: dict[str, Any]) -> None:
        assert set(result["components"]["schemas"]) == {
            "Pet", "PetStatus", "NewPet", "NewPetXml", "Category",
        }

    def test_servers_copied(self, result: dict[str, Any], openapi_raw: dict[str, Any]) -> None:
        assert result["servers"] == openapi_raw["servers"]

    def test_other_tag(self, openapi_raw: dict[str, Any]) -> None:
        result = extract(openapi_raw, TagSelection(tag="users"))
        assert list(result["paths"]) == ["/users/{userId}"]
        assert set(result["components"]["schemas"]) == {"User", "Pet", "Category"}

    def test_no_match_keeps_dialect(self, openapi_raw: dict[str, Any]) -> None:
        result = extract(openapi_raw, TagSelection(tag="nothing"))
        assert result["components"] == {"schemas": {}}
        assert result["paths"] == {}


# ---------------------------------------------------------------------------
# By operation
# ---------------------------------------------------------------------------


class TestByOperation:
    def test_single_operation(self, swagger_raw: dict[str, Any]) -> None:
        result = extract(
            swagger_raw, OperationSelection(path="/pets", method="post", tag="pets")
        )
        assert list(result["paths"]) == ["/pets"]
        assert list(result["paths"]["/pets"]) == ["post"]
        assert set(result["definitions"]) == {"NewPet", "PetBase", "Pet", "Owner", "Address", "Tag"}
        assert result["tags"] == [{"name": "pets", "description": "Everything about your pets"}]

    def test_tag_label_is_independent_of_closure(self, swagger_raw: dict[str, Any]) -> None:
        labelled = extract(swagger_raw, OperationSelection(path="/pets", method="get", tag="store"))
        unlabelled = extract(swagger_raw, OperationSelection(path="/pets", method="get"))
        assert labelled["definitions"] == unlabelled["definitions"]
        assert labelled["tags"] == [{"name": "store", "description": "Access to the store"}]
        assert unlabelled["tags"] == []

    def test_missing_path_is_empty(self, swagger_raw: dict[str, Any]) -> None:
        result = extract(swagger_raw, OperationSelection(path="/nope", method="get"))
        assert result["paths"] == {}
        assert result["definitions"] == {}
        assert result["info"] == swagger_raw["info"]

    def test_missing_method_is_empty(self, swagger_raw: dict[str, Any]) -> None:
        result = extract(swagger_raw, OperationSelection(path="/health", method="post"))
        assert result["paths"] == {}

    def test_path_level_parameter_schemas_included(self) -> None:
        doc = {
            "openapi": "3.0.0",
            "paths": {
                "/things/{id}": {
                    "parameters": [
                        {"name": "id", "in": "path", "schema": {"$ref": "#/components/schemas/ThingId"}}
                    ],
                    "get": {"responses": {"204": {"description": "ok"}}},
                }
            },
            "components": {"schemas": {"ThingId": {"type": "string"}, "Other": {}}},
        }
        result = extract(doc, OperationSelection(path="/things/{id}", method="get"))
        assert result["components"]["schemas"] == {"ThingId": {"type": "string"}}


# ---------------------------------------------------------------------------
# Invalid selections
# ---------------------------------------------------------------------------


class TestInvalidSelection:
    def test_empty_tag(self, pets_doc: dict[str, Any]) -> None:
        with pytest.raises(InvalidSelectionError):
            extract(pets_doc, TagSelection(tag=""))

    def test_empty_path(self, pets_doc: dict[str, Any]) -> None:
        with pytest.raises(InvalidSelectionError):
            extract(pets_doc, OperationSelection(path="", method="get"))

    @pytest.mark.parametrize("method", ["GET", "trace", "fetch", ""])
    def test_unknown_method(self, pets_doc: dict[str, Any], method: str) -> None:
        with pytest.raises(InvalidSelectionError):
            extract(pets_doc, OperationSelection(path="/pets", method=method))


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestProperties:
    @pytest.mark.parametrize("tag", ["pets", "store", "admin", "default"])
    def test_idempotent_swagger(self, swagger_raw: dict[str, Any], tag: str) -> None:
        first = extract(swagger_raw, TagSelection(tag=tag))
        assert extract(first, TagSelection(tag=tag)) == first

    @pytest.mark.parametrize("tag", ["pets", "users"])
    def test_idempotent_openapi(self, openapi_raw: dict[str, Any], tag: str) -> None:
        first = extract(openapi_raw, TagSelection(tag=tag))
        assert extract(first, TagSelection(tag=tag)) == first

    @pytest.mark.parametrize("tag", ["pets", "store", "admin", "default"])
    def test_closure_complete(self, swagger_raw: dict[str, Any], tag: str) -> None:
        result = extract(swagger_raw, TagSelection(tag=tag))
        pool = _pool(result)
        source_pool = swagger_raw["definitions"]
        for schema in pool.values():
            for name in collect_refs(schema):
                if name in source_pool:
                    assert name in pool

    def test_minimal(self, swagger_raw: dict[str, Any]) -> None:
        result = extract(swagger_raw, TagSelection(tag="pets"))
        assert "Unused" not in result["definitions"]
        assert "Order" not in result["definitions"]

    def test_mutual_cycle(self) -> None:
        doc = {
            "swagger": "2.0",
            "paths": {
                "/a": {"get": {"tags": ["t"], "responses": {"200": {"schema": {"$ref": "#/definitions/A"}}}}}
            },
            "definitions": {
                "A": {"properties": {"b": {"$ref": "#/definitions/B"}}},
                "B": {"properties": {"a": {"$ref": "#/definitions/A"}}},
            },
        }
        result = extract(doc, TagSelection(tag="t"))
        assert list(result["definitions"]) == ["A", "B"]

    def test_path_filtering_exact(self) -> None:
        doc = {
            "swagger": "2.0",
            "paths": {
                "/p": {
                    "get": {"tags": ["x"], "responses": {}},
                    "post": {"tags": ["y"], "responses": {}},
                }
            },
            "definitions": {},
        }
        result = extract(doc, TagSelection(tag="x"))
        assert result["paths"] == {"/p": {"get": {"tags": ["x"], "responses": {}}}}

    def test_dangling_ref_dropped(self) -> None:
        doc = {
            "swagger": "2.0",
            "paths": {"/a": {"get": {"responses": {"200": {"schema": {"$ref": "#/definitions/Ghost"}}}}}},
            "definitions": {"Real": {}},
        }
        result = extract(doc, TagSelection(tag="default"))
        assert result["definitions"] == {}


# ---------------------------------------------------------------------------
# Tolerance of irregular input
# ---------------------------------------------------------------------------


class TestTolerance:
    def test_empty_document(self) -> None:
        result = extract({}, TagSelection(tag="x"))
        assert result == {"tags": [], "paths": {}, "definitions": {}}

    def test_malformed_fields(self) -> None:
        doc = {
            "openapi": "3.0.0",
            "tags": "not-a-list",
            "paths": {"/a": "not-a-path-item", "/b": {"get": "not-an-operation"}},
            "components": {"schemas": {"A": {}}},
        }
        result = extract(doc, TagSelection(tag="default"))
        assert result["paths"] == {}
        assert result["tags"] == []
        assert result["components"] == {"schemas": {}}

    def test_non_string_tags_ignored(self) -> None:
        doc = {
            "swagger": "2.0",
            "paths": {"/a": {"get": {"tags": [1, None, "t"], "responses": {}}}},
        }
        assert list(extract(doc, TagSelection(tag="t"))["paths"]) == ["/a"]

    def test_explicit_empty_tags_not_default(self) -> None:
        doc = {"swagger": "2.0", "paths": {"/a": {"get": {"tags": [], "responses": {}}}}}
        assert extract(doc, TagSelection(tag="default"))["paths"] == {}
