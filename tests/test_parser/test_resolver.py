"""Tests for swagger_catalog.parser.resolver."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from swagger_catalog.exceptions import (
    InvalidReference,
    InvalidReferenceFormat,
    SpecParseError,
)
from swagger_catalog.parser.resolver import resolve_ref, resolve_refs


def _tree_spec() -> dict[str, Any]:
    return {
        "definitions": {
            "TreeNode": {
                "type": "object",
                "properties": {
                    "value": {"type": "string"},
                    "children": {
                        "type": "array",
                        "items": {"$ref": "#/definitions/TreeNode"},
                    },
                },
            }
        },
        "schema": {"$ref": "#/definitions/TreeNode"},
    }


# ---------------------------------------------------------------------------
# resolve_refs
# ---------------------------------------------------------------------------


class TestResolveRefs:
    """Test recursive resolution of a subtree."""

    def test_scalars_passthrough(self) -> None:
        assert resolve_refs("hello", {}) == "hello"
        assert resolve_refs(42, {}) == 42
        assert resolve_refs(None, {}) is None
        assert resolve_refs(True, {}) is True

    def test_dict_without_ref(self) -> None:
        obj = {"key": "value", "nested": {"a": 1}, "list": [1, {"b": 2}]}
        assert resolve_refs(obj, {}) == obj

    def test_resolves_ref_in_dict(self) -> None:
        doc = {"definitions": {"Str": {"type": "string"}}}
        result = resolve_refs({"schema": {"$ref": "#/definitions/Str"}}, doc)
        assert result == {"schema": {"type": "string"}}

    def test_resolves_ref_in_list_preserving_order(self) -> None:
        doc = {"definitions": {"Num": {"type": "integer"}}}
        result = resolve_refs([{"$ref": "#/definitions/Num"}, {"type": "string"}], doc)
        assert result == [{"type": "integer"}, {"type": "string"}]

    def test_local_override_wins(self) -> None:
        doc = {"definitions": {"T": {"a": 1, "b": 2}}}
        result = resolve_refs({"$ref": "#/definitions/T", "b": 3}, doc)
        assert result == {"a": 1, "b": 3}
        assert "$ref" not in result

    def test_target_not_mutated_by_override(self) -> None:
        doc = {"definitions": {"T": {"a": 1, "b": 2}}}
        resolve_refs({"$ref": "#/definitions/T", "b": 3}, doc)
        assert doc["definitions"]["T"] == {"a": 1, "b": 2}

    def test_does_not_mutate_input(self) -> None:
        doc = {
            "definitions": {"Item": {"type": "string"}},
            "responses": {"200": {"schema": {"$ref": "#/definitions/Item"}}},
        }
        before = copy.deepcopy(doc)
        resolve_refs(doc["responses"], doc)
        assert doc == before

    def test_resolves_nested_refs(self) -> None:
        doc = {
            "definitions": {
                "ItemList": {"type": "array", "items": {"$ref": "#/definitions/Item"}},
                "Item": {"type": "object", "properties": {"id": {"type": "integer"}}},
            }
        }
        result = resolve_refs({"$ref": "#/definitions/ItemList"}, doc)
        assert result["type"] == "array"
        assert result["items"]["properties"]["id"] == {"type": "integer"}

    def test_follows_reference_chains(self) -> None:
        doc = {
            "definitions": {
                "Alias": {"$ref": "#/definitions/Base", "description": "alias"},
                "Base": {"type": "string", "description": "base", "format": "uuid"},
            }
        }
        result = resolve_refs({"$ref": "#/definitions/Alias", "format": "email"}, doc)
        assert result == {"type": "string", "description": "alias", "format": "email"}

    def test_circular_reference_chain_raises(self) -> None:
        doc = {"definitions": {"A": {"$ref": "#/definitions/B"}, "B": {"$ref": "#/definitions/A"}}}
        with pytest.raises(InvalidReference, match="Circular"):
            resolve_refs({"$ref": "#/definitions/A"}, doc)

    def test_non_mapping_target_replaces_node(self) -> None:
        doc = {"x-shared": {"tags": ["a", "b"]}}
        result = resolve_refs({"tags": {"$ref": "#/x-shared/tags"}}, doc)
        assert result == {"tags": ["a", "b"]}

    def test_non_string_ref_is_ordinary_field(self) -> None:
        node = {"properties": {"$ref": {"type": "string"}}}
        assert resolve_refs(node, {}) == node

    def test_idempotent(self, petstore_raw: dict[str, Any]) -> None:
        node = petstore_raw["paths"]["/pets"]
        once = resolve_refs(node, petstore_raw)
        twice = resolve_refs(once, petstore_raw)
        assert twice == once

    def test_shared_substructure_stays_shared(self) -> None:
        shared = {"type": "string"}
        node = {"a": shared, "b": shared}
        result = resolve_refs(node, {})
        assert result["a"] is result["b"]
        assert result["a"] is not shared

    def test_parallel_references_to_same_target(self) -> None:
        doc = {"definitions": {"T": {"type": "string"}}}
        node = {"a": {"$ref": "#/definitions/T"}, "b": {"$ref": "#/definitions/T"}}
        result = resolve_refs(node, doc)
        assert result["a"] == {"type": "string"}
        assert result["b"] == {"type": "string"}

    def test_self_reference_terminates(self) -> None:
        doc = _tree_spec()
        tree = resolve_refs(doc["schema"], doc)

        assert tree["type"] == "object"
        assert tree["properties"]["value"] == {"type": "string"}
        items = tree["properties"]["children"]["items"]
        assert items["type"] == "object"
        assert "$ref" not in items
        # The recursion closes on itself instead of expanding forever.
        assert items["properties"]["children"]["items"] is items

    def test_whole_document_with_cycle(self) -> None:
        doc = _tree_spec()
        resolved = resolve_refs(doc, doc)
        node = resolved["definitions"]["TreeNode"]
        assert node["properties"]["children"]["items"]["type"] == "object"
        assert resolved["schema"]["properties"] is node["properties"]

    def test_missing_target_raises(self) -> None:
        with pytest.raises(InvalidReference):
            resolve_refs({"schema": {"$ref": "#/definitions/Missing"}}, {"definitions": {}})

    def test_remote_ref_raises_format_error(self) -> None:
        with pytest.raises(InvalidReferenceFormat):
            resolve_refs({"$ref": "other.json#/definitions/Pet"}, {})


# ---------------------------------------------------------------------------
# resolve_ref
# ---------------------------------------------------------------------------


class TestResolveRef:
    """Test single reference lookup."""

    def test_resolves_definition(self) -> None:
        doc = {"definitions": {"Pet": {"type": "object"}}}
        assert resolve_ref("#/definitions/Pet", doc) == {"type": "object"}

    def test_returns_alias_not_copy(self) -> None:
        doc = {"definitions": {"Pet": {"type": "object"}}}
        assert resolve_ref("#/definitions/Pet", doc) is doc["definitions"]["Pet"]

    def test_deeply_nested(self) -> None:
        doc = {"a": {"b": {"c": {"d": "found"}}}}
        assert resolve_ref("#/a/b/c/d", doc) == "found"

    def test_list_index_segment(self) -> None:
        doc = {"items": [{"name": "first"}, {"name": "second"}]}
        assert resolve_ref("#/items/1", doc) == {"name": "second"}

    def test_root_reference(self) -> None:
        doc = {"a": 1}
        assert resolve_ref("#", doc) is doc

    def test_missing_leading_hash(self) -> None:
        with pytest.raises(InvalidReferenceFormat) as exc_info:
            resolve_ref("other/x", {"other": {"x": 1}})
        assert exc_info.value.ref == "other/x"

    def test_missing_definition(self) -> None:
        with pytest.raises(InvalidReference, match="#/definitions/Missing"):
            resolve_ref("#/definitions/Missing", {"definitions": {}})

    def test_missing_intermediate(self) -> None:
        with pytest.raises(InvalidReference):
            resolve_ref("#/components/schemas/Pet", {})

    def test_index_out_of_range(self) -> None:
        with pytest.raises(InvalidReference):
            resolve_ref("#/items/5", {"items": []})

    def test_errors_are_spec_parse_errors(self) -> None:
        with pytest.raises(SpecParseError):
            resolve_ref("#/nope", {})

    def test_exit_code(self) -> None:
        with pytest.raises(InvalidReference) as exc_info:
            resolve_ref("#/nope", {})
        assert exc_info.value.exit_code == 8
