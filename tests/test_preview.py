"""Tests for the preview projection."""
import json

from json_schema_builder.fields import Field, FieldKind
from json_schema_builder.preview import preview_json, project


def test_project_empty_forest():
    assert project(()) == {}


def test_project_labels_and_nesting(sample_forest):
    assert project(sample_forest) == {
        "user": {"name": "String", "address": {"city": "String"}},
        "count": "Number",
    }


def test_project_keeps_insertion_order(sample_forest):
    assert list(project(sample_forest)) == ["user", "count"]


def test_empty_names_never_appear():
    hidden_child = Field(id="h", name="secret")
    forest = (
        Field(id="a", name=""),
        Field(id="b", name="", kind=FieldKind.NESTED, children=(hidden_child,)),
        Field(id="c", name="kept", kind=FieldKind.NESTED, children=(Field(id="d", name=""),)),
    )
    preview = project(forest)
    assert preview == {"kept": {}}
    assert "" not in preview
    assert "secret" not in json.dumps(preview)


def test_duplicate_sibling_names_last_wins():
    forest = (
        Field(id="a", name="dup"),
        Field(id="b", name="other"),
        Field(id="c", name="dup", kind=FieldKind.NUMBER),
    )
    preview = project(forest)
    assert preview == {"dup": "Number", "other": "String"}
    assert list(preview) == ["dup", "other"]


def test_project_is_idempotent(sample_forest):
    assert project(sample_forest) == project(sample_forest)
    assert project(sample_forest) is not project(sample_forest)


def test_preview_json_from_forest_or_mapping(sample_forest):
    text = preview_json(sample_forest)
    assert json.loads(text) == project(sample_forest)
    assert text.startswith('{\n  "user": {')
    assert preview_json({}) == "{}"
    assert preview_json({"naïve": "String"}, indent=None) == '{"naïve": "String"}'
