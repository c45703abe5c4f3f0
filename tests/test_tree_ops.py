"""Tests for the pure add/remove/update operations."""
import pytest

from json_schema_builder.errors import InvalidAttribute, InvalidKind, InvalidPath, PathNotFound
from json_schema_builder.fields import Field, FieldKind, forest_to_dicts
from json_schema_builder.tree_ops import add_field, remove_field, update_field


def structure(forest):
    return forest_to_dicts(forest, include_id=False)


def test_add_field_to_root():
    forest = add_field(())
    assert len(forest) == 1
    assert forest[0].name == ""
    assert forest[0].kind is FieldKind.STRING
    assert forest[0].children is None


def test_add_field_appends_under_nested(sample_forest):
    result = add_field(sample_forest, [0, 1])
    assert [f.name for f in result[0].children[1].children] == ["city", ""]
    assert structure(result[1:]) == structure(sample_forest[1:])
    assert structure(result[0].children[:1]) == structure(sample_forest[0].children[:1])


def test_add_field_with_explicit_field():
    field = Field(id="given", name="x")
    assert add_field((), [], field) == (field,)


@pytest.mark.parametrize("path", [[1], [5], [0, 0], [0, 9]])
def test_add_field_bad_path(sample_forest, path):
    with pytest.raises(PathNotFound):
        add_field(sample_forest, path)


def test_add_then_remove_round_trip(sample_forest):
    added = add_field(sample_forest, [0])
    new_index = len(added[0].children) - 1
    restored = remove_field(added, [0, new_index])
    assert structure(restored) == structure(sample_forest)


def test_remove_field_drops_subtree(sample_forest):
    result = remove_field(sample_forest, [0])
    assert [f.name for f in result] == ["count"]
    assert [f.name for f in sample_forest] == ["user", "count"]


def test_remove_field_errors(sample_forest):
    with pytest.raises(InvalidPath):
        remove_field(sample_forest, [])
    with pytest.raises(PathNotFound):
        remove_field(sample_forest, [2])
    with pytest.raises(PathNotFound):
        remove_field(sample_forest, [1, 0])


def test_update_name(sample_forest):
    result = update_field(sample_forest, [0, 1, 0], "name", "town")
    assert result[0].children[1].children[0].name == "town"
    assert result[0].children[1].children[0].id == "c1"
    assert sample_forest[0].children[1].children[0].name == "city"


def test_update_name_none_becomes_empty(sample_forest):
    result = update_field(sample_forest, [1], "name", None)
    assert result[1].name == ""


def test_update_kind_to_nested_initializes_children():
    forest = update_field(add_field(()), [0], "kind", "nested")
    assert forest[0].kind is FieldKind.NESTED
    assert forest[0].children == ()


def test_update_kind_to_nested_keeps_existing_children(sample_forest):
    result = update_field(sample_forest, [0], "kind", "nested")
    assert structure(result) == structure(sample_forest)


def test_kind_change_away_from_nested_discards_children(sample_forest):
    flattened = update_field(sample_forest, [0], "kind", "string")
    assert flattened[0].children is None
    renested = update_field(flattened, [0], "kind", "nested")
    assert renested[0].children == ()


def test_update_invalid_attribute(sample_forest):
    with pytest.raises(InvalidAttribute) as exc:
        update_field(sample_forest, [0], "id", "zzz")
    assert exc.value.key == "id"
    # reported even when the path is also wrong
    with pytest.raises(InvalidAttribute):
        update_field(sample_forest, [9], "children", [])


def test_update_invalid_kind(sample_forest):
    with pytest.raises(InvalidKind) as exc:
        update_field(sample_forest, [1], "kind", "boolean")
    assert exc.value.path == (1,)


def test_update_path_errors(sample_forest):
    with pytest.raises(InvalidPath):
        update_field(sample_forest, [], "name", "x")
    with pytest.raises(PathNotFound):
        update_field(sample_forest, [5], "name", "x")


def test_operations_always_return_a_new_root(sample_forest):
    assert update_field(sample_forest, [1], "name", "count") is not sample_forest
    assert add_field(sample_forest) is not sample_forest
