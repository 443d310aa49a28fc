import pytest

from paritypack.diff import compare_arrays, compare_values, generate_diff


def test_generate_diff_identical_objects_have_no_differences() -> None:
    result = generate_diff({"name": "Test", "value": 42}, {"name": "Test", "value": 42}, [])

    assert result.has_differences is False
    assert result.summary() == {"count": 0, "paths": []}
    assert result.details == []


@pytest.mark.parametrize(
    "value",
    [
        {},
        [],
        0,
        "",
        False,
        "text",
        3.5,
        {"a": [1, {"b": None}], "c": {"d": [True, False]}},
        [[1, 2], [], [{"x": "y"}]],
    ],
)
def test_generate_diff_is_reflexive(value: object) -> None:
    assert generate_diff(value, value, []).has_differences is False


def test_generate_diff_value_mismatch_reports_path_and_message() -> None:
    result = generate_diff({"name": "TestA"}, {"name": "TestB"}, [])

    assert result.has_differences is True
    assert result.summary() == {"count": 1, "paths": ["name"]}
    record = result.details[0]
    assert record.type == "value_mismatch"
    assert record.severity == "high"
    assert record.real == "TestA"
    assert record.clone == "TestB"
    assert record.message == 'Value mismatch: "TestA" vs "TestB"'


def test_generate_diff_nested_path_construction() -> None:
    result = generate_diff(
        {"user": {"name": "Alice", "age": 30}},
        {"user": {"name": "Alice", "age": 31}},
    )

    assert [record.path for record in result.details] == ["user.age"]
    assert result.details[0].type == "value_mismatch"


def test_generate_diff_missing_keys_on_each_side() -> None:
    result = generate_diff(
        {"name": "Test", "extra": "value"},
        {"name": "Test", "added": 1},
        [],
    )

    assert [(record.path, record.type) for record in result.details] == [
        ("extra", "missing_in_clone"),
        ("added", "missing_in_real"),
    ]
    missing_in_clone, missing_in_real = result.details
    assert missing_in_clone.severity == "medium"
    assert missing_in_clone.real == "value"
    assert missing_in_clone.clone is None
    assert missing_in_clone.message == "Missing in Clone: extra"
    assert missing_in_real.clone == 1
    assert missing_in_real.message == "Missing in Real: added"


def test_generate_diff_type_mismatch_does_not_descend() -> None:
    result = generate_diff({"x": 1}, {"x": [1]}, [])

    assert len(result.details) == 1
    record = result.details[0]
    assert record.path == "x"
    assert record.type == "type_mismatch"
    assert record.severity == "high"
    assert record.message == "Type mismatch: number vs array"


def test_generate_diff_object_versus_array_is_type_mismatch() -> None:
    result = generate_diff({"data": {"0": "a"}}, {"data": ["a"]}, [])

    assert [(record.path, record.type) for record in result.details] == [
        ("data", "type_mismatch"),
    ]


def test_generate_diff_number_and_string_are_not_equal() -> None:
    result = generate_diff({"value": 42}, {"value": "42"}, [])

    assert result.details[0].type == "type_mismatch"
    assert result.details[0].message == "Type mismatch: number vs string"


def test_generate_diff_bool_and_number_are_different_kinds() -> None:
    result = generate_diff({"flag": True}, {"flag": 1}, [])

    assert result.details[0].type == "type_mismatch"
    assert result.details[0].message == "Type mismatch: boolean vs number"


def test_generate_diff_int_and_float_with_same_value_match() -> None:
    assert generate_diff({"n": 1}, {"n": 1.0}, []).has_differences is False


def test_generate_diff_null_versus_object_is_type_mismatch() -> None:
    result = generate_diff({"data": None}, {"data": {}}, [])

    assert result.has_differences is True
    assert result.details[0].type == "type_mismatch"
    assert result.details[0].message == "Type mismatch: null vs object"


def test_generate_diff_array_length_and_missing_element() -> None:
    result = generate_diff({"items": ["a", "b"]}, {"items": ["a", "b", "c"]})

    assert result.has_differences is True
    assert [(record.path, record.type) for record in result.details] == [
        ("items.length", "array_length_mismatch"),
        ("items[2]", "missing_in_real"),
    ]
    length_record = result.details[0]
    assert (length_record.real, length_record.clone) == (2, 3)
    assert length_record.severity == "medium"
    assert length_record.message == "Array length mismatch: 2 vs 3"
    assert result.details[1].message == "Element missing in Real at index 2"


def test_generate_diff_shorter_candidate_array_reports_missing_in_clone() -> None:
    result = generate_diff({"items": [1, 2, 3]}, {"items": [1]}, [])

    assert [(record.path, record.type) for record in result.details] == [
        ("items.length", "array_length_mismatch"),
        ("items[1]", "missing_in_clone"),
        ("items[2]", "missing_in_clone"),
    ]
    assert result.details[1].real == 2
    assert result.details[2].message == "Element missing in Clone at index 2"


def test_generate_diff_array_element_difference_has_index_path() -> None:
    result = generate_diff({"items": ["a", "b", "c"]}, {"items": ["a", "x", "c"]}, [])

    assert result.details[0].path == "items[1]"


def test_generate_diff_complex_nested_structure() -> None:
    real = {
        "id": "real_123",
        "labels": [
            {"id": "L1", "name": "Work", "visibility": "show"},
            {"id": "L2", "name": "Personal", "visibility": "hide"},
        ],
        "metadata": {"created": "2024-01-01", "modified": "2024-01-15"},
    }
    clone = {
        "id": "clone_456",
        "labels": [
            {"id": "L3", "name": "Work", "visibility": "show"},
            {"id": "L4", "name": "Personal", "visibility": "show"},
        ],
        "metadata": {"created": "2024-01-01", "modified": "2024-01-15"},
    }

    result = generate_diff(real, clone, ["id"])

    assert result.summary() == {"count": 1, "paths": ["labels[1].visibility"]}


def test_generate_diff_root_level_primitives_use_root_path() -> None:
    value = generate_diff("a", "b", [])
    kind = generate_diff({"a": 1}, [1], [])

    assert value.details[0].path == "<root>"
    assert value.details[0].type == "value_mismatch"
    assert kind.details[0].path == "<root>"
    assert kind.details[0].type == "type_mismatch"


def test_generate_diff_root_arrays_use_bare_index_paths() -> None:
    result = generate_diff([1, 2], [1, 3, 4], [])

    assert [record.path for record in result.details] == [".length", "[1]", "[2]"]


def test_generate_diff_both_bodies_absent_is_a_match() -> None:
    result = generate_diff(None, None)

    assert result.has_differences is False
    assert result.summary()["count"] == 0


def test_generate_diff_missing_response_is_asymmetric() -> None:
    missing_real = generate_diff(None, {"a": 1})
    missing_clone = generate_diff({"a": 1}, None)

    for result in (missing_real, missing_clone):
        assert result.has_differences is True
        assert len(result.details) == 1
        assert result.details[0].path == "<root>"
        assert result.details[0].type == "missing_response"
        assert result.details[0].severity == "high"

    assert (missing_real.details[0].real, missing_real.details[0].clone) == (None, {"a": 1})
    assert (missing_clone.details[0].real, missing_clone.details[0].clone) == ({"a": 1}, None)


def test_generate_diff_falsy_bodies_are_not_treated_as_absent() -> None:
    result = generate_diff(0, None)

    assert result.details[0].type == "missing_response"
    assert generate_diff(0, 0).has_differences is False
    assert generate_diff("", []).details[0].type == "type_mismatch"


def test_generate_diff_uses_default_ignore_list_when_omitted() -> None:
    real = {"id": "a", "threadId": "t1", "historyId": "1", "snippet": "hello"}
    clone = {"id": "b", "threadId": "t2", "historyId": "2", "snippet": "hello"}

    assert generate_diff(real, clone).has_differences is False
    assert generate_diff(real, clone, []).summary()["paths"] == ["id", "threadId", "historyId"]


def test_generate_diff_records_are_pre_order() -> None:
    real = {"a": {"b": 1, "c": [1, 2]}, "d": "x"}
    clone = {"a": {"b": 2, "c": [1]}, "d": "y"}

    result = generate_diff(real, clone, [])

    assert result.summary()["paths"] == ["a.b", "a.c.length", "a.c[1]", "d"]


def test_compare_values_and_compare_arrays_accept_explicit_paths() -> None:
    records = compare_values({"k": 1}, {"k": 2}, path="root", ignore=[])
    array_records = compare_arrays([1], [1, 2], path="list", ignore=[])

    assert [record.path for record in records] == ["root.k"]
    assert [record.path for record in array_records] == ["list.length", "list[1]"]


def test_diff_result_to_dict_shape() -> None:
    result = generate_diff({"a": 1}, {"a": 2}, [])

    payload = result.to_dict()

    assert payload["has_differences"] is True
    assert payload["summary"] == {"count": 1, "paths": ["a"]}
    assert payload["details"] == [
        {
            "path": "a",
            "type": "value_mismatch",
            "real": 1,
            "clone": 2,
            "severity": "high",
            "message": 'Value mismatch: "1" vs "2"',
        }
    ]
