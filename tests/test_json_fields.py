import pytest

from app.utils.json_fields import coerce_json_list, dump_json_list, load_json_list


def test_dump_keeps_polish_characters_readable():
    assert dump_json_list(["Półki boczne"]) == '["Półki boczne"]'


def test_dump_none_is_empty_list():
    assert dump_json_list(None) == "[]"


@pytest.mark.parametrize("raw", [None, "", "{not json", '{"a": 1}', "42"])
def test_load_falls_back_to_empty_list(raw):
    assert load_json_list(raw) == []


def test_load_preserves_order_and_shape():
    raw = '[{"label": "Materiał", "value": "Aluminium"}, {"label": "Gwarancja", "value": "36"}]'
    assert load_json_list(raw) == [
        {"label": "Materiał", "value": "Aluminium"},
        {"label": "Gwarancja", "value": "36"},
    ]


def test_coerce_accepts_lists_and_json_text():
    assert coerce_json_list(["a"]) == ["a"]
    assert coerce_json_list('["a", "b"]') == ["a", "b"]
    assert coerce_json_list("  ") == []
    assert coerce_json_list(None) == []


def test_coerce_rejects_malformed_text():
    with pytest.raises(ValueError):
        coerce_json_list("[oops")
