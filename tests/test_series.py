"""Tests for Row fingerprints, series identity and field mapping."""
import pytest

from seriesrows.fnv import OFFSET64, fnv64a
from seriesrows.series import Row, same_series, tags_hash


def test_fingerprint_deterministic():
    row = Row(name="cpu", tags={"host": "a", "region": "us"})
    assert row.tags_hash() == row.tags_hash()


def test_fingerprint_order_independent():
    """Insertion order of tags does not change the fingerprint."""
    forward = {"host": "a", "region": "us"}
    reverse = {}
    reverse["region"] = "us"
    reverse["host"] = "a"
    assert list(forward) != list(reverse)
    assert tags_hash(forward) == tags_hash(reverse)


def test_fingerprint_is_sorted_key_value_stream():
    """Keys are sorted; each key is followed by its value."""
    tags = {"region": "us", "host": "a"}
    assert tags_hash(tags) == fnv64a(b"hostaregionus")
    assert Row(tags=tags).tags_keys() == ["host", "region"]


def test_empty_and_absent_tags():
    """No tags and None tags share the empty-stream constant."""
    assert Row(tags={}).tags_hash() == Row(tags=None).tags_hash() == OFFSET64
    assert Row().tags_keys() == []


def test_fingerprint_collision_without_separator():
    """Key/value boundaries are not hashed, so these collide."""
    assert tags_hash({"ab": ""}) == tags_hash({"a": "b"})


def test_same_series_reflexive():
    row = Row(name="cpu", tags={"host": "a"}, columns=["time", "value"], values=[[1, 0.5]])
    assert row.same_series(row)


def test_same_series_discrimination():
    assert not Row(name="cpu", tags={"host": "a"}).same_series(Row(name="cpu", tags={"host": "b"}))
    assert not Row(name="cpu", tags={}).same_series(Row(name="mem", tags={}))


def test_same_series_ignores_data():
    """Columns, values and partial do not affect identity."""
    a = Row(name="cpu", tags={"host": "a"}, columns=["time"], values=[[1]], partial=True)
    b = Row(name="cpu", tags={"host": "a"}, columns=["time", "value"], values=[[2, None]])
    assert a.same_series(b)
    assert b.same_series(a)


def test_same_series_helper_without_metrics():
    assert same_series(Row(name="x"), Row(name="x", tags={}))


def test_to_dict_omits_empty_fields():
    assert Row().to_dict() == {}
    assert Row(tags={}, columns=[], values=[]).to_dict() == {}

    row = Row(
        name="cpu",
        tags={"host": "a"},
        columns=["time", "value", "ok", "note"],
        values=[[1, 0.5, True, None], [2, 3, False, "x"]],
        partial=True,
    )
    assert row.to_dict() == {
        "name": "cpu",
        "tags": {"host": "a"},
        "columns": ["time", "value", "ok", "note"],
        "values": [[1, 0.5, True, None], [2, 3, False, "x"]],
        "partial": True,
    }


def test_from_dict_keeps_all_fields():
    row = Row(name="cpu", tags={"host": "a"}, columns=["v"], values=[[1.5]], partial=True)
    assert Row.from_dict(row.to_dict()) == row


def test_from_dict_does_not_fill_defaults():
    """Omitted collections stay None; empty ones stay empty."""
    row = Row.from_dict({})
    assert row == Row(name="", tags=None, columns=None, values=None, partial=False)

    row = Row.from_dict({"tags": {}, "columns": [], "values": []})
    assert row.tags == {}
    assert row.columns == []
    assert row.values == []


def test_from_dict_rejects_bad_input():
    with pytest.raises(ValueError, match="Unknown row fields: extra"):
        Row.from_dict({"name": "cpu", "extra": 1})
    with pytest.raises(ValueError, match="must be a mapping"):
        Row.from_dict([("name", "cpu")])


def test_fingerprint_accepts_lone_surrogates():
    """Tags that are not valid Unicode still hash."""
    tags = {"host": "a\udcff"}
    assert tags_hash(tags) == fnv64a("hosta\udcff".encode("utf-8", "surrogatepass"))
    assert tags_hash(tags) != tags_hash({"host": "a"})


def test_from_dict_rejects_wrong_types():
    """Name and partial are checked, not coerced."""
    with pytest.raises(ValueError, match="partial must be a bool"):
        Row.from_dict({"partial": "false"})
    with pytest.raises(ValueError, match="name must be a string"):
        Row.from_dict({"name": None})
    assert Row.from_dict({"partial": False}).partial is False
