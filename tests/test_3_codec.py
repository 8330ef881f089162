# Import necessary modules
import bson
import pytest

from kvdict import (
    Dictionary,
    IntField,
    StringField,
    TupleField,
    dumps,
    from_document,
    loads,
    to_document,
)
from kvdict.exc import (
    BadValueException,
    DecodeException,
    EncodeException,
    UnhashableKeyException,
)


def make_dictionary():
    d = Dictionary()
    d.put("a", 3)
    d.put(7, "seven")
    d.put("b", [1, 2])
    return d


def test_to_document_keeps_entry_order_and_key_types():
    document = to_document(make_dictionary())

    assert document == {
        "entries": [
            {"k": "a", "v": 3},
            {"k": 7, "v": "seven"},
            {"k": "b", "v": [1, 2]},
        ]
    }


def test_from_document_builds_dictionary():
    d = from_document({"entries": [{"k": "x", "v": 1}, {"k": 2, "v": None}]})

    assert isinstance(d, Dictionary)
    assert d.entries() == [("x", 1), (2, None)]
    assert d.hasKey(2)


def test_from_document_without_entries():
    with pytest.raises(DecodeException):
        from_document({"items": []})
    with pytest.raises(DecodeException):
        from_document([])


def test_dumps_produces_bson():
    data = dumps(make_dictionary())

    assert isinstance(data, bytes)
    assert bson.decode(data) == to_document(make_dictionary())


def test_loads_restores_entries_in_order():
    restored = loads(dumps(make_dictionary()))

    assert restored == make_dictionary()


def test_tuple_keys_need_tuple_field():
    d = Dictionary()
    d.put(("x", 1), "pair")

    # Without a key field a tuple key comes back as an unhashable list
    with pytest.raises(UnhashableKeyException):
        loads(dumps(d))

    key_type = TupleField(StringField(), IntField())
    restored = loads(dumps(d, key_type=key_type), key_type=key_type)
    assert restored.entries() == [(("x", 1), "pair")]


def test_dictionary_fields_are_used_by_default():
    d = Dictionary(key_type=StringField(), value_type=IntField())
    d.put("a", 1)

    assert to_document(d) == {"entries": [{"k": "a", "v": 1}]}

    restored = loads(dumps(d), key_type=StringField(), value_type=IntField())
    assert restored.entries() == [("a", 1)]


def test_dumps_rejects_values_bson_cannot_encode():
    d = Dictionary()
    d.put("a", object())

    with pytest.raises(EncodeException) as excinfo:
        dumps(d)
    assert isinstance(excinfo.value.__cause__, bson.errors.BSONError)

    d = Dictionary()
    d.put("big", 2 ** 70)
    with pytest.raises(EncodeException):
        dumps(d)


def test_loads_rejects_malformed_data():
    with pytest.raises(DecodeException):
        loads(b"not bson at all")

    with pytest.raises(DecodeException):
        loads(bson.encode({"other": 1}))


def test_empty_dictionary_round_trip():
    restored = loads(dumps(Dictionary()))

    assert restored.isEmpty()


def test_none_key_round_trip():
    d = Dictionary()
    d.put(None, 1)
    d.put("a", None)

    restored = loads(dumps(d))

    assert restored.entries() == [(None, 1), ("a", None)]
    assert restored.hasKey(None)


def test_entries_without_key_are_rejected():
    with pytest.raises(DecodeException):
        from_document({"entries": [{"v": 1}]})


@pytest.mark.parametrize(
    "entries",
    [5, "text", [1, 2], [["a", 1]], [{"k": "a", "v": 1}, None]],
)
def test_loads_rejects_malformed_entries(entries):
    with pytest.raises(DecodeException) as excinfo:
        loads(bson.encode({"entries": entries}))
    assert isinstance(excinfo.value.__cause__, BadValueException)


def test_loads_rejects_entries_failing_field_types():
    data = dumps(Dictionary.from_entries([("a", "not an int")]))

    with pytest.raises(DecodeException):
        loads(data, value_type=IntField())
