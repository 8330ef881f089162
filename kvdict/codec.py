"""Conversion of a :class:`Dictionary` to and from documents and BSON.

A dictionary is stored as ``{"entries": [{"k": key, "v": value}, ...]}``,
the layout of :class:`~kvdict.fields.KVField`, so that non-string keys and
the entry order both survive.
"""

import logging

import bson
from bson.errors import BSONError

from .exc import BadValueException, DecodeException, EncodeException
from .fields import AnythingField, KVField

log = logging.getLogger(__name__)

ENTRIES = "entries"


def _entries_field(dictionary=None, key_type=None, value_type=None):
    if dictionary is not None:
        key_type = key_type or dictionary.key_type
        value_type = value_type or dictionary.value_type
    return KVField(key_type or AnythingField(), value_type or AnythingField())


def to_document(dictionary, key_type=None, value_type=None) -> dict:
    field = _entries_field(dictionary, key_type, value_type)
    return {ENTRIES: field.wrap(dictionary)}


def from_document(document, key_type=None, value_type=None):
    if not isinstance(document, dict) or ENTRIES not in document:
        raise DecodeException('Document has no "%s" list' % ENTRIES)
    field = _entries_field(key_type=key_type, value_type=value_type)
    try:
        return field.unwrap(document[ENTRIES])
    except BadValueException as e:
        raise DecodeException("Malformed entries: %s" % e) from e


def dumps(dictionary, key_type=None, value_type=None) -> bytes:
    document = to_document(dictionary, key_type, value_type)
    try:
        data = bson.encode(document)
    except (BSONError, OverflowError) as e:
        raise EncodeException("Dictionary could not be encoded: %s" % e) from e
    log.debug("encoded %d entries into %d bytes", len(document[ENTRIES]), len(data))
    return data


def loads(data: bytes, key_type=None, value_type=None):
    try:
        document = bson.decode(data)
    except (BSONError, TypeError) as e:
        raise DecodeException("Dictionary could not be decoded: %s" % e) from e
    dictionary = from_document(document, key_type, value_type)
    log.debug("decoded %d entries from %d bytes", dictionary.length(), len(data))
    return dictionary
