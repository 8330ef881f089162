from .codec import dumps, from_document, loads, to_document
from .fields import (
    AnythingField,
    BoolField,
    DictField,
    Field,
    FloatField,
    IntField,
    KVField,
    ListField,
    StringField,
    TupleField,
)
from .types import Dictionary
from .version import __version__, version
