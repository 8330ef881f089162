from .base import Field, FieldMeta
from .mapping import DictField, KVField
from .primitive import (
    AnythingField,
    BoolField,
    FloatField,
    IntField,
    StringField,
    TupleField,
)
from .sequence import ListField
