import types

from ..exc import BadFieldSpecification, InvalidConfigException
from .base import Field


class ListField(Field):
    def __init__(self, item_type, min_capacity=None, max_capacity=None, **kwargs):
        super(ListField, self).__init__(**kwargs)
        self.item_type = item_type
        self.min = min_capacity
        self.max = max_capacity
        if not isinstance(item_type, Field):
            raise BadFieldSpecification("List item_type is not a field!")
        if min_capacity is not None and max_capacity is not None:
            if min_capacity > max_capacity:
                raise InvalidConfigException(
                    "ListField min_capacity is greater than max_capacity"
                )

    def schema_json(self):
        super_schema = super(ListField, self).schema_json()
        return {
            "item_type": self.item_type.schema_json(),
            "min_capacity": self.min,
            "max_capacity": self.max,
            **super_schema,
        }

    def _length_valid(self, value):
        if self.min is not None and len(value) < self.min:
            self._fail_validation(value, "Value has too few elements")
        if self.max is not None and len(value) > self.max:
            self._fail_validation(value, "Value has too many elements")

    def _validate_wrap_type(self, value):
        if not isinstance(value, (list, tuple)):
            self._fail_validation_type(value, list, tuple)

    def _validate_unwrap_type(self, value):
        if not isinstance(value, list):
            self._fail_validation_type(value, list)

    def validate_wrap(self, value):
        self._validate_wrap_type(value)
        self._length_valid(value)
        for v in value:
            self.item_type.validate_wrap(v)

    def validate_unwrap(self, value):
        self._validate_unwrap_type(value)
        self._length_valid(value)
        for v in value:
            self.item_type.validate_unwrap(v)

    def wrap(self, value):
        if isinstance(value, types.GeneratorType):
            value = list(value)
        self.validate_wrap(value)
        return [self.item_type.wrap(v) for v in value]

    def unwrap(self, value):
        self.validate_unwrap(value)
        return [self.item_type.unwrap(v) for v in value]
