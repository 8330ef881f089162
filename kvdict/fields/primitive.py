from ..exc import BadFieldSpecification, InvalidConfigException
from .base import Field


class AnythingField(Field):
    """A field that accepts any value and passes it through untouched."""

    def validate_wrap(self, value):
        pass

    def wrap(self, value):
        return value

    def unwrap(self, value):
        return value


class _RangeMixin:
    def _check_range_config(self, min_value, max_value):
        if min_value is not None and max_value is not None and min_value > max_value:
            raise InvalidConfigException(
                "%s: min (%r) is greater than max (%r)"
                % (self.__class__.__name__, min_value, max_value)
            )

    def _range_valid(self, value, length=None):
        checked = value if length is None else length
        if self.min is not None and checked < self.min:
            self._fail_validation(value, "Value is smaller than %r" % self.min)
        if self.max is not None and checked > self.max:
            self._fail_validation(value, "Value is larger than %r" % self.max)


class StringField(_RangeMixin, Field):
    def __init__(self, min_length=None, max_length=None, **kwargs):
        super(StringField, self).__init__(**kwargs)
        self._check_range_config(min_length, max_length)
        self.min = min_length
        self.max = max_length

    def schema_json(self):
        super_schema = super(StringField, self).schema_json()
        return dict(min_length=self.min, max_length=self.max, **super_schema)

    def validate_wrap(self, value):
        if not isinstance(value, str):
            self._fail_validation_type(value, str)
        self._range_valid(value, length=len(value))

    def wrap(self, value):
        self.validate_wrap(value)
        return value

    def unwrap(self, value):
        self.validate_unwrap(value)
        return value


class IntField(_RangeMixin, Field):
    def __init__(self, min_value=None, max_value=None, **kwargs):
        super(IntField, self).__init__(**kwargs)
        self._check_range_config(min_value, max_value)
        self.min = min_value
        self.max = max_value

    def schema_json(self):
        super_schema = super(IntField, self).schema_json()
        return dict(min_value=self.min, max_value=self.max, **super_schema)

    def validate_wrap(self, value):
        if isinstance(value, bool) or not isinstance(value, int):
            self._fail_validation_type(value, int)
        self._range_valid(value)

    def wrap(self, value):
        self.validate_wrap(value)
        return value

    def unwrap(self, value):
        self.validate_unwrap(value)
        return int(value)


class FloatField(_RangeMixin, Field):
    def __init__(self, min_value=None, max_value=None, **kwargs):
        super(FloatField, self).__init__(**kwargs)
        self._check_range_config(min_value, max_value)
        self.min = min_value
        self.max = max_value

    def schema_json(self):
        super_schema = super(FloatField, self).schema_json()
        return dict(min_value=self.min, max_value=self.max, **super_schema)

    def validate_wrap(self, value):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            self._fail_validation_type(value, float, int)
        self._range_valid(value)

    def wrap(self, value):
        self.validate_wrap(value)
        return float(value)

    def unwrap(self, value):
        self.validate_unwrap(value)
        return float(value)


class BoolField(Field):
    def validate_wrap(self, value):
        if not isinstance(value, bool):
            self._fail_validation_type(value, bool)

    def wrap(self, value):
        self.validate_wrap(value)
        return value

    def unwrap(self, value):
        self.validate_unwrap(value)
        return value


class TupleField(Field):
    """Fixed-length tuple whose items each have their own field.

    Tuples are stored as lists in documents and come back as tuples, so a
    tuple used as a dictionary key stays hashable after a round trip.
    """

    def __init__(self, *item_types, **kwargs):
        super(TupleField, self).__init__(**kwargs)
        for item_type in item_types:
            if not isinstance(item_type, Field):
                raise BadFieldSpecification("TupleField item type is not a field!")
        self.types = item_types

    def schema_json(self):
        super_schema = super(TupleField, self).schema_json()
        return dict(types=[t.schema_json() for t in self.types], **super_schema)

    def _check_length(self, value):
        if len(value) != len(self.types):
            self._fail_validation(
                value, "Value has %d items, expected %d" % (len(value), len(self.types))
            )

    def validate_wrap(self, value):
        if not isinstance(value, tuple):
            self._fail_validation_type(value, tuple)
        self._check_length(value)
        for field, item in zip(self.types, value):
            field.validate_wrap(item)

    def validate_unwrap(self, value):
        if not isinstance(value, (list, tuple)):
            self._fail_validation_type(value, list, tuple)
        self._check_length(value)
        for field, item in zip(self.types, value):
            field.validate_unwrap(item)

    def wrap(self, value):
        self.validate_wrap(value)
        return [field.wrap(item) for field, item in zip(self.types, value)]

    def unwrap(self, value):
        self.validate_unwrap(value)
        return tuple(field.unwrap(item) for field, item in zip(self.types, value))
