from ..exc import BadFieldSpecification, BadValueException
from .base import Field
from .primitive import StringField


def _items(value):
    # Dictionary snapshots its entries; plain dicts are read directly
    if isinstance(value, dict):
        return list(value.items())
    return value.entries()


class DictField(Field):
    """A string-keyed mapping stored as a plain dict; values go through
    'value_type'. Keys of any other type need a 'KVField'."""

    def __init__(self, value_type, **kwargs):
        """
        Args:
            value_type (Field): Checks and converts every stored value.
            **kwargs: ``allow_none`` and the validators of :class:`Field`.
        """
        super(DictField, self).__init__(**kwargs)
        self.value_type = value_type

        if not isinstance(value_type, Field):
            raise BadFieldSpecification("DictField value type is not a field!")

    def schema_json(self):
        super_schema = super(DictField, self).schema_json()
        return {
            "value_type": self.value_type.schema_json(),
            **super_schema,
        }

    def _validate_mapping_type(self, value):
        from ..types.Dictionary import Dictionary

        if not isinstance(value, (Dictionary, dict)):
            self._fail_validation_type(value, Dictionary, dict)

    def _validate_key_wrap(self, key):
        if not isinstance(key, str):
            self._fail_validation(key, "DictField keys must be of type str")

    def _validate_key_unwrap(self, key):
        self._validate_key_wrap(key)

    def validate_unwrap(self, value):
        """Checks that value is a dict with string keys, and that every value
        validates based on DictField.value_type.
        """
        if not isinstance(value, dict):
            self._fail_validation_type(value, dict)
        for k, v in value.items():
            self._validate_key_unwrap(k)
            try:
                self.value_type.validate_unwrap(v)
            except BadValueException as bve:
                self._fail_validation(value, "Bad value for key %s" % k, cause=bve)

    def validate_wrap(self, value):
        """Checks that value is a Dictionary or dict whose keys are strings,
        and that every value validates based on DictField.value_type.
        """
        self._validate_mapping_type(value)
        for k, v in _items(value):
            self._validate_key_wrap(k)
            try:
                self.value_type.validate_wrap(v)
            except BadValueException as bve:
                self._fail_validation(value, "Bad value for key %s" % k, cause=bve)

    def wrap(self, value):
        """Validates 'value' and returns a plain dict with each key in 'value'
        mapped to its value wrapped with DictField.value_type.
        """
        self.validate_wrap(value)
        ret = {}
        for k, v in _items(value):
            ret[k] = self.value_type.wrap(v)
        return ret

    def unwrap(self, value):
        """Validates 'value' and returns a Dictionary with each key in 'value'
        mapped to its value unwrapped using DictField.value_type.
        """
        from ..types.Dictionary import Dictionary

        self.validate_unwrap(value)
        ret = Dictionary(key_type=StringField(), value_type=self.value_type)
        for k, v in value.items():
            ret.put(k, self.value_type.unwrap(v))
        return ret


class KVField(DictField):
    """Any hashable keys, stored as an ordered list of entries:
    "[{"k": key, "v": value}, ...]" in the insertion order of the dictionary.
    The list form keeps keys that a document cannot use as field names.
    """

    def __init__(self, key_type, value_type, **kwargs):
        """
        Args:
            key_type (Field): Checks and converts every key; a TupleField
                keeps tuple keys hashable after decoding.
            value_type (Field): Checks and converts every stored value.
            **kwargs: ``allow_none`` and the validators of :class:`Field`.
        """
        super(KVField, self).__init__(value_type, **kwargs)

        if not isinstance(key_type, Field):
            raise BadFieldSpecification("KVField key type is not a field!")
        self.key_type = key_type

    def schema_json(self):
        super_schema = super(KVField, self).schema_json()
        return {"key_type": self.key_type.schema_json(), **super_schema}

    def subfields(self):
        """Returns the k and v subfields."""
        return {
            "k": self.key_type,
            "v": self.value_type,
        }

    def _validate_key_wrap(self, key):
        try:
            self.key_type.validate_wrap(key)
        except BadValueException as bve:
            self._fail_validation(key, "Bad value for key", cause=bve)

    def validate_unwrap(self, value):
        """Expects a list of dicts with 'k' and 'v' set to the keys and values
        that will be unwrapped into the output Dictionary.
        """
        if not isinstance(value, list):
            self._fail_validation_type(value, list)
        for value_dict in value:
            if not isinstance(value_dict, dict):
                cause = BadValueException(
                    "", value_dict, "Values in a KVField list must be dicts"
                )
                self._fail_validation(
                    value, "Values in a KVField list must be dicts", cause=cause
                )
            if "k" not in value_dict:
                self._fail_validation(value, 'Entry has no "k" key')
            k = value_dict["k"]
            v = value_dict.get("v")
            try:
                self.key_type.validate_unwrap(k)
            except BadValueException as bve:
                self._fail_validation(
                    value, "Bad value for KVField key %s" % (k,), cause=bve
                )

            try:
                self.value_type.validate_unwrap(v)
            except BadValueException as bve:
                self._fail_validation(
                    value, "Bad value for KVField value %s" % (k,), cause=bve
                )

    def wrap(self, value):
        """Expects a Dictionary (or dict) with keys valid for 'KVField.key_type'
        and values valid for 'KVField.value_type'. After validation, it is
        transformed into a list of dicts with 'k' and 'v' set to the wrapped
        keys and values, in entry order.
        """
        self.validate_wrap(value)
        ret = []
        for k, v in _items(value):
            k = self.key_type.wrap(k)
            v = self.value_type.wrap(v)
            ret.append({"k": k, "v": v})
        return ret

    def unwrap(self, value):
        """Validates the 'k'/'v' list and builds a Dictionary typed with this
        field's key and value types from it.
        """
        from ..types.Dictionary import Dictionary

        self.validate_unwrap(value)
        ret = Dictionary(key_type=self.key_type, value_type=self.value_type)
        for value_dict in value:
            ret.put(
                self.key_type.unwrap(value_dict["k"]),
                self.value_type.unwrap(value_dict.get("v")),
            )
        return ret
