import functools

from ..exc import BadValueException


def _skip_none(fun):
    """``wrap``/``unwrap`` return None untouched on fields allowing None."""

    @functools.wraps(fun)
    def converter(self, value, *args, **kwds):
        if value is None and self._allow_none:
            return None
        return fun(self, value, *args, **kwds)

    return converter


def _run_validators(fun, direction):
    """Run the field's own check, then ``validator`` and the one user
    validator for ``direction`` ("wrap" or "unwrap")."""

    @functools.wraps(fun)
    def checker(self, value, *args, **kwds):
        if value is None and self._allow_none:
            return
        fun(self, value, *args, **kwds)

        for attr in ("validator", "%s_validator" % direction):
            user_check = getattr(self, attr)
            if user_check is not None and user_check(value) is False:
                self._fail_validation(value, "user-supplied %s failed" % attr)

    return checker


class FieldMeta(type):
    """Decorates the conversion and validation methods every Field subclass
    defines, so ``allow_none`` and user validators apply without each
    subclass repeating them."""

    def __new__(mcs, classname, bases, class_dict):
        for direction in ("wrap", "unwrap"):
            if direction in class_dict:
                class_dict[direction] = _skip_none(class_dict[direction])

            check = "validate_" + direction
            if check in class_dict:
                class_dict[check] = _run_validators(class_dict[check], direction)

        return super().__new__(mcs, classname, bases, class_dict)


class Field(metaclass=FieldMeta):
    """Base class for the key and value types of a typed :class:`Dictionary`.

    A field checks Python values (``validate_wrap``) and converts them to plain
    document values (``wrap``), and does the reverse for values read back from
    a document (``validate_unwrap`` / ``unwrap``).
    """

    def __init__(
        self,
        allow_none=False,
        validator=None,
        unwrap_validator=None,
        wrap_validator=None,
    ):
        self.validator = validator
        self.unwrap_validator = unwrap_validator
        self.wrap_validator = wrap_validator

        self._allow_none = allow_none

        self._name = self.__class__.__name__

    def schema_json(self):
        return dict(
            type=type(self).__name__,
            allow_none=self._allow_none,
            validator_set=self.validator is not None,
            unwrap_validator=self.unwrap_validator is not None,
            wrap_validator=self.wrap_validator is not None,
        )

    def wrap(self, value):
        raise NotImplementedError()

    def unwrap(self, value):
        raise NotImplementedError()

    def validate_wrap(self, value):
        raise NotImplementedError()

    def validate_unwrap(self, value):
        self.validate_wrap(value)

    def _fail_validation(self, value, reason="", cause=None):
        raise BadValueException(self._name, value, reason, cause=cause)

    def _fail_validation_type(self, value, *type):
        types = "\n".join([str(t) for t in type])
        got = value.__class__.__name__
        raise BadValueException(
            self._name, value, "Value is not an instance of %s (got: %s)" % (types, got)
        )

    def is_valid_wrap(self, value):
        try:
            self.validate_wrap(value)
        except BadValueException:
            return False
        return True

    def is_valid_unwrap(self, value):
        try:
            self.validate_unwrap(value)
        except BadValueException:
            return False
        return True

    def __repr__(self):
        return "%s()" % self.__class__.__name__
