from typing import Any, Hashable, Iterable, Iterator, List, Optional, Tuple

from .. import log
from ..exc import BadFieldSpecification, UnhashableKeyException
from ..fields.base import Field
from ..util import UNSET, is_hashable


@log.class_logger
class Dictionary(log.Identified):
    """An associative container of (key, value) pairs, where each key appears
    at most once.

    Keys may be any hashable value and are stored as given; values may be
    anything. Entries keep their insertion order. The bulk views ``keys()``,
    ``values()`` and ``entries()`` return snapshots, and iterating a
    dictionary yields the ``(key, value)`` pairs of ``entries()``.

    ``key_type`` and ``value_type`` optionally restrict what ``put`` accepts
    to values that validate against a :class:`~kvdict.fields.Field`.
    """

    echo = log.echo_property()

    def __init__(
        self,
        key_type: Optional[Field] = None,
        value_type: Optional[Field] = None,
        echo: Any = None,
    ) -> None:
        self.__collection = {}

        self._validate_parameters(key_type, value_type)
        self.key_type = key_type
        self.value_type = value_type

        log.instance_logger(self, echoflag=echo)

    def _validate_parameters(self, key_type, value_type):
        if key_type is not None and not isinstance(key_type, Field):
            raise BadFieldSpecification("Dictionary key type is not a field!")
        if value_type is not None and not isinstance(value_type, Field):
            raise BadFieldSpecification("Dictionary value type is not a field!")

    @classmethod
    def from_entries(
        cls, entries: Iterable[Tuple[Hashable, Any]], **kwds: Any
    ) -> "Dictionary":
        dictionary = cls(**kwds)
        for key, value in entries:
            dictionary.put(key, value)
        return dictionary

    def _check_key(self, key):
        if not is_hashable(key):
            raise UnhashableKeyException(key)

    def isEmpty(self) -> bool:
        return self.length() == 0

    def length(self) -> int:
        return len(self.__collection)

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value stored for ``key``, or ``default`` if it is absent."""
        self._check_key(key)
        return self.__collection.get(key, default)

    def put(self, key: Hashable, value: Any) -> None:
        """Insert ``value`` under ``key``, replacing any previous value."""
        self._check_key(key)
        if self.key_type is not None:
            self.key_type.validate_wrap(key)
        if self.value_type is not None:
            self.value_type.validate_wrap(value)

        self.__collection[key] = value
        if self._should_log_debug():
            self.logger.debug("put %r", key)

    def remove(self, key: Hashable) -> None:
        """Remove ``key`` if present; absent keys are ignored."""
        self._check_key(key)
        if self.__collection.pop(key, UNSET) is not UNSET:
            if self._should_log_debug():
                self.logger.debug("remove %r", key)

    def hasKey(self, key: Hashable) -> bool:
        self._check_key(key)
        return key in self.__collection

    def clear(self) -> None:
        count = len(self.__collection)
        self.__collection.clear()
        if self._should_log_debug():
            self.logger.debug("clear (%d entries)", count)

    def keys(self) -> List[Hashable]:
        return list(self.__collection.keys())

    def values(self) -> List[Any]:
        return list(self.__collection.values())

    def entries(self) -> List[Tuple[Hashable, Any]]:
        return list(self.__collection.items())

    def to_dict(self) -> dict:
        return dict(self.__collection)

    def copy(self) -> "Dictionary":
        return self.from_entries(
            self.entries(), key_type=self.key_type, value_type=self.value_type
        )

    def __iter__(self) -> Iterator[Tuple[Hashable, Any]]:
        # snapshot when the pass starts, not on first next()
        return iter(self.entries())

    def __len__(self):
        return self.length()

    def __contains__(self, key):
        return self.hasKey(key)

    def __getitem__(self, key):
        self._check_key(key)
        return self.__collection[key]

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        self._check_key(key)
        del self.__collection[key]
        if self._should_log_debug():
            self.logger.debug("remove %r", key)

    def __eq__(self, other):
        if not isinstance(other, Dictionary):
            return NotImplemented
        return self.entries() == other.entries()

    __hash__ = None

    def __str__(self):
        return str(self.__collection)

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.entries())
