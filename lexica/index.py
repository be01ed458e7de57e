import logging
import threading
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")

REPR_PREFIX = 'Index'
REPR_SEPARATOR = ', '

# only the class methods of Index may construct one
_PRIVATE = object()


class Index(Generic[K, V]):
    """A bi-directional immutable map of unique keys to unique values.

    Build it with one of the class methods (``enums``, ``value_to_key``,
    ``key_to_value``, ``from_pairs``); calling ``Index`` directly fails.
    Lookups are O(1) both ways, and ``reversed()`` is cached so that
    ``index.reversed().reversed() is index``.
    """

    # guards the one-time creation of reversed views
    _reversed_lock = threading.Lock()
    _EMPTY = None  # set below the class

    def __init__(self, key_to_value, value_to_key, _token=None) -> None:
        assert _token is _PRIVATE, 'build an Index with its class methods'
        # value_to_key holds the same pairs the other way around:
        # it is ignored by __eq__ and __hash__
        self._key_to_value = key_to_value
        self._value_to_key = value_to_key
        self._reversed = None
        self._hash = None

    @classmethod
    def empty(cls):
        """The empty index. Always referentially the same object."""
        return Index._EMPTY

    @classmethod
    def from_pairs(cls, pairs):
        """Index every (key, value) pair, or every item of a mapping.

        A pair whose key or value was already seen displaces the earlier
        pair in both directions (last write wins).
        """
        assert pairs is not None, 'pairs must not be None'
        if hasattr(pairs, 'items'):
            pairs = pairs.items()
        key_to_value = {}
        value_to_key = {}
        for key, value in pairs:
            assert key is not None and value is not None, \
                'cannot index None: %r -> %r' % (key, value)
            if key_to_value.get(key, _PRIVATE) == value:
                continue
            if key in key_to_value:
                old_value = key_to_value[key]
                logger.debug('key %r remapped from %r to %r', key, old_value, value)
                del value_to_key[old_value]
            if value in value_to_key:
                old_key = value_to_key[value]
                logger.debug('value %r remapped from key %r to %r', value, old_key, key)
                del key_to_value[old_key]
            key_to_value[key] = value
            value_to_key[value] = key

        if not key_to_value:
            return cls.empty()
        return cls(key_to_value, value_to_key, _PRIVATE)

    @classmethod
    def enums(cls, key_type, value_type):
        """Pair the members of two Enum classes that share a name.

        Members without a namesake in the other enum are not mapped.
        """
        # a name has to be in both enums to be mapped, so walking key_type
        # and looking each name up in value_type is enough
        values_by_name = {member.name: member for member in value_type}
        return cls.from_pairs(
            (key, values_by_name[key.name]) for key in key_type if key.name in values_by_name
        )

    @classmethod
    def value_to_key_iterable(cls, value_to_key_function, values):
        assert callable(value_to_key_function), 'value_to_key_function must be callable'
        assert values is not None, 'values must not be None'
        return cls.from_pairs((value_to_key_function(value), value) for value in values)

    @classmethod
    def value_to_key(cls, value_to_key_function, *values):
        """Index the given values under the key derived from each of them."""
        return cls.value_to_key_iterable(value_to_key_function, values)

    @classmethod
    def key_to_value_iterable(cls, key_to_value_function, keys):
        assert callable(key_to_value_function), 'key_to_value_function must be callable'
        assert keys is not None, 'keys must not be None'
        return cls.from_pairs((key, key_to_value_function(key)) for key in keys)

    @classmethod
    def key_to_value(cls, key_to_value_function, *keys):
        """Index the given keys to the value derived from each of them."""
        return cls.key_to_value_iterable(key_to_value_function, keys)

    def keys(self):
        return self._key_to_value.keys()

    def values(self):
        return self._value_to_key.keys()

    def items(self):
        return self._key_to_value.items()

    def value_for(self, key):
        """The value of `key`, or None if `key` is not mapped."""
        return self._key_to_value.get(key)

    def key_for(self, value):
        """The key of `value`, or None if `value` is not mapped."""
        return self._value_to_key.get(value)

    def reversed(self) -> 'Index[V, K]':
        """This index with keys and values swapped.

        The reversed index shares storage with this one and keeps it alive.
        """
        if self._reversed is None:
            with Index._reversed_lock:
                if self._reversed is None:
                    reversed_index = self.__class__(self._value_to_key, self._key_to_value, _PRIVATE)
                    reversed_index._reversed = self
                    self._reversed = reversed_index
        return self._reversed

    def __getitem__(self, key):
        return self._key_to_value[key]

    def __contains__(self, key):
        return key in self._key_to_value

    def __iter__(self):
        return iter(self._key_to_value)

    def __len__(self):
        return len(self._key_to_value)

    def __eq__(self, other):
        if self is other:
            return True
        if self.__class__ is not other.__class__:
            return False
        return self._key_to_value == other._key_to_value

    def __hash__(self):
        if self._hash is None:
            self._hash = hash(frozenset(self._key_to_value.items()))
        return self._hash

    def __repr__(self):
        pairs = REPR_SEPARATOR.join('%s: %s' % item for item in self._key_to_value.items())
        return '%s{%s}' % (REPR_PREFIX, pairs)


# the empty index is its own reverse
Index._EMPTY = Index({}, {}, _PRIVATE)
Index._EMPTY._reversed = Index._EMPTY
