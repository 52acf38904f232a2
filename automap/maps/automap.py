import copy
import logging
from collections.abc import MutableMapping

from automap.error import KeyMismatch, NotAutoMapped
from automap.mapped import AutoMapped


logger = logging.getLogger('automap.maps')


class AutoMap(MutableMapping):
    '''
    Base class for maps whose values contain their own keys. You will not
    use this class directly; :class:`~automap.maps.AutoHashMap` and
    :class:`~automap.maps.AutoBTreeMap` choose the raw map that entries
    are stored in, and this class implements everything they share.

    Values are added with :meth:`insert`, which asks the value for its key
    via :meth:`AutoMapped.key() <automap.mapped.AutoMapped.key>`. Lookups,
    removal and iteration behave as on the raw map::

        people = AutoHashMap()
        people.insert(Person('Michelle', 37))
        people.get('Michelle')
        people.remove('Michelle')
    '''

    #: The string "name" of this map variant. Each variant should set this.
    type_name = None

    #: The raw mapping class entries are stored in.
    raw_type = None

    def __init__(self, values=None):
        self._map = self.raw_type()
        if values is not None:
            self.extend(values)

    @classmethod
    def from_raw(cls, raw):
        '''
        Wrap an existing raw map. The raw map is taken over as-is: keys
        are not checked against the values, so a raw map whose keys differ
        from ``value.key()`` will behave inconsistently.

        :param raw: A mapping of the variant's :attr:`raw_type`
        :rtype: :class:`AutoMap`
        '''
        if not isinstance(raw, cls.raw_type):
            raise TypeError('Expected {} but got {}'.format(
                cls.raw_type.__name__, type(raw).__name__))
        logger.debug('Wrapping raw %s of %d entries into %s without '
                     'key validation', type(raw).__name__, len(raw),
                     cls.__name__)
        automap = cls.__new__(cls)
        automap._map = raw
        return automap

    @classmethod
    def from_values(cls, values):
        '''
        Build a map from an iterable of values. Later values replace
        earlier ones with an equal key.
        '''
        return cls(values)

    def into_raw(self):
        '''
        Hand over the raw map. This map is left empty afterwards.

        :rtype: :attr:`raw_type`
        '''
        raw, self._map = self._map, self.raw_type()
        return raw

    @property
    def raw(self):
        '''
        The raw map itself. Writing to it directly bypasses the key
        handling of :meth:`insert`.
        '''
        return self._map

    # Insertion

    def insert(self, value):
        '''
        Store ``value`` under its own key.

        :param value: An :class:`~automap.mapped.AutoMapped` value
        :returns: The value previously stored under an equal key, or
            ``None`` if the key was new.
        '''
        key = self._key_of(value)
        previous = self._map.get(key)
        self._map[key] = value
        return previous

    def extend(self, values):
        '''
        Insert every value from an iterable.
        '''
        for value in values:
            self.insert(value)

    def _key_of(self, value):
        if not isinstance(value, AutoMapped):
            raise NotAutoMapped(
                '{} does not implement key()'.format(type(value).__name__))
        return copy.copy(value.key())

    # Lookup and removal

    def get(self, key, default=None):
        return self._map.get(key, default)

    def remove(self, key):
        '''
        Remove the value stored under ``key``.

        :returns: The removed value, or ``None`` if there was none.
        '''
        return self._map.pop(key, None)

    def contains_key(self, key):
        return key in self._map

    def is_empty(self):
        return not self._map

    # Views

    def keys(self):
        return self._map.keys()

    def values(self):
        return self._map.values()

    def items(self):
        return self._map.items()

    # Mapping protocol

    def __getitem__(self, key):
        return self._map[key]

    def __setitem__(self, key, value):
        value_key = self._key_of(value)
        if key != value_key:
            raise KeyMismatch(key, value_key)
        self._map[value_key] = value

    def __delitem__(self, key):
        del self._map[key]

    def __contains__(self, key):
        return key in self._map

    def __iter__(self):
        return iter(self._map)

    def __len__(self):
        return len(self._map)

    def clear(self):
        self._map.clear()

    def copy(self):
        '''
        Shallow copy: the new map holds the same value objects.
        '''
        return self.__class__.from_raw(self._map.copy())

    __copy__ = copy

    def __eq__(self, other):
        if not isinstance(other, AutoMap):
            return NotImplemented
        return type(self) is type(other) and self._map == other._map

    __hash__ = None

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self._map)
