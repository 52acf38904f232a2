from automap.sortedmap import SortedMap
from .automap import AutoMap
from . import TYPES


class AutoBTreeMap(AutoMap):
    '''
    An :class:`~automap.maps.AutoMap` backed by a
    :class:`~automap.sortedmap.SortedMap`. Keys must be totally ordered;
    iteration yields entries in ascending key order and the range
    queries of the raw map are available::

        people.irange('A', 'M')
        list(people.range('Bob', 'Ruth'))
    '''

    type_name = 'btree'
    raw_type = SortedMap

    def __reversed__(self):
        return reversed(self._map)

    def irange(self, minimum=None, maximum=None, inclusive=(True, True),
               reverse=False):
        '''
        Pass-through for :meth:`SortedMap.irange
        <automap.sortedmap.SortedMap.irange>`.
        '''
        return self._map.irange(minimum, maximum, inclusive, reverse)

    def range(self, minimum=None, maximum=None, inclusive=(True, False),
              reverse=False):
        '''
        Pass-through for :meth:`SortedMap.range
        <automap.sortedmap.SortedMap.range>`.
        '''
        return self._map.range(minimum, maximum, inclusive, reverse)

    def first_item(self):
        '''
        The ``(key, value)`` pair with the smallest key, or ``None``.
        '''
        if not self._map:
            return None
        return self._map.peekitem(0)

    def last_item(self):
        '''
        The ``(key, value)`` pair with the largest key, or ``None``.
        '''
        if not self._map:
            return None
        return self._map.peekitem(-1)

    def pop_first(self):
        '''
        Remove and return the pair with the smallest key, or ``None``.
        '''
        if not self._map:
            return None
        return self._map.popitem(0)

    def pop_last(self):
        '''
        Remove and return the pair with the largest key, or ``None``.
        '''
        if not self._map:
            return None
        return self._map.popitem(-1)

    def split_off(self, key):
        '''
        Move every entry with a key greater than or equal to ``key``
        into a new :class:`AutoBTreeMap` and return it.
        '''
        return self.__class__.from_raw(self._map.split_off(key))


TYPES['btree'] = AutoBTreeMap
