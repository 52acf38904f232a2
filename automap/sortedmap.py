from bisect import bisect_left, bisect_right, insort
from collections.abc import Mapping, MutableMapping


class SortedMap(MutableMapping):
    '''
    A mutable mapping that keeps its keys in ascending order. Lookups go
    through an internal ``dict``; the order is kept in a parallel list of
    keys maintained with :mod:`bisect`, so keys must be totally ordered
    with respect to each other.

    Iteration, :meth:`keys`, :meth:`values` and :meth:`items` all follow
    ascending key order::

        >>> m = SortedMap({'b': 2, 'a': 1})
        >>> list(m.items())
        [('a', 1), ('b', 2)]
    '''

    def __init__(self, *args, **kwargs):
        self._dict = {}
        self._keys = []
        self.update(*args, **kwargs)

    def __getitem__(self, key):
        return self._dict[key]

    def __setitem__(self, key, value):
        if key not in self._dict:
            insort(self._keys, key)
        self._dict[key] = value

    def __delitem__(self, key):
        del self._dict[key]
        del self._keys[bisect_left(self._keys, key)]

    def __iter__(self):
        return iter(self._keys)

    def __reversed__(self):
        return reversed(self._keys)

    def __len__(self):
        return len(self._dict)

    def __contains__(self, key):
        return key in self._dict

    def __eq__(self, other):
        if isinstance(other, SortedMap):
            return self._dict == other._dict
        return Mapping.__eq__(self, other)

    def __repr__(self):
        return '{}({{{}}})'.format(
            self.__class__.__name__,
            ', '.join('{!r}: {!r}'.format(k, self._dict[k])
                      for k in self._keys))

    def clear(self):
        self._dict.clear()
        del self._keys[:]

    def copy(self):
        new = self.__class__()
        new._dict = self._dict.copy()
        new._keys = self._keys[:]
        return new

    __copy__ = copy

    def bisect_left(self, key):
        '''Index where ``key`` would be inserted, before equal keys.'''
        return bisect_left(self._keys, key)

    def bisect_right(self, key):
        '''Index where ``key`` would be inserted, after equal keys.'''
        return bisect_right(self._keys, key)

    def _slice(self, minimum, maximum, inclusive):
        min_inclusive, max_inclusive = inclusive
        if minimum is None:
            start = 0
        elif min_inclusive:
            start = bisect_left(self._keys, minimum)
        else:
            start = bisect_right(self._keys, minimum)
        if maximum is None:
            stop = len(self._keys)
        elif max_inclusive:
            stop = bisect_right(self._keys, maximum)
        else:
            stop = bisect_left(self._keys, maximum)
        return start, max(start, stop)

    def irange(self, minimum=None, maximum=None, inclusive=(True, True),
               reverse=False):
        '''
        Iterate over the keys between ``minimum`` and ``maximum``.

        :param minimum: Lower bound, ``None`` for unbounded.
        :param maximum: Upper bound, ``None`` for unbounded.
        :param inclusive: Pair of booleans telling whether each bound is
            part of the range.
        :type inclusive: tuple
        :param reverse: Yield keys in descending order.
        :type reverse: bool
        :rtype: iterator of keys
        '''
        start, stop = self._slice(minimum, maximum, inclusive)
        keys = self._keys[start:stop]
        if reverse:
            keys.reverse()
        return iter(keys)

    def range(self, minimum=None, maximum=None, inclusive=(True, False),
              reverse=False):
        '''
        Iterate over the ``(key, value)`` pairs in a key range. The range
        is half-open (``minimum <= key < maximum``) unless ``inclusive``
        says otherwise.

        :rtype: iterator of ``(key, value)`` tuples
        '''
        for key in self.irange(minimum, maximum, inclusive, reverse):
            yield key, self._dict[key]

    def peekitem(self, index=-1):
        '''
        Return the ``(key, value)`` pair at ``index`` in key order
        without removing it. Raises :exc:`IndexError` if out of range.
        '''
        key = self._keys[index]
        return key, self._dict[key]

    def popitem(self, index=-1):
        '''
        Remove and return the ``(key, value)`` pair at ``index`` in key
        order, the largest key by default. Raises :exc:`KeyError` when
        the map is empty.
        '''
        if not self._keys:
            raise KeyError('popitem(): map is empty')
        key = self._keys.pop(index)
        return key, self._dict.pop(key)

    def split_off(self, key):
        '''
        Move every entry with a key greater than or equal to ``key`` into
        a new map and return it.
        '''
        index = bisect_left(self._keys, key)
        new = self.__class__()
        new._keys = self._keys[index:]
        new._dict = {k: self._dict.pop(k) for k in new._keys}
        del self._keys[index:]
        return new
