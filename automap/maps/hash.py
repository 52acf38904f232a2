from .automap import AutoMap
from . import TYPES


class AutoHashMap(AutoMap):
    '''
    An :class:`~automap.maps.AutoMap` backed by a ``dict``. Keys must be
    hashable. Iteration order is the order of the underlying ``dict``
    and carries no meaning.
    '''

    type_name = 'hash'
    raw_type = dict


TYPES['hash'] = AutoHashMap
