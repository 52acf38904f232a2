__version__ = '0.1.0'

from .mapped import AutoMapped
from .maps import AutoMap, AutoHashMap, AutoBTreeMap
from .sortedmap import SortedMap


__all__ = ('AutoMapped', 'AutoMap', 'AutoHashMap', 'AutoBTreeMap',
           'SortedMap')
