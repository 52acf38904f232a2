from .types import TYPES
from .automap import AutoMap
from .hash import AutoHashMap
from .btree import AutoBTreeMap


__all__ = ['AutoMap', 'AutoHashMap', 'AutoBTreeMap', 'TYPES']
