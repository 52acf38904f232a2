from abc import ABCMeta, abstractmethod


class AutoMapped(metaclass=ABCMeta):
    '''
    A value that contains its own map key. Subclasses (or any class
    with a callable ``key`` attribute) can be stored in an
    :class:`~automap.maps.AutoHashMap` or
    :class:`~automap.maps.AutoBTreeMap` with ``insert(value)``::

        class Person(AutoMapped):
            def __init__(self, name, age):
                self.name = name
                self.age = age

            def key(self):
                return self.name

    The key must not change while the value is stored in a map. This is
    not checked: a value whose key is mutated in place can no longer be
    found under its new key.
    '''

    __slots__ = ()

    @abstractmethod
    def key(self):
        '''
        Return the key of this value. Must be deterministic and free of
        side effects.
        '''
        raise NotImplementedError

    @classmethod
    def __subclasshook__(cls, C):
        if cls is AutoMapped:
            for B in C.__mro__:
                if 'key' in B.__dict__:
                    if callable(B.__dict__['key']):
                        return True
                    break
        return NotImplemented
