class AutomapError(Exception):
    '''
    Base class for exceptions generated by automap containers.
    '''
    def __init__(self, value):
        self.value = value

    def __str__(self):
        return repr(self.value)


class NotAutoMapped(AutomapError, TypeError):
    '''
    Raised when a value that cannot report its own key is given to
    an :class:`~automap.maps.AutoMap`.
    '''

    _default_message = 'Value does not implement key()'

    def __init__(self, message=None):
        super(NotAutoMapped, self).__init__(message or
                                            self._default_message)


class KeyMismatch(AutomapError, ValueError):
    '''
    Raised on item assignment when the given key differs from the key
    the value reports for itself.
    '''
    def __init__(self, key, value_key):
        self.key = key
        self.value_key = value_key
        super(KeyMismatch, self).__init__(
            'Key {!r} does not match value key {!r}'.format(key, value_key))


class SerializationError(AutomapError, ValueError):
    '''
    Raised when a map cannot be encoded or decoded for a content type.
    '''
