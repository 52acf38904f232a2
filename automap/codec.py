import logging
import json

from automap.error import SerializationError
from automap.maps import TYPES


logger = logging.getLogger('automap.codec')

DEFAULT_CONTENT_TYPE = 'application/json'


def default_encoder(obj):
    '''
    Default encoder for JSON payloads, which returns UTF-8 encoded
    json instead of the default bloated backslash u XXXX escaped ASCII strings.
    '''
    return json.dumps(obj, ensure_ascii=False).encode('utf-8')


def default_decoder(obj):
    '''
    Default decoder from JSON payloads.
    '''
    if isinstance(obj, (bytes, bytearray)):
        obj = obj.decode('utf-8')
    return json.loads(obj)


def _passthrough(obj):
    return obj


class MapCodec:
    '''
    Serializes auto-maps as their raw representation, a list of
    ``[key, value]`` pairs, and rebuilds them from it.

    Keys are written and read exactly as stored. On decoding they are
    taken from the payload, not recomputed from the values, so a payload
    must already pair every value with its own key.

    :param key_encoder: Turns a key into something the content type
        encoder accepts.
    :param key_decoder: Inverse of ``key_encoder``; must return a valid
        key (hashable, or ordered for an
        :class:`~automap.maps.AutoBTreeMap`).
    :param value_encoder: Turns a value into something the content type
        encoder accepts, e.g. a dict.
    :param value_decoder: Inverse of ``value_encoder``.
    '''

    def __init__(self, key_encoder=None, key_decoder=None,
                 value_encoder=None, value_decoder=None):
        self.key_encoder = key_encoder or _passthrough
        self.key_decoder = key_decoder or _passthrough
        self.value_encoder = value_encoder or _passthrough
        self.value_decoder = value_decoder or _passthrough
        self._encoders = {'application/json': default_encoder,
                          'text/json': default_encoder}
        self._decoders = {'application/json': default_decoder,
                          'text/json': default_decoder}

    def get_encoder(self, content_type):
        '''
        Get the encoding function for the provided content type.

        :param content_type: the requested media type
        :type content_type: str
        :rtype: function
        '''
        try:
            return self._encoders[content_type]
        except KeyError:
            raise SerializationError(
                'No encoder for content type {}'.format(content_type))

    def set_encoder(self, content_type, encoder):
        '''
        Set the encoding function for the provided content type.

        :param content_type: the requested media type
        :type content_type: str
        :param encoder: an encoding function, takes the list of pairs
            and returns the serialized data.
        :type encoder: function
        '''
        self._encoders[content_type] = encoder
        return self

    def get_decoder(self, content_type):
        '''
        Get the decoding function for the provided content type.

        :param content_type: the requested media type
        :type content_type: str
        :rtype: function
        '''
        try:
            return self._decoders[content_type]
        except KeyError:
            raise SerializationError(
                'No decoder for content type {}'.format(content_type))

    def set_decoder(self, content_type, decoder):
        '''
        Set the decoding function for the provided content type.

        :param content_type: the requested media type
        :type content_type: str
        :param decoder: a decoding function, takes the serialized data
            and returns a list of pairs
        :type decoder: function
        '''
        self._decoders[content_type] = decoder
        return self

    def dumps(self, automap, content_type=DEFAULT_CONTENT_TYPE):
        '''
        Serialize an auto-map. Entries keep the iteration order of the
        map, so an :class:`~automap.maps.AutoBTreeMap` is written in
        ascending key order.

        :rtype: whatever the content type encoder returns, ``bytes`` for
            JSON
        '''
        encoder = self.get_encoder(content_type)
        pairs = [[self.key_encoder(key), self.value_encoder(value)]
                 for key, value in automap.items()]
        try:
            data = encoder(pairs)
        except (TypeError, ValueError) as err:
            raise SerializationError(
                'Cannot encode {} as {}: {}'.format(
                    type(automap).__name__, content_type, err)) from err
        logger.debug('Encoded %d entries of %s as %s', len(pairs),
                     type(automap).__name__, content_type)
        return data

    def loads(self, data, map_type, content_type=DEFAULT_CONTENT_TYPE):
        '''
        Rebuild an auto-map from serialized data.

        :param map_type: The map class or its :attr:`type_name`
            (``'hash'`` or ``'btree'``)
        :rtype: an instance of ``map_type``
        '''
        if isinstance(map_type, str):
            try:
                map_type = TYPES[map_type]
            except KeyError:
                raise TypeError('Unknown map type {}'.format(map_type))

        decoder = self.get_decoder(content_type)
        try:
            pairs = decoder(data)
        except ValueError as err:
            raise SerializationError(
                'Cannot decode {} payload: {}'.format(
                    content_type, err)) from err

        if not isinstance(pairs, (list, tuple)):
            raise SerializationError(
                'Expected a list of pairs, got {}'.format(
                    type(pairs).__name__))

        raw = map_type.raw_type()
        for pair in pairs:
            if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                raise SerializationError(
                    'Expected a [key, value] pair, got {!r}'.format(pair))
            key, value = pair
            try:
                raw[self.key_decoder(key)] = self.value_decoder(value)
            except (TypeError, KeyError, ValueError) as err:
                raise SerializationError(
                    'Cannot decode entry {!r}: {}'.format(pair, err)) from err
        logger.debug('Decoded %d entries into %s', len(raw),
                     map_type.__name__)
        return map_type.from_raw(raw)
