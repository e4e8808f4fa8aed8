import gzip
import json
from urllib.parse import quote_plus


def _encode_value(value):
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return quote_plus(str(value))


def _encode_params_rec(name, value, pairs):
    if value is None:
        return
    if isinstance(value, (list, tuple)):
        for i, item in enumerate(value):
            _encode_params_rec('{}[{}]'.format(name, i), item, pairs)
    elif isinstance(value, dict):
        for key, item in value.items():
            _encode_params_rec('{}[{}]'.format(name, quote_plus(str(key))), item, pairs)
    elif isinstance(value, (str, int, float)):
        pairs.append((name, _encode_value(value)))
    else:
        raise TypeError('Cannot encode {!r} as a query parameter'.format(value))


def encode_params(params):
    """
    Flattens a parameter tree into ``(name, value)`` query pairs.

    Nested objects become bracketed segments and arrays become bracketed indices, in the order
    the tree is traversed:

    >>> encode_params({'a': {'b': [1, 2]}})
    [('a[b][0]', '1'), ('a[b][1]', '2')]

    Names and values are percent-encoded, brackets excepted; ``None`` leaves are omitted.
    """
    pairs = []
    for name, value in (params or {}).items():
        _encode_params_rec(quote_plus(str(name)), value, pairs)
    return pairs


def encode_query(params):
    return '&'.join('{}={}'.format(name, value) for name, value in encode_params(params))


def encode_body(params, compression_threshold):
    """
    Serializes ``params`` to a UTF-8 JSON body.

    :return: a tuple ``(body, headers)``; the body is gzip-compressed when its length reaches
        ``compression_threshold`` bytes
    """
    body = json.dumps(params if params is not None else {}, separators=(',', ':')).encode('utf-8')
    headers = {'Content-Type': 'application/json; charset=utf-8'}

    if compression_threshold is not None and len(body) >= compression_threshold:
        headers['Content-Encoding'] = 'gzip'
        return gzip.compress(body), headers
    return body, headers


class AttributeDict(dict):
    __getattr__ = dict.__getitem__
    __setattr__ = dict.__setitem__
