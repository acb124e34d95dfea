from urllib.parse import quote


def _encode(value):
    """ Percent-encodes a key or value the way encodeURIComponent does:
    only letters, digits and `-._~` are left untouched. """
    return quote(value, safe='')


def _stringify(value):
    if value is True:
        return 'true'
    if value is False:
        return 'false'
    return str(value)


def _flatten(prefix, value):
    """ Yields (key, value) pairs for `value`, turning lists into
    indexed keys (a[0], a[1]) and dicts into bracketed keys (a[b]). """
    if value is None:
        return
    if isinstance(value, dict):
        for key, sub_value in value.items():
            yield from _flatten('{}[{}]'.format(prefix, key), sub_value)
    elif isinstance(value, (list, tuple)):
        for index, sub_value in enumerate(value):
            yield from _flatten('{}[{}]'.format(prefix, index), sub_value)
    else:
        yield prefix, _stringify(value)


def encodeQueryString(params:dict):
    """ Encodes `params` into a `key=value&key=value` query string.

        The result has to be byte-for-byte what the exchange re-derives when
        it checks the signature, so the encoding follows the usual nested
        form-encoding convention:

            {'a': 1, 'b': ['x', 'y'], 'c': {'d': 'e f'}}
            -> 'a=1&b%5B0%5D=x&b%5B1%5D=y&c%5Bd%5D=e%20f'

        Keys keep the mapping's insertion order. None values, empty lists
        and empty dicts are left out.
    """
    if not params:
        return ''
    pairs = []
    for key, value in params.items():
        for flat_key, flat_value in _flatten(str(key), value):
            pairs.append(_encode(flat_key) + '=' + _encode(flat_value))
    return '&'.join(pairs)
