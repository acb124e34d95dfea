import re
from collections import namedtuple

PLACEHOLDER = re.compile(r'\{(\w+)\}')


class Endpoint(namedtuple('Endpoint',
    ['method', 'path', 'signed', 'send_params', 'aliases', 'optional',
    'optional_truthy'])):
    """ One row of an exchange's endpoint table.

        Params
        --
            `method`
                HTTP verb ('GET', 'POST')
            `path`
                path template, with `{name}` placeholders filled from the
                call's parameters
            `signed`
                whether the request needs the KC-API-* headers
            `send_params`
                whether the parameters go out in the query string; some
                endpoints only use them to build the path
            `aliases`
                maps the key the server expects to the caller-facing key
                whose value it duplicates (e.g. {'symbol': 'pair'})
            `optional`
                placeholders that, when their parameter is missing, are
                dropped from the path together with the `/` that follows
            `optional_truthy`
                same as `optional`, but the segment is also dropped when
                the parameter is empty (e.g. '')
    """
    __slots__ = ()

    def __new__(cls, method, path, signed=False, send_params=True,
        aliases=None, optional=(), optional_truthy=()):
        return super(Endpoint, cls).__new__(cls, method, path, signed,
            send_params, dict(aliases or {}), tuple(optional), tuple(optional_truthy))


def formatPath(endpoint:Endpoint, params:dict):
    """ Builds the request path of `endpoint` out of `params`.

        formatPath(Endpoint('GET', '/account/{symbol}/balance',
            optional_truthy=['symbol']), {'symbol': ''}) = '/account/balance'
    """
    path = endpoint.path
    for name in endpoint.optional:
        if params.get(name) is None:
            path = path.replace('{' + name + '}/', '')
    for name in endpoint.optional_truthy:
        if not params.get(name):
            path = path.replace('{' + name + '}/', '')

    def fill(match):
        return str(params.get(match.group(1)))

    return PLACEHOLDER.sub(fill, path)


def shapeParams(endpoint:Endpoint, params:dict):
    """ Returns the parameters `endpoint` actually transmits: the caller's
    parameters plus the server-side aliases carrying the same values. """
    if not endpoint.send_params:
        return {}
    shaped = dict(params)
    for server_key, caller_key in endpoint.aliases.items():
        shaped[server_key] = params.get(caller_key)
    return shaped
