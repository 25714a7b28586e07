from functools import wraps
import json
from urllib.parse import parse_qs

from twisted.internet import defer
from twisted.logger import Logger

def request_body(request):
    """
    Parse the request body into a dict.

    JSON documents and url encoded forms (first value of each field) are
    decoded from the request content whatever the method. The query
    string never contributes, and other content types give an empty body.

    :raises ValueError: Malformed JSON or a document that isn't an object.
    """
    content_type = request.getHeader('Content-Type') or ''
    content_type = content_type.split(';')[0].strip().lower()
    if content_type not in ('application/json', 'application/x-www-form-urlencoded'):
        return {}

    # twisted may have consumed the content parsing POST forms
    request.content.seek(0, 0)
    content = request.content.read()

    if content_type == 'application/x-www-form-urlencoded':
        body = {}
        for key, values in parse_qs(content, keep_blank_values=True).items():
            body[key.decode('utf-8')] = values[0].decode('utf-8')
        return body

    if not content.strip():
        return {}
    body = json.loads(content.decode('utf-8'))
    if not isinstance(body, dict):
        raise ValueError('Request body must be a JSON object')
    return body

class Jsonify(object):

    log = Logger()

    def __init__(self, router):
        self.router = router

    def jsonify(self, f):
        @wraps(f)
        def deco(*args, **kwargs):
            request = args[1]
            result = defer.maybeDeferred(f, *args, **kwargs)
            result.addCallback(self.stringify, request)
            result.addErrback(self.stringify_failure, request)
            return result
        return deco

    def stringify(self, value, request):
        request.setHeader('Content-Type', 'application/json')
        if value is not None:
            return json.dumps(value)
        return b''

    def stringify_failure(self, failure, request):
        self.log.failure('Unhandled error in {uri}', failure, uri=request.uri)
        request.setResponseCode(500)
        request.setHeader('Content-Type', 'application/json')
        return json.dumps({'error': 'Internal Issues'})

    def route(self, url, *args, **kwargs):
        def deco(f):
            f = self.jsonify(f)
            self.router.route(url, *args, **kwargs)(f)
            return f
        return deco
