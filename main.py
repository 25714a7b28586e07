from klein import Klein
from werkzeug.exceptions import MethodNotAllowed, NotFound

from controllers import ElectionApi
from database import Database

class Application(object):

    router = Klein()

    def __init__(self, dbpool):
        self.database = Database(dbpool)
        self.election_api = ElectionApi(self.database)

    def run(self, *args, **kwargs):
        self.router.run(*args, **kwargs)

    def resource(self):
        return self.router.resource()

    @router.handle_errors(NotFound, MethodNotAllowed)
    def page_not_found(self, request, failure):
        request.setResponseCode(404)
        return b''

    @router.route('/api', branch=True)
    def election_rsrc(self, request):
        return self.election_api.resource()
