from klein import Klein
from twisted.internet import defer
from twisted.logger import Logger
from twisted.python.failure import Failure
from werkzeug.exceptions import MethodNotAllowed, NotFound

from database import Candidates, Parties
from inputcheck import input_check
from middleware import Jsonify, request_body

class ElectionApi(object):

    router = Klein()
    jsonify = Jsonify(router)
    log = Logger()

    def __init__(self, database):
        self.parties = Parties(database)
        self.candidates = Candidates(database, self.parties)

    def resource(self):
        return self.router.resource()

    @router.handle_errors(NotFound, MethodNotAllowed)
    def page_not_found(self, request, failure):
        request.setResponseCode(404)
        return b''

    def database_failure(self, failure, request, code=400):
        """
        Errback turning a persistence error into an error envelope.
        """
        if code >= 500:
            self.log.error('Database error on {uri}: {error}',
                uri=request.uri, error=failure.getErrorMessage())
        else:
            self.log.warn('Database error on {uri}: {error}',
                uri=request.uri, error=failure.getErrorMessage())
        request.setResponseCode(code)
        return {'error': failure.getErrorMessage()}

    def rows_to_json(self, rows):
        return {'message': 'success', 'data': rows}

    def parse_body(self, request):
        """
        :return: `(body, None)` or `(None, error envelope)`
        """
        try:
            return request_body(request), None
        except ValueError as error:
            request.setResponseCode(400)
            return None, {'error': str(error)}

    @jsonify.route('/candidates', methods=['GET'])
    def get_candidates(self, request):
        """
        Get a list of candidates along with their party name.

        :return: `{message: "success", data: []}`
        """
        d = self.candidates.all_candidates()
        d.addCallback(self.rows_to_json)
        d.addErrback(self.database_failure, request, 500)
        return d

    @jsonify.route('/candidate/<int:candidate_id>', methods=['GET'])
    def get_candidate(self, request, candidate_id):
        """
        Get a single candidate.

        :return: `{message: "success", data: []}`
        """
        d = self.candidates.get_candidate_by_id(candidate_id)
        d.addCallback(self.rows_to_json)
        d.addErrback(self.database_failure, request)
        return d

    @jsonify.route('/candidate', methods=['POST'])
    @defer.inlineCallbacks
    def add_candidate(self, request):
        """
        Add a candidate to the system.

        :param first_name: Candidate's first name.
        :param last_name: Candidate's last name.
        :param industry_connected: Candidate's industry connection flag.
        :return: `{message: "success", data: {}}`
        """
        body, error = self.parse_body(request)
        if error:
            return error

        errors = input_check(body, 'first_name', 'last_name', 'industry_connected')
        if errors:
            request.setResponseCode(400)
            return {'error': errors}

        try:
            yield self.candidates.add_candidate(
                body['first_name'],
                body['last_name'],
                body['industry_connected'])
        except Exception:
            return self.database_failure(Failure(), request)

        return {'message': 'success', 'data': body}

    @jsonify.route('/candidate/<int:candidate_id>', methods=['PUT'])
    @defer.inlineCallbacks
    def update_candidate_party(self, request, candidate_id):
        """
        Change a candidate's party.

        :param party_id: Id of the party to join.
        :type party_id: int
        :return: `{message: "success", data: {}, changes: n}`
        """
        body, error = self.parse_body(request)
        if error:
            return error

        errors = input_check(body, 'party_id')
        if errors:
            request.setResponseCode(400)
            return {'error': errors}

        try:
            changes = yield self.candidates.update_party(candidate_id, body['party_id'])
        except Exception:
            return self.database_failure(Failure(), request)

        if not changes:
            return {'message': 'Candidate not found'}
        return {'message': 'success', 'data': body, 'changes': changes}

    @jsonify.route('/candidate/<int:candidate_id>', methods=['DELETE'])
    def delete_candidate(self, request, candidate_id):
        """
        Remove a candidate.

        :return: `{message: "deleted", changes: n, id: candidate_id}`
        """
        d = self.candidates.delete_candidate(candidate_id)

        @d.addCallback
        def deleted(changes):
            if not changes:
                return {'message': 'Candidate not found'}
            return {'message': 'deleted', 'changes': changes, 'id': candidate_id}

        d.addErrback(self.database_failure, request)
        return d

    @jsonify.route('/parties', methods=['GET'])
    def get_parties(self, request):
        """
        Get a list of parties.

        :return: `{message: "success", data: []}`
        """
        d = self.parties.all_parties()
        d.addCallback(self.rows_to_json)
        d.addErrback(self.database_failure, request, 500)
        return d

    @jsonify.route('/party/<int:party_id>', methods=['GET'])
    def get_party(self, request, party_id):
        """
        Get a single party.

        :return: `{message: "success", data: []}`
        """
        d = self.parties.get_party_by_id(party_id)
        d.addCallback(self.rows_to_json)
        d.addErrback(self.database_failure, request)
        return d

    @jsonify.route('/party/<int:party_id>', methods=['DELETE'])
    def delete_party(self, request, party_id):
        """
        Remove a party. Its candidates are left without a party.

        :return: `{message: "deleted", changes: n, id: party_id}`
        """
        d = self.parties.delete_party(party_id)

        @d.addCallback
        def deleted(changes):
            if not changes:
                return {'message': 'Party not found'}
            return {'message': 'deleted', 'changes': changes, 'id': party_id}

        d.addErrback(self.database_failure, request)
        return d
