from zope.interface import Interface

class ICandidates(Interface):
    def create_table():
        """
        Create the candidates table.
        """

    def all_candidates():
        """
        Get every candidate record joined with its party name.
        """

    def get_candidate_by_id(candidate_id):
        """
        Retrieve the candidate records matching the candidate id number.
        """

    def add_candidate(first_name, last_name, industry_connected):
        """
        Insert a candidate into the candidates table.
        """

    def update_party(candidate_id, party_id):
        """
        Change the party a candidate belongs to. Fires with the affected row count.
        """

    def delete_candidate(candidate_id):
        """
        Remove a candidate. Fires with the affected row count.
        """

class IParties(Interface):
    def create_table():
        """
        Create the parties table.
        """

    def all_parties():
        """
        Get all the party records.
        """

    def get_party_by_id(party_id):
        """
        Retrieve the party records matching the party id number.
        """

    def delete_party(party_id):
        """
        Remove a party. Fires with the affected row count.
        """
