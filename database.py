from twisted.enterprise.adbapi import ConnectionPool
from zope.interface import implementer
from interfaces import ICandidates, IParties

def enable_foreign_keys(connection):
    """ sqlite leaves foreign key enforcement off per connection """
    cursor = connection.cursor()
    cursor.execute('pragma foreign_keys = on')
    cursor.close()

def connect(dbpath):
    return ConnectionPool(
        'sqlite3',
        dbpath,
        check_same_thread=False,
        cp_openfun=enable_foreign_keys)

class Database(object):
    def __init__(self, dbpool):
        self.dbpool = dbpool

    def execute(self, sql_stmt, params=()):
        """
        Run a single parameterized statement.

        :return: `Deferred` firing with a list of rows (dicts) for queries,
            otherwise the number of affected rows.
        """
        if sql_stmt.lstrip().lower().find('select') == 0:
            return self.dbpool.runInteraction(self._query, sql_stmt, params)
        return self.dbpool.runInteraction(self._execute, sql_stmt, params)

    def _query(self, cursor, sql_stmt, params):
        cursor.execute(sql_stmt, params)
        columns = [column[0] for column in cursor.description]
        return [dict(zip(columns, row)) for row in cursor.fetchall()]

    def _execute(self, cursor, sql_stmt, params):
        cursor.execute(sql_stmt, params)
        return cursor.rowcount

@implementer(IParties)
class Parties(object):

    table_name = 'parties'

    def __init__(self, db):
        self.db = db

    def create_table(self):
        stmt = "create table %s (" \
            "id integer primary key, " \
            "name text not null)" % (self.table_name)
        return self.db.execute(stmt)

    def add_party(self, name):
        stmt = 'insert into %s (name) values (?)' % (self.table_name)
        return self.db.execute(stmt, (name,))

    def all_parties(self):
        return self.db.execute('select * from %s' % (self.table_name))

    def get_party_by_id(self, party_id):
        stmt = 'select * from %s where id = ?' % (self.table_name)
        return self.db.execute(stmt, (party_id,))

    def delete_party(self, party_id):
        stmt = 'delete from %s where id = ?' % (self.table_name)
        return self.db.execute(stmt, (party_id,))

@implementer(ICandidates)
class Candidates(object):

    table_name = 'candidates'

    def __init__(self, db, parties):
        self.db = db
        self.parties = parties

    def create_table(self):
        stmt = "create table %s (" \
            "id integer primary key, " \
            "first_name text not null, " \
            "last_name text not null, " \
            "party_id integer, " \
            "industry_connected boolean not null, " \
            "foreign key(party_id) references %s(id) on delete set null)" % (self.table_name, self.parties.table_name)
        return self.db.execute(stmt)

    def select_stmt(self):
        return "select c.*, p.name as party_name " \
            "from %s as c left join %s as p on c.party_id = p.id" % (self.table_name, self.parties.table_name)

    def all_candidates(self):
        return self.db.execute(self.select_stmt())

    def get_candidate_by_id(self, candidate_id):
        stmt = '%s where c.id = ?' % (self.select_stmt())
        return self.db.execute(stmt, (candidate_id,))

    def add_candidate(self, first_name, last_name, industry_connected):
        stmt = "insert into %s (first_name, last_name, industry_connected) " \
            "values (?, ?, ?)" % (self.table_name)
        return self.db.execute(stmt, (first_name, last_name, industry_connected))

    def update_party(self, candidate_id, party_id):
        stmt = 'update %s set party_id = ? where id = ?' % (self.table_name)
        return self.db.execute(stmt, (party_id, candidate_id))

    def delete_candidate(self, candidate_id):
        stmt = 'delete from %s where id = ?' % (self.table_name)
        return self.db.execute(stmt, (candidate_id,))
