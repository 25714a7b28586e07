from os import environ, path, remove
import sys

from twisted.python.usage import Options
from twisted.internet import defer, task

from database import Database, Candidates, Parties, connect
from main import Application

SEED_PARTIES = [
    'JS Junkies',
    'Heroku Hardliners',
    'Git Gurus',
]

# first name, last name, industry connected, party (index into SEED_PARTIES or None)
SEED_CANDIDATES = [
    ('Ronald', 'Firbank', 1, 0),
    ('Virginia', 'Woolf', 1, 0),
    ('Piers', 'Gaveston', 0, 0),
    ('Charles', 'LeRoi', 1, 1),
    ('Katherine', 'Mansfield', 1, 1),
    ('Dora', 'Carrington', 0, 1),
    ('Edward', 'Bellamy', 0, None),
    ('Montague', 'Summers', 1, 2),
    ('Octavia', 'Butler', 1, 2),
    ('Unica', 'Zurn', 0, None),
]

class CLI(Options):

    optParameters = [
        ['db', 'D', environ.get('ELECTION_DB', 'election.sqlite'), 'Path to the sqlite database.'],
        ['host', 'H', '127.0.0.1', 'Hostname'],
        ['port', 'P', int(environ.get('PORT', 3001)), 'Port number', int],
        ['logpath', 'L', None, 'File path to log'],
    ]

    optFlags = [
        ['runserver', 'R', 'Run the Klein application'],
        ['create', 'C', 'Create/Recreate the database'],
        ['seed', 'S', 'Insert sample parties and candidates after creating the database'],
    ]

@defer.inlineCallbacks
def create_tables(reactor, *models):
    for model in models:
        yield model.create_table()
        print('[x] Created the "%s" table' % (model.table_name))

@defer.inlineCallbacks
def seed_tables(reactor, parties, candidates):
    party_ids = []
    for name in SEED_PARTIES:
        yield parties.add_party(name)
        rows = yield parties.db.execute(
            'select id from %s where name = ?' % (parties.table_name), (name,))
        party_ids.append(rows[0]['id'])
    print('[x] Inserted %d parties' % (len(party_ids)))

    for first_name, last_name, industry_connected, party in SEED_CANDIDATES:
        yield candidates.add_candidate(first_name, last_name, industry_connected)
        if party is None:
            continue
        rows = yield candidates.db.execute(
            'select id from %s where first_name = ? and last_name = ?' % (candidates.table_name),
            (first_name, last_name))
        yield candidates.update_party(rows[0]['id'], party_ids[party])
    print('[x] Inserted %d candidates' % (len(SEED_CANDIDATES)))

@defer.inlineCallbacks
def build_database(reactor, dbpath, seed):
    dbpool = connect(dbpath)
    db = Database(dbpool)
    parties = Parties(db)
    candidates = Candidates(db, parties)
    try:
        yield create_tables(reactor, parties, candidates)
        if seed:
            yield seed_tables(reactor, parties, candidates)
    finally:
        dbpool.close()

def create_database(dbpath, seed=False):
    if path.exists(dbpath):
        answer = input('%s already exists. Delete? [yes/no]: ' % (dbpath))
        if answer.lower() in ['yes','y']:
            remove(dbpath)  # delete old database
        else:
            print('Database will not be created')
            sys.exit()      # don't delete

    # Create tables then exit
    task.react(build_database, (dbpath, seed))

def runserver(dbpath, host, port, logpath):
    dbpool = connect(dbpath)
    app = Application(dbpool)
    print('Database: %s' % (dbpath))

    if logpath:
        logfile = open(logpath, 'a')
        print('Log File: %s' % (logpath))
    else:
        logfile = None

    print('Host: %s\nPort: %d\n' % (host, port))
    app.run(host, port, logfile)


if __name__=='__main__':
    cli = CLI()
    cli.parseOptions()

    if cli['create']:
        create_database(cli['db'], cli['seed'])

    if cli['runserver']:
        runserver(
            dbpath=cli['db'],
            host=cli['host'],
            port=cli['port'],
            logpath=cli['logpath'])
