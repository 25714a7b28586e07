# -*- coding: utf-8 -*-

from unittest.mock import patch

from twisted.python.usage import UsageError
from twisted.trial.unittest import TestCase

from database import Database, Candidates, Parties
from kleintesting import MemoryConnectionPool
import manage

class TestCLI(TestCase):

    def test_defaults(self):
        cli = manage.CLI()
        cli.parseOptions([])
        self.assertEqual(cli['host'], '127.0.0.1')
        self.assertIsInstance(cli['port'], int)
        self.assertFalse(cli['runserver'])
        self.assertFalse(cli['create'])
        self.assertIsNone(cli['logpath'])

    def test_options(self):
        cli = manage.CLI()
        cli.parseOptions(['-D', 'test.sqlite', '-P', '8080', '-C', '-S', '-R'])
        self.assertEqual(cli['db'], 'test.sqlite')
        self.assertEqual(cli['port'], 8080)
        self.assertTrue(cli['create'])
        self.assertTrue(cli['seed'])
        self.assertTrue(cli['runserver'])

    def test_port_not_int(self):
        cli = manage.CLI()
        self.assertRaises(UsageError, cli.parseOptions, ['--port', 'eighty'])

class TestBuildDatabase(TestCase):

    def setUp(self):
        self.dbpool = MemoryConnectionPool()
        self.addCleanup(self.dbpool.close)
        db = Database(self.dbpool)
        self.parties = Parties(db)
        self.candidates = Candidates(db, self.parties)

    @patch('manage.print', create=True)
    def test_create_and_seed(self, _print):
        self.successResultOf(manage.create_tables(None, self.parties, self.candidates))
        self.successResultOf(manage.seed_tables(None, self.parties, self.candidates))

        parties = self.successResultOf(self.parties.all_parties())
        self.assertEqual([row['name'] for row in parties], manage.SEED_PARTIES)

        candidates = self.successResultOf(self.candidates.all_candidates())
        self.assertEqual(len(candidates), len(manage.SEED_CANDIDATES))
        for row, seed in zip(candidates, manage.SEED_CANDIDATES):
            first_name, last_name, industry_connected, party = seed
            self.assertEqual((row['first_name'], row['last_name']), (first_name, last_name))
            if party is None:
                self.assertIsNone(row['party_name'])
            else:
                self.assertEqual(row['party_name'], manage.SEED_PARTIES[party])
