"""
tests/trie_fixtures/ds/test_realize.py
Integración: fixtures materializados en el trie de referencia.
El orden de iteración real debe coincidir con el que predice el oráculo.
"""
import gc
import random
import unittest

from lifetime import LifetimeTracker
from reference_trie import PersistentMap, PersistentSet
from trie_fixtures.ds.realize import VALUE_OFFSET, persistent_dictionary, persistent_set
from trie_fixtures.hashing.invariants import TrieGeometry
from trie_fixtures.kernel.fixture import (
    FIXTURES, build_corpus, build_fixture, fixture_named, for_each_fixture,
)


class TestPersistentSet(unittest.TestCase):

    def test_every_fixture(self):
        def check(fixture):
            tracker = LifetimeTracker()
            s, ref = persistent_set(fixture, tracker, PersistentSet)
            self.assertEqual(len(s), fixture.count)
            self.assertEqual(list(s), ref)
            for item in ref:
                self.assertIn(item, s)
            self.assertEqual(tracker.instances, 2 * fixture.count)

        for_each_fixture(check)

    def test_transform(self):
        fixture = fixture_named("single-node")
        tracker = LifetimeTracker()
        s, ref = persistent_set(fixture, tracker, list, transform=lambda c: c.identity)
        self.assertEqual([t.payload for t in s], list(range(fixture.count)))
        self.assertEqual(sorted(t.payload for t in ref), list(range(fixture.count)))

    def test_no_leaked_instances(self):
        tracker = LifetimeTracker()
        s, ref = persistent_set(fixture_named("nested"), tracker, PersistentSet)
        self.assertEqual(tracker.live, 2 * len(ref))
        del s, ref
        gc.collect()
        self.assertEqual(tracker.live, 0)


class TestPersistentDictionary(unittest.TestCase):

    def test_every_fixture(self):
        def check(fixture):
            tracker = LifetimeTracker()
            m, ref = persistent_dictionary(fixture, tracker, PersistentMap.from_pairs)
            self.assertEqual(len(m), fixture.count)
            self.assertEqual(list(m.items()), ref)
            for key, value in ref:
                self.assertEqual(m[key], value)
                self.assertEqual(value.payload, key.payload.identity + VALUE_OFFSET)

        for_each_fixture(check, label="dictionary")

    def test_custom_transforms(self):
        fixture = fixture_named("few-different-collisions")
        tracker = LifetimeTracker()
        m, ref = persistent_dictionary(
            fixture, tracker, PersistentMap.from_pairs,
            value_transform=lambda c: f"v{c.identity}")
        self.assertEqual([v.payload for _, v in m.items()],
                         [f"v{i}" for i in range(12)])
        self.assertEqual(tracker.instances, 4 * fixture.count)


class TestOracleAgainstTrie(unittest.TestCase):

    def _assert_matches(self, fixture):
        trie = PersistentSet(fixture.items_in_insertion_order, geometry=fixture.geometry)
        self.assertEqual(tuple(trie), fixture.items_in_iteration_order)

    def test_corpus(self):
        for_each_fixture(self._assert_matches, label="oracle")

    def test_corpus_radix_16(self):
        for_each_fixture(self._assert_matches, label="oracle/16",
                         fixtures=build_corpus(TrieGeometry(64, 4)))

    def test_random_trees(self):
        """Árboles aleatorios con pocos buckets para forzar colisiones."""
        rng = random.Random(20221)
        fixtures = []
        for n in range(60):
            specs = {}
            for _ in range(rng.randint(1, 25)):
                path = ''.join(rng.choice("0123") for _ in range(rng.randint(1, 6)))
                key = path.rstrip("0")
                if key in specs:
                    continue
                count = rng.choice((1, 1, 1, 2, 3))
                specs[key] = path if count == 1 else f"{path}*{count}"
            fixtures.append(build_fixture(f"random-{n}", list(specs.values())))

        self.assertEqual(len(fixtures), 60)
        for_each_fixture(self._assert_matches, label="random", fixtures=fixtures)

    def test_fixture_count(self):
        self.assertEqual(len(FIXTURES), 19)
