"""
tests/trie_fixtures/kernel/test_expander.py
Tests del Expansor de Colisiones y de RawCollider.
"""
import unittest
from trie_fixtures.corpus import CORPUS_BY_TITLE
from trie_fixtures.errors import DuplicatePathError, MalformedSpecError, PathTooLongError
from trie_fixtures.hashing.paths import hash_for, normalize
from trie_fixtures.hashing.utils import raw_hash
from trie_fixtures.kernel.collider import RawCollider
from trie_fixtures.kernel.expander import expand_specs, parse_item_spec


class TestParseItemSpec(unittest.TestCase):

    def test_plain_and_collision_specs(self):
        self.assertEqual(parse_item_spec("42"), ("42", 1))
        self.assertEqual(parse_item_spec("42*5"), ("42", 5))
        self.assertEqual(parse_item_spec("00000001*3"), ("00000001", 3))

    def test_malformed_counts(self):
        """Contador ausente, no numérico o no positivo."""
        for bad in ("42*", "42*x", "42*0", "42*-1", "42*3*2", "42* 3"):
            with self.assertRaises(MalformedSpecError, msg=bad):
                parse_item_spec(bad)


class TestExpandSpecs(unittest.TestCase):

    def test_collision_group(self):
        """'42*5' -> 5 ítems, un solo hash, identidades 0..4."""
        items = expand_specs(["42*5"])
        self.assertEqual(len(items), 5)
        self.assertEqual([c.identity for _, c in items], list(range(5)))
        self.assertEqual({c.hash for _, c in items}, {hash_for("42")})
        self.assertEqual({p for p, _ in items}, {normalize("42")})

    def test_identities_strictly_increase_across_specs(self):
        items = expand_specs(["1*3", "21*3", "22", "3*2"])
        self.assertEqual([c.identity for _, c in items], list(range(9)))

    def test_unique_hashes_without_collision_groups(self):
        specs = ["0", "1", "2", "3", "4", "A", "B", "C", "D", "01", "11"]
        items = expand_specs(specs)
        hashes = [int(c.hash) for _, c in items]
        self.assertEqual(len(set(hashes)), len(specs))

    def test_unique_hashes_across_corpus(self):
        """Todo fixture sin grupos '*' produce hashes distintos dos a dos."""
        for title, specs in CORPUS_BY_TITLE.items():
            if any('*' in spec for spec in specs):
                continue
            with self.subTest(fixture=title):
                hashes = [int(c.hash) for _, c in expand_specs(specs)]
                self.assertEqual(len(set(hashes)), len(specs))

    def test_duplicate_literal_path(self):
        with self.assertRaises(DuplicatePathError):
            expand_specs(["1", "1"])
        # "1" y "10" normalizan igual
        with self.assertRaises(DuplicatePathError):
            expand_specs(["1", "10"])
        # Un grupo '*' no puede repetirse como literal
        with self.assertRaises(DuplicatePathError):
            expand_specs(["1*2", "1"])

    def test_duplicate_message_names_fixture(self):
        with self.assertRaises(DuplicatePathError) as ctx:
            expand_specs(["5", "500"], title="dup")
        self.assertIn("'dup'", str(ctx.exception))
        self.assertIn("5000000000000", str(ctx.exception))

    def test_errors_propagate(self):
        with self.assertRaises(PathTooLongError):
            expand_specs(["0123456789ABC"])
        with self.assertRaises(MalformedSpecError):
            expand_specs(["1", "2*two"])

    def test_empty(self):
        self.assertEqual(expand_specs([]), [])


class TestRawCollider(unittest.TestCase):

    def test_hash_is_synthetic_value(self):
        """El hash crudo es exactamente el hash sintético (sin reducción de CPython)."""
        c = RawCollider(7, hash_for("V"))
        self.assertEqual(c.__hash__(), 31 << 59)
        self.assertEqual(raw_hash(c), 31 << 59)
        # hash() de Python reduce el valor: un trie debe usar raw_hash
        self.assertNotEqual(hash(c), 31 << 59)

    def test_colliders_remain_distinct(self):
        """Dos ítems con el mismo hash no son iguales: colisión genuina."""
        h = hash_for("42")
        a, b = RawCollider(0, h), RawCollider(1, h)
        self.assertEqual(hash(a), hash(b))
        self.assertNotEqual(a, b)
        self.assertEqual(len({a, b}), 2)
        self.assertEqual(a, RawCollider(0, h))

    def test_repr(self):
        self.assertEqual(repr(RawCollider(3, hash_for("5a"))), "RawCollider(3, 5A)")
