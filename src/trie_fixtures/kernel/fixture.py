"""
src/trie_fixtures/kernel/fixture.py
Ensamblado de Fixtures.
Une expansor + oráculo: cada fixture expone sus ítems en orden de inserción
y en el orden de iteración esperado de un trie correcto.
"""
import logging
from typing import Callable, Iterable, Optional, Sequence, Tuple

from ..corpus import CORPUS
from ..hashing.invariants import DEFAULT_GEOMETRY, TrieGeometry
from .collider import RawCollider
from .context import current_context
from .expander import expand_specs
from .oracle import OrderOracle

logger = logging.getLogger(__name__)


class Fixture:
    """Inmutable. El trie construido a partir de él pertenece al test."""
    __slots__ = ('_title', '_insertion', '_iteration', '_geometry')

    def __init__(self, title: str,
                 items_in_insertion_order: Iterable[RawCollider],
                 items_in_iteration_order: Iterable[RawCollider],
                 geometry: TrieGeometry = DEFAULT_GEOMETRY):
        object.__setattr__(self, '_title', title)
        object.__setattr__(self, '_insertion', tuple(items_in_insertion_order))
        object.__setattr__(self, '_iteration', tuple(items_in_iteration_order))
        object.__setattr__(self, '_geometry', geometry)

    def __setattr__(self, name, value):
        raise AttributeError("Fixture es inmutable")

    @property
    def title(self) -> str:
        return self._title

    @property
    def items_in_insertion_order(self) -> Tuple[RawCollider, ...]:
        return self._insertion

    @property
    def items_in_iteration_order(self) -> Tuple[RawCollider, ...]:
        return self._iteration

    @property
    def geometry(self) -> TrieGeometry:
        return self._geometry

    @property
    def count(self) -> int:
        return len(self._insertion)

    def __len__(self):
        return self.count

    def __repr__(self):
        return f"<Fixture {self._title!r} count={self.count}>"


def build_fixture(title: str, specs: Sequence[str],
                  geometry: TrieGeometry = DEFAULT_GEOMETRY) -> Fixture:
    entries = expand_specs(specs, geometry, title=title)
    oracle = OrderOracle(entries)
    fixture = Fixture(title,
                      (item for _, item in entries),
                      oracle.order(),
                      geometry)
    logger.debug("Fixture %r: %d ítems, %d prefijos en colisión",
                  title, fixture.count, len(oracle.colliding))
    return fixture


def build_corpus(geometry: TrieGeometry = DEFAULT_GEOMETRY) -> Tuple[Fixture, ...]:
    return tuple(build_fixture(entry.title, entry.specs, geometry) for entry in CORPUS)


# Construcción eager: un corpus roto aborta la importación
FIXTURES: Tuple[Fixture, ...] = build_corpus()


def fixture_named(title: str, fixtures: Optional[Sequence[Fixture]] = None) -> Fixture:
    for fixture in (FIXTURES if fixtures is None else fixtures):
        if fixture.title == title:
            return fixture
    raise KeyError(f"Fixture no encontrado: {title!r}")


def for_each_fixture(body: Callable[[Fixture], None],
                     label: str = "fixture",
                     fixtures: Optional[Sequence[Fixture]] = None) -> None:
    """Ejecuta `body` una vez por fixture, dentro de un ámbito etiquetado."""
    context = current_context()
    for fixture in (FIXTURES if fixtures is None else fixtures):
        with context.scope(f"{label}: {fixture.title}"):
            body(fixture)
