"""
src/trie_fixtures/kernel/oracle.py
Oráculo de Orden: predice el recorrido en preorden de un trie correcto
a partir de los paths normalizados, sin ejecutar el trie.

Modelo del nodo: en cada nivel un nodo guarda primero sus hojas (por bucket)
y después sus sub-nodos (por bucket). Un prefijo compartido por más de un
ítem obliga al trie a crear un sub-nodo en esa profundidad, así que esos
ítems se visitan después de las hojas hermanas.
"""
from functools import cmp_to_key
from typing import FrozenSet, Generic, Iterable, List, Sequence, Tuple, TypeVar

from ..errors import OracleInvariantError
from ..hashing.paths import NormalizedPath, format_path

T = TypeVar('T')


def colliding_prefixes(paths: Iterable[NormalizedPath]) -> FrozenSet[NormalizedPath]:
    """
    Prefijos (longitud 1 hasta el path completo) presentes más de una vez.
    Una sola pasada global: refleja la estructura de todo el fixture.
    """
    seen = set()
    colliding = set()
    for path in paths:
        for length in range(1, len(path) + 1):
            prefix = path[:length]
            if prefix in seen:
                colliding.add(prefix)
            else:
                seen.add(prefix)
    return frozenset(colliding)


def compare_paths(a: NormalizedPath, b: NormalizedPath,
                  colliding: FrozenSet[NormalizedPath]) -> int:
    """
    -1 si `a` se visita antes que `b`, 1 si después, 0 si son idénticos.
    En cada nivel: el prefijo en colisión va detrás; si ambos (o ninguno)
    colisionan decide el índice de bucket; si empatan, se baja un nivel.
    """
    for i, (x, y) in enumerate(zip(a, b)):
        a_colliding = a[:i + 1] in colliding
        b_colliding = b[:i + 1] in colliding
        if a_colliding and not b_colliding:
            return 1
        if b_colliding and not a_colliding:
            return -1
        if x != y:
            return -1 if x < y else 1
    if len(a) != len(b):
        raise OracleInvariantError(
            f"Paths no consumidos a la par: {format_path(a, strip=False)!r} "
            f"vs {format_path(b, strip=False)!r}")
    return 0


class OrderOracle(Generic[T]):
    """Orden total esperado para los ítems de un fixture."""

    def __init__(self, entries: Sequence[Tuple[NormalizedPath, T]]):
        self.entries = list(entries)
        self.colliding = colliding_prefixes(path for path, _ in self.entries)

    def compare(self, a: NormalizedPath, b: NormalizedPath) -> int:
        return compare_paths(a, b, self.colliding)

    def order(self) -> List[T]:
        # sorted() es estable: las colisiones completas conservan el orden de creación
        key = cmp_to_key(lambda x, y: self.compare(x[0], y[0]))
        return [item for _, item in sorted(self.entries, key=key)]


def iteration_order(entries: Sequence[Tuple[NormalizedPath, T]]) -> List[T]:
    return OrderOracle(entries).order()
