"""
src/trie_fixtures/kernel/expander.py
Expansor de Colisiones.
Convierte la lista de specs de un fixture en ítems con hash, en orden de inserción.
"""
import logging
from typing import Iterable, List, Optional, Tuple

from ..errors import DuplicatePathError, MalformedSpecError
from ..hashing.invariants import DEFAULT_GEOMETRY, TrieGeometry
from ..hashing.paths import NormalizedPath, encode, format_path, normalize
from .collider import RawCollider

logger = logging.getLogger(__name__)

COLLISION_SEPARATOR = '*'


def parse_item_spec(spec: str) -> Tuple[str, int]:
    """
    "42*5" -> ("42", 5); "42" -> ("42", 1).
    El contador debe ser un entero decimal positivo.
    """
    path, sep, count_text = spec.partition(COLLISION_SEPARATOR)
    if not sep:
        return spec, 1
    if not count_text.isdecimal():
        raise MalformedSpecError(f"Ítem inválido: {spec!r} (contador de colisiones no numérico)")
    count = int(count_text)
    if count <= 0:
        raise MalformedSpecError(f"Ítem inválido: {spec!r} (contador de colisiones debe ser > 0)")
    return path, count


def expand_specs(specs: Iterable[str],
                 geometry: TrieGeometry = DEFAULT_GEOMETRY,
                 title: Optional[str] = None) -> List[Tuple[NormalizedPath, RawCollider]]:
    """
    Produce los pares (path normalizado, ítem) en orden de inserción.
    Las identidades crecen de forma estricta desde 0 dentro del fixture.
    """
    items: List[Tuple[NormalizedPath, RawCollider]] = []
    seen = set()
    for spec in specs:
        path_text, count = parse_item_spec(spec)
        # Las colisiones se extienden con ceros para que ordenen correctamente
        path = normalize(path_text, geometry)
        if path in seen:
            where = f" en fixture {title!r}" if title is not None else ""
            raise DuplicatePathError(
                f"Path duplicado inesperado: {format_path(path, strip=False)!r}{where}")
        seen.add(path)

        hash_value = encode(path, geometry)
        for _ in range(count):
            items.append((path, RawCollider(len(items), hash_value)))

    logger.debug("Expandidos %d specs en %d ítems (%s)", len(seen), len(items), title)
    return items
