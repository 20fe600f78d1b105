"""
src/trie_fixtures/hashing/paths.py
Códec de Paths: especificación textual <-> hash sintético.

Un path como "5A" describe el bucket 10 de un nodo de segundo nivel que
cuelga del bucket 5 de la raíz. Normalizar rellena con '0' hasta la
profundidad máxima; codificar empaqueta un bucket por nivel, MSB primero.
"""
from typing import Tuple

from ..errors import MalformedSpecError, PathTooLongError
from .invariants import DIGITS, DEFAULT_GEOMETRY, TrieGeometry

NormalizedPath = Tuple[int, ...]


class Hash:
    """Valor de hash sintético de anchura fija (unsigned)."""
    __slots__ = ('value', 'geometry')

    def __init__(self, value: int, geometry: TrieGeometry = DEFAULT_GEOMETRY):
        if not 0 <= value <= geometry.hash_mask:
            raise ValueError(f"Hash fuera de rango para {geometry!r}: {value}")
        self.value = value
        self.geometry = geometry

    @property
    def path(self) -> NormalizedPath:
        return decode(self, self.geometry)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __eq__(self, other):
        if isinstance(other, Hash):
            return self.value == other.value and self.geometry == other.geometry
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return format_path(self.path)

    def __repr__(self):
        return f"Hash({str(self)!r})"


# =============================================================================
# PARSEO Y NORMALIZACIÓN
# =============================================================================

def parse_path(path: str, geometry: TrieGeometry = DEFAULT_GEOMETRY) -> Tuple[int, ...]:
    """Convierte cada carácter en su índice de bucket (sin relleno)."""
    buckets = []
    for ch in path.upper():
        digit = DIGITS.find(ch)
        if digit < 0 or digit >= geometry.radix:
            raise MalformedSpecError(
                f"Carácter {ch!r} inválido en path {path!r} (radix {geometry.radix})")
        buckets.append(digit)
    return tuple(buckets)


def normalize(path: str, geometry: TrieGeometry = DEFAULT_GEOMETRY) -> NormalizedPath:
    """
    Rellena el path con el bucket 0 hasta exactamente `max_depth` niveles.
    El path explícito debe ser estrictamente más corto que `max_depth`.
    """
    if len(path) >= geometry.max_depth:
        raise PathTooLongError(
            f"Path {path!r} demasiado largo: {len(path)} >= max_depth {geometry.max_depth}")
    buckets = parse_path(path, geometry)
    return buckets + (0,) * (geometry.max_depth - len(buckets))


# =============================================================================
# CODIFICACIÓN (MSB primero)
# =============================================================================

def encode(path: NormalizedPath, geometry: TrieGeometry = DEFAULT_GEOMETRY) -> Hash:
    if len(path) != geometry.max_depth:
        raise ValueError(
            f"Path normalizado con {len(path)} niveles, se esperaban {geometry.max_depth}")
    value = 0
    for level, digit in enumerate(path):
        if not 0 <= digit < (1 << geometry.level_bits(level)):
            raise ValueError(f"Bucket {digit} no cabe en el nivel {level} de {geometry!r}")
        value |= digit << geometry.shift(level)
    return Hash(value, geometry)


def decode(hash_value, geometry: TrieGeometry = DEFAULT_GEOMETRY) -> NormalizedPath:
    """Inversa de `encode`: extrae el bucket de cada nivel."""
    value = int(hash_value)
    return tuple(geometry.bucket(value, level) for level in range(geometry.max_depth))


def hash_for(path: str, geometry: TrieGeometry = DEFAULT_GEOMETRY) -> Hash:
    return encode(normalize(path, geometry), geometry)


def format_path(path: Tuple[int, ...], strip: bool = True) -> str:
    """Representación canónica; `strip` elimina el relleno de ceros."""
    text = ''.join(DIGITS[digit] for digit in path)
    if strip:
        text = text.rstrip(DIGITS[0]) or DIGITS[0]
    return text
