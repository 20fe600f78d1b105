"""
src/trie_fixtures/hashing/invariants.py
Geometría del Trie bajo prueba.
Define el layout de bits del hash sintético: un campo por nivel, MSB primero.
"""

# =============================================================================
# LAYOUT POR DEFECTO (64 bits / 5 bits por nivel)
# =============================================================================
# Estructura del Hash (nivel 0 = raíz):
# [ L0 (5b) | L1 (5b) | ... | L11 (5b) | L12 (4b) ]
#  bit 63                                   bit 0

HASH_BITS  = 64
SHIFT_STEP = 5
MASK       = 0b11111
MASK_64    = 0xFFFFFFFFFFFFFFFF

# Alfabeto radix 32: dígitos y después letras (A=10 ... V=31)
DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
MAX_BITS_PER_LEVEL = 5


class TrieGeometry:
    """
    Constantes de configuración que provee la librería del trie.
    Inmutable. El último nivel puede ser más estrecho que los demás.
    """
    __slots__ = ('hash_bits', 'bits_per_level', 'max_depth')

    def __init__(self, hash_bits: int = HASH_BITS, bits_per_level: int = SHIFT_STEP):
        if hash_bits <= 0:
            raise ValueError(f"hash_bits debe ser positivo, recibido {hash_bits}")
        if not 1 <= bits_per_level <= MAX_BITS_PER_LEVEL:
            raise ValueError(
                f"bits_per_level debe estar en [1, {MAX_BITS_PER_LEVEL}], recibido {bits_per_level}")
        object.__setattr__(self, 'hash_bits', hash_bits)
        object.__setattr__(self, 'bits_per_level', bits_per_level)
        # ceil(hash_bits / bits_per_level)
        object.__setattr__(self, 'max_depth', -(-hash_bits // bits_per_level))

    def __setattr__(self, name, value):
        raise AttributeError("TrieGeometry es inmutable")

    @property
    def radix(self) -> int:
        return 1 << self.bits_per_level

    @property
    def hash_mask(self) -> int:
        return (1 << self.hash_bits) - 1

    def level_bits(self, level: int) -> int:
        """Anchura del campo del nivel (el último puede quedar truncado)."""
        if not 0 <= level < self.max_depth:
            raise IndexError(f"Nivel {level} fuera de [0, {self.max_depth})")
        return min(self.bits_per_level, self.hash_bits - self.bits_per_level * level)

    def shift(self, level: int) -> int:
        """Desplazamiento del campo del nivel, contando desde el bit 0."""
        return self.hash_bits - self.bits_per_level * level - self.level_bits(level)

    def bucket(self, hash_value: int, level: int) -> int:
        return (hash_value >> self.shift(level)) & ((1 << self.level_bits(level)) - 1)

    def __eq__(self, other):
        if isinstance(other, TrieGeometry):
            return (self.hash_bits, self.bits_per_level) == (other.hash_bits, other.bits_per_level)
        return NotImplemented

    def __hash__(self):
        return hash((self.hash_bits, self.bits_per_level))

    def __repr__(self):
        return (f"TrieGeometry(hash_bits={self.hash_bits}, "
                f"bits_per_level={self.bits_per_level}, max_depth={self.max_depth})")


DEFAULT_GEOMETRY = TrieGeometry()
MAX_DEPTH = DEFAULT_GEOMETRY.max_depth
