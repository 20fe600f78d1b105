"""
src/trie_fixtures/kernel/collider.py
Ítem de prueba con hash controlado manualmente.
"""
from ..hashing.paths import Hash


class RawCollider:
    """
    Par (identidad, hash). El hash de Python es exactamente el hash sintético;
    la identidad es sólo carga útil, lo que permite colisiones genuinas.
    """
    __slots__ = ('identity', 'hash')

    def __init__(self, identity: int, hash: Hash):
        self.identity = identity
        self.hash = hash

    def __eq__(self, other):
        if isinstance(other, RawCollider):
            return self.identity == other.identity and self.hash == other.hash
        return NotImplemented

    def __hash__(self):
        return self.hash.value

    def __repr__(self):
        return f"RawCollider({self.identity}, {self.hash})"
