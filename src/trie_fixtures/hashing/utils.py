"""
src/trie_fixtures/hashing/utils.py
Utilidades de hashing de bajo nivel.

API pública para quien adapte su propio trie a los fixtures: el trie debe
ramificar sobre `raw_hash(clave)`, no sobre `hash(clave)`, para ver el hash
sintético completo de cada RawCollider (o de su envoltorio rastreado).
"""
from .invariants import MASK_64


def raw_hash(obj) -> int:
    """
    Hash sin la distorsión de CPython.
    hash(obj) reduce módulo (2**61 - 1) los valores grandes que devuelve
    __hash__; aquí llamamos a __hash__ directamente y proyectamos a 64 bits.
    """
    return type(obj).__hash__(obj) & MASK_64
