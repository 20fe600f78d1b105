"""
src/trie_fixtures/errors.py
Jerarquía de Errores de Fixtures.
Todo error detectable es un defecto de autoría del corpus: no hay recuperación.
"""


class FixtureError(Exception):
    """Raíz de todos los errores del paquete."""


class CorpusError(FixtureError, ValueError):
    """La definición textual de un fixture es inválida."""


class MalformedSpecError(CorpusError):
    """Sufijo '*N' ausente/no numérico, o carácter fuera del alfabeto radix."""


class PathTooLongError(CorpusError):
    """El path explícito alcanza o supera la profundidad máxima del trie."""


class DuplicatePathError(CorpusError):
    """Dos specs literales (sin '*') normalizan al mismo path."""


class OracleInvariantError(FixtureError, AssertionError):
    """
    Violación del invariante del comparador (paths no consumidos a la par).
    Inalcanzable si la normalización es correcta.
    """
