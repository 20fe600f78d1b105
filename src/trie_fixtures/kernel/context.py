"""
src/trie_fixtures/kernel/context.py
Pila de etiquetas para el reporte de tests.
Cada fixture se ejecuta dentro de un ámbito etiquetado ("fixture: vee").
"""
from contextlib import contextmanager
from typing import Iterator, List, Tuple

NOTE_PREFIX = "[contexto]"


class ReportingContext:
    __slots__ = ('_stack',)

    def __init__(self):
        self._stack: List[Tuple[int, str]] = []

    def push(self, label: str) -> Tuple[int, str]:
        token = (len(self._stack), label)
        self._stack.append(token)
        return token

    def pop(self, token: Tuple[int, str]) -> None:
        if not self._stack or self._stack[-1] != token:
            raise RuntimeError(f"Pop fuera de orden: {token!r} no es la cima de {self._stack!r}")
        self._stack.pop()

    @property
    def labels(self) -> Tuple[str, ...]:
        return tuple(label for _, label in self._stack)

    @property
    def trail(self) -> str:
        return " > ".join(self.labels)

    @contextmanager
    def scope(self, label: str) -> Iterator[str]:
        """
        Empuja `label` mientras dura el bloque. Si el bloque lanza, la
        excepción lleva una nota con el rastro completo de etiquetas
        (sólo la del ámbito más interno).
        """
        token = self.push(label)
        try:
            yield self.trail
        except BaseException as exc:
            notes = getattr(exc, '__notes__', ())
            if not any(note.startswith(NOTE_PREFIX) for note in notes):
                exc.add_note(f"{NOTE_PREFIX} {self.trail}")
            raise
        finally:
            self.pop(token)


_current = ReportingContext()


def current_context() -> ReportingContext:
    return _current
