"""
src/trie_fixtures/ds/realize.py
Materialización de un Fixture en una colección persistente externa.

La colección (set o mapa) y el rastreador de instancias los aporta el test:
aquí sólo se inyectan los ítems en orden de inserción y se devuelve la
referencia en el orden de iteración esperado, para comparar.
"""
from typing import Any, Callable, Iterable, List, Optional, Protocol, Tuple, TypeVar

from ..kernel.collider import RawCollider
from ..kernel.fixture import Fixture

C = TypeVar('C')

VALUE_OFFSET = 1000


class InstanceTracker(Protocol):
    """Envoltorio opaco de identidad/tiempo de vida (p. ej. un LifetimeTracker)."""

    def instance(self, payload: Any) -> Any: ...


def _identity(item: RawCollider) -> Any:
    return item


def _default_value(item: RawCollider) -> int:
    return item.identity + VALUE_OFFSET


def persistent_set(fixture: Fixture,
                   tracker: InstanceTracker,
                   factory: Callable[[Iterable[Any]], C],
                   transform: Optional[Callable[[RawCollider], Any]] = None) -> Tuple[C, List[Any]]:
    """
    Devuelve (colección, referencia). `factory` recibe los elementos
    rastreados en orden de inserción.
    """
    transform = transform or _identity
    reference = [tracker.instance(transform(item)) for item in fixture.items_in_iteration_order]
    inserted = [tracker.instance(transform(item)) for item in fixture.items_in_insertion_order]
    return factory(inserted), reference


def persistent_dictionary(fixture: Fixture,
                          tracker: InstanceTracker,
                          factory: Callable[[Iterable[Tuple[Any, Any]]], C],
                          key_transform: Optional[Callable[[RawCollider], Any]] = None,
                          value_transform: Optional[Callable[[RawCollider], Any]] = None
                          ) -> Tuple[C, List[Tuple[Any, Any]]]:
    """
    Igual que `persistent_set` pero con pares (clave, valor).
    Por defecto la clave es el propio ítem y el valor `identity + 1000`.
    """
    key_transform = key_transform or _identity
    value_transform = value_transform or _default_value

    def track(item: RawCollider) -> Tuple[Any, Any]:
        return (tracker.instance(key_transform(item)),
                tracker.instance(value_transform(item)))

    reference = [track(item) for item in fixture.items_in_iteration_order]
    inserted = [track(item) for item in fixture.items_in_insertion_order]
    return factory(inserted), reference
