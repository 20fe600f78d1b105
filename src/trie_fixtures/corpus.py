"""
src/trie_fixtures/corpus.py
Corpus de Árboles de Ejemplo.

Cada entrada tiene un título y una lista de specs. Un spec es un path en el
árbol de prefijos: cada carácter identifica el bucket de un nodo, empezando
por la raíz (radix 32: dígitos 0-9 y después letras). Se mantienen los
dígitos en 0-F para poder probar también nodos de 16 ramas.

Las colisiones de hash se escriben `<path>*<count>`: el path (extendido con
ceros) se repite `count` veces.
"""
from types import MappingProxyType
from typing import NamedTuple, Tuple


class CorpusEntry(NamedTuple):
    title: str
    specs: Tuple[str, ...]


CORPUS: Tuple[CorpusEntry, ...] = (
    CorpusEntry("empty", ()),
    CorpusEntry("single-item", ("A",)),
    CorpusEntry("single-node", (
        "0", "1", "2", "3", "4",
        "A", "B", "C", "D",
    )),
    CorpusEntry("few-collisions", ("42*5",)),
    CorpusEntry("many-collisions", ("42*40",)),
    CorpusEntry("few-different-collisions", (
        "1*3",
        "21*3",
        "22*3",
        "3*3",
    )),
    CorpusEntry("everything-on-the-2nd-level", (
        "00", "01", "02", "03", "04",
        "10", "11", "12", "13", "14",
        "20", "21", "22", "23", "24",
        "30", "31", "32", "33", "34",
    )),
    CorpusEntry("two-levels-mixed", (
        "00", "01",
        "2",
        "30", "33",
        "4",
        "5",
        "60", "61", "66",
        "71", "75", "77",
        "8",
        "94", "98", "9A",
        "A3", "A4",
    )),
    CorpusEntry("vee", (
        "11110",
        "11115",
        "11119",
        "1111B",
        "66664",
        "66667",
    )),
    CorpusEntry("fork", (
        "31110",
        "31115",
        "31119",
        "3111B",
        "36664",
        "36667",
    )),
    CorpusEntry("chain-left", (
        "0",
        "10",
        "110",
        "1110",
        "11110",
        "11111",
    )),
    CorpusEntry("chain-right", (
        "1",
        "01",
        "001",
        "0001",
        "00001",
        "000001",
    )),
    # Expansión/contracción de nodos alrededor de un grupo de colisiones profundo
    CorpusEntry("expansion0", (
        "00000001*3",
        "00001",
    )),
    CorpusEntry("expansion1", (
        "00000001*3",
        "01",
        "00001",
    )),
    CorpusEntry("expansion2", (
        "11111111*3",
        "10",
        "11110",
    )),
    CorpusEntry("expansion3", (
        "01",
        "00001",
        "00000001*3",
    )),
    CorpusEntry("expansion4", (
        "10",
        "11110",
        "11111111*3",
    )),
    CorpusEntry("nested", (
        "50",
        "51",
        "520",
        "521",
        "5220",
        "5221",
        "52220",
        "52221",
        "522220",
        "522221",
        "5222220",
        "5222221",
        "52222220",
        "52222221",
        "522222220",
        "522222221",
        "5222222220",
        "5222222221",
        "5222222222",
        "5222222223",
        "522222223",
        "522222224",
        "52222223",
        "52222224",
        "5222223",
        "5222224",
        "522223",
        "522224",
        "52223",
        "52224",
        "5223",
        "5224",
        "53",
        "54",
    )),
    CorpusEntry("deep", (
        "0",
        # Hijos anidados en profundidad: sólo la hoja contiene ítems
        "1234560",
        "1234561",
        "1234562",
        "1234563",
        "22",
        "25",
    )),
)

# Vista de sólo lectura: título -> specs, en el orden del corpus
CORPUS_BY_TITLE = MappingProxyType({entry.title: entry.specs for entry in CORPUS})
