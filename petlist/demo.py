"""A walkthrough of the linked list operations on a small set of pets."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from petlist.linkedlist import LinkedList, SortOrder
from petlist.pets import Pet, compare_by_age, format_pets, is_female


def run_demo(out: TextIO) -> None:
    """Write the walkthrough to ``out``."""
    marquitos = Pet(1264, "Marquitos", "m", 2)
    pets = LinkedList(
        [
            marquitos,
            Pet(1123, "Lucrecia", "h", 1),
            Pet(1866, "Anastacia", "h", 5),
            Pet(1312, "Cinthia", "h", 10),
            Pet(1942, "Milo", "m", 6),
            Pet(1614, "Sebastian", "m", 1),
        ]
    )

    def show(items: LinkedList) -> None:
        out.write(format_pets(items))

    out.write("---- Uso de len ----\n")
    out.write("Me devuelve el tamanio de la lista\n")
    out.write(f"Tengo {len(pets)} perros\n")
    out.write("\n")

    out.write("---- Uso de get ----\n")
    out.write("Dentro de la funcion mostrar uso get para tomar cada elemento\n")
    show(pets)
    out.write("\n")

    females = pets.filter(is_female)
    out.write("---- Uso de filter ----\n")
    out.write(
        "Uso la funcion filter para devolver una lista de los elementos que "
        "cumplan una condicion, en este caso, hembras\n"
    )
    show(females)
    out.write("\n")

    del pets[1]
    out.write("---- Uso de remove ----\n")
    out.write("Saco el elemento del indice 1 de la lista\n")
    show(pets)
    out.write("\n")

    position = pets.index(marquitos)
    out.write("---- Uso de index ----\n")
    out.write("Determina el indice donde esta ubicado un elemento en la lista\n")
    out.write(f"El indice donde esta marquitos es {position} \n ")
    contained = int(marquitos in pets)
    out.write("\n")

    out.write("---- Uso de contains ----\n")
    out.write("Determino si la lista contiene un elemento\n")
    out.write(
        "La lista contiene a marquitos, entonces el valor q devuelve contains "
        f"es {contained} \n "
    )
    out.write("\n")

    empty = int(pets.is_empty())
    out.write("---- Uso de is_empty ----\n")
    out.write("Deterimno si la lista esta vacia, o no lo esta\n")
    out.write(f"El valor de isEmpty es {empty} porque la lista no esta vacia\n ")
    out.write("\n")

    sub = pets.sublist(1, 3)
    out.write("---- Uso de sublist ----\n")
    out.write("Creo una sublista con solo los elementos entre los indices 1 y 3\n")
    show(sub)
    out.write("\n")

    out.write("---- Uso de contains_all ----\n")
    contains_all = int(pets.contains_all(sub))
    out.write("Determino si una lista esta incluida en otra\n")
    out.write(
        f"El valor de containsAll es {contains_all} porque la sublista esta "
        "incluida en la lista\n "
    )
    out.write("\n")

    copy = pets.clone()
    out.write("---- Uso de clone ----\n")
    out.write("Creo una lista clon de otra\n")
    show(copy)
    out.write("\n")

    pets.sort(compare_by_age, SortOrder.ASCENDING)
    out.write("---- Uso de sort ----\n")
    out.write("Ordeno la lista, en este caso por la edad y en forma descendente\n")
    show(pets)
    claudio = Pet(1327, "claudio", "m", 8)
    pets.insert(4, claudio)
    out.write("\n")

    out.write("---- Uso de insert ----\n")
    out.write("Agrego un elemento en la lista, en el indice 4\n")
    show(pets)
    pets.pop(4)
    out.write("\n")

    out.write("---- Uso de pop ----\n")
    out.write("Saco un elemento de la lista, del indice 4\n")
    show(pets)
    out.write("\n\n")

    pets[0] = claudio
    out.write("---- Uso de set ----\n")
    out.write("Reemplazo el elemento que estaba en el indice 0 por el nuevo elemento\n")
    show(pets)
    pets.clear()
    empty = int(pets.is_empty())
    out.write("---- Uso de clear ----\n")
    out.write(f"El valor de isEmpty es {empty} porque la lista ahora esta vacia\n ")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the walkthrough on standard output."""
    parser = argparse.ArgumentParser(
        prog="petlist", description="Walk through the linked list operations."
    )
    parser.parse_args(argv)
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())