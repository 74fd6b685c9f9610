#!/usr/bin/env python3
# Día 10: senderos que suben de 0 a 9 de uno en uno
import argparse
from functools import lru_cache
from typing import FrozenSet, List, Tuple
import numpy as np

from config_soluciones import agregar_argumentos_comunes, aplicar_defaults_desde_config, ruta_entrada
from laberinto import ErrorFormatoEntrada, Posicion, en_rango, leer_entrada, lineas_no_vacias

ALTURA_CIMA = 9


def cargar_alturas(texto: str) -> np.ndarray:
    lineas = lineas_no_vacias(texto)
    if not lineas:
        raise ErrorFormatoEntrada("La entrada está vacía.")
    if any(len(l) != len(lineas[0]) for l in lineas):
        raise ErrorFormatoEntrada("Filas de longitud distinta en el mapa de alturas.")
    if not all(l.isdigit() for l in lineas):
        raise ErrorFormatoEntrada("El mapa de alturas solo admite dígitos.")
    return np.array([[int(c) for c in l] for l in lineas], dtype=np.int8)


class MapaAlturas:
    """
    Como la altura crece exactamente 1 en cada paso, un sendero nunca repite celda:
    no hace falta llevar un conjunto de visitados por rama. El resultado de cada celda
    depende solo de la celda, así que se memoiza por posición.
    """

    def __init__(self, alturas: np.ndarray):
        self.alturas = alturas
        self.cimas_alcanzables = lru_cache(maxsize=None)(self._cimas_alcanzables)
        self.senderos = lru_cache(maxsize=None)(self._senderos)

    def inicios(self) -> List[Posicion]:
        filas, cols = np.nonzero(self.alturas == 0)
        return [(int(f), int(c)) for f, c in zip(filas, cols)]

    def _subidas(self, pos: Posicion) -> List[Posicion]:
        fila, col = pos
        siguiente = self.alturas[fila, col] + 1
        candidatas = [(fila - 1, col), (fila + 1, col), (fila, col - 1), (fila, col + 1)]
        return [c for c in candidatas if en_rango(self.alturas, *c) and self.alturas[c] == siguiente]

    def _cimas_alcanzables(self, pos: Posicion) -> FrozenSet[Posicion]:
        if self.alturas[pos] == ALTURA_CIMA:
            return frozenset([pos])
        cimas: FrozenSet[Posicion] = frozenset()
        for v in self._subidas(pos):
            cimas = cimas | self.cimas_alcanzables(v)
        return cimas

    def _senderos(self, pos: Posicion) -> int:
        if self.alturas[pos] == ALTURA_CIMA:
            return 1
        return sum(self.senderos(v) for v in self._subidas(pos))

    def puntaje(self, inicio: Posicion) -> int:
        return len(self.cimas_alcanzables(inicio))

    def calificacion(self, inicio: Posicion) -> int:
        return self.senderos(inicio)


def resolver(texto: str) -> Tuple[int, int]:
    mapa = MapaAlturas(cargar_alturas(texto))
    inicios = mapa.inicios()
    return sum(mapa.puntaje(i) for i in inicios), sum(mapa.calificacion(i) for i in inicios)


def main():
    parser = argparse.ArgumentParser()
    agregar_argumentos_comunes(parser)

    aplicar_defaults_desde_config(parser, "dia10")
    args = parser.parse_args()

    ruta = args.entrada or ruta_entrada(args.entradas, 10)
    parte1, parte2 = resolver(leer_entrada(ruta))

    print(f"[OK] Entrada: {ruta}")
    print(f"Parte 1: {parte1}")
    print(f"Parte 2: {parte2}")


if __name__ == "__main__":
    main()
