#!/usr/bin/env python3
# Día 20: carrera en la pista; atajos que atraviesan muros durante unos picosegundos
import argparse
from typing import Dict, Iterator, Tuple
import numpy as np

from busqueda_estados import BusquedaEstados
from config_soluciones import agregar_argumentos_comunes, aplicar_defaults_desde_config, ruta_entrada
from laberinto import Laberinto, Posicion, cargar_laberinto, leer_entrada, vecinos4

# Distancia de celdas no alcanzables (muros); sumar dos no desborda int64
SIN_DISTANCIA = np.iinfo(np.int64).max // 4


def mapa_distancias(lab: Laberinto, origen: Posicion) -> np.ndarray:
    """Matriz con la distancia (en picosegundos) desde `origen` a cada celda de la pista."""

    def vecinos(pos: Posicion) -> Iterator[Tuple[Posicion, int]]:
        for v in vecinos4(lab.grid, pos):
            yield v, 1

    costos: Dict[Posicion, int] = BusquedaEstados(vecinos).explorar(origen)

    distancias = np.full(lab.grid.shape, SIN_DISTANCIA, dtype=np.int64)
    for (fila, col), d in costos.items():
        distancias[fila, col] = d
    return distancias


def _desplazamientos(max_trampa: int) -> Iterator[Tuple[int, int, int]]:
    for dfila in range(-max_trampa, max_trampa + 1):
        resto = max_trampa - abs(dfila)
        for dcol in range(-resto, resto + 1):
            d = abs(dfila) + abs(dcol)
            # un paso de longitud 1 es un movimiento normal, no un atajo
            if d >= 2:
                yield dfila, dcol, d


def _recorte(n: int, delta: int) -> Tuple[slice, slice]:
    # (origen, destino) a lo largo de un eje para un desplazamiento `delta`
    fin_origen = max(0, n - max(0, delta))
    fin_destino = max(0, n - max(0, -delta))
    return slice(max(0, -delta), fin_origen), slice(max(0, delta), fin_destino)


def contar_atajos(lab: Laberinto, max_trampa: int, umbral: int) -> int:
    """
    Cantidad de atajos (celda de pista p -> celda de pista q, a distancia Manhattan d <= max_trampa)
    que ahorran al menos `umbral` picosegundos respecto de la ruta sin trampas.
    """
    desde_inicio = mapa_distancias(lab, lab.inicio)
    hasta_meta = mapa_distancias(lab, lab.meta)

    base = int(desde_inicio[lab.meta])
    if base >= SIN_DISTANCIA:
        return 0

    alto, ancho = lab.grid.shape
    total = 0
    for dfila, dcol, d in _desplazamientos(max_trampa):
        filas_p, filas_q = _recorte(alto, dfila)
        cols_p, cols_q = _recorte(ancho, dcol)
        p = desde_inicio[filas_p, cols_p]
        q = hasta_meta[filas_q, cols_q]

        validos = (p < SIN_DISTANCIA) & (q < SIN_DISTANCIA)
        ahorro = base - (p + d + q)
        total += int(np.count_nonzero(validos & (ahorro >= umbral)))
    return total


def resolver(texto: str, umbral: int = 100, trampa_corta: int = 2, trampa_larga: int = 20) -> Tuple[int, int]:
    lab = cargar_laberinto(texto)
    return contar_atajos(lab, trampa_corta, umbral), contar_atajos(lab, trampa_larga, umbral)


def main():
    parser = argparse.ArgumentParser()
    agregar_argumentos_comunes(parser)

    parser.add_argument("--umbral", type=int, default=None, help="Ahorro mínimo (picosegundos)")
    parser.add_argument("--trampa_corta", type=int, default=None)
    parser.add_argument("--trampa_larga", type=int, default=None)

    aplicar_defaults_desde_config(parser, "dia20")
    args = parser.parse_args()

    ruta = args.entrada or ruta_entrada(args.entradas, 20)
    lab = cargar_laberinto(leer_entrada(ruta))
    print(f"[OK] Entrada: {ruta}")

    print(f"Parte 1: {contar_atajos(lab, args.trampa_corta, args.umbral)}")
    print(f"Parte 2: {contar_atajos(lab, args.trampa_larga, args.umbral)}")


if __name__ == "__main__":
    main()
