#!/usr/bin/env python3
# Día 18: bytes que caen sobre la memoria; ruta más corta de (0,0) a la esquina opuesta
import argparse
import re
from typing import Iterator, List, Optional, Tuple
import numpy as np

from busqueda_estados import INALCANZABLE, BusquedaEstados, ResultadoBusqueda
from config_soluciones import agregar_argumentos_comunes, aplicar_defaults_desde_config, ruta_entrada
from laberinto import LIBRE, MURO, ErrorFormatoEntrada, Posicion, dibujar, leer_entrada, vecinos4
from visualiza_ruta import graficar_celdas

PATRON_BYTE = re.compile(r"^(\d+),(\d+)$")


def cargar_bytes(texto: str) -> List[Posicion]:
    """
    Cada línea es "X,Y": X = distancia al borde izquierdo (columna),
    Y = distancia al borde superior (fila). Regresa posiciones (fila, col).
    """
    posiciones: List[Posicion] = []
    for numero, linea in enumerate(texto.strip().splitlines(), start=1):
        linea = linea.strip()
        if not linea:
            continue
        m = PATRON_BYTE.match(linea)
        if m is None:
            raise ErrorFormatoEntrada(f"Línea {numero} inválida: {linea!r}")
        x, y = int(m.group(1)), int(m.group(2))
        posiciones.append((y, x))
    return posiciones


def construir_grid(bytes_: List[Posicion], tamano: int, cantidad: int) -> np.ndarray:
    """Grid tamano x tamano con los primeros `cantidad` bytes corruptos (MURO)."""
    grid = np.full((tamano, tamano), LIBRE, dtype=np.int8)
    for fila, col in bytes_[:cantidad]:
        if not (0 <= fila < tamano and 0 <= col < tamano):
            raise ErrorFormatoEntrada(f"Byte fuera del espacio de memoria: {col},{fila}")
        grid[fila, col] = MURO
    return grid


def ruta_mas_corta(grid: np.ndarray) -> ResultadoBusqueda:
    alto, ancho = grid.shape
    salida = (alto - 1, ancho - 1)

    def vecinos(pos: Posicion) -> Iterator[Tuple[Posicion, int]]:
        for v in vecinos4(grid, pos):
            yield v, 1

    inicio = (0, 0)
    if grid[inicio] == MURO:
        return ResultadoBusqueda(INALCANZABLE)
    return BusquedaEstados(vecinos, lambda pos: pos == salida).costo_minimo(inicio, guardar_ruta=True)


def pasos_minimos(bytes_: List[Posicion], tamano: int, cantidad: int) -> Optional[int]:
    return ruta_mas_corta(construir_grid(bytes_, tamano, cantidad)).costo


def primer_byte_bloqueante(bytes_: List[Posicion], tamano: int, desde: int = 0) -> Optional[str]:
    """
    Coordenadas "X,Y" del primer byte que deja la salida inalcanzable,
    o None si la salida nunca queda bloqueada. Búsqueda binaria sobre la cantidad de bytes.
    """
    if pasos_minimos(bytes_, tamano, len(bytes_)) is not None:
        return None

    # invariante: con `bajo` bytes hay ruta, con `alto` no
    bajo = desde if pasos_minimos(bytes_, tamano, desde) is not None else 0
    alto = len(bytes_)
    while alto - bajo > 1:
        medio = (bajo + alto) // 2
        if pasos_minimos(bytes_, tamano, medio) is None:
            alto = medio
        else:
            bajo = medio

    fila, col = bytes_[alto - 1]
    return f"{col},{fila}"


def dibujar_memoria(grid: np.ndarray, ruta: Optional[List[Posicion]] = None) -> str:
    return dibujar(grid, ruta or ())


def resolver(texto: str, tamano: int = 71, bytes_caidos: int = 1024) -> Tuple[Optional[int], Optional[str]]:
    bytes_ = cargar_bytes(texto)
    return pasos_minimos(bytes_, tamano, bytes_caidos), primer_byte_bloqueante(bytes_, tamano, bytes_caidos)


def main():
    parser = argparse.ArgumentParser()
    agregar_argumentos_comunes(parser)

    parser.add_argument("--tamano", type=int, default=None, help="Lado del espacio de memoria (71 real, 7 ejemplo)")
    parser.add_argument("--bytes_caidos", type=int, default=None, help="Bytes que caen antes de la parte 1")
    parser.add_argument("--salida_png", type=str, default=None, help="(Opcional) PNG con la ruta de la parte 1")

    aplicar_defaults_desde_config(parser, "dia18")
    args = parser.parse_args()

    ruta = args.entrada or ruta_entrada(args.entradas, 18)
    bytes_ = cargar_bytes(leer_entrada(ruta))
    print(f"[OK] Entrada: {ruta} ({len(bytes_)} bytes)")

    grid = construir_grid(bytes_, args.tamano, args.bytes_caidos)
    resultado = ruta_mas_corta(grid)
    print(f"Parte 1: {resultado.costo if resultado.encontrado else 'sin ruta'}")

    bloqueante = primer_byte_bloqueante(bytes_, args.tamano, args.bytes_caidos)
    print(f"Parte 2: {bloqueante if bloqueante is not None else 'la salida nunca se bloquea'}")

    if args.salida_png and resultado.encontrado:
        graficar_celdas(grid, resultado.ruta, args.salida_png, titulo="Día 18: ruta más corta")


if __name__ == "__main__":
    main()
