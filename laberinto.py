#!/usr/bin/env python3
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple
import numpy as np

LIBRE = 0
MURO = 1
INICIO = 2
FIN = 3
# INICIO y FIN son transitables

Posicion = Tuple[int, int]  # (fila, col)

SIMBOLOS = {".": LIBRE, "#": MURO, "S": INICIO, "E": FIN}


class ErrorFormatoEntrada(ValueError):
    """Entrada de texto mal formada (se reporta una sola vez, al cargar)."""


@dataclass
class Laberinto:
    grid: np.ndarray   # [fila, col]
    inicio: Posicion
    meta: Posicion

    @property
    def forma(self) -> Tuple[int, int]:
        return self.grid.shape


def leer_entrada(ruta: str) -> str:
    with Path(ruta).open("r", encoding="utf-8") as f:
        return f.read().rstrip("\n")


def lineas_no_vacias(texto: str) -> List[str]:
    return [linea.strip() for linea in texto.strip().splitlines() if linea.strip()]


def cargar_grid(texto: str, simbolos: dict) -> np.ndarray:
    """
    Convierte texto rectangular en una matriz int8 usando la tabla `simbolos`.
    Falla con ErrorFormatoEntrada ante caracteres desconocidos o filas disparejas.
    """
    lineas = lineas_no_vacias(texto)
    if not lineas:
        raise ErrorFormatoEntrada("La entrada está vacía.")

    ancho = len(lineas[0])
    grid = np.zeros((len(lineas), ancho), dtype=np.int8)
    for fila, linea in enumerate(lineas):
        if len(linea) != ancho:
            raise ErrorFormatoEntrada(
                f"Fila {fila} con longitud {len(linea)}; se esperaba {ancho}."
            )
        for col, c in enumerate(linea):
            if c not in simbolos:
                raise ErrorFormatoEntrada(f"Carácter inválido {c!r} en ({fila}, {col}).")
            grid[fila, col] = simbolos[c]
    return grid


def _unica_celda(grid: np.ndarray, valor: int, nombre: str) -> Posicion:
    celdas = celdas_con_valor(grid, valor)
    if len(celdas) != 1:
        raise ErrorFormatoEntrada(f"Se esperaba exactamente una celda {nombre}; hay {len(celdas)}.")
    return celdas[0]


def cargar_laberinto(texto: str) -> Laberinto:
    """
    Carga un laberinto con '#' (muro), '.' (libre), 'S' (inicio) y 'E' (fin).

    Regresa:
      - Laberinto con el grid y las posiciones de inicio y meta.
    """
    grid = cargar_grid(texto, SIMBOLOS)
    inicio = _unica_celda(grid, INICIO, "'S'")
    meta = _unica_celda(grid, FIN, "'E'")
    return Laberinto(grid=grid, inicio=inicio, meta=meta)


def celdas_con_valor(grid: np.ndarray, valor: int) -> List[Posicion]:
    filas, cols = np.nonzero(grid == valor)
    return [(int(f), int(c)) for f, c in zip(filas, cols)]


def en_rango(grid: np.ndarray, fila: int, col: int) -> bool:
    alto, ancho = grid.shape
    return 0 <= fila < alto and 0 <= col < ancho


def transitable(grid: np.ndarray, fila: int, col: int) -> bool:
    return en_rango(grid, fila, col) and grid[fila, col] != MURO


def vecinos4(grid: np.ndarray, pos: Posicion) -> List[Posicion]:
    """Celdas transitables arriba/abajo/izquierda/derecha."""
    fila, col = pos
    candidatas = [(fila - 1, col), (fila + 1, col), (fila, col - 1), (fila, col + 1)]
    return [c for c in candidatas if transitable(grid, *c)]


def dibujar(grid: np.ndarray, celdas: Iterable[Posicion] = (), marca: str = "O") -> str:
    """Representación de texto: '#' muro, '.' libre, `marca` en las celdas indicadas."""
    marcadas = set(celdas)
    alto, ancho = grid.shape
    lineas = []
    for fila in range(alto):
        linea = []
        for col in range(ancho):
            if (fila, col) in marcadas:
                linea.append(marca)
            elif grid[fila, col] == MURO:
                linea.append("#")
            else:
                linea.append(".")
        lineas.append("".join(linea))
    return "\n".join(lineas) + "\n"
