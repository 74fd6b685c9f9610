#!/usr/bin/env python3
from pathlib import Path
from typing import Iterable, Optional, Tuple
import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from laberinto import FIN, INICIO, LIBRE, MURO

Posicion = Tuple[int, int]


def asegurar_dir_de_salida(ruta: Optional[str]) -> None:
    """Crea el directorio padre de `ruta` si hace falta. Ignora None y rutas sin carpeta."""
    if not ruta:
        return
    padre = Path(ruta).parent
    if str(padre) not in (".", ""):
        padre.mkdir(parents=True, exist_ok=True)


def imagen_grid(grid: np.ndarray, celdas: Iterable[Posicion] = ()) -> np.ndarray:
    """
    Escala de grises + resaltado:
      LIBRE       -> blanco
      INICIO/FIN  -> gris claro
      MURO        -> negro
      celdas      -> 0.5 (se pinta encima)
    """
    img = np.zeros_like(grid, dtype=float)
    img[grid == LIBRE] = 1.0
    img[(grid == INICIO) | (grid == FIN)] = 0.8
    img[grid == MURO] = 0.0

    for fila, col in celdas:
        img[fila, col] = 0.5
    return img


def graficar_celdas(
    grid: np.ndarray,
    celdas: Iterable[Posicion],
    salida_png: str,
    titulo: str = "Ruta",
) -> None:
    """Escribe un PNG con el grid y las celdas resaltadas (ruta o casillas óptimas)."""
    asegurar_dir_de_salida(salida_png)
    img = imagen_grid(grid, celdas)

    plt.figure(figsize=(8, 8))
    plt.title(titulo)
    plt.imshow(img, origin="upper", interpolation="nearest", cmap="gray", vmin=0.0, vmax=1.0)
    plt.xlabel("col")
    plt.ylabel("fila")
    plt.tight_layout()
    plt.savefig(salida_png, dpi=100)
    plt.close()

    print(f"[OK] Imagen escrita: {salida_png}")
