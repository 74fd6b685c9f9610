#!/usr/bin/env python3
# Día 16: laberinto del reno (avanzar cuesta 1, girar 90° cuesta 1000)
import argparse
from enum import Enum
from typing import Iterator, Optional, Set, Tuple

from busqueda_estados import ENCONTRADO, PRESUPUESTO_AGOTADO, BusquedaEstados, ResultadoBusqueda
from config_soluciones import agregar_argumentos_comunes, aplicar_defaults_desde_config, ruta_entrada
from laberinto import Laberinto, Posicion, cargar_laberinto, leer_entrada, transitable
from visualiza_ruta import graficar_celdas

COSTO_AVANCE = 1
COSTO_GIRO = 1000


class Rumbo(Enum):
    NORTE = (-1, 0)
    ESTE = (0, 1)
    SUR = (1, 0)
    OESTE = (0, -1)

    def horario(self) -> "Rumbo":
        orden = list(Rumbo)
        return orden[(orden.index(self) + 1) % 4]

    def antihorario(self) -> "Rumbo":
        orden = list(Rumbo)
        return orden[(orden.index(self) - 1) % 4]


Estado = Tuple[Posicion, Rumbo]


def busqueda_reno(
    lab: Laberinto,
    costo_avance: int = COSTO_AVANCE,
    costo_giro: int = COSTO_GIRO,
) -> BusquedaEstados:
    """Motor de búsqueda sobre estados (posición, rumbo) del laberinto."""

    def vecinos(estado: Estado) -> Iterator[Tuple[Estado, int]]:
        (fila, col), rumbo = estado
        dfila, dcol = rumbo.value
        adelante = (fila + dfila, col + dcol)
        if transitable(lab.grid, *adelante):
            yield (adelante, rumbo), costo_avance
        yield ((fila, col), rumbo.horario()), costo_giro
        yield ((fila, col), rumbo.antihorario()), costo_giro

    def es_meta(estado: Estado) -> bool:
        return estado[0] == lab.meta

    return BusquedaEstados(vecinos, es_meta)


def estado_inicial(lab: Laberinto) -> Estado:
    # El reno empieza mirando al este
    return (lab.inicio, Rumbo.ESTE)


def mejor_ruta(lab: Laberinto, max_expansiones: Optional[int] = None, **costos) -> ResultadoBusqueda:
    return busqueda_reno(lab, **costos).costo_minimo(
        estado_inicial(lab), guardar_ruta=True, max_expansiones=max_expansiones
    )


def costo_minimo(lab: Laberinto, max_expansiones: Optional[int] = None, **costos) -> Optional[int]:
    """Puntaje mínimo de inicio a fin, o None si el fin no es alcanzable."""
    resultado = busqueda_reno(lab, **costos).costo_minimo(
        estado_inicial(lab), max_expansiones=max_expansiones
    )
    return resultado.costo


def casillas_optimas(lab: Laberinto, max_expansiones: Optional[int] = None, **costos) -> Set[Posicion]:
    """Casillas que pertenecen a alguna ruta de puntaje mínimo (vacío si no hay ruta)."""
    resultado = busqueda_reno(lab, **costos).rutas_optimas(
        estado_inicial(lab), max_expansiones=max_expansiones
    )
    return {pos for pos, _ in resultado.estados}


def describir(estatus: str, valor) -> str:
    if estatus == ENCONTRADO:
        return str(valor)
    if estatus == PRESUPUESTO_AGOTADO:
        return "presupuesto agotado"
    return "sin ruta"


def resolver(texto: str, **costos) -> Tuple[Optional[int], int]:
    lab = cargar_laberinto(texto)
    return costo_minimo(lab, **costos), len(casillas_optimas(lab, **costos))


def main():
    parser = argparse.ArgumentParser()
    agregar_argumentos_comunes(parser)

    parser.add_argument("--costo_avance", type=int, default=None)
    parser.add_argument("--costo_giro", type=int, default=None)
    parser.add_argument("--max_expansiones", type=int, default=None)
    parser.add_argument("--salida_png", type=str, default=None, help="(Opcional) PNG con las casillas óptimas")

    aplicar_defaults_desde_config(parser, "dia16")
    args = parser.parse_args()

    ruta = args.entrada or ruta_entrada(args.entradas, 16)
    lab = cargar_laberinto(leer_entrada(ruta))
    costos = {"costo_avance": args.costo_avance, "costo_giro": args.costo_giro}

    print(f"[OK] Entrada: {ruta}")

    busqueda = busqueda_reno(lab, **costos)

    unica = busqueda.costo_minimo(estado_inicial(lab), max_expansiones=args.max_expansiones)
    print(f"Parte 1: {describir(unica.estatus, unica.costo)}")

    todas = busqueda.rutas_optimas(estado_inicial(lab), max_expansiones=args.max_expansiones)
    casillas = {pos for pos, _ in todas.estados}
    print(f"Parte 2: {describir(todas.estatus, len(casillas))}")

    if args.salida_png:
        graficar_celdas(lab.grid, casillas, args.salida_png, titulo="Día 16: casillas en rutas óptimas")


if __name__ == "__main__":
    main()
