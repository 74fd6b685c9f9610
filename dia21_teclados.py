#!/usr/bin/env python3
# Día 21: cadena de robots que teclean en teclados direccionales hasta el teclado numérico
import argparse
from typing import Dict, Iterator, List, Optional, Tuple

from busqueda_estados import BusquedaEstados
from config_soluciones import agregar_argumentos_comunes, aplicar_defaults_desde_config, ruta_entrada
from laberinto import ErrorFormatoEntrada, Posicion, leer_entrada

TECLADO_NUMERICO = ["789", "456", "123", " 0A"]
TECLADO_DIRECCIONAL = [" ^A", "<v>"]

PULSAR = "A"
BOTONES = "^>v<A"
MOVIMIENTOS = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}

# Marca del estado final: el botón destino ya fue pulsado
PULSADO = "*"

CostosPulsacion = Dict[Tuple[str, str], int]
Estado = Tuple[Posicion, str]  # (posición del brazo, último botón pulsado en el teclado de control)


class Teclado:
    """Teclado como mapa tecla -> posición; el hueco (' ') nunca se pisa."""

    def __init__(self, filas: List[str]):
        self.posiciones: Dict[str, Posicion] = {}
        for fila, linea in enumerate(filas):
            for col, tecla in enumerate(linea):
                if tecla != " ":
                    self.posiciones[tecla] = (fila, col)
        self.celdas = set(self.posiciones.values())

    def posicion(self, tecla: str) -> Posicion:
        if tecla not in self.posiciones:
            raise ErrorFormatoEntrada(f"Tecla inexistente: {tecla!r}")
        return self.posiciones[tecla]

    def costo_tecla(self, costos: CostosPulsacion, desde: str, hasta: str) -> int:
        """
        Costo mínimo (en pulsaciones humanas) de mover el brazo de `desde` a `hasta` y pulsar,
        dado el costo `costos[(anterior, siguiente)]` de pulsar `siguiente` en el teclado de
        control cuando el último botón pulsado allí fue `anterior`.
        """
        destino = self.posicion(hasta)

        def vecinos(estado: Estado) -> Iterator[Tuple[Estado, int]]:
            pos, ultimo = estado
            if ultimo == PULSADO:
                return
            fila, col = pos
            for boton, (dfila, dcol) in MOVIMIENTOS.items():
                siguiente = (fila + dfila, col + dcol)
                if siguiente in self.celdas:
                    yield (siguiente, boton), costos[(ultimo, boton)]
            if pos == destino:
                yield (pos, PULSADO), costos[(ultimo, PULSAR)]

        busqueda = BusquedaEstados(vecinos, lambda estado: estado[1] == PULSADO)
        resultado = busqueda.costo_minimo((self.posicion(desde), PULSAR))
        # solo ocurre con distribuciones cuyas teclas no están todas conectadas
        if not resultado.encontrado:
            raise RuntimeError(f"No hay ruta entre {desde!r} y {hasta!r}")
        return resultado.costo


NUMERICO = Teclado(TECLADO_NUMERICO)
DIRECCIONAL = Teclado(TECLADO_DIRECCIONAL)


def costos_por_nivel(robots: int) -> CostosPulsacion:
    """
    Nivel 0: el humano pulsa directamente, todo cuesta 1.
    Nivel n: costos del robot n sobre un teclado direccional controlado por el nivel n-1.
    """
    costos = {(a, b): 1 for a in BOTONES for b in BOTONES}
    for _ in range(robots):
        costos = {(a, b): DIRECCIONAL.costo_tecla(costos, a, b) for a in BOTONES for b in BOTONES}
    return costos


def longitud_secuencia(codigo: str, robots: int, costos: Optional[CostosPulsacion] = None) -> int:
    """Pulsaciones humanas para que el robot del teclado numérico teclee `codigo`."""
    if costos is None:
        costos = costos_por_nivel(robots)
    teclas = PULSAR + codigo
    return sum(NUMERICO.costo_tecla(costos, a, b) for a, b in zip(teclas, teclas[1:]))


def complejidad(codigo: str, robots: int, costos: Optional[CostosPulsacion] = None) -> int:
    if not codigo.endswith(PULSAR) or not codigo[:-1].isdigit():
        raise ErrorFormatoEntrada(f"Código inválido: {codigo!r}")
    return longitud_secuencia(codigo, robots, costos) * int(codigo[:-1])


def cargar_codigos(texto: str) -> List[str]:
    return [linea.strip() for linea in texto.strip().splitlines() if linea.strip()]


def suma_complejidades(codigos: List[str], robots: int) -> int:
    costos = costos_por_nivel(robots)
    return sum(complejidad(c, robots, costos) for c in codigos)


def resolver(texto: str, robots_parte1: int = 2, robots_parte2: int = 25) -> Tuple[int, int]:
    codigos = cargar_codigos(texto)
    return suma_complejidades(codigos, robots_parte1), suma_complejidades(codigos, robots_parte2)


def main():
    parser = argparse.ArgumentParser()
    agregar_argumentos_comunes(parser)

    parser.add_argument("--robots_parte1", type=int, default=None)
    parser.add_argument("--robots_parte2", type=int, default=None)

    aplicar_defaults_desde_config(parser, "dia21")
    args = parser.parse_args()

    ruta = args.entrada or ruta_entrada(args.entradas, 21)
    codigos = cargar_codigos(leer_entrada(ruta))
    print(f"[OK] Entrada: {ruta} ({len(codigos)} códigos)")

    print(f"Parte 1: {suma_complejidades(codigos, args.robots_parte1)}")
    print(f"Parte 2: {suma_complejidades(codigos, args.robots_parte2)}")


if __name__ == "__main__":
    main()
