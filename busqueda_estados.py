#!/usr/bin/env python3
import heapq
from dataclasses import dataclass, field
from itertools import count
from typing import Callable, Dict, Generic, Hashable, Iterable, List, Optional, Set, Tuple, TypeVar

# Tipo genérico del estado: posición + estado auxiliar (rumbo, presupuesto, ...)
S = TypeVar("S", bound=Hashable)

ENCONTRADO = "encontrado"
INALCANZABLE = "inalcanzable"
PRESUPUESTO_AGOTADO = "presupuesto_agotado"

FuncionVecinos = Callable[[S], Iterable[Tuple[S, int]]]


@dataclass
class ResultadoBusqueda(Generic[S]):
    estatus: str                      # "encontrado" | "inalcanzable" | "presupuesto_agotado"
    costo: Optional[int] = None
    meta: Optional[S] = None
    ruta: Optional[List[S]] = None
    expansiones: int = 0

    @property
    def encontrado(self) -> bool:
        return self.estatus == ENCONTRADO


@dataclass
class ResultadoRutasOptimas(Generic[S]):
    estatus: str
    costo: Optional[int] = None
    metas: List[S] = field(default_factory=list)
    estados: Set[S] = field(default_factory=set)  # estados en alguna ruta óptima
    expansiones: int = 0

    @property
    def encontrado(self) -> bool:
        return self.estatus == ENCONTRADO


def reconstruir_ruta(predecesores: Dict[S, S], meta: S) -> List[S]:
    """Sigue el mapa de predecesores desde la meta hasta el inicio."""
    ruta = [meta]
    actual = meta
    while actual in predecesores:
        actual = predecesores[actual]
        ruta.append(actual)
    ruta.reverse()
    return ruta


def _nunca(_estado) -> bool:
    return False


class BusquedaEstados(Generic[S]):
    """
    Búsqueda de costo uniforme (Dijkstra) sobre un grafo implícito de estados.

    Args:
        vecinos: Función que, dado un estado, produce pares (siguiente_estado, costo_incremental).
                 Los costos deben ser enteros no negativos.
        es_meta: Predicado que indica si un estado es meta. Sin predicado, ningún estado es meta
                 (útil para explorar()).
        al_mejorar: (Opcional) callback (estado, costo) invocado cada vez que se escribe el mapa
                    de mejores costos.

    El objeto no guarda estado entre llamadas: cada búsqueda crea su propia frontera,
    mapa de costos y mapa de predecesores.
    """

    def __init__(
        self,
        vecinos: FuncionVecinos,
        es_meta: Optional[Callable[[S], bool]] = None,
        al_mejorar: Optional[Callable[[S, int], None]] = None,
    ):
        self.vecinos = vecinos
        self.es_meta = es_meta or _nunca
        self.al_mejorar = al_mejorar

    def _registrar(self, costos: Dict[S, int], estado: S, costo: int) -> None:
        costos[estado] = costo
        if self.al_mejorar is not None:
            self.al_mejorar(estado, costo)

    def _expandir(self, estado: S, costo: int) -> Iterable[Tuple[S, int]]:
        for siguiente, delta in self.vecinos(estado):
            assert delta >= 0, f"Costo negativo {delta} desde {estado!r} hacia {siguiente!r}"
            yield siguiente, costo + delta

    def costo_minimo(
        self,
        inicio: S,
        guardar_ruta: bool = False,
        max_expansiones: Optional[int] = None,
    ) -> ResultadoBusqueda:
        """
        Costo mínimo desde `inicio` hasta el primer estado que cumple `es_meta`.

        Regresa:
          - estatus "encontrado" con costo (y ruta si guardar_ruta=True), o
          - estatus "inalcanzable" si la frontera se agota, o
          - estatus "presupuesto_agotado" si se superan max_expansiones.
        """
        secuencia = count()
        # heap: (costo, secuencia, estado); la secuencia desempata en orden FIFO
        frontera: List[Tuple[int, int, S]] = [(0, next(secuencia), inicio)]
        costos: Dict[S, int] = {}
        self._registrar(costos, inicio, 0)
        predecesores: Dict[S, S] = {}
        expansiones = 0

        while frontera:
            costo, _, estado = heapq.heappop(frontera)

            # Entrada obsoleta: ya hay un costo estrictamente menor registrado
            if costo > costos[estado]:
                continue

            if self.es_meta(estado):
                ruta = reconstruir_ruta(predecesores, estado) if guardar_ruta else None
                return ResultadoBusqueda(ENCONTRADO, costo, estado, ruta, expansiones)

            if max_expansiones is not None and expansiones >= max_expansiones:
                return ResultadoBusqueda(PRESUPUESTO_AGOTADO, expansiones=expansiones)
            expansiones += 1

            for siguiente, nuevo_costo in self._expandir(estado, costo):
                previo = costos.get(siguiente)
                if previo is None or nuevo_costo < previo:
                    self._registrar(costos, siguiente, nuevo_costo)
                    if guardar_ruta:
                        predecesores[siguiente] = estado
                    heapq.heappush(frontera, (nuevo_costo, next(secuencia), siguiente))

        return ResultadoBusqueda(INALCANZABLE, expansiones=expansiones)

    def rutas_optimas(self, inicio: S, max_expansiones: Optional[int] = None) -> ResultadoRutasOptimas:
        """
        Variante que enumera todas las rutas de costo mínimo.

        No se detiene en la primera meta: sigue extrayendo mientras el costo extraído sea
        igual al mejor costo de meta. Cada estado guarda la lista de todos sus predecesores
        con costo empatado, y al final se recorre ese DAG hacia atrás desde todas las metas
        óptimas.
        """
        secuencia = count()
        frontera: List[Tuple[int, int, S]] = [(0, next(secuencia), inicio)]
        costos: Dict[S, int] = {}
        self._registrar(costos, inicio, 0)
        predecesores: Dict[S, List[S]] = {inicio: []}
        mejor_meta: Optional[int] = None
        metas: List[S] = []
        expansiones = 0

        while frontera:
            costo, _, estado = heapq.heappop(frontera)

            if mejor_meta is not None and costo > mejor_meta:
                break
            if costo > costos[estado]:
                continue

            if self.es_meta(estado):
                mejor_meta = costo
                metas.append(estado)
                continue

            if max_expansiones is not None and expansiones >= max_expansiones:
                return ResultadoRutasOptimas(PRESUPUESTO_AGOTADO, expansiones=expansiones)
            expansiones += 1

            for siguiente, nuevo_costo in self._expandir(estado, costo):
                previo = costos.get(siguiente)
                if previo is None or nuevo_costo < previo:
                    self._registrar(costos, siguiente, nuevo_costo)
                    predecesores[siguiente] = [estado]
                    heapq.heappush(frontera, (nuevo_costo, next(secuencia), siguiente))
                elif nuevo_costo == previo and estado not in predecesores[siguiente]:
                    predecesores[siguiente].append(estado)

        if not metas:
            return ResultadoRutasOptimas(INALCANZABLE, expansiones=expansiones)

        # Recorrido hacia atrás desde todas las metas óptimas
        en_ruta: Set[S] = set(metas)
        pila = list(metas)
        while pila:
            actual = pila.pop()
            for previo in predecesores[actual]:
                if previo not in en_ruta:
                    en_ruta.add(previo)
                    pila.append(previo)

        return ResultadoRutasOptimas(ENCONTRADO, mejor_meta, metas, en_ruta, expansiones)

    def explorar(self, inicio: S, max_costo: Optional[int] = None) -> Dict[S, int]:
        """
        Dijkstra exhaustivo (sin meta). Regresa el mapa final de mejores costos
        de todos los estados alcanzables (con costo <= max_costo, si se indica).
        """
        secuencia = count()
        frontera: List[Tuple[int, int, S]] = [(0, next(secuencia), inicio)]
        costos: Dict[S, int] = {}
        self._registrar(costos, inicio, 0)

        while frontera:
            costo, _, estado = heapq.heappop(frontera)
            if costo > costos[estado]:
                continue

            for siguiente, nuevo_costo in self._expandir(estado, costo):
                if max_costo is not None and nuevo_costo > max_costo:
                    continue
                previo = costos.get(siguiente)
                if previo is None or nuevo_costo < previo:
                    self._registrar(costos, siguiente, nuevo_costo)
                    heapq.heappush(frontera, (nuevo_costo, next(secuencia), siguiente))

        return costos
