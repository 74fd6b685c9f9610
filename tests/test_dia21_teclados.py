import pytest

import dia21_teclados
from dia21_teclados import (
    DIRECCIONAL,
    NUMERICO,
    BOTONES,
    Teclado,
    cargar_codigos,
    complejidad,
    costos_por_nivel,
    longitud_secuencia,
    resolver,
    suma_complejidades,
)
from laberinto import ErrorFormatoEntrada

EJEMPLO = """\
029A
980A
179A
456A
379A"""


def test_posiciones_de_teclados():
    assert NUMERICO.posicion("5") == (1, 1)
    assert NUMERICO.posicion("A") == (3, 2)
    assert DIRECCIONAL.posicion("^") == (0, 1)
    assert DIRECCIONAL.posicion("<") == (1, 0)
    # el hueco no es una tecla
    assert (3, 0) not in NUMERICO.celdas
    assert (0, 0) not in DIRECCIONAL.celdas


def test_nivel_cero_cuesta_una_pulsacion():
    costos = costos_por_nivel(0)

    assert set(costos.values()) == {1}
    assert len(costos) == len(BOTONES) ** 2


def test_nivel_uno():
    costos = costos_por_nivel(1)

    # pulsar A otra vez: solo "A"
    assert costos[("A", "A")] == 1
    # de A a <: "v<<A"
    assert costos[("A", "<")] == 4
    # de < a A: ">>^A"
    assert costos[("<", "A")] == 4
    assert costos[("A", "^")] == 2


def test_teclear_directo_con_humano():
    # sin robots intermedios: "<A^A>^^AvvvA" para 029A
    assert longitud_secuencia("029A", 0) == 12


@pytest.mark.parametrize(
    "codigo, longitud",
    [("029A", 68), ("980A", 60), ("179A", 68), ("456A", 64), ("379A", 64)],
)
def test_longitudes_del_ejemplo(codigo, longitud):
    assert longitud_secuencia(codigo, 2) == longitud


def test_complejidad():
    assert complejidad("029A", 2) == 68 * 29


def test_suma_de_complejidades():
    assert suma_complejidades(cargar_codigos(EJEMPLO), 2) == 126384


def test_resolver_con_veinticinco_robots():
    assert resolver(EJEMPLO) == (126384, 154115708116294)


@pytest.mark.parametrize("codigo", ["029", "02XA", "A"])
def test_codigo_invalido(codigo):
    with pytest.raises(ErrorFormatoEntrada):
        complejidad(codigo, 2)


def test_main_imprime_ambas_partes(tmp_path, monkeypatch, capsys):
    entrada = tmp_path / "dia_21.txt"
    entrada.write_text(EJEMPLO + "\n", encoding="utf-8")
    monkeypatch.setattr(
        "sys.argv",
        ["dia21_teclados.py", "--config", str(tmp_path / "no_existe.json"), "--entrada", str(entrada)],
    )

    dia21_teclados.main()

    salida = capsys.readouterr().out
    assert "(5 códigos)" in salida
    assert "Parte 1: 126384" in salida
    assert "Parte 2: 154115708116294" in salida


def test_teclas_desconectadas():
    aislado = Teclado(["A ", " ^"])

    with pytest.raises(RuntimeError, match="No hay ruta"):
        aislado.costo_tecla(costos_por_nivel(0), "A", "^")
