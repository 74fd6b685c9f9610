import pytest

import dia10_senderos
from dia10_senderos import MapaAlturas, cargar_alturas, resolver
from laberinto import ErrorFormatoEntrada

EJEMPLO = """\
89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732"""

UN_SENDERO = """\
0123
1234
8765
9876"""


def test_cargar_alturas():
    alturas = cargar_alturas(EJEMPLO)

    assert alturas.shape == (8, 8)
    assert alturas[0, 0] == 8
    assert alturas[7, 7] == 2


def test_inicios():
    mapa = MapaAlturas(cargar_alturas(EJEMPLO))

    assert len(mapa.inicios()) == 9
    assert mapa.inicios()[0] == (0, 2)


def test_puntaje_y_calificacion_de_un_inicio():
    mapa = MapaAlturas(cargar_alturas(EJEMPLO))

    assert mapa.puntaje((0, 2)) == 5
    assert mapa.calificacion((0, 2)) == 20


def test_una_sola_cima_con_varios_senderos():
    mapa = MapaAlturas(cargar_alturas(UN_SENDERO))

    assert mapa.puntaje((0, 0)) == 1
    assert mapa.calificacion((0, 0)) == 16


def test_resolver_ejemplo():
    assert resolver(EJEMPLO) == (36, 81)


@pytest.mark.parametrize("texto", ["", "0123\n012", "01a3"])
def test_entrada_mal_formada(texto):
    with pytest.raises(ErrorFormatoEntrada):
        cargar_alturas(texto)


def test_main_imprime_ambas_partes(tmp_path, monkeypatch, capsys):
    entrada = tmp_path / "dia_10.txt"
    entrada.write_text(EJEMPLO + "\n", encoding="utf-8")
    monkeypatch.setattr(
        "sys.argv",
        ["dia10_senderos.py", "--config", str(tmp_path / "no_existe.json"), "--entrada", str(entrada)],
    )

    dia10_senderos.main()

    salida = capsys.readouterr().out
    assert "Parte 1: 36" in salida
    assert "Parte 2: 81" in salida
