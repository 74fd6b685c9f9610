import argparse
import json
import os

import pytest

from config_soluciones import (
    DEFAULTS_BASE,
    agregar_argumentos_comunes,
    aplicar_defaults_desde_config,
    cargar_config,
    defaults_para_dia,
    ruta_entrada,
)


def _parser_dia16() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    agregar_argumentos_comunes(parser)
    parser.add_argument("--costo_giro", type=int, default=None)
    parser.add_argument("--costo_avance", type=int, default=None)
    return parser


def _escribir(tmp_path, contenido) -> str:
    ruta = tmp_path / "config.json"
    ruta.write_text(json.dumps(contenido), encoding="utf-8")
    return str(ruta)


def test_ruta_entrada():
    assert ruta_entrada("entradas", 6) == os.path.join("entradas", "dia_06.txt")
    assert ruta_entrada("datos", 21) == os.path.join("datos", "dia_21.txt")


def test_sin_archivo_usa_defaults(capsys):
    cfg = cargar_config("no_existe.json")

    assert cfg == DEFAULTS_BASE
    assert "Advertencia" in capsys.readouterr().out


def test_sin_ruta_usa_defaults():
    assert cargar_config(None) == DEFAULTS_BASE


def test_merge_profundo(tmp_path):
    cfg = cargar_config(_escribir(tmp_path, {"dia16": {"costo_giro": 5}}))

    assert cfg["dia16"]["costo_giro"] == 5
    assert cfg["dia16"]["costo_avance"] == 1
    assert cfg["dia18"] == DEFAULTS_BASE["dia18"]
    # los defaults originales no se modifican
    assert DEFAULTS_BASE["dia16"]["costo_giro"] == 1000


def test_raiz_no_objeto(tmp_path):
    with pytest.raises(ValueError):
        cargar_config(_escribir(tmp_path, [1, 2, 3]))


def test_seccion_no_objeto(tmp_path):
    cfg = cargar_config(_escribir(tmp_path, {"dia16": 3}))

    with pytest.raises(ValueError, match="dia16"):
        defaults_para_dia(cfg, "dia16")


def test_seccion_del_dia_sobreescribe_global(tmp_path):
    cfg = cargar_config(_escribir(tmp_path, {"global": {"entradas": "g"}, "dia16": {"entradas": "d"}}))

    assert defaults_para_dia(cfg, "dia16")["entradas"] == "d"
    assert defaults_para_dia(cfg, "dia18")["entradas"] == "g"


def test_aplicar_defaults_desde_config(tmp_path):
    ruta = _escribir(tmp_path, {"global": {"entradas": "mis_entradas"}, "dia16": {"costo_giro": 7}})
    argv = ["--config", ruta]
    parser = _parser_dia16()

    aplicar_defaults_desde_config(parser, "dia16", argv)
    args = parser.parse_args(argv)

    assert args.costo_giro == 7
    assert args.costo_avance == 1
    assert args.entradas == "mis_entradas"
    # claves sin argumento en el parser se ignoran
    assert not hasattr(args, "salida_png")


def test_linea_de_comandos_tiene_prioridad(tmp_path):
    argv = ["--config", _escribir(tmp_path, {"dia16": {"costo_giro": 7}}), "--costo_giro", "3"]
    parser = _parser_dia16()

    aplicar_defaults_desde_config(parser, "dia16", argv)

    assert parser.parse_args(argv).costo_giro == 3


def test_argumentos_comunes_incluyen_config():
    parser = argparse.ArgumentParser()
    agregar_argumentos_comunes(parser, config="otro.json")

    args = parser.parse_args([])

    assert args.config == "otro.json"
    assert args.entradas is None and args.entrada is None


def test_config_no_se_duplica_al_aplicar_defaults(tmp_path):
    parser = _parser_dia16()

    aplicar_defaults_desde_config(parser, "dia16", ["--config", _escribir(tmp_path, {})])

    opciones = [a for a in parser._actions if "--config" in a.option_strings]
    assert len(opciones) == 1


def test_aplicar_defaults_agrega_config_si_falta(tmp_path):
    parser = argparse.ArgumentParser()
    parser.add_argument("--umbral", type=int, default=None)
    argv = ["--config", _escribir(tmp_path, {"dia20": {"umbral": 50}})]

    aplicar_defaults_desde_config(parser, "dia20", argv)

    assert parser.parse_args(argv).umbral == 50
