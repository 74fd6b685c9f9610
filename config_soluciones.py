#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional

# Nombre por defecto del archivo editable
DEFAULT_CONFIG_PATH = "soluciones_config.json"

DEFAULTS_BASE: Dict[str, Dict[str, Any]] = {
    "global": {
        "entradas": "entradas",
        "max_expansiones": None,
    },

    "dia10": {
        "entrada": None,
    },

    "dia16": {
        "entrada": None,
        "costo_avance": 1,
        "costo_giro": 1000,

        # salida opcional
        "salida_png": None,
    },

    "dia18": {
        "entrada": None,
        "tamano": 71,
        "bytes_caidos": 1024,

        "salida_png": None,
    },

    "dia20": {
        "entrada": None,
        "umbral": 100,
        "trampa_corta": 2,
        "trampa_larga": 20,
    },

    "dia21": {
        "entrada": None,
        "robots_parte1": 2,
        "robots_parte2": 25,
    },
}


def ruta_entrada(carpeta: str, dia: int) -> str:
    # Convención entradas/dia_XX.txt
    return os.path.join(carpeta, f"dia_{dia:02d}.txt")


def _mezclar(base: Dict[str, Any], encima: Dict[str, Any]) -> Dict[str, Any]:
    # merge recursivo: las secciones se combinan, los escalares se reemplazan
    salida = deepcopy(base)
    for clave, valor in encima.items():
        if isinstance(valor, dict) and isinstance(salida.get(clave), dict):
            salida[clave] = _mezclar(salida[clave], valor)
        else:
            salida[clave] = valor
    return salida


def cargar_config(path: Optional[str]) -> Dict[str, Any]:
    """
    DEFAULTS_BASE combinado con el JSON en `path`.
    Un archivo inexistente no es error: se avisa y se usan los defaults.
    """
    if not path:
        return deepcopy(DEFAULTS_BASE)
    if not os.path.isfile(path):
        print(f"Advertencia: no se encontró el archivo de configuración {path}; se usan los defaults")
        return deepcopy(DEFAULTS_BASE)

    datos = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(datos, dict):
        raise ValueError(f"{path}: la raíz del config debe ser un objeto JSON.")
    return _mezclar(DEFAULTS_BASE, datos)


def _opciones(parser: argparse.ArgumentParser) -> set:
    return {opcion for accion in parser._actions for opcion in accion.option_strings}


def agregar_argumentos_comunes(parser: argparse.ArgumentParser, config: str = DEFAULT_CONFIG_PATH) -> None:
    """--config / --entradas / --entrada, compartidos por todos los scripts de días."""
    if "--config" not in _opciones(parser):
        parser.add_argument("--config", type=str, default=config, help=f"JSON con los parámetros (default: {config})")
    parser.add_argument(
        "--entradas",
        type=str,
        default=None,
        help="Carpeta de entradas. Se lee <entradas>/dia_XX.txt.",
    )
    parser.add_argument("--entrada", type=str, default=None, help="(Opcional) Ruta explícita al archivo de entrada")


def seccion_config(cfg: Dict[str, Any], clave: str) -> Dict[str, Any]:
    seccion = cfg.get(clave, {})
    if not isinstance(seccion, dict):
        raise ValueError(f"La sección '{clave}' del config debe ser un objeto JSON.")
    return seccion


def defaults_para_dia(cfg: Dict[str, Any], clave_dia: str) -> Dict[str, Any]:
    """Sección 'global' sobreescrita por la sección del día."""
    defaults = dict(seccion_config(cfg, "global"))
    defaults.update(seccion_config(cfg, clave_dia))
    return defaults


def aplicar_defaults_desde_config(
    parser: argparse.ArgumentParser,
    clave_dia: str,
    argv: Optional[list[str]] = None,
) -> Dict[str, Any]:
    """
    Lee --config (sin consumir el resto de argumentos) y fija como defaults del parser
    los valores de 'global' + '<clave_dia>' que correspondan a algún argumento.
    Los argumentos dados en la línea de comandos siguen teniendo prioridad.
    """
    if "--config" not in _opciones(parser):
        parser.add_argument("--config", type=str, default=DEFAULT_CONFIG_PATH)

    args_parciales, _ = parser.parse_known_args(argv)
    cfg = cargar_config(getattr(args_parciales, "config", DEFAULT_CONFIG_PATH))

    dests_validos = {a.dest for a in parser._actions}
    defaults = defaults_para_dia(cfg, clave_dia)
    parser.set_defaults(**{k: v for k, v in defaults.items() if k in dests_validos})

    return cfg
