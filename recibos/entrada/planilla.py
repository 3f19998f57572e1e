"""Parser de planillas de conceptos a cobrar.

Lee la primera hoja de un .xlsx con una fila de encabezado:
  - Concepto: nombre del servicio o 'Alquiler' (obligatoria)
  - Monto: importe en pesos (obligatoria)
  - Periodo: MM/AAAA (opcional, default: periodo de la solicitud)
Las filas vacias se saltan. El id de cada item es su numero de fila.
"""

import unicodedata
from datetime import date, datetime
from pathlib import Path
from typing import Dict, List

import openpyxl
from loguru import logger

from recibos.errores import DatosIncompletos
from recibos.models import ItemPago
from recibos.montos import normalizar_monto


COLUMNAS_OBLIGATORIAS = ('concepto', 'monto')


def parsear_planilla_items(ruta: Path, periodo: str) -> List[ItemPago]:
    """Parsea los items de pago de una planilla Excel.

    Args:
        ruta: Ruta al archivo .xlsx.
        periodo: Periodo por defecto para filas sin columna Periodo.

    Returns:
        Items en el orden de la planilla.

    Raises:
        DatosIncompletos: si falta una columna obligatoria o un concepto.
        MontoInvalido: con el numero de fila como id.
    """
    logger.info("Parseando planilla de conceptos: {}", ruta.name)
    wb = openpyxl.load_workbook(str(ruta), data_only=True)
    try:
        ws = wb.worksheets[0]
        encabezado = next(ws.iter_rows(min_row=1, max_row=1, values_only=True), None)
        filas = ws.iter_rows(min_row=2, values_only=True)
        columnas = _mapear_columnas(encabezado or ())

        items: List[ItemPago] = []
        for numero_fila, fila in enumerate(filas, start=2):
            concepto = _valor(fila, columnas.get('concepto'))
            monto = _valor(fila, columnas.get('monto'))
            if concepto is None and monto is None:
                continue
            if concepto is None or not str(concepto).strip():
                raise DatosIncompletos(f"Concepto (fila {numero_fila})")

            periodo_fila = _periodo_celda(_valor(fila, columnas.get('periodo')))
            items.append(ItemPago(
                id=numero_fila,
                concepto=str(concepto).strip(),
                monto=normalizar_monto(monto, numero_fila),
                periodo=periodo_fila or periodo,
            ))
    finally:
        wb.close()

    logger.info("Planilla: {} conceptos", len(items))
    return items


def _mapear_columnas(encabezado) -> Dict[str, int]:
    """Nombre normalizado de columna -> indice."""
    columnas = {}
    for idx, titulo in enumerate(encabezado):
        if titulo is None:
            continue
        columnas[_normalizar_titulo(str(titulo))] = idx

    for nombre in COLUMNAS_OBLIGATORIAS:
        if nombre not in columnas:
            raise DatosIncompletos(nombre.capitalize(), 'falta la columna en la planilla')
    return columnas


def _normalizar_titulo(titulo: str) -> str:
    """'Período ' -> 'periodo'."""
    sin_acentos = unicodedata.normalize('NFKD', titulo).encode('ascii', 'ignore').decode('ascii')
    return sin_acentos.strip().lower()


def _valor(fila, idx):
    if idx is None or idx >= len(fila):
        return None
    return fila[idx]


def _periodo_celda(valor):
    """Excel suele convertir '01/2025' en fecha; se vuelve a MM/AAAA."""
    if valor is None:
        return None
    if isinstance(valor, (datetime, date)):
        return f"{valor.month:02d}/{valor.year}"
    texto = str(valor).strip()
    return texto or None
