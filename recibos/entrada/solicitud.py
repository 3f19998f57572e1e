"""Construccion de la SolicitudRecibo a partir de datos planos.

Acepta la misma forma JSON que envia el front end al pedir un recibo:

    {
      "periodo": "11/2025",
      "servicios": [{"id": 1, "nombreTipoServicio": "Luz", "monto": 15000}],
      "contrato": {"fechaInicioContrato": "2024-03-01", "tipoInmueble": "Vivienda"},
      "propietario": {"nombre": ..., "apellido": ..., "direccion": ..., "barrio": ..., "dni": ...},
      "inquilino": {...},
      "direccionInmueble": "Av. Colón 1234",
      "categoria": "Servicios"
    }
"""

import json
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from recibos.errores import DatosIncompletos, ListaConceptosVacia
from recibos.fechas import parsear_fecha
from recibos.models import (
    CategoriaRecibo,
    ContextoContrato,
    ItemPago,
    Parte,
    SolicitudRecibo,
)
from recibos.montos import normalizar_monto


def cargar_solicitud(ruta: Path) -> SolicitudRecibo:
    """Lee un archivo JSON (UTF-8) y construye la solicitud."""
    return solicitud_desde_dict(leer_datos(ruta))


def leer_datos(ruta: Path) -> Dict:
    """Lee el JSON de la solicitud sin interpretarlo.

    Raises:
        DatosIncompletos: si el archivo no es JSON valido o no es un objeto.
    """
    logger.info("Leyendo solicitud de recibo: {}", ruta.name)
    with open(ruta, encoding='utf-8') as f:
        try:
            datos = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DatosIncompletos('solicitud', f"JSON invalido ({e})") from e
    if not isinstance(datos, dict):
        raise DatosIncompletos('solicitud', 'se esperaba un objeto')
    return datos


def solicitud_desde_dict(
    datos: Dict, items: Optional[List[ItemPago]] = None,
) -> SolicitudRecibo:
    """Construye y valida una SolicitudRecibo.

    Args:
        datos: Diccionario con la forma descrita en el modulo.
        items: Items ya parseados (ej: desde una planilla). Si se dan,
            reemplazan a 'servicios'.

    Raises:
        DatosIncompletos: si falta un campo obligatorio.
        ListaConceptosVacia: si no hay servicios.
        MontoInvalido, FechaInvalida: si un valor no es valido.
    """
    periodo = str(_campo(datos, 'periodo')).strip()

    if items is None:
        items = [
            _item_desde_dict(s, periodo)
            for s in (datos.get('servicios') or [])
        ]
    if not items:
        raise ListaConceptosVacia()

    contrato_datos = _campo(datos, 'contrato')
    contrato = ContextoContrato(
        fecha_inicio=parsear_fecha(_campo(contrato_datos, 'fechaInicioContrato', 'contrato.')),
        destino=str(_campo(contrato_datos, 'tipoInmueble', 'contrato.')),
    )

    solicitud = SolicitudRecibo(
        periodo=periodo,
        items=items,
        contrato=contrato,
        locador=_parte_desde_dict(_campo(datos, 'propietario'), 'propietario'),
        locatario=_parte_desde_dict(_campo(datos, 'inquilino'), 'inquilino'),
        direccion_inmueble=str(_campo(datos, 'direccionInmueble')),
        categoria=_categoria(datos.get('categoria')),
    )
    logger.debug(
        "Solicitud {} periodo {}: {} items",
        solicitud.categoria.value, periodo, len(items),
    )
    return solicitud


def _item_desde_dict(datos: Dict, periodo: str) -> ItemPago:
    """Item de pago; sin periodo propio hereda el de la solicitud."""
    item_id = datos.get('id')
    return ItemPago(
        id=item_id,
        concepto=str(_campo(datos, 'nombreTipoServicio', 'servicios.')),
        monto=normalizar_monto(_campo(datos, 'monto', 'servicios.'), item_id),
        periodo=str(datos.get('periodo') or periodo),
    )


def _parte_desde_dict(datos: Dict, nombre: str) -> Parte:
    prefijo = f"{nombre}."
    return Parte(
        apellido=str(_campo(datos, 'apellido', prefijo)).strip(),
        nombre=str(_campo(datos, 'nombre', prefijo)).strip(),
        dni=str(_campo(datos, 'dni', prefijo)).strip(),
        direccion=str(_campo(datos, 'direccion', prefijo)).strip(),
        barrio=str(_campo(datos, 'barrio', prefijo)).strip(),
    )


def _categoria(valor) -> CategoriaRecibo:
    if valor is None:
        return CategoriaRecibo.SERVICIOS
    for categoria in CategoriaRecibo:
        if str(valor).strip().lower() == categoria.value.lower():
            return categoria
    raise DatosIncompletos('categoria', f"valor no reconocido {valor!r}")


def _campo(datos, clave: str, prefijo: str = ''):
    """Valor obligatorio de un diccionario; vacio cuenta como faltante."""
    if not isinstance(datos, dict):
        raise DatosIncompletos(prefijo.rstrip('.') or clave, 'se esperaba un objeto')
    valor = datos.get(clave)
    if valor is None or (isinstance(valor, str) and not valor.strip()):
        raise DatosIncompletos(f"{prefijo}{clave}")
    return valor
