"""Armado del recibo legal completo.

Combina clausulas monetarias, fechas en letras e identidad de las partes
en un esqueleto fijo con marcadores nombrados. Tambien deriva el nombre
de archivo que usa el renderizador para guardar el documento.
"""

import re
import unicodedata
from datetime import date
from typing import Optional, Tuple

from loguru import logger

from config.settings import Settings
from recibos.clausulas import componer_clausulas
from recibos.errores import DatosIncompletos, PeriodoInvalido
from recibos.fechas import fecha_a_texto_legal, fecha_contrato_a_texto
from recibos.models import Parte, ReciboGenerado, SolicitudRecibo


PLANTILLA_RECIBO = (
    "{localidad}, {fecha_emision}. "
    "Recibo en nombre y representación de la parte locadora, {clausulas}. "
    "Dicho pago tiene como causa contrato de locación que comenzó a regir el "
    "{fecha_contrato} y suscripto entre {locadora} como LOCADORA y "
    "{locataria} como LOCATARIA del inmueble ubicado en {direccion_inmueble}, "
    "destinado a {destino}."
)

PLANTILLA_IDENTIDAD = (
    "{apellido} {nombre} DNI {dni} {domicilio} {direccion} "
    "de barrio {barrio} de la Ciudad de {ciudad}"
)

# Cada rol conserva su propio conector de domicilio
ROL_LOCADORA = 'con domicilio en'
ROL_LOCATARIA = 'con domicilio real en'

_PERIODO_MES_ANIO = re.compile(r'^(\d{1,2})/(\d{4})$')
_PERIODO_ANIO_MES = re.compile(r'^(\d{4})-(\d{1,2})$')
_NO_ALFANUMERICO = re.compile(r'[^A-Za-z0-9]')


def bloque_identidad(parte: Parte, rol: str, ciudad: str = 'Córdoba') -> str:
    """Identidad de una parte: nombre en mayusculas, DNI y domicilio."""
    return PLANTILLA_IDENTIDAD.format(
        apellido=parte.apellido.upper(),
        nombre=parte.nombre.upper(),
        dni=parte.dni,
        domicilio=rol,
        direccion=parte.direccion,
        barrio=parte.barrio,
        ciudad=ciudad,
    )


def armar_recibo(
    solicitud: SolicitudRecibo,
    fecha_emision: Optional[date] = None,
    localidad: str = 'Córdoba',
    ciudad: str = 'Córdoba',
) -> str:
    """Genera el parrafo legal del recibo.

    Args:
        solicitud: Datos ya validados por el llamador.
        fecha_emision: Fecha del recibo (default: hoy).
        localidad: Lugar que encabeza el recibo.
        ciudad: Ciudad de los domicilios de las partes.

    Returns:
        Parrafo final. Cualquier error de los componentes se propaga sin
        cambios y no se devuelve texto parcial.
    """
    if fecha_emision is None:
        fecha_emision = date.today()

    segmentos = {
        'localidad': localidad,
        'fecha_emision': fecha_a_texto_legal(fecha_emision),
        'clausulas': componer_clausulas(solicitud.items),
        'fecha_contrato': fecha_contrato_a_texto(solicitud.contrato.fecha_inicio),
        'locadora': bloque_identidad(solicitud.locador, ROL_LOCADORA, ciudad),
        'locataria': bloque_identidad(solicitud.locatario, ROL_LOCATARIA, ciudad),
        'direccion_inmueble': solicitud.direccion_inmueble,
        'destino': solicitud.contrato.destino.lower(),
    }
    return PLANTILLA_RECIBO.format(**segmentos)


def nombre_archivo(solicitud: SolicitudRecibo, prefijo: str = 'Receipt') -> str:
    """Nombre de archivo seguro: <prefijo>_<categoria>_<apellido>_<mes>_<año>.

    Raises:
        PeriodoInvalido: si el periodo no es MM/AAAA ni AAAA-MM.
        DatosIncompletos: si un campo queda vacio tras limpiarlo.
    """
    mes, anio = descomponer_periodo(solicitud.periodo)
    categoria = getattr(solicitud.categoria, 'value', solicitud.categoria)
    campos = [
        ('prefijo', prefijo),
        ('categoria', categoria),
        ('inquilino.apellido', solicitud.locatario.apellido),
    ]
    tokens = []
    for nombre, valor in campos:
        token = _limpiar_campo(str(valor))
        if not token:
            raise DatosIncompletos(nombre, 'no tiene caracteres validos para el nombre de archivo')
        tokens.append(token)
    return '_'.join(tokens + [mes, anio])


def descomponer_periodo(periodo: str) -> Tuple[str, str]:
    """'1/2025' -> ('01', '2025'); '2025-01' -> ('01', '2025')."""
    texto = (periodo or '').strip()

    m = _PERIODO_MES_ANIO.match(texto)
    if m:
        mes, anio = m.group(1), m.group(2)
    else:
        m = _PERIODO_ANIO_MES.match(texto)
        if not m:
            raise PeriodoInvalido(periodo)
        anio, mes = m.group(1), m.group(2)

    if not 1 <= int(mes) <= 12:
        raise PeriodoInvalido(periodo)
    return f"{int(mes):02d}", anio


def _limpiar_campo(texto: str) -> str:
    """Quita acentos y todo lo que no sea letra o digito ASCII."""
    sin_acentos = unicodedata.normalize('NFKD', texto).encode('ascii', 'ignore').decode('ascii')
    return _NO_ALFANUMERICO.sub('', sin_acentos)


def generar_recibo(
    solicitud: SolicitudRecibo,
    settings: Optional[Settings] = None,
    fecha_emision: Optional[date] = None,
) -> ReciboGenerado:
    """Genera texto y nombre de archivo con la configuracion dada."""
    if settings is None:
        settings = Settings()
    if fecha_emision is None:
        fecha_emision = date.today()

    texto = armar_recibo(
        solicitud,
        fecha_emision=fecha_emision,
        localidad=settings.localidad,
        ciudad=settings.ciudad,
    )
    archivo = nombre_archivo(solicitud, settings.prefijo_archivo)

    recibo = ReciboGenerado(
        texto=texto,
        nombre_archivo=archivo,
        fecha_emision=fecha_emision,
        total=solicitud.total,
    )
    logger.info(
        "Recibo generado: {} | {} conceptos | total={}",
        archivo, len(solicitud.items), recibo.total,
    )
    return recibo
