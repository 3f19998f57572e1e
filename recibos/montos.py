"""Utilidades de montos: normalizacion, validacion y formato es-AR."""

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from loguru import logger

from recibos.errores import MontoInvalido


CENTAVO = Decimal('0.01')

# 15.000 / 1.234.567 (separador de miles sin decimales)
_MILES_AR = re.compile(r'^\d{1,3}(\.\d{3})+$')


def normalizar_monto(valor, item_id=None) -> Decimal:
    """Convierte un valor a Decimal validado como dinero.

    Acepta Decimal, int, float y strings en formato '1234.56' o es-AR
    ('1.234,56', '$ 15.000'). El resultado es finito, no negativo y
    tiene a lo sumo dos decimales.

    Raises:
        MontoInvalido: con el id del item si se proporciono.
    """
    if valor is None or isinstance(valor, bool):
        raise MontoInvalido(valor, 'no es un numero', item_id)

    if isinstance(valor, Decimal):
        monto = valor
    elif isinstance(valor, (int, float)):
        monto = Decimal(str(valor))
    elif isinstance(valor, str):
        monto = _parsear_texto(valor, item_id)
    else:
        raise MontoInvalido(valor, 'tipo no soportado', item_id)

    if not monto.is_finite():
        raise MontoInvalido(valor, 'no es finito', item_id)
    if monto < 0:
        raise MontoInvalido(valor, 'es negativo', item_id)

    try:
        redondeado = monto.quantize(CENTAVO)
    except InvalidOperation:
        raise MontoInvalido(valor, 'excede la precision soportada', item_id)
    if redondeado != monto:
        raise MontoInvalido(valor, 'tiene mas de dos decimales', item_id)
    if monto == 0:
        # -0 y -0.00 pasan la validacion pero no deben mostrar signo
        monto = monto.copy_abs()

    logger.debug("Monto normalizado: {!r} -> {}", valor, monto)
    return monto


def _parsear_texto(valor: str, item_id) -> Decimal:
    """Interpreta un monto escrito como texto."""
    limpio = valor.replace('$', '').replace(' ', '').strip()
    if not limpio:
        raise MontoInvalido(valor, 'esta vacio', item_id)

    if ',' in limpio:
        # es-AR: punto de miles, coma decimal
        limpio = limpio.replace('.', '').replace(',', '.')
    elif _MILES_AR.match(limpio):
        limpio = limpio.replace('.', '')

    try:
        return Decimal(limpio)
    except InvalidOperation:
        raise MontoInvalido(valor, 'no es un numero', item_id)


def formatear_pesos(monto: Decimal) -> str:
    """Formatea un monto como moneda es-AR.

    Ejemplo: Decimal('15000') -> '$15.000,00'
    """
    valor = Decimal(monto).quantize(CENTAVO, rounding=ROUND_HALF_UP)
    if valor == 0:
        valor = valor.copy_abs()
    texto = f"{valor:,.2f}"
    # 15,000.00 -> 15.000,00
    texto = texto.replace(',', '_').replace('.', ',').replace('_', '.')
    return f"${texto}"


def parte_entera(monto: Decimal) -> int:
    """Parte entera del monto; los centavos no se escriben en letras."""
    return int(monto)
