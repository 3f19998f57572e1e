"""Redaccion de las clausulas monetarias del recibo.

Cada item genera una clausula "la suma de pesos ..." y todas se unen en
una sola frase: "A", "A y B", "A, B y C". Nunca hay coma antes de la 'y'.
"""

from typing import List, Sequence

from loguru import logger

from recibos.errores import ListaConceptosVacia, MagnitudNoSoportada
from recibos.letras import numero_a_letras
from recibos.models import ItemPago
from recibos.montos import formatear_pesos, normalizar_monto, parte_entera


PLANTILLA_CLAUSULA = (
    "la suma de pesos {letras} ({monto}) a fin de abonar parte proporcional "
    "de {concepto} correspondiente al periodo {periodo}"
)


def redactar_clausula(item: ItemPago) -> str:
    """Redacta la clausula de un item.

    Solo la parte entera se escribe en letras; el monto completo con
    centavos va entre parentesis.

    Raises:
        MontoInvalido, MagnitudNoSoportada: con el id del item.
    """
    monto = normalizar_monto(item.monto, item.id)
    try:
        letras = numero_a_letras(parte_entera(monto))
    except MagnitudNoSoportada as e:
        raise MagnitudNoSoportada(e.valor, e.limite, item.id) from e

    clausula = PLANTILLA_CLAUSULA.format(
        letras=letras,
        monto=formatear_pesos(monto),
        concepto=item.concepto,
        periodo=item.periodo,
    )
    logger.debug("Clausula item {}: {} {}", item.id, item.concepto, monto)
    return clausula


def componer_clausulas(items: Sequence[ItemPago]) -> str:
    """Une las clausulas de todos los items en una frase.

    Raises:
        ListaConceptosVacia: si no hay items.
    """
    if not items:
        raise ListaConceptosVacia()

    clausulas: List[str] = [redactar_clausula(item) for item in items]

    if len(clausulas) == 1:
        return clausulas[0]
    return ', '.join(clausulas[:-1]) + ' y ' + clausulas[-1]
