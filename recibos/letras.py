"""Conversion de enteros a su lectura cardinal en espanol.

Las irregularidades del idioma se resuelven con tablas explicitas, no
con aritmetica, para poder auditarlas una por una:
  - 10..19 y 21..29 se escriben en una sola palabra (dieciséis, veintiuno)
  - la 'y' solo aparece entre 31 y 99 (treinta y uno)
  - un grupo de centenas igual a 100 es 'cien' en cualquier orden
    (cien, mil cien, cien mil); 101..199 usan 'ciento'
  - 'uno' se apocopa delante de mil/millones (veintiún mil, un millón)

Ejemplo: 1100 -> "mil cien", 21000 -> "veintiún mil"
"""

from typing import List, Tuple

from recibos.errores import MagnitudNoSoportada


# Limite superior exclusivo: hasta 999.999.999
LIMITE_SUPERIOR = 1_000_000_000

UNIDADES = [
    '', 'uno', 'dos', 'tres', 'cuatro', 'cinco', 'seis', 'siete', 'ocho', 'nueve',
]
ESPECIALES = [
    'diez', 'once', 'doce', 'trece', 'catorce', 'quince',
    'dieciséis', 'diecisiete', 'dieciocho', 'diecinueve',
]
VEINTENAS = [
    'veinte', 'veintiuno', 'veintidós', 'veintitrés', 'veinticuatro',
    'veinticinco', 'veintiséis', 'veintisiete', 'veintiocho', 'veintinueve',
]
DECENAS = [
    '', '', 'veinte', 'treinta', 'cuarenta', 'cincuenta',
    'sesenta', 'setenta', 'ochenta', 'noventa',
]
CENTENAS = [
    '', 'ciento', 'doscientos', 'trescientos', 'cuatrocientos', 'quinientos',
    'seiscientos', 'setecientos', 'ochocientos', 'novecientos',
]

# Forma apocopada del multiplicador delante de un sustantivo de orden
APOCOPES: List[Tuple[str, str]] = [
    ('veintiuno', 'veintiún'),
    ('uno', 'un'),
]

# (valor del orden, forma cuando el multiplicador es 1, sustantivo plural)
ORDENES: List[Tuple[int, str, str]] = [
    (1_000_000, 'un millón', 'millones'),
    (1_000, 'mil', 'mil'),
]


def numero_a_letras(n: int) -> str:
    """Convierte un entero no negativo a palabras.

    Raises:
        MagnitudNoSoportada: si n es negativo, no es entero o alcanza
            LIMITE_SUPERIOR.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise MagnitudNoSoportada(n, LIMITE_SUPERIOR)
    if n < 0 or n >= LIMITE_SUPERIOR:
        raise MagnitudNoSoportada(n, LIMITE_SUPERIOR)

    if n == 0:
        return 'cero'

    partes = []
    resto = n
    for valor, singular, plural in ORDENES:
        multiplicador, resto = divmod(resto, valor)
        if multiplicador == 0:
            continue
        if multiplicador == 1:
            partes.append(singular)
        else:
            partes.append(f"{_apocopar(_convertir_centenas(multiplicador))} {plural}")

    if resto:
        partes.append(_convertir_centenas(resto))

    return ' '.join(partes)


def _convertir_centenas(n: int) -> str:
    """Convierte 1..999."""
    if n == 100:
        return 'cien'

    centenas, resto = divmod(n, 100)
    partes = []
    if centenas:
        partes.append(CENTENAS[centenas])
    if resto:
        partes.append(_convertir_decenas(resto))
    return ' '.join(partes)


def _convertir_decenas(n: int) -> str:
    """Convierte 1..99."""
    if n < 10:
        return UNIDADES[n]
    if n < 20:
        return ESPECIALES[n - 10]
    if n < 30:
        return VEINTENAS[n - 20]

    decenas, unidades = divmod(n, 10)
    if unidades == 0:
        return DECENAS[decenas]
    return f"{DECENAS[decenas]} y {UNIDADES[unidades]}"


def _apocopar(texto: str) -> str:
    """'veintiuno' -> 'veintiún', 'treinta y uno' -> 'treinta y un'."""
    for completa, corta in APOCOPES:
        if texto.endswith(completa):
            return texto[:-len(completa)] + corta
    return texto
