"""Fechas en formato de texto legal.

Ejemplo: date(2025, 3, 5) -> "5 de marzo del año dos mil veinticinco"
"""

from datetime import date, datetime

from recibos.errores import FechaInvalida
from recibos.letras import numero_a_letras


MESES = [
    'enero', 'febrero', 'marzo', 'abril', 'mayo', 'junio',
    'julio', 'agosto', 'septiembre', 'octubre', 'noviembre', 'diciembre',
]

FORMATOS_FECHA = ('%Y-%m-%d', '%d/%m/%Y', '%d-%m-%Y')


def parsear_fecha(valor) -> date:
    """Convierte date, datetime o string (ISO o DD/MM/AAAA) a date.

    Raises:
        FechaInvalida: si el valor no representa una fecha de calendario.
    """
    if isinstance(valor, datetime):
        return valor.date()

    if isinstance(valor, date):
        return valor

    if isinstance(valor, str):
        texto = valor.strip()
        for fmt in FORMATOS_FECHA:
            try:
                return datetime.strptime(texto, fmt).date()
            except ValueError:
                continue
        # 2023-04-01T00:00:00 (fecha con hora del backend)
        try:
            return datetime.fromisoformat(texto).date()
        except ValueError:
            pass

    raise FechaInvalida(valor)


def fecha_a_texto_legal(fecha) -> str:
    """'<dia> de <mes> del año <año en letras>'; el dia va en numeros."""
    fecha = parsear_fecha(fecha)
    anio = numero_a_letras(fecha.year)
    return f"{fecha.day} de {MESES[fecha.month - 1]} del año {anio}"


def fecha_contrato_a_texto(fecha) -> str:
    """Igual que fecha_a_texto_legal pero precedida por 'día'.

    Solo se usa para la fecha de inicio del contrato.
    """
    return f"día {fecha_a_texto_legal(fecha)}"
