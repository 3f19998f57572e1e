"""Errores tipados del generador de recibos.

Cada componente falla rapido con una de estas excepciones. Ningun
componente las captura ni las convierte en texto parcial: el recibo
se genera completo o no se genera.
"""

from typing import Optional


class ErrorRecibo(Exception):
    """Base de todos los errores del generador."""


class MontoInvalido(ErrorRecibo):
    """Monto negativo, no finito, no numerico o con mas de dos decimales."""

    def __init__(self, valor, motivo: str, item_id=None):
        self.valor = valor
        self.motivo = motivo
        self.item_id = item_id
        mensaje = f"Monto invalido {valor!r}: {motivo}"
        if item_id is not None:
            mensaje += f" (item {item_id})"
        super().__init__(mensaje)


class MagnitudNoSoportada(ErrorRecibo):
    """Entero fuera del rango que el conversor a letras sabe leer."""

    def __init__(self, valor, limite: Optional[int] = None, item_id=None):
        self.valor = valor
        self.limite = limite
        self.item_id = item_id
        mensaje = f"Magnitud no soportada: {valor!r}"
        if limite is not None:
            mensaje += f" (rango valido 0..{limite - 1:,})"
        if item_id is not None:
            mensaje += f" (item {item_id})"
        super().__init__(mensaje)


class FechaInvalida(ErrorRecibo):
    """Fecha ilegible o fuera de calendario."""

    def __init__(self, valor):
        self.valor = valor
        super().__init__(f"Fecha invalida: {valor!r}")


class ListaConceptosVacia(ErrorRecibo):
    """Recibo sin conceptos a reconocer."""

    def __init__(self):
        super().__init__("El recibo debe incluir al menos un concepto de pago")


class PeriodoInvalido(ErrorRecibo):
    """Periodo que no tiene la forma MM/AAAA (o AAAA-MM)."""

    def __init__(self, valor):
        self.valor = valor
        super().__init__(f"Periodo invalido: {valor!r} (se espera MM/AAAA)")


class DatosIncompletos(ErrorRecibo):
    """Falta un campo obligatorio o tiene un valor no reconocido."""

    def __init__(self, campo: str, detalle: str = 'es obligatorio'):
        self.campo = campo
        self.detalle = detalle
        super().__init__(f"Campo '{campo}': {detalle}")
