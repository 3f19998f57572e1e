"""Modelos de datos del generador de recibos.

Valores de entrada (items, partes, contrato, solicitud) y el resultado
que se entrega al componente que renderiza el documento.
Compatible con Python 3.9 (usa typing.List, typing.Optional).
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Union

from recibos.montos import normalizar_monto


class CategoriaRecibo(str, Enum):
    """Tipo de recibo; se usa en el nombre del archivo generado."""
    SERVICIOS = 'Servicios'
    ALQUILER = 'Alquiler'


@dataclass(frozen=True)
class ItemPago:
    """Concepto a reconocer en el recibo (servicio o cuota de alquiler)."""
    id: Union[int, str]
    concepto: str           # 'Agua', 'Luz', 'Alquiler'
    monto: Decimal
    periodo: str            # '01/2025', se emite tal cual


@dataclass(frozen=True)
class Parte:
    """Locador o locatario del contrato."""
    apellido: str
    nombre: str
    dni: str
    direccion: str
    barrio: str


@dataclass(frozen=True)
class ContextoContrato:
    """Datos minimos del contrato de locacion."""
    fecha_inicio: Union[date, str]
    destino: str            # 'Vivienda', 'Local comercial'


@dataclass
class SolicitudRecibo:
    """Entrada unica del generador. Se construye por llamada y se descarta."""
    periodo: str
    items: List[ItemPago]
    contrato: ContextoContrato
    locador: Parte
    locatario: Parte
    direccion_inmueble: str
    categoria: CategoriaRecibo = CategoriaRecibo.SERVICIOS

    @property
    def total(self) -> Decimal:
        """Suma de los montos normalizados de todos los items.

        Raises:
            MontoInvalido: con el id del primer item invalido.
        """
        return sum(
            (normalizar_monto(i.monto, i.id) for i in self.items), Decimal('0'),
        )


@dataclass
class ReciboGenerado:
    """Texto final y nombre de archivo para el renderizador."""
    texto: str
    nombre_archivo: str
    fecha_emision: date
    total: Decimal = field(default_factory=lambda: Decimal('0'))
