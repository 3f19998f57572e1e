"""Fixtures compartidas para tests del generador de recibos."""

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

# Agregar raiz del proyecto al path
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from recibos.models import (  # noqa: E402
    CategoriaRecibo,
    ContextoContrato,
    ItemPago,
    Parte,
    SolicitudRecibo,
)


FECHA_EMISION = date(2025, 3, 5)


@pytest.fixture
def fecha_emision() -> date:
    """Fecha fija para que el texto sea reproducible."""
    return FECHA_EMISION


@pytest.fixture
def locador() -> Parte:
    return Parte(
        apellido='Gómez',
        nombre='María',
        dni='20123456',
        direccion='Av. Colón 1234',
        barrio='Centro',
    )


@pytest.fixture
def locatario() -> Parte:
    return Parte(
        apellido='Pérez',
        nombre='Juan',
        dni='30987654',
        direccion='Bv. San Juan 500',
        barrio='Nueva Córdoba',
    )


@pytest.fixture
def items_servicios():
    """Agua y Luz del periodo 01/2025."""
    return [
        ItemPago(id=1, concepto='Agua', monto=Decimal('15000'), periodo='01/2025'),
        ItemPago(id=2, concepto='Luz', monto=Decimal('8000'), periodo='01/2025'),
    ]


@pytest.fixture
def solicitud(items_servicios, locador, locatario) -> SolicitudRecibo:
    """Solicitud de recibo de servicios con dos conceptos."""
    return SolicitudRecibo(
        periodo='01/2025',
        items=items_servicios,
        contrato=ContextoContrato(fecha_inicio='2024-03-01', destino='Vivienda'),
        locador=locador,
        locatario=locatario,
        direccion_inmueble='Obispo Trejo 250',
        categoria=CategoriaRecibo.SERVICIOS,
    )


@pytest.fixture
def datos_solicitud() -> dict:
    """Forma JSON que envia el front end."""
    return {
        'periodo': '11/2025',
        'servicios': [
            {'id': 1, 'nombreTipoServicio': 'Luz', 'monto': 15000},
            {'id': 2, 'nombreTipoServicio': 'Agua', 'monto': '8.500,50'},
            {'id': 3, 'nombreTipoServicio': 'Gas', 'monto': 12000.75, 'periodo': '10/2025'},
        ],
        'contrato': {
            'fechaInicioContrato': '2024-03-01T00:00:00',
            'tipoInmueble': 'Vivienda',
        },
        'propietario': {
            'nombre': 'Carlos',
            'apellido': 'García',
            'direccion': 'Av. Colón 1234',
            'barrio': 'Centro',
            'dni': '20123456',
        },
        'inquilino': {
            'nombre': 'Ana',
            'apellido': 'Martínez',
            'direccion': 'Bv. San Juan 500',
            'barrio': 'Nueva Córdoba',
            'dni': '30987654',
        },
        'direccionInmueble': 'Obispo Trejo 250',
    }
