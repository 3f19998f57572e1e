"""Tests para normalizacion y formato de montos."""

from decimal import Decimal

import pytest

from recibos.errores import MontoInvalido
from recibos.montos import formatear_pesos, normalizar_monto, parte_entera


class TestNormalizarMonto:
    """Conversion de valores de entrada a Decimal."""

    @pytest.mark.parametrize('valor,esperado', [
        (Decimal('15000'), Decimal('15000')),
        (15000, Decimal('15000')),
        (8000.5, Decimal('8000.5')),
        (0, Decimal('0')),
        ('1234.56', Decimal('1234.56')),
        ('1.234,56', Decimal('1234.56')),
        ('$ 15.000', Decimal('15000')),
        ('$15.000,00', Decimal('15000.00')),
        ('8500,5', Decimal('8500.5')),
    ])
    def test_valores_validos(self, valor, esperado):
        assert normalizar_monto(valor) == esperado

    def test_negativo(self):
        with pytest.raises(MontoInvalido, match='negativo'):
            normalizar_monto(Decimal('-1'))

    @pytest.mark.parametrize('valor', [Decimal('10.005'), 10.005, '1,234'])
    def test_mas_de_dos_decimales(self, valor):
        with pytest.raises(MontoInvalido, match='dos decimales'):
            normalizar_monto(valor)

    @pytest.mark.parametrize('valor', [Decimal('NaN'), Decimal('Infinity'), float('inf')])
    def test_no_finito(self, valor):
        with pytest.raises(MontoInvalido, match='finito'):
            normalizar_monto(valor)

    @pytest.mark.parametrize('valor', [None, True, 'abc', '', [100]])
    def test_no_numerico(self, valor):
        with pytest.raises(MontoInvalido):
            normalizar_monto(valor)

    def test_error_lleva_id_del_item(self):
        with pytest.raises(MontoInvalido) as exc:
            normalizar_monto(-5, item_id=42)
        assert exc.value.item_id == 42
        assert 'item 42' in str(exc.value)

    @pytest.mark.parametrize('valor', [-0.0, '-0', '-0,00', Decimal('-0.00')])
    def test_cero_con_signo_queda_positivo(self, valor):
        resultado = normalizar_monto(valor)
        assert resultado == 0
        assert not resultado.is_signed()


class TestFormatearPesos:
    """Formato de moneda es-AR."""

    @pytest.mark.parametrize('monto,esperado', [
        (Decimal('15000'), '$15.000,00'),
        (Decimal('8000'), '$8.000,00'),
        (Decimal('1234.5'), '$1.234,50'),
        (Decimal('999'), '$999,00'),
        (Decimal('0'), '$0,00'),
        (Decimal('1234567.89'), '$1.234.567,89'),
    ])
    def test_formato(self, monto, esperado):
        assert formatear_pesos(monto) == esperado

    @pytest.mark.parametrize('monto', [Decimal('-0'), Decimal('-0.00'), Decimal('-0.001')])
    def test_cero_negativo_sin_signo(self, monto):
        assert formatear_pesos(monto) == '$0,00'


class TestParteEntera:

    def test_trunca_centavos(self):
        assert parte_entera(Decimal('1500.99')) == 1500

    def test_entero(self):
        assert parte_entera(Decimal('15000')) == 15000
