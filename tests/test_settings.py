"""Tests para la configuracion desde variables de entorno."""

import os

from config.settings import Settings


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.localidad == 'Córdoba'
        assert settings.ciudad == 'Córdoba'
        assert settings.prefijo_archivo == 'Receipt'
        assert settings.log_level == 'INFO'

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv('RECIBO_LOCALIDAD', 'Río Cuarto')
        monkeypatch.setenv('RECIBO_PREFIJO', 'Recibo')
        monkeypatch.setenv('LOG_LEVEL', 'DEBUG')
        monkeypatch.delenv('RECIBO_CIUDAD', raising=False)

        settings = Settings.from_env()

        assert settings.localidad == 'Río Cuarto'
        assert settings.ciudad == 'Córdoba'
        assert settings.prefijo_archivo == 'Recibo'
        assert settings.log_level == 'DEBUG'

    def test_from_env_archivo(self, monkeypatch, tmp_path):
        for var in ('RECIBO_LOCALIDAD', 'RECIBO_CIUDAD', 'RECIBO_PREFIJO', 'LOG_LEVEL'):
            monkeypatch.delenv(var, raising=False)
        env = tmp_path / '.env'
        env.write_text('RECIBO_CIUDAD=Villa María\n', encoding='utf-8')

        try:
            settings = Settings.from_env(str(env))
        finally:
            os.environ.pop('RECIBO_CIUDAD', None)

        assert settings.ciudad == 'Villa María'
