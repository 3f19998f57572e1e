"""Configuracion central del generador de recibos.

Localidad del encabezado, ciudad de los domicilios, prefijo del nombre
de archivo y nivel de logging. Todo se carga desde variables de
entorno (.env).
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class Settings:
    """Configuracion principal del generador."""

    # --- Texto del recibo ---
    localidad: str = 'Córdoba'
    ciudad: str = 'Córdoba'

    # --- Nombre de archivo ---
    prefijo_archivo: str = 'Receipt'

    # --- Logging ---
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls, env_path: Optional[str] = None) -> 'Settings':
        """Carga configuracion desde variables de entorno (.env)."""
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        return cls(
            localidad=os.getenv('RECIBO_LOCALIDAD', 'Córdoba'),
            ciudad=os.getenv('RECIBO_CIUDAD', 'Córdoba'),
            prefijo_archivo=os.getenv('RECIBO_PREFIJO', 'Receipt'),
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
        )
