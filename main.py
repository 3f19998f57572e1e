"""Generador de recibos legales de pago.

Punto de entrada CLI para convertir montos a letras y generar el texto
legal de un recibo a partir de una solicitud JSON.

Uso:
    python main.py letras 15000
    python main.py generar data/solicitud.json
    python main.py generar data/solicitud.json --items data/conceptos.xlsx
    python main.py generar data/solicitud.json --fecha 2025-03-05
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from recibos.errores import ErrorRecibo


def configurar_logger(nivel: str = 'INFO'):
    """Configura loguru con formato legible."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=nivel,
        format="<green>{time:HH:mm:ss}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
               "<level>{message}</level>",
    )


def cmd_letras(args):
    """Muestra un entero escrito en letras."""
    from recibos.letras import numero_a_letras

    print(numero_a_letras(args.numero))


def cmd_generar(args):
    """Genera el texto del recibo y su nombre de archivo."""
    from datetime import date as date_type

    from config.settings import Settings
    from recibos.entrada.planilla import parsear_planilla_items
    from recibos.entrada.solicitud import (
        cargar_solicitud,
        leer_datos,
        solicitud_desde_dict,
    )
    from recibos.montos import formatear_pesos
    from recibos.recibo import generar_recibo

    ruta = Path(args.solicitud)
    if not ruta.exists():
        logger.error("Archivo no encontrado: {}", ruta)
        sys.exit(1)

    fecha_emision = None
    if args.fecha:
        try:
            fecha_emision = date_type.fromisoformat(args.fecha)
        except ValueError:
            logger.error("Formato de fecha invalido: {} (usar YYYY-MM-DD)", args.fecha)
            sys.exit(1)

    if args.items:
        ruta_items = Path(args.items)
        if not ruta_items.exists():
            logger.error("Planilla no encontrada: {}", ruta_items)
            sys.exit(1)
        datos = leer_datos(ruta)
        items = parsear_planilla_items(ruta_items, str(datos.get('periodo', '')))
        solicitud = solicitud_desde_dict(datos, items=items)
    else:
        solicitud = cargar_solicitud(ruta)

    recibo = generar_recibo(solicitud, Settings.from_env(), fecha_emision)

    print(f"\n{'='*60}")
    print(f"RECIBO: {recibo.nombre_archivo}")
    print(f"{'='*60}")
    print(recibo.texto)
    print(f"{'─'*60}")
    print(f"  Conceptos: {len(solicitud.items)}")
    print(f"  Total:     {formatear_pesos(recibo.total)}")


def main():
    """Punto de entrada principal."""
    parser = argparse.ArgumentParser(
        description='Generador de recibos legales de pago',
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Nivel de logging (default: INFO)',
    )

    subparsers = parser.add_subparsers(dest='comando', help='Comando a ejecutar')

    # Subcomando: letras
    parser_letras = subparsers.add_parser('letras', help='Escribir un entero en letras')
    parser_letras.add_argument('numero', type=int, help='Entero no negativo')

    # Subcomando: generar
    parser_generar = subparsers.add_parser('generar', help='Generar texto de recibo')
    parser_generar.add_argument(
        'solicitud',
        help='Ruta al JSON con periodo, servicios, contrato y partes',
    )
    parser_generar.add_argument(
        '--items',
        default=None,
        help='Planilla .xlsx con Concepto/Monto/Periodo (reemplaza "servicios")',
    )
    parser_generar.add_argument(
        '--fecha',
        default=None,
        help='Fecha de emision (YYYY-MM-DD, default: hoy)',
    )

    args = parser.parse_args()
    configurar_logger(args.log_level)

    if args.comando is None:
        parser.print_help()
        sys.exit(0)

    try:
        if args.comando == 'letras':
            cmd_letras(args)
        elif args.comando == 'generar':
            cmd_generar(args)
        else:
            parser.print_help()
    except ErrorRecibo as e:
        logger.error("No se genero el recibo: {}", e)
        sys.exit(1)


if __name__ == '__main__':
    main()
