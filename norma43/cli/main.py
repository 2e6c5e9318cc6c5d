"""
Punto de entrada CLI: norma43-parser.

Uso:
    # Procesar un solo fichero
    norma43-parser /ruta/extracto.n43 -o /ruta/salida

    # Procesar todos los ficheros N43 de una carpeta
    norma43-parser /ruta/carpeta -o /ruta/salida

    # Ficheros en cp1252 en lugar de latin-1
    norma43-parser /ruta/extracto.txt --encoding cp1252

Este módulo es el ÚNICO lugar donde se ensamblan los componentes:
- Crea las instancias concretas (N43FileExtractor, N43Parser, ExcelWriter...).
- Las inyecta en el StatementProcessor.
- Ejecuta el procesamiento.
"""

import argparse
import sys
from pathlib import Path

from norma43.adapters.input.n43.parser import N43Parser
from norma43.adapters.input.text_extractors.n43_file_extractor import N43FileExtractor
from norma43.adapters.output.loggers.console_logger import ConsoleLogger
from norma43.adapters.output.writers.excel_writer import ExcelWriter
from norma43.domain.exceptions import OutputError
from norma43.domain.services.statement_processor import StatementProcessor


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI.

    Returns:
        Código de salida: 0 si se generó al menos un Excel, 1 si no.
    """
    args = _parse_args(argv)

    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else None

    # --- Ensamblar componentes ---
    logger = ConsoleLogger()
    parser = N43Parser()
    excel_writer = ExcelWriter()

    processor = StatementProcessor(
        text_extractors=[N43FileExtractor(encoding=args.encoding)],
        parser=parser,
        logger=logger,
    )

    if not input_path.exists():
        print(f"❌ La ruta no existe: {input_path}")
        return 1

    if output_dir is None:
        output_dir = input_path.parent if input_path.is_file() else input_path
    output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("NORMA 43 PARSER")
    print("=" * 60)
    print(f"  Entrada:      {input_path}")
    print(f"  Salida:       {output_dir}")
    print(f"  Codificación: {args.encoding}")
    print()

    if input_path.is_file():
        result = processor.process_file(input_path)
        results = [result] if result is not None else []
    else:
        results = processor.process_directory(input_path)

    if not results:
        print("\n❌ No se procesó ningún archivo.")
        logger.print_summary()
        return 1

    try:
        for result in results:
            output_file = output_dir / f"movimientos_{Path(result.source_file).stem}.xlsx"
            logger.log_output_written(excel_writer.write_single(result, output_file))

        if len(results) > 1:
            consolidado = excel_writer.write_consolidated(results, output_dir / "consolidado.xlsx")
            logger.log_output_written(consolidado)
    except OutputError as e:
        print(f"\n❌ {e}")
        return 1
    finally:
        logger.print_summary()

    return 0


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="norma43-parser",
        description="Lector de extractos bancarios Norma 43 (Cuaderno 43 AEB) a Excel",
        epilog="Ejemplo: norma43-parser /ruta/extractos -o /ruta/salida",
    )

    parser.add_argument(
        "input_path",
        help="Ruta a un fichero N43 o a un directorio con ficheros N43",
    )

    parser.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida para los Excel generados. "
        "Si no se especifica, se usa el mismo directorio de la entrada.",
    )

    parser.add_argument(
        "--encoding",
        default="latin-1",
        help="Codificación de los ficheros de entrada (por defecto: latin-1)",
    )

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
