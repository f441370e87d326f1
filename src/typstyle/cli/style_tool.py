import argparse
import dataclasses
import json
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError
from tabulate import tabulate

from typstyle.config import Settings
from typstyle.core.exceptions import (
    CorruptPartError,
    FileAccessError,
    MalformedXmlError,
    MissingPartError,
)
from typstyle.core.parser.style_models import PRESETS, ExtractionOptions, StyleRecord
from typstyle.core.style_extractor import extract_styles

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FILE_ACCESS = 1
EXIT_NOT_DOCX = 2
EXIT_CORRUPT = 3
EXIT_CONFIG = 64


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typstyle",
        description="TypStyle - Extrae las definiciones de estilo de un documento DOCX",
    )
    parser.add_argument("docx", help="Ruta al archivo .docx")
    parser.add_argument("--preset", choices=sorted(PRESETS), help="Variante de extracción predefinida")
    parser.add_argument(
        "--quick-format-only",
        action="store_true",
        help="Solo estilos de galería (qFormat sin semiHidden)",
    )
    parser.add_argument("--json", action="store_true", help="Salida JSON en lugar de tabla")
    parser.add_argument("--properties", action="store_true", help="Listar las propiedades de cada estilo")
    parser.add_argument("-v", "--verbose", action="store_true", help="Logging a nivel DEBUG")
    return parser


def resolve_options(args: argparse.Namespace, settings: Settings) -> ExtractionOptions:
    options = PRESETS[args.preset] if args.preset else ExtractionOptions.from_settings(settings)
    if args.quick_format_only:
        options = dataclasses.replace(options, quick_format_only=True)
    return options


def render_table(styles: List[StyleRecord]) -> str:
    rows = [
        [s.name, s.type, s.font_name, s.font_size, len(s.properties)]
        for s in styles
    ]
    return tabulate(rows, headers=["Nombre", "Tipo", "Fuente", "Tamaño", "Propiedades"], tablefmt="grid")


def render_properties(styles: List[StyleRecord]) -> str:
    lines = []
    for style in styles:
        lines.append(f"\nEstilo: {style.name} (Tipo: {style.type})")
        lines.append("Propiedades:")
        if style.font_name:
            lines.append(f"  Fuente: {style.font_name}")
        if style.font_size:
            lines.append(f"  Tamaño: {style.font_size}")
        for key, value in sorted(style.properties.items()):
            lines.append(f"  {key}: {value or '[sin valor]'}")
    return "\n".join(lines)


def _fail(message: str, exit_code: int) -> int:
    logger.debug("Extracción abortada", exc_info=True)
    print(f"❌ {message}", file=sys.stderr)
    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings()
    except ValidationError as e:
        print(f"❌ Configuración inválida: {e}", file=sys.stderr)
        return EXIT_CONFIG

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(levelname)s: %(message)s",
    )

    try:
        options = resolve_options(args, settings)
        styles = extract_styles(args.docx, options=options, part=settings.STYLES_PART)
    except FileAccessError as e:
        return _fail(f"No se pudo abrir el archivo: {e}", EXIT_FILE_ACCESS)
    except MissingPartError as e:
        return _fail(f"{args.docx} no es un documento de Word válido: {e}", EXIT_NOT_DOCX)
    except (CorruptPartError, MalformedXmlError) as e:
        return _fail(f"La parte de estilos está dañada: {e}", EXIT_CORRUPT)

    if args.json:
        print(json.dumps([s.to_dict() for s in styles], ensure_ascii=False, indent=2))
        return EXIT_OK

    if not styles:
        print("No se encontraron estilos en el documento.")
        return EXIT_OK

    print(f"Se encontraron {len(styles)} estilos en {args.docx}:")
    print(render_table(styles))
    if args.properties:
        print(render_properties(styles))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
