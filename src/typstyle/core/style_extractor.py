"""
Punto de entrada del extractor: ruta DOCX -> lista de StyleRecord.

Etapas (siempre en este orden, sin reintentos):
    1. DocxArchive      lee word/styles.xml del ZIP
    2. parse_xml        construye el árbol lxml
    3. select_style_nodes / StyleParser  seleccionan y aplanan los <w:style>

Cualquier error de una etapa se propaga tal cual; no se devuelven resultados parciales.
"""
import logging
from pathlib import Path
from typing import List, Optional

from typstyle.core.constants import PATH_STYLES
from typstyle.core.parser.archive import DocxSource, read_styles_part
from typstyle.core.parser.style_models import ExtractionOptions, StyleRecord
from typstyle.core.parser.style_parser import StyleParser
from typstyle.core.parser.xml_engine import parse_xml

logger = logging.getLogger(__name__)


def extract_styles_from_xml(
    data: bytes,
    options: Optional[ExtractionOptions] = None,
    label: str = PATH_STYLES,
) -> List[StyleRecord]:
    """Etapas 2-3 sobre el contenido crudo de una parte de estilos."""
    tree = parse_xml(data, label=label)
    return StyleParser(options).parse_styles_xml(tree)


def extract_styles(
    source: DocxSource,
    options: Optional[ExtractionOptions] = None,
    part: str = PATH_STYLES,
) -> List[StyleRecord]:
    """
    Extrae las definiciones de estilo de un DOCX.

    Args:
        source: Ruta al .docx (o un objeto binario con el ZIP).
        options: Políticas de selección/aplanado. Por defecto, todos los estilos.
        part: Entrada del ZIP con los estilos.

    Raises:
        FileAccessError, MissingPartError, CorruptPartError, MalformedXmlError
    """
    data = read_styles_part(source, part=part)
    styles = extract_styles_from_xml(data, options=options, label=part)

    label = str(source) if isinstance(source, (str, Path)) else getattr(source, "name", "<buffer>")
    logger.info(f"{len(styles)} estilos extraídos de {label}")
    return styles
