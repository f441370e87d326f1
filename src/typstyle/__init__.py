"""typstyle: extracción de definiciones de estilo desde paquetes DOCX."""

from typstyle.core.exceptions import (
    TypStyleError,
    FileAccessError,
    MissingPartError,
    CorruptPartError,
    MalformedXmlError,
)
from typstyle.core.parser.style_models import StyleRecord, ExtractionOptions, PropertyKeyStyle
from typstyle.core.style_extractor import extract_styles, extract_styles_from_xml

__version__ = "1.0.0"

__all__ = [
    "TypStyleError",
    "FileAccessError",
    "MissingPartError",
    "CorruptPartError",
    "MalformedXmlError",
    "StyleRecord",
    "ExtractionOptions",
    "PropertyKeyStyle",
    "extract_styles",
    "extract_styles_from_xml",
]
