from .archive import DocxArchive, read_styles_part
from .xml_engine import parse_xml
from .style_selector import select_style_nodes, is_gallery_style
from .style_models import StyleRecord, ExtractionOptions, PropertyKeyStyle, PRESETS
from .style_parser import StyleParser

__all__ = [
    "DocxArchive",
    "read_styles_part",
    "parse_xml",
    "select_style_nodes",
    "is_gallery_style",
    "StyleRecord",
    "ExtractionOptions",
    "PropertyKeyStyle",
    "PRESETS",
    "StyleParser",
]
