"""
Constantes y espacios de nombres (Namespaces) para la parte de estilos OOXML.
Referencia: ECMA-376 Standard, Part 1, §17.7 (Styles).
"""

# Mapeo de prefijos a URIs oficiales de OOXML
OOXML_NAMESPACES = {
    # WordprocessingML Main
    "w": "http://schemas.openxmlformats.org/wordprocessingml/2006/main",
    # Office Document Relationships
    "r": "http://schemas.openxmlformats.org/officeDocument/2006/relationships",
    # Markup Compatibility (aparece en la raíz de styles.xml generado por Word)
    "mc": "http://schemas.openxmlformats.org/markup-compatibility/2006",
    # Word 2010 extensions (común en documentos modernos)
    "w14": "http://schemas.microsoft.com/office/word/2010/wordml",
}

# Ruta estándar de la parte de estilos dentro del ZIP
PATH_STYLES = "word/styles.xml"

# Nombres locales de los nodos que interesan al extractor
TAG_STYLE = "style"
TAG_NAME = "name"
TAG_RUN_PROPERTIES = "rPr"
TAG_PARAGRAPH_PROPERTIES = "pPr"
TAG_RUN_FONTS = "rFonts"
TAG_FONT_SIZE = "sz"
TAG_QUICK_FORMAT = "qFormat"
TAG_SEMI_HIDDEN = "semiHidden"

# Contenedores cuyos hijos se aplanan como propiedades del estilo
PROPERTY_CONTAINERS = (TAG_RUN_PROPERTIES, TAG_PARAGRAPH_PROPERTIES)

ATTR_VAL = "val"
ATTR_TYPE = "type"

# Prioridad de ranuras de fuente en w:rFonts. El primer valor no vacío gana.
FONT_SLOT_PRIORITY = ("ascii", "hAnsi", "eastAsia")

# Prefijo de clave para las ranuras de fuente expandidas (font:ascii, font:hAnsi...)
FONT_SLOT_KEY_PREFIX = "font"
