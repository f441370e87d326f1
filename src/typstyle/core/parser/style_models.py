from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, Optional


class PropertyKeyStyle(str, Enum):
    LOCAL = "local"      # Clave = nombre local del elemento ('spacing')
    SCOPED = "scoped"    # Clave = contenedor:nombre ('pPr:spacing')


@dataclass
class StyleRecord:
    """Representación plana de un <w:style> extraído de styles.xml."""
    name: str = ""
    type: str = ""       # 'paragraph', 'character', 'table', 'numbering' u otro valor del documento
    font_name: str = ""  # Primera ranura no vacía de w:rFonts
    font_size: str = ""  # w:sz tal cual (medios puntos, sin convertir)

    # Resto de propiedades por nombre local. Si una clave se repite en otro nivel
    # de anidamiento, la última escritura gana.
    properties: Dict[str, str] = field(default_factory=dict)

    @property
    def font_size_points(self) -> Optional[float]:
        """Tamaño en puntos (w:sz / 2), o None si falta o no es numérico."""
        try:
            return int(self.font_size) / 2
        except (ValueError, TypeError):
            return None

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class ExtractionOptions:
    """
    Políticas configurables del extractor.

    quick_format_only: aplica el filtro qFormat/semiHidden en el selector.
    flatten_containers: los hijos de rPr/pPr se guardan como propiedades del estilo.
        Si es False, pPr (y cualquier otro hijo) se guarda como una sola propiedad con
        su texto; de rPr solo se extraen font_name y font_size.
    key_style: cómo se nombran las claves de las propiedades aplanadas.
    expand_font_slots: además de font_name, guarda cada ranura de rFonts como 'font:<ranura>'.
    include_style_attributes: copia los atributos del propio <w:style> (salvo type) a properties.
    """
    quick_format_only: bool = False
    flatten_containers: bool = True
    key_style: PropertyKeyStyle = PropertyKeyStyle.LOCAL
    expand_font_slots: bool = False
    include_style_attributes: bool = False

    def __post_init__(self):
        if self.key_style == PropertyKeyStyle.SCOPED and not self.flatten_containers:
            raise ValueError("key_style='scoped' requiere flatten_containers=True.")

    @classmethod
    def from_settings(cls, settings) -> "ExtractionOptions":
        return cls(
            quick_format_only=settings.QUICK_FORMAT_ONLY,
            flatten_containers=settings.FLATTEN_CONTAINERS,
            key_style=PropertyKeyStyle(settings.PROPERTY_KEY_STYLE),
            expand_font_slots=settings.EXPAND_FONT_SLOTS,
            include_style_attributes=settings.INCLUDE_STYLE_ATTRIBUTES,
        )


# Variantes históricas del extractor, seleccionables por nombre
PRESETS: Dict[str, ExtractionOptions] = {
    "default": ExtractionOptions(),
    "gallery": ExtractionOptions(quick_format_only=True),
    "shallow": ExtractionOptions(flatten_containers=False),
    "scoped": ExtractionOptions(key_style=PropertyKeyStyle.SCOPED, expand_font_slots=True),
}
