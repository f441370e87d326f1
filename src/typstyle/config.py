from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings

from typstyle.core.constants import PATH_STYLES
from typstyle.core.parser.style_models import PropertyKeyStyle

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Configuración del extractor (variables TYPSTYLE_* o archivo .env).
    Los valores por defecto reproducen la extracción completa sin filtros.
    """
    STYLES_PART: str = PATH_STYLES

    # --- Políticas de extracción ---
    # Solo estilos de galería (qFormat presente, semiHidden ausente)
    QUICK_FORMAT_ONLY: bool = False
    # Aplanar hijos de rPr/pPr en el mapa de propiedades
    FLATTEN_CONTAINERS: bool = True
    # 'local' -> 'spacing', 'scoped' -> 'pPr:spacing'
    PROPERTY_KEY_STYLE: PropertyKeyStyle = PropertyKeyStyle.LOCAL
    EXPAND_FONT_SLOTS: bool = False
    INCLUDE_STYLE_ATTRIBUTES: bool = False

    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL inválido: '{value}'. Valores permitidos: {', '.join(_LOG_LEVELS)}.")
        return level

    @model_validator(mode="after")
    def validate_key_style(self):
        if self.PROPERTY_KEY_STYLE == PropertyKeyStyle.SCOPED and not self.FLATTEN_CONTAINERS:
            raise ValueError(
                "Configuración inválida: PROPERTY_KEY_STYLE='scoped' requiere FLATTEN_CONTAINERS=true."
            )
        return self

    class Config:
        env_prefix = "TYPSTYLE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"
