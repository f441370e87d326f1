from typing import Optional


class TypStyleError(Exception):
    """Excepción base para el extractor de estilos."""
    pass


class FileAccessError(TypStyleError):
    """La ruta no existe, no es un contenedor ZIP válido o no se puede leer."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.code = code


class MissingPartError(TypStyleError):
    """El contenedor es un ZIP válido pero no incluye la parte requerida (word/styles.xml)."""

    def __init__(self, message: str, part: str):
        super().__init__(message)
        self.part = part


class CorruptPartError(TypStyleError):
    """La parte existe pero su descompresión no produce el tamaño declarado."""
    pass


class MalformedXmlError(TypStyleError):
    """El contenido descomprimido no es XML bien formado."""

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line


# Nombres por componente (lector de archivo / parser XML)
ArchiveOpenError = FileAccessError
EntryNotFoundError = MissingPartError
EntryReadError = CorruptPartError
XmlParseError = MalformedXmlError
