import errno
import logging
import zipfile
import zlib
from pathlib import Path
from typing import BinaryIO, Optional, Union

from typstyle.core.constants import PATH_STYLES
from typstyle.core.exceptions import CorruptPartError, FileAccessError, MissingPartError

logger = logging.getLogger(__name__)

DocxSource = Union[str, Path, BinaryIO]


class DocxArchive:
    """
    Lector de solo lectura del contenedor ZIP de un DOCX.

    El ZIP se abre al construir el objeto y se libera en close() / __exit__,
    también cuando la lectura de una parte lanza una excepción:

        with DocxArchive("informe.docx") as archive:
            data = archive.read_entry("word/styles.xml")
    """

    def __init__(self, source: DocxSource):
        self._source = source
        self._zip_file: Optional[zipfile.ZipFile] = None
        self._open_zip()

    @classmethod
    def open(cls, source: DocxSource) -> "DocxArchive":
        return cls(source)

    @property
    def source_label(self) -> str:
        if isinstance(self._source, (str, Path)):
            return str(self._source)
        return getattr(self._source, "name", "<buffer>")

    def _open_zip(self):
        """Abre el contenedor ZIP validando que sea un archivo accesible."""
        try:
            self._zip_file = zipfile.ZipFile(self._source, "r")
        except zipfile.BadZipFile as e:
            raise FileAccessError(f"El archivo no es un contenedor ZIP válido: {self.source_label} ({e})") from e
        except FileNotFoundError as e:
            raise FileAccessError(f"No se encontró el archivo: {self.source_label}", code=e.errno) from e
        except OSError as e:
            # Permisos, directorios, dispositivos ilegibles...
            code = e.errno if e.errno is not None else errno.EIO
            raise FileAccessError(f"No se pudo abrir {self.source_label}: {e.strerror or e}", code=code) from e

        logger.debug(f"Contenedor abierto: {self.source_label} ({len(self._zip_file.infolist())} entradas)")

    def has_entry(self, name: str) -> bool:
        return name in self._zip_file.namelist()

    def read_entry(self, name: str) -> bytes:
        """
        Devuelve el contenido descomprimido de una entrada del ZIP.

        Raises:
            MissingPartError: la entrada no existe en el paquete.
            CorruptPartError: la descompresión falla o no produce el tamaño declarado.
        """
        if self._zip_file is None:
            raise ValueError("El contenedor ya fue cerrado.")

        try:
            info = self._zip_file.getinfo(name)
        except KeyError as e:
            raise MissingPartError(
                f"El archivo requerido '{name}' no existe en el paquete DOCX.", part=name
            ) from e

        try:
            with self._zip_file.open(info) as f:
                data = f.read()
        except (zipfile.BadZipFile, zlib.error, EOFError) as e:
            raise CorruptPartError(f"La entrada '{name}' está corrupta: {e}") from e
        except NotImplementedError as e:
            raise CorruptPartError(f"Compresión no soportada en '{name}': {e}") from e
        except RuntimeError as e:
            # zipfile lanza RuntimeError para entradas cifradas
            raise FileAccessError(f"No se puede leer '{name}' en {self.source_label}: {e}") from e

        if len(data) != info.file_size:
            raise CorruptPartError(
                f"Lectura incompleta de '{name}': {len(data)} de {info.file_size} bytes declarados."
            )

        logger.debug(f"Entrada '{name}' leída ({len(data)} bytes)")
        return data

    def close(self):
        if self._zip_file:
            self._zip_file.close()
            self._zip_file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


def read_styles_part(source: DocxSource, part: str = PATH_STYLES) -> bytes:
    """Abre el DOCX, lee la parte de estilos y libera el contenedor."""
    with DocxArchive(source) as archive:
        return archive.read_entry(part)
