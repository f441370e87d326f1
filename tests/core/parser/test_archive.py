import errno
import io
import zipfile

import pytest

from typstyle.core.exceptions import (
    ArchiveOpenError,
    CorruptPartError,
    EntryNotFoundError,
    FileAccessError,
    MissingPartError,
)
from typstyle.core.parser.archive import DocxArchive, read_styles_part


class TestDocxArchiveOpen:

    def test_missing_file(self, tmp_path):
        """Una ruta inexistente es un error de acceso con el errno original."""
        with pytest.raises(FileAccessError) as excinfo:
            DocxArchive(tmp_path / "nonexistent.docx")
        assert excinfo.value.code == errno.ENOENT
        assert "nonexistent.docx" in str(excinfo.value)

    def test_not_a_zip(self, tmp_path):
        fake = tmp_path / "plain.docx"
        fake.write_text("esto no es un zip", encoding="utf-8")
        with pytest.raises(FileAccessError):
            DocxArchive(fake)

    def test_directory_is_not_readable(self, tmp_path):
        with pytest.raises(FileAccessError) as excinfo:
            DocxArchive(tmp_path)
        assert excinfo.value.code is not None

    def test_component_alias(self, tmp_path):
        assert ArchiveOpenError is FileAccessError
        with pytest.raises(ArchiveOpenError):
            DocxArchive(tmp_path / "missing.docx")


class TestDocxArchiveRead:

    def test_read_entry_from_buffer(self, docx_buffer, sample_styles_xml):
        with DocxArchive(docx_buffer({"word/styles.xml": sample_styles_xml})) as archive:
            assert archive.has_entry("word/styles.xml")
            assert archive.read_entry("word/styles.xml") == sample_styles_xml

    def test_read_entry_from_path(self, write_docx):
        path = write_docx({"word/styles.xml": b"<styles/>"})
        with DocxArchive(str(path)) as archive:
            assert archive.read_entry("word/styles.xml") == b"<styles/>"

    def test_missing_entry(self, docx_buffer):
        with DocxArchive(docx_buffer({"word/document.xml": b"<document/>"})) as archive:
            with pytest.raises(MissingPartError) as excinfo:
                archive.read_entry("word/styles.xml")
        assert excinfo.value.part == "word/styles.xml"
        assert EntryNotFoundError is MissingPartError

    def test_corrupt_entry(self, docx_buffer):
        """Un byte alterado en una entrada sin comprimir rompe el CRC."""
        original = b"<styles>CONTENIDO-ORIGINAL</styles>"
        raw = docx_buffer({"word/styles.xml": original}, compression=zipfile.ZIP_STORED).getvalue()
        tampered = raw.replace(original, b"<styles>CONTENIDO-ALTERADO</styles>")
        assert tampered != raw

        with DocxArchive(io.BytesIO(tampered)) as archive:
            with pytest.raises(CorruptPartError):
                archive.read_entry("word/styles.xml")

    def test_short_read_is_corruption(self, docx_buffer, monkeypatch):
        """Si el tamaño declarado no coincide con lo leído, la entrada está corrupta."""
        with DocxArchive(docx_buffer({"word/styles.xml": b"<styles/>"})) as archive:
            info = archive._zip_file.getinfo("word/styles.xml")
            real_open = archive._zip_file.open

            class _Truncated:
                def __init__(self, handle):
                    self._handle = handle

                def read(self):
                    return self._handle.read()[:-2]

                def __enter__(self):
                    return self

                def __exit__(self, *exc):
                    self._handle.close()

            monkeypatch.setattr(archive._zip_file, "open", lambda member: _Truncated(real_open(member)))
            with pytest.raises(CorruptPartError) as excinfo:
                archive.read_entry("word/styles.xml")
            assert str(info.file_size) in str(excinfo.value)


class TestDocxArchiveLifecycle:

    def test_closed_after_context(self, docx_buffer):
        with DocxArchive(docx_buffer({"word/styles.xml": b"<styles/>"})) as archive:
            pass
        with pytest.raises(ValueError):
            archive.read_entry("word/styles.xml")

    def test_released_when_entry_missing(self, docx_buffer, monkeypatch):
        closed = []
        real_close = DocxArchive.close

        def tracking_close(self):
            closed.append(True)
            real_close(self)

        monkeypatch.setattr(DocxArchive, "close", tracking_close)
        with pytest.raises(MissingPartError):
            read_styles_part(docx_buffer({"word/document.xml": b"<document/>"}))
        assert closed == [True]

    def test_read_styles_part(self, docx_buffer, sample_styles_xml):
        assert read_styles_part(docx_buffer({"word/styles.xml": sample_styles_xml})) == sample_styles_xml
