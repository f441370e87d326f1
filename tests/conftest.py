import io
import zipfile

import pytest

from typstyle.core.constants import OOXML_NAMESPACES

W_NS = OOXML_NAMESPACES["w"]

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types"></Types>'
)

# styles.xml mínimo al estilo de Word: docDefaults + latentStyles + 4 estilos
SAMPLE_STYLES_XML = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    f'<w:styles xmlns:w="{W_NS}">'
    '  <w:docDefaults>'
    '    <w:rPrDefault><w:rPr><w:sz w:val="24"/></w:rPr></w:rPrDefault>'
    '  </w:docDefaults>'
    '  <w:latentStyles w:defQFormat="0" w:count="1">'
    '    <w:lsdException w:name="Normal" w:qFormat="1"/>'
    '  </w:latentStyles>'
    '  <w:style w:type="paragraph" w:default="1" w:styleId="Normal">'
    '    <w:name w:val="Normal"/>'
    '    <w:qFormat/>'
    '    <w:pPr><w:spacing w:after="200" w:line="276" w:lineRule="auto"/><w:jc w:val="both"/></w:pPr>'
    '    <w:rPr><w:rFonts w:ascii="Calibri" w:hAnsi="Calibri"/><w:sz w:val="22"/><w:szCs w:val="22"/></w:rPr>'
    '  </w:style>'
    '  <w:style w:type="paragraph" w:styleId="Heading1">'
    '    <w:name w:val="heading 1"/>'
    '    <w:basedOn w:val="Normal"/>'
    '    <w:next w:val="Normal"/>'
    '    <w:qFormat/>'
    '    <w:pPr><w:keepNext/><w:outlineLvl w:val="0"/></w:pPr>'
    '    <w:rPr><w:rFonts w:asciiTheme="majorHAnsi" w:eastAsia="MS Gothic"/><w:b/><w:sz w:val="32"/></w:rPr>'
    '  </w:style>'
    '  <w:style w:type="character" w:default="1" w:styleId="DefaultParagraphFont">'
    '    <w:name w:val="Default Paragraph Font"/>'
    '    <w:uiPriority w:val="1"/>'
    '    <w:semiHidden/>'
    '    <w:unhideWhenUsed/>'
    '  </w:style>'
    '  <w:style w:type="table" w:default="1" w:styleId="TableNormal">'
    '    <w:name w:val="Normal Table"/>'
    '    <w:qFormat/>'
    '    <w:semiHidden/>'
    '  </w:style>'
    '</w:styles>'
).encode("utf-8")


def styles_xml(*style_fragments: str) -> bytes:
    """Envuelve fragmentos <w:style> en una raíz <w:styles> con el namespace w."""
    body = "".join(style_fragments)
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:styles xmlns:w="{W_NS}">{body}</w:styles>'
    ).encode("utf-8")


def create_dummy_docx(entries: dict, compression: int = zipfile.ZIP_DEFLATED) -> io.BytesIO:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=compression) as zf:
        zf.writestr("[Content_Types].xml", CONTENT_TYPES)
        for name, content in entries.items():
            zf.writestr(name, content)
    buffer.seek(0)
    return buffer


@pytest.fixture
def sample_styles_xml() -> bytes:
    return SAMPLE_STYLES_XML


@pytest.fixture
def build_styles_xml():
    return styles_xml


@pytest.fixture
def docx_buffer():
    return create_dummy_docx


@pytest.fixture
def write_docx(tmp_path):
    """Escribe un DOCX sintético en disco y devuelve su ruta."""

    def _write(entries: dict, filename: str = "sample.docx", compression: int = zipfile.ZIP_DEFLATED):
        target = tmp_path / filename
        target.write_bytes(create_dummy_docx(entries, compression=compression).getvalue())
        return target

    return _write


@pytest.fixture
def sample_docx(write_docx):
    return write_docx({"word/styles.xml": SAMPLE_STYLES_XML, "word/document.xml": f'<w:document xmlns:w="{W_NS}"/>'})
