from typing import List, Optional

from lxml import etree

from typstyle.core.exceptions import MalformedXmlError


def _build_parser() -> etree.XMLParser:
    # Configuración de Seguridad del Parser XML
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        huge_tree=False,
        recover=False,
        remove_comments=False,
    )


def parse_xml(data: bytes, label: str = "styles.xml") -> etree._ElementTree:
    """
    Parsea un buffer de bytes en un árbol etree de solo lectura.

    La codificación la detecta lxml a partir del prólogo/BOM; no se asume UTF-8.
    """
    if not data:
        raise MalformedXmlError(f"El contenido de '{label}' está vacío.")

    try:
        root = etree.fromstring(data, parser=_build_parser())
    except etree.XMLSyntaxError as e:
        raise MalformedXmlError(f"Error de sintaxis XML en '{label}': {e}", line=e.lineno) from e
    except ValueError as e:
        raise MalformedXmlError(f"Contenido XML inválido en '{label}': {e}") from e

    return etree.ElementTree(root)


def local_name(node: etree._Element) -> str:
    """Nombre local de un elemento ('w:rPr' -> 'rPr'). Comentarios e instrucciones devuelven ''."""
    if not isinstance(node.tag, str):
        return ""
    return etree.QName(node).localname


def local_attribute(node: etree._Element, name: str) -> Optional[str]:
    """
    Busca un atributo por nombre local, con o sin namespace (w:val o val).
    Devuelve None si no existe.
    """
    for key, value in node.attrib.items():
        if etree.QName(key).localname == name:
            return str(value)
    return None


def element_children(node: etree._Element) -> List[etree._Element]:
    """Hijos directos que son elementos, en orden de documento."""
    return [child for child in node if isinstance(child.tag, str)]
