import logging
from typing import List

from lxml import etree

from typstyle.core.constants import TAG_QUICK_FORMAT, TAG_SEMI_HIDDEN, TAG_STYLE
from .xml_engine import element_children, local_name

logger = logging.getLogger(__name__)


def _has_descendant(node: etree._Element, name: str) -> bool:
    return any(local_name(d) == name for d in node.iterdescendants())


def is_gallery_style(node: etree._Element) -> bool:
    """
    Filtro de galería: el estilo está promovido (qFormat) y no está oculto (semiHidden).
    Es una política opcional del selector, no una regla estructural de OOXML.
    """
    return _has_descendant(node, TAG_QUICK_FORMAT) and not _has_descendant(node, TAG_SEMI_HIDDEN)


def select_style_nodes(tree: etree._ElementTree, quick_format_only: bool = False) -> List[etree._Element]:
    """
    Devuelve los nodos <w:style> hijos directos de la raíz, en orden de documento.

    Solo se recorren los hijos directos: los estilos nunca se anidan y bajar más
    recogería elementos que no son definiciones. Con quick_format_only=True se
    aplica el filtro de galería (ver is_gallery_style).
    """
    root = tree.getroot()
    if root is None:
        raise ValueError("El documento no tiene elemento raíz.")

    candidates = [node for node in element_children(root) if local_name(node) == TAG_STYLE]
    if not quick_format_only:
        logger.debug(f"{len(candidates)} nodos de estilo seleccionados")
        return candidates

    selected = [node for node in candidates if is_gallery_style(node)]
    logger.debug(
        f"{len(selected)} nodos de estilo seleccionados "
        f"({len(candidates) - len(selected)} descartados por el filtro qFormat/semiHidden)"
    )
    return selected
