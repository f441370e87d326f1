import logging
from typing import List, Optional

from lxml import etree

from typstyle.core.constants import (
    ATTR_TYPE,
    ATTR_VAL,
    FONT_SLOT_KEY_PREFIX,
    FONT_SLOT_PRIORITY,
    PROPERTY_CONTAINERS,
    TAG_FONT_SIZE,
    TAG_NAME,
    TAG_RUN_FONTS,
    TAG_RUN_PROPERTIES,
)
from .style_models import ExtractionOptions, PropertyKeyStyle, StyleRecord
from .style_selector import select_style_nodes
from .xml_engine import element_children, local_attribute, local_name

logger = logging.getLogger(__name__)

# Propiedades de rPr que se elevan a font_name / font_size y nunca llegan a properties
_LIFTED_RUN_PROPERTIES = (TAG_RUN_FONTS, TAG_FONT_SIZE)


class StyleParser:
    """
    Convierte nodos <w:style> en StyleRecord planos.

    Ningún paso lanza excepciones por datos ausentes: un estilo incompleto produce
    cadenas vacías y no impide extraer el resto del documento. Todos los valores son
    str independientes del árbol lxml.
    """

    def __init__(self, options: Optional[ExtractionOptions] = None):
        self.options = options or ExtractionOptions()

    def parse_styles_xml(self, xml_tree: etree._ElementTree) -> List[StyleRecord]:
        """Extrae los estilos seleccionados de un árbol de styles.xml, en orden de documento."""
        nodes = select_style_nodes(xml_tree, quick_format_only=self.options.quick_format_only)
        records = [self.parse_style(node) for node in nodes]
        logger.debug(f"{len(records)} estilos convertidos con {self.options}")
        return records

    def parse_style(self, style_node: etree._Element) -> StyleRecord:
        if style_node is None:
            raise ValueError("parse_style requiere un nodo <w:style>, se recibió None.")

        record = StyleRecord(
            name=self._extract_name(style_node),
            type=local_attribute(style_node, ATTR_TYPE) or "",
        )

        if self.options.include_style_attributes:
            for key, value in style_node.attrib.items():
                attr_name = etree.QName(key).localname
                if attr_name != ATTR_TYPE:
                    record.properties[attr_name] = str(value)

        for child in element_children(style_node):
            tag = local_name(child)

            if tag in PROPERTY_CONTAINERS and self.options.flatten_containers:
                self._flatten_container(child, tag, record)
                if tag == TAG_RUN_PROPERTIES:
                    self._extract_fonts(child, record)
            elif tag == TAG_RUN_PROPERTIES:
                # Sin aplanado, de rPr solo interesan las fuentes
                self._extract_fonts(child, record)
            else:
                record.properties[tag] = self._property_value(child)

        return record

    def _extract_name(self, style_node: etree._Element) -> str:
        for child in element_children(style_node):
            if local_name(child) == TAG_NAME:
                return local_attribute(child, ATTR_VAL) or ""
        return ""

    def _flatten_container(self, container: etree._Element, container_tag: str, record: StyleRecord):
        """Sube los hijos de rPr/pPr al mapa plano de propiedades."""
        for prop in element_children(container):
            tag = local_name(prop)
            if container_tag == TAG_RUN_PROPERTIES and tag in _LIFTED_RUN_PROPERTIES:
                continue
            record.properties[self._property_key(container_tag, tag)] = self._property_value(prop)

    def _extract_fonts(self, run_properties: etree._Element, record: StyleRecord):
        for prop in element_children(run_properties):
            tag = local_name(prop)

            if tag == TAG_RUN_FONTS:
                if self.options.expand_font_slots:
                    for slot in FONT_SLOT_PRIORITY:
                        value = local_attribute(prop, slot)
                        if value:
                            record.properties[f"{FONT_SLOT_KEY_PREFIX}:{slot}"] = value

                # ascii > hAnsi > eastAsia; el primero no vacío gana
                if not record.font_name:
                    for slot in FONT_SLOT_PRIORITY:
                        value = local_attribute(prop, slot)
                        if value:
                            record.font_name = value
                            break

            elif tag == TAG_FONT_SIZE:
                size = local_attribute(prop, ATTR_VAL)
                if size is not None:
                    record.font_size = size

    def _property_key(self, container_tag: str, tag: str) -> str:
        if self.options.key_style == PropertyKeyStyle.SCOPED:
            return f"{container_tag}:{tag}"
        return tag

    @staticmethod
    def _property_value(node: etree._Element) -> str:
        """w:val si existe; si no, el texto concatenado del nodo ('' si no hay ninguno)."""
        val = local_attribute(node, ATTR_VAL)
        if val is not None:
            return val
        # string() devuelve un _ElementUnicodeResult enlazado al árbol; se copia a str
        return str(node.xpath("string()"))
