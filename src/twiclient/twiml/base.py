"""
TwiML element base.

Every verb and noun is a frozen model. Non-empty fields become XML
attributes (camelCase, in field declaration order), the field named by
``text_field`` becomes the element text and ``children`` become nested
elements.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional
from xml.etree import ElementTree

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def _attr_value(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Element(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    tag: ClassVar[str] = ""
    text_field: ClassVar[Optional[str]] = None

    def to_element(self) -> ElementTree.Element:
        elem = ElementTree.Element(self.tag or type(self).__name__)
        for name, info in type(self).model_fields.items():
            if name == self.text_field or name == "children":
                continue
            value = _attr_value(getattr(self, name))
            if value is not None:
                elem.set(info.alias or to_camel(name), value)
        if self.text_field is not None:
            elem.text = _attr_value(getattr(self, self.text_field))
        for child in getattr(self, "children", ()):
            elem.append(child.to_element())
        return elem

    def to_xml(self) -> str:
        return to_xml(self)


def to_xml(element: Element) -> str:
    """Serialize one element (no XML declaration)."""
    return ElementTree.tostring(element.to_element(), encoding="unicode")
