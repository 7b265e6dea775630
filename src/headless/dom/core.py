# src/headless/dom/core.py
from typing import Any, Optional, Type, TYPE_CHECKING

from bs4 import Tag

from headless.core.exceptions import ArgumentError

if TYPE_CHECKING:
    from headless.core.pages import HtmlPage


class HtmlElement:
    """
    A transient, typed view over one node of a page's parsed document.

    The element holds no state of its own: every accessor reads from (or writes to)
    the underlying bs4 Tag, so two wrappers over the same node always agree.
    """

    def __init__(self, page: "HtmlPage", node: Tag):
        if page is None:
            raise ArgumentError("page")
        if node is None:
            raise ArgumentError("node")
        self._page = page
        self._node = node

    @property
    def page(self) -> "HtmlPage":
        """The page whose document contains this element."""
        return self._page

    @property
    def node(self) -> Tag:
        return self._node

    @property
    def tag_name(self) -> str:
        return self._node.name.lower()

    def get_attribute_value(self, name: str) -> str:
        """Returns the attribute value, or an empty string when the attribute is absent."""
        value = self._node.get(name.lower())
        if value is None:
            return ""
        if isinstance(value, (list, tuple)):
            # bs4 splits multi-valued attributes such as class
            return " ".join(value)
        return str(value)

    def has_attribute(self, name: str) -> bool:
        return self._node.has_attr(name.lower())

    def set_attribute_value(self, name: str, value: Optional[str]) -> None:
        """Sets an attribute; None removes it."""
        name = name.lower()
        if value is None:
            if self._node.has_attr(name):
                del self._node[name]
            return
        self._node[name] = str(value)

    @property
    def id(self) -> str:
        return self.get_attribute_value("id")

    @property
    def name(self) -> str:
        return self.get_attribute_value("name")

    @property
    def text(self) -> str:
        """The visible text of the element, whitespace collapsed."""
        return self._node.get_text(" ", strip=True)

    @property
    def inner_html(self) -> str:
        return self._node.decode_contents()

    @property
    def value(self) -> str:
        return self.get_attribute_value("value")

    @value.setter
    def value(self, value: Optional[str]) -> None:
        self.set_attribute_value("value", "" if value is None else value)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, HtmlElement):
            return NotImplemented
        return type(self) is type(other) and self._node is other._node

    def __hash__(self) -> int:
        return hash((type(self), id(self._node)))

    def __repr__(self) -> str:
        ident = self.id or self.name
        return f"<{type(self).__name__} {self.tag_name}{'#' + ident if ident else ''}>"


class HtmlFormElement(HtmlElement):
    """
    An element that contributes a name/value pair when its form is submitted
    (input, select, textarea, button).
    """

    @property
    def include_in_submission(self) -> bool:
        """Whether the element is part of the parameters of an ordinary submission."""
        return bool(self.name) and not self.has_attribute("disabled")

    @property
    def form(self) -> Optional[Tag]:
        """The enclosing form node, if any."""
        return self._node.find_parent("form")


class ElementDefinition:
    """
    Configuration object binding an HTML tag, optionally narrowed by an attribute value,
    to the element class that represents it.
    """

    def __init__(
            self,
            tag_name: str,
            model: Type[HtmlElement],
            attribute_name: Optional[str] = None,
            attribute_value: Optional[str] = None,
    ):
        if (attribute_name is None) != (attribute_value is None):
            raise ValueError("attribute_name and attribute_value must be given together")

        self.tag_name = tag_name.lower()
        self.model = model
        self.attribute_name = attribute_name.lower() if attribute_name else None
        self.attribute_value = attribute_value.lower() if attribute_value is not None else None

    @property
    def is_qualified(self) -> bool:
        """True when the definition requires an attribute value in addition to the tag."""
        return self.attribute_name is not None

    @property
    def key(self) -> tuple:
        return self.tag_name, self.attribute_name, self.attribute_value

    def matches(self, node: Tag) -> bool:
        if (node.name or "").lower() != self.tag_name:
            return False
        if not self.is_qualified:
            return True

        actual = node.get(self.attribute_name)
        if actual is None:
            return False
        if isinstance(actual, (list, tuple)):
            actual = " ".join(actual)
        return str(actual).strip().lower() == self.attribute_value

    def __repr__(self) -> str:
        if self.is_qualified:
            return f"ElementDefinition({self.tag_name}[{self.attribute_name}={self.attribute_value}] -> {self.model.__name__})"
        return f"ElementDefinition({self.tag_name} -> {self.model.__name__})"
