# src/headless/dom/finder.py
import logging
from typing import Callable, Generic, List, Optional, Type, TypeVar, TYPE_CHECKING

from headless.core.exceptions import ElementMatchError
from .core import HtmlElement
from .registry import ElementRegistry

if TYPE_CHECKING:
    from headless.core.pages import HtmlPage

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=HtmlElement)


class HtmlElementFinder(Generic[T]):
    """
    Searches a page (or part of it) for elements of one type.

    Every call walks the document again, so results always reflect the current tree.
    """

    def __init__(self, page: "HtmlPage", element_type: Type[T], scope=None):
        self.page = page
        self.element_type = element_type
        self.scope = scope if scope is not None else page.document

    def _elements(self) -> List[T]:
        tags = ElementRegistry.tags_for(self.element_type)
        if not tags:
            return []
        found = []
        for node in self.scope.find_all(tags):
            element = ElementRegistry.resolve(self.page, node)
            if isinstance(element, self.element_type):
                found.append(element)
        return found

    def all(self) -> List[T]:
        return self._elements()

    def all_matching(self, predicate: Callable[[T], bool]) -> List[T]:
        return [element for element in self._elements() if predicate(element)]

    def all_by_attribute(self, name: str, value: str) -> List[T]:
        """Elements whose attribute equals value, compared case-insensitively."""
        wanted = value.lower()
        return self.all_matching(lambda e: e.get_attribute_value(name).lower() == wanted)

    def _single(self, matches: List[T], description: str) -> T:
        if len(matches) != 1:
            raise ElementMatchError(f"{self.element_type.__name__} {description}", len(matches))
        return matches[0]

    def by_attribute(self, name: str, value: str) -> T:
        return self._single(self.all_by_attribute(name, value), f"[{name}={value}]")

    def by_id(self, element_id: str) -> T:
        return self._single(self.all_by_attribute("id", element_id), f"#{element_id}")

    def by_name(self, name: str) -> T:
        return self._single(self.all_by_attribute("name", name), f"[name={name}]")

    def first(self) -> Optional[T]:
        elements = self._elements()
        return elements[0] if elements else None
