from typing import Optional, Type, TYPE_CHECKING

from headless.core.utils.url_utils import UrlUtils
from ..core import ElementDefinition, HtmlElement

if TYPE_CHECKING:
    from headless.core.pages import Page


class HtmlLink(HtmlElement):
    """An anchor; clicking it browses to its target."""

    @property
    def href(self) -> str:
        return self.get_attribute_value("href")

    @property
    def location(self) -> str:
        """The link target resolved against the page location."""
        href = self.href.strip()
        if not href:
            return self.page.location
        return UrlUtils.resolve(self.page.location, href)

    def click(self, expected_status: int = 200, page_type: Optional[Type["Page"]] = None) -> "Page":
        if page_type is None:
            return self.page.browser.browse_to(self.location, expected_status)
        return self.page.browser.browse_to(self.location, expected_status, page_type=page_type)


DEFINITIONS = [ElementDefinition(tag_name="a", model=HtmlLink)]
