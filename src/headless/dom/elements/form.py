import logging
from typing import Dict, List, Optional, Type, TYPE_CHECKING

from headless.core.exceptions import ArgumentError
from headless.core.utils.url_utils import UrlUtils
from ..core import ElementDefinition, HtmlElement, HtmlFormElement
from ..registry import ElementRegistry

if TYPE_CHECKING:
    from headless.core.pages import Page

logger = logging.getLogger(__name__)


class HtmlForm(HtmlElement):
    """
    Exposes the fields of a form tag and submits them through the owning browser.
    """

    @property
    def action(self) -> str:
        return self.get_attribute_value("action")

    @property
    def method(self) -> str:
        return self.get_attribute_value("method")

    @property
    def target(self) -> str:
        return self.get_attribute_value("target")

    @property
    def post_location(self) -> str:
        """
        The URL the form submits to: the page location when the form has no action,
        otherwise the action resolved against the page location.
        """
        action = self.action
        if not action.strip():
            return self.page.location
        return UrlUtils.resolve(self.page.location, action.strip())

    @property
    def fields(self) -> List[HtmlFormElement]:
        """Every form field below this form, in document order."""
        tags = ElementRegistry.tags_for(HtmlFormElement)
        fields = []
        for node in self.node.find_all(tags):
            element = ElementRegistry.resolve(self.page, node)
            if isinstance(element, HtmlFormElement):
                fields.append(element)
        return fields

    def build_post_parameters(self, source: Optional[HtmlElement] = None) -> Dict[str, str]:
        """
        Builds the name/value pairs of a submission. A later field with the same name
        overwrites an earlier one; the source control is added last.
        """
        parameters: Dict[str, str] = {}
        for field in self.fields:
            if field.include_in_submission:
                parameters[field.name] = field.value

        if isinstance(source, HtmlFormElement) and source.name:
            parameters[source.name] = source.value

        return parameters

    def submit(
            self,
            source: HtmlElement,
            expected_status: int = 200,
            page_type: Optional[Type["Page"]] = None,
    ) -> "Page":
        """
        Posts the form as if `source` had been clicked.

        Raises:
            ArgumentError: No source control was given.
        """
        if source is None:
            raise ArgumentError("source")

        parameters = self.build_post_parameters(source)
        location = self.post_location
        logger.debug("Submitting form '%s' to %s with %d parameters.", self.name, location, len(parameters))

        if page_type is None:
            return self.page.browser.post_to(parameters, location, expected_status)
        return self.page.browser.post_to(parameters, location, expected_status, page_type=page_type)


DEFINITIONS = [ElementDefinition(tag_name="form", model=HtmlForm)]
