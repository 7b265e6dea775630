from typing import List, Optional

from bs4 import Tag

from headless.core.exceptions import ArgumentError
from ..core import ElementDefinition, HtmlFormElement


def _option_value(option: Tag) -> str:
    value = option.get("value")
    if value is None:
        return option.get_text(" ", strip=True)
    return str(value)


class HtmlSelect(HtmlFormElement):
    """A single-choice drop down list."""

    @property
    def options(self) -> List[Tag]:
        return self.node.find_all("option")

    @property
    def option_values(self) -> List[str]:
        return [_option_value(option) for option in self.options]

    @property
    def selected_option(self) -> Optional[Tag]:
        options = self.options
        for option in options:
            if option.has_attr("selected"):
                return option
        # Without an explicit selection the first option is the value
        return options[0] if options else None

    @property
    def value(self) -> str:
        option = self.selected_option
        return _option_value(option) if option is not None else ""

    @value.setter
    def value(self, value: Optional[str]) -> None:
        wanted = "" if value is None else str(value)
        options = self.options
        match = next((option for option in options if _option_value(option) == wanted), None)
        if match is None:
            raise ArgumentError(
                "value", f"The select '{self.name}' has no option with the value '{wanted}'."
            )
        for option in options:
            if option.has_attr("selected"):
                del option["selected"]
        match["selected"] = "selected"


DEFINITIONS = [ElementDefinition(tag_name="select", model=HtmlSelect)]
