import re
from typing import Optional

from ..core import ElementDefinition, HtmlFormElement

# Browsers drop a single line break directly after <textarea>, it is not part of the value.
_LEADING_LINE_BREAK = re.compile(r"^\r?\n")

TEXT_INPUT_TYPES = (
    "color", "date", "datetime", "datetime-local", "email", "hidden", "month",
    "number", "password", "range", "search", "tel", "text", "time", "url", "week",
)


class HtmlInput(HtmlFormElement):
    """
    Represents a text-like input field or a textarea.

    For a textarea the value is the element content rather than the value attribute.
    """

    @property
    def is_text_area(self) -> bool:
        return self.tag_name == "textarea"

    @property
    def input_type(self) -> str:
        """The declared input type; an input without a type is a text input."""
        if self.is_text_area:
            return "textarea"
        return self.get_attribute_value("type").strip().lower() or "text"

    @property
    def value(self) -> str:
        if self.is_text_area:
            raw = "".join(self.node.strings)
            return _LEADING_LINE_BREAK.sub("", raw, count=1)
        return self.get_attribute_value("value")

    @value.setter
    def value(self, value: Optional[str]) -> None:
        if self.is_text_area:
            self.node.string = "\n" + ("" if value is None else str(value))
        else:
            self.set_attribute_value("value", "" if value is None else value)


DEFINITIONS = (
    [ElementDefinition(tag_name="input", model=HtmlInput)]
    + [ElementDefinition("input", HtmlInput, "type", input_type) for input_type in TEXT_INPUT_TYPES]
    + [ElementDefinition(tag_name="textarea", model=HtmlInput)]
)
