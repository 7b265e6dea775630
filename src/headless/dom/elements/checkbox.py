from typing import Optional

from ..core import ElementDefinition, HtmlFormElement


class HtmlCheckBox(HtmlFormElement):
    """A checkbox; it only takes part in a submission while it is checked."""

    @property
    def checked(self) -> bool:
        return self.has_attribute("checked")

    @checked.setter
    def checked(self, value: bool) -> None:
        self.set_attribute_value("checked", "checked" if value else None)

    @property
    def value(self) -> str:
        # Browsers submit "on" for a checkable input without a value attribute
        if self.has_attribute("value"):
            return self.get_attribute_value("value")
        return "on"

    @value.setter
    def value(self, value: Optional[str]) -> None:
        self.set_attribute_value("value", "" if value is None else value)

    @property
    def include_in_submission(self) -> bool:
        return self.checked and super().include_in_submission


class HtmlRadioButton(HtmlCheckBox):
    """A radio button; checking it clears the other buttons of its group."""

    @property
    def checked(self) -> bool:
        return self.has_attribute("checked")

    @checked.setter
    def checked(self, value: bool) -> None:
        if value and self.name:
            scope = self.form or self.node.find_parent("html") or self.node.parent
            for other in scope.find_all("input", attrs={"name": self.name}):
                if other is not self.node and str(other.get("type", "")).lower() == "radio":
                    if other.has_attr("checked"):
                        del other["checked"]
        self.set_attribute_value("checked", "checked" if value else None)


DEFINITIONS = [
    ElementDefinition("input", HtmlCheckBox, "type", "checkbox"),
    ElementDefinition("input", HtmlRadioButton, "type", "radio"),
]
