from ..core import ElementDefinition, HtmlFormElement


class HtmlButton(HtmlFormElement):
    """
    A control that submits its form. Its name/value pair is only sent when it is
    the control the submission originates from.
    """

    @property
    def include_in_submission(self) -> bool:
        return False

    @property
    def button_type(self) -> str:
        declared = self.get_attribute_value("type").strip().lower()
        if declared:
            return declared
        # <button> defaults to submit
        return "submit"

    @property
    def text(self) -> str:
        if self.tag_name == "input":
            return self.get_attribute_value("value")
        return super().text


DEFINITIONS = [
    ElementDefinition(tag_name="button", model=HtmlButton),
    ElementDefinition("input", HtmlButton, "type", "submit"),
    ElementDefinition("input", HtmlButton, "type", "button"),
    ElementDefinition("input", HtmlButton, "type", "reset"),
    ElementDefinition("input", HtmlButton, "type", "image"),
]
