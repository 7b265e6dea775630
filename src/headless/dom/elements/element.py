from ..core import ElementDefinition, HtmlElement

# Structural and text-level tags that carry no behaviour beyond attribute and text access.
GENERIC_TAGS = (
    "html", "head", "body", "title", "meta", "script", "style", "noscript",
    "div", "span", "p", "pre", "br", "hr", "img",
    "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "footer", "nav", "main", "section", "article", "aside",
    "ul", "ol", "li", "dl", "dt", "dd",
    "table", "thead", "tbody", "tfoot", "tr", "th", "td", "caption",
    "fieldset", "legend", "label", "option", "optgroup",
    "strong", "em", "b", "i", "u", "small", "code",
)

DEFINITIONS = [ElementDefinition(tag_name=tag, model=HtmlElement) for tag in GENERIC_TAGS]
