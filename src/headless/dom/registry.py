# src/headless/dom/registry.py
import importlib
import pkgutil
import logging
from typing import Dict, List, Optional, Tuple, Type, TYPE_CHECKING

from bs4 import Tag

from headless.core.exceptions import ConfigurationError, UnsupportedElementError
from .core import ElementDefinition, HtmlElement

if TYPE_CHECKING:
    from headless.core.pages import HtmlPage

logger = logging.getLogger(__name__)


class ElementRegistry:
    """
    Central registry mapping markup nodes to typed element classes.

    Loads the declarative DEFINITIONS tables from the modules of the
    'headless.dom.elements' package once per process and is read-only afterwards.
    """

    _definitions: Dict[str, List[ElementDefinition]] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Registers the element definitions of every module in 'headless.dom.elements'.

        Raises:
            ConfigurationError: Two definitions claim the same tag/attribute/value
                for different element classes.
        """
        if cls._loaded:
            return

        import headless.dom.elements as elements_pkg

        definitions: Dict[str, List[ElementDefinition]] = {}
        seen: Dict[Tuple, ElementDefinition] = {}

        for _, name, _ in sorted(pkgutil.iter_modules(elements_pkg.__path__), key=lambda m: m.name):
            module = importlib.import_module(f"headless.dom.elements.{name}")
            for defn in getattr(module, "DEFINITIONS", ()):
                existing = seen.get(defn.key)
                if existing is not None:
                    if existing.model is defn.model:
                        continue
                    raise ConfigurationError(
                        f"Conflicting element definitions {existing!r} and {defn!r}."
                    )
                seen[defn.key] = defn
                definitions.setdefault(defn.tag_name, []).append(defn)
            logger.debug("Element module loaded: %s", name)

        cls._definitions = definitions
        cls._loaded = True
        logger.debug("ElementRegistry discovered %d definitions for %d tags.", len(seen), len(definitions))

    @classmethod
    def reset(cls) -> None:
        """Forgets all definitions; the next lookup rediscovers them."""
        cls._definitions = {}
        cls._loaded = False

    @classmethod
    def register(cls, definition: ElementDefinition) -> None:
        """Adds a definition outside the elements package, e.g. for application-specific widgets."""
        cls.discover()
        for existing in cls._definitions.get(definition.tag_name, []):
            if existing.key == definition.key and existing.model is not definition.model:
                raise ConfigurationError(
                    f"Conflicting element definitions {existing!r} and {definition!r}."
                )
            if existing.key == definition.key:
                return
        cls._definitions.setdefault(definition.tag_name, []).append(definition)

    @classmethod
    def get_definitions(cls, tag_name: Optional[str] = None) -> List[ElementDefinition]:
        cls.discover()
        if tag_name is not None:
            return list(cls._definitions.get(tag_name.lower(), []))
        return [defn for defns in cls._definitions.values() for defn in defns]

    @classmethod
    def find_definition(cls, node: Tag) -> ElementDefinition:
        """
        Selects the most specific definition for the node.

        Attribute-qualified matches win over tag-only matches; more than one match
        at the winning level means the registry itself is inconsistent.
        """
        cls.discover()
        tag_name = (node.name or "").lower()
        candidates = [defn for defn in cls._definitions.get(tag_name, []) if defn.matches(node)]

        qualified = [defn for defn in candidates if defn.is_qualified]
        chosen = qualified or [defn for defn in candidates if not defn.is_qualified]

        if not chosen:
            attribute_value = node.get("type") if isinstance(node.get("type"), str) else None
            raise UnsupportedElementError(tag_name, attribute_value)

        if len(chosen) > 1:
            raise ConfigurationError(
                f"The element <{tag_name}> matches several definitions: {chosen!r}."
            )

        return chosen[0]

    @classmethod
    def resolve(cls, page: "HtmlPage", node: Tag) -> HtmlElement:
        """Creates the typed element wrapper for the node."""
        definition = cls.find_definition(node)
        return definition.model(page, node)

    @classmethod
    def tags_for(cls, element_type: Type[HtmlElement]) -> List[str]:
        """Returns the tags that can resolve to element_type or one of its subclasses."""
        cls.discover()
        return sorted(
            tag_name for tag_name, defns in cls._definitions.items()
            if any(issubclass(defn.model, element_type) for defn in defns)
        )
