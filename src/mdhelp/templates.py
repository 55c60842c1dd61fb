"""Default help templates and the registry that orders them."""
from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from .expander import validate_template

logger = logging.getLogger(__name__)

TEMPLATE_TITLE = "# **${name}** ${version}"

TEMPLATE_AUTHOR = "*by* ${author}"

TEMPLATE_USAGE = "**Usage:** `${name} [options]${positional-args}`"

TEMPLATE_POSITIONALS = """
${positional-lines
* `${key}` : ${help}
}
"""

TEMPLATE_OPTIONS = """
**Options:**

|short|long|value|description|
|:-:|:-|:-:|:-|
${option-lines
|${short}|${long}|${value}|${help}${possible_values}${default}|
}
"""

# Print order of the sections. "introduction" and "bugs" have no default
# template; callers fill them in.
TEMPLATE_KEYS: Tuple[str, ...] = (
    "title",
    "author",
    "introduction",
    "usage",
    "positionals",
    "options",
    "bugs",
)

DEFAULT_TEMPLATES: Mapping[str, str] = {
    "title": TEMPLATE_TITLE,
    "author": TEMPLATE_AUTHOR,
    "usage": TEMPLATE_USAGE,
    "positionals": TEMPLATE_POSITIONALS,
    "options": TEMPLATE_OPTIONS,
}


class TemplateRegistry:
    """
    Section templates keyed by name plus the explicit list of keys to print.

    A key in :attr:`order` without a template is skipped when printing, and a
    template whose key is not in :attr:`order` is never printed. Removing a
    template leaves :attr:`order` untouched.
    """

    def __init__(
        self,
        templates: Optional[Mapping[str, str]] = None,
        order: Optional[Sequence[str]] = None,
    ) -> None:
        self._templates: Dict[str, str] = {}
        for key, template in (templates or {}).items():
            self.set(key, template)
        self._order: List[str] = list(order) if order is not None else list(self._templates)

    @classmethod
    def with_defaults(cls) -> "TemplateRegistry":
        return cls(DEFAULT_TEMPLATES, TEMPLATE_KEYS)

    @property
    def order(self) -> List[str]:
        """The mutable print order; reorder, extend or shrink it in place."""
        return self._order

    @order.setter
    def order(self, keys: Sequence[str]) -> None:
        self._order[:] = list(keys)

    def set(self, key: str, template: str) -> None:
        """Add or replace the template for *key*; malformed templates raise ``TemplateError``."""
        validate_template(template)
        self._templates[key] = template

    def unset(self, key: str) -> None:
        self._templates.pop(key, None)

    def get(self, key: str) -> Optional[str]:
        return self._templates.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def keys(self) -> List[str]:
        return list(self._templates)

    def items(self) -> Iterator[Tuple[str, str]]:
        """Yield ``(key, template)`` in print order, skipping keys without a template."""
        for key in self._order:
            template = self._templates.get(key)
            if template is None:
                logger.debug("No template registered for section %r; skipping", key)
                continue
            yield key, template


__all__ = [
    "DEFAULT_TEMPLATES",
    "TEMPLATE_AUTHOR",
    "TEMPLATE_KEYS",
    "TEMPLATE_OPTIONS",
    "TEMPLATE_POSITIONALS",
    "TEMPLATE_TITLE",
    "TEMPLATE_USAGE",
    "TemplateRegistry",
]
