"""Variable substitution and conditional blocks for template text.

Two constructs are recognised:

* ``{{ name }}`` is replaced by the value of ``name`` when the variable is
  known, and left untouched otherwise, so template files may carry literal
  double-brace text (e.g. Vue interpolations).
* ``{{#if name}} ... {{/if}}`` keeps its inner content when ``name`` is
  truthy and is removed entirely otherwise. Blocks cannot nest and have no
  ``else`` branch.

Conditionals are resolved before substitution, against the variable map
itself, so substituted values can never be mistaken for block syntax.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

from vuescaffold.engine.variables import TemplateValue, TemplateVariables

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")
_CONDITIONAL = re.compile(r"\{\{#if\s+(\w+)\s*\}\}(.*?)\{\{/if\}\}", re.DOTALL)
_OPENING_TAG = re.compile(r"\{\{#if\s+(\w+)\s*\}\}")


def format_value(value: TemplateValue) -> str:
    """Canonical text form of a template value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def find_unterminated_conditionals(template: str) -> list[str]:
    """Return the variable names of ``{{#if}}`` tags that have no ``{{/if}}``."""
    remainder = _CONDITIONAL.sub("", template)
    return _OPENING_TAG.findall(remainder)


class TemplateEngine:
    """Rewrites template text against an installed variable map."""

    def __init__(self, variables: Mapping[str, TemplateValue] | None = None) -> None:
        self._variables: TemplateVariables = dict(variables or {})

    def set_variables(self, variables: Mapping[str, TemplateValue]) -> None:
        """Install *variables*, replacing any previous map."""
        self._variables = dict(variables)

    def get_variables(self) -> TemplateVariables:
        return dict(self._variables)

    def render(self, template: str, *, source: str | None = None) -> str:
        """
        Rewrite *template*: conditional blocks first, then placeholders.

        Args:
            template: Raw template text.
            source: Name of the template, only used in warnings.
        """
        for name in find_unterminated_conditionals(template):
            logger.warning(
                "Unterminated {{#if %s}} block%s left as-is",
                name,
                f" in {source}" if source else "",
            )

        processed = _CONDITIONAL.sub(self._resolve_block, template)
        return _PLACEHOLDER.sub(self._substitute, processed)

    def _resolve_block(self, match: re.Match[str]) -> str:
        name, content = match.group(1), match.group(2)
        return content if self._variables.get(name) else ""

    def _substitute(self, match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in self._variables:
            return match.group(0)
        return format_value(self._variables[name])
