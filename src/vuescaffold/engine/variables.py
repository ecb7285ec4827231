"""Variable map handed to the template engine."""

from __future__ import annotations

from datetime import date

from vuescaffold.engine.config import ProjectConfiguration, StyleDialect
from vuescaffold.engine.naming import to_camel_case, to_pascal_case

TemplateValue = str | bool | int | float
TemplateVariables = dict[str, TemplateValue]


def build_variables(
    config: ProjectConfiguration, *, today: date | None = None
) -> TemplateVariables:
    """
    Build the variable map for one generation run.

    Args:
        config: Configuration of the project being generated.
        today: Date used for ``currentYear``. Defaults to the current date.
    """
    today = today or date.today()
    return {
        "projectName": config.project_name,
        "cssPreprocessor": config.css_preprocessor.value,
        "usePinia": config.use_pinia,
        "useRouter": config.use_router,
        "projectNamePascal": to_pascal_case(config.project_name),
        "projectNameCamel": to_camel_case(config.project_name),
        "hasScss": config.css_preprocessor == StyleDialect.SCSS,
        "hasLess": config.css_preprocessor == StyleDialect.LESS,
        "currentYear": today.year,
    }
