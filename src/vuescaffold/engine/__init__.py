"""Template composition engine: module resolution and template rewriting."""

from vuescaffold.engine.catalog import BASE_LAYOUT, DEFAULT_CATALOG
from vuescaffold.engine.config import ProjectConfiguration, StyleDialect
from vuescaffold.engine.manifest import VERSION_TABLE, build_manifest, dump_manifest
from vuescaffold.engine.modules import BaseLayout, FeatureModule
from vuescaffold.engine.naming import to_camel_case, to_pascal_case
from vuescaffold.engine.resolver import ModuleResolver
from vuescaffold.engine.rewriter import TemplateEngine, find_unterminated_conditionals
from vuescaffold.engine.variables import build_variables

__all__ = [
    "BASE_LAYOUT",
    "DEFAULT_CATALOG",
    "VERSION_TABLE",
    "BaseLayout",
    "FeatureModule",
    "ModuleResolver",
    "ProjectConfiguration",
    "StyleDialect",
    "TemplateEngine",
    "build_manifest",
    "build_variables",
    "dump_manifest",
    "find_unterminated_conditionals",
    "to_camel_case",
    "to_pascal_case",
]
