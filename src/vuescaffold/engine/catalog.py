"""Default module catalog and base layout of the bundled Vue template."""

from __future__ import annotations

from vuescaffold.engine.config import ProjectConfiguration, StyleDialect
from vuescaffold.engine.modules import BaseLayout, FeatureModule


def _uses_router(config: ProjectConfiguration) -> bool:
    return config.use_router


def _uses_pinia(config: ProjectConfiguration) -> bool:
    return config.use_pinia


def _uses_scss(config: ProjectConfiguration) -> bool:
    return config.css_preprocessor == StyleDialect.SCSS


def _uses_less(config: ProjectConfiguration) -> bool:
    return config.css_preprocessor == StyleDialect.LESS


BASE_LAYOUT = BaseLayout(
    files=(
        "package.json",
        "vite.config.ts",
        "tsconfig.json",
        "tsconfig.node.json",
        "index.html",
        ".eslintrc.cjs",
        ".gitignore",
        ".prettierrc",
        "README.md",
        "src/main.ts",
        "src/App.vue",
        "src/components/HelloWorld.vue",
    ),
    directories=("src", "src/components"),
    dependencies=("vue", "ant-design-vue", "@ant-design/icons-vue"),
    dev_dependencies=(
        "@types/node",
        "@typescript-eslint/eslint-plugin",
        "@typescript-eslint/parser",
        "@vitejs/plugin-vue",
        "eslint",
        "eslint-plugin-vue",
        "prettier",
        "typescript",
        "vite",
        "vue-tsc",
    ),
)

# Two modules never contribute the same file.
DEFAULT_CATALOG: tuple[FeatureModule, ...] = (
    FeatureModule(
        name="vue-router",
        description="Vue Router with Home and About views",
        condition=_uses_router,
        files=("src/router/index.ts", "src/views/Home.vue", "src/views/About.vue"),
        directories=("src/router", "src/views"),
        dependencies=("vue-router",),
    ),
    FeatureModule(
        name="pinia",
        description="Pinia store with a counter example",
        condition=_uses_pinia,
        files=("src/stores/counter.ts",),
        directories=("src/stores",),
        dependencies=("pinia",),
    ),
    FeatureModule(
        name="scss",
        description="Global SCSS style sheet",
        condition=_uses_scss,
        files=("src/style/main.scss",),
        directories=("src/style",),
        dev_dependencies=("sass",),
    ),
    FeatureModule(
        name="less",
        description="Global Less style sheet",
        condition=_uses_less,
        files=("src/style/main.less",),
        directories=("src/style",),
        dev_dependencies=("less",),
    ),
)
