"""Tests for module resolution and inclusion predicates."""

from __future__ import annotations

import itertools

import pytest

from vuescaffold.engine import (
    BASE_LAYOUT,
    BaseLayout,
    FeatureModule,
    ModuleResolver,
    ProjectConfiguration,
    StyleDialect,
)
from vuescaffold.engine.resolver import split_path

ALL_CONFIGS = [
    ProjectConfiguration(
        project_name="app", css_preprocessor=dialect, use_pinia=pinia, use_router=router
    )
    for dialect, pinia, router in itertools.product(
        list(StyleDialect), [False, True], [False, True]
    )
]

QUERIES = ("files_to_include", "directories_to_include", "dependencies", "dev_dependencies")

TOGGLE_CASES = [
    (config, toggle)
    for toggle in ("use_pinia", "use_router")
    for config in ALL_CONFIGS
    if not getattr(config, toggle)
]


def _names(resolver: ModuleResolver) -> list[str]:
    return [m.name for m in resolver.active_modules()]


class TestActiveModules:
    def test_basic_config_only_activates_scss(self, basic_config: ProjectConfiguration) -> None:
        assert _names(ModuleResolver(basic_config)) == ["scss"]

    def test_catalog_order(self, full_config: ProjectConfiguration) -> None:
        assert _names(ModuleResolver(full_config)) == ["vue-router", "pinia", "scss"]

    def test_no_style_module_without_dialect(self) -> None:
        config = ProjectConfiguration(project_name="app", css_preprocessor=StyleDialect.NONE)
        assert _names(ModuleResolver(config)) == []

    def test_injected_catalog(self, basic_config: ProjectConfiguration) -> None:
        extra = FeatureModule(
            name="extra",
            condition=lambda config: True,
            files=("src/extra.ts",),
            dependencies=("extra-lib",),
        )
        resolver = ModuleResolver(basic_config, catalog=[extra], base=BaseLayout())

        assert _names(resolver) == ["extra"]
        assert resolver.files_to_include() == ("src/extra.ts",)
        assert resolver.dependencies() == ("extra-lib",)
        assert resolver.dev_dependencies() == ()


class TestSets:
    def test_base_entries_always_present(self) -> None:
        for config in ALL_CONFIGS:
            resolver = ModuleResolver(config)
            assert set(BASE_LAYOUT.files) <= set(resolver.files_to_include())
            assert set(BASE_LAYOUT.directories) <= set(resolver.directories_to_include())
            assert set(BASE_LAYOUT.dependencies) <= set(resolver.dependencies())
            assert set(BASE_LAYOUT.dev_dependencies) <= set(resolver.dev_dependencies())

    def test_module_contributions(self, full_config: ProjectConfiguration) -> None:
        resolver = ModuleResolver(full_config)

        assert "src/router/index.ts" in resolver.files_to_include()
        assert "src/stores/counter.ts" in resolver.files_to_include()
        assert {"src/router", "src/views", "src/stores", "src/style"} <= set(
            resolver.directories_to_include()
        )
        assert resolver.dependencies()[-2:] == ("vue-router", "pinia")
        assert resolver.dev_dependencies()[-1] == "sass"

    def test_duplicates_collapse_in_order(self, basic_config: ProjectConfiguration) -> None:
        shared = dict(condition=lambda config: True, dependencies=("shared", "own"))
        catalog = [
            FeatureModule(name="a", **shared),
            FeatureModule(name="b", condition=lambda config: True, dependencies=("shared", "b")),
        ]
        base = BaseLayout(dependencies=("vue", "shared"))
        resolver = ModuleResolver(basic_config, catalog=catalog, base=base)

        assert resolver.dependencies() == ("vue", "shared", "own", "b")

    @pytest.mark.parametrize("config", ALL_CONFIGS)
    def test_deterministic(self, config: ProjectConfiguration) -> None:
        first, second = ModuleResolver(config), ModuleResolver(config)
        for query in QUERIES:
            assert getattr(first, query)() == getattr(first, query)()
            assert getattr(first, query)() == getattr(second, query)()


class TestMonotonicity:
    @pytest.mark.parametrize(("config", "toggle"), TOGGLE_CASES)
    def test_enabling_a_toggle_only_adds(self, config: ProjectConfiguration, toggle: str) -> None:
        off = ModuleResolver(config)
        on = ModuleResolver(ProjectConfiguration(**{**vars(config), toggle: True}))

        for query in QUERIES:
            assert set(getattr(off, query)()) <= set(getattr(on, query)())

        paths = (
            "src/views/Home.vue",
            "src/stores/counter.ts",
            "src/style/main.less",
            "src/extra.ts",
        )
        for path in paths:
            if off.should_include_file(path):
                assert on.should_include_file(path)


class TestInclusionPredicates:
    def test_split_path_normalizes(self) -> None:
        assert split_path("./src//stores/") == ("src", "stores")
        assert split_path("src\\router\\index.ts") == ("src", "router", "index.ts")
        assert split_path("") == ()

    def test_enumerated_files(self, full_config: ProjectConfiguration) -> None:
        resolver = ModuleResolver(full_config)
        assert resolver.should_include_file("src/router/index.ts")
        assert resolver.should_include_file("./src/main.ts")
        assert resolver.should_include_file(".gitignore")

    def test_inactive_module_files_excluded(self, basic_config: ProjectConfiguration) -> None:
        resolver = ModuleResolver(basic_config)
        assert not resolver.should_include_file("src/router/index.ts")
        assert not resolver.should_include_file("src/stores/counter.ts")
        assert not resolver.should_include_file("src/style/main.less")
        assert resolver.should_include_file("src/style/main.scss")

    def test_unenumerated_file_follows_directory(self, basic_config: ProjectConfiguration) -> None:
        resolver = ModuleResolver(basic_config)
        assert resolver.should_include_file("src/vite-env.d.ts")
        assert resolver.should_include_file("src/components/icons/Logo.vue")
        assert not resolver.should_include_file("src/stores/extra.ts")
        assert not resolver.should_include_file("LICENSE")

    def test_directories(self, basic_config: ProjectConfiguration) -> None:
        resolver = ModuleResolver(basic_config)
        assert resolver.should_include_directory("")
        assert resolver.should_include_directory("src")
        assert resolver.should_include_directory("src/components/icons")
        assert resolver.should_include_directory("src/style")
        assert not resolver.should_include_directory("src/router")
        assert not resolver.should_include_directory("src/stores/modules")
        assert not resolver.should_include_directory("public")

    def test_segment_matching_not_substring(self) -> None:
        catalog = [
            FeatureModule(
                name="store",
                condition=lambda config: True,
                files=("src/store/index.ts",),
                directories=("src/store",),
            )
        ]
        resolver = ModuleResolver(
            ProjectConfiguration(project_name="app"), catalog=catalog, base=BaseLayout()
        )
        assert resolver.should_include_directory("src/store")
        assert not resolver.should_include_directory("src/stores")
        assert not resolver.should_include_directory("lib/src/store")
        assert resolver.should_include_file("src/store/index.ts")
        assert not resolver.should_include_file("src/stores/index.ts")
        assert not resolver.should_include_file("other/src/store/index.ts")

    def test_ancestors_of_included_paths(self) -> None:
        base = BaseLayout(files=("config/env/app.json",))
        resolver = ModuleResolver(ProjectConfiguration(project_name="app"), catalog=[], base=base)
        assert resolver.should_include_directory("config")
        assert resolver.should_include_directory("config/env")
        assert resolver.should_include_file("config/env/app.json")
        assert not resolver.should_include_file("config/env/other.json")

    def test_predicates_are_total(self, basic_config: ProjectConfiguration) -> None:
        resolver = ModuleResolver(basic_config)
        for path in ("", ".", "/", "..", "a/../b", "ünïcode/ƒile"):
            assert isinstance(resolver.should_include_file(path), bool)
            assert isinstance(resolver.should_include_directory(path), bool)


class TestEndToEndScenario:
    def test_demo_configuration(self, demo_config: ProjectConfiguration) -> None:
        resolver = ModuleResolver(demo_config)
        files = resolver.files_to_include()

        assert "src/stores/counter.ts" in files
        assert "src/style/main.less" in files
        assert "src/router/index.ts" not in files
        assert "src/style/main.scss" not in files

        assert resolver.should_include_file("src/style/main.less")
        assert not resolver.should_include_file("src/style/main.scss")
        assert not resolver.should_include_directory("src/router")

        assert "pinia" in resolver.dependencies()
        assert "vue-router" not in resolver.dependencies()
        assert "less" in resolver.dev_dependencies()
        assert "sass" not in resolver.dev_dependencies()
