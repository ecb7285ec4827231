"""Shared fixtures for the vuescaffold test suite."""

import pytest

from vuescaffold.engine import ProjectConfiguration, StyleDialect


@pytest.fixture
def basic_config() -> ProjectConfiguration:
    return ProjectConfiguration(project_name="my-vue-app")


@pytest.fixture
def full_config() -> ProjectConfiguration:
    return ProjectConfiguration(
        project_name="my-vue-app",
        css_preprocessor=StyleDialect.SCSS,
        use_pinia=True,
        use_router=True,
    )


@pytest.fixture
def demo_config() -> ProjectConfiguration:
    """Less styles with the store module and without routing."""
    return ProjectConfiguration(
        project_name="demo-app",
        css_preprocessor=StyleDialect.LESS,
        use_pinia=True,
        use_router=False,
    )
