"""Shared fixtures for tests."""

import pytest

from regua.config import TopologySettings
from regua.topology import Project


@pytest.fixture
def settings() -> TopologySettings:
    """Return default settings."""
    return TopologySettings()


@pytest.fixture
def project(settings) -> Project:
    """Return an empty named project."""
    return Project("Test Project", settings=settings)


@pytest.fixture
def line(project):
    """Return an empty line inside a fresh system."""
    return project.new_system("Test System").new_line("Test Line")


@pytest.fixture
def berlin(settings):
    """Return a small project modeled on the Berlin U8.

    ids: Berlin 0, U-Bahn 1, U8 2, Gesundbrunnen 3, Voltastraße 4,
    Grenze 5, Bernauer Straße 6, second Grenze 7.
    """
    berlin = Project("Berlin", settings=settings)
    u8 = berlin.new_system("Berlin U-Bahn").new_line("U8")
    gesund = u8.new_station("Gesundbrunnen")
    volta = u8.new_station("Voltastraße")
    u8.new_edge(gesund, volta, "Grenze")
    bernauer = u8.new_node("Bernauer Straße")
    u8.new_edge(volta, bernauer, "Grenze")
    return berlin
