"""Shared fixtures: parser, catalog, template provider, generator.

Generators built here never write traces unless a test asks for it.
"""

import pytest

from uimagic.catalog import ComponentCatalog
from uimagic.config import AppConfig
from uimagic.generation import TemplateProvider
from uimagic.orchestrator import ComponentGenerator
from uimagic.parser import IntentParser
from uimagic.tracing import TraceLogger


@pytest.fixture
def parser():
    return IntentParser()


@pytest.fixture
def catalog():
    return ComponentCatalog()


@pytest.fixture
def templates():
    return TemplateProvider()


@pytest.fixture
def config():
    return AppConfig()


@pytest.fixture
def generator(config, catalog, templates):
    return ComponentGenerator(config, catalog=catalog, templates=templates, tracer=TraceLogger(False, "unused"))


@pytest.fixture
def button_only_templates(tmp_path):
    """Template root holding nothing but the React button."""
    root = tmp_path / "templates"
    (root / "react").mkdir(parents=True)
    (root / "react" / "button.tsx").write_text(TemplateProvider().get_template("button", "react"), encoding="utf-8")
    return TemplateProvider(root)
