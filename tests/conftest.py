"""Shared pytest fixtures."""

import pytest

from fontcustom.core.options import OptionsResolver

SVG = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 16 16"><rect width="16" height="16"/></svg>'


@pytest.fixture
def project(tmp_path):
    """Create a project root with an icons/ directory holding one SVG."""
    root = tmp_path / "project"
    icons = root / "icons"
    icons.mkdir(parents=True)
    (icons / "icon.svg").write_text(SVG)
    return root


@pytest.fixture
def messages():
    """Status messages collected by the resolver fixture."""
    return []


@pytest.fixture
def resolver(project, messages):
    """Resolver rooted at the project that records status messages."""
    return OptionsResolver(
        say=lambda kind, message: messages.append((kind, message)),
        working_dir=project,
    )
