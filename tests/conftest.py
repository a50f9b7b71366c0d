"""Test configuration and fixtures for dirtree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_project(tmp_path):
    """Create a small project with entries the default rules would ignore."""
    root = tmp_path / "project"
    root.mkdir()
    (root / "src").mkdir()
    (root / "src" / "index.ts").write_text('console.log("test");')
    (root / "node_modules").mkdir()
    (root / "node_modules" / "some-package.js").write_text("// package")
    (root / "package.json").write_text("{}")
    (root / "README.md").write_text("# Test")
    (root / "test.log").write_text("log data")
    return root
