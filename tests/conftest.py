"""Test configuration and fixtures for dirsize."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create the reference layout used throughout the suite.

    root/
        big.txt        2,000,000 bytes
        sub/
            small.txt        500 bytes
            bigger.txt 3,000,000 bytes
    """
    root = tmp_path / "root"
    (root / "sub").mkdir(parents=True)
    (root / "big.txt").write_bytes(b"\0" * 2_000_000)
    (root / "sub" / "small.txt").write_bytes(b"\0" * 500)
    (root / "sub" / "bigger.txt").write_bytes(b"\0" * 3_000_000)
    return root
