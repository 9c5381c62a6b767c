"""
Pytest configuration and fixtures for monkey tests.
"""

import pytest


@pytest.fixture
def settings():
    """Provide a default Settings instance."""
    from monkey.utils import Settings
    return Settings()


@pytest.fixture
def frontend():
    """Provide a Frontend instance."""
    from monkey import Frontend
    return Frontend()


@pytest.fixture
def parse():
    """Provide a helper that parses source and returns (program, errors)."""
    from monkey.frontend import Parser, Tokenizer

    def _parse(source, settings=None):
        parser = Parser(Tokenizer(source, settings), settings)
        program = parser.parse_program()
        return program, parser.errors()

    return _parse
