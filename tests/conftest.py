"""Global pytest configuration for enum-next tests."""
import pytest

from enum_next import Enumeration, set_current_validation_config


@pytest.fixture(autouse=True)
def default_validation_config():
    """Make every test start and end with the default validation config."""
    set_current_validation_config(None)
    yield
    set_current_validation_config(None)


@pytest.fixture
def colors():
    """Keyed enumeration declared out of alphabetical order."""
    return Enumeration.keyed([
        'C', {'a': 'Ca', 'b': 'Cb'},
        'A', {'a': 'Aa', 'b': 'Ab'},
        'B', {'a': 'Ba', 'b': 'Bb'},
    ])


@pytest.fixture
def flags():
    """Symbol-only enumeration declared out of alphabetical order."""
    return Enumeration.symbols(['C', 'A', 'B'])
