import pytest

from studyguide.scripture import default_registry
from studyguide.scripture.normalizer import Normalizer
from studyguide.scripture.validator import Validator


@pytest.fixture(scope="session")
def registry():
    return default_registry()


@pytest.fixture
def en_normalizer(registry):
    return Normalizer(registry, "en-US")


@pytest.fixture
def en_validator(registry):
    return Validator(registry, "en-US")
