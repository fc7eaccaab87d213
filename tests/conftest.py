import pytest

from yapgeom.tolerance import reset_tolerance


@pytest.fixture(autouse=True)
def default_tolerance():
    reset_tolerance()
    yield
    reset_tolerance()
