import pytest

from luma_springs.palette import generate_reference_palette


@pytest.fixture(scope="session")
def reference_palette():
    return generate_reference_palette()
