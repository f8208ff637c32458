import pytest

from identicon.models import ColoredImage

from tests.data import EXAMPLE_HEX


@pytest.fixture
def example_colored():
    return ColoredImage(hex=EXAMPLE_HEX, color=(26, 121, 164))
