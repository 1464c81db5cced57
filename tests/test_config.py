import pytest

from tagcloud_layout import InvalidArgument, LayouterOptions, Point, Size, SpiralPacker
from tagcloud_layout.config import get_layouter_options, set_layouter_options


@pytest.fixture
def restore_options():
    saved = get_layouter_options()
    yield
    set_layouter_options(saved)


def test_defaults_match_classic_layouter():
    options = get_layouter_options()

    assert options.step == 0.5
    assert options.max_attempts is None


def test_get_returns_a_copy(restore_options):
    options = get_layouter_options()
    options.step = 3.0

    assert get_layouter_options().step == 0.5


def test_new_packers_use_configured_defaults(restore_options):
    set_layouter_options(LayouterOptions(step=1.0, max_attempts=50))

    packer = SpiralPacker(Point(10, 10))
    packer.place(Size(2, 2))

    assert packer.options.max_attempts == 50
    assert packer.spiral_parameter == pytest.approx(1.0)


def test_set_rejects_invalid_options(restore_options):
    with pytest.raises(InvalidArgument):
        set_layouter_options(LayouterOptions(step=0))

    assert get_layouter_options().step == 0.5
