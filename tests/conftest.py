import pytest

from tests.helpers import IMAGE_RT, LAYOUT_RT, png_bytes, write_presentation


@pytest.fixture
def three_slide_deck(tmp_path):
    """Slide 1: two images, one referenced twice. Slide 2: no images. Slide 3: image missing from media."""
    slides = {
        1: {
            "blips": ["rId2", "rId3", "rId2"],
            "rels": [
                ("rId1", LAYOUT_RT, "../slideLayouts/slideLayout1.xml"),
                ("rId2", IMAGE_RT, "../media/image1.png"),
                ("rId3", IMAGE_RT, "../media/image2.png"),
            ],
        },
        2: {"blips": [], "rels": [("rId1", LAYOUT_RT, "../slideLayouts/slideLayout1.xml")]},
        3: {"blips": ["rId2"], "rels": [("rId2", IMAGE_RT, "../media/image9.png")]},
    }
    media = {"image1.png": png_bytes(40, 30), "image2.png": png_bytes(20, 20, (0, 0, 255))}
    return write_presentation(tmp_path / "deck.pptx", slides, media)
