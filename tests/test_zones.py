import pytest
from PIL import Image

from gemkit.configuration import ExtractionConfiguration
from gemkit.errors import GemError
from gemkit.zones import HomogeneousZoneExtractor, Rect, intersection, visibility


def test_rect_edges():
    r = Rect(2, 3, 4, 5)
    assert (r.left, r.top, r.right, r.bottom) == (2, 3, 6, 8)


def test_intersects_and_touching():
    a = Rect(0, 0, 10, 10)
    assert a.intersects(Rect(5, 5, 10, 10))
    assert not a.intersects(Rect(10, 0, 10, 10))
    assert not a.intersects(Rect(3, 3, 0, 0))


def test_intersected():
    a = Rect(0, 0, 10, 10)
    assert a.intersected(Rect(5, 5, 10, 10)) == Rect(5, 5, 5, 5)
    assert (a & Rect(20, 20, 1, 1)) == Rect()


def test_united():
    a = Rect(0, 0, 10, 10)
    assert a.united(Rect(5, 5, 10, 10)) == Rect(0, 0, 15, 15)
    assert (Rect() | a) == a
    assert (a | Rect()) == a


def test_intersection_full_inclusion():
    rects = [Rect(0, 0, 10, 10), Rect(5, 5, 10, 10), Rect(2, 2, 3, 3)]
    assert intersection(rects, Rect(0, 0, 10, 10)) == {0, 2}


def test_intersection_partial_threshold():
    rects = [Rect(0, 0, 10, 10), Rect(5, 5, 10, 10), Rect(2, 2, 3, 3)]
    assert intersection(rects, Rect(0, 0, 10, 10), 0.25) == {0, 1, 2}


def test_intersection_ignores_empty_rectangle():
    assert intersection([Rect(1, 1, 0, 0)], Rect(0, 0, 10, 10), 0.0) == set()


def test_visibility_blocking_and_overlap():
    rect = Rect(0, 0, 10, 10)
    rects = [
        Rect(20, 0, 10, 10),  # right, visible
        Rect(40, 0, 10, 10),  # right, hidden behind the first
        Rect(20, 50, 5, 5),  # diagonal, never visible
        Rect(5, 5, 2, 2),  # overlapping
    ]
    assert visibility(rects, rect, 0.5) == {0, 3}


def test_visibility_all_directions():
    rect = Rect(10, 10, 10, 10)
    rects = [
        Rect(30, 10, 10, 10),
        Rect(0, 10, 5, 10),
        Rect(10, 30, 10, 10),
        Rect(10, 0, 10, 5),
    ]
    assert visibility(rects, rect, 0.9) == {0, 1, 2, 3}


def test_visibility_partial_threshold():
    rect = Rect(0, 0, 10, 10)
    rects = [Rect(20, 5, 10, 10)]
    assert visibility(rects, rect, 0.5) == {0}
    assert visibility(rects, rect, 0.6) == set()


def test_visibility_does_not_modify_input():
    rects = [Rect(20, 0, 10, 10)]
    visibility(rects, Rect(0, 0, 10, 10), 0.5)
    assert rects == [Rect(20, 0, 10, 10)]


def _make_image(tmp_path, pixels):
    height = len(pixels)
    width = len(pixels[0])
    img = Image.new("RGB", (width, height))
    for y, row in enumerate(pixels):
        for x, value in enumerate(row):
            img.putpixel((x, y), value)
    path = tmp_path / "zones.png"
    img.save(path)
    return path


def test_color_of_pure_red_zone(tmp_path):
    red = (255, 0, 0)
    path = _make_image(tmp_path, [[red] * 4 for _ in range(4)])
    extractor = HomogeneousZoneExtractor(path, "out.gml", "meta.xml", ExtractionConfiguration())
    assert extractor.color(Rect(0, 0, 4, 4)) == (255, 0, 0)


def test_color_of_gray_zone_is_white(tmp_path):
    gray = (128, 128, 128)
    path = _make_image(tmp_path, [[gray] * 3 for _ in range(3)])
    extractor = HomogeneousZoneExtractor(path)
    assert extractor.color(Rect(0, 0, 3, 3)) == (255, 255, 255)


def test_color_of_mixed_zone(tmp_path):
    red, green = (255, 0, 0), (0, 255, 0)
    path = _make_image(tmp_path, [[red, green], [green, red]])
    extractor = HomogeneousZoneExtractor(path)
    assert extractor.color(Rect(0, 0, 2, 2)) == (255, 255, 0)
    assert extractor.color(Rect(1, 0, 1, 1)) == (0, 255, 0)


def test_color_empty_zone_raises(tmp_path):
    path = _make_image(tmp_path, [[(1, 2, 3)]])
    extractor = HomogeneousZoneExtractor(path)
    with pytest.raises(GemError):
        extractor.color(Rect(0, 0, 0, 1))


def test_color_without_image_raises(tmp_path):
    extractor = HomogeneousZoneExtractor(tmp_path / "missing.png")
    assert extractor.image is None
    with pytest.raises(GemError):
        extractor.color(Rect(0, 0, 1, 1))


def test_extractor_keeps_filenames(tmp_path):
    path = _make_image(tmp_path, [[(0, 0, 0)]])
    extractor = HomogeneousZoneExtractor(path, "out.gml", "meta.xml")
    assert (extractor.input, extractor.output, extractor.metadata) == (
        str(path),
        "out.gml",
        "meta.xml",
    )


def test_extract_verbose_prints(tmp_path, capsys):
    path = _make_image(tmp_path, [[(0, 0, 0)]])
    extractor = HomogeneousZoneExtractor(path, "", "", ExtractionConfiguration(verbose=True))
    extractor.extract()
    assert capsys.readouterr().out == " PERFORMING \n"


def test_extract_quiet_prints_nothing(tmp_path, capsys):
    path = _make_image(tmp_path, [[(0, 0, 0)]])
    HomogeneousZoneExtractor(path, "", "", ExtractionConfiguration()).extract()
    assert capsys.readouterr().out == ""