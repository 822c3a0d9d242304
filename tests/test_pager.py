import pytest

from apsurvey.pager import SsidPager

NAMES = ["a", "b", "c", "d", "e", "f"]


def test_first_page():
    items = SsidPager().render(NAMES)
    assert items[0] == (0, 0, "Networks")
    assert [text for _, _, text in items[1:]] == ["a", "b", "c", "d"]
    ys = [y for _, y, _ in items]
    assert ys == sorted(ys) and len(set(ys)) == len(ys)
    assert items[1][1] == 15


def test_second_page_partial():
    pager = SsidPager()
    assert pager.advance(len(NAMES)) == 1
    items = pager.render(NAMES)
    assert [text for _, _, text in items[1:]] == ["e", "f"]


def test_wraps_around():
    pager = SsidPager(per_page=2)
    pages = [pager.advance(len(NAMES)) for _ in range(4)]
    assert pages == [1, 2, 0, 1]


def test_empty_list_stays_on_first_page():
    pager = SsidPager()
    assert pager.advance(0) == 0
    assert pager.render([]) == [(0, 0, "Networks")]


def test_invalid_page_size():
    with pytest.raises(ValueError):
        SsidPager(per_page=0)