from flake.core.cut_collector import CutCollector
from flake.core.geometry import Point


def test_new_collector_is_empty():
    cut = CutCollector()
    assert not cut.is_started()
    assert not cut.can_finish()
    assert cut.snips() == []
    assert cut.last() is None
    assert len(cut) == 0


def test_readiness_follows_point_count():
    cut = CutCollector()
    cut.add(Point(1, 1))
    assert cut.is_started()
    assert not cut.can_finish()

    cut.add((2, 2))
    assert cut.can_finish()
    assert cut.last() == Point(2, 2)


def test_snips_keep_order_and_are_copies():
    cut = CutCollector()
    for p in [(0, 0), (3, 1), (2, 5)]:
        cut.add(p)

    snips = cut.snips()
    assert snips == [Point(0, 0), Point(3, 1), Point(2, 5)]

    snips.append(Point(9, 9))
    snips.reverse()
    assert cut.snips() == [Point(0, 0), Point(3, 1), Point(2, 5)]
