import pytest

from partitionwm.core.errors import PartitionWMError, UnknownPartitionError
from partitionwm.tiling.frame import Frame
from partitionwm.tiling.partitions import CATALOG, TILINGS, Partition, resolve

PARENTS = [
    Frame(0, 0, 1000, 800),
    Frame(0, 0, 1001, 799),
    Frame(200, 100, 1000, 800),
    Frame(-1280, -200, 1280, 1024),
    Frame(1920, 23, 2560, 1417),
    Frame(0.5, 10.25, 333.3, 777.7),
    Frame(0, 0, 7, 5),
]


def edges(frame):
    return frame.x, frame.y, frame.x + frame.w, frame.y + frame.h


def inside(inner, outer, tolerance=0):
    il, it, ir, ib = edges(inner)
    ol, ot, or_, ob = edges(outer)
    return (
        il >= ol - tolerance
        and it >= ot - tolerance
        and ir <= or_ + tolerance
        and ib <= ob + tolerance
    )


def overlap(a, b):
    al, at, ar, ab = edges(a)
    bl, bt, br, bb = edges(b)
    return min(ar, br) > max(al, bl) and min(ab, bb) > max(at, bt)


def test_top_left_quarter():
    assert resolve(Frame(0, 0, 1000, 800), "topLeft") == Frame(0, 0, 500, 400)


def test_centre_third():
    assert resolve(Frame(0, 0, 900, 600), "centreThird") == Frame(300, 0, 300, 600)


def test_parent_origin_is_propagated():
    assert resolve(Frame(200, 100, 1000, 800), "bottomRight") == Frame(700, 500, 500, 400)


def test_negative_origin_screen():
    parent = Frame(800, -600, 1600, 1200)
    assert resolve(parent, Partition.RIGHT) == Frame(1600, -600, 800, 1200)
    assert resolve(parent, Partition.UP) == Frame(800, -600, 1600, 600)


def test_centre_is_half_size_and_centred():
    assert resolve(Frame(0, 0, 1000, 800), Partition.CENTRE) == Frame(250, 200, 500, 400)


def test_sixths_and_two_thirds():
    parent = Frame(0, 0, 900, 600)
    assert resolve(parent, "botRightSix") == Frame(600, 300, 300, 300)
    assert resolve(parent, "topCentreSix") == Frame(300, 0, 300, 300)
    assert resolve(parent, "left2Thirds") == Frame(0, 0, 600, 600)
    assert resolve(parent, "right2Thirds") == Frame(300, 0, 600, 600)


def test_results_are_integers():
    frame = resolve(Frame(0.5, 10.25, 333.3, 777.7), Partition.RIGHT_THIRD)
    assert all(isinstance(v, int) for v in (frame.x, frame.y, frame.w, frame.h))


@pytest.mark.parametrize("parent", PARENTS, ids=str)
@pytest.mark.parametrize("partition", list(Partition), ids=lambda p: p.value)
def test_every_partition_is_contained_in_its_parent(parent, partition):
    assert inside(resolve(parent, partition), parent, tolerance=1)


@pytest.mark.parametrize("parent", PARENTS, ids=str)
@pytest.mark.parametrize("group", TILINGS, ids=lambda g: "+".join(p.value for p in g))
def test_tiling_groups_rebuild_the_parent(parent, group):
    frames = [resolve(parent, p) for p in group]

    total_area = sum(f.w * f.h for f in frames)
    left = min(edges(f)[0] for f in frames)
    top = min(edges(f)[1] for f in frames)
    right = max(edges(f)[2] for f in frames)
    bottom = max(edges(f)[3] for f in frames)

    # Pieces cover their bounding box exactly once...
    assert total_area == (right - left) * (bottom - top)
    for i, a in enumerate(frames):
        for b in frames[i + 1:]:
            assert not overlap(a, b)
    # ...and the box is the parent, up to rounding
    for got, want in zip((left, top, right, bottom), edges(parent)):
        assert abs(got - want) <= 0.5


def test_quarters_rebuild_an_exact_parent():
    parent = Frame(200, 100, 1001, 799)
    tl, tr, bl, br = (
        edges(resolve(parent, n)) for n in ("topLeft", "topRight", "bottomLeft", "bottomRight")
    )
    assert tl[2] == tr[0] == bl[2] == br[0]
    assert tl[3] == bl[1] == tr[3] == br[1]
    assert (tl[0], tl[1]) == (200, 100)
    assert (br[2], br[3]) == edges(parent)[2:]


def test_resolve_is_deterministic():
    parent = Frame(17, -3, 1234.5, 987.6)
    first = [resolve(parent, p) for p in Partition]
    second = [resolve(parent, p) for p in Partition]
    assert first == second


def test_unknown_partition_fails_explicitly():
    with pytest.raises(UnknownPartitionError) as info:
        resolve(Frame(0, 0, 100, 100), "middle")
    assert isinstance(info.value, PartitionWMError)
    assert isinstance(info.value, KeyError)
    assert "middle" in str(info.value)


def test_parse_accepts_names_and_members():
    assert Partition.parse("topLeftSix") is Partition.TOP_LEFT_SIX
    assert Partition.parse(Partition.CENTRE) is Partition.CENTRE


def test_catalog_is_complete_and_read_only():
    assert set(CATALOG) == set(Partition)
    with pytest.raises(TypeError):
        CATALOG[Partition.LEFT] = CATALOG[Partition.RIGHT]
