from itertools import islice

import pytest
import trio

from jitterpack.search import PlacementSearch, SearchExhausted
from jitterpack.successor import walk, successor_manhattan
from jitterpack.util import attrdict


class _Board:
    def __init__(self, occupied=()):
        self.occupied = set(occupied)


class _Cell:
    """A single-cell tile"""
    def __init__(self, board, name="c"):
        self.board = board
        self.name = name
        self.asked = []
        self.at = None

    def __repr__(self):
        return "Cell‹%s›" % (self.name,)

    def intersects(self, p):
        self.asked.append(p)
        return p in self.board.occupied

    def place(self, p):
        self.at = p
        self.board.occupied.add(p)


class _AsyncCell(_Cell):
    async def intersects(self, p):
        await trio.sleep(0)
        return super().intersects(p)

    async def place(self, p):
        await trio.sleep(0)
        super().place(p)


class _Blocked:
    def intersects(self, p):
        return True

    def place(self, p):
        raise RuntimeError("can't place")


def test_first_free():
    board = _Board(islice(walk(), 5))
    tile = _Cell(board)
    ps = PlacementSearch()
    assert trio.run(ps.find, tile) == (1, -1)
    assert tile.asked == list(islice(walk(), 6))
    assert tile.at is None


def test_place_fills_in_order():
    board = _Board()
    ps = PlacementSearch()

    async def run():
        return [await ps.place(_Cell(board, str(i))) for i in range(25)]

    assert trio.run(run) == list(islice(walk(), 25))
    assert len(board.occupied) == 25


def test_async_tile():
    board = _Board([(0, 0)])
    tile = _AsyncCell(board)
    ps = PlacementSearch()
    assert trio.run(ps.place, tile) == (0, -1)
    assert tile.at == (0, -1)
    assert (0, -1) in board.occupied


def test_exhausted():
    board = _Board((x, y) for x in range(-1, 2) for y in range(-1, 2))
    ps = PlacementSearch(max_ring=1)
    with pytest.raises(SearchExhausted) as exc:
        trio.run(ps.place, _Cell(board))
    assert exc.value.tried == 9
    assert exc.value.max_ring == 1
    assert "9 tried" in str(exc.value)


def test_bound_zero():
    ps = PlacementSearch(max_ring=0)
    assert trio.run(ps.find, _Cell(_Board())) == (0, 0)
    with pytest.raises(SearchExhausted):
        trio.run(ps.find, _Cell(_Board([(0, 0)])))


def test_resume():
    board = _Board([(0, 0)])
    ps = PlacementSearch(restart=False)
    assert trio.run(ps.find, _Cell(board)) == (0, -1)
    # nothing is blocked for this one, but we continue where we stopped
    assert trio.run(ps.find, _Cell(_Board())) == (0, -1)
    ps.reset()
    assert trio.run(ps.find, _Cell(_Board())) == (0, 0)


def test_restart():
    board = _Board([(0, 0)])
    ps = PlacementSearch()
    assert trio.run(ps.find, _Cell(board)) == (0, -1)
    assert trio.run(ps.find, _Cell(_Board())) == (0, 0)
    assert ps.n_found == 2


def test_manhattan():
    board = _Board([(0, 0), (1, 0)])
    ps = PlacementSearch(successor="manhattan")
    assert ps.strategy.successor is successor_manhattan
    assert trio.run(ps.find, _Cell(board)) == (0, 1)


def test_manhattan_bound():
    # cost is |x|+|y| here, so (1,1) is out of bounds
    board = _Board([(0, 0), (1, 0), (0, 1), (-1, 0), (0, -1)])
    ps = PlacementSearch(successor="manhattan", max_ring=1)
    with pytest.raises(SearchExhausted):
        trio.run(ps.find, _Cell(board))


def test_unbounded_can_be_cancelled():
    ps = PlacementSearch(checkpoint=16)

    async def run():
        with trio.move_on_after(0.05) as sc:
            await ps.find(_Blocked())
        return sc.cancelled_caught

    assert trio.run(run)
    assert ps.n_found == 0


def test_serialized():
    board = _Board()
    ps = PlacementSearch()
    res = []

    async def one(i):
        res.append(await ps.place(_AsyncCell(board, str(i))))

    async def run():
        async with trio.open_nursery() as n:
            for i in range(9):
                n.start_soon(one, i)

    trio.run(run)
    assert sorted(res) == sorted(islice(walk(), 9))


def test_background():
    board = _Board([(0, 0)])
    ps = PlacementSearch()

    async def run():
        async with trio.open_nursery() as n:
            evt = await ps.start_place(n, _Cell(board))
        return await evt.get()

    assert trio.run(run) == (0, -1)


def test_background_error():
    ps = PlacementSearch(max_ring=2)

    async def run():
        async with trio.open_nursery() as n:
            evt = await ps.start_place(n, _Blocked())
        return await evt.get()

    with pytest.raises(SearchExhausted):
        trio.run(run)


def test_args():
    with pytest.raises(KeyError):
        PlacementSearch(successor="nope")
    with pytest.raises(ValueError):
        PlacementSearch(max_ring=-1)
    with pytest.raises(ValueError):
        PlacementSearch(checkpoint=0)


def test_from_config():
    cfg = attrdict(search=attrdict(successor="manhattan", max_ring=3, checkpoint=8, restart=False))
    ps = PlacementSearch.from_config(cfg, start=(2, 2))
    assert ps.strategy.successor is successor_manhattan
    assert ps.max_ring == 3
    assert ps.checkpoint == 8
    assert not ps.restart
    assert ps.start == (2, 2)
    assert "max=3" in repr(ps)
