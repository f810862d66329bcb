# Placement search

import trio
from inspect import iscoroutine

import logging
logger = logging.getLogger(__name__)

from .successor import ORIGIN, LatticePoint, Strategy, get_strategy
from .util import ValueEvent, CancelledError


class SearchExhausted(RuntimeError):
    """No free anchor within the search bound"""
    def __init__(self, tile, max_ring, tried):
        super().__init__(tile, max_ring, tried)
        self.tile = tile
        self.max_ring = max_ring
        self.tried = tried

    def __str__(self):
        return "‹SearchExhausted:%r: %d rings, %d tried›" % (self.tile, self.max_ring, self.tried)


class PlacementSearch:
    """
    Find anchors for tiles by walking a successor function until the tile
    doesn't overlap anything.

    A tile needs two methods, either of which may be async:

    * ``intersects(point)``: would anchoring the tile at this point
      overlap a tile that's already placed?
    * ``place(point)``: anchor the tile at this point.

    The search never looks at the tiles' shapes.

    Without ``max_ring`` a search may run forever (there might not be any
    free place). Wrap it in a trio timeout if you need to stop it; the
    searcher yields to trio every ``checkpoint`` candidates.

    With ``restart`` cleared, each search continues where the previous one
    found its anchor instead of starting over at ``start``.
    """
    def __init__(self, successor="jitter", max_ring=None, checkpoint=64, restart=True, start=ORIGIN):
        if not isinstance(successor, Strategy):
            successor = get_strategy(successor)
        if max_ring is not None and max_ring < 0:
            raise ValueError("max_ring must not be negative", max_ring)
        if checkpoint < 1:
            raise ValueError("checkpoint must be positive", checkpoint)

        self.strategy = successor
        self.max_ring = max_ring
        self.checkpoint = checkpoint
        self.restart = restart
        self.start = LatticePoint(*start)

        self.pos = self.start
        self.n_found = 0
        self._lock = trio.Lock()

    @classmethod
    def from_config(cls, cfg, **kw):
        """Build a searcher from the ``search`` section of a config."""
        c = cfg['search']
        for k in ("successor", "max_ring", "checkpoint", "restart"):
            if k in c:
                kw.setdefault(k, c[k])
        return cls(**kw)

    def __repr__(self):
        return "PS‹%s›" % (" ".join("%s=%s" % (k,v) for k,v in self._repr().items()),)

    def _repr(self):
        res = {}
        res["fn"] = self.strategy.successor.__name__
        res["pos"] = str(self.pos)
        if self.max_ring is not None:
            res["max"] = self.max_ring
        res["found"] = self.n_found
        if self._lock.locked():
            res["busy"] = "Y"
        return res

    def reset(self):
        """Continue the next search at the start point."""
        self.pos = self.start

    async def find(self, tile) -> LatticePoint:
        """
        Return the first candidate where ``tile`` doesn't overlap.

        Raises `SearchExhausted` if there is none within ``max_ring``.
        """
        async with self._lock:
            return await self._find(tile)

    async def place(self, tile) -> LatticePoint:
        """
        Find an anchor for ``tile`` and place it there.
        """
        async with self._lock:
            p = await self._find(tile)
            res = tile.place(p)
            if iscoroutine(res):
                await res
        logger.debug("Placed %r at %s", tile, p)
        return p

    async def start_place(self, nursery, tile) -> ValueEvent:
        """
        Run `place` in a background task. The result, or the error, is
        delivered via the returned `ValueEvent`.

        Cancelling the event (`ValueEvent.cancel`) stops the search and
        reports `CancelledError`. If the whole nursery is cancelled
        instead, the event is not set; don't wait on it after that.
        """
        evt = ValueEvent()
        await nursery.start(self._place_task, tile, evt)
        return evt

    async def _place_task(self, tile, evt, *, task_status=trio.TASK_STATUS_IGNORED):
        with trio.CancelScope() as evt.scope:
            task_status.started()
            try:
                evt.set(await self.place(tile))
            except Exception as exc:
                evt.set_error(exc)
        if not evt.is_set():
            evt.set_error(CancelledError())

    async def _find(self, tile):
        step, cost = self.strategy
        if self.restart:
            self.pos = self.start
        p = self.pos
        tried = 0
        logger.debug("Search %r from %s", tile, p)

        while True:
            if self.max_ring is not None and cost(p) > self.max_ring:
                logger.info("No room for %r within %d rings, %d tried", tile, self.max_ring, tried)
                raise SearchExhausted(tile, self.max_ring, tried)

            hit = tile.intersects(p)
            if iscoroutine(hit):
                hit = await hit
            tried += 1
            if not hit:
                break

            p = step(p, tile)
            if not tried % self.checkpoint:
                await trio.sleep(0)

        self.pos = p
        self.n_found += 1
        logger.debug("Found %s for %r after %d", p, tile, tried)
        return p
