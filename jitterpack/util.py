"""
This module contains various helper functions and classes.
"""
from collections.abc import Mapping
import trio
import outcome

import logging
logger = logging.getLogger(__name__)


class TimeOnlyFormatter(logging.Formatter):
    default_time_format = "%H:%M:%S"
    default_msec_format = "%s.%03d"


def combine_dict(*d, cls=dict, force=False):
    """
    Returns a dict with all keys+values of all dict arguments.
    The first found value wins.

    This recurses if values are dicts.

    Args:
      cls (type): a class to instantiate the result with. Default: dict.
        Often used: :class:`attrdict`.
    """
    res = cls()
    keys = {}
    if not d:
        return res
    if len(d) == 1 and not force:
        return d[0]
    for kv in d:
        if kv is None:
            continue
        for k, v in kv.items():
            keys.setdefault(k, []).append(v)
    for k, v in keys.items():
        maps = [vv for vv in v if isinstance(vv, Mapping)]
        # an empty section ("log:") doesn't delete the defaults
        if isinstance(v[0], Mapping) or (v[0] is None and maps):
            res[k] = combine_dict(*maps, cls=cls, force=True)
        else:
            res[k] = v[0]
    return res


class attrdict(dict):
    """A dictionary which can be accessed via attributes, for convenience"""

    def __getattr__(self, a):
        if a.startswith("_"):
            return object.__getattribute__(self, a)
        try:
            return self[a]
        except KeyError:
            raise AttributeError(a) from None

    def __setattr__(self, a, b):
        if a.startswith("_"):
            super(attrdict, self).__setattr__(a, b)
        else:
            self[a] = b

    def __delattr__(self, a):
        try:
            del self[a]
        except KeyError:
            raise AttributeError(a) from None


class CancelledError(RuntimeError):
    pass


class ValueEvent:
    """A waitable value useful for inter-task synchronization,
    inspired by :class:`threading.Event`.

    An event object manages an internal value, which is initially
    unset, and a task can wait for it to become True.

    Args:
      ``scope``:  A cancelation scope that will be cancelled if/when
                  this ValueEvent is. Used for clean cancel propagation.

    Note that the value can only be read once.
    """

    event = None
    value = None
    scope = None

    def __init__(self):
        self.event = trio.Event()

    def set(self, value):
        """Set the result to return this value, and wake any waiting task.
        """
        self.value = outcome.Value(value)
        self.event.set()

    def set_error(self, exc):
        """Set the result to raise this exception, and wake any waiting task.
        """
        self.value = outcome.Error(exc)
        self.event.set()

    def is_set(self):
        """Check whether the event has occurred.
        """
        return self.value is not None

    def cancel(self):
        """Send a cancelation to the recipient.
        """
        if self.scope is not None:
            self.scope.cancel()
        self.set_error(CancelledError())

    async def get(self):
        """Block until the value is set.

        If it's already set, then this method returns immediately.

        The value can only be read once.
        """
        await self.event.wait()
        return self.value.unwrap()
