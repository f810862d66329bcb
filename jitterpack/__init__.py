from .successor import LatticePoint, ORIGIN, ring, successor_jitter, successor_manhattan, jitter_offset, jitter_index
from .search import PlacementSearch, SearchExhausted

__all__ = ["LatticePoint","ORIGIN","ring","successor_jitter","successor_manhattan","jitter_offset","jitter_index","PlacementSearch","SearchExhausted"]

import gettext
gettext.install("jitterpack", localedir="locales", names="gettext ngettext pgettext npgettext".split())
