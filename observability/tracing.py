"""Simple span helper for timing remote calls."""
from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List


@contextmanager
def span(events: List[Dict[str, Any]], name: str, **fields: Any) -> Iterator[Dict[str, Any]]:
    """Append ``{"span": name, "ms": elapsed}`` to ``events`` once the block exits.

    The yielded dict is the entry being recorded; callers may add fields to it
    (for example the outcome of the call) before the block ends.
    """

    entry: Dict[str, Any] = {"span": name, **fields}
    start = time.perf_counter()
    try:
        yield entry
    finally:
        entry["ms"] = int((time.perf_counter() - start) * 1000)
        events.append(entry)


__all__ = ["span"]
