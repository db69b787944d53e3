"""Solver entry point: validate, partition, search, merge."""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import SolverOptions
from .constraints import check_world
from .csp import enumerate_assignments, resolve_effects
from .model import Counts
from .observations import Card, Request, validate_request
from .results import Aggregator, Result

logger = logging.getLogger(__name__)

MAX_PARTITION_DEPTH = 3


class SearchBudget:
    """Shared stop condition, checked at every top-level assignment."""

    def __init__(self, max_worlds: Optional[int] = None, time_limit: Optional[float] = None,
                 cancel: Optional[threading.Event] = None):
        self.max_worlds = max_worlds
        self.deadline = time.monotonic() + time_limit if time_limit else None
        self.cancel = cancel
        self._halted = threading.Event()
        self._lock = threading.Lock()
        self._spent = 0

    @property
    def spent(self) -> int:
        return self._spent

    @property
    def exhausted(self) -> bool:
        return self._halted.is_set()

    def charge(self, worlds: int) -> None:
        with self._lock:
            self._spent += worlds

    def should_stop(self) -> bool:
        if self._halted.is_set():
            return True
        reason = None
        if self.cancel is not None and self.cancel.is_set():
            reason = "cancelled"
        elif self.max_worlds is not None and self._spent >= self.max_worlds:
            reason = f"world budget of {self.max_worlds} spent"
        elif self.deadline is not None and time.monotonic() >= self.deadline:
            reason = "time limit reached"
        if reason is None:
            return False
        if not self._halted.is_set():
            self._halted.set()
            logger.warning("search stopped early: %s", reason)
        return True


def partition(request: Request, workers: int) -> List[Tuple[str, ...]]:
    """Split the assignment space into prefixes of the first few seats."""
    depth = 1
    prefixes = list(enumerate_assignments(request, depth=depth))
    while len(prefixes) < workers and depth < min(MAX_PARTITION_DEPTH, request.seats):
        depth += 1
        prefixes = list(enumerate_assignments(request, depth=depth))
    return prefixes


def search_partition(request: Request, prefix: Tuple[str, ...], options: SolverOptions,
                     budget: SearchBudget) -> Result:
    agg = Aggregator(request.seats, options.distinct, options.keep_worlds)
    for roles in enumerate_assignments(request, prefix):
        if budget.should_stop():
            agg.interrupted()
            break
        explored = 0
        for world in resolve_effects(request, roles):
            explored += 1
            if check_world(world, request, options.liars_must_lie):
                agg.add(world)
        agg.explored(explored)
        budget.charge(explored)
    logger.debug("partition %s: %d world(s) kept", prefix, agg.worlds_kept)
    return agg.result()


def solve_request(request: Request, options: Optional[SolverOptions] = None,
                  caveats: Sequence[str] = (),
                  cancel: Optional[threading.Event] = None) -> Result:
    """Search an already validated request."""
    options = options or SolverOptions()
    budget = SearchBudget(options.max_worlds, options.time_limit, cancel)
    empty = Result(seats=request.seats, distinct=options.distinct)

    prefixes = partition(request, options.workers)
    logger.debug("searching %d partition(s) with %d worker(s)", len(prefixes), options.workers)

    if options.workers == 1 or len(prefixes) <= 1:
        partials = [search_partition(request, p, options, budget) for p in prefixes]
    else:
        with ThreadPoolExecutor(max_workers=options.workers) as pool:
            partials = list(pool.map(lambda p: search_partition(request, p, options, budget), prefixes))

    result = reduce(Result.merge, partials, empty)
    result.caveats = list(caveats)
    result.finish(exhaustive=not budget.exhausted)
    logger.info(
        "%s: %d solution(s), %d world(s) kept of %d explored",
        result.status.value, result.solution_count, result.worlds_kept, result.worlds_explored,
    )
    return result


def solve(deck: Iterable[str], counts: Counts, cards: Sequence[Card],
          options: Optional[SolverOptions] = None,
          cancel: Optional[threading.Event] = None) -> Result:
    """Find every world consistent with the observed table.

    Raises ``ConfigurationError`` before searching when the request is
    malformed. Unsupported observations become caveats on the result, or
    raise in strict mode.
    """
    options = options or SolverOptions()
    request, caveats = validate_request(deck, counts, cards, strict=options.strict)
    return solve_request(request, options, caveats, cancel)
