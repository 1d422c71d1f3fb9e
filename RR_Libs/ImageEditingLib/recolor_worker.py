"""
Background execution of recolor requests.

Flood filling a large photo can take long enough to stall an interactive
surface. RecolorWorker runs session requests on a single background thread:

- At most one request is in flight at a time.
- Requests run in submission order, so the session always ends on the
  most recently submitted seed/color.
- A new fill cancels every request that has not started yet. A new recolor
  cancels pending recolors only, since it still needs the seed of a pending
  fill.
"""

import concurrent.futures
import logging
import threading
from typing import Any, Callable, List, Optional, Sequence, Tuple

from RR_Libs.ImageEditingLib.image_models import RecolorResult, ToleranceValue
from RR_Libs.ImageEditingLib.recolor_session import RecolorSession

logger = logging.getLogger(__name__)

_KIND_FILL = "fill"
_KIND_RECOLOR = "recolor"


class RecolorWorker:
    """
    Single-thread executor in front of a RecolorSession.

    Example:
        >>> with RecolorWorker(session) as worker:
        ...     worker.submit_fill_at((120, 300), view_size, "Sage Green")
        ...     future = worker.submit_recolor("Coral")
        ...     show(future.result().image)
    """

    def __init__(self, session: RecolorSession):
        self.session = session
        self._executor = concurrent.futures.ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="recolor"
        )
        self._lock = threading.Lock()
        self._pending: List[Tuple[str, concurrent.futures.Future]] = []

    def submit_fill_at(
        self,
        display_point: Sequence[float],
        display_size: Sequence[float],
        color: Optional[Any] = None,
        tolerance: Optional[ToleranceValue] = None,
    ) -> "concurrent.futures.Future[RecolorResult]":
        return self._submit(
            _KIND_FILL, self.session.fill_at, display_point, display_size, color, tolerance
        )

    def submit_fill_at_pixel(
        self,
        seed: Sequence[int],
        color: Optional[Any] = None,
        tolerance: Optional[ToleranceValue] = None,
    ) -> "concurrent.futures.Future[RecolorResult]":
        return self._submit(_KIND_FILL, self.session.fill_at_pixel, seed, color, tolerance)

    def submit_recolor(self, color: Any) -> "concurrent.futures.Future[RecolorResult]":
        return self._submit(_KIND_RECOLOR, self.session.recolor, color)

    def _submit(
        self,
        kind: str,
        func: Callable[..., RecolorResult],
        *args: Any,
    ) -> concurrent.futures.Future:
        with self._lock:
            still_pending = []
            for pending_kind, pending in self._pending:
                if pending.done():
                    continue
                if (kind == _KIND_FILL or pending_kind == _KIND_RECOLOR) and pending.cancel():
                    logger.info(f"Superseded a pending {pending_kind} request")
                    continue
                still_pending.append((pending_kind, pending))

            future = self._executor.submit(func, *args)
            still_pending.append((kind, future))
            self._pending = still_pending
        return future

    def shutdown(self, wait: bool = True, cancel_pending: bool = False) -> None:
        """Stop accepting requests, optionally cancelling anything not yet started."""
        with self._lock:
            if cancel_pending:
                for _, pending in self._pending:
                    pending.cancel()
            self._pending = []
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "RecolorWorker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(wait=True)
