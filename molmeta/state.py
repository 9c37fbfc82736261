"""Host-side holder of the current model and structures.

The analysis engine is pure; this class keeps the references the host
considers "current", re-runs the engine on every load and hands the fresh
StructureSummary to whoever subscribed (a UI binding, a logger, a test).
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Optional

from molmeta.analysis.engine import StructureSummary, summarize
from molmeta.config import MolmetaSettings
from molmeta.core.logging_utils import get_logger

logger = get_logger(__name__)

Subscriber = Callable[[StructureSummary], None]


class ViewerState:
    """Current (model, structures) pair plus its derived summary.

    Not thread-safe; meant to be driven from a single UI thread.
    """

    def __init__(self, settings: Optional[MolmetaSettings] = None) -> None:
        self._settings = settings or MolmetaSettings()
        self._model: Any = None
        self._structures: list[Any] = []
        self._subscribers: list[Subscriber] = []
        self._summary = summarize(None, (), self._settings)

    @property
    def model(self) -> Any:
        return self._model

    @property
    def structures(self) -> list[Any]:
        return list(self._structures)

    @property
    def summary(self) -> StructureSummary:
        return self._summary

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback; returns a function that unregisters it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def load(self, model: Any, structures: Optional[Iterable[Any]] = None) -> StructureSummary:
        """Replace the current model/structures and re-derive the summary."""
        self._model = model
        self._structures = list(structures or ())
        self._summary = summarize(self._model, self._structures, self._settings)
        logger.debug("Loaded %s: %s", self._summary.label, self._summary.analysis)
        self._notify()
        return self._summary

    def clear(self) -> StructureSummary:
        return self.load(None, ())

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self._summary)
            except Exception as e:
                logger.error("Subscriber %r failed: %s", callback, e)

    def __repr__(self) -> str:
        return (
            f"<ViewerState label={self._summary.label!r} "
            f"structures={len(self._structures)} subscribers={len(self._subscribers)}>"
        )
