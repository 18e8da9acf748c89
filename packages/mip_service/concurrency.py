import threading
from contextlib import contextmanager
from typing import Set


class ConcurrencyManager:
    """
    Serializes state-changing operations (Commands) per resource.
    In-process only; enforces FAIL-FAST: if the resource is busy, raise
    immediately instead of waiting.
    """
    def __init__(self):
        self._held: Set[str] = set()
        self._guard = threading.Lock()

    @contextmanager
    def acquire_lock(self, resource_id: str):
        with self._guard:
            if resource_id in self._held:
                raise BlockingIOError(f"Resource {resource_id} is currently locked by another request.")
            self._held.add(resource_id)
        try:
            yield
        finally:
            with self._guard:
                self._held.discard(resource_id)
