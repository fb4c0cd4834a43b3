"""Scoped ownership of decoder-native resources.

A ``DecoderSession`` is created per decode call. Every native object the
codec hands out is wrapped in a ``NativeHandle`` registered with the session;
a handle is released exactly once, either explicitly (temporaries are used as
context managers) or when the session closes.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from typing import Any

from drcmesh.codec.base import DracoCodec
from drcmesh.codec.types import AttributeInfo, DecodeStatus

logger = logging.getLogger(__name__)


class ResourceLedger:
    """Allocation/release counters per native resource kind.

    Safe to share between sessions running on different threads.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.allocated: Counter[str] = Counter()
        self.released: Counter[str] = Counter()
        self.failed: Counter[str] = Counter()

    def record_allocation(self, kind: str) -> None:
        with self._lock:
            self.allocated[kind] += 1

    def record_release(self, kind: str) -> None:
        with self._lock:
            self.released[kind] += 1

    def record_failure(self, kind: str) -> None:
        """A destroy call raised; the object stays counted as outstanding."""
        with self._lock:
            self.failed[kind] += 1

    def outstanding(self) -> dict[str, int]:
        """Kinds with more allocations than releases."""
        with self._lock:
            return {
                kind: count - self.released[kind]
                for kind, count in self.allocated.items()
                if count != self.released[kind]
            }

    @property
    def total_allocated(self) -> int:
        with self._lock:
            return sum(self.allocated.values())

    @property
    def total_released(self) -> int:
        with self._lock:
            return sum(self.released.values())


class NativeHandle:
    """Owner of one native object. Use as a context manager for temporaries."""

    def __init__(self, session: DecoderSession, kind: str, obj: Any):
        self._session = session
        self.kind = kind
        self._obj = obj
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    @property
    def value(self) -> Any:
        if self._released:
            raise ValueError(f"Native {self.kind} already released")
        return self._obj

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        obj, self._obj = self._obj, None
        try:
            self._session.codec.destroy(obj)
        except Exception:
            self._session._forget(self, destroyed=False)
            raise
        self._session._forget(self)

    def __enter__(self) -> NativeHandle:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc is None:
            self.release()
            return
        try:
            self.release()
        except Exception as err:
            logger.error(f"Failed to release native {self.kind}: {err}")

    def __repr__(self) -> str:
        state = "released" if self._released else "live"
        return f"NativeHandle({self.kind}, {state})"


class DecoderSession:
    """Per-call decode engine owning every native resource it creates."""

    def __init__(self, codec: DracoCodec, ledger: ResourceLedger | None = None):
        self.codec = codec
        self.ledger = ledger if ledger is not None else ResourceLedger()
        self._live: list[NativeHandle] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def live_handles(self) -> list[NativeHandle]:
        return list(self._live)

    def _track(self, kind: str, obj: Any) -> NativeHandle:
        self.ledger.record_allocation(kind)
        handle = NativeHandle(self, kind, obj)
        self._live.append(handle)
        return handle

    def _forget(self, handle: NativeHandle, destroyed: bool = True) -> None:
        self._live.remove(handle)
        if destroyed:
            self.ledger.record_release(handle.kind)
        else:
            self.ledger.record_failure(handle.kind)

    def _check_open(self) -> None:
        if self._closed:
            raise RuntimeError("Decoder session is closed")

    # -- allocation --------------------------------------------------------

    def create_buffer(self, data: bytes, copy: bool = True) -> NativeHandle:
        self._check_open()
        return self._track("buffer", self.codec.create_buffer(data, copy=copy))

    def decode_mesh(self, buffer: NativeHandle) -> tuple[DecodeStatus, NativeHandle | None]:
        """Decode into a native mesh. A mesh returned with a failed status is still owned."""
        self._check_open()
        status, mesh = self.codec.decode_mesh(buffer.value)
        if mesh is None:
            return status, None
        return status, self._track("mesh", mesh)

    def attribute_floats(self, mesh: NativeHandle, attribute: AttributeInfo) -> NativeHandle:
        self._check_open()
        return self._track("float_array", self.codec.attribute_floats(mesh.value, attribute))

    def attribute_uint8(self, mesh: NativeHandle, attribute: AttributeInfo) -> NativeHandle:
        self._check_open()
        return self._track("uint8_array", self.codec.attribute_uint8(mesh.value, attribute))

    def int_array(self, size: int) -> NativeHandle:
        self._check_open()
        return self._track("int_array", self.codec.new_int_array(size))

    # -- teardown ----------------------------------------------------------

    def close(self, exc: BaseException | None = None) -> None:
        """Release every live handle, newest first.

        The first release error is raised unless ``exc`` is already
        propagating, in which case release errors are only logged.
        """
        if self._closed:
            return
        self._closed = True
        errors: list[Exception] = []
        for handle in reversed(list(self._live)):
            try:
                handle.release()
            except Exception as err:
                logger.error(f"Failed to release native {handle.kind}: {err}")
                errors.append(err)
        if errors and exc is None:
            raise errors[0]

    def __enter__(self) -> DecoderSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close(exc)
