"""Black-box surface of a Draco codec backend.

A backend wraps some Draco runtime and exposes the handful of primitives
the decode stages need. Every object a backend hands out (buffers, meshes,
value arrays) is a native resource: the caller must pass it back to
``destroy()`` exactly once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

import numpy as np

from .header import DracoHeader, parse_header, probe_geometry_kind
from .types import AttributeInfo, AttributeKind, DecodeStatus, GeometryKind


class DracoCodec(ABC):
    """Abstract Draco codec.

    Value arrays returned by ``attribute_floats``, ``attribute_uint8`` and
    ``new_int_array`` are numpy views owned by the codec; copy out of them
    before calling ``destroy``.
    """

    name: ClassVar[str] = ""
    supports_bulk_faces: ClassVar[bool] = False

    @abstractmethod
    def create_buffer(self, data: bytes | bytearray | memoryview, copy: bool = True) -> Any:
        """Wrap raw bytes in a native decoder buffer, copying them or referencing ``data``."""
        ...

    @abstractmethod
    def buffer_view(self, buffer: Any) -> memoryview:
        """Read-only view of the bytes held by a native buffer."""
        ...

    def buffer_size(self, buffer: Any) -> int:
        return len(self.buffer_view(buffer))

    def read_header(self, buffer: Any) -> DracoHeader | None:
        return parse_header(self.buffer_view(buffer))

    def probe_geometry_type(
        self, buffer: Any, supported_major_versions: list[int] | None = None
    ) -> GeometryKind:
        """Read the geometry type from the header without decoding."""
        return probe_geometry_kind(self.buffer_view(buffer), supported_major_versions)

    @abstractmethod
    def decode_mesh(self, buffer: Any) -> tuple[DecodeStatus, Any | None]:
        """Fully decode ``buffer`` into a native mesh.

        Returns the status and the mesh, which may be None even when the
        status is ok.
        """
        ...

    @abstractmethod
    def num_points(self, mesh: Any) -> int:
        ...

    @abstractmethod
    def num_faces(self, mesh: Any) -> int:
        ...

    @abstractmethod
    def get_attribute(self, mesh: Any, kind: AttributeKind) -> AttributeInfo | None:
        ...

    @abstractmethod
    def attribute_floats(self, mesh: Any, attribute: AttributeInfo) -> np.ndarray:
        """Materialize float32 values of ``attribute`` for all points."""
        ...

    @abstractmethod
    def attribute_uint8(self, mesh: Any, attribute: AttributeInfo) -> np.ndarray:
        """Materialize uint8 values of ``attribute`` for all points."""
        ...

    @abstractmethod
    def new_int_array(self, size: int) -> np.ndarray:
        """Allocate a native integer receive array of ``size`` slots."""
        ...

    @abstractmethod
    def get_face(self, mesh: Any, face_id: int, out: np.ndarray) -> bool:
        """Write the three vertex ids of ``face_id`` into ``out``."""
        ...

    def get_all_faces(self, mesh: Any, out: np.ndarray) -> bool:
        """Write all face vertex ids into ``out`` in face order."""
        raise NotImplementedError(f"{self.name} codec has no bulk face extraction")

    @abstractmethod
    def destroy(self, obj: Any) -> None:
        """Release a native object previously returned by this codec."""
        ...
