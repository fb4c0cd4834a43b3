"""Codec backend built on the DracoPy bindings."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

import numpy as np

from .base import DracoCodec
from .types import AttributeInfo, AttributeKind, DecodeStatus

logger = logging.getLogger(__name__)


class _DracoPyBuffer:
    """Native buffer: the encoded bytes handed to DracoPy."""

    def __init__(self, data: bytes, copy: bool):
        self.data: bytes | memoryview | None = bytes(data) if copy else memoryview(data)

    def release(self) -> None:
        self.data = None


class _DracoPyMesh:
    """Native mesh: arrays produced by ``DracoPy.decode``."""

    def __init__(self, points: np.ndarray, faces: np.ndarray, colors: np.ndarray | None):
        self.points: np.ndarray | None = points
        self.faces: np.ndarray | None = faces
        self.colors: np.ndarray | None = colors

    def release(self) -> None:
        self.points = None
        self.faces = None
        self.colors = None


class DracoPyCodec(DracoCodec):
    """Decode Draco payloads with ``DracoPy.decode``.

    DracoPy returns a point cloud object (no ``faces``) for point-cloud
    payloads and for meshes that decode to zero faces; both surface here
    as a mesh with ``num_faces() == 0``.
    """

    name: ClassVar[str] = "dracopy"
    supports_bulk_faces: ClassVar[bool] = True

    def create_buffer(self, data: bytes, copy: bool = True) -> _DracoPyBuffer:
        return _DracoPyBuffer(data, copy)

    def buffer_view(self, buffer: _DracoPyBuffer) -> memoryview:
        if buffer.data is None:
            raise ValueError("Draco buffer already released")
        return memoryview(buffer.data).toreadonly()

    def decode_mesh(self, buffer: _DracoPyBuffer) -> tuple[DecodeStatus, _DracoPyMesh | None]:
        import DracoPy

        try:
            decoded = DracoPy.decode(bytes(self.buffer_view(buffer)))
        except (DracoPy.FileTypeException, ValueError) as exc:
            return DecodeStatus(ok=False, message=str(exc)), None
        if decoded is None:
            return DecodeStatus(ok=True), None

        points = np.asarray(decoded.points, dtype=np.float32).reshape(-1, 3)
        faces_raw = getattr(decoded, "faces", None)
        if faces_raw is None:
            faces = np.zeros((0, 3), dtype=np.uint32)
        else:
            faces = np.asarray(faces_raw, dtype=np.int64).reshape(-1, 3)
        colors_raw = getattr(decoded, "colors", None)
        colors = None if colors_raw is None else np.asarray(colors_raw, dtype=np.uint8)
        logger.debug(
            f"DracoPy decoded {len(points)} points, {len(faces)} faces, "
            f"colors={'none' if colors is None else colors.shape}"
        )
        return DecodeStatus(ok=True), _DracoPyMesh(points, faces, colors)

    def num_points(self, mesh: _DracoPyMesh) -> int:
        return 0 if mesh.points is None else int(mesh.points.shape[0])

    def num_faces(self, mesh: _DracoPyMesh) -> int:
        return 0 if mesh.faces is None else int(mesh.faces.shape[0])

    def get_attribute(self, mesh: _DracoPyMesh, kind: AttributeKind) -> AttributeInfo | None:
        n = self.num_points(mesh)
        if kind == AttributeKind.POSITION:
            return AttributeInfo(kind, 3) if n > 0 else None
        if kind == AttributeKind.COLOR:
            if mesh.colors is None or mesh.colors.size == 0 or n == 0:
                return None
            if mesh.colors.ndim == 2:
                return AttributeInfo(kind, int(mesh.colors.shape[1]))
            return AttributeInfo(kind, int(mesh.colors.size // n))
        return None

    def attribute_floats(self, mesh: _DracoPyMesh, attribute: AttributeInfo) -> np.ndarray:
        if attribute.kind != AttributeKind.POSITION:
            raise ValueError(f"No float values for attribute {attribute.kind.value}")
        return np.ascontiguousarray(mesh.points, dtype=np.float32).reshape(-1)

    def attribute_uint8(self, mesh: _DracoPyMesh, attribute: AttributeInfo) -> np.ndarray:
        if attribute.kind != AttributeKind.COLOR or mesh.colors is None:
            raise ValueError(f"No uint8 values for attribute {attribute.kind.value}")
        return np.ascontiguousarray(mesh.colors, dtype=np.uint8).reshape(-1)

    def new_int_array(self, size: int) -> np.ndarray:
        return np.zeros(size, dtype=np.int64)

    def get_face(self, mesh: _DracoPyMesh, face_id: int, out: np.ndarray) -> bool:
        if mesh.faces is None or not 0 <= face_id < mesh.faces.shape[0]:
            return False
        out[:3] = mesh.faces[face_id]
        return True

    def get_all_faces(self, mesh: _DracoPyMesh, out: np.ndarray) -> bool:
        if mesh.faces is None or out.size != mesh.faces.size:
            return False
        out[:] = mesh.faces.reshape(-1)
        return True

    def destroy(self, obj: Any) -> None:
        release = getattr(obj, "release", None)
        if release is not None:
            release()
