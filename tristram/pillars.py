"""MIN files: pillars of 16-bit tile references."""

from __future__ import annotations

import os
import struct
from typing import Iterable, Sequence, Tuple, Union

Pillar = Tuple[int, ...]


def pillar_size_for(filename: str) -> int:
    """Return the number of entries per pillar for a MIN file name."""
    # These two files hold 16 entries per pillar; every other one holds 10.
    if filename.endswith("l4.min") or filename.endswith("town.min"):
        return 16
    return 10


class Min:
    """A sequence of pillars read from a MIN file."""

    def __init__(self, pillars: Iterable[Sequence[int]] = ()) -> None:
        self._pillars = [tuple(p) for p in pillars]

    @classmethod
    def from_bytes(cls, data: bytes, pillar_size: int) -> "Min":
        """Split ``data`` into pillars of ``pillar_size`` little-endian int16 values.

        A trailing partial pillar is ignored.
        """
        if pillar_size <= 0:
            raise ValueError("pillar size must be positive")
        stride = pillar_size * 2
        layout = struct.Struct(f"<{pillar_size}h")
        count = len(data) // stride
        return cls(layout.unpack_from(data, i * stride) for i in range(count))

    @classmethod
    def load(cls, path: Union[str, os.PathLike]) -> "Min":
        """Read a MIN file, choosing the pillar size from its name."""
        with open(path, "rb") as handle:
            data = handle.read()
        return cls.from_bytes(data, pillar_size_for(os.fspath(path)))

    def __getitem__(self, index: int) -> Pillar:
        return self._pillars[index]

    def __len__(self) -> int:
        return len(self._pillars)