"""In-memory pixel images laid out like server-side ZPixmap images."""

from __future__ import annotations

_SUPPORTED_DEPTHS = (8, 16, 24, 32)


class Image:
    """A width x height pixel buffer with rows padded to 32 bits.

    ``byte_order`` is 0 for least significant byte first and 1 for most
    significant byte first.
    """

    def __init__(self, width: int, height: int, bits_per_pixel: int = 32, byte_order: int = 0):
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        if bits_per_pixel not in _SUPPORTED_DEPTHS:
            raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
        if byte_order not in (0, 1):
            raise ValueError("byte order must be 0 (little) or 1 (big)")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.byte_order = byte_order
        self.size_line = ((width * bits_per_pixel + 31) // 32) * 4
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _endian(self) -> str:
        return "big" if self.byte_order else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of ``color`` at (x, y) in the image's byte order."""
        size = self.bytes_per_pixel
        value = color & ((1 << (8 * size)) - 1)
        start = self._offset(x, y)
        self.data[start:start + size] = value.to_bytes(size, self._endian)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value stored at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + self.bytes_per_pixel], self._endian)

    def row(self, y: int) -> bytes:
        """Return the raw bytes of row ``y``, padding included."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside image of height {self.height}")
        start = y * self.size_line
        return bytes(self.data[start:start + self.size_line])