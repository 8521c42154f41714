"""Bit-level packing and unpacking utilities.

Values are packed LSB-first: the first value written occupies the least
significant bits of the first byte, and each value's own low bit comes first.
With 2-bit values this puts entry ``4k`` in bits 0-1 of byte ``k`` and entry
``4k+3`` in bits 6-7.
"""

from __future__ import annotations


class BitPacker:
    """Packs unsigned values bit-by-bit into a byte buffer.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_uint(3, num_bits=2)
        >>> packer.write_uint(0, num_bits=2)
        >>> packer.write_uint(2, num_bits=2)
        >>> packer.write_uint(1, num_bits=2)
        >>> packer.to_bytes()
        b'c'
    """

    def __init__(self) -> None:
        """Initialize an empty bit packer."""
        self._bits: list[int] = []  # List of 0s and 1s, in write order

    def write_uint(self, value: int, num_bits: int) -> None:
        """Write an unsigned integer using the specified number of bits.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            num_bits: Number of bits to use for encoding (1-8)

        Raises:
            ValueError: If value is negative or doesn't fit in num_bits
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        if num_bits < 1 or num_bits > 8:
            raise ValueError(f"num_bits must be 1-8, got {num_bits}")

        max_value = (1 << num_bits) - 1
        if value > max_value:
            raise ValueError(f"Value {value} requires more than {num_bits} bits (max: {max_value})")

        for i in range(num_bits):
            self._bits.append((value >> i) & 1)

    def bit_length(self) -> int:
        """Return the current number of bits written."""
        return len(self._bits)

    def to_bytes(self) -> bytes:
        """Convert the bit buffer to bytes.

        If the number of bits is not a multiple of 8, the unused high bits
        of the last byte are zero.

        Returns:
            Packed bytes
        """
        result = bytearray((len(self._bits) + 7) // 8)
        for position, bit in enumerate(self._bits):
            if bit:
                result[position // 8] |= 1 << (position % 8)
        return bytes(result)


class BitUnpacker:
    """Unpacks LSB-first values from a byte buffer.

    Example:
        >>> unpacker = BitUnpacker(b"c")
        >>> [unpacker.read_uint(2) for _ in range(4)]
        [3, 0, 2, 1]
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a bit unpacker with the given data.

        Args:
            data: Byte buffer to unpack
        """
        self._data = bytes(data)
        self._position = 0

    def read_uint(self, num_bits: int) -> int:
        """Read an unsigned integer of the specified bit width.

        Args:
            num_bits: Number of bits to read (1-8)

        Returns:
            Unsigned integer value

        Raises:
            ValueError: If num_bits is out of range
            IndexError: If not enough bits are available
        """
        if num_bits < 1 or num_bits > 8:
            raise ValueError(f"num_bits must be 1-8, got {num_bits}")

        if num_bits > self.bits_remaining():
            raise IndexError(
                f"Not enough bits: need {num_bits}, have {self.bits_remaining()}"
            )

        value = 0
        for i in range(num_bits):
            byte = self._data[self._position // 8]
            bit = (byte >> (self._position % 8)) & 1
            value |= bit << i
            self._position += 1

        return value

    def bits_remaining(self) -> int:
        """Return the number of unread bits in the buffer."""
        return len(self._data) * 8 - self._position

    def position(self) -> int:
        """Return the current read position in bits."""
        return self._position
