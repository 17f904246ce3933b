"""Size values and display units.

Sizes are counted in bytes internally and converted to a display unit only at the
rendering boundary. All units use decimal (SI) multipliers, not binary ones.
"""

from dataclasses import dataclass
from enum import Enum


class SizeUnit(str, Enum):
    """Unit in which a size value is expressed.

    Values are the short symbols used on the command line and in rendered output.

    Values:
        BYTE: Single bytes ("b")
        KILOBYTE: 10^3 bytes ("K")
        MEGABYTE: 10^6 bytes ("M")
        GIGABYTE: 10^9 bytes ("G")
    """

    BYTE = "b"
    KILOBYTE = "K"
    MEGABYTE = "M"
    GIGABYTE = "G"

    @property
    def multiplier(self) -> int:
        """Number of bytes in one of this unit."""
        return _MULTIPLIERS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "SizeUnit":
        """Look up a unit by its symbol.

        An empty symbol or an upper-case "B" also selects bytes.

        Args:
            symbol: Unit symbol such as "K" or "M".

        Returns:
            The matching unit.

        Raises:
            ValueError: If the symbol does not name a known unit.

        Example:
            >>> SizeUnit.from_symbol("M")
            <SizeUnit.MEGABYTE: 'M'>
            >>> SizeUnit.from_symbol("")
            <SizeUnit.BYTE: 'b'>
        """
        if symbol in ("", "B"):
            return cls.BYTE
        try:
            return cls(symbol)
        except ValueError:
            valid = ", ".join(unit.value for unit in cls)
            raise ValueError(f"Invalid size unit '{symbol}'. Must be one of: {valid}")


_MULTIPLIERS = {
    SizeUnit.BYTE: 1,
    SizeUnit.KILOBYTE: 10**3,
    SizeUnit.MEGABYTE: 10**6,
    SizeUnit.GIGABYTE: 10**9,
}


@dataclass(frozen=True)
class Size:
    """A numeric value tagged with the unit it is expressed in.

    Attributes:
        value: Magnitude in ``unit``. May be fractional.
        unit: Unit of ``value``.

    Example:
        >>> str(Size.from_bytes(3000000, SizeUnit.MEGABYTE))
        '3.0M'
        >>> Size(2.5, SizeUnit.KILOBYTE).in_bytes()
        2500
    """

    value: float
    unit: SizeUnit

    @classmethod
    def from_bytes(cls, size: int, unit: SizeUnit) -> "Size":
        """Convert a raw byte count into ``unit`` without rounding."""
        return cls(size / unit.multiplier, unit)

    def in_bytes(self) -> int:
        """Convert back to a whole number of bytes, truncating any fraction."""
        return int(self.value * self.unit.multiplier)

    def __str__(self) -> str:
        return f"{self.value}{self.unit.value}"


def parse_threshold(size_str: str) -> int:
    """Parse a human-readable size literal into a byte count.

    Single-letter and SI suffixes (K, M, G, KB, MB, GB) use decimal multipliers;
    explicit binary suffixes (KiB, MiB, GiB) use 1024-based ones.

    Args:
        size_str: Size string like '500M', '1.5G', '2 MB', or just '1024'

    Returns:
        Size in bytes

    Raises:
        ValueError: If size_str is not a valid, non-negative size

    Example:
        >>> parse_threshold("500M")
        500000000
        >>> parse_threshold("1024")
        1024
    """
    from humanfriendly import InvalidSize, parse_size

    try:
        size = int(parse_size(size_str.strip()))
    except (InvalidSize, ValueError) as e:
        raise ValueError(f"Invalid size format '{size_str}': {e}")

    if size < 0:
        raise ValueError(f"Invalid size format '{size_str}': size cannot be negative")
    return size
