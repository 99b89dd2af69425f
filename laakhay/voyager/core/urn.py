"""Uniform resource name (URN) codec.

Voyager payloads reference every entity by a colon-delimited URN such as
``urn:li:fs_miniProfile:ACoAAB1234`` or ``urn:li:fsd_company:1337``. Only the
namespace (third component) and the id (fourth component) carry meaning for
callers; everything else is ignored so qualifier variants keep parsing.

Formatting always produces the ``urn:li:`` qualifier, so ``format_urn`` is not
guaranteed to reproduce the original string byte for byte. Only the id is
guaranteed to survive a parse/format round trip.

Examples:
    >>> Urn.parse("urn:li:fs_miniProfile:ACoAAB1234").id
    'ACoAAB1234'
    >>> str(Urn(namespace="member", id="42"))
    'urn:li:member:42'
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidInputError

URN_SEPARATOR = ":"
URN_PREFIX = "urn:li"
_MIN_PARTS = 4


@dataclass(frozen=True)
class Urn:
    """Parsed URN.

    Attributes:
        namespace: Context of the id (e.g. ``fs_miniProfile``, ``member``)
        id: Opaque entity id
    """

    namespace: str
    id: str

    @classmethod
    def parse(cls, raw: str) -> Urn:
        """Parse a raw URN string.

        Args:
            raw: URN string with at least four colon-delimited parts

        Returns:
            Parsed Urn

        Raises:
            InvalidInputError: If the string has fewer than four parts
        """
        if not isinstance(raw, str):
            raise InvalidInputError(f"Invalid URN: expected str, got {type(raw).__name__}")
        parts = raw.split(URN_SEPARATOR)
        if len(parts) < _MIN_PARTS:
            raise InvalidInputError(
                f"Invalid URN: {raw!r}. Expected format: urn:<qualifier>:<namespace>:<id>"
            )
        return cls(namespace=parts[2], id=parts[3])

    def __str__(self) -> str:
        return f"{URN_PREFIX}:{self.namespace}:{self.id}"


def parse_urn(raw: str) -> Urn:
    """Parse a raw URN string. See :meth:`Urn.parse`."""
    return Urn.parse(raw)


def format_urn(urn: Urn) -> str:
    """Format a Urn as ``urn:li:<namespace>:<id>``."""
    return str(urn)


def get_id_from_urn(raw: str) -> str:
    """Extract the id component of a raw URN string."""
    return Urn.parse(raw).id
