"""Kubernetes resource quantity parsing."""

import logging
import re
from decimal import Decimal, InvalidOperation

from meshsidecar.errors import InvalidQuantity
from meshsidecar.models.resources import Quantity, ResourceField


logger = logging.getLogger(__name__)

_BINARY_SI = {
    "Ki": Decimal(2) ** 10,
    "Mi": Decimal(2) ** 20,
    "Gi": Decimal(2) ** 30,
    "Ti": Decimal(2) ** 40,
    "Pi": Decimal(2) ** 50,
    "Ei": Decimal(2) ** 60,
}

_DECIMAL_SI = {
    "n": Decimal("1e-9"),
    "u": Decimal("1e-6"),
    "m": Decimal("1e-3"),
    "": Decimal(1),
    "k": Decimal("1e3"),
    "M": Decimal("1e6"),
    "G": Decimal("1e9"),
    "T": Decimal("1e12"),
    "P": Decimal("1e15"),
    "E": Decimal("1e18"),
}

_QUANTITY_RE = re.compile(
    r"(?P<number>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+))"
    r"(?:(?P<exponent>[eE][+-]?[0-9]+)|(?P<suffix>Ki|Mi|Gi|Ti|Pi|Ei|[numkMGTPE]?))"
)


def parse_quantity(value: str, field: ResourceField) -> Quantity:
    """Parse a quantity such as ``250m``, ``1.5``, ``256Mi`` or ``1e3``.

    Raises InvalidQuantity naming ``field`` when ``value`` does not match
    the grammar.
    """
    match = _QUANTITY_RE.fullmatch(value)
    if not match:
        raise InvalidQuantity(field, value)

    try:
        number = Decimal(match.group("number"))
        exponent = match.group("exponent")
        if exponent is not None:
            amount = number.scaleb(int(exponent[1:]))
        else:
            suffix = match.group("suffix")
            amount = number * _BINARY_SI.get(suffix, _DECIMAL_SI.get(suffix))
    except (InvalidOperation, TypeError) as e:
        raise InvalidQuantity(field, value) from e

    logger.debug(f"Parsed {field.value} {value!r} as {amount}")
    return Quantity(raw=value, amount=amount)
