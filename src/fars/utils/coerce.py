"""Integer coercion for year and state-code arguments."""

from typing import Union

NumberLike = Union[int, float, str]


def as_int(value: NumberLike, label: str = "value") -> int:
    """Coerce an int, float or numeric string to ``int``, truncating.

    Digit-only strings are parsed exactly; other numeric strings
    (``"2013.0"``, ``"1.5"``) go through ``float`` and are truncated
    toward zero.

    Args:
        value: Value to coerce.
        label: Name used in the error message (``'year'``, ``'STATE'``).

    Returns:
        The truncated integer.

    Raises:
        ValueError: If *value* is not numeric, or is NaN or infinite.
    """
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            raise ValueError(f"invalid {label}: {value!r}") from None

    try:
        return int(value)
    except (OverflowError, TypeError, ValueError) as exc:
        raise ValueError(f"invalid {label}: {value!r}") from exc
