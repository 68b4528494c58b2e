from typing import Any, Optional

DASH = "—"


def group_indian(number: int) -> str:
    """Digit grouping used in India: 12345678 -> 1,23,45,678."""
    digits = str(abs(int(number)))
    if len(digits) <= 3:
        grouped = digits
    else:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        grouped = ",".join(groups + [tail])
    return f"-{grouped}" if number < 0 else grouped


def format_rupees(value: Optional[float]) -> str:
    if value is None or isinstance(value, bool):
        return DASH
    try:
        return f"₹{group_indian(int(round(float(value))))}"
    except (TypeError, ValueError, OverflowError):
        return DASH


def display(value: Any) -> Any:
    """Placeholder dash for absent values."""
    if value is None or value == "":
        return DASH
    return value


def to_title(value):
    if value is None:
        return None
    if isinstance(value, str):
        return value.replace("_", " ").title()
    return value
