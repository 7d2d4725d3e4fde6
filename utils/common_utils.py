from decimal import Decimal
import re


def parse_money(text: str) -> Decimal:
    """
        'Total: $140.34' -> Decimal('140.34')
        """
    match = re.search(r"\$([\d.]+)", text)
    if not match:
        raise ValueError(f"Cannot parse an amount from: {text!r}")
    return Decimal(match.group(1))
