# Item value type
# src/inventory/schema.py

from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """
    One stocked item.

    - name: opaque identifier, compared as-is (no case folding / trimming)
    - quantity: non-negative unit count

    Items are immutable so the copy handed back by a lookup cannot drift
    from what the index stores.
    """
    name: str
    quantity: int = 0

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError(
                f"Item quantity must be non-negative, got {self.quantity} for {self.name!r}"
            )
