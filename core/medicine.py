from dataclasses import dataclass


@dataclass(frozen=True)
class Medicine:
    """Catalog entry. Immutable once cataloged."""

    medicine_id: str
    name: str
    description: str
    standard_dosage: str
    unit: str  # e.g. "mg", "ml", "tablets"

    def __str__(self) -> str:
        return f"{self.name} ({self.standard_dosage} {self.unit})"
