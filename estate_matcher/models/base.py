"""Base models shared across the CRM."""

from dataclasses import dataclass


@dataclass
class Address:
    """Australian street address.

    ``suburb`` is the locality used for location matching; ``state`` is
    the state/territory abbreviation (NSW, VIC, ...).
    """

    street: str
    suburb: str
    state: str
    postcode: str
    country: str = "AU"

    @property
    def one_line(self) -> str:
        """Address formatted on a single line."""
        return f"{self.street}, {self.suburb} {self.state} {self.postcode}".strip()
