"""
Contact information value type.

A ``ContactInfo`` is produced once per parsed business card and carries
the person's name, a digits-only phone number and an email address.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

# Rendered in place of a field that was not found on the card.
NOT_FOUND = "Not found"

_LABELS = (
    ("name", "Name"),
    ("phone_number", "Phone"),
    ("email_address", "Email"),
)


@dataclass(frozen=True)
class ContactInfo:
    """Immutable result of parsing one business card.

    Attributes:
        name: Person's name, or None if not found
        phone_number: Phone number as a string of digits, or None
        email_address: Email address as written on the card, or None
    """

    name: Optional[str] = None
    phone_number: Optional[str] = None
    email_address: Optional[str] = None

    def __post_init__(self):
        # Each field is either a non-empty string or absent.
        for attr, _ in _LABELS:
            if getattr(self, attr) == "":
                object.__setattr__(self, attr, None)

    def is_empty(self) -> bool:
        """Return True when no field was found."""
        return all(getattr(self, attr) is None for attr, _ in _LABELS)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "phone_number": self.phone_number,
            "email_address": self.email_address,
        }

    def __str__(self) -> str:
        lines = []
        for attr, label in _LABELS:
            value = getattr(self, attr)
            lines.append(f"{label}: {value if value is not None else NOT_FOUND}")
        return "\n".join(lines)

    @classmethod
    def from_text(cls, text: str) -> "ContactInfo":
        """Read back the canonical rendering produced by ``str()``.

        Args:
            text: Three lines of the form ``Name: ...``, ``Phone: ...``,
                ``Email: ...`` in that order

        Returns:
            ContactInfo with the placeholder mapped back to None

        Raises:
            ValueError: If the text is not a canonical rendering
        """
        # Only "\n" separates fields; other line breaks may occur in values.
        lines = [line.rstrip("\r") for line in text.rstrip("\r\n").split("\n")]
        if len(lines) != len(_LABELS):
            raise ValueError(f"Expected {len(_LABELS)} lines, got {len(lines)}")

        values = {}
        for line, (attr, label) in zip(lines, _LABELS):
            prefix = f"{label}: "
            if not line.startswith(prefix):
                raise ValueError(f"Expected line starting with '{prefix}', got: {line!r}")
            value = line[len(prefix):]
            values[attr] = None if value == NOT_FOUND else value

        return cls(**values)
