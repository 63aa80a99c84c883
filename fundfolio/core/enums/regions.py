"""
Fund region enumerations.
"""

from enum import StrEnum


class Region(StrEnum):
    """
    Allowed fund region tags.

    US funds invest in American markets; everything else is tagged Offshore.
    """

    US = "US"
    OFFSHORE = "Offshore"

    @classmethod
    def from_string(cls, value: str) -> "Region":
        """
        Convert string to Region enum, with case-insensitive matching.

        Raises:
            ValueError: If region is not supported
        """
        normalized = value.strip().lower()
        if normalized in ["us", "usa"]:
            return cls.US
        elif normalized == "offshore":
            return cls.OFFSHORE
        else:
            raise ValueError(
                f"Unsupported region: {value}. "
                f"Supported regions: {', '.join([r.value for r in cls])}"
            )

    @property
    def is_domestic(self) -> bool:
        """Check if region is the domestic (US) market."""
        return self == self.US
