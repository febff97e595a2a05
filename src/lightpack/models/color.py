"""Color model for LED control."""

from pydantic import BaseModel, ConfigDict, Field


class Color(BaseModel):
    """Standard 8-bit RGB color model.

    The Lightpack API takes 8-bit components (0-255) directly, so no
    device-specific conversion is needed. The model is frozen so colors
    can be used as dict keys and shared between calls.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255, description="Red (0-255)")
    g: int = Field(ge=0, le=255, description="Green (0-255)")
    b: int = Field(ge=0, le=255, description="Blue (0-255)")

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Create a color from a CSS hex string.

        Args:
            value: '#RRGGBB' or 'RRGGBB'

        Raises:
            ValueError: If the string is not six hex digits

        Example:
            >>> Color.from_hex("#FF8000")
            Color(r=255, g=128, b=0)
        """
        digits = value.strip().lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Expected 6 hex digits, got {value!r}")
        try:
            r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        except ValueError as e:
            raise ValueError(f"Invalid hex color {value!r}") from e
        return cls(r=r, g=g, b=b)

    def to_hex(self) -> str:
        """Convert to CSS hex color string (e.g., '#FF0000')."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"
