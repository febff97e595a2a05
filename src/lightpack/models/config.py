"""Client connection configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from lightpack.persistence import load_model, save_model

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3636
DEFAULT_CONFIG_PATH = Path.home() / ".lightpack" / "config.json"


class ClientConfig(BaseModel):
    """Where the Lightpack server lives and how its LEDs are numbered."""

    host: str = Field(default=DEFAULT_HOST, min_length=1, description="Prismatik server host")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="Prismatik server port")
    led_map: list[int] = Field(
        default_factory=list,
        description=(
            "Device LED channel numbers in logical order. "
            "Used by set_color_for_all to address every LED."
        ),
    )
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Socket timeout in seconds (None = block indefinitely)",
    )

    @field_validator("led_map")
    @classmethod
    def validate_led_map(cls, v: list[int]) -> list[int]:
        """Reject negative channel numbers."""
        for index, led in enumerate(v):
            if led < 0:
                raise ValueError(f"led_map[{index}] must be non-negative, got {led}")
        return v

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "ClientConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.lightpack/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        config = load_model(path, cls)
        return cls() if config is None else config

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        save_model(self, path)
