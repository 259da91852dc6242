"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pillcolor.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".pillcolor" / "config.json"


class ClassifierThresholds(BaseModel):
    """Saturation/value cut-offs used by the HSV classifier.

    All values are percentages. Comparisons are strict (``<`` / ``>``).
    """

    model_config = ConfigDict(frozen=True)

    achromatic_saturation: float = Field(
        default=20, ge=0, le=100,
        description="Below this saturation a color is White, Gray or Black",
    )
    white_value: float = Field(
        default=80, ge=0, le=100,
        description="Above this value a low-saturation color is White",
    )
    black_value: float = Field(
        default=20, ge=0, le=100,
        description="Below this value any color is Black",
    )
    light_value: float = Field(
        default=80, ge=0, le=100,
        description="Above this value (with low saturation) a hue is Light",
    )
    light_saturation: float = Field(
        default=60, ge=0, le=100,
        description="Below this saturation (with high value) a hue is Light",
    )
    dark_value: float = Field(
        default=40, ge=0, le=100,
        description="Below this value a hue is Dark",
    )


class AppConfig(BaseModel):
    """Application configuration and settings."""

    thresholds: ClassifierThresholds = Field(
        default_factory=ClassifierThresholds,
        description="Classifier cut-offs",
    )
    show_hsv: bool = Field(
        default=False, description="Print the HSV triple next to each label"
    )
    uppercase_hex: bool = Field(
        default=True, description="Render hex values as '#C2894E' rather than '#c2894e'"
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.pillcolor/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
