"""Result of naming one color sample."""

from pydantic import BaseModel, ConfigDict

from .color import HsvTriple


class ColorReading(BaseModel):
    """A named color sample.

    Renderers only need ``hex`` and ``label``; ``hsv`` is kept for
    diagnostics.
    """

    model_config = ConfigDict(frozen=True)

    hex: str
    hsv: HsvTriple
    label: str

    def format_hex(self, uppercase: bool = True) -> str:
        """Return the normalized hex string in the requested case."""
        return self.hex if uppercase else self.hex.lower()
