"""Design signals inferred from a landing page prompt"""

from enum import Enum
from typing import NamedTuple
from pydantic import BaseModel, ConfigDict, Field


FALLBACK_PRODUCT_NAME = "YourBrand"


class Palette(NamedTuple):
    """Four colors applied uniformly across the stylesheet"""
    primary: str
    secondary: str
    background: str
    text: str


class ColorScheme(str, Enum):
    """Color schemes, one active per document"""
    DEFAULT = "default"
    DARK = "dark"
    BLUE = "blue"
    GREEN = "green"
    PURPLE = "purple"
    RED = "red"

    @property
    def palette(self) -> Palette:
        return PALETTES[self]

    @property
    def is_dark(self) -> bool:
        return self is ColorScheme.DARK


PALETTES = {
    ColorScheme.DEFAULT: Palette("#4F46E5", "#3B82F6", "#FFFFFF", "#1F2937"),
    ColorScheme.DARK: Palette("#6366F1", "#8B5CF6", "#111827", "#F9FAFB"),
    ColorScheme.BLUE: Palette("#3B82F6", "#2563EB", "#FFFFFF", "#1F2937"),
    ColorScheme.GREEN: Palette("#10B981", "#059669", "#FFFFFF", "#1F2937"),
    ColorScheme.PURPLE: Palette("#8B5CF6", "#7C3AED", "#FFFFFF", "#1F2937"),
    ColorScheme.RED: Palette("#EF4444", "#DC2626", "#FFFFFF", "#1F2937"),
}


class ToneFlags(BaseModel):
    """Independent tone flags; several may be set at once"""
    model_config = ConfigDict(frozen=True)

    is_dark: bool = False
    is_minimal: bool = False
    is_saas: bool = False
    is_product: bool = False
    is_agency: bool = False


class SectionFlags(BaseModel):
    """Which optional body sections are emitted"""
    model_config = ConfigDict(frozen=True)

    has_features: bool = False
    has_pricing: bool = False
    has_testimonials: bool = False
    has_cta: bool = True


class SignalBundle(BaseModel):
    """Everything the composer needs to render one document"""
    model_config = ConfigDict(frozen=True)

    tone: ToneFlags = Field(default_factory=ToneFlags)
    color_scheme: ColorScheme = ColorScheme.DEFAULT
    product_name: str = Field(default=FALLBACK_PRODUCT_NAME, min_length=1)
    sections: SectionFlags = Field(default_factory=SectionFlags)

    @property
    def palette(self) -> Palette:
        return self.color_scheme.palette
