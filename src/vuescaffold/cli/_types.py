"""Enums for CLI options."""

from enum import Enum


class Preset(str, Enum):
    """Defaults applied to toggles that were neither passed nor prompted."""

    BASIC = "basic"
    FULL = "full"

    @property
    def label(self) -> str:
        labels: dict[Preset, str] = {
            Preset.BASIC: "Basic",
            Preset.FULL: "Full",
        }
        return labels[self]

    @property
    def description(self) -> str:
        descriptions: dict[Preset, str] = {
            Preset.BASIC: "Vue, Vite and Ant Design Vue only.",
            Preset.FULL: "Basic plus Pinia and Vue Router.",
        }
        return descriptions[self]

    @property
    def enables_modules(self) -> bool:
        return self is Preset.FULL
