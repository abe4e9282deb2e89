from enum import Enum


class AnimationStyle(str, Enum):
    WAVE = "wave"
    PULSE = "pulse"
    BREATHE = "breathe"
    FLOW = "flow"

    @property
    def display_name(self) -> str:
        return _display_names[self]

    @property
    def description(self) -> str:
        return _descriptions[self]

    def calculate_position(
        self,
        char_index: int,
        text_length: int,
        spread: float,
        tick: int,
        speed: float,
    ) -> float:
        """Gradient position of one character under this style."""
        from ..gradients.position import position  # local import to avoid cycles
        return position(self, char_index, text_length, spread, tick, speed)

    @classmethod
    def from_name(cls, name: "str | AnimationStyle") -> "AnimationStyle":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            valid = ", ".join(s.value for s in cls)
            raise ValueError(f"Invalid animation style: {name!r} (expected one of {valid})") from None


_display_names = {
    AnimationStyle.WAVE: "Wave",
    AnimationStyle.PULSE: "Pulse",
    AnimationStyle.BREATHE: "Breathe",
    AnimationStyle.FLOW: "Flow",
}

_descriptions = {
    AnimationStyle.WAVE: "Smooth left-to-right flowing gradient",
    AnimationStyle.PULSE: "Gradient emanates from center outward",
    AnimationStyle.BREATHE: "Gentle pulsing glow like a heartbeat",
    AnimationStyle.FLOW: "Smooth flow for fine-grained tick sources",
}
