from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast
from ..types.color_types import Scalar
from ..utils import get_dimension
import numpy as np


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # no __dict__ → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[str]
    _type:      ClassVar[type]
    maxima:     ClassVar[Tuple[Scalar, ...]]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, value: Any) -> None:
        if self.num_channels != len(self.maxima):
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            if value.mode != self.mode:
                raise TypeError(f"Cannot build {self.mode} color from {value.mode} color")
            value = value.value

        # ---- Handle array input ----
        if isinstance(value, np.ndarray):
            if value.shape != (self.num_channels,):
                raise ValueError(
                    f"{self.mode} expects shape ({self.num_channels},), got shape {value.shape}"
                )
            value = value.tolist()

        value_dim = get_dimension(value)
        if value_dim != self.num_channels or isinstance(value, (str, bytes)):
            raise ValueError(f"{self.mode} expects {self.num_channels}-channel value, got {value!r}")

        # type enforcement
        value = tuple(self._type(v) for v in cast(Tuple[Any, ...], value))

        # clamp value
        value = tuple(
            max(0, min(v, m)) for v, m in zip(value, self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    def __iter__(self):
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index):
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return self.mode == other.mode and self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}{self._value!r}"

    def __reduce__(self):
        return (self.__class__, (self._value,))
