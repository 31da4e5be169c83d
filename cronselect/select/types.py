"""Selection types - the data model shared by every selection component.

A field is described once by a UnitDescriptor. Its state is a Selection,
which is EITHER a set of discrete values OR a single periodic token:
- DiscreteSelection: sorted, distinct integers (empty = "match everything")
- PeriodicSelection: "every step units, starting at the unit minimum"

All models are frozen. Operations return new objects, never mutate.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

UnitKind = Literal["minutes", "hours", "monthDays", "months", "weekDays"]

# Kinds that accept periodic "*/N" options and the "every N" shorthand
PERIODIC_KINDS: tuple[str, ...] = ("minutes", "hours")


class UnitDescriptor(BaseModel):
    """Numeric domain of one cron-style field.

    Attributes:
        kind: Semantic kind of the field
        min: Smallest selectable value (inclusive)
        max: Largest selectable value (inclusive)
    """

    model_config = ConfigDict(frozen=True)

    kind: UnitKind
    min: int
    max: int

    @model_validator(mode="after")
    def validate_bounds(self) -> "UnitDescriptor":
        if self.min > self.max:
            raise ValueError(f"Unit {self.kind}: min ({self.min}) must not exceed max ({self.max})")
        return self

    @property
    def count(self) -> int:
        return self.max - self.min + 1

    @property
    def supports_periodicity(self) -> bool:
        return self.kind in PERIODIC_KINDS

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


class DiscreteSelection(BaseModel):
    """Explicit set of selected values, stored sorted and de-duplicated."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["discrete"] = "discrete"
    values: tuple[int, ...] = ()

    @field_validator("values", mode="before")
    @classmethod
    def sort_values(cls, value: object) -> object:
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(sorted(set(value)))
        return value

    @property
    def is_empty(self) -> bool:
        return not self.values


class PeriodicSelection(BaseModel):
    """Every `step` units, anchored at the unit minimum."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["periodic"] = "periodic"
    step: int = Field(ge=1)

    @property
    def is_empty(self) -> bool:
        return False


Selection = Annotated[DiscreteSelection | PeriodicSelection, Field(discriminator="kind")]

EMPTY_SELECTION = DiscreteSelection()


def discrete(*values: int) -> DiscreteSelection:
    """Shorthand constructor: discrete(1, 2, 3)."""
    return DiscreteSelection(values=values)


class Option(BaseModel):
    """A selectable entry of the dropdown.

    Attributes:
        token: Decimal integer string, or "*/N" for a periodic pseudo-option
        label: Display label
        is_periodic: True for "*/N" pseudo-options
    """

    model_config = ConfigDict(frozen=True)

    token: str
    label: str
    is_periodic: bool = False


class ClickEvent(BaseModel):
    """A single pointer click on an option, held only inside the debounce window."""

    model_config = ConfigDict(frozen=True)

    token: str
    timestamp_ms: int


class Toggle(BaseModel):
    """Add or remove one value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["toggle"] = "toggle"
    token: str


class RangeToggle(BaseModel):
    """Two different options clicked within one window - toggle both."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["range_toggle"] = "range_toggle"
    token_a: str
    token_b: str


class PeriodicReplace(BaseModel):
    """Same option double-clicked - replace the selection with every `step` units."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["periodic_replace"] = "periodic_replace"
    step: int


SemanticAction = Annotated[Toggle | RangeToggle | PeriodicReplace, Field(discriminator="kind")]
