"""Move/resize geometry for ``wmctrl -e``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

UNCHANGED = -1
GRAVITY_DEFAULT = 0


class TransformSpec(BaseModel):
    """Target position and size; ``-1`` leaves a field as it is.

    Positions may be negative (off-screen or left of the primary monitor).
    Sizes below the sentinel are rejected.
    """

    model_config = ConfigDict(frozen=True)

    x: int = UNCHANGED
    y: int = UNCHANGED
    width: int = Field(default=UNCHANGED, ge=UNCHANGED)
    height: int = Field(default=UNCHANGED, ge=UNCHANGED)

    @classmethod
    def unchanged(cls) -> TransformSpec:
        return cls()

    def to_argument(self) -> str:
        """Render the five-field ``gravity,x,y,w,h`` argument."""
        fields = (GRAVITY_DEFAULT, self.x, self.y, self.width, self.height)
        return ",".join(str(value) for value in fields)
