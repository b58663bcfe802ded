"""Room, global dimension and snap tuning schemas."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from kitchenplan.application.config.schemas.base import RoomShape


class RoomSchema(BaseModel):
    """Room outline in millimetres.

    Attributes:
        width: Left wall to right wall.
        depth: Back wall to front wall.
        height: Floor to ceiling.
        shape: Rectangle or LShape.
        cutout_width: Width of the removed front-right corner (LShape only).
        cutout_depth: Depth of the removed front-right corner (LShape only).
    """

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, le=50000)
    depth: float = Field(..., gt=0, le=50000)
    height: float = Field(default=2400.0, gt=0, le=10000)
    shape: RoomShape = RoomShape.RECTANGLE
    cutout_width: float = Field(default=0.0, ge=0)
    cutout_depth: float = Field(default=0.0, ge=0)

    @model_validator(mode="after")
    def validate_cutout(self) -> "RoomSchema":
        """Require a cutout for L-shaped rooms and forbid one otherwise."""
        has_cutout = self.cutout_width > 0 or self.cutout_depth > 0
        if self.shape == RoomShape.RECTANGLE:
            if has_cutout:
                raise ValueError("cutout_width/cutout_depth require shape 'LShape'")
            return self
        if self.cutout_width <= 0 or self.cutout_depth <= 0:
            raise ValueError(
                "LShape rooms need a positive cutout_width and cutout_depth"
            )
        if self.cutout_width >= self.width or self.cutout_depth >= self.depth:
            raise ValueError("Cutout must be smaller than the room")
        return self


class DimensionsSchema(BaseModel):
    """Category defaults and construction constants.

    Reveal and gap fields are optional. When given they override every
    recipe's own reveals.
    """

    model_config = ConfigDict(extra="forbid")

    base_height: float = Field(default=870.0, gt=0, le=1500)
    base_depth: float = Field(default=575.0, gt=0, le=1200)
    wall_height: float = Field(default=720.0, gt=0, le=1500)
    wall_depth: float = Field(default=350.0, gt=0, le=1200)
    tall_height: float = Field(default=2100.0, gt=0, le=3000)
    tall_depth: float = Field(default=580.0, gt=0, le=1200)
    toe_kick_height: float = Field(default=135.0, ge=0, le=300)
    benchtop_thickness: float = Field(default=33.0, gt=0, le=100)
    benchtop_overhang: float = Field(default=25.0, ge=0, le=200)
    board_thickness: float = Field(default=18.0, gt=0, le=50)
    handle_drill_spacing: float = Field(default=32.0, gt=0, le=100)
    shadow_gap: float = Field(default=1.0, ge=0, le=20)
    door_gap: float | None = Field(default=None, ge=0, le=20)
    drawer_gap: float | None = Field(default=None, ge=0, le=20)
    top_reveal: float | None = Field(default=None, ge=0, le=50)
    bottom_reveal: float | None = Field(default=None, ge=0, le=50)
    side_reveal: float | None = Field(default=None, ge=0, le=50)


class SnapSchema(BaseModel):
    """Snap engine tuning. Omitted values use the engine defaults."""

    model_config = ConfigDict(extra="forbid")

    grid_size: float = Field(default=50.0, gt=0, le=1000)
    wall_threshold: float = Field(default=150.0, ge=0, le=2000)
    wall_release_threshold: float = Field(default=350.0, ge=0, le=2000)
    cabinet_threshold: float = Field(default=250.0, ge=0, le=2000)
    align_threshold: float | None = Field(default=None, ge=0, le=2000)
    collision_padding: float = Field(default=5.0, ge=0, le=100)
    push_margin: float = Field(default=10.0, ge=0, le=500)
    wall_gap: float = Field(default=0.0, ge=0, le=500)
    drag_threshold: float = Field(default=20.0, ge=0, le=500)
