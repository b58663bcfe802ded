"""Root project configuration schema."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kitchenplan.application.config.schemas.base import SUPPORTED_VERSIONS
from kitchenplan.application.config.schemas.catalog_schema import (
    InstanceSchema,
    ProductSchema,
)
from kitchenplan.application.config.schemas.room_schema import (
    DimensionsSchema,
    RoomSchema,
    SnapSchema,
)


class ProjectConfiguration(BaseModel):
    """Root model of a kitchen project file.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        name: Optional project name.
        room: Room outline.
        dimensions: Category defaults and construction constants.
        snap: Snap engine tuning.
        materials: Material reference by part kind ("door") or group
            ("carcass", "front", "plinth").
        catalog: Products instances can refer to.
        instances: Placed cabinets, appliances and structures.

    Example:
        >>> config = ProjectConfiguration(
        ...     schema_version="1.0",
        ...     room=RoomSchema(width=4000, depth=3000),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    name: str | None = None
    room: RoomSchema
    dimensions: DimensionsSchema = Field(default_factory=DimensionsSchema)
    snap: SnapSchema = Field(default_factory=SnapSchema)
    materials: dict[str, str] = Field(default_factory=dict)
    catalog: list[ProductSchema] = Field(default_factory=list)
    instances: list[InstanceSchema] = Field(default_factory=list)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    def product(self, product_id: str) -> ProductSchema | None:
        """Find a catalog product by id."""
        for product in self.catalog:
            if product.product_id == product_id:
                return product
        return None
