"""Cross-reference checks and placement advisories for project files.

Schema validation checks each object on its own. The checks here look
across objects: product references, duplicate ids, and placements that
the snap engine would flag (items outside the room or overlapping).
"""

from dataclasses import dataclass, field
from typing import Any

from kitchenplan.application.config.schemas import ProjectConfiguration
from kitchenplan.domain.value_objects import BoundingBox, normalize_rotation

# Overlap tolerated between two placed items, matches the collision padding
DEFAULT_OVERLAP_TOLERANCE: float = 5.0


@dataclass
class ValidationError:
    """A blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "instances[2].product_id")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_references(config: ProjectConfiguration) -> ValidationResult:
    """Check ids and product references across the project.

    Errors:
    - Two catalog products share an id
    - Two instances share an id
    - An instance refers to a product missing from the catalog
    - A corner override on an instance of a non-corner product

    Args:
        config: A schema-validated ProjectConfiguration

    Returns:
        ValidationResult with any errors found
    """
    result = ValidationResult()

    seen_products: set[str] = set()
    for i, product in enumerate(config.catalog):
        if product.product_id in seen_products:
            result.add_error(
                f"catalog[{i}].product_id",
                "Duplicate product id",
                product.product_id,
            )
        seen_products.add(product.product_id)

    seen_instances: set[str] = set()
    for i, instance in enumerate(config.instances):
        path = f"instances[{i}]"
        if instance.instance_id in seen_instances:
            result.add_error(
                f"{path}.instance_id", "Duplicate instance id", instance.instance_id
            )
        seen_instances.add(instance.instance_id)

        product = config.product(instance.product_id)
        if product is None:
            result.add_error(
                f"{path}.product_id",
                "Unknown product id, not found in catalog",
                instance.product_id,
            )
            continue
        if instance.corner_type is not None and product.kind.type != "corner":
            result.add_error(
                f"{path}.corner_type",
                f"corner_type set on non-corner product '{product.product_id}'",
                instance.corner_type.value,
            )

    return result


def _footprint(config: ProjectConfiguration, index: int) -> BoundingBox | None:
    """Footprint of an instance, or None when its size is not known here."""
    instance = config.instances[index]
    product = config.product(instance.product_id)
    default = product.default_size if product is not None else None
    width = instance.width or (default.width if default else None)
    depth = instance.depth or (default.depth if default else None)
    if width is None or depth is None:
        return None
    if normalize_rotation(instance.rotation) in (90, 270):
        width, depth = depth, width
    return BoundingBox.around(instance.x, instance.z, width, depth)


def check_placement_advisories(
    config: ProjectConfiguration,
    overlap_tolerance: float = DEFAULT_OVERLAP_TOLERANCE,
) -> ValidationResult:
    """Warn about stored placements the snap engine would not produce.

    Warnings:
    - Item footprint extends past the room walls
    - Two item footprints overlap by more than the tolerance

    Instances without an explicit or product default size are skipped,
    their size is only known once category defaults are applied.

    Args:
        config: A schema-validated ProjectConfiguration
        overlap_tolerance: Overlap allowed between two items

    Returns:
        ValidationResult containing any warnings found
    """
    result = ValidationResult()
    room = config.room
    boxes = [_footprint(config, i) for i in range(len(config.instances))]

    for i, box in enumerate(boxes):
        if box is None:
            continue
        path = f"instances[{i}]"
        if box.left < 0 or box.back < 0 or box.right > room.width or (
            box.front > room.depth
        ):
            result.add_warning(
                path,
                "Item extends outside the room",
                suggestion="Move the item or run 'kitchenplan snap' to re-place it",
            )
        for j in range(i + 1, len(boxes)):
            other = boxes[j]
            if other is not None and box.overlaps(other, overlap_tolerance):
                result.add_warning(
                    path,
                    f"Item overlaps instances[{j}] "
                    f"('{config.instances[j].instance_id}')",
                )

    return result


def validate_config(config: ProjectConfiguration) -> ValidationResult:
    """Run every cross-reference check and placement advisory.

    Args:
        config: A schema-validated ProjectConfiguration

    Returns:
        Combined ValidationResult
    """
    result = check_references(config)
    result.merge(check_placement_advisories(config, config.snap.collision_padding))
    return result
