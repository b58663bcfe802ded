"""Part generators for cabinet assembly.

Importing this package registers every built-in generator with
``generator_registry``.
"""

from .context import DEFAULT_MATERIAL, AssemblyContext, InstanceOptions
from .drawers import (
    DRAWER_PROPORTIONS,
    combination_drawer_section,
    distribute_drawer_heights,
)
from .protocol import PartGenerator
from .registry import GeneratorRegistry, generator_registry
from .results import Assembly, AssemblyWarning, GenerationResult, WarningCode

# Generator modules register themselves on import
from .carcass import StandardCarcassGenerator
from .shelves import InteriorShelfGenerator, shelf_heights
from .fronts import StandardFrontGenerator
from .corner import (
    BlindCornerGenerator,
    CornerArms,
    CornerCarcassGenerator,
    CornerFrontGenerator,
    corner_arms,
)
from .toe_kick import PlinthGenerator
from .appliance import ApplianceCavityGenerator
from .benchtop import BenchtopGenerator
from .accessories import EndPanelGenerator, FillerGenerator

__all__ = [
    "DEFAULT_MATERIAL",
    "DRAWER_PROPORTIONS",
    "ApplianceCavityGenerator",
    "Assembly",
    "AssemblyContext",
    "AssemblyWarning",
    "BenchtopGenerator",
    "BlindCornerGenerator",
    "CornerArms",
    "CornerCarcassGenerator",
    "CornerFrontGenerator",
    "EndPanelGenerator",
    "FillerGenerator",
    "GenerationResult",
    "GeneratorRegistry",
    "InstanceOptions",
    "InteriorShelfGenerator",
    "PartGenerator",
    "PlinthGenerator",
    "StandardCarcassGenerator",
    "StandardFrontGenerator",
    "WarningCode",
    "combination_drawer_section",
    "corner_arms",
    "distribute_drawer_heights",
    "generator_registry",
    "shelf_heights",
]
