"""Shape generators for the supported fractal families."""

from typing import Dict, Optional, Type

from ..params import ShapeParameters
from ..validate import ConfigurationError
from .base import FrameLike, GenerationResult, ShapeGenerator
from .branching import (
    BinaryBranchGenerator,
    BranchGenerator,
    ChildSpread,
    SymmetricBranchGenerator,
    even_spread,
    pair_spread,
)
from .edge_bending import EdgeBendingGenerator

GENERATORS: Dict[str, Type[ShapeGenerator]] = {
    'koch': EdgeBendingGenerator,
    'binary': BinaryBranchGenerator,
    'symmetric': SymmetricBranchGenerator,
}


def create_generator(family: str, params: Optional[ShapeParameters] = None) -> ShapeGenerator:
    """Instantiate the generator registered under ``family``."""

    try:
        cls = GENERATORS[family.strip().lower()]
    except KeyError:
        raise ConfigurationError(
            f'unknown fractal family {family!r} (expected one of: {", ".join(sorted(GENERATORS))})'
        ) from None
    return cls(params)


__all__ = [
    'FrameLike',
    'GenerationResult',
    'ShapeGenerator',
    'BranchGenerator',
    'BinaryBranchGenerator',
    'SymmetricBranchGenerator',
    'EdgeBendingGenerator',
    'ChildSpread',
    'even_spread',
    'pair_spread',
    'GENERATORS',
    'create_generator',
]
