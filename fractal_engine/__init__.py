from .geometry import Point, Segment, Frame, advance, heading_between, as_array, bounding_box
from .validate import ConfigurationError
from .params import ShapeParameters, koch_snowflake, binary_tree, symmetric_tree
from .generators import (
    GenerationResult,
    ShapeGenerator,
    EdgeBendingGenerator,
    BranchGenerator,
    BinaryBranchGenerator,
    SymmetricBranchGenerator,
    create_generator,
)
from .stepper import DepthStepper, StepperPhase, StepperState, StepStatus
from .sinks import RenderSink, PolylineSink, SegmentListSink, StatusSink
from .clock import FrameClock, run_to_completion
from .config import EngineConfig, get_engine_config, set_engine_config
from .render import (
    RecordingSink,
    MatplotlibSink,
    TikzSink,
    generate_tikz_code,
    generate_tikz_document,
)

__all__ = [
    'Point',
    'Segment',
    'Frame',
    'advance',
    'heading_between',
    'as_array',
    'bounding_box',
    'ConfigurationError',
    'ShapeParameters',
    'koch_snowflake',
    'binary_tree',
    'symmetric_tree',
    'GenerationResult',
    'ShapeGenerator',
    'EdgeBendingGenerator',
    'BranchGenerator',
    'BinaryBranchGenerator',
    'SymmetricBranchGenerator',
    'create_generator',
    'DepthStepper',
    'StepperPhase',
    'StepperState',
    'StepStatus',
    'RenderSink',
    'PolylineSink',
    'SegmentListSink',
    'StatusSink',
    'FrameClock',
    'run_to_completion',
    'EngineConfig',
    'get_engine_config',
    'set_engine_config',
    'RecordingSink',
    'MatplotlibSink',
    'TikzSink',
    'generate_tikz_code',
    'generate_tikz_document',
]
