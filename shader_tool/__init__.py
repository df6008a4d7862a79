from .config import ToolConfig, load_config
from .emitter import emit, read_source, render_literals, split_lines
from .errors import (
    ArgumentError,
    CompileFailure,
    ConfigError,
    LinkFailure,
    ShaderToolError,
    StagePairError,
    ValidationUnavailable,
)
from .validator import (
    Availability,
    CompiledStage,
    DriverProbe,
    LinkedProgram,
    ShaderDriver,
    StageKind,
    compile_stage,
    link_program,
    probe_driver,
    stage_kind,
    validate,
)

__all__ = [
    "ArgumentError",
    "Availability",
    "CompileFailure",
    "CompiledStage",
    "ConfigError",
    "DriverProbe",
    "LinkFailure",
    "LinkedProgram",
    "ShaderDriver",
    "ShaderToolError",
    "StageKind",
    "StagePairError",
    "ToolConfig",
    "ValidationUnavailable",
    "compile_stage",
    "emit",
    "link_program",
    "load_config",
    "probe_driver",
    "read_source",
    "render_literals",
    "split_lines",
    "stage_kind",
    "validate",
]
