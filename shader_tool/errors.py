class ShaderToolError(Exception):
    """Base class for fatal shader-tool failures."""


class ArgumentError(ShaderToolError):
    pass


class ConfigError(ShaderToolError):
    def __init__(self, path, detail: str):
        super().__init__(f"Invalid configuration in {path}: {detail}")
        self.path = path
        self.detail = detail


class ValidationUnavailable(ShaderToolError):
    """The graphics driver or its bindings cannot be used on this machine.

    Only raised while probing; never reaches the process boundary.
    """


class CompileFailure(ShaderToolError):
    def __init__(self, stage_path):
        super().__init__(f"Shader compile failed: {stage_path}")
        self.stage_path = stage_path


class LinkFailure(ShaderToolError):
    def __init__(self, primary_path):
        super().__init__(f"Shader link failed: {primary_path}")
        self.primary_path = primary_path


class StagePairError(ShaderToolError):
    def __init__(self, source_path, companion_path, kind):
        super().__init__(
            f"Expected one vertex and one fragment shader, but both {source_path} "
            f"and {companion_path} are {kind.value} shaders"
        )
        self.source_path = source_path
        self.companion_path = companion_path
        self.kind = kind
