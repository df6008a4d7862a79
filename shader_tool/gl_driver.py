import sys

from OpenGL import GL, GLUT
from OpenGL.error import Error as GLBindingError

from .errors import ValidationUnavailable
from .validator import ShaderDriver, StageKind

WINDOW_TITLE = b"shader-tool"

SHADER_TYPES = {
    StageKind.VERTEX: GL.GL_VERTEX_SHADER,
    StageKind.FRAGMENT: GL.GL_FRAGMENT_SHADER,
}


def _log_text(log) -> str:
    if isinstance(log, bytes):
        log = log.decode("utf-8", errors="replace")
    return log.rstrip("\x00")


class GLUTDriver(ShaderDriver):
    """PyOpenGL driver bound to a hidden GLUT window.

    The window is never destroyed; it goes away with the process.
    """

    @classmethod
    def open(cls) -> "GLUTDriver":
        try:
            GLUT.glutInit(sys.argv[:1] or ["shader-tool"])
            GLUT.glutInitDisplayMode(GLUT.GLUT_DOUBLE | GLUT.GLUT_RGBA)
            GLUT.glutCreateWindow(WINDOW_TITLE)
            GLUT.glutHideWindow()
        except GLBindingError as e:
            raise ValidationUnavailable(f"GLUT context unavailable: {e}") from e
        return cls()

    def create_shader(self, kind: StageKind) -> int:
        return GL.glCreateShader(SHADER_TYPES[kind])

    def compile_shader(self, shader: int, source: str):
        GL.glShaderSource(shader, source)
        GL.glCompileShader(shader)

    def shader_status(self, shader: int) -> bool:
        return bool(GL.glGetShaderiv(shader, GL.GL_COMPILE_STATUS))

    def shader_log(self, shader: int) -> str:
        # PyOpenGL queries GL_INFO_LOG_LENGTH and sizes the buffer to match.
        return _log_text(GL.glGetShaderInfoLog(shader))

    def create_program(self) -> int:
        return GL.glCreateProgram()

    def attach_shader(self, program: int, shader: int):
        GL.glAttachShader(program, shader)

    def link_program(self, program: int):
        GL.glLinkProgram(program)

    def program_status(self, program: int) -> bool:
        return bool(GL.glGetProgramiv(program, GL.GL_LINK_STATUS))

    def program_log(self, program: int) -> str:
        return _log_text(GL.glGetProgramInfoLog(program))
