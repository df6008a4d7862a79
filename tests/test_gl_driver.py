import sys

import pytest

from shader_tool.errors import ValidationUnavailable
from shader_tool.validator import StageKind

gl_driver = pytest.importorskip("shader_tool.gl_driver")
from OpenGL.error import NullFunctionError  # noqa: E402


class RecordingGL:
    GL_COMPILE_STATUS = 0x8B81
    GL_LINK_STATUS = 0x8B82

    def __init__(self, compile_status=1, link_status=1, shader_log=b"", program_log=b""):
        self.compile_status = compile_status
        self.link_status = link_status
        self.shader_log = shader_log
        self.program_log = program_log
        self.calls = []

    def glCreateShader(self, shader_type):
        self.calls.append(("glCreateShader", shader_type))
        return 3

    def glShaderSource(self, shader, source):
        self.calls.append(("glShaderSource", shader, source))

    def glCompileShader(self, shader):
        self.calls.append(("glCompileShader", shader))

    def glGetShaderiv(self, shader, pname):
        self.calls.append(("glGetShaderiv", shader, pname))
        return self.compile_status

    def glGetShaderInfoLog(self, shader):
        return self.shader_log

    def glCreateProgram(self):
        self.calls.append(("glCreateProgram",))
        return 9

    def glAttachShader(self, program, shader):
        self.calls.append(("glAttachShader", program, shader))

    def glLinkProgram(self, program):
        self.calls.append(("glLinkProgram", program))

    def glGetProgramiv(self, program, pname):
        self.calls.append(("glGetProgramiv", program, pname))
        return self.link_status

    def glGetProgramInfoLog(self, program):
        return self.program_log


class RecordingGLUT:
    GLUT_RGBA = 0x0000
    GLUT_DOUBLE = 0x0002

    def __init__(self, fail_init=False):
        self.fail_init = fail_init
        self.calls = []

    def glutInit(self, argv):
        if self.fail_init:
            raise NullFunctionError("Attempt to call an undefined function glutInit")
        self.calls.append(("glutInit", argv))

    def glutInitDisplayMode(self, mode):
        self.calls.append(("glutInitDisplayMode", mode))

    def glutCreateWindow(self, title):
        self.calls.append(("glutCreateWindow", title))
        return 1

    def glutHideWindow(self):
        self.calls.append(("glutHideWindow",))


def test_shader_types():
    assert gl_driver.SHADER_TYPES[StageKind.VERTEX] == 0x8B31
    assert gl_driver.SHADER_TYPES[StageKind.FRAGMENT] == 0x8B30


def test_open_creates_hidden_window(monkeypatch):
    glut = RecordingGLUT()
    monkeypatch.setattr(gl_driver, "GLUT", glut)
    monkeypatch.setattr(sys, "argv", ["shader-tool"])
    driver = gl_driver.GLUTDriver.open()
    assert isinstance(driver, gl_driver.GLUTDriver)
    assert glut.calls == [
        ("glutInit", ["shader-tool"]),
        ("glutInitDisplayMode", 0x0002),
        ("glutCreateWindow", b"shader-tool"),
        ("glutHideWindow",),
    ]


def test_open_without_glut_library(monkeypatch):
    monkeypatch.setattr(gl_driver, "GLUT", RecordingGLUT(fail_init=True))
    with pytest.raises(ValidationUnavailable) as excinfo:
        gl_driver.GLUTDriver.open()
    assert "GLUT context unavailable" in str(excinfo.value)


def test_compile_calls(monkeypatch):
    gl = RecordingGL(shader_log=b"0:3(1): warning: unused\x00")
    monkeypatch.setattr(gl_driver, "GL", gl)
    driver = gl_driver.GLUTDriver()

    shader = driver.create_shader(StageKind.FRAGMENT)
    driver.compile_shader(shader, "void main() {}\n")
    assert driver.shader_status(shader) is True
    assert driver.shader_log(shader) == "0:3(1): warning: unused"
    assert gl.calls == [
        ("glCreateShader", 0x8B30),
        ("glShaderSource", 3, "void main() {}\n"),
        ("glCompileShader", 3),
        ("glGetShaderiv", 3, RecordingGL.GL_COMPILE_STATUS),
    ]


def test_failed_compile_status(monkeypatch):
    monkeypatch.setattr(gl_driver, "GL", RecordingGL(compile_status=0))
    assert gl_driver.GLUTDriver().shader_status(3) is False


def test_link_calls(monkeypatch):
    gl = RecordingGL(link_status=0, program_log=b"error: no main\x00")
    monkeypatch.setattr(gl_driver, "GL", gl)
    driver = gl_driver.GLUTDriver()

    program = driver.create_program()
    driver.attach_shader(program, 3)
    driver.attach_shader(program, 4)
    driver.link_program(program)
    assert driver.program_status(program) is False
    assert driver.program_log(program) == "error: no main"
    assert gl.calls == [
        ("glCreateProgram",),
        ("glAttachShader", 9, 3),
        ("glAttachShader", 9, 4),
        ("glLinkProgram", 9),
        ("glGetProgramiv", 9, RecordingGL.GL_LINK_STATUS),
    ]


def test_log_text():
    assert gl_driver._log_text(b"log\x00") == "log"
    assert gl_driver._log_text(b"bad \xff byte") == "bad \ufffd byte"
    assert gl_driver._log_text("already text") == "already text"
    assert gl_driver._log_text(b"") == ""
