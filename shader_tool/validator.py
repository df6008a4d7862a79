"""Best-effort compile and link check for a vertex/fragment shader pair.

The check runs through a ``ShaderDriver``. ``probe_driver`` tells the caller
whether a real one can be opened on this machine; when it cannot, the caller
skips validation and carries on with the conversion.

The probe only checks that a display is configured, not that it answers. If
``DISPLAY`` names an unreachable server, such as a stale SSH forward, freeglut
terminates the process while creating the window, and the run fails with no
output. Unset ``DISPLAY`` or set ``validate = false`` in the config to avoid it.
"""

import os
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .errors import (
    CompileFailure,
    LinkFailure,
    StagePairError,
    ValidationUnavailable,
)


class StageKind(Enum):
    VERTEX = "vertex"
    FRAGMENT = "fragment"


class Availability(Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


@dataclass
class CompiledStage:
    path: str
    kind: StageKind
    handle: int
    compiled: bool
    log: str = ""


@dataclass
class LinkedProgram:
    handle: int
    linked: bool
    log: str = ""
    stages: List[CompiledStage] = field(default_factory=list)


class ShaderDriver(ABC):
    """Operations the validator needs from a graphics driver."""

    @abstractmethod
    def create_shader(self, kind: StageKind) -> int:
        ...

    @abstractmethod
    def compile_shader(self, shader: int, source: str):
        ...

    @abstractmethod
    def shader_status(self, shader: int) -> bool:
        ...

    @abstractmethod
    def shader_log(self, shader: int) -> str:
        ...

    @abstractmethod
    def create_program(self) -> int:
        ...

    @abstractmethod
    def attach_shader(self, program: int, shader: int):
        ...

    @abstractmethod
    def link_program(self, program: int):
        ...

    @abstractmethod
    def program_status(self, program: int) -> bool:
        ...

    @abstractmethod
    def program_log(self, program: int) -> str:
        ...


@dataclass
class DriverProbe:
    availability: Availability
    driver: Optional[ShaderDriver] = None
    reason: str = ""


def _has_display() -> bool:
    if not sys.platform.startswith(("linux", "freebsd", "openbsd", "netbsd")):
        return True
    return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))


def probe_driver() -> DriverProbe:
    """Try to open a hidden GL context and report whether validation can run."""
    try:
        from . import gl_driver
    except ImportError as e:
        return DriverProbe(Availability.UNAVAILABLE, reason=str(e))

    # freeglut terminates the process when it cannot reach a display.
    if not _has_display():
        return DriverProbe(Availability.UNAVAILABLE, reason="no display available")

    try:
        driver = gl_driver.GLUTDriver.open()
    except ValidationUnavailable as e:
        return DriverProbe(Availability.UNAVAILABLE, reason=str(e))

    return DriverProbe(Availability.AVAILABLE, driver=driver)


def stage_kind(path: str, fragment_suffix: str = ".frag") -> StageKind:
    if os.path.basename(path).endswith(fragment_suffix):
        return StageKind.FRAGMENT
    return StageKind.VERTEX


def compile_stage(
    driver: ShaderDriver, path: str, source: str, kind: StageKind
) -> CompiledStage:
    shader = driver.create_shader(kind)
    driver.compile_shader(shader, source)

    log = driver.shader_log(shader)
    if log.strip():
        print(f"Shader compile log: {log}")

    stage = CompiledStage(
        path=path,
        kind=kind,
        handle=shader,
        compiled=driver.shader_status(shader),
        log=log,
    )
    if not stage.compiled:
        raise CompileFailure(path)
    return stage


def link_program(
    driver: ShaderDriver, primary_path: str, stages: List[CompiledStage]
) -> LinkedProgram:
    program = driver.create_program()
    for stage in stages:
        driver.attach_shader(program, stage.handle)
    driver.link_program(program)

    log = driver.program_log(program)
    if log.strip():
        print(f"Shader link log: {log}")

    linked = LinkedProgram(
        handle=program,
        linked=driver.program_status(program),
        log=log,
        stages=list(stages),
    )
    if not linked.linked:
        raise LinkFailure(primary_path)
    return linked


def validate(
    driver: ShaderDriver,
    source_path: str,
    source: str,
    companion_path: str,
    companion_source: str,
    fragment_suffix: str = ".frag",
) -> LinkedProgram:
    source_kind = stage_kind(source_path, fragment_suffix)
    companion_kind = stage_kind(companion_path, fragment_suffix)
    if source_kind == companion_kind:
        raise StagePairError(source_path, companion_path, source_kind)

    stages = [
        compile_stage(driver, source_path, source, source_kind),
        compile_stage(driver, companion_path, companion_source, companion_kind),
    ]
    return link_program(driver, source_path, stages)
