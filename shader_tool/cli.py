import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional

from .config import load_config
from .emitter import emit, read_source
from .errors import ArgumentError, ShaderToolError
from .validator import Availability, probe_driver, validate


@dataclass(frozen=True)
class ShaderInvocation:
    source_path: str
    output_path: str
    companion_shader_path: str


class ShaderToolArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(message)


def build_parser() -> ShaderToolArgumentParser:
    parser = ShaderToolArgumentParser(
        prog="shader-tool",
        description="Convert a GLSL shader into C string literals, "
        "checking that it compiles and links when a GL driver is available.",
    )
    parser.add_argument("shader_source", help="Shader file to convert")
    parser.add_argument("output_path", help="File to write the literals to")
    parser.add_argument(
        "companion_shader_source",
        help="The other stage's shader, used to check that the pair links",
    )
    return parser


def parse_invocation(argv: Optional[List[str]] = None) -> ShaderInvocation:
    args = build_parser().parse_args(argv)
    return ShaderInvocation(
        source_path=args.shader_source,
        output_path=args.output_path,
        companion_shader_path=args.companion_shader_source,
    )


def run(invocation: ShaderInvocation):
    config = load_config(invocation.source_path)
    source = read_source(invocation.source_path, config.encoding)

    if not config.validate:
        print(f"Skipping shader compile test: disabled by {config.path}")
    else:
        probe = probe_driver()
        if probe.availability is Availability.UNAVAILABLE:
            print(f"Skipping shader compile test: {probe.reason}")
        else:
            companion_source = read_source(
                invocation.companion_shader_path, config.encoding
            )
            validate(
                probe.driver,
                invocation.source_path,
                source,
                invocation.companion_shader_path,
                companion_source,
                config.fragment_suffix,
            )

    emit(source, invocation.output_path, config.encoding)


def main(argv: Optional[List[str]] = None):
    try:
        invocation = parse_invocation(argv)
    except ArgumentError as e:
        build_parser().print_usage(sys.stderr)
        print(f"Error: invalid arguments: {e}", file=sys.stderr)
        sys.exit(2)

    try:
        run(invocation)
    except (ShaderToolError, OSError, UnicodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
