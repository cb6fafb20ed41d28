# src/moonguard_gen/cli.py
import sys
import argparse
import logging
import signal
from typing import List, Mapping, Optional, Sequence

# Module imports
from moonguard_gen.config import DEFAULT_OUT_DIR, SUPPORTED_LANGUAGES
from moonguard_gen.core.command import build_command, execute
from moonguard_gen.core.languages import supported_languages, validate_languages
from moonguard_gen.core.sources import resolve_sources
from moonguard_gen.errors import GeneratorFailedError, InvalidInputError, MoonguardError
from moonguard_gen.models import GenerationRequest, LanguageConfig

logger = logging.getLogger(__name__)


def create_arg_parser(registry: Mapping[str, LanguageConfig] = SUPPORTED_LANGUAGES):
    parser = argparse.ArgumentParser(
        prog="moonguard-gen",
        description="Generate gRPC client libraries from protobuf sources.",
    )
    # Optional here so an empty source reaches our own error message
    parser.add_argument("source", type=str, nargs="?", default="", help="Glob pattern selecting .proto sources")
    parser.add_argument(
        "--out",
        type=str,
        default=DEFAULT_OUT_DIR,
        help=f"Output directory for generated clients (default: {DEFAULT_OUT_DIR})",
    )
    parser.add_argument(
        "-l", "--languages",
        action="append",
        required=True,
        help=f"Build gRPC clients for this set of languages; repeatable or comma-separated "
             f"(supported: {', '.join(supported_languages(registry))})",
    )
    parser.add_argument(
        "-e", "--exclude",
        action="append",
        default=[],
        help="Gitignore-style pattern of sources to skip; repeatable",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print the protoc command instead of running it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def split_languages(values: Sequence[str]) -> List[str]:
    """Flattens repeated and comma-separated -l values, keeping order and duplicates."""
    languages = []
    for value in values:
        languages.extend(part.strip() for part in value.split(",") if part.strip())
    if not languages:
        raise InvalidInputError("at least one language must be given with --languages")
    return languages


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(request: GenerationRequest, registry: Mapping[str, LanguageConfig], dry_run: bool = False) -> int:
    # 1. Sources
    sources = resolve_sources(request.pattern, request.exclude)

    # 2. Languages
    validate_languages(request.languages, registry)

    # 3. Command
    plan = build_command(sources, request.languages, registry, request.out_dir)

    print(f"--- moonguard-gen ---")
    print(f"Sources:   {len(sources)} file(s)")
    print(f"Languages: {', '.join(request.languages)}")
    print(f"Output:    {request.out_dir}")

    if dry_run:
        print(plan.command_line())
        return 0

    # 4. Execute; protoc writes straight to our stdout/stderr
    sys.stdout.flush()
    status = execute(plan)
    if status < 0:
        # Killed by a signal; report it the way a shell would
        signum = -status
        try:
            name = signal.Signals(signum).name
        except ValueError:
            name = f"signal {signum}"
        raise GeneratorFailedError(f"protoc was terminated by {name}", exit_status=128 + signum)
    if status != 0:
        raise GeneratorFailedError(f"protoc exited with status {status}", exit_status=status)
    return 0


def main(argv: Optional[Sequence[str]] = None, registry: Mapping[str, LanguageConfig] = SUPPORTED_LANGUAGES) -> int:
    parser = create_arg_parser(registry)
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        request = GenerationRequest(
            pattern=args.source,
            languages=tuple(split_languages(args.languages)),
            out_dir=args.out,
            exclude=tuple(args.exclude),
        )
        logger.debug("request: %s", request)
        return run(request, registry, dry_run=args.dry_run)

    except KeyboardInterrupt:
        print("\nCancelled.")
        return 1

    except MoonguardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_status


if __name__ == "__main__":
    sys.exit(main())
