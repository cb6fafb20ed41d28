# src/moonguard_gen/core/command.py
import logging
import shutil
import subprocess
from typing import IO, Mapping, Optional, Sequence

from moonguard_gen.config import PROTOC_BINARY
from moonguard_gen.errors import GeneratorFailedError, ToolNotFoundError, UnsupportedLanguageError
from moonguard_gen.models import ExecutablePlan, LanguageConfig

logger = logging.getLogger(__name__)


def find_protoc(search_path: Optional[str] = None) -> str:
    """Looks protoc up on the executable search path (PATH when None)."""
    executable = shutil.which(PROTOC_BINARY, path=search_path)
    if executable is None:
        raise ToolNotFoundError(PROTOC_BINARY)
    return executable


def build_command(
    sources: Sequence[str],
    languages: Sequence[str],
    registry: Mapping[str, LanguageConfig],
    out_dir: str,
    search_path: Optional[str] = None,
    stdout: Optional[IO] = None,
    stderr: Optional[IO] = None,
) -> ExecutablePlan:
    """
    Assembles the protoc invocation without running it.

    One output flag is emitted per requested language, in order and without
    deduplication, followed by every source path.
    """
    executable = find_protoc(search_path)
    args = [executable]

    for lang in languages:
        cfg = registry.get(lang)
        if cfg is None:
            raise UnsupportedLanguageError(lang)
        args.append(cfg.output_flag(out_dir))

    args.extend(sources)

    plan = ExecutablePlan(executable=executable, args=tuple(args), stdout=stdout, stderr=stderr)
    logger.debug("built command: %s", plan.command_line())
    return plan


def execute(plan: ExecutablePlan) -> int:
    """Runs the plan to completion and returns protoc's exit status."""
    try:
        completed = subprocess.run(
            list(plan.args),
            executable=plan.executable,
            stdout=plan.stdout,
            stderr=plan.stderr,
        )
    except OSError as e:
        raise GeneratorFailedError(f"unable to start `{plan.executable}`: {e}") from e

    logger.debug("%s exited with status %d", plan.executable, completed.returncode)
    return completed.returncode
