# src/moonguard_gen/models.py
import os
import shlex
from dataclasses import dataclass, field
from typing import IO, Optional, Tuple


@dataclass(frozen=True)
class LanguageConfig:
    """Immutable description of one target language."""
    name: str
    flag_template: str
    subdir: str

    def output_flag(self, out_dir: str) -> str:
        """Builds the protoc output flag pointing at this language's directory."""
        return self.flag_template + os.path.normpath(os.path.join(out_dir, self.subdir))


@dataclass(frozen=True)
class GenerationRequest:
    pattern: str
    languages: Tuple[str, ...]
    out_dir: str
    exclude: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ExecutablePlan:
    """
    A ready-to-run protoc invocation.
    A stream left as None is inherited from the parent process.
    """
    executable: str
    args: Tuple[str, ...]
    stdout: Optional[IO] = field(default=None, compare=False)
    stderr: Optional[IO] = field(default=None, compare=False)

    def command_line(self) -> str:
        return shlex.join(self.args)
