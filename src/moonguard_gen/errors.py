# src/moonguard_gen/errors.py


class MoonguardError(Exception):
    """Base class for every failure the CLI reports to the user."""
    exit_status = 1


class InvalidInputError(MoonguardError):
    pass


class ResolutionError(MoonguardError):
    """The source pattern could not be expanded."""


class NoSourcesFoundError(MoonguardError):
    def __init__(self, pattern: str):
        super().__init__(f"found no protobuf sources matching `{pattern}`")
        self.pattern = pattern


class UnsupportedLanguageError(MoonguardError):
    def __init__(self, language: str):
        super().__init__(f"`{language}` is not yet supported by the moonguard client generator")
        self.language = language


class ToolNotFoundError(MoonguardError):
    def __init__(self, tool: str):
        super().__init__(f"unable to find command `{tool}` in path")
        self.tool = tool


class GeneratorFailedError(MoonguardError):
    """protoc could not be started, or exited with a non-zero status."""

    def __init__(self, message: str, exit_status: int = 1):
        super().__init__(message)
        self.exit_status = exit_status
