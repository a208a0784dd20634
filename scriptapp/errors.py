"""
Error taxonomy for the runner. Each error knows the process exit status the
CLI reports for it.
"""

from __future__ import annotations

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_LOAD = 2
EXIT_INFERENCE = 3

__all__ = [
    "EXIT_OK",
    "EXIT_USAGE",
    "EXIT_LOAD",
    "EXIT_INFERENCE",
    "ScriptAppError",
    "UsageError",
    "ModelLoadError",
    "NullHandleError",
    "InferenceError",
]


class ScriptAppError(Exception):
    exit_code = 1


class UsageError(ScriptAppError):
    exit_code = EXIT_USAGE


class ModelLoadError(ScriptAppError):
    """
    The model file is missing, unreadable, or not a TorchScript archive.
    """

    exit_code = EXIT_LOAD


class NullHandleError(ModelLoadError):
    """
    The loader returned without error but produced no module.
    """


class InferenceError(ScriptAppError):
    """
    Forward evaluation failed, or its result cannot be reported.
    """

    exit_code = EXIT_INFERENCE
