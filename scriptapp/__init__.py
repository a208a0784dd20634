"""
Runner for exported TorchScript modules: load an archive, evaluate it once on
a synthetic input and report a slice of the result.
"""

from .data import TensorSpec, build_input, build_inputs, seed_rng, set_default_seed
from .errors import (
    InferenceError,
    ModelLoadError,
    NullHandleError,
    ScriptAppError,
    UsageError,
)
from .export import export_script_module
from .profile import DEFAULT_PROFILE, RunProfile, SliceSpec, load_run_profile
from .runner import LoadedModel, format_slice, open_model, run_forward, select_slice

__all__ = [
    "TensorSpec",
    "build_input",
    "build_inputs",
    "seed_rng",
    "set_default_seed",
    "InferenceError",
    "ModelLoadError",
    "NullHandleError",
    "ScriptAppError",
    "UsageError",
    "export_script_module",
    "DEFAULT_PROFILE",
    "RunProfile",
    "SliceSpec",
    "load_run_profile",
    "LoadedModel",
    "format_slice",
    "open_model",
    "run_forward",
    "select_slice",
]
