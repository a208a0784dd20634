from __future__ import annotations

from pathlib import Path

import pytest

from scriptapp.data import TensorSpec
from scriptapp.profile import DEFAULT_PROFILE, RunProfile, SliceSpec, load_run_profile

CASES_ROOT = Path(__file__).resolve().parents[1] / "cases"


def test_default_profile_matches_runner_contract() -> None:
    assert DEFAULT_PROFILE.device == "cpu"
    assert DEFAULT_PROFILE.inputs == (TensorSpec(shape=(1, 3, 224, 224), dtype="float32", distribution="ones"),)
    assert DEFAULT_PROFILE.report == SliceSpec(dim=1, start=0, end=5)


def test_load_case_profile() -> None:
    profile = load_run_profile(CASES_ROOT / "tiny_convnet" / "profile.yaml")

    assert profile.name == "tiny_convnet"
    assert profile.seed == 7
    assert profile.inputs[0].shape == (2, 3, 64, 64)
    assert profile.report.length == 3


def test_missing_keys_fall_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "bare.yaml"
    path.write_text("description: nothing else\n")

    profile = load_run_profile(path)

    assert profile.name == "bare"
    assert profile.inputs == DEFAULT_PROFILE.inputs
    assert profile.report == DEFAULT_PROFILE.report


def test_missing_profile_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        load_run_profile(tmp_path / "nope.yaml")


def test_non_mapping_profile_raises(tmp_path) -> None:
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(TypeError):
        load_run_profile(path)


@pytest.mark.parametrize(
    "body",
    [
        "inputs: []\n",
        "inputs:\n  - shape: [1, 3]\n    dtype: quaternion\n",
        "report: {dim: 1, start: 4, end: 2}\n",
        "report: {dim: -1}\n",
    ],
)
def test_invalid_profiles_raise_value_error(tmp_path, body) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(body)
    with pytest.raises(ValueError):
        load_run_profile(path)


def test_profile_requires_inputs() -> None:
    with pytest.raises(ValueError):
        RunProfile(inputs=())


def test_profile_without_seed_defers_to_module_default(tmp_path) -> None:
    path = tmp_path / "unseeded.yaml"
    path.write_text("name: unseeded\n")

    assert load_run_profile(path).seed is None
    assert DEFAULT_PROFILE.seed is None


@pytest.mark.parametrize(
    ("body", "key"),
    [
        ("seed: null\n", "'seed'"),
        ("report: {end: null}\n", "'report.end'"),
        ("report: {dim: one}\n", "'report.dim'"),
        ("inputs:\n  - std: wide\n", "'inputs.std'"),
        ("inputs:\n  - shape: [1, null]\n", "'inputs.shape[1]'"),
    ],
)
def test_non_numeric_fields_name_profile_and_key(tmp_path, body, key) -> None:
    path = tmp_path / "typed.yaml"
    path.write_text(body)

    with pytest.raises(TypeError) as excinfo:
        load_run_profile(path)
    message = str(excinfo.value)
    assert str(path) in message
    assert key in message


def test_fractional_integer_field_is_rejected(tmp_path) -> None:
    path = tmp_path / "fraction.yaml"
    path.write_text("report: {end: 2.5}\n")

    with pytest.raises(ValueError, match="'report.end'"):
        load_run_profile(path)
