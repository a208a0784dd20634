"""
``example-app``: load an exported TorchScript module, run it once on an
all-ones ``[1, 3, 224, 224]`` input and print a slice of the output.

Exit status is 0 on success, 1 for a wrong argument count, 2 when the model
cannot be loaded and 3 when inference or reporting fails.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import NoReturn, Optional, Sequence

from .data import build_inputs, seed_rng
from .errors import EXIT_OK, ScriptAppError, UsageError
from .profile import DEFAULT_PROFILE, RunProfile
from .runner import format_slice, open_model, run_forward, select_slice

PROG = "example-app"
USAGE = f"usage: {PROG} <path-to-exported-script-module>"

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_argparser() -> argparse.ArgumentParser:
    arg_parser = _ArgumentParser(
        prog=PROG,
        usage=USAGE[len("usage: "):],
        add_help=False,
    )
    arg_parser.add_argument("model_path")
    return arg_parser


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    profile: RunProfile = DEFAULT_PROFILE,
) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    try:
        # argparse drops "--" and accepts "-" or "-1" as positionals
        if len(argv) != 1 or argv[0].startswith("-"):
            raise UsageError(f"expected one model path, got {argv!r}")
        args = build_argparser().parse_args(argv)
        return _run(args.model_path, profile)
    except UsageError:
        print(USAGE, file=sys.stderr)
        return UsageError.exit_code
    except ScriptAppError as exc:
        logger.debug("Run failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return exc.exit_code


def _run(model_path: str, profile: RunProfile) -> int:
    seed_rng(profile.seed)
    with open_model(model_path, device=profile.device) as model:
        print("ok", flush=True)
        inputs = build_inputs(profile.inputs, device=profile.device)
        output = run_forward(model, inputs)
        print(format_slice(select_slice(output, profile.report)))
    return EXIT_OK


def run() -> NoReturn:
    """Console-script entrypoint."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    sys.exit(main())
