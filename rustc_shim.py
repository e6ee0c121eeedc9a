"""
RUSTC_WRAPPER shim.

Cargo runs `rustc-shim /path/to/rustc <args...>`. We drop the injected compiler
path, make sure a --sysroot is passed, maybe request line tables and hand
everything to the real `rustc`, forwarding its exit status.

It can also be called directly: `rustc-shim <args...>`.
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path
from typing import Mapping

import rustc_shim_build
from rustc_shim_args import count_containing, find_option, has_debuginfo_option
from rustc_shim_config import DELEGATE, ShimConfig, delegate_executable
from rustc_shim_sysroot import SysrootNotFoundError, resolve_sysroot, rustc_print_sysroot

DEBUGINFO_ARGS = ["-C", "debuginfo=1"]


def _log(config: ShimConfig, msg: str) -> None:
    if config.verbose:
        print(f"[rustc-shim] {msg}", file=sys.stderr)


def strip_wrapper_injection(argv: list[str]) -> list[str]:
    # Setting RUSTC_WRAPPER makes Cargo pass the compiler path as the first argument.
    if len(argv) > 1 and Path(argv[1]).stem == DELEGATE:
        return [argv[0], *argv[2:]]
    return list(argv)


def wants_debuginfo(args: list[str], config: ShimConfig) -> bool:
    """Line tables for release builds of our own crates."""
    if has_debuginfo_option(args):
        return False
    return count_containing(args, config.marker) > config.marker_threshold


def rewrite_args(args: list[str], sysroot: str, explicit_sysroot: bool, config: ShimConfig) -> list[str]:
    out = list(args)
    if not explicit_sysroot:
        out += ["--sysroot", sysroot]
    if wants_debuginfo(args, config):
        out += DEBUGINFO_ARGS
    # drop the shim itself
    return out[1:]


def run_delegate(args: list[str]) -> int:
    cmd = [delegate_executable(), *args]
    try:
        proc = subprocess.run(cmd)
    except OSError as e:
        raise SystemExit(f"could not run {DELEGATE}: {e}")
    return 0 if proc.returncode == 0 else -1


def main(argv: list[str] | None = None, env: Mapping[str, str] | None = None) -> int:
    orig_args = list(sys.argv if argv is None else argv)
    env = os.environ if env is None else env
    if len(orig_args) <= 1:
        return 1

    try:
        config = ShimConfig.from_env(env)
    except ValueError as e:
        raise SystemExit(f"invalid configuration: {e}")

    explicit = find_option(orig_args, "--sysroot")
    try:
        sysroot, source = resolve_sysroot(
            explicit,
            env,
            print_sysroot=rustc_print_sysroot,
            build_sysroot=rustc_shim_build.BUILD_SYSROOT,
        )
    except SysrootNotFoundError as e:
        raise SystemExit(str(e))
    _log(config, f"sysroot={sysroot} (from {source})")

    args = rewrite_args(strip_wrapper_injection(orig_args), sysroot, explicit is not None, config)
    _log(config, "+ " + " ".join([DELEGATE, *args]))
    return run_delegate(args)


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
