from __future__ import annotations

import subprocess
from typing import Callable, Mapping

from rustc_shim_config import DELEGATE, delegate_executable

HOME_VARS = ("RUSTUP_HOME", "MULTIRUST_HOME")
TOOLCHAIN_VARS = ("RUSTUP_TOOLCHAIN", "MULTIRUST_TOOLCHAIN")


class SysrootNotFoundError(LookupError):
    pass


def _env_value(env: Mapping[str, str], key: str) -> str | None:
    # blank means unset; anything else is used as given
    v = env.get(key, "")
    return v if v.strip() else None


def _first_env(env: Mapping[str, str], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        v = _env_value(env, key)
        if v is not None:
            return v
    return None


def toolchain_sysroot(env: Mapping[str, str]) -> str | None:
    home = _first_env(env, HOME_VARS)
    toolchain = _first_env(env, TOOLCHAIN_VARS)
    if home is None or toolchain is None:
        return None
    return f"{home}/toolchains/{toolchain}"


def rustc_print_sysroot() -> str | None:
    """Ask the delegate for its sysroot. Any failure means "not found"."""
    try:
        proc = subprocess.run(
            [delegate_executable(), "--print", "sysroot"],
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError:
        return None
    if proc.returncode != 0:
        return None
    return proc.stdout.strip() or None


def resolve_sysroot(
    explicit: str | None,
    env: Mapping[str, str],
    *,
    print_sysroot: Callable[[], str | None] = rustc_print_sysroot,
    build_sysroot: str | None = None,
) -> tuple[str, str]:
    """
    Resolve the sysroot, most specific source first:
    - --sysroot on the command line
    - SYSROOT
    - RUSTUP_HOME/MULTIRUST_HOME + RUSTUP_TOOLCHAIN/MULTIRUST_TOOLCHAIN
    - `rustc --print sysroot`
    - BUILD_SYSROOT baked in at packaging time

    Returns (sysroot, source). Later sources are never consulted once one hits.
    """
    sources: tuple[tuple[str, Callable[[], str | None]], ...] = (
        ("--sysroot", lambda: explicit),
        ("SYSROOT", lambda: _env_value(env, "SYSROOT")),
        ("toolchain env", lambda: toolchain_sysroot(env)),
        (f"{DELEGATE} --print sysroot", print_sysroot),
        ("build-time SYSROOT", lambda: build_sysroot),
    )
    for source, lookup in sources:
        value = lookup()
        if value:
            return value, source
    raise SysrootNotFoundError(
        "Could not determine the toolchain sysroot.\nTried, in order:\n"
        + "\n".join(f"- {name}" for name, _ in sources)
        + "\nSet SYSROOT, use rustup or multirust, or bake one in with packaging/bake_build_sysroot.py."
    )
