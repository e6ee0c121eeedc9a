from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass
from typing import Mapping

DELEGATE = "rustc"


def delegate_executable() -> str:
    """Path of the real compiler, shared by the sysroot query and the build."""
    candidates = [DELEGATE]
    if sys.platform.startswith("win"):
        candidates = [DELEGATE, f"{DELEGATE}.exe"]
    for candidate in candidates:
        found = shutil.which(candidate)
        if found:
            return found
    return DELEGATE

DEFAULT_DEBUGINFO_MARKER = "cita"
DEFAULT_DEBUGINFO_THRESHOLD = 2

_TRUTHY = {"1", "true", "yes", "y", "on"}
_FALSY = {"0", "false", "no", "n", "off", ""}


def _env_flag(env: Mapping[str, str], key: str, default: bool = False) -> bool:
    v = env.get(key, "").strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return default
    raise ValueError(f"{key}: expected one of {sorted(_TRUTHY | _FALSY - {''})}, got {v!r}")


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key}: expected an integer, got {raw!r}") from None


@dataclass(frozen=True)
class ShimConfig:
    """
    Settings of the shim itself (not of the toolchain).

    The debug-info marker is a workspace naming convention: release builds of
    crates whose paths mention it more than `marker_threshold` times get
    line tables. Both knobs can be overridden:
    - RUSTC_SHIM_DEBUGINFO_MARKER
    - RUSTC_SHIM_DEBUGINFO_THRESHOLD
    RUSTC_SHIM_VERBOSE=1 prints the resolved sysroot and final command to stderr.
    """

    marker: str = DEFAULT_DEBUGINFO_MARKER
    marker_threshold: int = DEFAULT_DEBUGINFO_THRESHOLD
    verbose: bool = False

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> ShimConfig:
        marker = env.get("RUSTC_SHIM_DEBUGINFO_MARKER", "").strip() or DEFAULT_DEBUGINFO_MARKER
        return cls(
            marker=marker,
            marker_threshold=_env_int(env, "RUSTC_SHIM_DEBUGINFO_THRESHOLD", DEFAULT_DEBUGINFO_THRESHOLD),
            verbose=_env_flag(env, "RUSTC_SHIM_VERBOSE"),
        )
