# Generated by packaging/bake_build_sysroot.py. Do not edit by hand.
from __future__ import annotations

BUILD_SYSROOT: str | None = None
