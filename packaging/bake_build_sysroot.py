from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Mapping

REPO_ROOT = Path(__file__).resolve().parents[1]

TEMPLATE = """\
# Generated by packaging/bake_build_sysroot.py. Do not edit by hand.
from __future__ import annotations

BUILD_SYSROOT: str | None = {value!r}
"""


def build_sysroot_value(cli_value: str | None, env: Mapping[str, str] | None = None) -> str | None:
    if cli_value and cli_value.strip():
        return cli_value.strip()
    env = os.environ if env is None else env
    return env.get("SYSROOT", "").strip() or None


def render(value: str | None) -> str:
    return TEMPLATE.format(value=value)


def parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Bake the fallback sysroot into rustc_shim_build.py")
    p.add_argument("--sysroot", default=None, help="Sysroot to bake in (default: $SYSROOT of this process)")
    p.add_argument(
        "--out",
        default=str(REPO_ROOT / "rustc_shim_build.py"),
        help="Module to write (default: rustc_shim_build.py at repo root)",
    )
    p.add_argument("--print", action="store_true", help="Print the value that would be baked and exit")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    value = build_sysroot_value(args.sysroot)
    if args.print:
        print(value if value is not None else "<none>")
        return 0

    out = Path(args.out).expanduser()
    if not out.is_absolute():
        out = Path.cwd() / out
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render(value), encoding="utf-8")
    if value is None:
        print(f"[warn] no sysroot given, wrote BUILD_SYSROOT=None to {out}", file=sys.stderr)
    print(f"OK: wrote {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
