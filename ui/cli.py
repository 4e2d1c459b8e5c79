from __future__ import annotations

from jps_packager.main import main as core_main


def main(argv: list[str] | None = None) -> int:
    # CLI and GUI share one core; this wrapper only delegates.
    return core_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
