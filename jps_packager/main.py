from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from .lib.command import run_cmd
from .lib.env import PATHS
from .lib.fs import folder_size, format_gigabytes, is_large_folder
from .log_sink import LogSink
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .package_config import PackageConfig
from .packager import InvocationResult, Packager, Runner
from .preferences import LOGS_KEY, ensure_defaults, load_preferences, save_preferences

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_DECLINED = 2

# CLI option dest -> PackageConfig attribute.
_OVERRIDES = {
    "source": "source_path",
    "output": "output_path",
    "identifier": "package_identifier",
    "pkg_version": "package_version",
    "install_location": "install_location",
    "name": "output_package_name",
}


def _confirm(prompt: str) -> bool:
    try:
        answer = input(f"{prompt} [y/N] ")
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def large_folder_prompt(size: int) -> str:
    return (
        f"The selected source folder is larger than 1 GB ({format_gigabytes(size)}). "
        "Are you sure you want to continue?"
    )


def run_build(
    *,
    prefs_path: str,
    overrides: Dict[str, Any],
    script_path: Optional[str] = None,
    use_postinstall: Optional[bool] = None,
    assume_yes: bool = False,
    confirm: Callable[[str], bool] = _confirm,
    runner: Optional[Runner] = None,
) -> Optional[InvocationResult]:
    """Build one package from stored preferences plus command-line overrides.

    Returns None when the user declines the large-folder confirmation.
    Preferences (including the accumulated build log) are saved either way.
    """

    prefs = ensure_defaults(load_preferences(prefs_path))
    cfg = PackageConfig.from_preferences(prefs)

    for attr, value in overrides.items():
        if value is not None:
            setattr(cfg, attr, value)

    if script_path is not None:
        cfg.postinstall_script = Path(script_path).read_text(encoding="utf-8")
        cfg.use_postinstall_script = True
    if use_postinstall is not None:
        cfg.use_postinstall_script = use_postinstall

    cfg.to_preferences(prefs)

    log = LogSink(str(prefs.get(LOGS_KEY) or ""))
    try:
        # Only gate builds that can actually start.
        size = folder_size(cfg.source_path) if cfg.source_path and cfg.output_path else 0
        if is_large_folder(size) and not assume_yes and not confirm(large_folder_prompt(size)):
            logger.info("Build cancelled: %s is %s", cfg.source_path, format_gigabytes(size))
            return None

        return Packager(log, runner=runner or run_cmd).build(cfg)
    finally:
        prefs[LOGS_KEY] = log.text
        save_preferences(prefs_path, prefs)


def cmd_build(args: argparse.Namespace) -> int:
    use_postinstall = False if args.no_postinstall else None
    result = run_build(
        prefs_path=args.prefs,
        overrides={attr: getattr(args, dest) for dest, attr in _OVERRIDES.items()},
        script_path=args.postinstall,
        use_postinstall=use_postinstall,
        assume_yes=bool(args.yes),
    )
    if result is None:
        print("Build cancelled.")
        return EXIT_DECLINED
    print(result.message)
    return EXIT_OK if result.success else EXIT_FAILED


def cmd_logs(args: argparse.Namespace) -> int:
    prefs = ensure_defaults(load_preferences(args.prefs))
    if args.clear:
        prefs[LOGS_KEY] = ""
        save_preferences(args.prefs, prefs)
        return EXIT_OK
    sys.stdout.write(str(prefs[LOGS_KEY]))
    return EXIT_OK


def cmd_size(args: argparse.Namespace) -> int:
    size = folder_size(args.path)
    print(f"{size} bytes ({format_gigabytes(size)})")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="jps-packager", description="Build macOS installer packages with pkgbuild")
    p.add_argument("--prefs", default=PATHS.preferences_default, help="Preferences file (json|yaml)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Diagnostic log file")
    p.add_argument("--verbose", action="store_true", help="Debug logging, also to the console")
    sub = p.add_subparsers(dest="command", required=True)

    b = sub.add_parser("build", help="Run pkgbuild with the stored settings")
    b.add_argument("--source", default=None, help="Folder to package (pkgbuild --root)")
    b.add_argument("--output", default=None, help="Folder the .pkg is written to")
    b.add_argument("--identifier", default=None, help="Package identifier, e.g. com.example.app")
    b.add_argument("--version", dest="pkg_version", default=None, help="Package version")
    b.add_argument("--install-location", default=None, help="Where the payload installs")
    b.add_argument("--name", default=None, help="Package file name without .pkg")
    scripts = b.add_mutually_exclusive_group()
    scripts.add_argument("--postinstall", default=None, metavar="FILE", help="Use FILE as the postinstall script")
    scripts.add_argument("--no-postinstall", action="store_true", help="Build without a postinstall script")
    b.add_argument("--yes", "-y", action="store_true", help="Do not ask before packaging folders over 1 GB")
    b.set_defaults(func=cmd_build)

    lg = sub.add_parser("logs", help="Show the accumulated build log")
    lg.add_argument("--clear", action="store_true", help="Empty the build log")
    lg.set_defaults(func=cmd_logs)

    sz = sub.add_parser("size", help="Report the size of a folder")
    sz.add_argument("path")
    sz.set_defaults(func=cmd_size)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(
        log_path=args.log,
        level=logging.DEBUG if args.verbose else logging.INFO,
        also_console=bool(args.verbose),
    )

    try:
        return int(args.func(args))
    except (OSError, ValueError) as e:
        logger.exception("jps-packager %s failed", args.command)
        print(f"jps-packager: {e}", file=sys.stderr)
        return EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
