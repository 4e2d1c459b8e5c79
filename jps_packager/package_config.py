from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

DEFAULT_POSTINSTALL_SCRIPT = "#!/bin/bash\n\n"

# Persisted preference key -> PackageConfig attribute.
PREFERENCE_FIELDS: Dict[str, str] = {
    "sourceFolderPath": "source_path",
    "outputFolderPath": "output_path",
    "packageIdentifier": "package_identifier",
    "packageVersion": "package_version",
    "installLocation": "install_location",
    "outputPackageName": "output_package_name",
    "usePostinstallScript": "use_postinstall_script",
}


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes", "on"}
    return bool(value)


@dataclass
class PackageConfig:
    """Everything one pkgbuild run needs.

    Only the source and output folders are checked (for emptiness) before a
    build; the remaining fields are passed to pkgbuild as typed.
    """

    source_path: str = ""
    output_path: str = ""
    package_identifier: str = "com.tvnz.app"
    package_version: str = "1.0.0"
    install_location: str = "/Applications"
    output_package_name: str = "JPsOutput"
    use_postinstall_script: bool = False
    # Never persisted.
    postinstall_script: str = DEFAULT_POSTINSTALL_SCRIPT

    @property
    def output_file_path(self) -> str:
        return f"{self.output_path}/{self.output_package_name}.pkg"

    @classmethod
    def from_preferences(cls, prefs: Dict[str, Any]) -> "PackageConfig":
        cfg = cls()
        for key, attr in PREFERENCE_FIELDS.items():
            if prefs.get(key) is None:
                continue
            value = prefs[key]
            setattr(cfg, attr, _coerce_bool(value) if attr == "use_postinstall_script" else str(value))
        return cfg

    def to_preferences(self, prefs: Dict[str, Any]) -> Dict[str, Any]:
        for key, attr in PREFERENCE_FIELDS.items():
            prefs[key] = getattr(self, attr)
        return prefs
