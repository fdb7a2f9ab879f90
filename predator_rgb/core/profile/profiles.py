"""Named lighting profiles.

Profiles are *local* (per-user) and stored one per file under:
  ~/.config/predator/profiles/<profile_name>

Each file holds ``key=value`` lines matching the LightingConfiguration fields.
Unknown keys are ignored on load so newer versions can add fields; every value
is re-validated through the same constructor the CLI uses.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator, Optional

from ..colors import parse_color
from ..config.paths import profiles_dir
from ..errors import CorruptProfileError, ProfileListError, ProfileNotFoundError, ProfileWriteError, ValidationError
from ..lighting import LightingConfiguration, build_configuration
from .storage import dump_fields, parse_fields, read_text, write_text_atomic

logger = logging.getLogger(__name__)

PROFILE_HEADER = "predator-rgb lighting profile"

# Order matters: it is the on-disk line order.
PROFILE_FIELDS = ("mode", "zones", "speed", "brightness", "color", "direction")

_TMP_SUFFIX = ".tmp"


def check_profile_name(name: str) -> str:
    """Return *name* stripped, or raise ProfileWriteError if it is unusable.

    Names are used verbatim as file names, so anything that could escape the
    profile directory or hide the file from listing is rejected.
    """

    stripped = (name or "").strip() if isinstance(name, str) else ""
    if not stripped:
        raise ProfileWriteError(str(name), "profile name is empty")

    separators = {"/", "\\", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in stripped for sep in separators) or "\x00" in stripped:
        raise ProfileWriteError(stripped, "profile name must not contain path separators")
    if stripped.startswith("."):
        raise ProfileWriteError(stripped, "profile name must not start with '.'")
    if stripped.endswith(_TMP_SUFFIX):
        raise ProfileWriteError(stripped, f"profile name must not end with {_TMP_SUFFIX!r}")
    return stripped


def serialize_config(config: LightingConfiguration) -> dict[str, str]:
    return {
        "mode": config.mode.value,
        "zones": str(config.zones),
        "speed": str(config.speed),
        "brightness": str(config.brightness),
        "color": config.color.hex,
        "direction": config.direction.value,
    }


def _parse_int(name: str, key: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise CorruptProfileError(name, f"{key} is not an integer: {raw!r}") from None


def deserialize_config(name: str, fields: dict[str, str]) -> LightingConfiguration:
    missing = [key for key in PROFILE_FIELDS if key not in fields]
    if missing:
        raise CorruptProfileError(name, "missing field(s): " + ", ".join(missing))

    try:
        return build_configuration(
            mode=fields["mode"],
            zones=fields["zones"],
            speed=_parse_int(name, "speed", fields["speed"]),
            brightness=_parse_int(name, "brightness", fields["brightness"]),
            color=parse_color(fields["color"]),
            direction=fields["direction"],
        )
    except ValidationError as exc:
        raise CorruptProfileError(name, str(exc)) from exc


class ProfileNames:
    """Restartable view of the profile names in a directory.

    Each iteration re-reads the directory and yields names sorted.
    """

    def __init__(self, root: Path) -> None:
        self._root = root

    def __iter__(self) -> Iterator[str]:
        try:
            children = list(self._root.iterdir())
        except FileNotFoundError:
            return iter(())
        except OSError as exc:
            raise ProfileListError(str(self._root), exc.strerror or str(exc)) from exc

        names = [
            child.name
            for child in children
            if child.is_file() and not child.name.startswith(".") and not child.name.endswith(_TMP_SUFFIX)
        ]
        return iter(sorted(names))

    def __repr__(self) -> str:
        return f"ProfileNames({str(self._root)!r})"


class ProfileStore:
    def __init__(self, root: Optional[Path] = None) -> None:
        # Resolve at construction so test harnesses can set env vars first.
        self.root = Path(root) if root is not None else profiles_dir()

    def path_for(self, name: str) -> Path:
        return self.root / check_profile_name(name)

    def exists(self, name: str) -> bool:
        try:
            return self.path_for(name).is_file()
        except ProfileWriteError:
            return False

    def save(self, name: str, config: LightingConfiguration) -> Path:
        path = self.path_for(name)
        text = dump_fields(serialize_config(config), header=PROFILE_HEADER)
        try:
            write_text_atomic(path, text)
        except OSError as exc:
            raise ProfileWriteError(path.name, exc.strerror or str(exc)) from exc
        logger.debug("Saved profile %s to %s", path.name, path)
        return path

    def load(self, name: str) -> LightingConfiguration:
        try:
            path = self.path_for(name)
        except ProfileWriteError:
            # An unusable name can never exist on disk.
            raise ProfileNotFoundError(str(name)) from None

        try:
            text = read_text(path)
        except UnicodeDecodeError as exc:
            raise CorruptProfileError(path.name, "file is not valid UTF-8 text") from exc
        except IsADirectoryError:
            raise ProfileNotFoundError(path.name) from None
        except OSError as exc:
            raise CorruptProfileError(path.name, f"unreadable: {exc.strerror or exc}") from exc
        if text is None:
            raise ProfileNotFoundError(path.name)

        try:
            fields = parse_fields(text)
        except ValueError as exc:
            raise CorruptProfileError(path.name, str(exc)) from exc

        config = deserialize_config(path.name, fields)
        logger.debug("Loaded profile %s from %s", path.name, path)
        return config

    def list(self) -> ProfileNames:
        return ProfileNames(self.root)
