"""INI-backed settings with a read-only defaults file behind a user file."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_PATH = "resources/settings-default.ini"
USER_PATH = "resources/settings-user.ini"
USER_DIR = "resources/"

Tree = Dict[str, Union[str, "Tree"]]


class SettingsError(ValueError):
    """Raised when an INI file cannot be parsed."""


def _parse_ini(text: str, source: str) -> Tree:
    root: Tree = {}
    section: Tree = root
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line[0] in ";#":
            continue
        if line[0] == "[":
            if not line.endswith("]"):
                raise SettingsError(f"{source}:{number}: unmatched '['")
            name = line[1:-1].strip()
            if name in root:
                raise SettingsError(f"{source}:{number}: duplicate section name")
            section = {}
            root[name] = section
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise SettingsError(f"{source}:{number}: '=' character not found in line")
        key = key.strip()
        if not key:
            raise SettingsError(f"{source}:{number}: empty key name")
        if key in section:
            raise SettingsError(f"{source}:{number}: duplicate key name")
        section[key] = value.strip()
    return root


def _read_ini(path: str) -> Tree:
    with open(path, encoding="utf-8") as handle:
        return _parse_ini(handle.read(), path)


def _format_ini(tree: Tree) -> str:
    lines = [f"{key}={value}" for key, value in tree.items() if not isinstance(value, dict) or not value]
    lines = [
        f"{key}=" if isinstance(value, dict) else f"{key}={value}"
        for key, value in tree.items()
        if not isinstance(value, dict) or not value
    ]
    for name, section in tree.items():
        if isinstance(section, dict) and section:
            lines.append(f"[{name}]")
            lines.extend(
                f"{key}=" if isinstance(value, dict) else f"{key}={value}"
                for key, value in section.items()
            )
    return "".join(line + "\n" for line in lines)


def _lookup(tree: Tree, path: str) -> Optional[str]:
    node: Union[str, Tree] = tree
    for part in path.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return "" if isinstance(node, dict) else node


def _convert(text: str, kind: type) -> Any:
    if kind is str:
        return text
    if kind is bool:
        if text in ("true", "1"):
            return True
        if text in ("false", "0"):
            return False
        raise ValueError(f"not a boolean: {text!r}")
    return kind(text)


def _to_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _full_name(section: str, name: str) -> str:
    return f"{section}.{name}" if section else name


def _create_file(path: str) -> None:
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError:
        logger.warning("Could not create settings file %s", path)


class Settings:
    """User settings, falling back to a defaults file for missing values."""

    def __init__(self, default_path: str = DEFAULT_PATH, user_path: str = USER_PATH) -> None:
        self.default_path = default_path
        self.user_path = user_path
        self._path = ""
        self._defaults: Tree = {}
        self._user: Tree = {}

    def _clear(self) -> None:
        self._defaults = {}
        self._user = {}

    def load_user_settings(self) -> bool:
        """Load the defaults file and the user file, creating the latter if missing.

        Returns False if the defaults file is missing or the user file is bad.
        """
        self._clear()
        if not os.path.exists(self.default_path):
            return False
        self._defaults = _read_ini(self.default_path)

        self._path = self.user_path
        if not os.path.exists(self.user_path):
            _create_file(self.user_path)
            return True
        try:
            self._user = _read_ini(self._path)
        except (SettingsError, OSError) as error:
            logger.warning("Loading INI exception: %s", error)
            return False
        return True

    def load_from_file(self, path: str) -> bool:
        """Load ``path`` as the user file with no defaults, creating it if missing."""
        self._clear()
        if not os.path.exists(path):
            logger.info('Settings file "%s" does not exist. Creating file...', path)
            _create_file(path)
        self._path = path
        try:
            self._user = _read_ini(path)
        except (SettingsError, OSError) as error:
            logger.warning("Loading INI exception: %s", error)
            return False
        return True

    def save(self) -> bool:
        """Write the user settings back to their file; False if no file is set."""
        if not self._path:
            logger.warning("Settings file is not set.")
            return False
        with open(self._path, "w", encoding="utf-8") as handle:
            handle.write(_format_ini(self._user))
        return True

    def section_exists(self, section: str) -> bool:
        return section in self._user

    def sections(self) -> List[str]:
        """Names of all top-level entries of the user settings, in file order."""
        return list(self._user)

    def properties_in_section(self, section: str) -> List[str]:
        node = self._user.get(section)
        return list(node) if isinstance(node, dict) else []

    def get(self, section: str, name: str, default: Any = None) -> Any:
        """Return a value converted to the type of ``default`` (str if None).

        The user file is tried first, then the defaults file, then ``default``.
        """
        kind = str if default is None else type(default)
        full = _full_name(section, name)
        for tree in (self._user, self._defaults):
            text = _lookup(tree, full)
            if text is None:
                continue
            try:
                return _convert(text, kind)
            except (TypeError, ValueError):
                continue
        return default

    def set(self, section: str, name: str, value: Any) -> None:
        """Store ``value`` in the user settings."""
        parts = _full_name(section, name).split(".")
        node = self._user
        for part in parts[:-1]:
            child = node.get(part)
            if not isinstance(child, dict):
                child = {}
                node[part] = child
            node = child
        node[parts[-1]] = _to_text(value)