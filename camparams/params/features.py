"""Feature profile: which vendor key groups are meaningful on a target.

A profile is resolved once at startup, typically from a ``key = value``
profile file::

    # profile.txt
    feature.qcom = true
    feature.qcom_legacy = false
    feature.samsung = yes

Keys that are not part of any vendor group (core keys and keys unknown to
the catalog) are always active.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Optional

from camparams.core.config_manager import ConfigManager, get_config_manager
from camparams.core.logging_utils import get_module_logger
from camparams.core.paths import PROFILE_PATH

from .errors import FeatureProfileError
from .keys import FEATURE_GROUPS, KEY_GROUPS, groups_for_key
from .parameter_map import ParameterMap

logger = get_module_logger("FeatureProfile")

FEATURE_PREFIX = "feature."


@dataclass(slots=True, frozen=True)
class FeatureProfile:
    active_groups: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "active_groups", frozenset(self.active_groups))
        unknown = self.active_groups - FEATURE_GROUPS
        if unknown:
            raise FeatureProfileError(
                f"Unknown feature group(s): {', '.join(sorted(unknown))}. "
                f"Choose from: {', '.join(sorted(FEATURE_GROUPS))}"
            )

    # ------------------------------------------------------------------
    # Construction

    @classmethod
    def none(cls) -> "FeatureProfile":
        return cls(frozenset())

    @classmethod
    def all(cls) -> "FeatureProfile":
        return cls(FEATURE_GROUPS)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "FeatureProfile":
        return cls(frozenset(name.strip().lower() for name in names if name.strip()))

    @classmethod
    def from_config(cls, config: Dict[str, str], manager: Optional[ConfigManager] = None) -> "FeatureProfile":
        """Build from ``feature.<group>`` entries; unknown groups are logged and ignored."""
        manager = manager or get_config_manager()
        active = set()
        for key in config:
            if not key.startswith(FEATURE_PREFIX):
                continue
            group = key[len(FEATURE_PREFIX):].strip().lower()
            if group not in FEATURE_GROUPS:
                logger.warning("Ignoring unknown feature group in profile: %s", group)
                continue
            if manager.get_bool(config, key):
                active.add(group)
        profile = cls(frozenset(active))
        logger.info("Active feature groups: %s", ", ".join(sorted(active)) or "none")
        return profile

    @classmethod
    def load(cls, path: Optional[Path] = None, manager: Optional[ConfigManager] = None) -> "FeatureProfile":
        manager = manager or get_config_manager()
        return cls.from_config(manager.read_config(Path(path or PROFILE_PATH)), manager)

    @classmethod
    async def load_async(cls, path: Optional[Path] = None, manager: Optional[ConfigManager] = None) -> "FeatureProfile":
        manager = manager or get_config_manager()
        config = await manager.read_config_async(Path(path or PROFILE_PATH))
        return cls.from_config(config, manager)

    def with_groups(self, enable: Iterable[str] = (), disable: Iterable[str] = ()) -> "FeatureProfile":
        """New profile with ``enable`` added and ``disable`` removed (disable wins)."""
        enabled = {name.strip().lower() for name in enable}
        disabled = {name.strip().lower() for name in disable}
        return FeatureProfile((self.active_groups | enabled) - disabled)

    # ------------------------------------------------------------------
    # Persistence

    def save(self, path: Optional[Path] = None, manager: Optional[ConfigManager] = None) -> bool:
        """Write every ``feature.<group>`` entry into an existing profile file.

        Falls back to the user override file when the profile is read-only.
        """
        manager = manager or get_config_manager()
        return manager.write_config(Path(path or PROFILE_PATH), self.to_config())

    async def save_async(self, path: Optional[Path] = None, manager: Optional[ConfigManager] = None) -> bool:
        manager = manager or get_config_manager()
        return await manager.write_config_async(Path(path or PROFILE_PATH), self.to_config())

    # ------------------------------------------------------------------
    # Queries

    def is_active(self, group: str) -> bool:
        return group in self.active_groups

    def is_key_active(self, key: str) -> bool:
        groups = groups_for_key(key)
        if not groups:
            return True
        return bool(groups & self.active_groups)

    def active_keys(self) -> FrozenSet[str]:
        """Vendor keys enabled by this profile (core keys are not listed)."""
        enabled = set()
        for group in self.active_groups:
            enabled.update(KEY_GROUPS[group])
        return frozenset(enabled)

    def filter(self, params: ParameterMap) -> ParameterMap:
        """Copy of ``params`` without keys that belong only to inactive groups."""
        filtered = params.copy()
        for key in list(filtered):
            if not self.is_key_active(key):
                filtered.remove(key)
        return filtered

    def to_config(self) -> Dict[str, bool]:
        """``feature.<group>`` entries suitable for ``ConfigManager.write_config``."""
        return {f"{FEATURE_PREFIX}{group}": group in self.active_groups for group in sorted(FEATURE_GROUPS)}


__all__ = ["FEATURE_PREFIX", "FeatureProfile"]
