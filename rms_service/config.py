"""
Configuration schema for the menu selector service.

Defines the catalogs offered to the user, selector behavior, and MQTT
publishing settings. Loaded from YAML and validated at startup.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional
import yaml

# Built-in catalogs, in display order
DEFAULT_CATALOGS: Dict[str, List[str]] = {
    "sectors": [
        "sector1", "sector2", "sector3", "sector4",
        "sector5", "sector6", "sector7",
    ],
    "zones_kr": [
        "강남⋅서초⋅양재", "분당", "수지", "아주대",
        "신촌⋅이대⋅연희", "서교⋅합정⋅상수", "연남⋅성산", "한남",
        "종로", "마포", "신림⋅서울대입구", "수유⋅우이",
    ],
}
DEFAULT_CATALOG = "sectors"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SelectorConfig:
    """Random selection behavior."""

    seed: Optional[int] = None  # None = fresh OS entropy
    max_redraws: int = 1000
    avoid_repeat: bool = False  # exclude the current selection on "give me one"

    def __post_init__(self):
        """Validate selector configuration."""
        if self.seed is not None and (not _is_int(self.seed) or self.seed < 0):
            raise ValueError(f"seed must be a non-negative integer or null, got {self.seed!r}")

        if not _is_int(self.max_redraws) or not 1 <= self.max_redraws <= 1_000_000:
            raise ValueError(
                f"max_redraws must be in [1, 1000000], got {self.max_redraws!r}"
            )

        if not isinstance(self.avoid_repeat, bool):
            raise ValueError(f"avoid_repeat must be true or false, got {self.avoid_repeat!r}")


@dataclass(frozen=True)
class MQTTConfig:
    """MQTT broker configuration for selection events."""

    broker: str = "localhost"
    port: int = 1883
    username: Optional[str] = None
    password: Optional[str] = None
    qos: int = 0
    enabled: bool = False

    selection_topic: str = "rms/data/selection/{service_id}"

    def __post_init__(self):
        """Validate MQTT configuration."""
        if not isinstance(self.broker, str) or not self.broker:
            raise ValueError("MQTT broker cannot be empty")

        if not _is_int(self.port) or not 1 <= self.port <= 65535:
            raise ValueError(
                f"MQTT port must be in [1, 65535], got {self.port!r}"
            )

        if not _is_int(self.qos) or self.qos not in {0, 1, 2}:
            raise ValueError(
                f"MQTT QoS must be 0, 1, or 2, got {self.qos!r}"
            )

        if not isinstance(self.enabled, bool):
            raise ValueError(f"MQTT enabled must be true or false, got {self.enabled!r}")

    def topic_for(self, service_id: str) -> str:
        return self.selection_topic.format(service_id=service_id)


@dataclass(frozen=True)
class AppConfig:
    """
    Main configuration for the menu selector service.

    Immutable after construction (frozen dataclass).
    """

    service_id: str = "rms_01"
    catalogs: Dict[str, List[str]] = field(
        default_factory=lambda: {name: list(zones) for name, zones in DEFAULT_CATALOGS.items()}
    )
    default_catalog: str = DEFAULT_CATALOG

    selector: SelectorConfig = field(default_factory=SelectorConfig)
    mqtt_config: MQTTConfig = field(default_factory=MQTTConfig)

    def __post_init__(self):
        """Validate application configuration."""
        if not self.service_id:
            raise ValueError("service_id cannot be empty")

        if not self.catalogs:
            raise ValueError("At least one catalog must be configured")

        if self.default_catalog not in self.catalogs:
            raise ValueError(
                f"default_catalog '{self.default_catalog}' is not a configured catalog. "
                f"Available: {', '.join(self.catalogs)}"
            )

    @classmethod
    def default(cls) -> "AppConfig":
        """Configuration with the built-in catalogs."""
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> "AppConfig":
        """
        Build configuration from a parsed YAML mapping.

        Raises:
            ValueError: If the data is malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a mapping, got {type(data).__name__}")

        catalogs_data = data.get("catalogs", DEFAULT_CATALOGS)
        if not isinstance(catalogs_data, dict):
            raise ValueError("'catalogs' must map catalog names to zone lists")

        catalogs: Dict[str, List[str]] = {}
        for name, zones in catalogs_data.items():
            if not isinstance(zones, list):
                raise ValueError(f"Catalog '{name}' must be a list of zones")
            catalogs[str(name)] = list(zones)

        sections = {}
        for key in ("selector", "mqtt_config"):
            section = data.get(key) or {}
            if not isinstance(section, dict):
                raise ValueError(f"'{key}' must be a mapping, got {type(section).__name__}")
            sections[key] = section

        try:
            selector = SelectorConfig(**sections["selector"])
            mqtt_config = MQTTConfig(**sections["mqtt_config"])
        except TypeError as e:
            # Only keyword mismatches reach here; values are checked in __post_init__
            raise ValueError(f"Unknown configuration key: {e}")

        return cls(
            service_id=data.get("service_id", "rms_01"),
            catalogs=catalogs,
            default_catalog=data.get("default_catalog", next(iter(catalogs), DEFAULT_CATALOG)),
            selector=selector,
            mqtt_config=mqtt_config,
        )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            service_id: "rms_01"
            default_catalog: "sectors"

            catalogs:
              sectors: ["sector1", "sector2", "sector3"]
              zones_kr: ["분당", "수지", "종로"]

            selector:
              seed: null
              max_redraws: 1000
              avoid_repeat: true

            mqtt_config:
              enabled: false
              broker: "localhost"
              port: 1883

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML is invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}")

        return cls.from_dict(data or {})
