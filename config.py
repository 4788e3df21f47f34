import os
import yaml

from settings_schema import ChartSettingsSchema, validate_settings

class YamlConfig:
    """Load and save chart settings to a YAML file."""

    def __init__(self, path: str = "settings.yaml") -> None:
        self.path = path

    def load(self) -> dict:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def load_settings(self) -> ChartSettingsSchema:
        """Return validated chart settings, defaults filling missing keys."""
        return validate_settings(self.load())

    def save(self, data: dict) -> None:
        out = validate_settings(data).model_dump()
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(out, f)
