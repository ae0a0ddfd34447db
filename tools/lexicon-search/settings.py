import os
import yaml
from models import SearchSettings

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config", "search.yaml")

class ConfigLoader:
    def __init__(self, path: str = DEFAULT_CONFIG_PATH):
        self.path = path
        self.settings = self.load(path)

    def load(self, path: str) -> SearchSettings:
        if not os.path.exists(path):
            print(f"ℹ️  No search config at {path}. Using defaults.")
            return SearchSettings()

        print(f"📂 Loading search config from {path}...")
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        # Validate with Pydantic; partial cap/route tables keep their other defaults
        defaults = SearchSettings()
        for table in ("caps", "routes"):
            base = {kind.value: value for kind, value in getattr(defaults, table).items()}
            data[table] = {**base, **(data.get(table) or {})}
        settings = SearchSettings(**data)

        print(f"✅ Loaded search config ({len(settings.caps)} caps, {len(settings.routes)} routes).")
        return settings

def load_settings(path: str | None = None) -> SearchSettings:
    return ConfigLoader(path or DEFAULT_CONFIG_PATH).settings
