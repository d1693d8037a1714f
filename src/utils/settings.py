"""
Settings management for ProjectBoard

Persistent application settings: window size and the rules the project
form validates against. Projects themselves are never persisted.
"""

import json
import os
from src.utils.message import Log
from src.utils.paths import get_settings_path

DEFAULT_SETTINGS = {
    # Window settings
    "window_width": 720,
    "window_height": 640,

    # Project form rules
    "title_required": True,
    "title_max_length": None,
    "description_min_length": 5,
    "description_max_length": None,
    "people_min": 1,
    "people_max": 5,
}

class Settings:
    """Application settings manager"""

    def __init__(self, settings_file: str = None):
        self.settings_file = settings_file or str(get_settings_path())
        self.settings = DEFAULT_SETTINGS.copy()
        self.load_settings()

    def load_settings(self):
        """Load settings from file, creating it with defaults on first run"""
        try:
            if os.path.exists(self.settings_file):
                with open(self.settings_file, 'r', encoding='utf-8') as file:
                    saved_settings = json.load(file)
                if not isinstance(saved_settings, dict):
                    Log.error(f"Ignoring settings file {self.settings_file}: expected a JSON object")
                    return
                self.settings.update(saved_settings)
                Log.info("Settings loaded successfully")
            else:
                os.makedirs(os.path.dirname(self.settings_file), exist_ok=True)
                self.save_settings()
                Log.info("Created new settings file with defaults")
        except (OSError, ValueError) as e:
            Log.error(f"Failed to load settings: {e}")
            self.settings = DEFAULT_SETTINGS.copy()

    def save_settings(self):
        """Save settings to file"""
        try:
            os.makedirs(os.path.dirname(self.settings_file), exist_ok=True)
            with open(self.settings_file, 'w', encoding='utf-8') as file:
                json.dump(self.settings, file, indent=4)
            Log.debug("Settings saved successfully")
        except OSError as e:
            Log.error(f"Failed to save settings: {e}")

    def get(self, key, default=None):
        """Get a setting value"""
        return self.settings.get(key, default)

    def set(self, key, value):
        """Set a setting value"""
        self.settings[key] = value
        self.save_settings()
