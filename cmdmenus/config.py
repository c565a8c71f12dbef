# cmdmenus/config.py
import json
import os
from pathlib import Path
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()

CONFIG_PATH = Path(__file__).parent.parent / "config" / "menus.json"


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class RenderSettings:
    """Strings used when menus are printed."""
    prompt: str = "Select an option"
    quit_title: str = "Exit"
    back_title: str = "Back"
    empty_message: str = "(empty list)"
    invalid_choice: str = "Invalid choice: {choice}"
    option_format: str = "{shortcut} : {title}"
    breadcrumb_separator: str = " › "
    show_breadcrumbs: bool = True


@dataclass
class Settings:
    log_level: str = "WARNING"
    render: RenderSettings = field(default_factory=RenderSettings)
    config_path: Path = CONFIG_PATH

    def __post_init__(self):
        config = {}
        if self.config_path.exists():
            with open(self.config_path) as f:
                config = json.load(f)

        self.log_level = os.getenv("CMDMENUS_LOG_LEVEL", config.get("log_level", "WARNING")).upper()

        # Load render settings
        render_config = config.get("render", {})
        defaults = RenderSettings()
        self.render = RenderSettings(
            prompt=os.getenv("CMDMENUS_PROMPT", render_config.get("prompt", defaults.prompt)),
            quit_title=os.getenv("CMDMENUS_QUIT_TITLE", render_config.get("quit_title", defaults.quit_title)),
            back_title=os.getenv("CMDMENUS_BACK_TITLE", render_config.get("back_title", defaults.back_title)),
            empty_message=os.getenv(
                "CMDMENUS_EMPTY_MESSAGE", render_config.get("empty_message", defaults.empty_message)
            ),
            invalid_choice=render_config.get("invalid_choice", defaults.invalid_choice),
            option_format=render_config.get("option_format", defaults.option_format),
            breadcrumb_separator=render_config.get("breadcrumb_separator", defaults.breadcrumb_separator),
            show_breadcrumbs=_env_flag(
                "CMDMENUS_SHOW_BREADCRUMBS", render_config.get("show_breadcrumbs", defaults.show_breadcrumbs)
            ),
        )


settings = Settings()
