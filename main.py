import os

import yaml
from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme

from engine.controller import GameController
from engine.game_io import GameIO

# --- CONFIGURATION ---
CONFIG_PATH = "config.yaml"
DEFAULT_CONFIG = {
    "debug_mode": False,
    "prompt": "> ",
}

# 1. SETUP THEME
custom_theme = Theme({
    "info": "bold #b0d8e3",       # Pale Cyan
    "text": "default",            # Adaptive
    "dim": "dim",                 # Grey
    "warning": "bold #ffafaf",    # Soft red
    "success": "bold #a3be8c",    # Soft green
})


def load_config(config_path=CONFIG_PATH, console=None):
    """
    Loads config.yaml over the defaults. A missing file means defaults.
    """
    config = dict(DEFAULT_CONFIG)
    if not os.path.exists(config_path):
        return config

    try:
        with open(config_path, "r") as f:
            loaded = yaml.safe_load(f)
    except yaml.YAMLError as e:
        if console:
            console.print(Panel(f"[warning]YAML STRUCTURE ERROR:[/]\nCheck {config_path} for indentation or syntax errors.\nDetails: {e}", border_style="warning"))
        return config

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        if console:
            console.print(Panel(f"[warning]CONFIG ERROR:[/]\n{config_path} must contain a mapping. Using defaults.", border_style="warning"))
        return config

    config.update(loaded)
    return config


# ============================================
# MAIN
# ============================================
def main():
    console = Console(theme=custom_theme)
    config = load_config(console=console)

    if config.get('debug_mode', False):
        console.print(Panel("[info]DEBUG MODE:[/][bold] ON[/bold]", border_style="info"))

    game = GameController(io=GameIO(console), config=config)
    game.run()


if __name__ == "__main__":
    main()
