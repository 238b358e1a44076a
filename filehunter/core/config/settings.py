# File: filehunter/core/config/settings.py

import os


class Settings:
    # --- Search defaults ---
    # Kept as strings so argparse runs them through the same type checks as user input
    DEFAULT_ROOT: str = os.getenv("FILEHUNTER_ROOT", ".")
    DEFAULT_SIZE: str = os.getenv("FILEHUNTER_SIZE", "0")
    DEFAULT_UNIT: str = os.getenv("FILEHUNTER_UNIT", "KB")

    # --- Traversal ---
    FOLLOW_SYMLINKS: bool = os.getenv("FILEHUNTER_FOLLOW_SYMLINKS", "true").lower() == "true"

    # --- Output ---
    HIGHLIGHT_STYLE: str = os.getenv("FILEHUNTER_HIGHLIGHT_STYLE", "bold red")
    LOG_LEVEL: str = os.getenv("FILEHUNTER_LOG_LEVEL", "WARNING").upper()


settings = Settings()
