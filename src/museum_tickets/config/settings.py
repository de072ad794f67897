"""
Centralized settings and path configuration for the ticket calculator.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Mapping, Optional


PACKAGE_ROOT = Path(__file__).resolve().parent.parent

ENV_PREFIX = 'MUSEUM_TICKETS_'


def get_project_root() -> Path:
    """Get the project root directory (where pyproject.toml lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 3 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


@dataclass
class Settings:
    """Application settings with sensible defaults."""

    # Project paths
    project_root: Path

    # Static museum price table
    museum_catalog: Path

    # Presentation
    page_title: str = "NYC Museum Ticket Calculator"
    currency_symbol: str = "$"

    # Counts carry over to a newly selected museum unless this is set
    reset_counts_on_select: bool = False

    @classmethod
    def load(cls, project_root: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None,
             **overrides) -> 'Settings':
        """
        Load settings from the project structure.

        MUSEUM_TICKETS_* environment variables override the defaults;
        keyword overrides win over both.
        """
        root = project_root or get_project_root()
        env = os.environ if environ is None else environ

        values = {'museum_catalog': PACKAGE_ROOT / 'data' / 'museums.csv'}
        if env.get(ENV_PREFIX + 'CATALOG'):
            values['museum_catalog'] = Path(env[ENV_PREFIX + 'CATALOG'])
        if env.get(ENV_PREFIX + 'PAGE_TITLE'):
            values['page_title'] = env[ENV_PREFIX + 'PAGE_TITLE']
        if env.get(ENV_PREFIX + 'CURRENCY_SYMBOL'):
            values['currency_symbol'] = env[ENV_PREFIX + 'CURRENCY_SYMBOL']
        if env.get(ENV_PREFIX + 'RESET_COUNTS_ON_SELECT'):
            flag = env[ENV_PREFIX + 'RESET_COUNTS_ON_SELECT'].strip().lower()
            values['reset_counts_on_select'] = flag in ('1', 'true', 'yes', 'on')
        values.update(overrides)

        return cls(project_root=root, **values)


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
