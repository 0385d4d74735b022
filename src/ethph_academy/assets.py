"""Asset discovery for bundled static files.

Locates the stylesheet and scripts shipped inside the ethph_academy package.
"""

from importlib.resources import files
from pathlib import Path


def get_static_dir() -> Path:
    """Return path to bundled static assets.

    Returns:
        Path to the static directory containing stylesheets and scripts.

    Raises:
        FileNotFoundError: If static assets are not bundled.
    """
    static = files("ethph_academy").joinpath("static")
    if not static.is_dir():
        msg = "Bundled static assets not found. Reinstall the package with 'pip install -e .'."
        raise FileNotFoundError(msg)
    return Path(str(static))
