"""
Boxify - draw boxes around styled terminal text.

Import from submodules directly:
    from boxtools.ui.components import render_box, BoxConfig
    from boxtools.ui.colors import resolve_color
    from boxtools.core.escapes import expand_escapes
"""


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


__version__ = _get_version()
