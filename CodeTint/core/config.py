import os

from .constants import DEFAULT_CSS_VARIABLE_PREFIX


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "y", "on")

# ================= Themes =================
# Bundled theme definitions shipped with the package
BUNDLED_THEMES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "themes")
# Extra directory of theme JSON files merged over the bundled set (later files win on name clashes)
THEMES_DIR = os.getenv("CODETINT_THEMES_DIR", "").strip()

# ================= HTML Formatters =================
CSS_VARIABLE_PREFIX = os.getenv("CODETINT_CSS_VARIABLE_PREFIX", "").strip() or DEFAULT_CSS_VARIABLE_PREFIX
ITALIC = _env_bool("CODETINT_ITALIC", False)


def theme_dirs():
    """Directories scanned by the default theme registry, in load order."""
    dirs = [BUNDLED_THEMES_DIR]
    if THEMES_DIR:
        dirs.append(THEMES_DIR)
    return dirs
