from pathlib import Path

# Code root (parent of infrastructure/); the tag table ships beside the packages
CODE_ROOT = Path(__file__).resolve().parent.parent
TAGS_FILE = CODE_ROOT / "i18n" / "tags.json"

# Fetch paths: relative to the hosting script URL, or to the site root as fallback
TAGS_URL_FROM_SCRIPT = "../i18n/tags.json"
DEFAULT_TAGS_URL = "i18n/tags.json"

# Repo-root conventional config (overrideable via --config)
CONFIG_DIR = Path("configs")
CONFIG_FILE = CONFIG_DIR / "tag_i18n.yaml"
