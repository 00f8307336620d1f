import os

# Pagination defaults (query string "page" / "limit")
DEFAULT_PAGE: int = 0
DEFAULT_LIMIT: int = 50

# Theme values meaning "no theme filter"; compared against the raw request value
ALL_THEMES: tuple[str, ...] = tuple(
    t.strip() for t in os.environ.get("PROVERBS_ALL_THEMES", "tous").split(",") if t.strip()
)

# Raw collection loaded at startup
DATA_PATH: str = os.environ.get(
    "PROVERBS_DATA",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "proverbs.json"),
)

# /* ~~~ field names accepted in the raw JSON, first match wins ~~~ */
SOURCE_FIELDS: tuple[str, ...] = ("sourceText", "source", "kabyle")
TRANSLATION_FIELDS: tuple[str, ...] = ("translatedText", "translation", "francais")
THEME_FIELDS: tuple[str, ...] = ("theme",)

# Web server
HOST: str = os.environ.get("PROVERBS_HOST", "127.0.0.1")
PORT: int = int(os.environ.get("PROVERBS_PORT", "3000"))

# Progress logging (set PROVERBS_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("PROVERBS_VERBOSE") == "1"
