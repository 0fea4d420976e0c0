APP_VERSION = "0.4.0"
APP_TITLE = "AnyJSON Review"

# Activation route handled by the tree view.
ROUTE_ANY_JSON_PARSE = "any_json_parse"

RUNTIME_DIR_NAME = "AnyJsonReview"
SETTINGS_FILENAME = "anyjson_review_settings.json"
DIAG_LOG_FILENAME = "anyjson_review_diagnostics.log"
DIAG_LOG_MAX_BYTES = 512 * 1024
DIAG_LOG_KEEP_BYTES = 256 * 1024
DIAG_LOG_KEEP_DAYS = 2

# Classifier thresholds.
INLINE_TEXT_MAX_CHARS = 20
SUMMARY_MAX_CHARS = 30
SUMMARY_ELLIPSIS = "..."

# Preview overlay geometry.
PREVIEW_DEFAULT_WIDTH = 700
PREVIEW_DEFAULT_HEIGHT = 400
PREVIEW_MIN_WIDTH = 300
PREVIEW_MAX_WIDTH = 800
PREVIEW_MIN_HEIGHT = 200
PREVIEW_MAX_HEIGHT = 700
PREVIEW_GRIP_SIZE = 20
PREVIEW_INDENT = 2

TREE_COPY_GLYPH = "⧉"
TREE_VALUE_COLUMN_WIDTH = 300
TREE_COPY_COLUMN_WIDTH = 36

DEFAULT_SETTINGS = {
    "unwrap_json_literals": True,
    "font_size": 11,
    "theme": "DARK",
    "debug_logging": False,
}
FONT_SIZE_MIN = 8
FONT_SIZE_MAX = 20
THEME_VARIANTS = ("DARK", "LIGHT")
