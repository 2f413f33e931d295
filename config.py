# Configuration values for the text canvas editor.

WINDOW_TITLE = "Canvas with Multiple Draggable Texts"

# Drawing surface size (width, height)
CANVAS_WIDTH = 700
CANVAS_HEIGHT = 400

FONTS = [
    "Arial",
    "Verdana",
    "Times New Roman",
]

DEFAULT_FONT = "Arial"

# 10, 12, ..., 40
FONT_SIZES = [10 + i * 2 for i in range(16)]

DEFAULT_FONT_SIZE = 20

# Anchor for newly added text (top-left corner)
DEFAULT_POSITION = (50.0, 50.0)

SELECTION_PADDING = 5
SELECTION_WIDTH = 2
UNDERLINE_GAP = 2
DECORATION_WIDTH = 1

THEME = {
    "bg": "whitesmoke",
    "panel": "#F3F4F6",
    "canvas": "white",
    "canvas_border": "black",
    "text": "black",
    "selection": "black",
    "decoration": "black",
    "accent": "#3B82F6",
    "accent_active": "#1D4ED8",
    "button_text": "white",
    "label": "#111827",
}

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Measured fonts kept alive by the text measurer
FONT_CACHE_SIZE = 32
