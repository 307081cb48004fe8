# Constants definition

# Highlight scope names understood by the formatters (Neovim tree-sitter capture vocabulary)
HIGHLIGHT_NAMES = [
    "attribute",
    "attribute.builtin",
    "boolean",
    "character",
    "character.special",
    "comment",
    "comment.documentation",
    "comment.error",
    "comment.note",
    "comment.todo",
    "comment.warning",
    "constant",
    "constant.builtin",
    "constant.macro",
    "constructor",
    "diff.delta",
    "diff.minus",
    "diff.plus",
    "error",
    "function",
    "function.builtin",
    "function.call",
    "function.macro",
    "function.method",
    "function.method.call",
    "keyword",
    "keyword.conditional",
    "keyword.coroutine",
    "keyword.debug",
    "keyword.directive",
    "keyword.directive.define",
    "keyword.exception",
    "keyword.function",
    "keyword.import",
    "keyword.modifier",
    "keyword.operator",
    "keyword.repeat",
    "keyword.return",
    "keyword.type",
    "label",
    "markup.heading",
    "markup.heading.1",
    "markup.heading.2",
    "markup.heading.3",
    "markup.heading.4",
    "markup.heading.5",
    "markup.heading.6",
    "markup.italic",
    "markup.link",
    "markup.link.label",
    "markup.link.url",
    "markup.list",
    "markup.quote",
    "markup.raw",
    "markup.raw.block",
    "markup.strikethrough",
    "markup.strong",
    "markup.underline",
    "module",
    "module.builtin",
    "number",
    "number.float",
    "operator",
    "property",
    "punctuation.bracket",
    "punctuation.delimiter",
    "punctuation.special",
    "string",
    "string.documentation",
    "string.escape",
    "string.regexp",
    "string.special",
    "string.special.path",
    "string.special.symbol",
    "string.special.url",
    "tag",
    "tag.attribute",
    "tag.builtin",
    "tag.delimiter",
    "type",
    "type.builtin",
    "type.definition",
    "variable",
    "variable.builtin",
    "variable.member",
    "variable.parameter",
    "variable.parameter.builtin",
]

# CSS class for each highlight scope (same position as HIGHLIGHT_NAMES)
CLASSES = [name.replace(".", "-") for name in HIGHLIGHT_NAMES]

# Synthetic scopes resolved directly against a theme
NORMAL_SCOPE = "normal"
HIGHLIGHTED_SCOPE = "highlighted"
VISUAL_SCOPE = "visual"

# HTML container
PRE_CLASS = "athl"
MULTI_THEMES_CLASS = "athl-themes"
LINE_CLASS = "line"
DEFAULT_HIGHLIGHT_LINES_CLASS = "highlighted"
DEFAULT_CSS_VARIABLE_PREFIX = "--athl"
LIGHT_DARK = "light-dark()"

# Terminal
ANSI_RESET = "\x1b[0m"

# Image rendering
DEFAULT_FONT_SIZE = 16
DEFAULT_LINE_HEIGHT = 1.4
DEFAULT_MARGIN_PX = 16
DEFAULT_IMAGE_WIDTH = 1024
DEFAULT_IMAGE_HEIGHT = 1024
TAB_SPACES = "    "  # Tab replacement (4 spaces)
