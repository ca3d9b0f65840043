# Path of the root group of every Harmony scene.
ROOT_GROUP_PATH = "Top"

# Separator between group levels in a node path.
PATH_SEPARATOR = "/"

# Prefix that marks a name term as a raw regular expression.
REGEX_TERM_PREFIX = "re:"

# Regex prefix handling modes.
# "exact" only recognises the bare "re:" term, as legacy scripts expect.
# "startswith" treats "re:<pattern>" as a regex over <pattern>.
REGEX_PREFIX_EXACT = "exact"
REGEX_PREFIX_STARTSWITH = "startswith"
REGEX_PREFIX_MODES = (REGEX_PREFIX_EXACT, REGEX_PREFIX_STARTSWITH)

# Whole-query shortcuts that bypass the query grammar.
QUERY_ALL = "*"
QUERY_SELECTED = ("(SELECTED)", "SELECTED")
QUERY_NOT_SELECTED = (
    "(NOT SELECTED)",
    "NOT SELECTED",
    "(! SELECTED)",
    "! SELECTED",
    "(UNSELECTED)",
    "UNSELECTED",
)

# Tokens accepted inside an option filter "(...)".
OPTION_SELECTED = "SELECTED"
OPTION_NOT_SELECTED = ("NOT SELECTED", "NOTSELECTED", "DESELECTED", "!SELECTED")
