"""Recurring string constants used while laying out text."""

SPACE = " "
COLON_SPACE = ": "
NEW_LINE = "\n"
TAB = "\t"
# tabs are expanded before measuring
TAB_REPLACEMENT = "    "

# Style ids carried by font fragments; mapped to concrete fonts by DocumentConfig.
REGULAR = "regular"
BOLD = "bold"
