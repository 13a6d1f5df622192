"""Application-level constants."""

# Tab labels per taxonomy type
TAB_LABELS = {
    "skill": "Skills",
    "domain": "Domains",
}

# Tree markers for text rendering
EXPANDED_MARKER = "[-]"
COLLAPSED_MARKER = "[+]"
LEAF_MARKER = "   "
MATCH_MARKER = "*"
INDENT = "  "

NO_RESULTS_TEMPLATE = 'No categories match "{query}"'
