"""Query grammar and document layout constants.

Parameter names, separators and output section names shared by the intent
builder, the resolution engine and the response assembler.
"""

from __future__ import annotations

# Query parameter names
INCLUDE_PARAM = "include"
FIELDS_PARAM = "fields"
SORT_PARAM = "sort"

# Separators
LIST_SEPARATOR = ","  # fields, sort and include values
PATH_SEPARATOR = "."  # nested include paths, e.g. "author.company"

# A leading marker on a sort field flips the direction to descending
DESC_MARKER = "-"

# Rendered document sections
LINKS_SECTION = "links"
LINKED_SECTION = "linked"
