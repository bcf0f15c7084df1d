"""Path parameter converters for page route segments like ``{id:int}``.

Converters only constrain what a segment may match. Captured values are
handed to views as the original strings.
"""


# converter name -> regex for one path segment ("path" spans the rest)
CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"\d+",
    "path": r".+",
}
