class IdConverter:
    """Accepts any path segment as an id.

    Digits become the matching integer, everything else becomes 0, which never
    matches a list or todo, so malformed ids are handled like unknown ones.
    """

    regex = "[^/]+"

    def to_python(self, value: str) -> int:
        if not (value.isascii() and value.isdigit()):
            return 0
        try:
            return int(value)
        except ValueError:
            # longer than the int conversion limit
            return 0

    def to_url(self, value) -> str:
        return str(value)
