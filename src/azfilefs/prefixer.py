"""Path prefixing for filesystems scoped to a subtree of a share."""

from __future__ import annotations


class PathPrefixer:
    """Apply and remove a fixed path prefix.

    A prefixed filesystem sees the subtree below ``prefix`` as its root. Every
    path handed to the remote client is prefixed once, every path handed back
    to the caller has the prefix removed once.

    Example:
        ```python
        prefixer = PathPrefixer("/reports/2024/")
        prefixer.prefix_path("q1/summary.csv")  # "reports/2024/q1/summary.csv"
        prefixer.strip_prefix("reports/2024/q1/summary.csv")  # "q1/summary.csv"
        ```
    """

    def __init__(self, prefix: str = "", separator: str = "/") -> None:
        """Initialize the prefixer.

        Args:
            prefix: Prefix to apply. Leading and trailing separators are ignored.
            separator: Path separator used by the remote store.
        """
        self.separator = separator
        self._strip_chars = separator + "\\"
        self._prefix = prefix.strip(self._strip_chars)

    @property
    def prefix(self) -> str:
        """The normalized prefix, without leading or trailing separators."""
        return self._prefix

    def segments(self) -> list[str]:
        """Split the prefix into its path segments."""
        return [part for part in self._prefix.split(self.separator) if part]

    def prefix_path(self, path: str) -> str:
        """Place a relative path below the prefix."""
        path = path.lstrip(self._strip_chars)
        if not self._prefix:
            return path
        if not path:
            return self._prefix
        return f"{self._prefix}{self.separator}{path}"

    def strip_prefix(self, path: str) -> str:
        """Remove the prefix from a prefixed path.

        Raises:
            ValueError: If the path does not live below the prefix.
        """
        if not self._prefix:
            return path
        if path == self._prefix:
            return ""
        head = self._prefix + self.separator
        if not path.startswith(head):
            msg = f"Path {path!r} is not below prefix {self._prefix!r}"
            raise ValueError(msg)
        return path[len(head) :]

    def __repr__(self) -> str:
        return f"PathPrefixer({self._prefix!r})"
