"""In-memory persistence medium."""


class MemoryMedium:
    """Dict-backed medium for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def save(self, key: str, text: str) -> None:
        self._data[key] = text

    def load(self, key: str) -> str | None:
        return self._data.get(key)
