"""Exception types raised while reading, merging, and writing tiny files."""


class TinyMergeError(Exception):
    """Base class for every error raised by tiny_merge."""


class MergeConfigurationError(TinyMergeError, ValueError):
    """The merge was asked to run on inputs it cannot combine."""


class DataConsistencyError(TinyMergeError, RuntimeError):
    """A merged key has no descriptor in any input."""

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(f"no descriptor for key {key}")


class TinyFormatError(TinyMergeError, ValueError):
    """Malformed tiny v2 input."""

    def __init__(self, message: str, source: str = "<string>", line: int = 0) -> None:
        self.source = source
        self.line = line
        self.message = message
        if line:
            super().__init__(f"{source}:{line}: {message}")
        else:
            super().__init__(f"{source}: {message}")
