"""Type aliases for error values."""

from typing import TypeAlias

# Owned error value. Any exception instance qualifies.
Error: TypeAlias = BaseException

# Borrowed view of an error, used read-only for traversal and rendering.
ErrorRef: TypeAlias = BaseException

# Anything convertible to an owned error value (see ees.errors.into_error).
ErrorLike: TypeAlias = BaseException | str
