"""Immutable parser configuration."""

from dataclasses import dataclass

from ._profile import PROFILE_HOT_PATHS


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    `max_depth` caps container nesting. Left as None, nesting is bounded
    only by the interpreter stack; running out of it is reported as a
    nesting failure.

    Instances are hashable, so the grammar built for a configuration is
    cached and shared between calls.
    """

    single_precision: bool = True
    max_depth: int | None = None
    profile: bool = PROFILE_HOT_PATHS

    def __post_init__(self) -> None:
        if not isinstance(self.single_precision, bool):
            raise TypeError("single_precision must be a boolean")
        if not isinstance(self.profile, bool):
            raise TypeError("profile must be a boolean")
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(
                self.max_depth, int
            ):
                raise TypeError("max_depth must be an integer or None")
            if self.max_depth < 1:
                raise ValueError("max_depth must be at least 1")
