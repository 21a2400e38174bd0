"""String-valued enums whose members render as SCREAMING_SNAKE_CASE text."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


def _split_words(name: str) -> list[str]:
    """Split an identifier into words at case and punctuation boundaries."""
    words: list[str] = []
    for chunk in "".join(c if c.isalnum() else " " for c in name).split():
        start = 0
        mode = None
        for index, char in enumerate(chunk):
            following = chunk[index + 1] if index + 1 < len(chunk) else None
            if char.islower():
                next_mode = "lower"
            elif char.isupper():
                next_mode = "upper"
            else:
                next_mode = mode
            if following is not None:
                if next_mode == "lower" and following.isupper():
                    words.append(chunk[start : index + 1])
                    start = index + 1
                    mode = None
                    continue
                if (
                    mode == "upper"
                    and char.isupper()
                    and following.islower()
                    and index > start
                ):
                    words.append(chunk[start:index])
                    start = index
            mode = next_mode
        words.append(chunk[start:])
    return [word for word in words if word]


def screaming_snake_case(name: str) -> str:
    """Convert an identifier such as ``PendingApproval`` to ``PENDING_APPROVAL``."""
    return "_".join(word.upper() for word in _split_words(name))


class StringEnum(str, Enum):
    """An enum whose values are the SCREAMING_SNAKE_CASE forms of member names.

    Members compare equal to, print as and serialise to JSON as their value.
    Members declared with ``auto()`` get their value from their name.
    """

    def _generate_next_value_(name, start, count, last_values):  # noqa: N805
        return screaming_snake_case(name)

    @classmethod
    def parse(cls, value: str) -> StringEnum:
        """The member whose text is exactly ``value``; raises ValueError otherwise."""
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(
            f"Matching variant not found for {value!r} in {cls.__name__}"
        )

    def __str__(self) -> str:
        return self.value

    def __format__(self, spec: str) -> str:
        return format(self.value, spec)

    def __repr__(self) -> str:
        return self.value


def generate_enum(name: str, variants: Iterable[str]) -> type[StringEnum]:
    """Create a ``StringEnum`` called ``name`` with the given variant names.

    Raises ValueError for a variant that is not an identifier or for a
    variant listed twice.
    """
    if not name.isidentifier():
        raise ValueError(f"invalid enum name: {name!r}")
    members: list[tuple[str, str]] = []
    seen: set[str] = set()
    for variant in variants:
        if not variant.isidentifier():
            raise ValueError(f"invalid variant name: {variant!r}")
        if variant in seen:
            raise ValueError(f"duplicate variant: {variant!r}")
        seen.add(variant)
        members.append((variant, screaming_snake_case(variant)))
    return StringEnum(name, members, module=__name__)