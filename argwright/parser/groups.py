# Argwright Argument Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Argument groups and their membership policies.

A group is checked once, after every token has been consumed and every value
has been decoded and validated. It only looks at which member specs the user
actually supplied; the engine tracks that itself, so members do not need
indicator slots.

Policies:
- MUTUALLY_EXCLUSIVE: at most one member.
- ALL_OR_NONE: no member, or every member.
- FIRST_OR_NONE: the supplied members form a leading run of the declared
  order; supplying a member requires every member declared before it.
- AT_LEAST_ONE: one or more members.
- EXACTLY_ONE: exactly one member.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Collection

from argwright.exceptions import GroupConstraintError


class GroupPolicy(Enum):
    """Membership policy evaluated against the supplied members of a group."""

    MUTUALLY_EXCLUSIVE = "mutually_exclusive"
    ALL_OR_NONE = "all_or_none"
    FIRST_OR_NONE = "first_or_none"
    AT_LEAST_ONE = "at_least_one"
    EXACTLY_ONE = "exactly_one"

    @classmethod
    def _missing_(cls, value: object) -> GroupPolicy:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == normalized:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        return self.value.replace("_", "-")


@dataclass(frozen=True)
class ArgumentGroup:
    """
    A named set of registered arguments plus a membership policy.

    Attributes:
        name (str): Group name used in error messages and summaries.
        policy (GroupPolicy): Rule the supplied members must satisfy.
        members (tuple[str, ...]): Canonical names of the member specs, in
            declaration order.
    """

    name: str
    policy: GroupPolicy
    members: tuple[str, ...]

    def check(self, supplied: Collection[str]) -> None:
        """
        Verify the policy against the canonical names the user supplied.

        Raises:
            GroupConstraintError: If the policy is violated.
        """
        present = [member for member in self.members if member in supplied]
        count = len(present)
        policy = self.policy

        if policy is GroupPolicy.MUTUALLY_EXCLUSIVE and count > 1:
            self._fail(f"arguments {self._list(present)} cannot be used together", present)
        elif policy is GroupPolicy.ALL_OR_NONE and 0 < count < len(self.members):
            missing = [member for member in self.members if member not in supplied]
            self._fail(
                f"arguments {self._list(present)} also require {self._list(missing)}",
                missing,
            )
        elif policy is GroupPolicy.FIRST_OR_NONE:
            for index, member in enumerate(self.members):
                if member in supplied:
                    continue
                later = [m for m in self.members[index + 1 :] if m in supplied]
                if later:
                    self._fail(
                        f"arguments {self._list(later)} require {self._list([member])}",
                        [member, *later],
                    )
                break
        elif policy is GroupPolicy.AT_LEAST_ONE and count == 0:
            self._fail(
                f"one of the arguments {self._list(self.members)} is required",
                list(self.members),
            )
        elif policy is GroupPolicy.EXACTLY_ONE and count != 1:
            if count == 0:
                self._fail(
                    f"one of the arguments {self._list(self.members)} is required",
                    list(self.members),
                )
            self._fail(f"arguments {self._list(present)} cannot be used together", present)

    def _list(self, names: Collection[str]) -> str:
        return ", ".join(f"'{name}'" for name in names)

    def _fail(self, detail: str, members: list[str]) -> None:
        raise GroupConstraintError(
            f"Group '{self.name}' ({self.policy}): {detail}.",
            group=self.name,
            members=members,
        )
