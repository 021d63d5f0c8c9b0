"""
Role based data scoping for the finance chart.

The caller's role is inspected once, here, and turned into a scope value.
Everything downstream works with the scope, never with role strings.
"""
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple, Union

ROLE_STUDENT = "student"
ROLE_PARENT = "parent"


class ParentDirectory(Protocol):
    def children_of(self, parent_id: str) -> Sequence[str]:
        ...


@dataclass(frozen=True)
class GlobalScope:
    """No restriction (admin, accountant, teacher)."""

    def describe(self) -> str:
        return "global"


@dataclass(frozen=True)
class SingleStudent:
    student_id: str

    def describe(self) -> str:
        return f"student:{self.student_id}"


@dataclass(frozen=True)
class StudentSet:
    student_ids: Tuple[str, ...]

    def describe(self) -> str:
        return f"students:{len(self.student_ids)}"


@dataclass(frozen=True)
class NoData:
    """Nothing is visible. `error` is set when the children lookup failed."""
    reason: str
    error: Optional[BaseException] = None

    def describe(self) -> str:
        return f"none:{self.reason}"


ScopePredicate = Union[GlobalScope, SingleStudent, StudentSet]
ScopeResult = Union[GlobalScope, SingleStudent, StudentSet, NoData]


def resolve_scope(
    caller_role: Optional[str],
    caller_id: Optional[str],
    requested_role: Optional[str],
    requested_id: Optional[str],
    directory: ParentDirectory,
) -> ScopeResult:
    # Explicit request params override the session identity (admin viewing someone else)
    role = requested_role or caller_role
    user_id = requested_id or caller_id

    if not user_id:
        return GlobalScope()

    if role == ROLE_STUDENT:
        return SingleStudent(user_id)

    if role == ROLE_PARENT:
        try:
            children = list(directory.children_of(user_id))
        except Exception as exc:
            return NoData(reason="children_lookup_failed", error=exc)
        if not children:
            return NoData(reason="parent_has_no_children")
        return StudentSet(tuple(children))

    return GlobalScope()
