"""A single ant: its age, health, role and place on the grid."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple, Type

from antcolony.roles import (
    BuilderRole,
    CleanerRole,
    GathererRole,
    NannyRole,
    Role,
    RoleKind,
    ShepherdRole,
    SoldierRole,
)

if TYPE_CHECKING:
    from antcolony.anthill import Anthill

_ROLE_CHANGE_AGES = frozenset({3, 10, 20, 28, 31})


@dataclass(eq=False)
class Ant:
    """An ant; compared by identity."""

    age: int = 0
    health: int = 100
    kind: RoleKind = RoleKind.BABY
    role: Optional[Role] = field(default=None, repr=False)
    needs_update: bool = False
    x: int = 0
    y: int = 0

    def age_one_year(self) -> None:
        """Grow a year older and note whether a new role is due."""
        self.age += 1
        self.needs_update = self.age in _ROLE_CHANGE_AGES

    def heal(self, amount: int) -> None:
        self.health += amount

    def hurt(self, amount: int) -> None:
        self.health -= amount

    def describe(self) -> str:
        return f"\nAge: {self.age}\nHealth:{self.health}\n"

    def role_name(self) -> str:
        return RoleKind(self.kind).label

    def _assignment(self) -> Tuple[RoleKind, Optional[Type[Role]]]:
        if self.age < 3:
            return RoleKind.BABY, None
        if self.age < 10:
            return RoleKind.NANNY, NannyRole
        if self.age < 20:
            if self.health > 80:
                return RoleKind.SOLDIER, SoldierRole
            return RoleKind.SHEPHERD, ShepherdRole
        if self.age < 28:
            if self.health > 50:
                return RoleKind.GATHERER, BuilderRole
            return RoleKind.BUILDER, GathererRole
        if self.age <= 30:
            return RoleKind.CLEANER, CleanerRole
        return self.kind, None

    def set_role(self, home: "Anthill") -> None:
        """Pick the role for the ant's age and health, moving it between groups."""
        old_kind = self.kind
        kind, role_class = self._assignment()
        self.kind = kind
        self.role = role_class() if role_class is not None else None
        if kind != old_kind:
            home.groups[kind].append(self)
            old_group = home.groups[old_kind]
            if self in old_group:
                old_group.remove(self)