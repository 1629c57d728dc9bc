"""Change Function Declaration: adding a parameter, migration mechanics.

Goal: add a new required parameter without changing every caller at once.
"""

from types import SimpleNamespace

from refactoring_catalog.base import RefactorBase
from refactoring_catalog.registry import entry_point


class BeforeRefactor(RefactorBase):
    def __init__(self):
        super().__init__()
        self.reservations = []

    def add_reservation(self, customer):
        self.reservations.append(customer)


class Refactor1(BeforeRefactor):
    """Extract Function into a new method with a temporary name."""

    def add_reservation(self, customer):
        self.zz_add_reservation(customer)

    def zz_add_reservation(self, customer):
        self.reservations.append(customer)


class Refactor2(BeforeRefactor):
    """Add the parameter to the new declaration and its call."""

    def add_reservation(self, customer):
        self.zz_add_reservation(customer, False)

    def zz_add_reservation(self, customer, is_priority):
        self.reservations.append(customer)


class Refactor3(Refactor2):
    """Flag callers that do not pass the new parameter yet."""

    def add_reservation(self, customer, is_priority=None):
        self.check(is_priority is not None)
        self.zz_add_reservation(customer, bool(is_priority))


class Refactor4(BeforeRefactor):
    """Every caller passes the parameter, so the temporary method is inlined."""

    def add_reservation(self, customer, is_priority):
        self.reservations.append(customer)


@entry_point("FirstSetOfRefactorings::ChangeFunctionDeclaration::MigrationMechanics::AddingAParameter")
class Tests:
    CUSTOMER = SimpleNamespace(name="Adam")

    def run(self):
        lines = []
        for klass in (BeforeRefactor, Refactor1, Refactor2, Refactor3):
            instance = klass()
            instance.add_reservation(self.CUSTOMER)
            lines.append(f"Reservations: {[c.name for c in instance.reservations]}")

        instance = Refactor4()
        instance.add_reservation(self.CUSTOMER, False)
        lines.append(f"Reservations: {[c.name for c in instance.reservations]}")
        return lines
