"""Change Function Declaration: renaming a function, simple mechanics.

Every caller and the declaration change at once.
"""

import math

from refactoring_catalog.base import RefactorBase
from refactoring_catalog.registry import entry_point


class BeforeRefactor(RefactorBase):
    def circum(self, radius):
        return 2 * math.pi * radius


class Refactor1(RefactorBase):
    def circumference(self, radius):
        return 2 * math.pi * radius


@entry_point("FirstSetOfRefactorings::ChangeFunctionDeclaration::SimpleMechanics::RenamingAFunction")
class Tests:
    RADIUS = 10

    def run(self):
        return [
            f"Circumference: {BeforeRefactor().circum(self.RADIUS)}",
            f"Circumference: {Refactor1().circumference(self.RADIUS)}",
        ]
