from divguard.kinds import DivisionByZero, ErrorKind, OutOfBounds


class DivGuardError(Exception):
    def __init__(self, kind, expression=None):
        self.kind = kind if kind is not None else ErrorKind()
        self.expression = expression
        super().__init__(self.describe())

    def describe(self):
        detail = self.kind.detail()
        if not detail:
            return self.kind.jvm_class
        return f"{self.kind.jvm_class}: {detail}"

    def pretty(self):
        lines = []
        lines.append(f"❌ {self.kind.name}: {self.describe()}")

        if self.expression is not None:
            lines.append(f"  --> {self.expression}")

        return "\n".join(lines)


class DivisionByZeroError(DivGuardError, ZeroDivisionError):
    def __init__(self, expression=None):
        super().__init__(DivisionByZero(), expression)


class OutOfBoundsError(DivGuardError, IndexError):
    def __init__(self, index, length, expression=None):
        super().__init__(OutOfBounds(index, length), expression)
