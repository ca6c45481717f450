from ..exceptions import UndefinedVariable


class VariableStore:
    """Current integer value of every single-letter variable in a session."""

    def __init__(self):
        self._values = {}

    def __contains__(self, name):
        return name in self._values

    def __len__(self):
        return len(self._values)

    def get(self, name):
        if name not in self._values:
            raise UndefinedVariable(name)
        return self._values[name]

    def set(self, name, value):
        self._values[name] = value

    def clear(self):
        self._values.clear()

    def snapshot(self):
        return dict(self._values)

    def as_string(self):
        pairs = ",".join(f"{name}={value}" for name, value in sorted(self._values.items()))
        return f"({pairs})"
