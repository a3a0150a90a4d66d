# errors.py


class AssemblyError(Exception):
    """A source line that cannot be turned into a machine word."""

    def __init__(self, message, lineno=None, line=None):
        super().__init__(message, lineno, line)
        self.message = message
        self.lineno = lineno
        self.line = line

    def at(self, lineno, line):
        self.lineno = lineno
        self.line = line
        return self

    def __str__(self):
        if self.lineno is None:
            return self.message
        return f"line {self.lineno}: {self.message}: {self.line!r}"


class UnknownMnemonic(AssemblyError):
    def __init__(self, kind, mnemonic, lineno=None, line=None):
        AssemblyError.__init__(self, f"unknown {kind} '{mnemonic}'", lineno, line)
        # keep args in constructor order so the error pickles across workers
        self.args = (kind, mnemonic, lineno, line)
        self.kind = kind
        self.mnemonic = mnemonic


class MalformedLine(AssemblyError):
    pass


class ValueOutOfRange(AssemblyError):
    def __init__(self, value, limit, lineno=None, line=None):
        AssemblyError.__init__(self, f"address {value} outside 0..{limit}", lineno, line)
        self.args = (value, limit, lineno, line)
        self.value = value
        self.limit = limit
