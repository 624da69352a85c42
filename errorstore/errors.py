"""Exceptions raised by the error registry."""

# Stable, machine-readable baseline codes present in every registry.
UNKNOWN_ERROR = 9999
INTERNAL_SERVER_ERROR = 9998
FORBIDDEN = 9997
UNAUTHORIZED = 9996


class ErrorStoreError(Exception):
    """Base exception for errorstore."""

    pass


class RegistryError(ErrorStoreError):
    """Raised when a registry is misused (e.g. populated twice)."""

    pass


class DuplicateCodeError(RegistryError):
    """Raised when registering or merging a code that already exists in the codemap."""

    def __init__(self, *codes: int | str):
        self.codes = codes
        joined = ", ".join(str(code) for code in codes)
        super().__init__(f"{joined} already exists in codemap")


class DuplicateNameError(RegistryError):
    """Raised when a name is already used by a different code in the codemap."""

    def __init__(self, *names: str):
        self.names = names
        joined = ", ".join(names)
        super().__init__(f"{joined} already names another code in codemap")
