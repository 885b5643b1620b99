import hashlib
from pathlib import Path
from typing import Protocol
from typing import Self


class Machine(Protocol):
    @property
    def path(self) -> Path: ...

    def hash(self) -> str: ...

    def clone(self) -> Self: ...


class MachineError(Exception): ...


class MachineLoadError(MachineError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"failed to load program {str(path)!r}: {reason}")
        self.path = path


class MachineDivergence(MachineError): ...


def read_program(path: Path) -> bytes:
    try:
        code = path.read_bytes()
    except OSError as exception:
        raise MachineLoadError(
            path, exception.strerror or str(exception)
        ) from exception
    if not code:
        raise MachineLoadError(path, "program is empty")
    return code


def program_checksum(code: bytes) -> str:
    checksum = hashlib.sha256(code, usedforsecurity=True)
    return f"sha256:{checksum.hexdigest()}"
