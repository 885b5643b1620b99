import sys
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar
from typing import Self
from typing import final

from .base import MachineDivergence
from .cpp import CppMachine
from .go import GoMachine


@final
@dataclass(frozen=True, slots=True, kw_only=True)
class TestMachine:
    """
    Instrumented machine running the reference and native machines side by
    side.

    Every query is answered by both and compared, a disagreement raises
    `MachineDivergence`. Both machines read the file through `read_program`,
    so they only disagree when the file changes between the reference read
    and the native machine's first use. Load errors from the reference
    machine surface when the test machine is built, those from the native
    machine on first use.
    """

    __test__: ClassVar[bool] = False

    go: GoMachine
    cpp: CppMachine

    @classmethod
    def from_file(cls, path: Path, *, warn_mode: bool) -> Self:
        return cls(
            go=GoMachine.from_file(path, warn_mode=warn_mode),
            cpp=CppMachine.from_file(path),
        )

    @property
    def path(self) -> Path:
        return self.go.path

    @property
    def warn_mode(self) -> bool:
        return self.go.warn_mode

    @property
    def log_prefix(self) -> str:
        return f"[test:{self.path.name}] "

    def hash(self) -> str:
        go_hash = self.go.hash()
        cpp_hash = self.cpp.hash()
        if self.warn_mode:
            print(
                self.log_prefix,
                f"go={go_hash} cpp={cpp_hash}",
                sep="",
                file=sys.stderr,
            )
        if go_hash != cpp_hash:
            raise MachineDivergence(
                f"machines diverged for {str(self.path)!r}: "
                f"go hash {go_hash} != cpp hash {cpp_hash}"
            )
        return go_hash

    def clone(self) -> Self:
        return type(self)(go=self.go.clone(), cpp=self.cpp.clone())
