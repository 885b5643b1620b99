import enum


class MachineType(enum.Enum):
    go = "go"
    cpp = "cpp"
    test = "test"


class InvalidMachineType(ValueError):
    def __init__(self, value: str) -> None:
        super().__init__(f"invalid machine type specified: {value!r}")
        self.value = value


def parse_machine_type(value: str) -> MachineType:
    """
    Match a textual machine type against the known types, ignoring case.

    Members are tried in declaration order. No whitespace stripping or aliasing
    takes place, so `"go "` is rejected. Each character must fold to exactly one
    character, so a ligature such as U+FB06 never stands in for "st".
    """
    folded = value.casefold()
    for machine_type in MachineType:
        if len(value) == len(machine_type.value) and folded == machine_type.value:
            return machine_type
    raise InvalidMachineType(value)
