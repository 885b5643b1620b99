import pytest

from avm.machine_type import InvalidMachineType
from avm.machine_type import MachineType
from avm.machine_type import parse_machine_type


class TestParseMachineType:
    @pytest.mark.parametrize(
        ("value", "expected"),
        (
            ("go", MachineType.go),
            ("GO", MachineType.go),
            ("Go", MachineType.go),
            ("gO", MachineType.go),
            ("cpp", MachineType.cpp),
            ("CPP", MachineType.cpp),
            ("Cpp", MachineType.cpp),
            ("test", MachineType.test),
            ("TEST", MachineType.test),
            ("Test", MachineType.test),
            ("te\N{LATIN SMALL LETTER LONG S}t", MachineType.test),
        ),
    )
    def test_matches_ignoring_case(self, value: str, expected: MachineType) -> None:
        assert parse_machine_type(value) is expected

    @pytest.mark.parametrize(
        "value",
        (
            "",
            "GO ",
            " go",
            "wasm",
            "c++",
            "golang",
            "te\N{LATIN SMALL LIGATURE ST}",
            "TE\N{LATIN SMALL LIGATURE ST}",
        ),
    )
    def test_raises_invalid_machine_type_for_unknown_value(self, value: str) -> None:
        with pytest.raises(InvalidMachineType) as exc_info:
            parse_machine_type(value)
        assert exc_info.value.value == value
        assert repr(value) in str(exc_info.value)

    def test_invalid_machine_type_is_value_error(self) -> None:
        with pytest.raises(
            ValueError, match=r"^invalid machine type specified: 'wasm'$"
        ):
            parse_machine_type("wasm")

    def test_members_are_declared_in_priority_order(self) -> None:
        assert [member.value for member in MachineType] == ["go", "cpp", "test"]
