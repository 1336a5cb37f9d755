"""Pytest-based definition driver tests.

Test cases live in 05_collect/*.tests files. Format:

    === test name
    [ JSON list of definitions ]
    ---
    items.0.enum.name = Testing
    ---

The expected section is either `error: <message substring>` or `path = value`
lines checked against `items_to_dict()` of the collector.

Definition JSON:
    {"enum": "Name", "values": ["a", {"value": "b", "doc": "..."}], "attrs": [...], "doc": "..."}
    {"interface": "Name", "attrs": [...], "inherits": "Parent", "members": [...]}
Members:
    {"variant": "Name", "args": [{"name": "x", "type": "string"}], "doc": "..."}
    {"attribute": "name", "type": "string"}
    {"const": "NAME", "type": "u32", "value": "1"}
"""

import json
from pathlib import Path

import pytest

from udlconv import collect
from udlconv.collector import InterfaceCollector
from udlconv.converters import CONVERTERS, convert, convert_definitions
from udlconv.errors import (
    ConversionError,
    InheritanceNotSupported,
    MalformedAttributes,
    UnsupportedDefinition,
)
from udlconv.metadata import EnumErrorMetadata, EnumMetadata
from udlconv.serialize import items_to_dict
from udlconv.syntax import (
    Argument,
    AttributeMember,
    ConstMember,
    EnumDefinition,
    EnumValue,
    ExtendedAttribute,
    InterfaceDefinition,
    OperationMember,
    TypeRef,
)

COLLECT_DIR = Path(__file__).parent / "05_collect"


# ---------------------------------------------------------------------------
# Definition loading
# ---------------------------------------------------------------------------


def _attrs(d: dict) -> list[ExtendedAttribute] | None:
    if "attrs" not in d:
        return None
    return [ExtendedAttribute(name) for name in d["attrs"]]


def _member_from_dict(d: dict):
    if "variant" in d:
        args = [Argument(name=a["name"], ty=TypeRef(a["type"])) for a in d.get("args", [])]
        return OperationMember(return_type=TypeRef(d["variant"]), args=args, docstring=d.get("doc"))
    if "attribute" in d:
        return AttributeMember(d["attribute"], TypeRef(d["type"]))
    if "const" in d:
        return ConstMember(d["const"], TypeRef(d["type"]), d["value"])
    raise ValueError(f"unknown member: {d!r}")


def definition_from_dict(d: dict):
    """Build a syntax node from its JSON test form."""
    if "enum" in d:
        values: list[EnumValue] = []
        for v in d.get("values", []):
            if isinstance(v, str):
                values.append(EnumValue(v))
            else:
                values.append(EnumValue(v["value"], docstring=v.get("doc")))
        return EnumDefinition(
            identifier=d["enum"], values=values, attributes=_attrs(d), docstring=d.get("doc")
        )
    if "interface" in d:
        return InterfaceDefinition(
            identifier=d["interface"],
            members=[_member_from_dict(m) for m in d.get("members", [])],
            inheritance=d.get("inherits"),
            attributes=_attrs(d),
            docstring=d.get("doc"),
        )
    raise ValueError(f"unknown definition: {d!r}")


def parse_collect_file(path: Path) -> list[tuple[str, str, str]]:
    """Split a .tests file into (name, input, expected) cases.

    Each case is a `=== name` header followed by two sections, each closed
    by a `---` line. Text before the first header is ignored.
    """
    cases: list[tuple[str, str, str]] = []
    for block in ("\n" + path.read_text()).split("\n=== ")[1:]:
        lines = block.splitlines()
        marks = [i for i, line in enumerate(lines) if line == "---"]
        if len(marks) < 2:
            raise ValueError(f"{path.name}: case {lines[0]!r} needs input and expected sections")
        input_text = "\n".join(lines[1 : marks[0]]).strip()
        expected = "\n".join(lines[marks[0] + 1 : marks[1]]).strip()
        cases.append((lines[0].strip(), input_text, expected))
    return cases


def discover_collect_tests() -> list[tuple[str, str, str]]:
    """Find all collect tests, returns (test_id, input, expected)."""
    results = []
    for test_file in sorted(COLLECT_DIR.glob("*.tests")):
        for name, input_json, expected in parse_collect_file(test_file):
            results.append((f"{test_file.stem}/{name}", input_json, expected))
    return results


def resolve_dotpath(obj: object, path: str) -> object:
    """Resolve a dot-separated path against a nested dict/list structure."""
    current = obj
    for part in path.split("."):
        if part == "length":
            return len(current)
        if isinstance(current, list):
            current = current[int(part)]
        elif isinstance(current, dict):
            current = current[part]
        else:
            raise KeyError(f"cannot traverse {type(current).__name__} with key {part!r}")
    return current


def _to_comparable(value: object) -> str:
    """Convert a value to its string form for comparison."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def run_collect(input_json: str) -> dict[str, object]:
    definitions = [definition_from_dict(d) for d in json.loads(input_json)]
    ci = collect(definitions, "crate_name", namespace="test")
    return items_to_dict(ci)


def pytest_generate_tests(metafunc):
    """Parametrize tests over collect test files."""
    if "collect_input" in metafunc.fixturenames:
        params = [
            pytest.param(input_json, expected, id=test_id)
            for test_id, input_json, expected in discover_collect_tests()
        ]
        metafunc.parametrize("collect_input,collect_expected", params)


def _check_dotpaths(result: dict[str, object], assertions: str) -> None:
    for line in assertions.splitlines():
        if not line.strip():
            continue
        path, sep, expected_val = line.partition("=")
        assert sep, f"bad assertion, no '=': {line}"
        path = path.strip()
        try:
            actual = resolve_dotpath(result, path)
        except (KeyError, IndexError, TypeError) as e:
            pytest.fail(f"path {path!r} not found in result: {e}")
        assert _to_comparable(actual) == expected_val.strip(), path


def test_collect(collect_input: str, collect_expected: str):
    """Run the driver over one case and check the error or the dotpaths."""
    if collect_expected.startswith("error:"):
        with pytest.raises(ConversionError) as exc:
            run_collect(collect_input)
        assert collect_expected[len("error:"):].strip() in str(exc.value)
        return
    _check_dotpaths(run_collect(collect_input), collect_expected)


# ---------------------------------------------------------------------------
# Dispatch table
# ---------------------------------------------------------------------------


def test_dispatch_table_covers_four_forms():
    assert set(CONVERTERS) == {
        ("enum", False),
        ("enum", True),
        ("interface", False),
        ("interface", True),
    }


@pytest.mark.parametrize(
    "node,is_error,record_type",
    [
        (EnumDefinition("E", [EnumValue("a")]), False, EnumMetadata),
        (EnumDefinition("E", [EnumValue("a")]), True, EnumErrorMetadata),
        (InterfaceDefinition("E", [OperationMember(TypeRef("A"))]), False, EnumMetadata),
        (InterfaceDefinition("E", [OperationMember(TypeRef("A"))]), True, EnumErrorMetadata),
    ],
)
def test_error_flag_is_out_of_band(ci, node, is_error, record_type):
    assert isinstance(convert(node, ci, is_error), record_type)


def test_flatness_follows_shape(ci):
    flat = convert(EnumDefinition("E", [EnumValue("a")]), ci, True)
    not_flat = convert(InterfaceDefinition("E", [OperationMember(TypeRef("A"))]), ci, True)
    assert flat.is_flat is True
    assert not_flat.is_flat is False


def test_unknown_definition_rejected(ci):
    with pytest.raises(UnsupportedDefinition):
        convert(TypeRef("NotADefinition"), ci, False)


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------


def test_registers_in_source_order(ci):
    defs = [
        EnumDefinition("B", [EnumValue("x")]),
        EnumDefinition("A", [EnumValue("y")], attributes=[ExtendedAttribute("Error")]),
    ]
    converted = convert_definitions(defs, ci)
    assert [item.name for item in ci.items] == ["B", "A"]
    assert converted == ci.items


def test_same_name_registered_twice(ci):
    defs = [EnumDefinition("A", [EnumValue("x")]), EnumDefinition("A", [EnumValue("x")])]
    convert_definitions(defs, ci)
    assert len(ci) == 2


def test_failure_stops_without_registering_bad_item(ci):
    defs = [
        EnumDefinition("Good", [EnumValue("x")]),
        InterfaceDefinition(
            "Bad",
            [OperationMember(TypeRef("A"))],
            inheritance="Base",
            attributes=[ExtendedAttribute("Enum")],
        ),
        EnumDefinition("Never", [EnumValue("y")]),
    ]
    with pytest.raises(InheritanceNotSupported):
        convert_definitions(defs, ci)
    assert [item.name for item in ci.items] == ["Good"]


def test_object_interface_rejected(ci):
    node = InterfaceDefinition("Thing", [OperationMember(TypeRef("A"))])
    with pytest.raises(UnsupportedDefinition, match="not an \\[Enum\\] or \\[Error\\] interface"):
        convert_definitions([node], ci)
    assert len(ci) == 0


def test_malformed_attributes_from_driver(ci):
    node = EnumDefinition("E", [EnumValue("a")], attributes=[ExtendedAttribute("Nope")])
    with pytest.raises(MalformedAttributes):
        convert_definitions([node], ci)


def test_collect_builds_fresh_collector():
    defs = [EnumDefinition("E", [EnumValue("a")])]
    first = collect(defs, "crate_name", namespace="test")
    second = collect(defs, "crate_name", namespace="test")
    assert isinstance(first, InterfaceCollector)
    assert first is not second
    assert first.items == second.items
