"""
Objects component unit tests.
"""

from __future__ import annotations

from collections import OrderedDict, defaultdict
from datetime import datetime

import pytest

from utilkit.components.objects import (
    DeepCloneInput,
    KeysInput,
    OmitInput,
    PickInput,
    ValuesInput,
    deep_clone,
    keys,
    omit,
    pick,
    run,
    values,
)


@pytest.fixture
def obj() -> dict[str, int]:
    return {"a": 1, "b": 2, "c": 3}


class TestKeysValues:
    """Test keys and values."""

    def test_keys_and_values(self, obj: dict[str, int]) -> None:
        assert keys(obj) == ["a", "b", "c"]
        assert values(obj) == [1, 2, 3]

    def test_non_mapping(self) -> None:
        assert keys(None) == []
        assert values([1, 2]) == []

    def test_any_mapping(self) -> None:
        assert keys(OrderedDict([("z", 1), ("y", 2)])) == ["z", "y"]


class TestPickOmit:
    """Test pick and omit."""

    def test_pick(self, obj: dict[str, int]) -> None:
        assert pick(obj, "a", "c") == {"a": 1, "c": 3}

    def test_pick_ignores_missing(self, obj: dict[str, int]) -> None:
        assert pick(obj, "a", "zzz") == {"a": 1}

    def test_pick_skips_unhashable_names(self, obj: dict[str, int]) -> None:
        assert pick(obj, ["a"]) == {}
        assert pick(obj, {"b": 1}, "c") == {"c": 3}

    def test_omit(self, obj: dict[str, int]) -> None:
        assert omit(obj, "b") == {"a": 1, "c": 3}

    def test_inputs_untouched(self, obj: dict[str, int]) -> None:
        omit(obj, "a")
        pick(obj, "b")
        assert obj == {"a": 1, "b": 2, "c": 3}

    def test_non_mapping(self) -> None:
        assert pick(None, "a") == {}
        assert omit("abc", "a") == {}


class TestDeepClone:
    """Test deep_clone."""

    def test_nested_structures_are_independent(self) -> None:
        original = {"a": 1, "b": {"c": 2, "d": [3, 4, {"e": 5}]}}
        clone = deep_clone(original)
        original["b"]["d"][2]["e"] = 99

        assert clone == {"a": 1, "b": {"c": 2, "d": [3, 4, {"e": 5}]}}
        assert clone["b"] is not original["b"]

    def test_dates_are_preserved(self) -> None:
        when = datetime(2023, 7, 1, 9, 30)
        clone = deep_clone({"when": when})
        assert clone["when"] == when

    def test_scalars_pass_through(self) -> None:
        assert deep_clone(5) == 5
        assert deep_clone(None) is None

    def test_tuples_and_sets(self) -> None:
        data = ([1, 2], {3})
        clone = deep_clone(data)
        assert clone == data
        assert clone[0] is not data[0]

    def test_dict_subclasses_keep_their_type(self) -> None:
        ordered = OrderedDict([("z", [1]), ("y", [2])])
        clone = deep_clone(ordered)
        assert type(clone) is OrderedDict
        assert list(clone) == ["z", "y"]
        assert clone["z"] is not ordered["z"]

        grouped: defaultdict[str, list[int]] = defaultdict(list, {"a": [1]})
        clone = deep_clone(grouped)
        assert type(clone) is defaultdict
        assert clone.default_factory is list
        clone["new"].append(2)
        assert "new" not in grouped
        assert clone["a"] is not grouped["a"]

    def test_other_objects_use_deepcopy(self) -> None:
        class Box:
            def __init__(self) -> None:
                self.items = [1]

        box = Box()
        clone = deep_clone(box)
        box.items.append(2)
        assert clone.items == [1]


class TestRun:
    """Test validated entry point."""

    def test_success(self, obj: dict[str, int]) -> None:
        assert run(KeysInput(obj=obj)).result == ["a", "b", "c"]
        assert run(ValuesInput(obj=obj)).result == [1, 2, 3]
        assert run(PickInput(obj=obj, names=("b",))).result == {"b": 2}
        assert run(OmitInput(obj=obj, names=("b",))).result == {"a": 1, "c": 3}
        assert run(DeepCloneInput(obj=obj)).result == obj

    def test_rejects_non_mapping(self) -> None:
        result = run(PickInput(obj=None, names=("a",)))
        assert result.success is False
        assert result.errors[0].code == "not_a_mapping"

    def test_unknown_input_type(self) -> None:
        with pytest.raises(ValueError):
            run({"a": 1})  # type: ignore[arg-type]
