import numpy as np
import pytest

from ropex import config as rx_config
from ropex.core.fragments import (
    FragmentKind,
    FragmentRegistry,
    available_fragment_kinds,
    fragment_kind_for,
    get_fragment_kind,
)


def test_builtin_kinds_registered():
    assert available_fragment_kinds() == ("bytes", "list", "ndarray", "str", "tuple")


@pytest.mark.parametrize(
    "value, name",
    [
        ("text", "str"),
        (b"raw", "bytes"),
        (bytearray(b"raw"), "bytes"),
        ([1, 2], "list"),
        ((1, 2), "tuple"),
        (np.arange(3), "ndarray"),
    ],
)
def test_fragment_kind_for_dispatches_on_type(value, name):
    assert fragment_kind_for(value).name == name


def test_fragment_kind_for_rejects_unsupported_values():
    with pytest.raises(TypeError):
        fragment_kind_for(42)
    with pytest.raises(TypeError):
        fragment_kind_for({"a": 1})


def test_join_and_empty_per_kind():
    assert get_fragment_kind("str").join(["ab", "", "c"]) == "abc"
    assert get_fragment_kind("bytes").join([b"a", b"bc"]) == b"abc"
    assert get_fragment_kind("list").join([[1], [2, 3]]) == [1, 2, 3]
    assert get_fragment_kind("tuple").join([(1,), (2, 3)]) == (1, 2, 3)
    assert get_fragment_kind("str").empty() == ""
    assert get_fragment_kind("tuple").empty() == ()

    ndarray = get_fragment_kind("ndarray")
    joined = ndarray.join([np.array([1, 2]), np.array([3])])
    assert joined.tolist() == [1, 2, 3]
    assert ndarray.empty().shape == (0,)


def test_coerce_copies_mutable_inputs():
    source = [1, 2, 3]
    stored = get_fragment_kind("list").coerce(source)
    source.append(4)
    assert stored == [1, 2, 3]

    array = np.arange(3)
    stored_array = get_fragment_kind("ndarray").coerce(array)
    array[0] = 99
    assert stored_array.tolist() == [0, 1, 2]


def test_ndarray_kind_rejects_multidimensional_arrays():
    with pytest.raises(ValueError):
        get_fragment_kind("ndarray").coerce(np.zeros((2, 2)))


def test_ndarray_equality_is_elementwise():
    ndarray = get_fragment_kind("ndarray")

    assert ndarray.equal(np.array([1, 2]), np.array([1, 2]))
    assert not ndarray.equal(np.array([1, 2]), np.array([1, 3]))
    assert not ndarray.equal(np.array([1, 2]), np.array([1, 2, 3]))


def test_registry_rejects_duplicates_and_unknown_names():
    registry = FragmentRegistry()
    kind = FragmentKind(
        name="Str",
        types=(str,),
        coerce=str,
        join="".join,
        equal=lambda a, b: a == b,
        copy=lambda value: value,
    )
    registry.register(kind)

    with pytest.raises(ValueError):
        registry.register(kind)
    registry.register(kind, overwrite=True)
    assert registry.get("STR") is kind
    assert registry.names() == ("str",)
    with pytest.raises(KeyError):
        registry.get("missing")


def test_default_kind_follows_runtime_config(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ROPEX_DEFAULT_KIND", "list")
    rx_config.reset_runtime_config_cache()

    assert get_fragment_kind().name == "list"

    monkeypatch.delenv("ROPEX_DEFAULT_KIND", raising=False)
    rx_config.reset_runtime_config_cache()
    assert get_fragment_kind().name == "str"
