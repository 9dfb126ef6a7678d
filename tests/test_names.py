import pytest

from jungle_engine.names import (
    NAME_SIZE,
    Name,
    NamePool,
    hash_string,
    hash_string_lower,
)


def test_hash_of_empty_string_is_seed():
    assert hash_string("") == 5381
    assert hash_string_lower("") == 5381


def test_hash_lower_matches_hash_of_lowered_text():
    assert hash_string_lower("HeLLo_World") == hash_string("hello_world")


def test_hash_is_case_sensitive():
    assert hash_string("Abc") != hash_string("abc")


def test_hash_stops_at_nul():
    assert hash_string("abc\0def") == hash_string("abc")


def test_hash_stays_in_uint32_range():
    value = hash_string("x" * 500)
    assert 0 <= value < 2**32


def test_pool_find_or_store_is_idempotent():
    pool = NamePool()
    first = pool.find_or_store("Actor")
    second = pool.find_or_store("Actor")
    assert first == second == hash_string("Actor")
    assert len(pool) == 1


def test_pool_resolve_returns_entry():
    pool = NamePool()
    display = pool.find_or_store("Actor")
    entry = pool.resolve(display)
    assert entry.name == "Actor"
    assert entry.comparison_id == hash_string_lower("Actor")


def test_pool_resolve_unknown_raises():
    with pytest.raises(KeyError):
        NamePool().resolve(12345)


def test_names_compare_ignoring_case():
    pool = NamePool()
    assert Name("Cube", pool=pool) == Name("CUBE", pool=pool)
    assert Name("Cube", pool=pool) != Name("Sphere", pool=pool)


def test_name_keeps_display_text():
    pool = NamePool()
    upper = Name("CUBE", pool=pool)
    lower = Name("cube", pool=pool)
    assert str(upper) == "CUBE"
    assert str(lower) == "cube"
    assert upper.display_index != lower.display_index
    assert upper.comparison_index == lower.comparison_index


def test_default_name_is_none():
    name = Name()
    assert str(name) == "None"
    assert name.is_none()
    assert name.display_index == 0


def test_too_long_name_becomes_none():
    name = Name("a" * NAME_SIZE, pool=NamePool())
    assert str(name) == "None"
    assert name == Name()


def test_longest_allowed_name_is_stored():
    text = "b" * (NAME_SIZE - 1)
    assert str(Name(text, pool=NamePool())) == text


def test_equal_names_hash_equal():
    pool = NamePool()
    names = {Name("Light", pool=pool), Name("light", pool=pool)}
    assert len(names) == 1


def test_name_is_not_equal_to_plain_string():
    assert (Name("Cube", pool=NamePool()) == "Cube") is False


def test_default_pool_is_shared():
    assert NamePool.get() is NamePool.get()
    assert str(Name("SharedPoolName")) == "SharedPoolName"