from hypothesis import given
from hypothesis import strategies as st

from perfkit.prehashed import (
    Bitmap,
    BitmapCache,
    PrehashedString,
    hash_function,
    hash_function as _hf,
    load_bitmap_from_filesystem,
)


def test_hash_function_abc():
    assert hash_function("abc") == 294


def test_hash_function_empty():
    assert hash_function("") == 0


@given(st.text(), st.text())
def test_hash_function_is_additive(a, b):
    assert hash_function(a + b) == hash_function(a) + hash_function(b)


@given(st.text())
def test_hash_is_order_independent(text):
    assert hash_function(text[::-1]) == _hf(text)


def test_prehashed_string_size_and_hash():
    s = PrehashedString("this should be a long string")
    assert s.size() == len("this should be a long string")
    assert s.get_hash() == hash_function("this should be a long string")
    assert str(s) == "this should be a long string"


def test_prehashed_string_builtin_hash_is_prehash():
    s = PrehashedString("abc")
    assert hash(s) == s.get_hash()


def test_prehashed_string_equality():
    assert PrehashedString("abc") == PrehashedString("abc")
    assert not PrehashedString("abc") == PrehashedString("cba")
    assert not PrehashedString("abc") == PrehashedString("abcd")


def test_anagrams_collide_but_differ():
    a, b = PrehashedString("abc"), PrehashedString("cab")
    assert hash(a) == hash(b)
    assert a != b
    assert len({a, b}) == 2


def test_load_bitmap_records_path():
    assert load_bitmap_from_filesystem("my_bitmap.png") == Bitmap("my_bitmap.png")


def test_bitmap_cache_loads_once():
    calls = []

    def loader(path):
        calls.append(path)
        return Bitmap(path)

    cache = BitmapCache(loader)
    first = cache.get("my_bitmap.png")
    second = cache.get(PrehashedString("my_bitmap.png"))
    assert first is second
    assert calls == ["my_bitmap.png"]
    assert len(cache) == 1


def test_bitmap_cache_distinct_paths():
    cache = BitmapCache()
    one = cache.get("a.png")
    two = cache.get("b.png")
    assert one.path == "a.png"
    assert two.path == "b.png"
    assert len(cache) == 2