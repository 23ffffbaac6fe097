from hypothesis import given
from hypothesis import strategies as st

from perfkit.hashing import Person


def test_str_format():
    assert str(Person("Sepp", "Meier", 30)) == "Person Sepp Meier [Age: 30]"


def test_phone_book_lookup():
    phone_book = {Person("Sepp", "Meier", 30): 123456}
    assert phone_book[Person("Sepp", "Meier", 30)] == 123456


def test_job_lookup_and_missing_key():
    jobs = {Person("Sepp", "Meier", 30): "Entwickler"}
    assert jobs.get(Person("Sepp", "Meier", 30)) == "Entwickler"
    assert Person("Sepp", "Meier", 31) not in jobs


def test_equality_compares_all_fields():
    assert Person("Sepp", "Meier", 30) == Person("Sepp", "Meier", 30)
    assert not Person("Sepp", "Meier", 30) == Person("Meier", "Sepp", 30)


@given(st.text(), st.text(), st.integers(min_value=0, max_value=200))
def test_equal_people_hash_equally(first, last, age):
    assert hash(Person(first, last, age)) == hash(Person(first, last, age))
    assert len({Person(first, last, age), Person(first, last, age)}) == 1