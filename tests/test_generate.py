import random
import string

import pytest

from weatherstats.generate import city_name, main, make_cities, make_rows
from weatherstats.records import parse_line

ALNUM = set(string.ascii_letters + string.digits)


@pytest.mark.parametrize("seed", range(20))
def test_city_name_shape(seed):
    name = city_name(random.Random(seed))
    assert 1 <= len(name) <= 32
    assert set(name) <= ALNUM


def test_city_name_reproducible():
    names = [city_name(random.Random(seed)) for seed in range(10)]
    repeated = [city_name(random.Random(seed)) for seed in range(10)]
    assert names == repeated
    assert len(set(names)) > 1
    assert all(1 <= len(name) <= 32 and set(name) <= ALNUM for name in names)


def test_make_cities_distinct():
    cities = make_cities(50, random.Random(1))
    assert len(cities) == 50
    assert len(set(cities)) == 50
    assert all(";" not in city for city in cities)


def test_make_cities_zero():
    assert make_cities(0, random.Random(1)) == []


def test_make_rows_shape():
    rng = random.Random(2)
    cities = make_cities(5, rng)
    rows = list(make_rows(cities, 200, rng))
    assert len(rows) == 200
    for row in rows:
        city, value = row.split(";")
        assert city in cities
        number = float(value)
        assert -99.9 <= number <= 99.9
        assert len(value.split(".")[1]) == 1


def test_make_rows_round_trip_through_parser():
    rng = random.Random(3)
    cities = make_cities(4, rng)
    for row in make_rows(cities, 100, rng):
        key, value = parse_line(row)
        city, text = row.split(";")
        assert key == city.encode()
        assert str(value) == text


def test_make_rows_without_cities():
    with pytest.raises(ValueError):
        list(make_rows([], 1, random.Random(0)))


def test_make_rows_zero_rows_without_cities():
    assert list(make_rows([], 0, random.Random(0))) == []


def test_main_output(capsys):
    assert main(["3", "5"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert len({line.split(";")[0] for line in lines}) <= 3


def test_main_rejects_negative():
    with pytest.raises(SystemExit):
        main(["-1", "5"])