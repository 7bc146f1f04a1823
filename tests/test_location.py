import dataclasses

import pytest

from dragontiger.location import NO_LOCATION, Location


def test_no_location_fields():
    built = Location("<none>", 0, 0)
    assert built == NO_LOCATION
    assert built.filename == "<none>"
    assert built.line == 0
    assert built.column == 0


def test_no_location_str():
    built = Location("<none>", 0, 0)
    assert str(built) == "<none>:0.0"
    assert str(built) == str(NO_LOCATION)


def test_end_defaults_to_begin():
    loc = Location("f.tig", 3, 5)
    assert loc.end_line == 3
    assert loc.end_column == 5


def test_point_location_str():
    assert str(Location("f.tig", 3, 5)) == "f.tig:3.5"


def test_same_line_range_str():
    assert str(Location("f", 1, 2, 1, 6)) == "f:1.2-5"


def test_without_filename_has_no_prefix():
    with_name = str(Location("name", 4, 2))
    without = str(Location(None, 4, 2))
    assert with_name == "name:" + without


def test_multi_line_range_mentions_end_line():
    text = str(Location("g", 1, 1, 7, 3))
    assert text.startswith("g:1.1-7.")


def test_locations_are_frozen_and_comparable():
    loc = Location("a", 1, 1)
    assert loc == Location("a", 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        loc.line = 2