import pytest

from msconv import units


def test_multipliers():
    assert units.UNIT_MS["second"] == 1000
    assert units.UNIT_MS["hour"] == 3600000
    assert units.UNIT_MS["week"] == 604800000
    assert units.YEAR == 31557600000
    assert units.UNIT_MS["year"] == 365.25 * units.DAY


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        units.UNIT_MS["second"] = 1
    with pytest.raises(TypeError):
        units.UNIT_ALIASES["sec"] = "minute"


def test_each_alias_belongs_to_one_unit():
    spellings = [alias for unit in units.UNIT_MS for alias in units.aliases_for(unit)]
    assert len(spellings) == len(set(spellings)) == len(units.UNIT_ALIASES)
    assert all(alias == alias.lower() for alias in spellings)
    for unit in units.UNIT_MS:
        assert unit in units.aliases_for(unit)
        assert units.UNIT_ALIASES[unit] == unit


def test_output_units_skip_weeks_and_years():
    names = [name for name, _, _ in units.OUTPUT_UNITS]
    assert names == ["day", "hour", "minute", "second"]
    sizes = [size for _, size, _ in units.OUTPUT_UNITS]
    assert sizes == sorted(sizes, reverse=True)


def test_aliases_for_unknown_unit():
    with pytest.raises(KeyError):
        units.aliases_for("fortnight")
