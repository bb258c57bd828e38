import pytest

from csi281.temperature import (
    CityTemperatureData,
    CityYear,
    clean,
    parse_line,
    read_city,
)

CSV_TEXT = (
    '"STATION","NAME","DATE","DX32","DX90","TAVG","TMAX","TMIN"\n'
    '"ST0001","CITY A, XX US","1968","30","20","50.0","60.5","40.1"\n'
    '"ST0001","CITY A, XX US","1969","29","25","52.0","61.5","41.1"\n'
    '"ST0001","CITY A, XX US","1970","31","15","54.0","62.6","46.9"\n'
    'ST0002,CITY B,1968,87,3,44.6,56.9,36.0\n'
    'ST0002,CITY B,1969,90,5,45.0,57.0,35.0\n'
)


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "tempdata.csv"
    path.write_text(CSV_TEXT, encoding="utf-8")
    return path


def test_read_first_city(data_file):
    city = read_city("A", data_file, 1, 3)
    assert len(city) == 3
    assert city.name == "A"
    assert city.first_year == 1968
    assert city[1969].num_days_below_32 == 29
    assert city[1970].average_max == pytest.approx(62.6)
    assert city[1970].average_min == pytest.approx(46.9)


def test_totals_and_average(data_file):
    city = read_city("A", data_file, 1, 3)
    assert city.total_days_below_32() == 30 + 29 + 31
    assert city.total_days_above_90() == 20 + 25 + 15
    assert city.all_time_average() == pytest.approx(52.0)


def test_read_second_city(data_file):
    city = read_city("B", data_file, 4, 5)
    assert len(city) == 2
    assert city[1968] == CityYear(1968, 87, 3, 44.6, 56.9, 36.0)
    assert city.total_days_below_32() == 87 + 90


def test_missing_year_gives_empty_record(data_file):
    city = read_city("A", data_file, 1, 3)
    assert city[2050] == CityYear()
    assert city[2050].year == 0


def test_read_past_end_raises(data_file):
    with pytest.raises(ValueError):
        read_city("B", data_file, 4, 9)


def test_reversed_range_raises(data_file):
    with pytest.raises(ValueError):
        read_city("A", data_file, 3, 1)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_city("A", tmp_path / "absent.csv", 1, 2)


def test_clean_strips_quotes_and_whitespace():
    assert clean('"12" \t\n') == "12"
    assert clean("'4.5'") == "4.5"


def test_parse_line_reads_fields():
    record = parse_line("ST9,SOMEWHERE,2000,10,11,55.5,65.5,45.5")
    assert record == CityYear(2000, 10, 11, 55.5, 65.5, 45.5)


def test_parse_line_rejects_text_in_number_cell():
    with pytest.raises(ValueError):
        parse_line("ST9,SOMEWHERE,year,10,11,55.5,65.5,45.5")


def test_parse_line_rejects_short_line():
    with pytest.raises(ValueError):
        parse_line("ST9,SOMEWHERE,2000")


def test_empty_city_average_raises():
    city = CityTemperatureData("Nowhere", [])
    assert len(city) == 0
    assert city.total_days_above_90() == 0
    with pytest.raises(ValueError):
        city.all_time_average()
    with pytest.raises(ValueError):
        _ = city.first_year


def test_iteration_keeps_order():
    records = [CityYear(year=y) for y in (2001, 2000, 2002)]
    city = CityTemperatureData("X", records)
    assert [r.year for r in city] == [2001, 2000, 2002]
    assert city.first_year == 2001