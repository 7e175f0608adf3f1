import pytest

from dna4bit.genome import Location, LocationError


def test_parse_range():
    loc = Location.parse("chr1:100-200")
    assert (loc.chromosome, loc.start, loc.end) == ("chr1", 100, 200)
    assert loc.length == 101
    assert loc.mid == 150


def test_parse_reversed_range_is_normalised():
    loc = Location.parse("chr1:200-100")
    assert (loc.start, loc.end) == (100, 200)


def test_parse_single_position():
    loc = Location.parse("chr1:50")
    assert (loc.start, loc.end) == (50, 50)
    assert loc.length == 1


def test_parse_thousands_separators_and_whitespace():
    loc = Location.parse("  chrX:1,000-2,000 ")
    assert loc == Location("chrX", 1000, 2000)


def test_parse_zero_clamps_to_one():
    assert Location.parse("chr1:0-10") == Location("chr1", 1, 10)
    assert Location.parse("chr1:0") == Location("chr1", 1, 1)


@pytest.mark.parametrize(
    "text",
    [
        "badtoken",
        "chr1",
        "1:100-200",
        "chr:100-200",
        "chr1:",
        "chr1:100000-100t00",
        "chr1:-5",
        "chr1:+5-10",
        "chr1:1-2-3",
        "chr1:100:200",
        "chr1/../x:1-2",
        "",
    ],
)
def test_parse_rejects(text):
    with pytest.raises(LocationError):
        Location.parse(text)


def test_new_orders_and_clamps():
    assert Location.new("chr2", 30, 10) == Location("chr2", 10, 30)
    assert Location.new("chr2", 0, 0) == Location("chr2", 1, 1)


@pytest.mark.parametrize("chrom", ["1", "chr", "scaffold_1", "chr1/x"])
def test_new_rejects_chromosome_without_marker(chrom):
    with pytest.raises(LocationError):
        Location.new(chrom, 1, 10)


@pytest.mark.parametrize("start,end", [(-1, 10), (1, "10"), (True, 3)])
def test_new_rejects_bad_positions(start, end):
    with pytest.raises(LocationError):
        Location.new("chr1", start, end)


def test_str_round_trips():
    loc = Location.parse("chr7:5-3")
    assert str(loc) == "chr7:3-5"
    assert Location.parse(str(loc)) == loc


def test_immutable():
    loc = Location.parse("chr1:1-2")
    with pytest.raises(AttributeError):
        loc.start = 5


@pytest.mark.parametrize(
    "chrom,start,end",
    [("chr1", 0, 4), ("chr1", 5, 4), ("../x", 1, 2), ("chr1/../x", 1, 2), ("chr1", 1.0, 2)],
)
def test_direct_construction_is_validated(chrom, start, end):
    with pytest.raises(LocationError):
        Location(chrom, start, end)


@pytest.mark.parametrize("text", ["chr1:1,0,0", "chr1:1000,000", "chr1:,100", "chr1: 100 - 200", "chr1 :100"])
def test_parse_rejects_loose_separators_and_inner_whitespace(text):
    with pytest.raises(LocationError):
        Location.parse(text)


def test_parse_comma_grouped_millions():
    assert Location.parse("chr2:1,234,567") == Location("chr2", 1234567, 1234567)
