# test_line_parser.py
import math

import pytest

from line_parser import mode_name, parse_line, parse_number, strip_timestamp, to_record_fields

HEADER = "Finding byte sum of file /home/data/web-Google.mtx ..."
RESULT = "{adv=1, block=4096, mode=2} -> {00012.5ms, sum=123456} readWithMmap"


def test_strip_timestamp():
    assert strip_timestamp("2023-05-01 12:30:45   hello") == "hello"
    assert strip_timestamp("hello 2023-05-01 12:30:45 x") == "hello 2023-05-01 12:30:45 x"


def test_header_line():
    assert parse_line(HEADER) == {"kind": "header", "graph": "web-Google"}
    assert parse_line("2023-05-01 12:30:45 " + HEADER)["graph"] == "web-Google"


def test_header_matches_anywhere_in_line():
    parsed = parse_line("[run 3] Finding byte sum of file ~/graphs/indochina-2004.mtx")
    assert parsed == {"kind": "header", "graph": "indochina-2004"}


def test_result_line():
    parsed = parse_line(RESULT)
    assert parsed["kind"] == "result"
    assert parsed["fields"] == {
        "adv": "1",
        "block": "4096",
        "mode": "2",
        "time": "00012.5",
        "sum": "123456",
        "technique": "readWithMmap",
    }


def test_technique_keeps_spaces():
    parsed = parse_line("{adv=0, block=1, mode=0} -> {1ms, sum=2} read with  madvise")
    assert parsed["fields"]["technique"] == "read with  madvise"


@pytest.mark.parametrize("line", ["", "OMP_NUM_THREADS=64", "{n=12} readNumbers", "Finding byte sum of file x.txt"])
def test_inert_lines(line):
    assert parse_line(line) is None


def test_header_takes_precedence():
    line = HEADER + " " + RESULT
    assert parse_line(line)["kind"] == "header"


def test_parse_number_is_lenient():
    assert parse_number("12.5") == 12.5
    assert parse_number("  3e2") == 300.0
    assert parse_number("7abc") == 7.0
    assert parse_number("-Infinity") == -math.inf
    assert math.isnan(parse_number("abc"))
    assert math.isnan(parse_number(""))


def test_mode_name():
    assert [mode_name(i) for i in (0.0, 1.0, 2.0)] == ["default", "madvice", "mmap"]
    for index in (3.0, -1.0, 1.5, math.nan, math.inf):
        assert mode_name(index) is None


def test_to_record_fields():
    fields = parse_line(RESULT)["fields"]
    assert to_record_fields(fields) == {
        "early_madvice": True,
        "block_size": 4096.0,
        "mode": "mmap",
        "time": 12.5,
        "sum": 123456.0,
        "technique": "readWithMmap",
    }


def test_malformed_numbers_become_nan():
    fields = parse_line("{adv=x, block=?, mode=q} -> {fast ms, sum=n/a} t")["fields"]
    decoded = to_record_fields(fields)
    assert decoded["early_madvice"] is False
    assert math.isnan(decoded["block_size"])
    assert decoded["mode"] is None
    assert math.isnan(decoded["sum"])
