import csv
import io

from src.rsvps.export import CSV_COLUMNS, rsvps_to_csv


def test_header_plus_one_line_per_record():
    records = [
        {"id": "1", "name": "Jane Doe", "guestCount": 2},
        {"id": "2", "name": "John Roe", "guestCount": 1},
        {"id": "3", "name": "Ann Poe", "guestCount": 4},
    ]

    lines = rsvps_to_csv(records).split("\n")

    assert len(lines) == 4
    assert lines[0] == ",".join(CSV_COLUMNS)
    assert lines[1].startswith('"1","Jane Doe","","2"')


def test_embedded_quotes_are_doubled():
    records = [{"id": "1", "name": 'Jane "JD" Doe', "message": 'She said "hi", twice'}]

    line = rsvps_to_csv(records).split("\n")[1]

    assert '"Jane ""JD"" Doe"' in line
    assert '"She said ""hi"", twice"' in line


def test_every_field_is_quoted_and_missing_fields_are_empty():
    line = rsvps_to_csv([{"id": "9", "name": "Solo"}]).split("\n")[1]

    assert line == ",".join(['"9"', '"Solo"'] + ['""'] * (len(CSV_COLUMNS) - 2))


def test_output_parses_back_with_csv_reader():
    records = [{"id": "1", "name": 'A "quoted", name', "guestCount": 3, "createdAt": "2025-01-01T00:00:00.000Z"}]

    rows = list(csv.DictReader(io.StringIO(rsvps_to_csv(records))))

    assert rows[0]["name"] == 'A "quoted", name'
    assert rows[0]["guestCount"] == "3"


def test_empty_list_is_header_only():
    assert rsvps_to_csv([]) == ",".join(CSV_COLUMNS)
