import csv
import io
from collections.abc import Iterable, Mapping
from typing import Any

CSV_COLUMNS = (
    "id",
    "name",
    "attending",
    "guestCount",
    "email",
    "phone",
    "meal",
    "allergies",
    "message",
    "createdAt",
)


def rsvps_to_csv(records: Iterable[Mapping[str, Any]]) -> str:
    """One header line plus one line per record; every field quoted, quotes doubled."""
    output = io.StringIO()
    output.write(",".join(CSV_COLUMNS) + "\n")
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for record in records:
        row = [record.get(column) for column in CSV_COLUMNS]
        writer.writerow(["" if value is None else value for value in row])
    return output.getvalue().rstrip("\n")
