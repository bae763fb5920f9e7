"""Parser for the comma separated tables of a GTFS feed.

Stop and route names contain commas and quotes, so fields may be quoted;
a doubled quote inside a quoted field is a literal quote.
"""

import re

_LINE_BREAK = re.compile(r"\r?\n")


def split_line(line: str) -> list[str]:
    """Split one line into fields, honouring quotes."""
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        ch = line[i]
        if in_quotes:
            if ch == '"':
                if line[i + 1 : i + 2] == '"':
                    current.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                current.append(ch)
        elif ch == ",":
            fields.append("".join(current))
            current = []
        elif ch == '"':
            in_quotes = True
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current))
    return fields


def parse_table(text: str) -> list[dict[str, str]]:
    """Parse a table into rows keyed by the header line.

    Short rows are padded with empty strings and extra columns are dropped.
    Blank lines are skipped.
    """
    lines = [line for line in _LINE_BREAK.split(text.lstrip("\ufeff")) if line]
    if not lines:
        return []

    header = [name.strip() for name in split_line(lines[0])]
    rows: list[dict[str, str]] = []
    for line in lines[1:]:
        fields = split_line(line)
        rows.append(
            {name: fields[i] if i < len(fields) else "" for i, name in enumerate(header)}
        )
    return rows
