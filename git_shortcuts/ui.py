"""Display utilities and UI helpers."""


def format_stats_table(records):
    """Format author statistics as an aligned table, in the order given."""
    headers = ("Author", "Added", "Deleted", "Total")
    rows = [
        (r.author, str(r.lines_added), str(r.lines_deleted), str(r.lines_total))
        for r in records
    ]
    name_width = max([len(headers[0])] + [len(row[0]) for row in rows])
    num_width = max([len(h) for h in headers[1:]] + [len(v) for row in rows for v in row[1:]])

    def _line(row):
        name, *numbers = row
        return "  ".join([name.ljust(name_width)] + [n.rjust(num_width) for n in numbers])

    lines = [_line(headers), "  ".join(["-" * name_width] + ["-" * num_width] * 3)]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines)
