import fnmatch
import json

import yaml
from flask import Response, request
from flask import current_app as app

# Formats accepted by the format parameter, and the mimetypes they are served as
FORMATS = {
    "text": "text/plain",
    "txt": "text/plain",
    "json": "application/json",
    "yaml": "application/yaml",
}

MIMETYPE_FORMATS = {
    "text/plain": "text",
    "application/json": "json",
    "application/yaml": "yaml",
}


class Cell:

    def __init__(self, value, attributes=""):
        self.value = value
        self.attr = parse_attributes(attributes)

    def __repr__(self):
        return "Cell(%r)" % (self.value,)


class Table:
    """Tabular structure for cat actions, with ordered headers and ordered rows.

    Headers are added between start_headers() and end_headers(), and each row between
    start_row() and end_row(). A row must have exactly one cell per header.
    """

    def __init__(self):
        self.headers = []
        self.rows = []
        self._current_row = None
        self._in_headers = False

    def start_headers(self):
        self._in_headers = True
        self._current_row = []
        return self

    def end_headers(self):
        self.headers = self._current_row
        self._current_row = None
        self._in_headers = False
        return self

    def start_row(self):
        if self._in_headers:
            raise ValueError("Cannot start a row while headers are open.")
        if not self.headers:
            raise ValueError("Cannot start a row before adding headers.")
        self._current_row = []
        return self

    def end_row(self):
        if len(self._current_row) != len(self.headers):
            raise ValueError("Mismatch on number of cells %d in a row compared to header %d" %
                             (len(self._current_row), len(self.headers)))
        self.rows.append(self._current_row)
        self._current_row = None
        return self

    def add_cell(self, value, attributes=""):
        if self._current_row is None:
            raise ValueError("Cells can only be added to headers or rows.")
        self._current_row.append(Cell(value, attributes))
        return self

    def header_index(self):
        """Return a dict mapping header names and aliases to column indexes."""
        index = {}
        for i, header in enumerate(self.headers):
            index[header.value] = i
            for alias in header.attr.get("alias", "").split(","):
                if alias:
                    index[alias] = i
        return index


def parse_attributes(attributes):
    """Parse a header attribute string like "desc:test;alias:t,ts;text-align:right" into a dict."""
    attr = {}
    for part in attributes.split(";"):
        if not part:
            continue
        if ":" not in part:
            raise ValueError("Malformed cell attribute: '%s'" % part)
        key, value = part.split(":", 1)
        attr[key] = value
    return attr


def display_headers(table, args):
    """Return a list of (display name, column index) for the columns to show."""
    if args.get("h"):
        index = table.header_index()
        headers = []
        for pattern in args["h"].split(","):
            pattern = pattern.strip()
            if "*" in pattern:
                matching = [(n, i) for n, i in index.items() if fnmatch.fnmatchcase(n, pattern)]
                # A column may match several times through its aliases, only show it once
                for name, i in sorted(matching, key=lambda x: x[1]):
                    if i not in [c for _, c in headers]:
                        headers.append((table.headers[i].value, i))
            elif pattern in index:
                headers.append((pattern, index[pattern]))
        return headers

    return [(header.value, i) for i, header in enumerate(table.headers)
            if header.attr.get("default", "true").lower() != "false"]


def response_format(args):
    """Get the response format, from the format parameter or the Accept header."""
    fmt = args.get("format")
    if fmt:
        fmt = fmt.lower()
        if fmt not in FORMATS:
            raise ValueError("Unsupported format: %s" % args["format"])
        return "text" if fmt == "txt" else fmt

    if "Accept" in request.headers:
        mimetype = request.accept_mimetypes.best_match(list(MIMETYPE_FORMATS))
        if mimetype:
            return MIMETYPE_FORMATS[mimetype]
    return app.config.get("CAT_DEFAULT_FORMAT", "text")


def build_response(table, args):
    """Serialize a table into a Response in the format requested by the client."""
    fmt = response_format(args)
    headers = display_headers(table, args)

    if fmt == "text":
        # A bare "v" parameter also turns on the header line
        body = build_text(table, headers, verbose=args.get("v", "false").lower() in ("", "true"))
    else:
        rows = [{name: row[i].value for name, i in headers} for row in table.rows]
        if fmt == "json":
            body = json.dumps(rows, indent=2 if "pretty" in args else None)
        else:
            body = yaml.safe_dump(rows, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return Response(body, mimetype=FORMATS[fmt])


def build_text(table, headers, verbose=False):
    lines = []
    if verbose:
        lines.append([(name, table.headers[i]) for name, i in headers])
    for row in table.rows:
        lines.append([(row[i].value, table.headers[i]) for _, i in headers])

    widths = [0] * len(headers)
    for line in lines:
        for col, (value, _) in enumerate(line):
            widths[col] = max(widths[col], len(_text(value)))

    out = []
    for line in lines:
        cells = []
        for col, (value, header) in enumerate(line):
            value = _text(value)
            last = col == len(line) - 1
            if header.attr.get("text-align") == "right":
                value = value.rjust(widths[col])
            elif not last:
                value = value.ljust(widths[col])
            cells.append(value)
        out.append(" ".join(cells) + "\n")
    return "".join(out)


def build_help_response(table):
    """List the available headers with aliases and descriptions, as plain text."""
    entries = [(h.value, h.attr.get("alias", ""), h.attr.get("desc", "")) for h in table.headers]
    name_width = max((len(e[0]) for e in entries), default=0)
    alias_width = max((len(e[1]) for e in entries), default=0)
    body = "".join("%s | %s | %s\n" % (name.ljust(name_width), alias.ljust(alias_width), desc)
                   for name, alias, desc in entries)
    return Response(body, mimetype="text/plain")


def _text(value):
    return "" if value is None else str(value)
