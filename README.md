# officerev

A small HTTP service, built on Flask, that reads office reservations from a
CSV file. For any month it reports the expected revenue and the total
capacity of the offices that are not reserved.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input data

The service reads a CSV file. By default this is `input.txt` in the working
directory. The first line is a header. Each following line holds one
reservation:

```
Capacity, Monthly Price, Start Day, End Day
1, 600, 2014-07-01,
2, 1200, 2014-04-01, 2014-10-31
```

- capacity: whole number of seats
- monthly rate: price per full month
- start date: `YYYY-MM-DD`
- end date: `YYYY-MM-DD`, or empty for an open-ended reservation

Spaces after commas are ignored. Blank lines are ignored.

Every row must have as many fields as the header. If any row does not, or
the file is not valid CSV, the whole file is rejected.

A row is skipped, with a logged warning, if it has fewer than four columns
or if its end date is present but unreadable. A capacity or rate that cannot
be parsed counts as zero. An unreadable start date counts as the earliest
possible date.

## Running the server

```
officerev
```

Options:

- `--host`: address to bind to. The default is `0.0.0.0`.
- `--port`: port to listen on. The default is `8080`.
- `--input`: path of the reservation CSV file. The default is `input.txt`.

### `POST /calculate`

Send a JSON body that gives the month in `YYYY-MM` form:

```
{"month": "2014-05"}
```

The reply is plain text. With the sample file above it reads:

```
2014-05: expected revenue: $1200.00, expected total capacity of the unreserved offices: 1
```

Revenue is prorated by day. A reservation that overlaps the month
contributes its monthly rate divided by the number of days in the month,
multiplied by the number of days it overlaps. An office with no overlap in
the month adds its capacity to the unreserved total.

Errors:

- `400`, with a JSON body `{"error": "..."}`, when the body is not JSON, when
  the month is missing or not a string, or when the month is not a valid
  `YYYY-MM` value.
- `500`, with a JSON error body, when the reservation file cannot be opened
  or read.

### `GET /manual`

Returns the raw contents of the reservation file as `text/plain`. This route
needs the header `Authorization: Bearer token`. Without it, the reply is
`401` with a JSON error that explains what to send. Every response from this
route also carries an `X-Info` header.

### `GET /swagger/doc.json`

Returns the Swagger 2.0 description of the API as JSON.

The server does not serve an interactive Swagger UI page. It serves only
this JSON document.

## Using it as a library

```python
from officerev.app import create_app, summarize_month
from officerev.reservations import read_reservations

reservations = read_reservations("input.txt")
summary = summarize_month("2014-05", reservations)
print(summary.format())
print(summary.revenue, summary.unreserved_capacity)

app = create_app("input.txt")   # a Flask application
```

### `officerev.app`

- `parse_month` turns a `YYYY-MM` string into the first day of that month as
  a `date`. It raises `ValueError` for anything else.
- `summarize_month` returns a `MonthSummary`, which has the fields `month`,
  `revenue` and `unreserved_capacity`.
- `create_app` builds the Flask application.
- `main` is the command-line entry point.

### `officerev.reservations`

- `parse_reservation` turns one CSV row into a reservation.
- `overlap_days` gives the number of days a reservation covers between two
  dates.
- `days_in_month` gives the number of days in a month.
- `read_reservations` reads a reservation file.
- `ReservationError` is the error these raise, and is a subclass of
  `ValueError`.

### `officerev.models`

- `Reservation` is a frozen dataclass with the fields `capacity`,
  `monthly_rate`, `start_date` and `end_date`.
- `ErrorResponse` is the error payload, and has `to_dict()`.

### `officerev.auth`

- `is_authorized` checks an `Authorization` header value.
- `require_token` is the Flask view decorator that guards `/manual`.

### `officerev.manual`

- `render_manual` renders reservations as an HTML table with usage notes for
  the API. No route uses it; `/manual` returns the raw file instead.

### `officerev.spec`

- `swagger_spec(host, base_path)` returns the Swagger 2.0 document as a dict.