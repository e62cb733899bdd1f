from datetime import date

from officerev.manual import render_manual
from officerev.models import Reservation


def test_render_manual_row_values():
    html = render_manual([Reservation(5, 1234.5, date(2014, 5, 1), date(2014, 5, 31))])
    assert "<td>1234.50</td>" in html
    assert "<td>5</td>" in html
    assert f"<td>{date(2014, 5, 1).isoformat()}</td>" in html
    assert f"<td>{date(2014, 5, 31).isoformat()}</td>" in html


def test_render_manual_open_ended_has_empty_end_cell():
    html = render_manual([Reservation(5, 10.0, date(2014, 5, 1))])
    assert "<td></td>" in html


def test_render_manual_one_row_per_reservation():
    reservations = [Reservation(i, 10.0, date(2014, 5, i)) for i in range(1, 4)]
    html = render_manual(reservations)
    assert html.count("<tr>") == len(reservations) + 1


def test_render_manual_empty_has_header_only():
    html = render_manual([])
    assert html.count("<tr>") == 1
    assert html.startswith("<html>")
    assert html.endswith("</html>")
    assert "/calculate" in html