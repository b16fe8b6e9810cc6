"""
BDD Step Definitions for the booking flow

Steps drive the REST API through the shared TestClient fixture and keep the last
response and created ids in the `context` fixture.
"""

import json
from typing import Any

from fastapi.testclient import TestClient
import httpx
import pytest
from pytest_bdd import given, parsers, then, when
from pytest_bdd.model import Step

from src.platform.constant.route_constant import (
    BOOKING_BASE,
    BOOKING_GET,
    MOVIE_BASE,
    MOVIE_SHOWS,
    MOVIE_SHOW_SEATS,
)


def _parse_seats(raw: str) -> list[int]:
    return [int(part) for part in raw.split(',') if part.strip()]


def _table_row(step: Step) -> dict[str, str]:
    rows = step.data_table.rows
    headers = [cell.value for cell in rows[0].cells]
    values = [cell.value for cell in rows[1].cells]
    return dict(zip(headers, values, strict=True))


def _book(client: TestClient, context: dict[str, Any], payload: dict[str, Any]) -> httpx.Response:
    response = client.post(
        BOOKING_BASE,
        json={'movie_id': context['movie_id'], 'show_id': context['show_id'], **payload},
    )
    context['response'] = response
    if response.status_code == 201:
        context['booking_id'] = response.json()['id']
    return response


@pytest.fixture
def context() -> dict[str, Any]:
    return {}


# ============ Given ============


@given(parsers.parse('a movie "{title}" with a show at "{show_time}" of {total_seats:d} seats'))
def given_movie_with_show(
    title: str, show_time: str, total_seats: int, client: TestClient, context: dict[str, Any]
) -> None:
    movie = client.post(MOVIE_BASE, json={'title': title, 'genre': 'Drama', 'duration': 90})
    assert movie.status_code == 201, movie.text
    context['movie_id'] = movie.json()['id']

    show = client.post(
        MOVIE_SHOWS.format(movie_id=context['movie_id']),
        json={'show_time': show_time, 'total_seats': total_seats},
    )
    assert show.status_code == 201, show.text
    context['show_id'] = show.json()['id']


@given(parsers.parse('"{customer_name}" has booked seats "{seats}"'))
def given_existing_booking(
    customer_name: str, seats: str, client: TestClient, context: dict[str, Any]
) -> None:
    response = _book(
        client, context, {'customer_name': customer_name, 'seat_numbers': _parse_seats(seats)}
    )
    assert response.status_code == 201, response.text


# ============ When ============


@when(parsers.parse('"{customer_name}" books seats "{seats}"'))
def when_customer_books(
    customer_name: str, seats: str, client: TestClient, context: dict[str, Any]
) -> None:
    _book(client, context, {'customer_name': customer_name, 'seat_numbers': _parse_seats(seats)})


@when('a customer books with')
def when_customer_books_with_table(
    step: Step, client: TestClient, context: dict[str, Any]
) -> None:
    row = _table_row(step)
    _book(
        client,
        context,
        {
            'customer_name': row['customer_name'],
            'seat_numbers': json.loads(row['seat_numbers']),
            'coupon_code': row.get('coupon_code') or None,
        },
    )


@when('the last booking is cancelled')
def when_last_booking_cancelled(client: TestClient, context: dict[str, Any]) -> None:
    context['response'] = client.delete(BOOKING_GET.format(booking_id=context['booking_id']))


# ============ Then ============


@then(parsers.parse('the response status code should be {status_code:d}'))
def then_response_status_code(status_code: int, context: dict[str, Any]) -> None:
    response: httpx.Response = context['response']
    assert response.status_code == status_code, (
        f'Expected {status_code}, got {response.status_code}: {response.text}'
    )


@then(parsers.parse('the error message should contain "{text}"'))
def then_error_message_contains(text: str, context: dict[str, Any]) -> None:
    assert text in context['response'].json()['detail']


@then(parsers.parse('the booking total should be {total:f}'))
def then_booking_total(total: float, context: dict[str, Any]) -> None:
    assert context['response'].json()['total_price'] == total


@then(parsers.parse('the available seats should be "{seats}"'))
def then_available_seats(seats: str, client: TestClient, context: dict[str, Any]) -> None:
    response = client.get(
        MOVIE_SHOW_SEATS.format(movie_id=context['movie_id'], show_id=context['show_id'])
    )
    assert response.status_code == 200, response.text
    assert response.json()['available_seats'] == _parse_seats(seats)


@then('no seats should be available')
def then_no_seats_available(client: TestClient, context: dict[str, Any]) -> None:
    response = client.get(
        MOVIE_SHOW_SEATS.format(movie_id=context['movie_id'], show_id=context['show_id'])
    )
    assert response.json()['available_seats'] == []
