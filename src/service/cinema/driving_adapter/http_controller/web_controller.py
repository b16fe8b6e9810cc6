"""Server-rendered pages (Jinja2) on top of the same use cases as the REST API"""

from typing import Any, Optional
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from src.platform.constant.path import TEMPLATE_DIR
from src.platform.constant.route_constant import (
    PAGE_BOOKING,
    PAGE_CANCEL_BOOKING,
    PAGE_HOME,
    PAGE_MOVIES,
    PAGE_MY_BOOKINGS,
)
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.cinema.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.cinema.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.cinema.app.query.coupon_query_use_case import CouponQueryUseCase
from src.service.cinema.app.query.get_movie_use_case import GetMovieUseCase
from src.service.cinema.app.query.get_stats_use_case import GetStatsUseCase
from src.service.cinema.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.cinema.app.query.list_movies_use_case import ListMoviesUseCase
from src.service.cinema.driving_adapter.seat_input_parser import parse_seat_numbers


router = APIRouter(tags=['web'], include_in_schema=False)
templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


async def _booking_form_context(
    *,
    movie_id: Optional[int],
    show_id: Optional[int],
    list_movies_use_case: ListMoviesUseCase,
    get_movie_use_case: GetMovieUseCase,
    coupon_use_case: CouponQueryUseCase,
) -> dict[str, Any]:
    context: dict[str, Any] = {
        'movies': await list_movies_use_case.list_movies(),
        'coupons': await coupon_use_case.list_coupons(),
        'selected_movie': None,
        'selected_show': None,
        'available_seats': [],
    }
    if movie_id is not None:
        context['selected_movie'] = await get_movie_use_case.get_movie(movie_id=movie_id)
        if show_id is not None:
            show = await get_movie_use_case.get_show(movie_id=movie_id, show_id=show_id)
            context['selected_show'] = show
            context['available_seats'] = show.available_seats()
    return context


@router.get(PAGE_HOME, response_class=HTMLResponse)
@Logger.io
async def home_page(
    request: Request,
    stats_use_case: GetStatsUseCase = Depends(GetStatsUseCase.depends),
    list_movies_use_case: ListMoviesUseCase = Depends(ListMoviesUseCase.depends),
) -> HTMLResponse:
    stats = await stats_use_case.get_stats()
    movies = await list_movies_use_case.list_movies()
    return templates.TemplateResponse(
        request, 'index.html', {'stats': stats, 'movies': movies}
    )


@router.get(PAGE_MOVIES, response_class=HTMLResponse)
@Logger.io
async def movies_page(
    request: Request,
    genre: Optional[str] = None,
    q: Optional[str] = None,
    list_movies_use_case: ListMoviesUseCase = Depends(ListMoviesUseCase.depends),
) -> HTMLResponse:
    movies = await list_movies_use_case.list_movies(genre=genre, title=q)
    return templates.TemplateResponse(
        request, 'movies.html', {'movies': movies, 'genre': genre or '', 'q': q or ''}
    )


@router.get(PAGE_BOOKING, response_class=HTMLResponse)
@Logger.io
async def booking_page(
    request: Request,
    movie_id: Optional[int] = None,
    show_id: Optional[int] = None,
    list_movies_use_case: ListMoviesUseCase = Depends(ListMoviesUseCase.depends),
    get_movie_use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
    coupon_use_case: CouponQueryUseCase = Depends(CouponQueryUseCase.depends),
) -> HTMLResponse:
    context = await _booking_form_context(
        movie_id=movie_id,
        show_id=show_id,
        list_movies_use_case=list_movies_use_case,
        get_movie_use_case=get_movie_use_case,
        coupon_use_case=coupon_use_case,
    )
    return templates.TemplateResponse(request, 'booking.html', context)


@router.post(PAGE_BOOKING, response_class=HTMLResponse)
@Logger.io
async def submit_booking(
    request: Request,
    movie_id: int = Form(...),
    show_id: int = Form(...),
    customer_name: str = Form(''),
    seats: str = Form(''),
    coupon_code: str = Form(''),
    create_booking_use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
    list_movies_use_case: ListMoviesUseCase = Depends(ListMoviesUseCase.depends),
    get_movie_use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
    coupon_use_case: CouponQueryUseCase = Depends(CouponQueryUseCase.depends),
) -> HTMLResponse:
    try:
        booking = await create_booking_use_case.create_booking(
            movie_id=movie_id,
            show_id=show_id,
            seat_numbers=parse_seat_numbers(seats),
            customer_name=customer_name,
            coupon_code=coupon_code or None,
        )
    except CustomBaseError as e:
        # Re-render the form; fall back to the bare form when the movie or show is gone
        try:
            context = await _booking_form_context(
                movie_id=movie_id,
                show_id=show_id,
                list_movies_use_case=list_movies_use_case,
                get_movie_use_case=get_movie_use_case,
                coupon_use_case=coupon_use_case,
            )
        except CustomBaseError:
            context = await _booking_form_context(
                movie_id=None,
                show_id=None,
                list_movies_use_case=list_movies_use_case,
                get_movie_use_case=get_movie_use_case,
                coupon_use_case=coupon_use_case,
            )
        context |= {
            'error': e.message,
            'customer_name': customer_name,
            'seats': seats,
            'coupon_code': coupon_code,
        }
        return templates.TemplateResponse(
            request, 'booking.html', context, status_code=e.status_code
        )

    return templates.TemplateResponse(
        request,
        'booking_confirmation.html',
        {'booking': booking},
        status_code=status.HTTP_201_CREATED,
    )


@router.get(PAGE_MY_BOOKINGS, response_class=HTMLResponse)
@Logger.io
async def my_bookings_page(
    request: Request,
    customer: Optional[str] = None,
    list_bookings_use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> HTMLResponse:
    if customer and customer.strip():
        bookings = await list_bookings_use_case.list_by_customer(customer_name=customer)
    else:
        bookings = await list_bookings_use_case.list_all()
    return templates.TemplateResponse(
        request, 'bookings.html', {'bookings': bookings, 'customer': customer or ''}
    )


@router.post(PAGE_CANCEL_BOOKING, response_class=HTMLResponse, response_model=None)
@Logger.io
async def cancel_booking_from_page(
    request: Request,
    booking_id: int,
    customer: str = Form(''),
    cancel_use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
    list_bookings_use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> HTMLResponse | RedirectResponse:
    try:
        await cancel_use_case.execute(booking_id=booking_id)
    except CustomBaseError as e:
        bookings = await list_bookings_use_case.list_all()
        return templates.TemplateResponse(
            request,
            'bookings.html',
            {'bookings': bookings, 'customer': customer, 'error': e.message},
            status_code=e.status_code,
        )

    target = PAGE_MY_BOOKINGS
    if customer.strip():
        target = f"{PAGE_MY_BOOKINGS}?{urlencode({'customer': customer.strip()})}"
    return RedirectResponse(url=target, status_code=status.HTTP_303_SEE_OTHER)
