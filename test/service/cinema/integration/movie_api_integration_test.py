from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import (
    MOVIE_BASE,
    MOVIE_GET,
    MOVIE_SHOW_GET,
    MOVIE_SHOW_SEATS,
    MOVIE_SHOWS,
)


@pytest.mark.integration
class TestMovieApi:
    def test_list_movies_returns_sample_catalog(self, client: TestClient) -> None:
        response = client.get(MOVIE_BASE)

        assert response.status_code == 200
        movies = response.json()
        assert [movie['title'] for movie in movies] == [
            'The Matrix Resurrections',
            'Inception',
            'Avengers Endgame',
        ]
        assert [show['show_time'] for show in movies[0]['shows']] == [
            '2:00 PM',
            '5:00 PM',
            '8:00 PM',
        ]
        assert movies[0]['shows'][0]['available_seat_count'] == 15

    def test_filter_by_genre_and_title(self, client: TestClient) -> None:
        by_genre = client.get(MOVIE_BASE, params={'genre': 'thriller'}).json()
        by_title = client.get(MOVIE_BASE, params={'q': 'end'}).json()

        assert [movie['title'] for movie in by_genre] == ['Inception']
        assert [movie['title'] for movie in by_title] == ['Avengers Endgame']

    def test_get_movie(self, client: TestClient) -> None:
        response = client.get(MOVIE_GET.format(movie_id=3))

        assert response.status_code == 200
        assert response.json()['duration'] == 181

    def test_get_unknown_movie(self, client: TestClient) -> None:
        response = client.get(MOVIE_GET.format(movie_id=999))

        assert response.status_code == 404
        assert response.json() == {'detail': 'Movie 999 not found'}

    def test_list_shows_and_get_show(self, client: TestClient) -> None:
        shows = client.get(MOVIE_SHOWS.format(movie_id=2))
        show = client.get(MOVIE_SHOW_GET.format(movie_id=2, show_id=5))

        assert [s['id'] for s in shows.json()] == [4, 5]
        assert show.status_code == 200
        assert show.json()['show_time'] == '6:00 PM'

    def test_show_under_wrong_movie_is_not_found(self, client: TestClient) -> None:
        response = client.get(MOVIE_SHOW_GET.format(movie_id=1, show_id=5))

        assert response.status_code == 404

    def test_available_seats(self, client: TestClient) -> None:
        response = client.get(MOVIE_SHOW_SEATS.format(movie_id=1, show_id=1))

        assert response.status_code == 200
        body = response.json()
        assert body['available_seats'] == list(range(1, 16))
        assert body['total_seats'] == 15

    def test_create_movie_and_show(self, client: TestClient) -> None:
        movie = client.post(MOVIE_BASE, json={'title': 'Dune', 'genre': 'Sci-Fi', 'duration': 155})

        assert movie.status_code == 201
        assert movie.json()['id'] == 4
        assert movie.json()['shows'] == []

        show = client.post(
            MOVIE_SHOWS.format(movie_id=4), json={'show_time': '9:30 PM', 'total_seats': 30}
        )

        assert show.status_code == 201
        assert show.json()['id'] == 8
        assert show.json()['available_seat_count'] == 30
        assert len(client.get(MOVIE_GET.format(movie_id=4)).json()['shows']) == 1

    def test_create_movie_with_defaults(self, client: TestClient) -> None:
        response = client.post(MOVIE_BASE, json={'title': 'Heat'})

        assert response.status_code == 201
        assert response.json()['genre'] == 'General'
        assert response.json()['duration'] == 120

    @pytest.mark.parametrize(
        'payload',
        [{'title': '  '}, {'title': 'Heat', 'duration': 0}, {'genre': 'Drama'}],
    )
    def test_create_movie_bad_input(self, client: TestClient, payload: dict) -> None:
        response = client.post(MOVIE_BASE, json=payload)

        assert response.status_code == 400

    def test_create_show_bad_input(self, client: TestClient) -> None:
        response = client.post(
            MOVIE_SHOWS.format(movie_id=1), json={'show_time': '9:30 PM', 'total_seats': 0}
        )

        assert response.status_code == 400
        assert response.json() == {'detail': 'A show needs at least one seat'}

    def test_create_show_for_unknown_movie(self, client: TestClient) -> None:
        response = client.post(
            MOVIE_SHOWS.format(movie_id=99), json={'show_time': '9:30 PM', 'total_seats': 10}
        )

        assert response.status_code == 404
