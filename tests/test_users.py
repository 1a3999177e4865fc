import pytest

from app.models.diary import DiaryEntry
from app.models.user import User
from app.models.user_interaction import UserInteraction
from app.services.interaction_service import toggle_membership


@pytest.fixture
def user(make_user):
    return make_user(email="cinephile@example.com")


# ==================== PROFILE ====================

def test_get_user_profile_hides_password_and_expands_watchlist(client, user, make_movie):
    movie = make_movie("Paris, Texas")
    client.post(f"/api/users/{user.id}/watchlist", json={"movieId": movie.id})

    response = client.get(f"/api/users/{user.id}")

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "cinephile"
    assert "passwordHash" not in body
    assert [m["title"] for m in body["watchlist"]] == ["Paris, Texas"]


def test_get_unknown_user_is_404(client):
    response = client.get("/api/users/404")

    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_update_user_profile(client, user):
    response = client.put(
        f"/api/users/{user.id}",
        json={"username": "film_buff", "profilePicture": "https://example.com/me.png"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "film_buff"
    assert body["profilePicture"] == "https://example.com/me.png"
    assert body["email"] == "cinephile@example.com"


def test_update_user_rejects_duplicate_username(client, user, make_user):
    make_user(email="other@example.com", username="taken")

    response = client.put(f"/api/users/{user.id}", json={"username": "taken"})

    assert response.status_code == 400
    assert response.json()["message"] == "Username already taken"


def test_update_user_rejects_duplicate_email(client, db_session, user, make_user):
    make_user(email="claimed@example.com")

    response = client.put(f"/api/users/{user.id}", json={"email": "claimed@example.com"})

    assert response.status_code == 400
    assert response.json()["message"] == "Email already registered"
    db_session.expire_all()
    assert db_session.get(User, user.id).email == "cinephile@example.com"


def test_update_user_cannot_set_password(client, user):
    response = client.put(f"/api/users/{user.id}", json={"password": "plaintext"})

    assert response.status_code == 400


def test_update_unknown_user_is_404(client):
    assert client.put("/api/users/404", json={"username": "nobody"}).status_code == 404


# ==================== PROFILE WATCHLIST ====================

def test_watchlist_add_is_idempotent_and_delete_removes(client, user, make_movie):
    first = make_movie("First")
    second = make_movie("Second")

    client.post(f"/api/users/{user.id}/watchlist", json={"movieId": first.id})
    client.post(f"/api/users/{user.id}/watchlist", json={"movieId": second.id})
    again = client.post(f"/api/users/{user.id}/watchlist", json={"movieId": first.id})

    assert again.status_code == 200
    assert again.json() == [first.id, second.id]

    listed = client.get(f"/api/users/{user.id}/watchlist").json()
    assert [m["title"] for m in listed] == ["First", "Second"]

    removed = client.delete(f"/api/users/{user.id}/watchlist/{first.id}")
    assert removed.status_code == 200
    assert removed.json() == [second.id]


def test_watchlist_add_unknown_movie_is_400(client, user):
    response = client.post(f"/api/users/{user.id}/watchlist", json={"movieId": 12345})

    assert response.status_code == 400


def test_watchlist_of_unknown_user_is_404(client, make_movie):
    movie = make_movie()

    assert client.get("/api/users/404/watchlist").status_code == 404
    assert client.delete(f"/api/users/404/watchlist/{movie.id}").status_code == 404
    assert client.post("/api/users/404/watchlist", json={"movieId": movie.id}).status_code == 404


# ==================== INTERACTIONS ====================

def test_interactions_created_on_first_read(client, db_session, user):
    response = client.get(f"/api/users/{user.id}/interactions")

    assert response.status_code == 200
    assert response.json() == {"userId": user.id, "likes": [], "watchlist": []}
    db_session.expire_all()
    assert db_session.query(UserInteraction).filter(UserInteraction.user_id == user.id).count() == 1

    client.get(f"/api/users/{user.id}/interactions")
    db_session.expire_all()
    assert db_session.query(UserInteraction).count() == 1


def test_interactions_for_unknown_user_is_404(client):
    assert client.get("/api/users/404/interactions").status_code == 404


def test_watchlist_toggle_twice_restores_original_state(client, user):
    client.post(f"/api/users/{user.id}/watchlist/toggle", json={"movieId": 7})
    before = client.get(f"/api/users/{user.id}/interactions").json()["watchlist"]

    on = client.post(f"/api/users/{user.id}/watchlist/toggle", json={"movieId": 42}).json()
    off = client.post(f"/api/users/{user.id}/watchlist/toggle", json={"movieId": 42}).json()

    assert on["watchlist"] == [7, 42]
    assert off["watchlist"] == before == [7]


def test_like_toggle_adds_then_removes(client, user):
    liked = client.post(f"/api/users/{user.id}/likes/toggle", json={"movieId": 3}).json()
    unliked = client.post(f"/api/users/{user.id}/likes/toggle", json={"movieId": 3}).json()

    assert liked["likes"] == [3]
    assert unliked["likes"] == []
    assert liked["watchlist"] == []


def test_toggle_without_movie_id_is_400(client, user):
    response = client.post(f"/api/users/{user.id}/likes/toggle", json={})

    assert response.status_code == 400


def test_toggle_membership_never_duplicates():
    assert toggle_membership([1, 2], 3) == [1, 2, 3]
    assert toggle_membership([1, 2, 3], 2) == [1, 3]
    assert toggle_membership([], 5) == [5]


# ==================== DIARY ====================

def test_diary_entries_are_appended_and_listed_latest_first(client, db_session, user, make_movie):
    movie = make_movie("Stalker")

    first = client.post(
        f"/api/users/{user.id}/diary",
        json={"movieId": movie.id, "watchedDate": "2024-01-05T20:00:00", "rating": 5, "reviewText": "Zone"},
    )
    client.post(f"/api/users/{user.id}/diary", json={"movieId": movie.id, "watchedDate": "2024-03-01T21:00:00"})
    # same movie and date again is allowed
    client.post(f"/api/users/{user.id}/diary", json={"movieId": movie.id, "watchedDate": "2024-03-01T21:00:00"})

    assert first.status_code == 201
    assert first.json()["reviewText"] == "Zone"
    assert first.json()["userId"] == user.id

    entries = client.get(f"/api/users/{user.id}/diary").json()
    assert len(entries) == 3
    assert [e["watchedDate"][:10] for e in entries] == ["2024-03-01", "2024-03-01", "2024-01-05"]
    assert entries[-1]["rating"] == 5

    db_session.expire_all()
    assert db_session.query(DiaryEntry).count() == 3


def test_diary_entry_requires_watched_date(client, user, make_movie):
    movie = make_movie()

    response = client.post(f"/api/users/{user.id}/diary", json={"movieId": movie.id})

    assert response.status_code == 400
    assert "watchedDate" in response.json()["message"]


def test_diary_for_unknown_user_is_404(client, make_movie):
    movie = make_movie()

    response = client.post("/api/users/404/diary", json={"movieId": movie.id, "watchedDate": "2024-01-01T00:00:00"})

    assert response.status_code == 404
    assert client.get("/api/users/404/diary").status_code == 404


def test_diary_rating_out_of_range_is_400(client, user, make_movie):
    movie = make_movie()

    response = client.post(
        f"/api/users/{user.id}/diary",
        json={"movieId": movie.id, "watchedDate": "2024-01-01T00:00:00", "rating": 9},
    )

    assert response.status_code == 400


def test_diary_entry_for_unknown_movie_is_400(client, db_session, user):
    response = client.post(
        f"/api/users/{user.id}/diary",
        json={"movieId": 12345, "watchedDate": "2024-01-01T00:00:00"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Movie does not exist"
    db_session.expire_all()
    assert db_session.query(DiaryEntry).count() == 0


def test_diary_dates_with_offsets_are_stored_in_utc(client, user, make_movie):
    movie = make_movie()

    # 18:30 UTC
    client.post(f"/api/users/{user.id}/diary", json={"movieId": movie.id, "watchedDate": "2024-01-05T23:30:00+05:00"})
    client.post(f"/api/users/{user.id}/diary", json={"movieId": movie.id, "watchedDate": "2024-01-05T20:00:00Z"})

    entries = client.get(f"/api/users/{user.id}/diary").json()

    assert [e["watchedDate"][:19] for e in entries] == ["2024-01-05T20:00:00", "2024-01-05T18:30:00"]


# ==================== OUT-OF-RANGE IDS ====================

@pytest.mark.parametrize("path", [
    f"/api/users/{10**20}",
    f"/api/users/{10**20}/reviews",
    f"/api/users/{10**20}/watchlist",
    f"/api/users/{10**20}/interactions",
    f"/api/users/{10**20}/diary",
    f"/api/reviews/user/{10**20}",
])
def test_user_id_beyond_integer_range_is_400(client, path):
    response = client.get(path)

    assert response.status_code == 400
    assert "message" in response.json()


def test_movie_id_beyond_integer_range_in_body_is_400(client, user):
    big = 10**20

    assert client.post(f"/api/users/{user.id}/watchlist", json={"movieId": big}).status_code == 400
    assert client.post(f"/api/users/{user.id}/likes/toggle", json={"movieId": big}).status_code == 400
    assert client.delete(f"/api/users/{user.id}/watchlist/{big}").status_code == 400
    assert client.post(
        f"/api/users/{user.id}/diary", json={"movieId": big, "watchedDate": "2024-01-01T00:00:00"}
    ).status_code == 400
