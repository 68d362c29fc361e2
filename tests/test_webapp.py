import threading

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from core.exceptions import AuthError, FormValidationError, UserServiceError
from core.schemas import PersonalRecord
from tests.fakes import USER_ID, VALID_TOKEN
from webapp.application import app
from webapp.routes import progress as progress_routes

AUTH = {"Authorization": f"Bearer {VALID_TOKEN}"}
BENCH = "incline-barbell-bench-smith"


@pytest_asyncio.fixture
async def client(container):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client


@pytest.mark.asyncio
async def test_welcome_anonymous(client):
    response = await client.get("/")
    assert response.status_code == 200
    body = response.json()
    assert body["greeting"] == "Welcome"
    assert body["authenticated"] is False
    assert [section["path"] for section in body["sections"]] == ["/workouts", "/nutrition/plans"]


@pytest.mark.asyncio
async def test_welcome_signed_in(client):
    response = await client.get("/", headers=AUTH)
    assert response.json()["greeting"] == "Welcome, Alex Runner"


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")
    assert response.json() == {"status": "ok", "cache": "ok"}


@pytest.mark.asyncio
async def test_signup_returns_credentials(client):
    response = await client.post("/auth/signup", json={"full_name": "Alex Runner", "email": "athlete@example.com"})
    assert response.status_code == 201
    assert response.json()["username"] == "athlete@example.com"
    assert response.json()["password"] == "Generated-Pass1!"


@pytest.mark.asyncio
async def test_signup_validation_error(client, fake_auth, monkeypatch):
    async def register(full_name, email):
        raise FormValidationError("email", "Please enter a valid email address")

    monkeypatch.setattr(fake_auth, "register", register)
    response = await client.post("/auth/signup", json={"full_name": "Alex", "email": "nope"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Please enter a valid email address", "field": "email"}


@pytest.mark.asyncio
async def test_login_and_logout(client, fake_auth):
    login = await client.post("/auth/login", json={"email": " athlete@example.com ", "password": "secret"})
    assert login.status_code == 200
    assert login.json()["access_token"] == VALID_TOKEN

    logout = await client.post("/auth/logout", headers=AUTH)
    assert logout.json() == {"status": "signed_out"}
    assert fake_auth.signed_out == [VALID_TOKEN]


@pytest.mark.asyncio
@pytest.mark.parametrize("code, expected", [(401, 401), (422, 422), (500, 502)])
async def test_auth_error_status(client, fake_auth, monkeypatch, code, expected):
    async def sign_in(email, password):
        raise AuthError("Invalid login credentials", code=code)

    monkeypatch.setattr(fake_auth, "sign_in", sign_in)
    response = await client.post("/auth/login", json={"email": "athlete@example.com", "password": "wrong"})

    assert response.status_code == expected
    assert response.json() == {"detail": "Invalid login credentials"}


@pytest.mark.asyncio
async def test_session_requires_token(client):
    response = await client.get("/auth/session")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"

    rejected = await client.get("/auth/session", headers={"Authorization": "Bearer stale"})
    assert rejected.status_code == 401


@pytest.mark.asyncio
async def test_session(client):
    response = await client.get("/auth/session", headers=AUTH)
    body = response.json()
    assert body["user"]["id"] == USER_ID
    assert body["profile"]["current_week"] == 3


@pytest.mark.asyncio
async def test_dashboard_uses_profile_week(client):
    anonymous = await client.get("/workouts")
    assert anonymous.json()["week"] == 1

    signed_in = await client.get("/workouts", headers=AUTH)
    body = signed_in.json()
    assert body["week"] == 3
    assert body["progression"]["phase"] == "Hypertrophy Focus"
    assert body["workouts"][0]["exercises"][0]["sets"] == 4


@pytest.mark.asyncio
async def test_dashboard_unknown_week(client):
    response = await client.get("/workouts", params={"week": 9})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_weeks(client):
    response = await client.get("/workouts/weeks")
    weeks = response.json()
    assert len(weeks) == 8
    assert weeks[6]["phase"] == "Deload"
    assert weeks[7]["rpe_range"] == [9, 10]


@pytest.mark.asyncio
async def test_update_week(client, fake_profiles):
    response = await client.put("/workouts/week", json={"week": 5}, headers=AUTH)
    assert response.json()["current_week"] == 5
    assert fake_profiles.profile.current_week == 5

    invalid = await client.put("/workouts/week", json={"week": 9}, headers=AUTH)
    assert invalid.status_code == 404
    assert fake_profiles.profile.current_week == 5


@pytest.mark.asyncio
async def test_workout_detail_anonymous(client):
    response = await client.get("/workouts/1", params={"week": 1})
    body = response.json()
    assert body["workout"]["name"] == "Upper Body 1"
    assert body["workout"]["exercises"][0]["rest"] == "3min 36s"
    assert "log" not in body


@pytest.mark.asyncio
async def test_workout_detail_unknown_day(client):
    response = await client.get("/workouts/6")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_log_sets_and_detail(client, fake_store, fake_drafts):
    draft = await client.put(
        f"/workouts/1/weeks/2/drafts/{BENCH}",
        json={"sets": [{"set_number": 1, "weight": 95, "reps": 8}]},
        headers=AUTH,
    )
    assert draft.json()[BENCH][0]["weight"] == 95

    previous_log = fake_store.add_log(USER_ID, 1, 1)
    fake_store.add_row(previous_log, BENCH, 1, 8, 90)

    saved = await client.post(
        f"/workouts/1/weeks/2/exercises/{BENCH}/sets",
        json={"sets": [{"set_number": 1, "weight": 100, "reps": 8, "completed": True}]},
        headers=AUTH,
    )
    assert saved.status_code == 200
    assert saved.json()["is_new_record"] is True
    assert fake_store.rows_for(BENCH)[-1]["exercise_name"] == "Incline Barbell Bench Press (Smith Machine)"
    assert fake_drafts.drafts == {}

    detail = await client.get("/workouts/1", params={"week": 2}, headers=AUTH)
    body = detail.json()
    assert body["log"]["exercises"][0]["sets"][0]["weight"] == 100
    assert body["previous"][BENCH]["sets"][0]["weight"] == 90
    assert body["comparisons"][BENCH][0]["direction"] == "up"
    assert body["personal_records"][BENCH]["weight"] == 100
    assert body["drafts"] == {}


@pytest.mark.asyncio
async def test_save_sets_requires_login(client):
    response = await client.post(
        f"/workouts/1/weeks/1/exercises/{BENCH}/sets", json={"sets": [{"set_number": 1, "weight": 100, "reps": 5}]}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_save_sets_unknown_exercise(client):
    response = await client.post(
        "/workouts/1/weeks/1/exercises/leg-press/sets",
        json={"sets": [{"set_number": 1, "weight": 100, "reps": 5}]},
        headers=AUTH,
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_save_sets_unknown_day_with_client_exercise_name(client, fake_store):
    response = await client.post(
        "/workouts/99/weeks/1/exercises/anything/sets",
        json={"exercise_name": "Made up", "sets": [{"set_number": 1, "weight": 100, "reps": 5}]},
        headers=AUTH,
    )
    assert response.status_code == 404
    assert fake_store.logs == []
    assert fake_store.rows == []
    assert fake_store.records == {}


@pytest.mark.asyncio
async def test_save_sets_uses_program_exercise_name(client, fake_store):
    response = await client.post(
        f"/workouts/1/weeks/1/exercises/{BENCH}/sets",
        json={"exercise_name": "Made up", "sets": [{"set_number": 1, "weight": 100, "reps": 5}]},
        headers=AUTH,
    )
    assert response.status_code == 200
    assert fake_store.rows_for(BENCH)[-1]["exercise_name"] == "Incline Barbell Bench Press (Smith Machine)"


@pytest.mark.asyncio
async def test_save_sets_rejects_empty_batch(client):
    response = await client.post(f"/workouts/1/weeks/1/exercises/{BENCH}/sets", json={"sets": []}, headers=AUTH)
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_partial_batch_failure(client, fake_store):
    fake_store.fail_on_write = 3
    response = await client.post(
        f"/workouts/1/weeks/1/exercises/{BENCH}/sets",
        json={"sets": [{"set_number": n, "weight": 60, "reps": 8} for n in (1, 2, 3)]},
        headers=AUTH,
    )
    assert response.status_code == 502
    assert response.json()["saved_set_numbers"] == [1]
    assert response.json()["exercise_id"] == BENCH


@pytest.mark.asyncio
async def test_complete_workout(client, fake_store, fake_drafts):
    not_started = await client.post("/workouts/1/weeks/1/complete", json={"notes": "x"}, headers=AUTH)
    assert not_started.json() == {"completed": False, "log": None}

    fake_store.add_log(USER_ID, 1, 1)
    await client.put(
        f"/workouts/1/weeks/1/drafts/{BENCH}", json={"sets": [{"set_number": 2, "weight": 50}]}, headers=AUTH
    )
    done = await client.post("/workouts/1/weeks/1/complete", json={"notes": "Great pump"}, headers=AUTH)
    assert done.json()["completed"] is True
    assert done.json()["log"]["notes"] == "Great pump"
    assert fake_drafts.drafts == {}


@pytest.mark.asyncio
async def test_progress(client, fake_store):
    log_id = fake_store.add_log(USER_ID, 1, 1, completed_at="2026-03-02T08:00:00Z")
    fake_store.add_row(log_id, BENCH, 1, 5, 100)
    fake_store.records[BENCH] = PersonalRecord(
        user_id=USER_ID, exercise_id=BENCH, exercise_name="Bench", weight=100, reps=5
    )

    response = await client.get("/progress", headers=AUTH)
    body = response.json()
    assert body["series"] == [{"date": "2026-03-02", "volume": 500}]
    assert body["personal_records"][0]["exercise_id"] == BENCH

    chart = await client.get("/progress/chart.png", headers=AUTH)
    assert chart.headers["content-type"] == "image/png"
    assert chart.content.startswith(b"\x89PNG")


@pytest.mark.asyncio
async def test_progress_chart_renders_off_event_loop(client, fake_store, monkeypatch):
    log_id = fake_store.add_log(USER_ID, 1, 1, completed_at="2026-03-02T08:00:00Z")
    fake_store.add_row(log_id, BENCH, 1, 5, 100)
    render_threads = []

    def render(points, user_id=""):
        render_threads.append(threading.get_ident())
        return b"\x89PNG"

    monkeypatch.setattr(progress_routes, "render_progress_chart", render)
    response = await client.get("/progress/chart.png", headers=AUTH)

    assert response.status_code == 200
    assert render_threads and render_threads[0] != threading.get_ident()


@pytest.mark.asyncio
async def test_progress_chart_without_history(client):
    response = await client.get("/progress/chart.png", headers=AUTH)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_backend_failure_maps_to_bad_gateway(client, fake_store, monkeypatch):
    async def broken(user_id):
        raise UserServiceError("backend down", code=503)

    monkeypatch.setattr(fake_store, "get_user_exercise_rows", broken)
    response = await client.get("/progress", headers=AUTH)
    assert response.status_code == 502
    assert response.json() == {"detail": "backend down"}


@pytest.mark.asyncio
async def test_calorie_plans(client):
    response = await client.get("/nutrition/plans")
    assert [plan["calories"] for plan in response.json()] == [2000, 2500, 3000, 3500]


@pytest.mark.asyncio
async def test_meal_plan_view(client):
    response = await client.get("/nutrition/plans/2000")
    body = response.json()
    assert body["totals"]["calories"] == 2000
    assert body["fiber"]["level"] == "Moderate"
    assert body["meal_names"][0] == "Protein Pancakes with Berries"

    missing = await client.get("/nutrition/plans/1800")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_swap_and_shopping_list(client):
    alternatives = await client.get("/nutrition/plans/2000/meals/0/alternatives")
    names = [meal["name"] for meal in alternatives.json()["alternatives"]]
    assert names == ["Greek Yogurt Parfait", "Veggie Egg White Omelette"]

    swapped = await client.post("/nutrition/plans/2000/swap", json={"index": 0, "replacement": "Greek Yogurt Parfait"})
    meal_names = swapped.json()["meal_names"]
    assert meal_names[0] == "Greek Yogurt Parfait"
    assert swapped.json()["totals"]["calories"] == 1950

    shopping = await client.post("/nutrition/plans/2000/shopping-list", json={"meals": meal_names})
    text = shopping.json()["text"]
    assert "Greek yogurt (0%) (300g)" in text
    assert "Rolled oats" not in text


@pytest.mark.asyncio
async def test_swap_rejects_foreign_meal(client):
    response = await client.post("/nutrition/plans/2000/swap", json={"index": 0, "replacement": "Tuna Pasta Salad"})
    assert response.status_code == 400

    out_of_range = await client.post(
        "/nutrition/plans/2000/swap", json={"index": 5, "replacement": "Greek Yogurt Parfait"}
    )
    assert out_of_range.status_code == 400


@pytest.mark.asyncio
async def test_pdf_export(client):
    response = await client.post("/nutrition/plans/2500/pdf", json={})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == 'attachment; filename="Hybrid_Athlete_2500kcal_MealPlan.pdf"'
    assert response.content.startswith(b"%PDF")
