"""Tests for the study planner routes."""

from datetime import datetime

from app.models import StudyPlan


def plan_body(**overrides):
    body = {
        "title": "Linear algebra review",
        "description": "Eigenvalues",
        "scheduledAt": "2025-03-01T18:00:00Z",
        "duration": 60,
        "difficulty": "Medium",
    }
    body.update(overrides)
    return body


class TestCreatePlan:
    async def test_create_plan(self, client, alice, alice_headers):
        resp = await client.post("/api/study-plans", json=plan_body(), headers=alice_headers)
        assert resp.status_code == 200
        plan = resp.json()["plan"]
        assert plan["title"] == "Linear algebra review"
        assert plan["userId"] == alice["id"]
        assert plan["duration"] == 60
        assert plan["difficulty"] == "Medium"
        assert plan["completed"] is False

    async def test_difficulty_case_normalized(self, client, alice, alice_headers):
        resp = await client.post("/api/study-plans", json=plan_body(difficulty="high"), headers=alice_headers)
        assert resp.status_code == 200
        assert resp.json()["plan"]["difficulty"] == "High"

    async def test_optional_fields_may_be_omitted(self, client, alice, alice_headers):
        body = {"title": "Quick recap", "scheduledAt": "2025-03-02T08:00:00Z"}
        resp = await client.post("/api/study-plans", json=body, headers=alice_headers)
        assert resp.status_code == 200
        plan = resp.json()["plan"]
        assert plan["duration"] is None
        assert plan["difficulty"] is None

    async def test_non_numeric_duration_rejected(self, client, alice, alice_headers, count_rows):
        resp = await client.post("/api/study-plans", json=plan_body(duration="an hour"), headers=alice_headers)
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid data"}
        assert await count_rows(StudyPlan) == 0

    async def test_missing_scheduled_at_rejected(self, client, alice, alice_headers, count_rows):
        body = plan_body()
        del body["scheduledAt"]
        resp = await client.post("/api/study-plans", json=body, headers=alice_headers)
        assert resp.status_code == 400
        assert await count_rows(StudyPlan) == 0

    async def test_zero_duration_rejected(self, client, alice, alice_headers):
        resp = await client.post("/api/study-plans", json=plan_body(duration=0), headers=alice_headers)
        assert resp.status_code == 400

    async def test_unknown_difficulty_rejected(self, client, alice, alice_headers):
        resp = await client.post("/api/study-plans", json=plan_body(difficulty="Extreme"), headers=alice_headers)
        assert resp.status_code == 400


class TestListPlans:
    async def test_latest_scheduled_first(self, client, alice, alice_headers):
        for day in ("2025-03-01", "2025-03-05", "2025-03-03"):
            await client.post(
                "/api/study-plans",
                json=plan_body(title=day, scheduledAt=f"{day}T10:00:00Z"),
                headers=alice_headers,
            )
        resp = await client.get("/api/study-plans", headers=alice_headers)
        assert resp.status_code == 200
        assert [p["title"] for p in resp.json()["plans"]] == ["2025-03-05", "2025-03-03", "2025-03-01"]

    async def test_only_own_plans(self, client, alice, alice_headers, bob_headers):
        await client.post("/api/study-plans", json=plan_body(), headers=alice_headers)
        resp = await client.get("/api/study-plans", headers=bob_headers)
        assert resp.json() == {"plans": []}


class TestUpdatePlan:
    async def test_mark_completed(self, client, alice, alice_headers):
        created = (await client.post("/api/study-plans", json=plan_body(), headers=alice_headers)).json()["plan"]
        resp = await client.put(
            f"/api/study-plans/{created['id']}",
            json={"completed": True},
            headers=alice_headers,
        )
        assert resp.status_code == 200
        plan = resp.json()["plan"]
        assert plan["completed"] is True
        assert plan["title"] == created["title"]

    async def test_other_users_plan_not_found(self, client, alice, alice_headers, bob_headers):
        created = (await client.post("/api/study-plans", json=plan_body(), headers=alice_headers)).json()["plan"]
        resp = await client.put(
            f"/api/study-plans/{created['id']}",
            json={"completed": True},
            headers=bob_headers,
        )
        assert resp.status_code == 404
        assert resp.json() == {"message": "Study plan not found"}

    async def test_malformed_id(self, client, alice, alice_headers):
        resp = await client.put("/api/study-plans/not-a-uuid", json={"completed": True}, headers=alice_headers)
        assert resp.status_code == 400

    async def test_explicit_nulls_leave_required_fields_unchanged(self, client, alice, alice_headers):
        created = (await client.post("/api/study-plans", json=plan_body(), headers=alice_headers)).json()["plan"]
        await client.put(f"/api/study-plans/{created['id']}", json={"completed": True}, headers=alice_headers)

        resp = await client.put(
            f"/api/study-plans/{created['id']}",
            json={"completed": None, "title": None, "scheduledAt": None, "duration": 30},
            headers=alice_headers,
        )
        assert resp.status_code == 200
        plan = resp.json()["plan"]
        assert plan["completed"] is True
        assert plan["title"] == created["title"]
        assert plan["scheduledAt"] == created["scheduledAt"]
        assert plan["duration"] == 30


class TestGeneratePlan:
    async def test_generated_items_saved_one_day_apart(self, client, alice, alice_headers, count_rows):
        resp = await client.post(
            "/api/study-plans/generate",
            json={"subjects": ["Calculus"], "availableHours": 10, "goals": ["Pass the final"]},
            headers=alice_headers,
        )
        assert resp.status_code == 200
        plans = resp.json()["plans"]
        assert [p["title"] for p in plans] == ["Review derivatives", "Practice integrals"]
        assert plans[1]["difficulty"] == "High"

        first = datetime.fromisoformat(plans[0]["scheduledAt"].replace("Z", "+00:00"))
        second = datetime.fromisoformat(plans[1]["scheduledAt"].replace("Z", "+00:00"))
        assert (second - first).days == 1
        assert await count_rows(StudyPlan) == 2

    async def test_assistant_failure(self, client, alice, alice_headers, assistant, count_rows):
        assistant.fail = True
        resp = await client.post(
            "/api/study-plans/generate",
            json={"subjects": ["Calculus"], "availableHours": 10},
            headers=alice_headers,
        )
        assert resp.status_code == 500
        assert resp.json() == {"message": "Failed to generate study plan"}
        assert await count_rows(StudyPlan) == 0

    async def test_subjects_required(self, client, alice, alice_headers):
        resp = await client.post(
            "/api/study-plans/generate",
            json={"subjects": [], "availableHours": 10},
            headers=alice_headers,
        )
        assert resp.status_code == 400
