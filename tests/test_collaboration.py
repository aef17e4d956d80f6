"""Tests for study groups, the idea marketplace and peer matches."""

import asyncio
from uuid import UUID, uuid4

from app.models import Idea, PeerMatch, PeerMatchStatus, StudyGroup, StudyGroupMember


async def create_group(client, headers, **overrides):
    body = {"name": "Calc Crew", "subject": "Calculus", "description": "Weekly problem sets"}
    body.update(overrides)
    return await client.post("/api/study-groups", json=body, headers=headers)


async def create_idea(client, headers, title="Flashcard app"):
    return await client.post(
        "/api/ideas",
        json={"title": title, "description": "Spaced repetition for lectures", "category": "Tech"},
        headers=headers,
    )


class TestStudyGroups:
    async def test_create_group_auto_joins_owner(self, client, alice, alice_headers, count_rows):
        resp = await create_group(client, alice_headers)
        assert resp.status_code == 200
        group = resp.json()["group"]
        assert group["membersCount"] == 1
        assert group["ownerId"] == alice["id"]
        assert group["isActive"] is True

        group_id = UUID(group["id"])
        assert await count_rows(StudyGroupMember, StudyGroupMember.group_id == group_id) == 1

    async def test_blank_name_rejected(self, client, alice, alice_headers, count_rows):
        resp = await create_group(client, alice_headers, name="   ")
        assert resp.status_code == 400
        assert await count_rows(StudyGroup) == 0

    async def test_each_join_adds_member(self, client, alice, alice_headers, bob_headers, count_rows):
        group = (await create_group(client, alice_headers)).json()["group"]
        url = f"/api/study-groups/{group['id']}/join"

        resp = await client.post(url, headers=bob_headers)
        assert resp.status_code == 200
        assert resp.json() == {"message": "Joined study group successfully"}
        await client.post(url, headers=bob_headers)

        groups = (await client.get("/api/study-groups", headers=alice_headers)).json()["groups"]
        assert groups[0]["membersCount"] == 3
        group_id = UUID(group["id"])
        assert await count_rows(StudyGroupMember, StudyGroupMember.group_id == group_id) == 3

    async def test_join_unknown_group(self, client, alice, alice_headers, count_rows):
        resp = await client.post(f"/api/study-groups/{uuid4()}/join", headers=alice_headers)
        assert resp.status_code == 404
        assert resp.json() == {"message": "Study group not found"}
        assert await count_rows(StudyGroupMember) == 0

    async def test_my_groups(self, client, alice, alice_headers, bob_headers):
        mine = (await create_group(client, alice_headers, name="Alice's group")).json()["group"]
        other = (await create_group(client, bob_headers, name="Bob's group")).json()["group"]

        names = [g["name"] for g in (await client.get("/api/study-groups/my", headers=alice_headers)).json()["groups"]]
        assert names == ["Alice's group"]

        await client.post(f"/api/study-groups/{other['id']}/join", headers=alice_headers)
        groups = (await client.get("/api/study-groups/my", headers=alice_headers)).json()["groups"]
        assert {g["id"] for g in groups} == {mine["id"], other["id"]}

    async def test_all_groups_lists_everyones(self, client, alice, alice_headers, bob_headers):
        await create_group(client, alice_headers, name="First")
        await create_group(client, bob_headers, name="Second")
        groups = (await client.get("/api/study-groups", headers=alice_headers)).json()["groups"]
        assert [g["name"] for g in groups] == ["Second", "First"]

    async def test_concurrent_joins_all_counted(self, client, alice, alice_headers, bob_headers, count_rows):
        group = (await create_group(client, alice_headers)).json()["group"]
        url = f"/api/study-groups/{group['id']}/join"

        responses = await asyncio.gather(*(client.post(url, headers=bob_headers) for _ in range(6)))
        assert all(r.status_code == 200 for r in responses)

        groups = (await client.get("/api/study-groups", headers=alice_headers)).json()["groups"]
        assert groups[0]["membersCount"] == 7
        group_id = UUID(group["id"])
        assert await count_rows(StudyGroupMember, StudyGroupMember.group_id == group_id) == 7


class TestIdeas:
    async def test_create_idea_starts_with_no_likes(self, client, alice, alice_headers):
        resp = await create_idea(client, alice_headers)
        assert resp.status_code == 200
        idea = resp.json()["idea"]
        assert idea["likes"] == 0
        assert idea["userId"] == alice["id"]

    async def test_likes_accumulate(self, client, alice, alice_headers, bob_headers):
        idea = (await create_idea(client, alice_headers)).json()["idea"]
        for headers in (alice_headers, bob_headers, bob_headers):
            resp = await client.post(f"/api/ideas/{idea['id']}/like", headers=headers)
            assert resp.status_code == 200
            assert resp.json() == {"message": "Idea liked successfully"}

        ideas = (await client.get("/api/ideas", headers=alice_headers)).json()["ideas"]
        assert ideas[0]["likes"] == 3

    async def test_like_unknown_idea(self, client, alice, alice_headers):
        resp = await client.post(f"/api/ideas/{uuid4()}/like", headers=alice_headers)
        assert resp.status_code == 404
        assert resp.json() == {"message": "Idea not found"}

    async def test_newest_first(self, client, alice, alice_headers):
        await create_idea(client, alice_headers, title="Older")
        await create_idea(client, alice_headers, title="Newer")
        ideas = (await client.get("/api/ideas", headers=alice_headers)).json()["ideas"]
        assert [i["title"] for i in ideas] == ["Newer", "Older"]

    async def test_missing_category(self, client, alice, alice_headers, count_rows):
        resp = await client.post("/api/ideas", json={"title": "T", "description": "D"}, headers=alice_headers)
        assert resp.status_code == 400
        assert await count_rows(Idea) == 0

    async def test_concurrent_likes_all_counted(self, client, alice, alice_headers, bob_headers):
        idea = (await create_idea(client, alice_headers)).json()["idea"]
        url = f"/api/ideas/{idea['id']}/like"

        responses = await asyncio.gather(
            *(client.post(url, headers=headers) for headers in [alice_headers, bob_headers] * 4)
        )
        assert all(r.status_code == 200 for r in responses)

        ideas = (await client.get("/api/ideas", headers=alice_headers)).json()["ideas"]
        assert ideas[0]["likes"] == 8


class TestPeerMatches:
    async def test_most_compatible_first(self, client, db, alice, alice_headers, bob_headers):
        bob = (await client.get("/api/user/profile", headers=bob_headers)).json()["user"]
        alice_id, bob_id = UUID(alice["id"]), UUID(bob["id"])

        db.add_all([
            PeerMatch(user_id=alice_id, matched_user_id=bob_id, compatibility=62, subjects=["History"]),
            PeerMatch(
                user_id=alice_id,
                matched_user_id=bob_id,
                compatibility=91,
                subjects=["Calculus", "Physics"],
                status=PeerMatchStatus.CONNECTED,
            ),
            PeerMatch(user_id=bob_id, matched_user_id=alice_id, compatibility=75, subjects=[]),
        ])
        await db.commit()

        resp = await client.get("/api/peer-matches", headers=alice_headers)
        assert resp.status_code == 200
        matches = resp.json()["matches"]
        assert [m["compatibility"] for m in matches] == [91, 62]
        assert matches[0]["subjects"] == ["Calculus", "Physics"]
        assert matches[0]["status"] == "connected"
        assert matches[1]["status"] == "pending"
