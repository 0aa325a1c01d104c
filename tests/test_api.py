from marketplace.models import Bid, DeletionRemark

from conftest import auth, pending_bid

REMARKS = "/api/deletion-remarks/"


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert "X-Request-Id" in resp.headers


def test_remarks_require_auth(client):
    assert client.get(REMARKS).status_code == 401


def test_remarks_are_admin_only(client):
    assert client.get(REMARKS, headers=auth("freelancer", "f-1")).status_code == 403
    resp = client.post(
        REMARKS,
        json={"entity_type": "bid", "entity_id": "1", "reason": "spam"},
        headers=auth("agent", "a-1"),
    )
    assert resp.status_code == 403


def test_create_remark(client):
    resp = client.post(
        REMARKS,
        json={
            "entity_type": "milestone",
            "entity_id": "17",
            "reason": "duplicate entry",
            "metadata": {"title": "Design", "amount": 1200, "final": False},
        },
        headers=auth("superadmin", "root"),
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["entity_type"] == "milestone"
    assert body["entity_id"] == "17"
    assert body["reason"] == "duplicate entry"
    assert body["deleted_by"] == "root"
    assert body["deleted_by_role"] == "superadmin"
    assert body["metadata"] == {"title": "Design", "amount": 1200, "final": False}
    assert body["created_at"] and body["updated_at"]

    fetched = client.get(f"{REMARKS}{body['id']}", headers=auth("admin", "a"))
    assert fetched.status_code == 200
    assert fetched.json() == body


def test_create_remark_records_token_role(client):
    resp = client.post(
        REMARKS,
        json={"entity_type": "bid", "entity_id": "1", "reason": "spam", "deleted_by_role": "freelancer"},
        headers=auth("admin", "a"),
    )
    assert resp.status_code == 201
    assert resp.json()["deleted_by_role"] == "admin"


def test_create_remark_accepts_integer_ids(client):
    resp = client.post(
        REMARKS,
        json={"entity_type": "milestone", "entity_id": 42, "project_id": 7, "reason": "duplicate entry"},
        headers=auth("admin", "a"),
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["entity_id"] == "42"
    assert body["project_id"] == "7"


def test_create_remark_validation_errors(client):
    headers = auth("admin", "a")
    bad_type = client.post(
        REMARKS, json={"entity_type": "invoice", "entity_id": "1", "reason": "x"}, headers=headers,
    )
    assert bad_type.status_code == 400
    assert bad_type.json()["field"] == "entity_type"

    long_reason = client.post(
        REMARKS, json={"entity_type": "bid", "entity_id": "1", "reason": "x" * 501}, headers=headers,
    )
    assert long_reason.status_code == 400
    assert long_reason.json()["field"] == "reason"

    no_entity = client.post(REMARKS, json={"entity_type": "bid", "reason": "x"}, headers=headers)
    assert no_entity.status_code == 400
    assert no_entity.json()["field"] == "entity_id"


def test_missing_remark_is_404(client):
    assert client.get(f"{REMARKS}12345", headers=auth("admin", "a")).status_code == 404


def test_list_remarks_newest_first(client):
    headers = auth("admin", "a")
    for entity_id in ("1", "2", "3"):
        client.post(
            REMARKS, json={"entity_type": "bid", "entity_id": entity_id, "reason": "spam"}, headers=headers,
        )
    client.post(REMARKS, json={"entity_type": "user", "entity_id": "u", "reason": "left"}, headers=headers)

    resp = client.get(REMARKS, params={"entity_type": "bid"}, headers=headers)
    assert resp.status_code == 200
    data = resp.json()
    assert data["total"] == 3
    assert [r["entity_id"] for r in data["remarks"]] == ["3", "2", "1"]


def test_admin_bid_delete_without_reason_is_rejected(client, db, project):
    bid_id = pending_bid(project).id
    resp = client.delete(f"/api/bids/{bid_id}", headers=auth("admin", "a"))
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Deletion reason is required"
    db.expire_all()
    assert db.query(Bid).filter(Bid.id == bid_id).count() == 1


def test_admin_bid_delete_records_remark(client, db, project):
    bid_id = pending_bid(project).id
    resp = client.request(
        "DELETE", f"/api/bids/{bid_id}", json={"reason": "duplicate"}, headers=auth("admin", "a"),
    )
    assert resp.status_code == 200
    assert resp.json()["message"] == "Bid deleted successfully"
    remarks = db.query(DeletionRemark).all()
    assert len(remarks) == 1
    assert remarks[0].entity_type == "bid"
    assert remarks[0].deleted_by_role == "admin"


def test_owner_withdraws_bid(client, db, project):
    bid = pending_bid(project)
    resp = client.delete(f"/api/bids/{bid.id}", headers=auth("freelancer", bid.bidder_id))
    assert resp.status_code == 200
    assert resp.json()["message"] == "Bid withdrawn successfully"
    assert db.query(DeletionRemark).count() == 0


def test_stranger_gets_403(client, project):
    resp = client.delete(f"/api/bids/{pending_bid(project).id}", headers=auth("client", "someone"))
    assert resp.status_code == 403


def test_milestone_prompt_shows_zero_for_missing_amount(client, project):
    handoff = next(m for m in project.milestones if m.amount is None)
    resp = client.get(
        f"/api/projects/{project.id}/milestones/{handoff.id}/delete-prompt",
        headers=auth("admin", "a"),
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["title"] == "Delete Milestone"
    assert body["milestone"] == {"title": "Handoff", "amount_display": "0", "due_display": "01/12/2026"}


def test_delete_milestone_endpoint(client, db, project):
    milestone_id = project.milestones[0].id
    resp = client.request(
        "DELETE",
        f"/api/projects/{project.id}/milestones/{milestone_id}",
        json={"reason": "scope cut"},
        headers=auth("agent", "agent-1"),
    )
    assert resp.status_code == 200
    assert db.query(DeletionRemark).filter(DeletionRemark.entity_type == "milestone").count() == 1


def test_milestone_delete_without_body_needs_reason(client, project):
    resp = client.delete(
        f"/api/projects/{project.id}/milestones/{project.milestones[0].id}",
        headers=auth("admin", "a"),
    )
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Deletion reason is required"


def test_project_delete_without_body_needs_reason(client, project):
    resp = client.delete(f"/api/projects/{project.id}", headers=auth("admin", "a"))
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Deletion reason is required"


def test_delete_project_requires_admin(client, project):
    resp = client.request(
        "DELETE", f"/api/projects/{project.id}", json={"reason": "x"}, headers=auth("agent", "agent-1"),
    )
    assert resp.status_code == 403


def test_delete_project(client, db, project):
    resp = client.request(
        "DELETE", f"/api/projects/{project.id}", json={"reason": "client request"}, headers=auth("admin", "a"),
    )
    assert resp.status_code == 200
    assert db.query(DeletionRemark).filter(DeletionRemark.entity_type == "project").count() == 1


def test_catalog(client):
    resp = client.get("/api/catalog/")
    assert resp.status_code == 200
    data = resp.json()
    assert "AI/ML" in data["categories"]
    assert [p["value"] for p in data["priorities"]] == ["low", "medium", "high"]
    assert "Python" in data["skills"]
