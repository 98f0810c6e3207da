from app.models.invoice import Invoice


def _supplier(client, **overrides):
    payload = {"name": "Tech Solutions Inc.", "email": "billing@techsolutions.com", "tax_id": "TS-1001"}
    payload.update(overrides)
    resp = client.post("/suppliers", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def test_create_supplier_defaults_to_active(client) -> None:
    supplier = _supplier(client)

    assert supplier["is_active"] is True
    assert supplier["contact_person"] is None


def test_create_supplier_validates_fields(client) -> None:
    resp = client.post("/suppliers", json={"email": "not-an-email"})

    assert resp.status_code == 422
    assert {"name", "email"} <= set(resp.json()["errors"])


def test_list_show_and_update_supplier(client) -> None:
    office = _supplier(client, name="Office Supplies Co.")
    tech = _supplier(client)

    listed = client.get("/suppliers").json()
    updated = client.put(f"/suppliers/{tech['id']}", json={"is_active": False, "phone": "+1-555-0100"})

    assert [s["id"] for s in listed] == [office["id"], tech["id"]]
    assert client.get(f"/suppliers/{office['id']}").json()["name"] == "Office Supplies Co."
    assert updated.status_code == 200
    assert updated.json()["is_active"] is False
    assert updated.json()["phone"] == "+1-555-0100"
    assert updated.json()["name"] == tech["name"]


def test_delete_supplier_removes_its_invoices(client, db_session) -> None:
    supplier = _supplier(client)
    client.post(
        "/invoices",
        json={
            "supplier_id": supplier["id"],
            "invoice_number": "INV-2024-001",
            "invoice_date": "2024-01-15",
            "due_date": "2024-02-15",
            "subtotal": 5000,
            "total_amount": 5000,
        },
    )

    resp = client.delete(f"/suppliers/{supplier['id']}")

    assert resp.status_code == 200
    assert resp.json() == {"message": "Supplier deleted successfully"}
    assert client.get(f"/suppliers/{supplier['id']}").status_code == 404
    assert db_session.query(Invoice).count() == 0
