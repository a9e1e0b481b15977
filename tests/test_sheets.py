"""Sheet API tests."""

from gridbase.models import Cell, Field, Row


def test_create_sheet(client, auth_headers):
    """Test creating a sheet."""
    response = client.post(
        "/api/sheets",
        headers=auth_headers,
        json={"name": "Inventory", "description": "Warehouse stock"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Inventory"
    assert data["description"] == "Warehouse stock"
    assert data["user_id"] == auth_headers.user_id


def test_create_sheet_without_name(client, auth_headers):
    """Test that a sheet needs a name."""
    response = client.post("/api/sheets", headers=auth_headers, json={"description": "No name"})
    assert response.status_code == 400
    assert "error" in response.json()


def test_create_sheet_empty_name(client, auth_headers):
    """Test that an empty name is rejected."""
    response = client.post("/api/sheets", headers=auth_headers, json={"name": ""})
    assert response.status_code == 400


def test_create_sheet_name_wrong_type(client, auth_headers):
    """Test that a non-string name is rejected."""
    response = client.post("/api/sheets", headers=auth_headers, json={"name": 42})
    assert response.status_code == 400


def test_get_sheets_only_own(client, auth_headers, other_auth_headers):
    """Test listing returns only the caller's sheets."""
    client.post("/api/sheets", headers=auth_headers, json={"name": "Mine"})
    client.post("/api/sheets", headers=auth_headers, json={"name": "Also mine"})
    client.post("/api/sheets", headers=other_auth_headers, json={"name": "Theirs"})

    response = client.get("/api/sheets", headers=auth_headers)
    assert response.status_code == 200
    names = {sheet["name"] for sheet in response.json()}
    assert names == {"Mine", "Also mine"}


def test_get_sheet_detail(client, auth_headers, sheet_id, add_field, add_row):
    """Test fetching a sheet with its fields, rows and cells."""
    add_field(sheet_id, "name")
    add_field(sheet_id, "age", "number")
    add_row(sheet_id)

    response = client.get(f"/api/sheets/{sheet_id}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["sheet"]["id"] == sheet_id
    assert [f["name"] for f in data["fields"]] == ["name", "age"]
    assert len(data["rows"]) == 1
    assert len(data["cells"]) == 2


def test_get_sheet_not_found(client, auth_headers):
    """Test fetching a sheet that does not exist."""
    response = client.get(
        "/api/sheets/00000000-0000-0000-0000-000000000000", headers=auth_headers
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Sheet not found"}


def test_get_sheet_malformed_id(client, auth_headers):
    """Test that a malformed sheet id is a bad request."""
    response = client.get("/api/sheets/not-a-uuid", headers=auth_headers)
    assert response.status_code == 400


def test_other_user_cannot_access_sheet(client, other_auth_headers, sheet_id):
    """Test that another user sees someone else's sheet as missing."""
    assert client.get(f"/api/sheets/{sheet_id}", headers=other_auth_headers).status_code == 404
    assert (
        client.patch(
            f"/api/sheets/{sheet_id}", headers=other_auth_headers, json={"name": "Hijacked"}
        ).status_code
        == 404
    )
    assert client.delete(f"/api/sheets/{sheet_id}", headers=other_auth_headers).status_code == 404


def test_update_sheet(client, auth_headers, sheet_id):
    """Test renaming a sheet keeps its description."""
    response = client.patch(
        f"/api/sheets/{sheet_id}", headers=auth_headers, json={"name": "Customers"}
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Customers"
    assert response.json()["description"] == "People"


def test_update_sheet_empty_name_keeps_name(client, auth_headers, sheet_id):
    """Test that an empty name leaves the sheet name unchanged."""
    response = client.patch(
        f"/api/sheets/{sheet_id}",
        headers=auth_headers,
        json={"name": "", "description": "Updated"},
    )
    assert response.status_code == 200
    assert response.json()["name"] == "Contacts"
    assert response.json()["description"] == "Updated"


def test_update_sheet_clear_description(client, auth_headers, sheet_id):
    """Test that an explicit null clears the description."""
    response = client.patch(
        f"/api/sheets/{sheet_id}", headers=auth_headers, json={"description": None}
    )
    assert response.status_code == 200
    assert response.json()["description"] is None


def test_delete_sheet_cascades(client, auth_headers, sheet_id, add_field, add_row, db):
    """Test deleting a sheet removes its fields, rows and cells."""
    add_field(sheet_id, "name")
    row = add_row(sheet_id)
    cell_id = row["cells"][0]["id"]

    response = client.delete(f"/api/sheets/{sheet_id}", headers=auth_headers)
    assert response.status_code == 204

    assert client.get(f"/api/sheets/{sheet_id}", headers=auth_headers).status_code == 404
    assert client.delete(f"/api/rows/{row['id']}", headers=auth_headers).status_code == 404
    assert (
        client.patch(
            f"/api/cells/{cell_id}", headers=auth_headers, json={"value": "x"}
        ).status_code
        == 404
    )

    db.expire_all()
    assert db.query(Field).count() == 0
    assert db.query(Row).count() == 0
    assert db.query(Cell).count() == 0
