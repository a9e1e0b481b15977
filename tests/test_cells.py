"""Cell API tests."""

from datetime import datetime


def _first_cell(client, sheet_id, add_field, add_row, field_type="text"):
    add_field(sheet_id, "value", field_type)
    return add_row(sheet_id)["cells"][0]


def test_update_cell(client, auth_headers, sheet_id, add_field, add_row):
    """Test writing a cell changes only its value and timestamp."""
    cell = _first_cell(client, sheet_id, add_field, add_row)

    response = client.patch(
        f"/api/cells/{cell['id']}", headers=auth_headers, json={"value": "hello"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["value"] == "hello"
    assert data["id"] == cell["id"]
    assert data["row_id"] == cell["row_id"]
    assert data["field_id"] == cell["field_id"]
    assert datetime.fromisoformat(data["updated_at"]) > datetime.fromisoformat(cell["updated_at"])

    sheet = client.get(f"/api/sheets/{sheet_id}", headers=auth_headers).json()
    assert sheet["cells"][0]["value"] == "hello"


def test_update_cell_value_kinds(client, auth_headers, sheet_id, add_field, add_row):
    """Test numbers, string lists and null round-trip through a cell."""
    cell = _first_cell(client, sheet_id, add_field, add_row, "multiSelect")

    for value in (42, 3.5, ["red", "blue"], None):
        response = client.patch(
            f"/api/cells/{cell['id']}", headers=auth_headers, json={"value": value}
        )
        assert response.status_code == 200
        assert response.json()["value"] == value


def test_update_cell_keeps_booleans(client, auth_headers, sheet_id, add_field, add_row):
    """Test booleans are stored as booleans, not as 0 or 1."""
    cell = _first_cell(client, sheet_id, add_field, add_row)

    for value in (True, False):
        response = client.patch(
            f"/api/cells/{cell['id']}", headers=auth_headers, json={"value": value}
        )
        assert response.status_code == 200
        assert response.json()["value"] is value

    sheet = client.get(f"/api/sheets/{sheet_id}", headers=auth_headers).json()
    assert sheet["cells"][0]["value"] is False


def test_update_cell_rejects_nested_objects(client, auth_headers, sheet_id, add_field, add_row):
    """Test that cell values are scalars or string lists."""
    cell = _first_cell(client, sheet_id, add_field, add_row)

    response = client.patch(
        f"/api/cells/{cell['id']}", headers=auth_headers, json={"value": {"nested": True}}
    )
    assert response.status_code == 400


def test_update_cell_not_found(client, auth_headers):
    """Test updating a cell that does not exist."""
    response = client.patch(
        "/api/cells/00000000-0000-0000-0000-000000000000",
        headers=auth_headers,
        json={"value": "x"},
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Cell not found"}


def test_update_cell_forbidden_for_other_user(
    client, auth_headers, other_auth_headers, sheet_id, add_field, add_row
):
    """Test that another user cannot write the cell."""
    cell = _first_cell(client, sheet_id, add_field, add_row)

    response = client.patch(
        f"/api/cells/{cell['id']}", headers=other_auth_headers, json={"value": "pwned"}
    )
    assert response.status_code == 403

    sheet = client.get(f"/api/sheets/{sheet_id}", headers=auth_headers).json()
    assert sheet["cells"][0]["value"] is None
