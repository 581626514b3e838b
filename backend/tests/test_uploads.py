import io


def upload(client, headers, filename, content=b"\x89PNG fake image"):
    return client.post(
        "/api/upload",
        data={"file": (io.BytesIO(content), filename)},
        headers=headers,
        content_type="multipart/form-data",
    )


def test_upload_list_serve_and_delete(client, auth_headers):
    response = upload(client, auth_headers, "Photo of Baščaršija.PNG")
    assert response.status_code == 201
    stored = response.get_json()

    assert stored["url"] == f"/uploads/{stored['filename']}"
    assert stored["filename"].endswith(".png")

    listed = client.get("/api/uploads", headers=auth_headers).get_json()
    assert [f["filename"] for f in listed] == [stored["filename"]]

    served = client.get(stored["url"])
    assert served.status_code == 200
    assert served.data == b"\x89PNG fake image"
    served.close()

    deleted = client.delete(f"/api/uploads/{stored['filename']}", headers=auth_headers)
    assert deleted.status_code == 200
    assert client.get("/api/uploads", headers=auth_headers).get_json() == []


def test_disallowed_extension(client, auth_headers):
    response = upload(client, auth_headers, "script.exe")
    assert response.status_code == 400


def test_missing_file(client, auth_headers):
    response = client.post("/api/upload", data={}, headers=auth_headers)
    assert response.status_code == 400


def test_upload_requires_session(client):
    assert upload(client, {}, "photo.png").status_code == 401


def test_deleting_unknown_file(client, auth_headers):
    response = client.delete("/api/uploads/nothing.png", headers=auth_headers)
    assert response.status_code == 404
