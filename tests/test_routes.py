def test_courses_empty_before_load(client):
    resp = client.get("/courses")

    assert resp.status_code == 200
    assert resp.get_json() == {"count": 0, "courses": []}


def test_load_then_list(client):
    resp = client.post("/catalog/load")
    assert resp.status_code == 200
    assert resp.get_json() == {"loaded": 4}

    data = client.get("/courses").get_json()
    assert data["count"] == 4
    assert [c["number"] for c in data["courses"]] == ["CS100", "CS200", "CS300", "MATH201"]


def test_get_course(client):
    client.post("/catalog/load")

    resp = client.get("/courses/CS300")

    assert resp.status_code == 200
    assert resp.get_json() == {
        "number": "CS300",
        "title": "Algorithms",
        "prerequisites": ["CS100", "CS200"],
    }


def test_get_unknown_course(client):
    client.post("/catalog/load")

    resp = client.get("/courses/CS999")

    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Course not found."


def test_load_named_file(client, tmp_path):
    (tmp_path / "small.csv").write_text("CS100,Intro\nCS100,Intro again\n", encoding="utf-8")

    resp = client.post("/catalog/load", json={"file": "small.csv"})

    assert resp.status_code == 200
    assert resp.get_json() == {"loaded": 1}
    assert client.get("/courses/CS100").get_json()["title"] == "Intro"


def test_load_missing_file(client):
    resp = client.post("/catalog/load", json={"file": "missing.csv"})

    assert resp.status_code == 404
    assert resp.get_json()["error"].startswith("File not found: ")


def test_load_outside_catalog_dir_is_rejected(client):
    resp = client.post("/catalog/load", json={"file": "../../etc/passwd"})

    assert resp.status_code == 400


def test_failed_load_keeps_previous_catalog(client, tmp_path):
    client.post("/catalog/load")
    (tmp_path / "bad.csv").write_text("CS100,Intro\nCS499\n", encoding="utf-8")

    resp = client.post("/catalog/load", json={"file": "bad.csv"})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "Malformed course: CS499"}
    assert client.get("/courses").get_json()["count"] == 4


def test_each_app_has_its_own_catalog(client):
    from app import create_app
    from config import Config

    client.post("/catalog/load")
    other = create_app(Config)

    assert other.test_client().get("/courses").get_json()["count"] == 0


def test_load_body_must_be_an_object(client):
    resp = client.post("/catalog/load", json=["x"])

    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_load_undecodable_file(client, tmp_path):
    client.post("/catalog/load")
    (tmp_path / "latin1.csv").write_bytes("CS100,Introducción\n".encode("latin-1"))

    resp = client.post("/catalog/load", json={"file": "latin1.csv"})

    assert resp.status_code == 400
    assert resp.get_json()["error"].startswith("Unreadable file: ")
    assert client.get("/courses").get_json()["count"] == 4
