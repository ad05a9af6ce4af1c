from app.utils.sample_data import SAMPLE_COURSES


def test_homepage(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.json() == {"message": "CourseReVU RESTful API"}


def test_get_courses_returns_200(client):
    res = client.get("/courses")
    assert res.status_code == 200


def test_get_courses_returns_sample_courses(client):
    courses = client.get("/courses").json()
    assert len(courses) == len(SAMPLE_COURSES)
    assert [c["name"] for c in courses] == [name for name, _ in SAMPLE_COURSES]
    assert set(courses[0]) == {"id", "name", "url"}


def test_post_course_returns_201_with_same_fields(client):
    res = client.post("/courses", json={"name": "test course", "url": "test-course.com"})
    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "test course"
    assert body["url"] == "test-course.com"
    assert isinstance(body["id"], int)


def test_posted_course_is_listed(client):
    created = client.post("/courses", json={"name": "Compilers", "url": "compilers.edu"}).json()
    courses = client.get("/courses").json()
    assert created in courses


def test_post_course_ignores_client_id(client):
    res = client.post("/courses", json={"id": 1, "name": "dup id", "url": "x.com"})
    assert res.status_code == 201
    assert res.json()["id"] != 1


def test_post_course_without_url(client):
    res = client.post("/courses", json={"name": "no url"})
    assert res.status_code == 201
    assert res.json()["url"] is None


def test_post_course_with_null_name_returns_500(client):
    res = client.post("/courses", json={"name": None, "url": "test-course.com"})
    assert res.status_code == 500
    body = res.json()
    assert body["status"] == 500
    assert "NOT NULL" in body["errorMessage"]


def test_post_course_with_missing_name_returns_500(client):
    res = client.post("/courses", json={"url": "test-course.com"})
    assert res.status_code == 500


def test_failed_post_does_not_add_course(client):
    client.post("/courses", json={"name": None})
    assert len(client.get("/courses").json()) == len(SAMPLE_COURSES)


def test_cors_allows_configured_origin(client):
    res = client.get("/courses", headers={"Origin": "http://localhost:3000"})
    assert res.headers["access-control-allow-origin"] == "http://localhost:3000"


def test_cors_ignores_other_origins(client):
    res = client.get("/courses", headers={"Origin": "http://evil.example"})
    assert res.status_code == 200
    assert "access-control-allow-origin" not in res.headers
