from fastapi import status

from app.models.project import Project

PROJECTS_URL = "/api/admin/projects"


def _payload(**overrides) -> dict:
    body = {
        "title":        "MAN TGM 18.290 dla OSP Wieliczka",
        "slug":         "man-tgm-osp-wieliczka",
        "description":  "Zabudowa średniego wozu ratowniczo-gaśniczego.",
        "vehicleBrand": "MAN",
        "vehicleModel": "TGM 18.290",
        "year":         2024,
        "images":       ["/uploads/a.jpg"],
    }
    body.update(overrides)
    return body


def test_create_project_sets_author_and_defaults(client, auth_headers, admin_user, make_category):
    category = make_category("wozy-strazackie")

    res = client.post(PROJECTS_URL, headers=auth_headers, json=_payload(categoryId=category.id))

    assert res.status_code == status.HTTP_201_CREATED
    data = res.json()["data"]
    assert data["authorId"] == admin_user.id
    assert data["year"] == "2024"
    assert data["images"] == ["/uploads/a.jpg"]
    assert data["published"] is False
    assert data["featured"] is False
    assert data["category"]["slug"] == "wozy-strazackie"


def test_create_project_without_category(client, auth_headers):
    res = client.post(PROJECTS_URL, headers=auth_headers, json=_payload())

    assert res.status_code == status.HTTP_201_CREATED
    assert res.json()["data"]["category"] is None


def test_create_project_with_unknown_category_is_not_found(client, auth_headers, db):
    res = client.post(PROJECTS_URL, headers=auth_headers, json=_payload(categoryId="missing"))

    assert res.status_code == status.HTTP_404_NOT_FOUND
    assert db.query(Project).count() == 0


def test_year_longer_than_column_is_rejected(client, auth_headers, db):
    res = client.post(PROJECTS_URL, headers=auth_headers, json=_payload(year="2019-2020 modernizacja"))

    assert res.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert res.json()["error"]["field"] == "year"
    assert db.query(Project).count() == 0

    res = client.post(PROJECTS_URL, headers=auth_headers, json=_payload(year="2019-2020"))
    assert res.status_code == status.HTTP_201_CREATED
    assert res.json()["data"]["year"] == "2019-2020"


def test_create_project_with_duplicate_slug_conflicts(client, auth_headers, make_project):
    make_project("man-tgm-osp-wieliczka")

    res = client.post(PROJECTS_URL, headers=auth_headers, json=_payload())

    assert res.status_code == status.HTTP_409_CONFLICT
    assert res.json()["error"]["field"] == "slug"


def test_update_project_is_full_replace_and_keeps_author(client, auth_headers, admin_user):
    created = client.post(PROJECTS_URL, headers=auth_headers,
                          json=_payload(published=True, featured=True)).json()["data"]

    res = client.put(f"{PROJECTS_URL}/{created['id']}", headers=auth_headers,
                     json={"title": "Nowy tytuł", "slug": created["slug"], "authorId": "someone-else"})

    assert res.status_code == status.HTTP_200_OK
    data = res.json()["data"]
    assert data["title"] == "Nowy tytuł"
    assert data["authorId"] == admin_user.id
    assert data["vehicleBrand"] is None
    assert data["images"] == []
    assert data["published"] is False
    assert data["featured"] is False


def test_list_projects_filters_and_paginates(client, auth_headers, make_category, make_project):
    category = make_category("polki-do-kabin")
    make_project("polki-scania-krakow", age=1, vehicleBrand="Scania", categoryId=category.id)
    make_project("man-tgm-wieliczka", age=2, vehicleBrand="MAN", published=False)
    make_project("man-tgs-gdansk", age=3, vehicleBrand="MAN")

    res = client.get(PROJECTS_URL, headers=auth_headers, params={"search": "man", "limit": 1})

    assert res.status_code == status.HTTP_200_OK
    body = res.json()
    assert body["meta"]["total"] == 2
    assert body["meta"]["hasNext"] is True
    assert [p["slug"] for p in body["data"]] == ["man-tgs-gdansk"]

    by_category = client.get(PROJECTS_URL, headers=auth_headers, params={"categoryId": category.id}).json()
    assert [p["slug"] for p in by_category["data"]] == ["polki-scania-krakow"]

    drafts = client.get(PROJECTS_URL, headers=auth_headers, params={"published": "false"}).json()
    assert [p["slug"] for p in drafts["data"]] == ["man-tgm-wieliczka"]


def test_delete_project(client, auth_headers, db, make_project):
    project = make_project("man-tgm-osp-wieliczka")

    res = client.delete(f"{PROJECTS_URL}/{project.id}", headers=auth_headers)

    assert res.status_code == status.HTTP_200_OK
    assert db.query(Project).count() == 0
    assert client.get(f"{PROJECTS_URL}/{project.id}", headers=auth_headers).status_code == 404
