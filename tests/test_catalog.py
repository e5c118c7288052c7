from fastapi import status

from app.services.catalog_links import sync_brand_categories, sync_category_brands
from app.services.catalog_service import catalog_service


# ─── Brand page ───────────────────────────────────────────────────────────────
def test_brand_view_returns_linked_categories_regardless_of_published(client, db, make_brand, make_category):
    man = make_brand("man", name="MAN")
    fire = make_category("wozy-strazackie", published=True)
    shelves = make_category("polki-do-kabin", published=False)
    make_category("oswietlenie-led")
    sync_brand_categories(db, man.id, [fire.id, shelves.id])
    db.commit()

    res = client.get("/api/brands/man")

    assert res.status_code == status.HTTP_200_OK
    slugs = {c["slug"] for c in res.json()["data"]["categories"]}
    assert slugs == {"wozy-strazackie", "polki-do-kabin"}


def test_brand_view_matches_projects_by_brand_label(client, make_brand, make_project):
    make_brand("man", name="MAN")
    make_project("osp-wieliczka", age=1, vehicleBrand="MAN")
    make_project("psp-krakow", age=2, vehicleBrand="MAN TGS")
    make_project("gopr", age=3, vehicleBrand="Toyota")
    make_project("human", age=4, vehicleBrand="Human Trucks")
    make_project("draft", age=5, vehicleBrand="MAN", published=False)
    make_project("no-label", age=6, vehicleBrand=None)

    res = client.get("/api/brands/man")

    projects = res.json()["data"]["projects"]
    assert [p["slug"] for p in projects] == ["psp-krakow", "osp-wieliczka"]


def test_brand_view_caps_projects_at_six_newest_first(client, make_brand, make_project):
    make_brand("scania", name="Scania")
    for i in range(8):
        make_project(f"scania-{i}", age=i, vehicleBrand="Scania P280")

    projects = client.get("/api/brands/scania").json()["data"]["projects"]

    assert [p["slug"] for p in projects] == [f"scania-{i}" for i in (7, 6, 5, 4, 3, 2)]


def test_brand_view_for_unknown_slug_is_not_found(client):
    res = client.get("/api/brands/nope")

    assert res.status_code == status.HTTP_404_NOT_FOUND
    assert res.json()["error"]["code"] == "NOT_FOUND"


def test_brand_view_with_nothing_linked_returns_empty_lists(client, make_brand):
    make_brand("daf", name="DAF")

    data = client.get("/api/brands/daf").json()["data"]

    assert data["categories"] == []
    assert data["projects"] == []


def test_brand_name_with_like_wildcards_is_matched_literally(db, make_brand, make_project):
    make_brand("weird", name="A_B%")
    make_project("literal", age=1, vehicleBrand="A_B% Special")
    make_project("wildcard", age=2, vehicleBrand="AxBy Special")

    data = catalog_service.get_brand_view(db, "weird")

    assert [p["slug"] for p in data["projects"]] == ["literal"]


# ─── Category page ────────────────────────────────────────────────────────────
def test_category_view_uses_category_foreign_key(client, db, make_brand, make_category, make_project):
    category = make_category("wozy-strazackie")
    other = make_category("polki-do-kabin")
    man = make_brand("man", name="MAN")
    sync_category_brands(db, category.id, [man.id])
    db.commit()
    make_project("in-category", age=1, categoryId=category.id, vehicleBrand="Scania")
    make_project("other-category", age=2, categoryId=other.id)
    make_project("draft", age=3, categoryId=category.id, published=False)

    data = client.get("/api/categories/wozy-strazackie").json()["data"]

    assert [b["slug"] for b in data["vehicleBrands"]] == ["man"]
    assert [p["slug"] for p in data["projects"]] == ["in-category"]


def test_category_view_caps_projects_at_six(client, make_category, make_project):
    category = make_category("wozy-strazackie")
    for i in range(7):
        make_project(f"p-{i}", age=i, categoryId=category.id)

    projects = client.get("/api/categories/wozy-strazackie").json()["data"]["projects"]

    assert len(projects) == 6
    assert projects[0]["slug"] == "p-6"


def test_empty_category_view_returns_empty_lists(client, make_category):
    make_category("skrzynie-dachowe")

    data = client.get("/api/categories/skrzynie-dachowe").json()["data"]

    assert data["vehicleBrands"] == []
    assert data["projects"] == []


def test_category_view_for_unknown_slug_is_not_found(client):
    assert client.get("/api/categories/nope").status_code == status.HTTP_404_NOT_FOUND


# ─── Listings ─────────────────────────────────────────────────────────────────
def test_public_brand_list_filters_type_and_hides_unpublished(client, make_brand):
    make_brand("man", name="MAN", type="truck", sortOrder=1)
    make_brand("toyota-hilux", name="Toyota Hilux", type="pickup", sortOrder=10)
    make_brand("hidden", name="Hidden", type="truck", published=False)

    everything = client.get("/api/brands").json()["data"]
    pickups = client.get("/api/brands", params={"type": "pickup"}).json()["data"]

    assert [b["slug"] for b in everything] == ["man", "toyota-hilux"]
    assert [b["slug"] for b in pickups] == ["toyota-hilux"]


def test_public_category_list_counts_published_projects(client, make_category, make_project):
    fire = make_category("wozy-strazackie", sortOrder=0)
    make_category("polki-do-kabin", sortOrder=1)
    make_category("hidden", published=False)
    make_project("a", categoryId=fire.id)
    make_project("b", categoryId=fire.id)
    make_project("c", categoryId=fire.id, published=False)

    data = client.get("/api/categories").json()["data"]

    assert [(c["slug"], c["projectCount"]) for c in data] == [("wozy-strazackie", 2), ("polki-do-kabin", 0)]


def test_public_project_list_filters_by_category_slug(client, make_category, make_project):
    fire = make_category("wozy-strazackie")
    make_project("in-fire", age=1, categoryId=fire.id)
    make_project("elsewhere", age=2)

    all_projects = client.get("/api/projects").json()["data"]
    fire_projects = client.get("/api/projects", params={"category": "wozy-strazackie"}).json()["data"]

    assert [p["slug"] for p in all_projects] == ["elsewhere", "in-fire"]
    assert [p["slug"] for p in fire_projects] == ["in-fire"]


def test_project_page_lists_related_projects(client, make_category, make_project):
    fire = make_category("wozy-strazackie")
    for i in range(5):
        make_project(f"fire-{i}", age=i, categoryId=fire.id)

    data = client.get("/api/projects/fire-0").json()["data"]

    assert data["category"]["slug"] == "wozy-strazackie"
    assert [p["slug"] for p in data["related"]] == ["fire-4", "fire-3", "fire-2"]


def test_unpublished_project_page_is_not_found(client, make_project):
    make_project("draft", published=False)
    assert client.get("/api/projects/draft").status_code == status.HTTP_404_NOT_FOUND


# ─── Landing pages ────────────────────────────────────────────────────────────
def test_home_shows_featured_published_projects(client, make_brand, make_category, make_project):
    make_brand("man", name="MAN")
    make_category("wozy-strazackie")
    make_project("featured", age=1, featured=True)
    make_project("plain", age=2)
    make_project("featured-draft", age=3, featured=True, published=False)

    data = client.get("/api/home").json()["data"]

    assert [p["slug"] for p in data["featuredProjects"]] == ["featured"]
    assert [c["slug"] for c in data["categories"]] == ["wozy-strazackie"]
    assert [b["slug"] for b in data["vehicleBrands"]] == ["man"]


def test_offer_overview_splits_brands_by_type(client, make_brand, make_category, make_project):
    make_brand("man", name="MAN", type="truck")
    make_brand("ford-ranger", name="Ford Ranger", type="pickup")
    make_category("zabudowy-pickup")
    make_project("one")
    make_project("two", published=False)

    data = client.get("/api/offer").json()["data"]

    assert [b["slug"] for b in data["trucks"]] == ["man"]
    assert [b["slug"] for b in data["pickups"]] == ["ford-ranger"]
    assert [c["slug"] for c in data["categories"]] == ["zabudowy-pickup"]
    assert data["projectCount"] == 1
