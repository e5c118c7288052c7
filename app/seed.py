"""
Seed the catalog.

Creates:
1. Admin user (SEED_ADMIN_EMAIL / SEED_ADMIN_PASSWORD)
2. Vehicle brands and product categories
3. Category <-> brand links
4. Sample projects
5. Default site settings

Safe to re-run: every row is upserted by slug, key or email.

Usage:
    python -m app.seed
"""
import logging

from sqlalchemy.orm import Session

from app.config import settings
from app.database import Base, SessionLocal, engine
from app.models.category import Category
from app.models.project import Project
from app.models.user import User
from app.models.vehicle_brand import VehicleBrand
from app.services.auth_service import auth_service
from app.services.catalog_links import sync_category_brands
from app.services.setting_service import setting_service
from app.utils.json_fields import dump_json_list

import app.models  # noqa: F401

logger = logging.getLogger(__name__)


def _models(*pairs: tuple[str, str]) -> list[dict]:
    return [{"name": name, "years": years} for name, years in pairs]


VEHICLE_BRANDS = [
    # ─── Trucks ───────────────────────────────────────────────────────────────
    {
        "name": "MAN", "slug": "man", "fullName": "MAN Truck & Bus", "type": "truck", "sortOrder": 1,
        "description": "Zabudowy do pojazdów MAN TGM, TGL, TGS i TGX. Kompleksowe wyposażenie kabin dla straży pożarnej.",
        "models": _models(("TGM", "2007-2024"), ("TGL", "2005-2024"), ("TGS", "2007-2024"), ("TGX", "2007-2024")),
        "metaTitle": "Zabudowy MAN | TGM, TGL, TGS - Pojazdy strażackie",
    },
    {
        "name": "Scania", "slug": "scania", "fullName": "Scania AB", "type": "truck", "sortOrder": 2,
        "description": "Wyposażenie kabin Scania P, G, R i S-Series. Szwedzka jakość dla polskich służb ratunkowych.",
        "models": _models(("P-Series", "2004-2024"), ("G-Series", "2007-2024"),
                          ("R-Series", "2004-2024"), ("S-Series", "2016-2024")),
    },
    {
        "name": "Volvo", "slug": "volvo", "fullName": "Volvo Trucks", "type": "truck", "sortOrder": 3,
        "description": "Półki i zabudowy do Volvo FH, FM, FMX, FE i FL. Skandynawskie standardy bezpieczeństwa.",
        "models": _models(("FH", "1993-2024"), ("FM", "1998-2024"), ("FMX", "2010-2024"),
                          ("FE", "2006-2024"), ("FL", "2006-2024")),
    },
    {
        "name": "Mercedes-Benz", "slug": "mercedes", "fullName": "Mercedes-Benz Trucks", "type": "truck", "sortOrder": 4,
        "description": "Zabudowy do Mercedes Atego, Actros, Arocs i Econic. Niemiecka precyzja dla profesjonalistów.",
        "models": _models(("Atego", "1998-2024"), ("Actros", "1996-2024"),
                          ("Arocs", "2013-2024"), ("Econic", "1998-2024")),
    },
    {
        "name": "Renault Trucks", "slug": "renault", "fullName": "Renault Trucks", "type": "truck", "sortOrder": 5,
        "description": "Wyposażenie do Renault D, C, K i T-Series. Funkcjonalne rozwiązania w rozsądnej cenie.",
        "models": _models(("D-Series", "2013-2024"), ("C-Series", "2013-2024"),
                          ("K-Series", "2013-2024"), ("T-Series", "2013-2024")),
    },
    {
        "name": "Iveco", "slug": "iveco", "fullName": "Iveco S.p.A.", "type": "truck", "sortOrder": 6,
        "description": "Zabudowy do Iveco Daily, Eurocargo, Stralis i S-Way. Rozwiązania od lekkich po ciężkie pojazdy.",
        "models": _models(("Daily", "1999-2024"), ("Eurocargo", "1991-2024"),
                          ("Stralis", "2002-2024"), ("S-Way", "2019-2024")),
    },
    {
        "name": "DAF", "slug": "daf", "fullName": "DAF Trucks N.V.", "type": "truck", "sortOrder": 7,
        "description": "Wyposażenie do DAF LF, CF, XF i XG. Holenderska solidność w polskich pojazdach.",
        "models": _models(("LF", "2001-2024"), ("CF", "2001-2024"), ("XF", "1997-2024"), ("XG", "2021-2024")),
    },
    # ─── Pickups ──────────────────────────────────────────────────────────────
    {
        "name": "Toyota Hilux", "slug": "toyota-hilux", "fullName": "Toyota Hilux", "type": "pickup", "sortOrder": 10,
        "description": "Zabudowy skrzyni ładunkowej Toyota Hilux. Hardtopy, platformy i boksy dla służb ratunkowych.",
        "models": _models(("Hilux AN120", "2015-2020"), ("Hilux AN130", "2020-2024")),
    },
    {
        "name": "Ford Ranger", "slug": "ford-ranger", "fullName": "Ford Ranger", "type": "pickup", "sortOrder": 11,
        "description": "Zabudowy Ford Ranger T6, T7 i Raptor. Amerykańska moc z europejskim wykończeniem.",
        "models": _models(("Ranger T6", "2011-2019"), ("Ranger T7", "2019-2024"), ("Ranger Raptor", "2019-2024")),
    },
    {
        "name": "Nissan Navara", "slug": "nissan-navara", "fullName": "Nissan Navara NP300", "type": "pickup",
        "sortOrder": 12,
        "description": "Hardtopy i zabudowy Nissan Navara NP300. Japońska niezawodność w służbie ratunkowej.",
        "models": _models(("NP300", "2015-2024")),
    },
    {
        "name": "Mitsubishi L200", "slug": "mitsubishi-l200", "fullName": "Mitsubishi L200 Triton", "type": "pickup",
        "sortOrder": 13,
        "description": "Zabudowy Mitsubishi L200. Sprawdzony w najtrudniejszych warunkach terenowych.",
        "models": _models(("L200 KL", "2019-2024"), ("L200 KK", "2015-2019")),
    },
    {
        "name": "Volkswagen Amarok", "slug": "volkswagen-amarok", "fullName": "Volkswagen Amarok", "type": "pickup",
        "sortOrder": 14,
        "description": "Premium zabudowy Volkswagen Amarok. Niemiecka jakość dla wymagających jednostek.",
        "models": _models(("Amarok 2H", "2010-2023"), ("Amarok H1", "2023-2024")),
    },
    {
        "name": "Isuzu D-Max", "slug": "isuzu-dmax", "fullName": "Isuzu D-Max", "type": "pickup", "sortOrder": 15,
        "description": "Zabudowy Isuzu D-Max. Legendarna trwałość silników diesla w służbie ratunkowej.",
        "models": _models(("D-Max RG", "2019-2024"), ("D-Max RT", "2012-2019")),
    },
    {
        "name": "SsangYong Musso", "slug": "ssangyong-musso", "fullName": "SsangYong Musso", "type": "pickup",
        "sortOrder": 16,
        "description": "Zabudowy SsangYong Musso. Ekonomiczne rozwiązanie dla jednostek z ograniczonym budżetem.",
        "models": _models(("Musso", "2018-2024"), ("Musso Grand", "2019-2024")),
    },
]

TRUCKS  = ["man", "scania", "volvo", "mercedes", "renault", "iveco", "daf"]
PICKUPS = ["toyota-hilux", "ford-ranger", "nissan-navara", "mitsubishi-l200",
           "volkswagen-amarok", "isuzu-dmax", "ssangyong-musso"]

CATEGORIES = [
    {
        "name": "Zabudowy wozów strażackich", "slug": "wozy-strazackie", "icon": "Truck", "color": "#dc2626",
        "sortOrder": 0,
        "description": "Kompletne zabudowy wozów strażackich. Skrytki, półki wysuwane, systemy mocowań i oświetlenie.",
        "features": ["Skrytki aluminiowe anodowane", "Półki wysuwne pod sprzęt ratowniczy",
                     "Systemy mocowań zgodne z DIN EN 1846", "Oświetlenie LED robocze i sceniczne",
                     "Instalacje elektryczne 12V/24V"],
        "benefits": ["Kompleksowa realizacja od projektu po montaż", "Certyfikaty CNBOP-PIB",
                     "Gwarancja 36 miesięcy", "Wsparcie w przetargach publicznych"],
        "specifications": [{"label": "Materiał", "value": "Aluminium 3-5mm anodowane"},
                           {"label": "Certyfikaty", "value": "CNBOP-PIB, KDR"},
                           {"label": "Realizacja", "value": "4-12 tygodni"},
                           {"label": "Gwarancja", "value": "36 miesięcy"}],
        "metaTitle": "Zabudowy wozów strażackich | PSP i OSP",
        "vehicleSlugs": TRUCKS,
    },
    {
        "name": "Półki do kabin", "slug": "polki-do-kabin", "icon": "LayoutGrid", "color": "#3b82f6",
        "sortOrder": 1,
        "description": "Dedykowane półki górne, boczne i pod siedzenia. Idealne dopasowanie do każdej marki pojazdu.",
        "features": ["Półki górne na całą szerokość kabiny", "Półki boczne z przegródkami",
                     "Półki pod siedzenia pasażera", "Organizery na latarki i rękawice",
                     "Opcjonalne oświetlenie LED"],
        "vehicleSlugs": TRUCKS,
    },
    {
        "name": "Podesty i stopnie", "slug": "podesty-i-stopnie", "icon": "Footprints", "color": "#22c55e",
        "sortOrder": 2,
        "description": "Aluminiowe podesty robocze i stopnie wejściowe. Bezpieczna praca na wysokości.",
        "features": ["Podesty robocze składane i stałe", "Stopnie wejściowe antypoślizgowe",
                     "Drabinki boczne i tylne", "Platformy na dach"],
        "vehicleSlugs": ["man", "scania", "volvo", "mercedes", "iveco", "daf"],
    },
    {
        "name": "Boksy na narzędzia", "slug": "boksy-na-narzedzia", "icon": "Box", "color": "#f97316",
        "sortOrder": 3,
        "description": "Aluminiowe boksy narzędziowe pod zabudowę i na skrzynię. Organizacja sprzętu ratowniczego.",
        "features": ["Boksy podskrzyniowe na ramę", "Boksy do skrzyni pickupa",
                     "Systemy szuflad wysuwanych", "Organizery na drobny sprzęt"],
        "vehicleSlugs": PICKUPS[:6],
    },
    {
        "name": "Mocowania sprzętu", "slug": "mocowania-sprzetu", "icon": "Shield", "color": "#8b5cf6",
        "sortOrder": 4,
        "description": "Systemy mocowań na gaśnice, sprzęt hydrauliczny i ratowniczy. Zgodność z CNBOP.",
        "features": ["Mocowania na gaśnice 2-12 kg", "Uchwyty na sprzęt hydrauliczny",
                     "Mocowania noszy i desek", "Systemy na drobny sprzęt"],
        "vehicleSlugs": ["man", "scania", "volvo", "mercedes", "iveco"],
    },
    {
        "name": "Zabudowy pickupów", "slug": "zabudowy-pickup", "icon": "Truck", "color": "#eab308",
        "sortOrder": 5,
        "description": "Hardtopy, canopy i zabudowy serwisowe do pickupów. Hilux, Ranger, Navara, L200 i inne.",
        "features": ["Hardtopy aluminiowe i kompozytowe", "Zabudowy serwisowe z boksami",
                     "Platformy dachowe", "Rolety aluminiowe"],
        "vehicleSlugs": PICKUPS,
    },
    {
        "name": "Skrzynie dachowe", "slug": "skrzynie-dachowe", "icon": "Package", "color": "#06b6d4",
        "sortOrder": 6,
        "description": "Aluminiowe skrzynie i boksy dachowe. Dodatkowa przestrzeń na sprzęt lekki.",
        "features": ["Skrzynie różnych rozmiarów", "Montaż na relingach lub belkach",
                     "Uszczelnienie wodoszczelne", "Zamknięcie na klucz"],
        "vehicleSlugs": ["toyota-hilux", "ford-ranger", "mitsubishi-l200", "volkswagen-amarok"],
    },
    {
        "name": "Oświetlenie LED", "slug": "oswietlenie-led", "icon": "Lightbulb", "color": "#f59e0b",
        "sortOrder": 7,
        "description": "Lampy robocze LED, listwy sceniczne i oświetlenie skrytek. Wysoka jasność, niskie zużycie.",
        "features": ["Lampy robocze LED", "Listwy sceniczne", "Oświetlenie skrytek", "Lampy ostrzegawcze"],
        "vehicleSlugs": ["man", "scania", "volvo", "mercedes", "iveco", "toyota-hilux", "ford-ranger"],
    },
]

PROJECTS = [
    {
        "title": "MAN TGM 18.290 dla OSP Wieliczka", "slug": "man-tgm-osp-wieliczka",
        "description": "Kompleksowa zabudowa średniego wozu ratowniczo-gaśniczego na podwoziu MAN TGM.",
        "content": "Realizacja obejmowała kompletne wyposażenie kabiny załogi i przedziału sprzętowego.",
        "vehicleBrand": "MAN", "vehicleModel": "TGM 18.290", "year": "2024",
        "category": "wozy-strazackie",
    },
    {
        "title": "Półki do Scania P280 PSP Kraków", "slug": "polki-scania-psp-krakow",
        "description": "Zestaw dedykowanych półek do kabiny Scania P-Series dla JRG nr 5 w Krakowie.",
        "content": "Wykonaliśmy komplet półek górnych i bocznych z oświetleniem LED.",
        "vehicleBrand": "Scania", "vehicleModel": "P280", "year": "2024",
        "category": "polki-do-kabin",
    },
    {
        "title": "Zabudowa Toyota Hilux dla GOPR", "slug": "toyota-hilux-gopr",
        "description": "Hardtop i wyposażenie dodatkowe Toyota Hilux dla Grupy Beskidzkiej GOPR.",
        "content": "Zabudowa obejmowała hardtop z dostępem bocznym, platformę dachową i wyciągarkę.",
        "vehicleBrand": "Toyota", "vehicleModel": "Hilux", "year": "2023",
        "category": "zabudowy-pickup",
    },
]


# ─── Brands ───────────────────────────────────────────────────────────────────
def seed_vehicle_brands(db: Session) -> dict[str, VehicleBrand]:
    brands: dict[str, VehicleBrand] = {}
    for data in VEHICLE_BRANDS:
        brand = db.query(VehicleBrand).filter(VehicleBrand.slug == data["slug"]).first()
        if not brand:
            brand = VehicleBrand(slug=data["slug"])
            db.add(brand)
        brand.name        = data["name"]
        brand.fullName    = data["fullName"]
        brand.type        = data["type"]
        brand.description = data["description"]
        brand.models      = dump_json_list(data["models"])
        brand.gallery     = dump_json_list([])
        brand.metaTitle   = data.get("metaTitle")
        brand.sortOrder   = data["sortOrder"]
        brand.published   = True
        brands[brand.slug] = brand
    db.flush()
    logger.info(f"Vehicle brands: {len(brands)}")
    return brands


# ─── Categories + links ───────────────────────────────────────────────────────
def seed_categories(db: Session, brands: dict[str, VehicleBrand]) -> dict[str, Category]:
    categories: dict[str, Category] = {}
    for data in CATEGORIES:
        category = db.query(Category).filter(Category.slug == data["slug"]).first()
        if not category:
            category = Category(slug=data["slug"])
            db.add(category)
        category.name           = data["name"]
        category.icon           = data["icon"]
        category.color          = data["color"]
        category.description    = data["description"]
        category.features       = dump_json_list(data["features"])
        category.benefits       = dump_json_list(data.get("benefits", []))
        category.specifications = dump_json_list(data.get("specifications", []))
        category.gallery        = dump_json_list([])
        category.metaTitle      = data.get("metaTitle")
        category.sortOrder      = data["sortOrder"]
        category.published      = True
        db.flush()

        brand_ids = [brands[s].id for s in data["vehicleSlugs"] if s in brands]
        sync_category_brands(db, category.id, brand_ids)
        categories[category.slug] = category
    logger.info(f"Categories: {len(categories)}")
    return categories


# ─── Projects ─────────────────────────────────────────────────────────────────
def seed_projects(db: Session, categories: dict[str, Category], author: User) -> None:
    for data in PROJECTS:
        category = categories.get(data["category"])
        if not category:
            continue
        project = db.query(Project).filter(Project.slug == data["slug"]).first()
        if not project:
            project = Project(slug=data["slug"], authorId=author.id)
            db.add(project)
        project.title        = data["title"]
        project.description  = data["description"]
        project.content      = data["content"]
        project.images       = dump_json_list([])
        project.vehicleBrand = data["vehicleBrand"]
        project.vehicleModel = data["vehicleModel"]
        project.year         = data["year"]
        project.categoryId   = category.id
        project.featured     = True
        project.published    = True
    db.flush()
    logger.info(f"Projects: {len(PROJECTS)}")


def run(db: Session) -> None:
    admin = auth_service.ensure_admin(db, settings.SEED_ADMIN_EMAIL, settings.SEED_ADMIN_PASSWORD)
    logger.info(f"Admin user: {admin.email}")

    brands     = seed_vehicle_brands(db)
    categories = seed_categories(db, brands)
    seed_projects(db, categories, admin)
    db.commit()

    setting_service.seed_defaults(db)
    logger.info("Default settings ensured")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        run(db)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
    logger.info("Seeding complete")


if __name__ == "__main__":
    main()
