"""Response shapes shared by the admin and public catalog endpoints."""
from app.models.vehicle_brand import VehicleBrand
from app.models.category import Category
from app.models.project import Project
from app.models.contact_message import ContactMessage
from app.utils.json_fields import load_json_list
from app.utils.timeutil import iso


def brand_summary(b: VehicleBrand) -> dict:
    return {
        "id":        b.id,
        "name":      b.name,
        "slug":      b.slug,
        "type":      b.type,
        "image":     b.image,
        "sortOrder": b.sortOrder,
        "published": b.published,
    }


def category_summary(c: Category) -> dict:
    return {
        "id":        c.id,
        "name":      c.name,
        "slug":      c.slug,
        "icon":      c.icon,
        "color":     c.color,
        "image":     c.image,
        "sortOrder": c.sortOrder,
        "published": c.published,
    }


def serialize_brand(b: VehicleBrand, categories: list[Category] | None = None) -> dict:
    data = {
        "id":                 b.id,
        "name":               b.name,
        "slug":               b.slug,
        "fullName":           b.fullName,
        "description":        b.description,
        "longDescription":    b.longDescription,
        "contentDescription": b.contentDescription,
        "type":               b.type,
        "models":             load_json_list(b.models),
        "image":              b.image,
        "heroImage":          b.heroImage,
        "gallery":            load_json_list(b.gallery),
        "metaTitle":          b.metaTitle,
        "metaDescription":    b.metaDescription,
        "sortOrder":          b.sortOrder,
        "published":          b.published,
        "createdAt":          iso(b.createdAt),
        "updatedAt":          iso(b.updatedAt),
    }
    if categories is not None:
        data["categories"] = [category_summary(c) for c in categories]
    return data


def serialize_category(c: Category, brands: list[VehicleBrand] | None = None) -> dict:
    data = {
        "id":                 c.id,
        "name":               c.name,
        "slug":               c.slug,
        "description":        c.description,
        "longDescription":    c.longDescription,
        "contentDescription": c.contentDescription,
        "icon":               c.icon,
        "color":              c.color,
        "features":           load_json_list(c.features),
        "benefits":           load_json_list(c.benefits),
        "specifications":     load_json_list(c.specifications),
        "image":              c.image,
        "heroImage":          c.heroImage,
        "gallery":            load_json_list(c.gallery),
        "metaTitle":          c.metaTitle,
        "metaDescription":    c.metaDescription,
        "sortOrder":          c.sortOrder,
        "published":          c.published,
        "createdAt":          iso(c.createdAt),
        "updatedAt":          iso(c.updatedAt),
    }
    if brands is not None:
        data["vehicleBrands"] = [brand_summary(b) for b in brands]
    return data


def serialize_project(p: Project) -> dict:
    return {
        "id":              p.id,
        "title":           p.title,
        "slug":            p.slug,
        "description":     p.description,
        "content":         p.content,
        "images":          load_json_list(p.images),
        "thumbnail":       p.thumbnail,
        "categoryId":      p.categoryId,
        "category":        {"id": p.category.id, "name": p.category.name, "slug": p.category.slug}
                           if p.category else None,
        "vehicleBrand":    p.vehicleBrand,
        "vehicleModel":    p.vehicleModel,
        "year":            p.year,
        "featured":        p.featured,
        "published":       p.published,
        "metaTitle":       p.metaTitle,
        "metaDescription": p.metaDescription,
        "authorId":        p.authorId,
        "createdAt":       iso(p.createdAt),
        "updatedAt":       iso(p.updatedAt),
    }


def serialize_message(m: ContactMessage) -> dict:
    return {
        "id":        m.id,
        "name":      m.name,
        "email":     m.email,
        "phone":     m.phone,
        "subject":   m.subject,
        "message":   m.message,
        "read":      m.read,
        "createdAt": iso(m.createdAt),
    }
