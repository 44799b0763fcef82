def pagination_to_dict(pagination) -> dict:
    """Pagination block shared by every list endpoint"""
    return {
        "currentPage": pagination.page,
        "totalPages": pagination.pages,
        "totalItems": pagination.total,
        "itemsPerPage": pagination.per_page,
    }


def product_response(product, message, warnings=None) -> dict:
    body = {"success": True, "message": message, "data": product.to_dict()}
    if warnings:
        body["warnings"] = warnings
    return body
