REQUIRED_TEXT = ("name", "sku", "location", "category")
NON_NEGATIVE = {
    "quantity": "Quantity must be positive",
    "min_quantity": "Minimum quantity must be positive",
    "unit_price": "Unit price must be positive",
}


def field_errors(fields: dict) -> dict:
    """Per-field messages for the inventory fields present in `fields`."""
    errors = {}
    for field in REQUIRED_TEXT:
        if field in fields and not (fields[field] or "").strip():
            errors[field] = f"{field} is required"
    for field, message in NON_NEGATIVE.items():
        if field in fields and (fields[field] is None or fields[field] < 0):
            errors[field] = message
    return errors
