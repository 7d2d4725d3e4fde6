VALID_PRODUCT = {
    "title": "Valid Product",
    "price": 29.99,
    "description": "A valid test product",
    "category": "electronics",
    "image": "https://example.com/test-image.jpg",
}

INVALID_PRODUCT = {
    "title": "",
    "price": -1,
    "description": "",
    "category": "invalid-category",
    "image": "",
}

UPDATED_PRODUCT = {
    "title": "Updated Product",
    "price": 49.99,
    "description": "Updated product description",
}

VALID_PRODUCT_ID = 1
INVALID_PRODUCT_ID = 9999

# ms, get-all-products budget
PERFORMANCE_THRESHOLD_MS = 3000
