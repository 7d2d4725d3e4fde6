EXPECTED_PRODUCTS = [
    "Sauce Labs Backpack",
    "Sauce Labs Bike Light",
    "Sauce Labs Bolt T-Shirt",
    "Sauce Labs Fleece Jacket",
    "Sauce Labs Onesie",
    "Test.allTheThings() T-Shirt (Red)",
]

PARTIAL_EXPECTED_PRODUCTS = ["Sauce Labs Backpack", "Sauce Labs Bike Light"]

CATALOG_SIZE = len(EXPECTED_PRODUCTS)
