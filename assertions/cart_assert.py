class CartAssert:

    @staticmethod
    def cart_badge_count(actual: int, expect: int):
        """Number shown on the cart icon"""
        assert actual == expect, f"Cart badge shows the wrong number of products: {actual}!={expect}"

    @staticmethod
    def item_count(actual: int, expect: int):
        assert actual == expect, f"Cart holds {actual} line items, expected {expect}"

    @staticmethod
    def all_products_present(verified: bool, expected_products: list):
        assert verified, f"Not all expected products are in the cart. Expected: {', '.join(expected_products)}"

    @staticmethod
    def same_products(catalog_names: list, cart_names: list):
        """Every product added from the catalog shows up in the cart, and nothing else"""
        catalog = sorted(name.casefold() for name in catalog_names)
        cart = sorted(name.casefold() for name in cart_names)
        assert catalog == cart, f"Catalog products {catalog_names} != cart products {cart_names}"
