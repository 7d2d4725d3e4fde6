class ProductAssert:

    @staticmethod
    def product_count(actual_count: int, expect_count: int):
        assert actual_count == expect_count, f"Expected {expect_count} products, found {actual_count}"

    @staticmethod
    def column_not_empty(names: list):
        assert names, "Product list is empty"
        for name in names:
            assert name.strip(), "Found a product with an empty name"

    @staticmethod
    def contains_all(names: list, expected: list):
        lowered = {name.casefold() for name in names}
        missing = [e for e in expected if e.casefold() not in lowered]
        assert not missing, f"Products missing from the catalog: {missing}"
