from workflows.purchase_workflow import ShippingInfo

SHIPPING_INFO = ShippingInfo(first_name="John", last_name="Doe", zip_code="12345")

# blank required field -> error shown on checkout-step-one
BLANK_FIELD_CASES = {
    "blank_first_name": (ShippingInfo("", "Doe", "12345"), "First Name is required"),
    "blank_last_name": (ShippingInfo("John", "", "12345"), "Last Name is required"),
    "blank_zip_code": (ShippingInfo("John", "Doe", ""), "Postal Code is required"),
    "all_blank": (ShippingInfo("", "", ""), "First Name is required"),
}
