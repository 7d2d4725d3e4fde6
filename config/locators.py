LOGIN_LOCATORS = {
    "username_input": "#user-name",  # username field
    "password_input": "#password",  # password field
    "login_button": "#login-button",  # login button
    "error_msg": ".error-message-container.error",  # error container, only carries 'error' when shown
    "inventory_container": "#inventory_container",  # rendered after a successful login
    "menu_button": "#react-burger-menu-btn",  # burger menu
    "logout_link": "#logout_sidebar_link",  # logout entry in the side menu
}

PRODUCT_LOCATORS = {
    "add_to_cart_button": ".btn_inventory",  # add/remove toggle, same class for both states
    "item_product_name": ".inventory_item_name",  # product name
    "shopping_cart_icon": "#shopping_cart_container",  # cart icon
    "shopping_cart_badge": ".shopping_cart_badge",  # item count on the cart icon
}

CART_LOCATORS = {
    "cart_item_name": ".inventory_item_name",  # cart line item name
    "checkout_button": "#checkout",  # checkout button
}

CHECKOUT_LOCATORS = {
    # checkout-step-one.html
    "firstName_input": "#first-name",
    "lastName_input": "#last-name",
    "postalCode_input": "#postal-code",
    "continue_button": "#continue",
    "input_error_msg": ".error-message-container.error",  # e.g. Error: First Name is required

    # checkout-step-two.html
    "total_label": ".summary_total_label",  # Total: $140.34
    "finish_button": "#finish",
}

ADD_TO_CART_TEXT = "add to cart"
