import os

ENV = os.getenv("TEST_ENV", "prod")

URLS = {
    "prod": {
        "login": "https://www.saucedemo.com/",
        "inventory": "https://www.saucedemo.com/inventory.html",
        "cart": "https://www.saucedemo.com/cart.html",
        "checkout_step_one": "https://www.saucedemo.com/checkout-step-one.html",
        "checkout_step_two": "https://www.saucedemo.com/checkout-step-two.html",
        "checkout_complete": "https://www.saucedemo.com/checkout-complete.html",
        "api": "https://fakestoreapi.com/",
    },
}

# url path fragments, used where only the page matters and not the host
PATHS = {
    "inventory": "/inventory.html",
    "cart": "/cart.html",
    "checkout_step_one": "/checkout-step-one.html",
    "checkout_step_two": "/checkout-step-two.html",
    "checkout_complete": "/checkout-complete.html",
}
