"""Login scenarios for saucedemo: the known-good user and the rejected ones with their error banners."""
from utils.credentials import Credential

STANDARD_USER = Credential("standard_user", "secret_sauce")

# case -> (credential, fragment of the error banner)
INVALID_LOGIN_CASES = {
    "unknown_username": (Credential("unknown_user", "secret_sauce"),
                         "Username and password do not match any user in this service"),
    "wrong_password": (Credential("standard_user", "not_the_password"),
                       "Username and password do not match any user in this service"),
    "blank_username_and_password": (Credential("", ""), "Username is required"),
    "blank_password": (Credential("standard_user", ""), "Password is required"),
    "locked_out_user": (Credential("locked_out_user", "secret_sauce"), "Sorry, this user has been locked out."),
}
