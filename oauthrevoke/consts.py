version = "0.1.0"
homepage = "https://github.com/oauthrevoke/oauthrevoke"

default_json_headers = [
    ("Content-Type", "application/json"),
    ("Cache-Control", "no-store"),
    ("Pragma", "no-cache"),
]
