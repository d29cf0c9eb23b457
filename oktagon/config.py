import os
import yaml

CONFIG_FILE_PATH = os.environ.get(
    "OKTAGON_CONFIG_FILE", os.path.join(os.getcwd(), "env.yaml")
)

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    HTTP_TIMEOUT = float(data.get("HTTP_TIMEOUT", 30))
    TOKEN_LIFETIME_SECONDS = int(data.get("TOKEN_LIFETIME_SECONDS", 300))
    PAGE_LIMIT = int(data.get("PAGE_LIMIT", 200))
    LOG_LIMIT = int(data.get("LOG_LIMIT", 10))
    USER_AGENT = data.get("USER_AGENT", "oktagon")
